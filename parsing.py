from arithmetic import Q

ALLOWED_CHARS = set("0123456789./-")

class ParseError(ValueError):
    pass

def check_chars(s: str) -> str:
    s = s.strip()
    if not s:
        raise ParseError("Empty number.")
    if any(c not in ALLOWED_CHARS for c in s):
        bad = sorted(set(c for c in s if c not in ALLOWED_CHARS))
        raise ParseError(f"Illegal character(s) found: {bad}. Allowed are only 0-9 . / -")
    return s

def parse_digits(s: str, i: int):
    n = len(s)
    start = i
    if i >= n or not s[i].isdigit():
        raise ParseError(f"Expected digit at position {i}")
    while i < n and s[i].isdigit():
        i += 1
    return int(s[start:i]), s[start:i], i

def parse_rational(s: str) -> Q:
    """
    Strict rational literal:
        ['-'] digits [ '.' digits | '/' digits ]
    e.g. "2", "-0.125", "22/7". The denominator of a fraction must be non-zero.
    """
    s = check_chars(s)
    n = len(s)
    i = 0
    neg = False
    if s[i] == '-':
        neg = True
        i += 1
        if i >= n or not s[i].isdigit():
            raise ParseError(f"'-' must be followed by digits at position {i}")
    whole, _, i = parse_digits(s, i)
    value = Q(whole)
    if i < n and s[i] == '.':
        i += 1
        if i >= n or not s[i].isdigit():
            raise ParseError(f"Expected digit(s) after '.' at position {i}")
        frac, frac_str, i = parse_digits(s, i)
        value += Q(frac, 10 ** len(frac_str))
    elif i < n and s[i] == '/':
        i += 1
        den, _, i = parse_digits(s, i)
        if den == 0:
            raise ParseError(f"Zero denominator in {s!r}")
        value = Q(whole, den)
    if i != n:
        raise ParseError(f"Unexpected trailing content at position {i}: {s[i:]}")
    return -value if neg else value

def parse_accuracy(s: str) -> int:
    try:
        return int(s)
    except ValueError:
        raise ParseError(f"Accuracy must be an integer, got {s!r}")
