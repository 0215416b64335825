from __future__ import annotations
from fractions import Fraction
import math

Q = Fraction  # rational type alias

def trunc_scalar(x: Q, places: int) -> Q:
    """
    Truncate a rational number to `places` decimal places (towards zero).
    """
    if places < 0:
        raise ValueError(f"trunc_scalar requires places >= 0. got places = {places}")
    scale = 10 ** places
    y = abs(x) * scale
    num = y.numerator // y.denominator
    return Q(-num if x < 0 else num, scale)

def qdigits(q: Q, places: int) -> str:
    """
    Decimal string of q truncated towards zero to exactly `places` digits
    after the point, e.g. qdigits(Q(2, 3), 4) == "0.6666".
    """
    t = trunc_scalar(q, places)
    sign = '-' if q < 0 and t != 0 else ''
    n = abs(t.numerator) * (10 ** places // t.denominator)
    int_part, frac = divmod(n, 10 ** places)
    if places == 0:
        return f"{sign}{int_part}"
    return f"{sign}{int_part}.{frac:0{places}d}"

def float_to_q(f: float) -> Q:
    """Exact rational value of a finite double (no decimal rounding)."""
    if not math.isfinite(f):
        raise ValueError(f"float_to_q: non-finite input {f}")
    return Q.from_float(float(f))

def q_to_float(q: Q) -> float:
    """
    Nearest double to q. Never raises: values beyond the double range
    come back as +/-inf.
    """
    try:
        return float(q)
    except OverflowError:
        return math.inf if q > 0 else -math.inf

def tolerance(accuracy: int) -> Q:
    """1 / 10^accuracy as an exact rational."""
    return Q(1, 10 ** int(accuracy))

def bit_size(q: Q) -> tuple[int, int]:
    """(numerator bits, denominator bits); rationals grow fast under iteration."""
    return q.numerator.bit_length(), q.denominator.bit_length()
