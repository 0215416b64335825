from __future__ import annotations
from typing import Callable, Dict
from dataclasses import dataclass

import sys, json, time

from arithmetic import Q, qdigits, bit_size
from parsing import parse_rational, parse_accuracy, ParseError
from transcendental import (sqrt, exp, ln, InvalidDomain, InvalidArgument,
                            DEFAULT_SQRT_ACCURACY, DEFAULT_EXP_TERMS, DEFAULT_LN_ACCURACY)

DISPLAY_DIGITS = 40  # decimal places printed for a result

OPERATIONS: Dict[str, Callable[[Q, int], Q]] = {
    "sqrt": sqrt,
    "exp": exp,
    "ln": ln,
}

DEFAULT_ACCURACY = {
    "sqrt": DEFAULT_SQRT_ACCURACY,
    "exp": DEFAULT_EXP_TERMS,
    "ln": DEFAULT_LN_ACCURACY,
}

@dataclass(frozen=True)
class CalcResult:
    op: str
    x: Q
    accuracy: int
    value: Q
    num_bits: int      # bit length of |numerator|
    den_bits: int      # bit length of denominator
    time_secs: float

def run(op: str, x: Q, accuracy: int | None = None) -> CalcResult:
    if op not in OPERATIONS:
        raise ValueError(f"Unknown operation '{op}'. Supported operations {list(OPERATIONS)}")
    if accuracy is None:
        accuracy = DEFAULT_ACCURACY[op]
    start = time.perf_counter()
    value = OPERATIONS[op](x, accuracy)
    elapsed = time.perf_counter() - start
    num_bits, den_bits = bit_size(value)
    return CalcResult(op=op, x=x, accuracy=accuracy, value=value,
                      num_bits=num_bits, den_bits=den_bits, time_secs=elapsed)

class QEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Q):
            return str(obj)  # exact "num/den"
        return super().default(obj)

def save_result(result: CalcResult, filename: str, places: int = DISPLAY_DIGITS):
    summary = {}
    summary["op"] = result.op
    summary["x"] = result.x
    summary["accuracy"] = result.accuracy
    summary["value"] = result.value
    summary["decimal"] = qdigits(result.value, places)
    summary["num_bits"] = result.num_bits
    summary["den_bits"] = result.den_bits
    summary["time_secs"] = result.time_secs

    with open(filename, "w") as f:
        f.write(json.dumps(summary, indent=2, cls=QEncoder))
        f.flush()

def load_result(filename: str) -> CalcResult:
    with open(filename, "r") as f:
        summary = json.load(f)
    return CalcResult(op=summary["op"], x=Q(summary["x"]), accuracy=summary["accuracy"],
                      value=Q(summary["value"]), num_bits=summary["num_bits"],
                      den_bits=summary["den_bits"], time_secs=summary["time_secs"])

def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    if not 3 <= len(argv) <= 5:
        print(f"Usage: {argv[0]} <sqrt|exp|ln> <x> [accuracy] [out.json]")
        return 1

    op = argv[1]
    if op not in OPERATIONS:
        print(f"Error: unknown operation '{op}'. Expected one of {', '.join(OPERATIONS)}.")
        return 1

    try:
        x = parse_rational(argv[2])
        accuracy = parse_accuracy(argv[3]) if len(argv) > 3 else None
    except ParseError as e:
        print(f"Error parsing arguments: {e}")
        return 1

    out_file = argv[4] if len(argv) > 4 else None

    print(f"Computing {op}({x}) ...")
    try:
        result = run(op, x, accuracy)
    except (InvalidDomain, InvalidArgument) as e:
        print(f"Error: {e}")
        return 1

    print(f"  accuracy: {result.accuracy}")
    print(f"  value:    {qdigits(result.value, DISPLAY_DIGITS)}")
    print(f"  size:     {result.num_bits}-bit numerator / {result.den_bits}-bit denominator")
    print(f"  time:     {result.time_secs * 1000:.3f} ms")

    if out_file is not None:
        save_result(result, out_file)
        print(f"Saved result to {out_file}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
