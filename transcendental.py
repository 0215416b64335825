"""Square root, exponential and natural logarithm over exact rationals.

sqrt and ln iterate until two successive iterates agree to within
1 / 10^accuracy; exp evaluates a fixed number of Taylor terms. All results
are exact rationals (Q); nothing is rounded along the way, so numerators and
denominators grow with the requested accuracy.
"""

import numbers

from arithmetic import Q, tolerance
from seeds import Seed, sqrt_seed, log_seed

DEFAULT_SQRT_ACCURACY = 30
DEFAULT_EXP_TERMS = 100
DEFAULT_LN_ACCURACY = 30


class InvalidDomain(ValueError):
    """Argument outside the real domain of the function."""


class InvalidArgument(ValueError):
    """Bad call parameter (not a numeric domain problem)."""

    def __init__(self, name: str, value, message: str):
        super().__init__(f"{name}={value!r}: {message}")
        self.name = name
        self.value = value


def check_accuracy(accuracy: int, name: str = "accuracy") -> None:
    if isinstance(accuracy, bool) or not isinstance(accuracy, numbers.Integral):
        raise InvalidArgument(name, accuracy, "must be an integer")
    if accuracy <= 0:
        raise InvalidArgument(name, accuracy, f"accuracy of {accuracy} is not allowed, must be above 0")


def sqrt(x: Q, accuracy: int = DEFAULT_SQRT_ACCURACY, seed: Seed = sqrt_seed) -> Q:
    """
    Babylonian (Newton) square root:
      g := seed(x)
      repeat
        prev := g
        g := (g + x/g) / 2
      until |prev - g| <= 1/10^accuracy
    Returns the last iterate g. No iteration cap; for x > 0 the iterates
    decrease monotonically towards sqrt(x) after the first step.

    Raises:
        InvalidDomain: x < 0
        InvalidArgument: accuracy <= 0
    """
    x = Q(x)
    if x < 0:
        raise InvalidDomain(f"cannot take the square root of a negative number: {x}")
    check_accuracy(accuracy)
    if x == 0:
        return Q(0)

    tol = tolerance(accuracy)
    g = seed(x)
    while True:
        prev = g
        g = (g + x / g) / 2
        if abs(prev - g) <= tol:
            return g


def exp(x: Q, accuracy: int = DEFAULT_EXP_TERMS) -> Q:
    """
    e^x as the Taylor partial sum 1 + x + x^2/2! + ... + x^(accuracy-1)/(accuracy-1)!
    in nested form:
      s := 1
      for i = accuracy-1 down to 1: s := 1 + x*s/i
    Here `accuracy` is a term count, not a digit count. Any finite x is
    allowed; accuracy <= 1 gives 1.
    """
    x = Q(x)
    s = Q(1)
    for i in range(accuracy - 1, 0, -1):
        s = 1 + x * s / i
    return s


def ln(x: Q, accuracy: int = DEFAULT_LN_ACCURACY, seed: Seed = log_seed,
       final_iterate: bool = False) -> Q:
    """
    Natural logarithm by Newton iteration on f(g) = x - e^g, written as
      new := old + 2 (x - e^old) / (x + e^old)
    with e^old = exp(old) at its default term count. Stops once
    |old - new| <= 1/10^accuracy.

    By default the iterate *before* the final step (old) is returned. Pass
    final_iterate=True to get new instead; the two differ by at most the
    tolerance.

    Raises:
        InvalidDomain: x <= 0
        InvalidArgument: accuracy <= 0
    """
    x = Q(x)
    check_accuracy(accuracy)
    if x <= 0:
        raise InvalidDomain(f"logarithm undefined for non-positive number: {x}")

    tol = tolerance(accuracy)
    old = seed(x)
    while True:
        e = exp(old)
        new = old + 2 * (x - e) / (x + e)
        if abs(old - new) <= tol:
            return new if final_iterate else old
        old = new
