"""Initial guesses for the rational Newton iterations.

A seed strategy is any callable mapping an exact rational x to a starting
rational guess. The float seeds below evaluate the function once in binary64
via numpy and lift the double back into Q exactly; the iterations in
transcendental.py then refine it to the requested accuracy.

float_seed falls back to x / 2 when the double result is infinite (x outside
the binary64 range, or log(0.0) for tiny x). For square roots that fallback
is hopeless in exact arithmetic: Newton only halves a far-too-large guess
while the rational doubles in size each step. sqrt_seed therefore scales x
by a power of 4 into the double range first, so every finite x > 0 gets a
seed accurate to about 16 digits.
"""

from typing import Callable

import numpy as np

from arithmetic import Q, float_to_q, q_to_float

Seed = Callable[[Q], Q]


def float_seed(fn: Callable[[np.float64], np.float64]) -> Seed:
    """Build a seed strategy from a numpy float function such as np.sqrt."""

    def seed(x: Q) -> Q:
        xf = np.float64(q_to_float(x))
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            g = fn(xf)
        if np.isnan(g):
            raise ValueError(f"float seed undefined for x = {float(xf)}")
        if np.isinf(g):
            return x / 2
        return float_to_q(float(g))

    return seed


_float_sqrt_seed = float_seed(np.sqrt)


def sqrt_seed(x: Q) -> Q:
    """
    Float square root of x. Outside the double range:
      k := (bits(den) - bits(num)) // 2
      y := x * 4^k          (0.25 < y < 4 roughly)
      seed := sqrt(y) / 2^k
    Powers of two scale doubles exactly, so the seed is still the lifted
    float root of a double.
    """
    xf = q_to_float(x)
    if x == 0 or (xf != 0 and np.isfinite(xf)):
        return _float_sqrt_seed(x)
    k = (x.denominator.bit_length() - x.numerator.bit_length()) // 2
    y = x * Q(4) ** k
    return _float_sqrt_seed(y) / Q(2) ** k


log_seed = float_seed(np.log)


def halving_seed(x: Q) -> Q:
    """Float-free square root seed: x / 2, or 1 for x < 1. Always positive for x > 0."""
    return Q(1) if x < 1 else x / 2
