import math

import numpy as np
import pytest

from arithmetic import Q, qdigits, trunc_scalar, float_to_q, q_to_float, tolerance, bit_size


def test_trunc_scalar_towards_zero():
    assert trunc_scalar(Q(5, 3), 2) == Q(166, 100)
    assert trunc_scalar(Q(-5, 3), 2) == Q(-166, 100)
    assert trunc_scalar(Q(7, 2), 0) == 3
    with pytest.raises(ValueError):
        trunc_scalar(Q(1), -1)


def test_qdigits():
    assert qdigits(Q(2, 3), 4) == "0.6666"
    assert qdigits(Q(-1, 3), 3) == "-0.333"
    assert qdigits(Q(1, 20), 3) == "0.050"
    assert qdigits(Q(5, 2), 0) == "2"
    # too small to show: no "-0.000"
    assert qdigits(Q(-1, 10**6), 3) == "0.000"


def test_float_to_q_is_exact():
    assert float_to_q(0.1) == Q(3602879701896397, 36028797018963968)
    assert float_to_q(0.5) == Q(1, 2)
    with pytest.raises(ValueError):
        float_to_q(math.inf)
    with pytest.raises(ValueError):
        float_to_q(math.nan)


def test_q_to_float_saturates_instead_of_raising():
    assert q_to_float(Q(3, 4)) == 0.75
    assert q_to_float(Q(10**400)) == math.inf
    assert q_to_float(Q(-10**400)) == -math.inf
    assert q_to_float(Q(1, 10**400)) == 0.0


def test_tolerance():
    assert tolerance(1) == Q(1, 10)
    assert tolerance(30) == Q(1, 10**30)


def test_bit_size():
    assert bit_size(Q(-8, 3)) == (4, 2)


def test_tolerance_accepts_numpy_integers():
    assert tolerance(np.int64(25)) == Q(1, 10**25)
