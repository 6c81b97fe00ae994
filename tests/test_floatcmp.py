import math
import sys

import pytest

from agptools.floatcmp import MAX_ULPS, FloatingPoint, are_equal, are_not_equal


def _step(x, n):
    for _ in range(n):
        x = math.nextafter(x, math.inf)
    return x


def test_equal_values():
    assert are_equal(1.0, 1.0)
    assert not are_not_equal(1.0, 1.0)


def test_signed_zeros_equal():
    assert are_equal(0.0, -0.0)
    assert are_equal(0.0, -0.0, 32)


def test_nan_never_equal():
    assert not are_equal(math.nan, math.nan)
    assert are_not_equal(math.nan, 1.0)


def test_ulp_tolerance_double():
    assert are_equal(1.0, _step(1.0, MAX_ULPS))
    assert not are_equal(1.0, _step(1.0, MAX_ULPS + 1))


def test_ulp_tolerance_single():
    bits = FloatingPoint(1.0, 32).bits
    near = FloatingPoint.reinterpret_bits(bits + MAX_ULPS, 32)
    far = FloatingPoint.reinterpret_bits(bits + MAX_ULPS + 1, 32)
    assert are_equal(1.0, near, 32)
    assert not are_equal(1.0, far, 32)


def test_largest_finite_close_to_infinity():
    assert are_equal(sys.float_info.max, math.inf)


def test_infinity():
    assert FloatingPoint.infinity() == math.inf
    assert FloatingPoint.infinity(32) == math.inf


def test_reinterpret_round_trip():
    for x in (1.5, -2.25, 0.0, 1e-300):
        assert FloatingPoint.reinterpret_bits(FloatingPoint(x).bits) == x


def test_bit_fields():
    fp = FloatingPoint(-1.0)
    assert fp.sign_bit() == 1 << 63
    assert fp.fraction_bits() == 0
    assert fp.exponent_bits() == 0x3FF << 52
    assert FloatingPoint(1.0).sign_bit() == 0


def test_is_nan():
    assert FloatingPoint(math.nan).is_nan()
    assert FloatingPoint(math.nan, 32).is_nan()
    assert not FloatingPoint(math.inf).is_nan()


def test_single_overflow_becomes_infinity():
    assert FloatingPoint(1e300, 32).value == math.inf
    assert FloatingPoint(-1e300, 32).value == -math.inf


def test_width_mismatch_and_unsupported():
    with pytest.raises(ValueError):
        FloatingPoint(1.0, 32).almost_equals(FloatingPoint(1.0, 64))
    with pytest.raises(ValueError):
        FloatingPoint(1.0, 16)