"""Floating-point comparison within a few units in the last place."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

MAX_ULPS = 4


@dataclass(frozen=True)
class _Format:
    bit_count: int
    fraction_bit_count: int
    pack_code: str
    int_code: str

    @property
    def all_mask(self) -> int:
        return (1 << self.bit_count) - 1

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bit_count - 1)

    @property
    def fraction_mask(self) -> int:
        return (1 << self.fraction_bit_count) - 1

    @property
    def exponent_mask(self) -> int:
        return self.all_mask & ~(self.sign_mask | self.fraction_mask)


_FORMATS = {
    32: _Format(32, 23, "<f", "<I"),
    64: _Format(64, 52, "<d", "<Q"),
}


def _format(width: int) -> _Format:
    try:
        return _FORMATS[width]
    except KeyError:
        raise ValueError(f"unsupported floating-point width: {width}") from None


class FloatingPoint:
    """An IEEE 754 number (32 or 64 bits wide) seen through its bit pattern."""

    def __init__(self, value: float, width: int = 64) -> None:
        self.width = width
        fmt = _format(width)
        try:
            packed = struct.pack(fmt.pack_code, value)
        except OverflowError:
            packed = struct.pack(fmt.pack_code, math.copysign(math.inf, value))
        self.bits: int = struct.unpack(fmt.int_code, packed)[0]

    @property
    def _fmt(self) -> _Format:
        return _FORMATS[self.width]

    @property
    def value(self) -> float:
        return self.reinterpret_bits(self.bits, self.width)

    @classmethod
    def reinterpret_bits(cls, bits: int, width: int = 64) -> float:
        """The number whose bit pattern is ``bits``."""
        fmt = _format(width)
        packed = struct.pack(fmt.int_code, bits & fmt.all_mask)
        return struct.unpack(fmt.pack_code, packed)[0]

    @classmethod
    def infinity(cls, width: int = 64) -> float:
        return cls.reinterpret_bits(_format(width).exponent_mask, width)

    def exponent_bits(self) -> int:
        return self._fmt.exponent_mask & self.bits

    def fraction_bits(self) -> int:
        return self._fmt.fraction_mask & self.bits

    def sign_bit(self) -> int:
        return self._fmt.sign_mask & self.bits

    def is_nan(self) -> bool:
        return self.exponent_bits() == self._fmt.exponent_mask and self.fraction_bits() != 0

    def _biased(self) -> int:
        fmt = self._fmt
        if fmt.sign_mask & self.bits:
            return (~self.bits + 1) & fmt.all_mask
        return fmt.sign_mask | self.bits

    def almost_equals(self, other: FloatingPoint) -> bool:
        """True if the numbers are at most four ULPs apart; never for NaN.

        +0.0 and -0.0 are equal, and huge finite numbers are close to infinity.
        """
        if self.width != other.width:
            raise ValueError("cannot compare numbers of different widths")
        if self.is_nan() or other.is_nan():
            return False
        return abs(self._biased() - other._biased()) <= MAX_ULPS

    def __repr__(self) -> str:
        return f"FloatingPoint({self.value!r}, width={self.width})"


def are_equal(a: float, b: float, width: int = 64) -> bool:
    return FloatingPoint(a, width).almost_equals(FloatingPoint(b, width))


def are_not_equal(a: float, b: float, width: int = 64) -> bool:
    return not are_equal(a, b, width)