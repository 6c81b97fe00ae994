"""Numeric helpers: tolerant comparisons, intervals, log scales, statistics, interpolation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from agptools.strings import num2str, str2num

PI = 3.14159265
LOG2E = 1.44269504


def approximately_equal(a: float, b: float, epsilon: float) -> bool:
    """True if ``a`` and ``b`` differ by at most ``epsilon`` times the larger magnitude."""
    return abs(a - b) <= max(abs(a), abs(b)) * epsilon


def essentially_equal(a: float, b: float, epsilon: float) -> bool:
    """True if ``a`` and ``b`` differ by at most ``epsilon`` times the smaller magnitude."""
    return abs(a - b) <= min(abs(a), abs(b)) * epsilon


@dataclass
class Interval:
    """Half-open interval ``[start, end)``."""

    start: int = 0
    end: int = 0

    def size(self):
        return abs(self.end - self.start)

    def subtract(self, other: Interval) -> tuple[Interval, Interval]:
        """Remove ``other`` from this interval.

        The remainder is returned as two intervals; unused parts are empty
        ``Interval(0, 0)``.
        """
        first = Interval()
        second = Interval()
        if other.start > self.start or other.end < self.start:
            first.start = self.start
        if other.start <= self.start <= other.end < self.end:
            first.start = other.end
        if other.start >= self.end or (other.start <= self.start and other.end < self.end):
            first.end = self.end
        if self.start < other.start < self.end:
            first.end = other.start
        if other.start > self.start and other.end < self.end:
            second.start = other.end
            second.end = self.end
        return first, second

    def contains(self, i) -> bool:
        return self.start <= i < self.end

    def is_valid(self) -> bool:
        return self.end > self.start


def distance(x1, y1, x2, y2):
    """Euclidean distance; integral when all coordinates are integers."""
    result = math.sqrt(float(x1 - x2) ** 2 + float(y1 - y2) ** 2)
    if all(isinstance(v, int) for v in (x1, y1, x2, y2)):
        return int(result)
    return result


def log2(x: float) -> float:
    return math.log(x) * LOG2E


def round_half_away(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(x + 0.5) if x > 0 else int(x - 0.5)


def rad2deg(radians: float) -> float:
    return radians * (180.0 / PI)


def deg2rad(degrees: float) -> float:
    return degrees * (PI / 180.0)


def partition(elems: Interval, n_parts: int) -> list[Interval]:
    """Split ``elems`` into ``n_parts`` consecutive intervals whose sizes differ by at most 1."""
    if n_parts <= 0:
        raise ValueError("n_parts must be positive")
    base, extra = divmod(elems.size(), n_parts)
    parts = []
    count = elems.start
    for i in range(n_parts):
        length = base + (1 if i < extra else 0)
        parts.append(Interval(count, count + length))
        count += length
    return parts


def ssqrt(x: float) -> float:
    """Square root that is zero for non-positive input."""
    return 0 if x <= 0 else math.sqrt(x)


def octspace10(a, b) -> list:
    """All values ``i * 10**k`` (i in 1..9) lying in ``[a, b]``, ascending."""
    if a <= 0 or b <= 0:
        raise ValueError("in octspace10(): either a or b are not greater than zero")
    right = 10 ** math.ceil(math.log10(b))
    elem = 10 ** math.floor(math.log10(a))
    result = []
    while elem <= right:
        result.extend(elem * i for i in range(1, 10) if a <= elem * i <= b)
        elem *= 10
    return result


def decades(a: float, b: float) -> list[float]:
    """Divide ``[a, b]`` at the decade steps ``j * 10**i`` lying strictly inside."""
    out = [a]
    for i in range(math.floor(math.log10(a)), math.ceil(math.log10(b))):
        for j in range(1, 10):
            value = j * 10.0 ** i
            if a < value < b:
                out.append(value)
    out.append(b)
    return out


def subdivide(intervals: Sequence[float], n: int) -> list[float]:
    """Split each consecutive pair of ``intervals`` into ``n`` equal steps."""
    if not intervals:
        raise ValueError("intervals must not be empty")
    out = []
    for low, high in zip(intervals, intervals[1:]):
        step = (high - low) / n
        out.extend(low + j * step for j in range(n))
    out.append(intervals[-1])
    return out


def isfinite(x: float) -> bool:
    return math.isfinite(x)


def meanstd(data: Sequence[float]) -> tuple[float, float]:
    """Mean and population standard deviation; ``(0, 0)`` for no data."""
    n = len(data)
    if n == 0:
        return 0.0, 0.0
    total = math.fsum(data)
    total_sq = math.fsum(v * v for v in data)
    mean = total / n
    variance = total_sq / n - mean * mean
    return mean, math.sqrt(max(variance, 0.0))


def minmax(data: Sequence):
    """Smallest and largest element."""
    if not data:
        raise ValueError("minmax() of empty data")
    low = high = data[0]
    for value in data[1:]:
        low = value if value < low else low
        high = value if value > high else high
    return low, high


def prctile(hist: Sequence[float], p: float) -> int:
    """Index of the bin at which the ``p``-th percentile (0..100) of a histogram is reached."""
    if len(hist) < 1:
        raise ValueError("prctile(): dim < 1")
    if p < 0 or p > 100:
        raise ValueError("prctile(): P not in the range [0, 100]")
    threshold = p / 100 * math.fsum(float(h) for h in hist)
    acc = 0.0
    idx = 0
    while idx < len(hist) - 1 and acc < threshold:
        acc += hist[idx]
        idx += 1
    return idx


def str2f(text: str) -> float:
    """Parse a float, accepting ``inf``, ``-inf`` and ``1.#INF`` spellings."""
    lowered = text.lower()
    if lowered.startswith("1.#inf"):
        return math.inf
    if lowered.startswith("-1.#inf") or lowered.startswith("-inf"):
        return -math.inf
    if lowered.startswith("inf"):
        return math.inf
    return str2num(text, float)


def f2str(value: float) -> str:
    """Text form of a float, with ``nan``, ``inf`` and ``-inf`` spelled out."""
    if math.isnan(value):
        return "nan"
    if value == math.inf:
        return "inf"
    if value == -math.inf:
        return "-inf"
    return num2str(value)


class LinearInterpolation:
    """Piecewise-linear interpolation through points with ascending x."""

    def __init__(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have the same length")
        if len(xs) < 2:
            raise ValueError("at least two points are needed")
        self._xs = tuple(xs)
        self._ys = tuple(ys)

    def value(self, x: float) -> float:
        """Interpolated value at ``x``; extrapolates linearly outside the points."""
        xs, ys = self._xs, self._ys
        i = 1
        while i < len(xs) - 1 and x > xs[i]:
            i += 1
        a = (x - xs[i - 1]) / (xs[i] - xs[i - 1])
        return ys[i - 1] + a * (ys[i] - ys[i - 1])

    __call__ = value


def linear_once(xs: Sequence[float], ys: Sequence[float], a: float) -> float:
    """Interpolate a single value without keeping the interpolator."""
    return LinearInterpolation(xs, ys).value(a)