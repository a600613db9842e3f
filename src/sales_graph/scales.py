"""Band, linear and ordinal scales with d3's numeric behaviour.

The SVG renderer positions everything in pixels itself, so these reproduce
the exact rounding and tick choices a d3 chart of the same data would make.
"""

from __future__ import annotations

import math
from typing import Callable, Hashable, Sequence

import numpy as np

# Thresholds for picking a 1, 2, 5 or 10 multiple of the tick power
_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


class BandScale:
    """Map discrete values onto evenly spaced bands of a continuous range.

    ``padding`` sets both the inner and outer padding as a fraction of the
    step; bands are centred in the range. With ``round`` the step is floored
    and the start and bandwidth rounded to whole pixels.
    """

    def __init__(
        self,
        domain: Sequence[Hashable],
        range: tuple[float, float],
        *,
        padding: float = 0.1,
        round: bool = True,
    ) -> None:
        if not 0 <= padding <= 1:
            raise ValueError(f"padding must be in [0, 1], got {padding}")
        self.domain = list(dict.fromkeys(domain))
        self.range = (float(range[0]), float(range[1]))
        self.padding = padding
        self.round = round
        self._rescale()

    def _rescale(self) -> None:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)

        step = (stop - start) / max(1, n - self.padding + self.padding * 2)
        if self.round:
            step = math.floor(step)
        start += (stop - start - step * (n - self.padding)) * 0.5
        bandwidth = step * (1 - self.padding)
        if self.round:
            start = _round_half_up(start)
            bandwidth = _round_half_up(bandwidth)

        positions = start + step * np.arange(n)
        if reverse:
            positions = positions[::-1]
        self.step = step
        self.bandwidth = bandwidth
        self._index = {value: float(pos) for value, pos in zip(self.domain, positions)}

    def __call__(self, value: Hashable) -> float:
        try:
            return self._index[value]
        except KeyError:
            raise KeyError(f"{value!r} is not in the band domain") from None

    def center(self, value: Hashable) -> float:
        return self(value) + self.bandwidth / 2


class LinearScale:
    """Continuous linear map from ``domain`` to ``range``."""

    def __init__(self, domain: tuple[float, float], range: tuple[float, float]) -> None:
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range[0]), float(range[1]))

    def __call__(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            t = 0.5
        else:
            t = (x - d0) / (d1 - d0)
        return r0 + t * (r1 - r0)

    def ticks(self, count: int = 10) -> list[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10) -> Callable[[float], str]:
        d0, d1 = self.domain
        step = abs(tick_step(d0, d1, count))
        precision = _precision_fixed(step) if step else 0
        return lambda value: format_number(value, precision)


class OrdinalScale:
    """Assign palette entries to keys in first-come order, cycling."""

    def __init__(self, range: Sequence[str]) -> None:
        if not range:
            raise ValueError("ordinal range must not be empty")
        self.range = list(range)
        self._assigned: dict[Hashable, str] = {}

    def __call__(self, key: Hashable) -> str:
        if key not in self._assigned:
            self._assigned[key] = self.range[len(self._assigned) % len(self.range)]
        return self._assigned[key]


def _round_half_up(x: float) -> float:
    # Math.round semantics; Python's round() is banker's rounding
    return float(math.floor(x + 0.5))


def _tick_spec(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1

    if power < 0:
        inc = 10 ** -power / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10 ** power * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return int(i1), int(i2), inc


def ticks(start: float, stop: float, count: int) -> list[float]:
    """Round 1/2/5 x 10^k values covering [start, stop], about ``count`` of them.

    A negative increment from _tick_spec means "divide by", which keeps
    fractional ticks like 0.1 free of float error.
    """
    if not count > 0:
        return []
    if start == stop:
        return [float(start)]

    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []

    steps = np.arange(i1, i2 + 1, dtype=float)
    values = steps / -inc if inc < 0 else steps * inc
    result = [float(v) for v in values]
    return result[::-1] if reverse else result


def tick_step(start: float, stop: float, count: int) -> float:
    """The spacing between the values :func:`ticks` would return."""
    if start == stop or not count > 0:
        return 0.0
    reverse = stop < start
    lo, hi = (stop, start) if reverse else (start, stop)
    inc = _tick_spec(lo, hi, count)[2]
    step = 1 / -inc if inc < 0 else inc
    return -step if reverse else step


def _precision_fixed(step: float) -> int:
    return max(0, -math.floor(math.log10(abs(step))))


def format_number(value: float, precision: int = 0) -> str:
    """Fixed-point with thousands separators and a real minus sign."""
    text = f"{abs(value):,.{precision}f}"
    # -0 and values that round to zero print unsigned
    if value < 0 and float(text.replace(",", "")) != 0:
        return "−" + text
    return text
