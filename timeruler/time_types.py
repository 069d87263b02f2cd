from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from fractions import Fraction
from typing import Union
import math


NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000
SEC_PER_MINUTE = 60
SEC_PER_HOUR = 60 * SEC_PER_MINUTE
SEC_PER_DAY = 24 * SEC_PER_HOUR

I64_MAX = 2**63 - 1

# Recordings starting this many years after the epoch are treated as wall-clock time;
# relative recordings start close to zero.
ABSOLUTE_DATE_MIN_YEARS = 20


TimeValue = Union[int, float, Fraction]


@dataclass(frozen=True)
class TimeRange:
    """Inclusive range of time in a domain's native unit.

    Endpoints may be ``int``, ``float`` or ``Fraction``. Widths and interpolation are
    computed exactly, so a nanosecond window at a wall-clock epoch keeps its resolution.
    """

    min: TimeValue
    max: TimeValue

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError("time range min must be <= max")

    def width(self) -> float:
        if not self.is_finite():
            return self.max - self.min
        return float(Fraction(self.max) - Fraction(self.min))

    def center(self) -> TimeValue:
        return self.lerp(0.5)

    def lerp(self, t: float) -> TimeValue:
        if not self.is_finite():
            return self.min + (self.max - self.min) * t
        lo = Fraction(self.min)
        return lo + (Fraction(self.max) - lo) * Fraction(t)

    def is_finite(self) -> bool:
        return math.isfinite(self.min) and math.isfinite(self.max)


@dataclass(frozen=True)
class Rect:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_x_y_ranges(cls, x_range: tuple[float, float], y_range: tuple[float, float]) -> Rect:
        return cls(min_x=x_range[0], min_y=y_range[0], max_x=x_range[1], max_y=y_range[1])

    @property
    def left(self) -> float:
        return self.min_x

    @property
    def right(self) -> float:
        return self.max_x

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def x_range(self) -> tuple[float, float]:
        return (self.min_x, self.max_x)

    @property
    def y_range(self) -> tuple[float, float]:
        return (self.min_y, self.max_y)

    def intersect(self, other: Rect) -> Rect:
        return Rect(
            min_x=max(self.min_x, other.min_x),
            min_y=max(self.min_y, other.min_y),
            max_x=min(self.max_x, other.max_x),
            max_y=min(self.max_y, other.max_y),
        )

    def is_positive(self) -> bool:
        return self.min_x < self.max_x and self.min_y < self.max_y


@dataclass(frozen=True)
class PixelSegment:
    """One contiguous on-screen x-range showing a contiguous time sub-range."""

    x_range: tuple[float, float]
    time_range: TimeRange


def lerp(value_range: tuple[float, float], t: float) -> float:
    a, b = value_range
    return a + (b - a) * t


def inverse_lerp(value_range: tuple[float, float], value: float) -> float | None:
    a, b = value_range
    if a == b:
        return None
    return (value - a) / (b - a)


def remap_clamp(value: float, from_range: tuple[float, float], to_range: tuple[float, float]) -> float:
    lo, hi = from_range
    if hi == lo:
        return to_range[1] if value >= hi else to_range[0]
    t = min(1.0, max(0.0, (value - lo) / (hi - lo)))
    return lerp(to_range, t)


def is_absolute_date(ns: int) -> bool:
    years_since_epoch = ns // NANOS_PER_SEC // SEC_PER_DAY // 365
    return years_since_epoch > ABSOLUTE_DATE_MIN_YEARS


def format_time_of_day(ns: int, fmt: str = "%H:%M:%S") -> str:
    seconds, _ = divmod(ns, NANOS_PER_SEC)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).strftime(fmt)


def format_duration(ns: int) -> str:
    """Human readable duration such as ``1d 3h 2m 6s`` or ``1.500s``."""
    sign = ""
    if ns < 0:
        sign = "-"
        ns = -ns
    whole_seconds, nanos = divmod(ns, NANOS_PER_SEC)

    parts: list[str] = []
    days, rem = divmod(whole_seconds, SEC_PER_DAY)
    hours, rem = divmod(rem, SEC_PER_HOUR)
    minutes, seconds = divmod(rem, SEC_PER_MINUTE)
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if seconds > 0 or nanos > 0 or not parts:
        if nanos == 0:
            parts.append(f"{seconds}s")
        else:
            parts.append(f"{seconds}.{nanos // NANOS_PER_MILLI:03d}s")
    return sign + " ".join(parts)
