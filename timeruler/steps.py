from __future__ import annotations

from timeruler.time_types import I64_MAX, NANOS_PER_SEC, SEC_PER_HOUR, SEC_PER_MINUTE


_TEN_SECONDS_NS = 10 * NANOS_PER_SEC
_MINUTE_NS = SEC_PER_MINUTE * NANOS_PER_SEC
_TEN_MINUTES_NS = 10 * _MINUTE_NS
_HOUR_NS = SEC_PER_HOUR * NANOS_PER_SEC
_TWELVE_HOURS_NS = 12 * _HOUR_NS


def next_grid_tick_magnitude_ns(spacing_ns: int) -> int:
    """Next coarser tick spacing for nanosecond time, landing on whole minutes, hours and days."""
    if spacing_ns <= NANOS_PER_SEC:
        return spacing_ns * 10  # up to 10 second ticks
    if spacing_ns == _TEN_SECONDS_NS:
        return spacing_ns * 6  # to the whole minute
    if spacing_ns == _MINUTE_NS:
        return spacing_ns * 10  # to ten minutes
    if spacing_ns == _TEN_MINUTES_NS:
        return spacing_ns * 6  # to an hour
    if spacing_ns == _HOUR_NS:
        return spacing_ns * 12  # to 12 h
    if spacing_ns == _TWELVE_HOURS_NS:
        return spacing_ns * 2  # to a day
    return _saturating_mul(spacing_ns, 10)  # multiple of ten days


def next_power_of_10(spacing: int) -> int:
    return spacing * 10


def _saturating_mul(value: int, factor: int) -> int:
    product = value * factor
    if product > I64_MAX:
        return value
    return product
