from __future__ import annotations

from decimal import Decimal

from timeruler.time_types import (
    NANOS_PER_MILLI,
    NANOS_PER_SEC,
    format_duration,
    format_time_of_day,
    is_absolute_date,
)


def grid_text_from_ns(ns: int) -> str:
    relative_ns = _truncated_remainder(ns, NANOS_PER_SEC)
    if relative_ns == 0:
        if is_absolute_date(ns):
            return format_time_of_day(ns, "%H:%M:%S")
        return format_duration(ns)
    # Sub-second: the full time is too long for a tick, so show milliseconds since the last whole second.
    return format_sub_millis(relative_ns, units_per_milli=NANOS_PER_MILLI)


def format_sub_millis(relative: int, *, units_per_milli: int) -> str:
    """Signed milliseconds with the fewest decimals that represent ``relative`` exactly."""
    max_decimals = _decimal_digits(units_per_milli)
    decimals = max_decimals
    for candidate in range(max_decimals + 1):
        if relative % (units_per_milli // 10**candidate) == 0:
            decimals = candidate
            break
    millis = Decimal(relative).scaleb(-max_decimals)
    return f"{millis:+.{decimals}f} ms"


def sequence_text(seq: int) -> str:
    return f"#{seq}"


def _decimal_digits(units_per_milli: int) -> int:
    digits = 0
    value = units_per_milli
    while value > 1:
        if value % 10 != 0:
            raise ValueError("units_per_milli must be a power of ten")
        value //= 10
        digits += 1
    return digits


def _truncated_remainder(value: int, divisor: int) -> int:
    # Keeps the sign of the dividend, so positions before the epoch read as negative offsets.
    rem = abs(value) % divisor
    return -rem if value < 0 else rem
