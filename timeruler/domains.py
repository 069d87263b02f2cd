from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from timeruler.labels import grid_text_from_ns, sequence_text
from timeruler.steps import next_grid_tick_magnitude_ns, next_power_of_10


StepFn = Callable[[int], int]
FormatFn = Callable[[int], str]


@dataclass(frozen=True)
class TickPolicy:
    next_step: StepFn
    format_tick: FormatFn


class TimeType(Enum):
    """Time domain of a timeline, chosen once per panel from the recording's time source."""

    TIME = "time"
    SEQUENCE = "sequence"

    @property
    def policy(self) -> TickPolicy:
        return _POLICIES[self]


_POLICIES: dict[TimeType, TickPolicy] = {
    TimeType.TIME: TickPolicy(next_step=next_grid_tick_magnitude_ns, format_tick=grid_text_from_ns),
    TimeType.SEQUENCE: TickPolicy(next_step=next_power_of_10, format_tick=sequence_text),
}
