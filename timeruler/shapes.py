from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


RGBA = tuple[int, int, int, int]
Pos2 = tuple[float, float]

TRANSPARENT: RGBA = (0, 0, 0, 0)


class Align2(Enum):
    """Which point of a text box sits at the label position, as (horizontal, vertical)."""

    LEFT_TOP = ("left", "top")
    LEFT_CENTER = ("left", "center")
    LEFT_BOTTOM = ("left", "bottom")
    CENTER_CENTER = ("center", "center")
    RIGHT_CENTER = ("right", "center")

    @property
    def horizontal(self) -> str:
        return self.value[0]

    @property
    def vertical(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class FontSpec:
    family: str
    size_px: float


@dataclass(frozen=True)
class LineSegment:
    p0: Pos2
    p1: Pos2
    color: RGBA
    stroke_width: float = 1.0


@dataclass(frozen=True)
class TextLabel:
    position: Pos2
    anchor: Align2
    text: str
    color: RGBA
    font: FontSpec


Shape = Union[LineSegment, TextLabel]


def is_transparent(color: RGBA) -> bool:
    return color[3] == 0
