from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from timeruler.shapes import RGBA, FontSpec


DEFAULT_FONT_FAMILY = "DejaVu Sans Mono"
DEFAULT_FONT_SIZE_PX = 11.0


@dataclass(frozen=True)
class TickStyle:
    """Visual constants of the timeline ruler."""

    minimum_small_line_spacing: float = 4.0
    expected_text_width: float = 60.0
    line_alpha: float = 0.4
    max_text_alpha: float = 0.5
    text_offset_px: float = 4.0
    stroke_width: float = 1.0
    line_top_weak: float = 0.75
    line_top_strong: float = 0.5
    text_y_fraction: float = 0.5
    dark_mode: bool = True
    font_family: str = DEFAULT_FONT_FAMILY
    font_size_px: float = DEFAULT_FONT_SIZE_PX

    @property
    def font(self) -> FontSpec:
        return FontSpec(family=self.font_family, size_px=self.font_size_px)

    def color_from_alpha(self, alpha: float) -> RGBA:
        # White lines read too strong on dark backgrounds, so their alpha is squared.
        if self.dark_mode:
            return (255, 255, 255, _alpha_byte(alpha * alpha))
        return (0, 0, 0, _alpha_byte(alpha))


DEFAULT_TICK_STYLE = TickStyle()

_POSITIVE_KEYS = ("minimum_small_line_spacing", "expected_text_width", "stroke_width", "font_size_px")
_UNIT_KEYS = ("line_alpha", "max_text_alpha", "line_top_weak", "line_top_strong", "text_y_fraction")


def validate_tick_style(overrides: Mapping[str, Any] | None = None) -> TickStyle:
    """Validate and merge style overrides against the defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_TICK_STYLE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown tick style key: {key}")
            raw[key] = value

    for key in _POSITIVE_KEYS:
        if not _is_number(raw[key]) or float(raw[key]) <= 0:
            raise ValueError(f"Style `{key}` must be a positive number")
    for key in _UNIT_KEYS:
        if not _is_number(raw[key]) or not 0.0 <= float(raw[key]) <= 1.0:
            raise ValueError(f"Style `{key}` must be a number in [0, 1]")
    if not _is_number(raw["text_offset_px"]):
        raise ValueError("Style `text_offset_px` must be a number")
    if not isinstance(raw["dark_mode"], bool):
        raise ValueError("Style `dark_mode` must be a bool")
    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Style `font_family` must be a non-empty string")

    values: dict[str, Any] = {}
    for f in fields(TickStyle):
        value = raw[f.name]
        values[f.name] = float(value) if _is_number(value) else value
    return TickStyle(**values)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _alpha_byte(alpha: float) -> int:
    return int(round(min(1.0, max(0.0, alpha)) * 255.0))
