from timeruler.domains import TickPolicy, TimeType
from timeruler.errors import StepPolicyError
from timeruler.labels import format_sub_millis, grid_text_from_ns, sequence_text
from timeruler.shapes import Align2, FontSpec, LineSegment, Shape, TextLabel
from timeruler.steps import next_grid_tick_magnitude_ns, next_power_of_10
from timeruler.style import DEFAULT_TICK_STYLE, TickStyle, validate_tick_style
from timeruler.ticks import TickGrid, TickMark, TickTier, TierStyle, compute_tick_grid, paint_ticks
from timeruler.time_panel import paint_time_ranges_and_ticks
from timeruler.time_types import PixelSegment, Rect, TimeRange, format_duration, format_time_of_day

__all__ = [
    "Align2",
    "DEFAULT_TICK_STYLE",
    "FontSpec",
    "LineSegment",
    "PixelSegment",
    "Rect",
    "Shape",
    "StepPolicyError",
    "TextLabel",
    "TickGrid",
    "TickMark",
    "TickPolicy",
    "TickStyle",
    "TickTier",
    "TierStyle",
    "TimeRange",
    "TimeType",
    "compute_tick_grid",
    "format_duration",
    "format_sub_millis",
    "format_time_of_day",
    "grid_text_from_ns",
    "next_grid_tick_magnitude_ns",
    "next_power_of_10",
    "paint_ticks",
    "paint_time_ranges_and_ticks",
    "sequence_text",
    "validate_tick_style",
]
