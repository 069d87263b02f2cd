from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Iterator
import logging
import math

from timeruler.domains import FormatFn, StepFn
from timeruler.errors import StepPolicyError
from timeruler.shapes import RGBA, Align2, LineSegment, Shape, TextLabel, is_transparent
from timeruler.style import DEFAULT_TICK_STYLE, TickStyle
from timeruler.time_types import I64_MAX, Rect, TimeRange, lerp, remap_clamp


LOGGER = logging.getLogger(__name__)

_SATURATED_MAX_TICKS = 2.0


class TickTier(Enum):
    MINOR = "minor"
    MEDIUM = "medium"
    MAJOR = "major"


@dataclass(frozen=True)
class TierStyle:
    spacing: int
    line_strength: float
    line_color: RGBA
    text_color: RGBA


@dataclass(frozen=True)
class TickGrid:
    """The three nested tick tiers chosen for one canvas width and time span."""

    minor: TierStyle
    medium: TierStyle
    major: TierStyle

    def tier_of(self, position: int) -> TickTier:
        if position % self.major.spacing == 0:
            return TickTier.MAJOR
        if position % self.medium.spacing == 0:
            return TickTier.MEDIUM
        return TickTier.MINOR

    def style_of(self, tier: TickTier) -> TierStyle:
        if tier is TickTier.MAJOR:
            return self.major
        if tier is TickTier.MEDIUM:
            return self.medium
        return self.minor

    def height_factor(self, tier: TickTier) -> float:
        # A tick is as tall as the tier below it is strong, so lines grow smoothly while zooming.
        if tier is TickTier.MAJOR:
            return self.medium.line_strength
        if tier is TickTier.MEDIUM:
            return self.minor.line_strength
        return 0.0


@dataclass(frozen=True)
class TickMark:
    position: int
    tier: TickTier
    screen_x: float


def small_tick_spacing(width_time: float, max_small_lines: float, next_time_step: StepFn) -> int:
    """Finest spacing that keeps at most ``max_small_lines`` ticks across ``width_time``."""
    spacing = 1
    while width_time / spacing > max_small_lines:
        next_spacing = _checked_step(next_time_step, spacing)
        if next_spacing == spacing:
            # A saturated step is only acceptable once one spacing already covers the range.
            if width_time / spacing > _SATURATED_MAX_TICKS:
                raise StepPolicyError(f"tick step stalled at {spacing}; steps must grow")
            LOGGER.warning("tick spacing saturated at %d", spacing)
            break
        spacing = next_spacing
    return spacing


def compute_tick_grid(
    canvas_width: float,
    width_time: float,
    next_time_step: StepFn,
    style: TickStyle = DEFAULT_TICK_STYLE,
) -> TickGrid:
    points_per_time = canvas_width / width_time
    min_spacing = style.minimum_small_line_spacing

    def tier(spacing: int) -> TierStyle:
        next_tick_magnitude = _checked_step(next_time_step, spacing) // spacing
        pixels = spacing * points_per_time
        strength = remap_clamp(pixels, (min_spacing, next_tick_magnitude * min_spacing), (0.0, 1.0))
        text_alpha = remap_clamp(
            pixels,
            (style.expected_text_width, 3.0 * style.expected_text_width),
            (0.0, style.max_text_alpha),
        )
        return TierStyle(
            spacing=spacing,
            line_strength=strength,
            line_color=style.color_from_alpha(style.line_alpha * strength),
            text_color=style.color_from_alpha(text_alpha),
        )

    small = small_tick_spacing(width_time, canvas_width / min_spacing, next_time_step)
    medium = _checked_step(next_time_step, small)
    big = _checked_step(next_time_step, medium)
    return TickGrid(minor=tier(small), medium=tier(medium), major=tier(big))


def iter_tick_marks(canvas: Rect, visible_rect: Rect, time_range: TimeRange, grid: TickGrid) -> Iterator[TickMark]:
    width_time = time_range.width()
    spacing = grid.minor.spacing
    # Subtract in integer arithmetic: floats at wall-clock epochs cannot resolve nanoseconds.
    base = math.floor(time_range.min)
    base_fraction = float(Fraction(time_range.min) - base)
    current = base // spacing * spacing
    last = math.ceil(time_range.max)
    while current <= last:
        line_x = lerp(canvas.x_range, ((current - base) - base_fraction) / width_time)
        if visible_rect.min_x <= line_x <= visible_rect.max_x:
            yield TickMark(position=current, tier=grid.tier_of(current), screen_x=line_x)
        current += spacing


def paint_ticks(
    canvas: Rect,
    clip_rect: Rect,
    time_range: TimeRange,
    next_time_step: StepFn,
    format_tick: FormatFn,
    style: TickStyle = DEFAULT_TICK_STYLE,
) -> list[Shape]:
    """Lay out the ruler for one time range drawn across ``canvas``.

    Returns line segments (each followed by its label, if the label is visible)
    for every tick whose x lies inside ``clip_rect``. Empty when nothing is visible
    or the time range has no usable width.
    """
    shapes: list[Shape] = []
    visible_rect = clip_rect.intersect(canvas)
    if not visible_rect.is_positive():
        return shapes
    if not time_range.is_finite():
        return shapes
    width_time = time_range.width()
    if width_time <= 0 or width_time > I64_MAX:
        return shapes

    grid = compute_tick_grid(canvas.width, width_time, next_time_step, style)
    text_y = lerp(canvas.y_range, style.text_y_fraction)

    for mark in iter_tick_marks(canvas, visible_rect, time_range, grid):
        tier_style = grid.style_of(mark.tier)

        # Make line higher if it is stronger:
        height = lerp((style.line_top_weak, style.line_top_strong), grid.height_factor(mark.tier))
        line_top = lerp(canvas.y_range, height)
        shapes.append(
            LineSegment(
                p0=(mark.screen_x, line_top),
                p1=(mark.screen_x, canvas.max_y),
                color=tier_style.line_color,
                stroke_width=style.stroke_width,
            )
        )

        if not is_transparent(tier_style.text_color):
            shapes.append(
                TextLabel(
                    position=(mark.screen_x + style.text_offset_px, text_y),
                    anchor=Align2.LEFT_CENTER,
                    text=format_tick(mark.position),
                    color=tier_style.text_color,
                    font=style.font,
                )
            )
    return shapes


def _checked_step(next_time_step: StepFn, spacing: int) -> int:
    next_spacing = next_time_step(spacing)
    if next_spacing < spacing or next_spacing <= 0:
        raise StepPolicyError(f"tick step went from {spacing} to {next_spacing}; steps must never shrink")
    return next_spacing
