from __future__ import annotations

from typing import Sequence
import logging

from timeruler.domains import TimeType
from timeruler.shapes import LineSegment, Shape, TextLabel
from timeruler.style import DEFAULT_TICK_STYLE, TickStyle
from timeruler.ticks import paint_ticks
from timeruler.time_types import PixelSegment, Rect, TimeRange, inverse_lerp


LOGGER = logging.getLogger(__name__)

_BOUNDARY_EPSILON_PX = 1e-6


def paint_time_ranges_and_ticks(
    segments: Sequence[PixelSegment],
    clip_rect: Rect,
    line_y_range: tuple[float, float],
    time_type: TimeType,
    style: TickStyle = DEFAULT_TICK_STYLE,
) -> list[Shape]:
    """Ruler shapes for every visible segment of a (possibly gapped) timeline.

    ``segments`` come ordered left to right. Where two segments touch and both put a
    tick on the shared pixel column, only the right-hand segment's tick is kept.
    """
    policy = time_type.policy
    per_segment: list[list[Shape]] = []
    culled = 0

    for index, segment in enumerate(segments):
        x_range, time_range = clamp_segment_to_clip(segment, clip_rect)
        if x_range is None:
            culled += 1
            per_segment.append([])
            continue

        rect = Rect.from_x_y_ranges(x_range, line_y_range)
        shapes = paint_ticks(rect, clip_rect.intersect(rect), time_range, policy.next_step, policy.format_tick, style)
        if index > 0 and segment.x_range[0] <= segments[index - 1].x_range[1]:
            boundary = segment.x_range[0]
            if _line_index_at(shapes, boundary) is not None:
                _drop_line_at(per_segment[index - 1], boundary)
        per_segment.append(shapes)

    if culled:
        LOGGER.debug("culled %d of %d timeline segments", culled, len(segments))
    return [shape for shapes in per_segment for shape in shapes]


def clamp_segment_to_clip(
    segment: PixelSegment, clip_rect: Rect
) -> tuple[tuple[float, float] | None, TimeRange]:
    """Visible part of ``segment`` as (x-range, time sub-range); x-range is None when fully hidden."""
    x_start, x_end = segment.x_range
    time_range = segment.time_range

    # Cull:
    if x_end < clip_rect.left or clip_rect.right < x_start:
        return None, time_range

    # Clamp segment to the visible portion to save CPU when zoomed in:
    left_t = inverse_lerp((x_start, x_end), clip_rect.left)
    if left_t is not None and 0.0 < left_t < 1.0:
        x_start = clip_rect.left
        time_range = TimeRange(min(time_range.lerp(left_t), time_range.max), time_range.max)
    right_t = inverse_lerp((x_start, x_end), clip_rect.right)
    if right_t is not None and 0.0 < right_t < 1.0:
        x_end = clip_rect.right
        time_range = TimeRange(time_range.min, max(time_range.lerp(right_t), time_range.min))
    return (x_start, x_end), time_range


def _line_index_at(shapes: list[Shape], x: float) -> int | None:
    for i, shape in enumerate(shapes):
        if isinstance(shape, LineSegment) and abs(shape.p0[0] - x) <= _BOUNDARY_EPSILON_PX:
            return i
    return None


def _drop_line_at(shapes: list[Shape], x: float) -> None:
    i = _line_index_at(shapes, x)
    if i is None:
        return
    end = i + 1
    if end < len(shapes) and isinstance(shapes[end], TextLabel):
        end += 1
    del shapes[i:end]
