from __future__ import annotations

import argparse
import logging
from pathlib import Path

from timeruler import PixelSegment, Rect, TimeRange, TimeType, paint_time_ranges_and_ticks, validate_tick_style
from timeruler.raster import DARK_BACKGROUND, LIGHT_BACKGROUND, render_shapes, save_png


def build_segments(
    t_min: float,
    t_max: float,
    width: int,
    *,
    gap_fraction: float,
    gap_px: float,
) -> list[PixelSegment]:
    """Split [t_min, t_max] into two segments with a collapsed gap, or one segment when gap_fraction is 0."""
    if gap_fraction <= 0.0:
        return [PixelSegment(x_range=(0.0, float(width)), time_range=TimeRange(t_min, t_max))]
    split_x = width * 0.5
    span = t_max - t_min
    left_end = t_min + span * 0.5 * (1.0 - gap_fraction)
    right_start = t_max - span * 0.5 * (1.0 - gap_fraction)
    return [
        PixelSegment(x_range=(0.0, split_x - gap_px / 2.0), time_range=TimeRange(t_min, left_end)),
        PixelSegment(x_range=(split_x + gap_px / 2.0, float(width)), time_range=TimeRange(right_start, t_max)),
    ]


def main() -> None:
    parser = argparse.ArgumentParser(prog="render_ruler", description="Render a timeline ruler to a PNG file.")
    parser.add_argument("--time-type", choices=[t.value for t in TimeType], default=TimeType.TIME.value)
    parser.add_argument("--min", dest="t_min", type=float, default=0.0)
    parser.add_argument("--max", dest="t_max", type=float, default=90e9)
    parser.add_argument("--width", type=int, default=1200)
    parser.add_argument("--height", type=int, default=48)
    parser.add_argument("--gap-fraction", type=float, default=0.0)
    parser.add_argument("--gap-px", type=float, default=16.0)
    parser.add_argument("--light", action="store_true")
    parser.add_argument("--out", type=Path, default=Path("ruler.png"))
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if args.t_min > args.t_max:
        parser.error("--min must be <= --max")

    style = validate_tick_style({"dark_mode": not args.light})
    segments = build_segments(
        args.t_min,
        args.t_max,
        args.width,
        gap_fraction=args.gap_fraction,
        gap_px=args.gap_px,
    )
    clip = Rect(0.0, 0.0, float(args.width), float(args.height))
    shapes = paint_time_ranges_and_ticks(
        segments,
        clip,
        (0.0, float(args.height)),
        TimeType(args.time_type),
        style=style,
    )
    frame = render_shapes(
        shapes,
        args.width,
        args.height,
        background=LIGHT_BACKGROUND if args.light else DARK_BACKGROUND,
    )
    out = save_png(frame, args.out)
    print(f"wrote {out} ({len(shapes)} shapes)")


if __name__ == "__main__":
    main()
