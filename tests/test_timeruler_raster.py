from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

import numpy as np
from PIL import Image

from timeruler import Align2, FontSpec, LineSegment, Rect, TextLabel, TimeRange, TimeType, paint_ticks
from timeruler.raster import DARK_BACKGROUND, new_canvas, render_shapes, save_png, text_size
from timeruler.raster.canvas import draw_line

FONT = FontSpec(family="DejaVu Sans Mono", size_px=11.0)


class CanvasTests(unittest.TestCase):
    def test_new_canvas_fills_color(self) -> None:
        canvas = new_canvas(4, 3, color=(1, 2, 3, 255))
        self.assertEqual(canvas.shape, (3, 4, 4))
        self.assertTrue(np.all(canvas[:, :, 2] == 3))

    def test_new_canvas_rejects_empty_size(self) -> None:
        with self.assertRaises(ValueError):
            new_canvas(0, 10)

    def test_diagonal_line_touches_both_ends(self) -> None:
        canvas = new_canvas(10, 10, color=(0, 0, 0, 255))
        draw_line(canvas, 0, 0, 9, 9, (255, 0, 0, 255))
        self.assertEqual(int(canvas[0, 0, 0]), 255)
        self.assertEqual(int(canvas[9, 9, 0]), 255)
        self.assertEqual(int(canvas[0, 9, 0]), 0)


class RenderShapesTests(unittest.TestCase):
    def test_opaque_vertical_line(self) -> None:
        line = LineSegment(p0=(10.0, 5.0), p1=(10.0, 19.0), color=(255, 255, 255, 255))
        frame = render_shapes([line], 40, 20)
        self.assertEqual(tuple(int(v) for v in frame[10, 10]), (255, 255, 255, 255))
        self.assertEqual(tuple(int(v) for v in frame[2, 10]), DARK_BACKGROUND)
        self.assertEqual(tuple(int(v) for v in frame[10, 11]), DARK_BACKGROUND)

    def test_translucent_line_blends_with_background(self) -> None:
        line = LineSegment(p0=(5.0, 0.0), p1=(5.0, 9.0), color=(255, 255, 255, 128))
        frame = render_shapes([line], 10, 10, background=(0, 0, 0, 255))
        value = int(frame[5, 5, 0])
        self.assertGreater(value, 100)
        self.assertLess(value, 160)

    def test_transparent_line_is_skipped(self) -> None:
        line = LineSegment(p0=(5.0, 0.0), p1=(5.0, 9.0), color=(255, 255, 255, 0))
        frame = render_shapes([line], 10, 10)
        self.assertTrue(np.all(frame[:, :, 0] == DARK_BACKGROUND[0]))

    def test_text_label_writes_pixels(self) -> None:
        label = TextLabel(position=(4.0, 12.0), anchor=Align2.LEFT_CENTER, text="#42", color=(255, 255, 255, 255), font=FONT)
        frame = render_shapes([label], 80, 24, background=(0, 0, 0, 255))
        self.assertGreater(int(frame[:, :, 0].max()), 0)
        self.assertEqual(int(frame[:, :4, 0].max()), 0)

    def test_unknown_font_family_falls_back_to_default_font(self) -> None:
        font = FontSpec(family="No Such Ruler Font", size_px=13.0)
        label = TextLabel(position=(4.0, 12.0), anchor=Align2.LEFT_CENTER, text="12s", color=(255, 255, 255, 255), font=font)
        with self.assertLogs("timeruler.raster.draw_text", level="WARNING"):
            frame = render_shapes([label], 80, 24, background=(0, 0, 0, 255))
        self.assertGreater(int(frame[:, :, 0].max()), 0)

    def test_text_size_is_positive(self) -> None:
        w, h = text_size("+500 ms", FONT)
        self.assertGreater(w, 0)
        self.assertGreater(h, 0)

    def test_unknown_shape_rejected(self) -> None:
        with self.assertRaises(TypeError):
            render_shapes([object()], 10, 10)  # type: ignore[list-item]

    def test_rendered_ruler_is_deterministic(self) -> None:
        canvas = Rect(0.0, 0.0, 320.0, 32.0)
        policy = TimeType.TIME.policy
        shapes = paint_ticks(canvas, canvas, TimeRange(0.0, 3.0e9), policy.next_step, policy.format_tick)
        first = render_shapes(shapes, 320, 32)
        second = render_shapes(shapes, 320, 32)
        self.assertTrue(np.array_equal(first, second))
        self.assertGreater(float(first[:, :, :3].std()), 0.0)

    def test_save_png_round_trips_size(self) -> None:
        frame = render_shapes([], 16, 8)
        with tempfile.TemporaryDirectory() as tmp:
            out = save_png(frame, Path(tmp) / "nested" / "ruler.png")
            with Image.open(out) as image:
                self.assertEqual(image.size, (16, 8))
                self.assertEqual(image.mode, "RGBA")


if __name__ == "__main__":
    unittest.main()
