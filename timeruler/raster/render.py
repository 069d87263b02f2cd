from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np
from PIL import Image

from timeruler.raster.canvas import draw_line, new_canvas
from timeruler.raster.draw_text import draw_text
from timeruler.shapes import RGBA, LineSegment, Shape, TextLabel


DARK_BACKGROUND: RGBA = (27, 27, 27, 255)
LIGHT_BACKGROUND: RGBA = (248, 248, 248, 255)


def render_shapes(
    shapes: Iterable[Shape],
    width: int,
    height: int,
    *,
    background: RGBA = DARK_BACKGROUND,
) -> np.ndarray:
    """Rasterize ruler shapes into an HxWx4 uint8 RGBA frame, in the order given."""
    canvas = new_canvas(width, height, color=background)
    for shape in shapes:
        if isinstance(shape, LineSegment):
            if shape.color[3] == 0:
                continue
            (x0, y0), (x1, y1) = shape.p0, shape.p1
            draw_line(
                canvas,
                int(round(x0)),
                int(round(y0)),
                int(round(x1)),
                int(round(y1)),
                shape.color,
                width=max(1, int(round(shape.stroke_width))),
            )
        elif isinstance(shape, TextLabel):
            draw_text(canvas, shape.position, shape.anchor, shape.text, shape.color, shape.font)
        else:
            raise TypeError(f"unsupported shape: {type(shape).__name__}")
    return canvas


def save_png(frame: np.ndarray, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(frame).save(out)
    return out
