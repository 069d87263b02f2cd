from __future__ import annotations

import numpy as np

from timeruler.shapes import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blend_pixels(dst: np.ndarray, color: RGBA, coverage: np.ndarray | float = 1.0) -> None:
    """Straight-alpha "over" compositing of ``color`` onto a view of the canvas."""
    a = (color[3] / 255.0) * np.asarray(coverage, dtype=np.float32)
    if np.ndim(a) > 0:
        a = a[..., None]
    rgb = np.asarray(color[0:3], dtype=np.float32)
    dst[..., :3] = (rgb * a + dst[..., :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    dst[..., 3] = 255


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, width: int = 1) -> None:
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    xa = max(0, x - (width - 1) // 2)
    xb = min(dst.shape[1] - 1, x + width // 2)
    if xa > xb:
        return
    blend_pixels(dst[ya : yb + 1, xa : xb + 1], color)


def draw_line(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    if x0 == x1:
        draw_vline(dst, x0, y0, y1, color, width=width)
        return
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        draw_vline(dst, x0, y0, y0, color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
