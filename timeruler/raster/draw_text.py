from __future__ import annotations

from functools import lru_cache
import logging

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from timeruler.raster.canvas import blend_pixels
from timeruler.shapes import RGBA, Align2, FontSpec


LOGGER = logging.getLogger(__name__)


def text_size(text: str, font: FontSpec) -> tuple[int, int]:
    pil_font = _load_font(font.family, font.size_px)
    if not text:
        ascent, descent = pil_font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    left, top, right, bottom = pil_font.getbbox(text)
    return (max(0, int(right - left)), max(1, int(bottom - top)))


def draw_text(dst: np.ndarray, position: tuple[float, float], anchor: Align2, text: str, color: RGBA, font: FontSpec) -> None:
    """Draw ``text`` so that the ``anchor`` point of its box lands on ``position``."""
    if not text or color[3] == 0:
        return
    mask = _render_mask(text, _load_font(font.family, font.size_px))
    h, w = mask.shape
    x, y = position
    if anchor.horizontal == "center":
        x -= w / 2.0
    elif anchor.horizontal == "right":
        x -= w
    if anchor.vertical == "center":
        y -= h / 2.0
    elif anchor.vertical == "bottom":
        y -= h
    _blend_mask(dst, int(round(x)), int(round(y)), mask, color)


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return
    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    if not np.any(cov > 0):
        return
    blend_pixels(dst[y0:y1, x0:x1], color, cov)


@lru_cache(maxsize=256)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=32)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    # Pillow searches the platform font directories for a bare file name.
    file_name = font_family.replace(" ", "") + ".ttf"
    try:
        return ImageFont.truetype(file_name, size=max(1, int(round(font_size_px))))
    except OSError:
        LOGGER.warning("font %r not found; using the Pillow default font", font_family)
        return ImageFont.load_default()
