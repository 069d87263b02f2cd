from .canvas import blend_pixels, draw_line, draw_vline, new_canvas
from .draw_text import draw_text, text_size
from .render import DARK_BACKGROUND, LIGHT_BACKGROUND, render_shapes, save_png

__all__ = [
    "DARK_BACKGROUND",
    "LIGHT_BACKGROUND",
    "blend_pixels",
    "draw_line",
    "draw_text",
    "draw_vline",
    "new_canvas",
    "render_shapes",
    "save_png",
    "text_size",
]
