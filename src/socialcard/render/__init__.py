"""Rendering modules for rasterization and image processing."""

from socialcard.render.image import load_image_from_bytes, save_image_to_bytes
from socialcard.render.raster import svg_to_png

__all__ = [
    "load_image_from_bytes",
    "save_image_to_bytes",
    "svg_to_png",
]
