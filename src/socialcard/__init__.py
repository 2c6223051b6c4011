"""Social preview card renderer."""

__version__ = "0.1.0"

# High-level Python API
from socialcard.api import create_card_config, render_card_png, render_card_svg
from socialcard.config import CardConfig, Config, FontFace, load_config
from socialcard.design import build_card_markup, html
from socialcard.errors import CardError, FontAssetError, LayoutError, MarkupError, RasterizeError

__all__ = [
    "CardConfig",
    "CardError",
    "Config",
    "FontAssetError",
    "FontFace",
    "LayoutError",
    "MarkupError",
    "RasterizeError",
    "build_card_markup",
    "create_card_config",
    "html",
    "load_config",
    "render_card_png",
    "render_card_svg",
]
