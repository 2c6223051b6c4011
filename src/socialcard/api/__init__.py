"""High-level Python API."""

from socialcard.api.builder import create_card_config, render_card_png, render_card_svg

__all__ = [
    "create_card_config",
    "render_card_png",
    "render_card_svg",
]
