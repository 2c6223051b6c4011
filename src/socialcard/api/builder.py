"""High-level API for programmatic card rendering."""

import logging

from socialcard.config import CardConfig, Config
from socialcard.design import build_card_markup
from socialcard.fonts import load_font_faces
from socialcard.layout import render_svg
from socialcard.render import svg_to_png

logger = logging.getLogger(__name__)


def create_card_config(config: Config) -> CardConfig:
    """
    Build the immutable card configuration from the site configuration.

    Reads both font files into memory; call once at startup.

    Args:
        config: Site configuration (from load_config()).

    Returns:
        CardConfig shared read-only by every render.

    Raises:
        FontAssetError: If a font file is missing or corrupt.

    Example:
        ```python
        from socialcard import create_card_config, load_config, render_card_png

        card_config = create_card_config(load_config())
        png = render_card_png(card_config)
        ```
    """
    fonts = load_font_faces(config.fonts)
    card_config = CardConfig(fonts=fonts, author=config.site.author)
    logger.info(
        f"Card configured: {card_config.width}x{card_config.height}, "
        f"{len(fonts)} font face(s), author {card_config.author!r}"
    )
    return card_config


def render_card_svg(config: CardConfig) -> str:
    """
    Render the card as SVG.

    Args:
        config: Card configuration.

    Returns:
        SVG document sized to the card.

    Raises:
        LayoutError: If the author cannot be shaped with the configured fonts.
    """
    markup = build_card_markup(config.author)
    return render_svg(markup, config)


def render_card_png(config: CardConfig) -> bytes:
    """
    Render the card as PNG.

    The markup is rebuilt on every call; nothing is cached between renders.

    Args:
        config: Card configuration.

    Returns:
        PNG bytes, config.width x config.height pixels.

    Raises:
        LayoutError: If the author cannot be shaped with the configured fonts.
        RasterizeError: If the SVG cannot be rasterized.
    """
    svg = render_card_svg(config)
    return svg_to_png(svg, config.width, config.height)
