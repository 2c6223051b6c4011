"""Layout stage: markup tree to SVG."""

import logging

from socialcard.config import CardConfig
from socialcard.design.markup import Node
from socialcard.layout.engine import Box, TextLine, build_boxes, layout
from socialcard.layout.styles import Style, resolve_style
from socialcard.layout.svg import to_svg
from socialcard.layout.text import FontBook, FontHandle, ShapedRun, wrap_text

logger = logging.getLogger(__name__)


def layout_markup(node: Node, config: CardConfig) -> Box:
    """
    Style, shape and position a markup tree on the card canvas.

    Args:
        node: Root markup node.
        config: Card configuration (fonts and canvas size).

    Returns:
        Positioned root Box.

    Raises:
        LayoutError: If text cannot be shaped with the configured fonts.
    """
    fonts = FontBook(config.fonts)
    root = build_boxes(node, Style(font_family=fonts.default_family), fonts)
    return layout(root, config.width, config.height)


def render_svg(node: Node, config: CardConfig) -> str:
    """
    Lay out a markup tree and serialize it as SVG sized to the card.

    Args:
        node: Root markup node.
        config: Card configuration (fonts and canvas size).

    Returns:
        SVG document with width and height equal to the card size.

    Raises:
        LayoutError: If text cannot be shaped with the configured fonts.
    """
    root = layout_markup(node, config)
    svg = to_svg(root, config.width, config.height)
    logger.debug(f"Laid out <{node.tag}> into {len(svg)} bytes of SVG")
    return svg


__all__ = [
    "Box",
    "FontBook",
    "FontHandle",
    "ShapedRun",
    "Style",
    "TextLine",
    "layout_markup",
    "render_svg",
    "resolve_style",
    "wrap_text",
]
