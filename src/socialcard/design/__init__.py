"""Card markup and design."""

from socialcard.design.card import BACKGROUND, CARD_TEMPLATE, TEXT_COLOR, build_card_markup
from socialcard.design.markup import Node, html

__all__ = [
    "BACKGROUND",
    "CARD_TEMPLATE",
    "TEXT_COLOR",
    "Node",
    "build_card_markup",
    "html",
]
