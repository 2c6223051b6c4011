"""The social card design."""

from socialcard.design.markup import Node, html

BACKGROUND = "#1d1f21"
TEXT_COLOR = "#c9cacc"

CARD_TEMPLATE = f"""
<div tw="flex flex-col w-full h-full bg-[{BACKGROUND}] text-[{TEXT_COLOR}] items-center justify-center">
  <h1 tw="text-6xl font-bold text-white">
    {{{{ author }}}}
  </h1>
</div>
"""


def build_card_markup(author: str) -> Node:
    """
    Build the card's markup tree: the author as a centered bold heading.

    Args:
        author: Display text for the heading.

    Returns:
        Root Node of the card.
    """
    return html(CARD_TEMPLATE, author=author)
