"""Exceptions raised by the card rendering pipeline."""


class CardError(Exception):
    """Base class for card rendering failures."""


class FontAssetError(CardError):
    """A font asset is missing, unreadable or not a usable font."""


class MarkupError(CardError):
    """Card markup could not be parsed into a tree."""


class LayoutError(CardError):
    """The layout stage could not lay out or shape the markup."""


class RasterizeError(CardError):
    """The SVG could not be rasterized to the expected image."""
