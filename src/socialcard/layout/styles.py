"""Utility-class styling for markup nodes."""

import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Optional

from socialcard.types import AlignItems, Edges, FlexDirection, FontStyle, JustifyContent, TextAlign

logger = logging.getLogger(__name__)

# Spacing scale step in pixels (p-4 = 16px)
SPACING_UNIT = 4.0

# Line height used for "normal"
NORMAL_LINE_HEIGHT = 1.2

# text-<size>: (font size px, line height multiplier)
FONT_SIZES: dict[str, tuple[float, float]] = {
    "xs": (12.0, 16 / 12),
    "sm": (14.0, 20 / 14),
    "base": (16.0, 24 / 16),
    "lg": (18.0, 28 / 18),
    "xl": (20.0, 28 / 20),
    "2xl": (24.0, 32 / 24),
    "3xl": (30.0, 36 / 30),
    "4xl": (36.0, 40 / 36),
    "5xl": (48.0, 1.0),
    "6xl": (60.0, 1.0),
    "7xl": (72.0, 1.0),
    "8xl": (96.0, 1.0),
    "9xl": (128.0, 1.0),
}

FONT_WEIGHTS: dict[str, int] = {
    "thin": 100,
    "extralight": 200,
    "light": 300,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "extrabold": 800,
    "black": 900,
}

LINE_HEIGHTS: dict[str, float] = {
    "none": 1.0,
    "tight": 1.25,
    "snug": 1.375,
    "normal": 1.5,
    "relaxed": 1.625,
    "loose": 2.0,
}

NAMED_COLORS: dict[str, Optional[str]] = {
    "white": "#ffffff",
    "black": "#000000",
    "transparent": None,
}

ALIGN_ITEMS: dict[str, AlignItems] = {
    "items-start": "flex-start",
    "items-center": "center",
    "items-end": "flex-end",
    "items-stretch": "stretch",
}

JUSTIFY_CONTENT: dict[str, JustifyContent] = {
    "justify-start": "flex-start",
    "justify-center": "center",
    "justify-end": "flex-end",
    "justify-between": "space-between",
    "justify-around": "space-around",
}

# Spacing prefix -> indices into (top, right, bottom, left)
SPACING_SIDES: dict[str, tuple[int, ...]] = {
    "": (0, 1, 2, 3),
    "x": (1, 3),
    "y": (0, 2),
    "t": (0,),
    "r": (1,),
    "b": (2,),
    "l": (3,),
}

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_ARBITRARY = re.compile(r"^(?P<prefix>[a-z-]+)-\[(?P<value>[^\]]+)\]$")
_SPACING = re.compile(r"^(?P<kind>[pm])(?P<side>[xytrbl]?)-(?P<value>\d+(?:\.\d+)?|\[\d+(?:\.\d+)?px\])$")
_SIZE = re.compile(r"^(?P<axis>[wh])-(?P<value>full|\d+(?:\.\d+)?|\[\d+(?:\.\d+)?px\])$")


@dataclass(frozen=True)
class Style:
    """
    Computed style of a box.

    The first block of fields is inherited by children; the rest applies to
    the box itself. Lengths are in pixels.
    """

    # Inherited
    color: str = "#000000"
    font_family: Optional[str] = None
    font_size: float = 16.0
    line_height: float = NORMAL_LINE_HEIGHT
    font_weight: int = 400
    font_style: FontStyle = "normal"
    text_align: TextAlign = "left"

    # Box
    flex_direction: FlexDirection = "row"
    align_items: AlignItems = "stretch"
    justify_content: JustifyContent = "flex-start"
    width: Optional[float] = None
    height: Optional[float] = None
    width_full: bool = False
    height_full: bool = False
    padding: Edges = (0.0, 0.0, 0.0, 0.0)
    margin: Edges = (0.0, 0.0, 0.0, 0.0)
    background: Optional[str] = None

    @property
    def line_height_px(self) -> float:
        return self.font_size * self.line_height


INHERITED = (
    "color",
    "font_family",
    "font_size",
    "line_height",
    "font_weight",
    "font_style",
    "text_align",
)


@dataclass(frozen=True)
class TagPreset:
    """Browser default styling for an element."""

    font_scale: float = 1.0
    font_weight: Optional[int] = None
    font_style: Optional[FontStyle] = None
    margin_em: float = 0.0


TAG_PRESETS: dict[str, TagPreset] = {
    "h1": TagPreset(font_scale=2.0, font_weight=700, margin_em=0.67),
    "h2": TagPreset(font_scale=1.5, font_weight=700, margin_em=0.83),
    "h3": TagPreset(font_scale=1.17, font_weight=700, margin_em=1.0),
    "p": TagPreset(margin_em=1.0),
    "b": TagPreset(font_weight=700),
    "strong": TagPreset(font_weight=700),
    "i": TagPreset(font_style="italic"),
    "em": TagPreset(font_style="italic"),
}


def inherit(parent: Style) -> Style:
    """Fresh style carrying only the inherited properties of parent."""
    return Style(**{name: getattr(parent, name) for name in INHERITED})


def resolve_style(tag: str, classes: tuple[str, ...], parent: Style) -> Style:
    """
    Compute the style of an element.

    Order: inherited properties, then the element's preset, then its classes
    left to right. Preset margins are in em of the element's final font size
    and only apply when no margin class is given.

    Args:
        tag: Element name.
        classes: Utility classes on the element.
        parent: Computed style of the parent (or root defaults).

    Returns:
        Computed Style.
    """
    style = inherit(parent)

    preset = TAG_PRESETS.get(tag)
    if preset:
        style = replace(
            style,
            font_size=style.font_size * preset.font_scale,
            font_weight=preset.font_weight or style.font_weight,
            font_style=preset.font_style or style.font_style,
        )

    margin_set = False
    for cls in classes:
        update = parse_class(cls, style)
        if update is None:
            logger.warning(f"Ignoring unsupported class '{cls}' on <{tag}>")
            continue
        margin_set = margin_set or "margin" in update
        style = replace(style, **update)

    if preset and preset.margin_em and not margin_set:
        margin = preset.margin_em * style.font_size
        style = replace(style, margin=(margin, 0.0, margin, 0.0))

    return style


def parse_class(cls: str, style: Style) -> Optional[dict[str, Any]]:
    """
    Translate one utility class into style field updates.

    Args:
        cls: Class name (e.g., "text-6xl", "bg-[#1d1f21]").
        style: Style the class is applied on top of.

    Returns:
        Mapping of Style field names to values, or None if unsupported.
    """
    if cls == "flex":
        return {}
    if cls == "flex-col":
        return {"flex_direction": "column"}
    if cls == "flex-row":
        return {"flex_direction": "row"}
    if cls in ALIGN_ITEMS:
        return {"align_items": ALIGN_ITEMS[cls]}
    if cls in JUSTIFY_CONTENT:
        return {"justify_content": JUSTIFY_CONTENT[cls]}
    if cls in ("text-left", "text-center", "text-right"):
        return {"text_align": cls.removeprefix("text-")}
    if cls == "italic":
        return {"font_style": "italic"}
    if cls == "not-italic":
        return {"font_style": "normal"}

    prefix, _, suffix = cls.partition("-")

    if prefix == "text" and suffix in FONT_SIZES:
        size, line_height = FONT_SIZES[suffix]
        return {"font_size": size, "line_height": line_height}
    if prefix in ("text", "bg") and suffix in NAMED_COLORS:
        color = NAMED_COLORS[suffix]
        if prefix == "bg":
            return {"background": color}
        return {"color": color} if color else None
    if prefix == "font" and suffix in FONT_WEIGHTS:
        return {"font_weight": FONT_WEIGHTS[suffix]}
    if prefix == "leading" and suffix in LINE_HEIGHTS:
        return {"line_height": LINE_HEIGHTS[suffix]}
    if prefix == "leading" and _is_number(suffix):
        return {"line_height": float(suffix) * SPACING_UNIT / style.font_size}

    if match := _SPACING.match(cls):
        value = _length(match["value"])
        edges = list(style.padding if match["kind"] == "p" else style.margin)
        for index in SPACING_SIDES[match["side"]]:
            edges[index] = value
        return {"padding" if match["kind"] == "p" else "margin": tuple(edges)}

    if match := _SIZE.match(cls):
        axis = "width" if match["axis"] == "w" else "height"
        if match["value"] == "full":
            return {f"{axis}_full": True, axis: None}
        return {axis: _length(match["value"]), f"{axis}_full": False}

    if match := _ARBITRARY.match(cls):
        return _parse_arbitrary(match["prefix"], match["value"])

    return None


def _parse_arbitrary(prefix: str, value: str) -> Optional[dict[str, Any]]:
    """Classes with a bracketed value, e.g. text-[#c9cacc], text-[42px], font-[Roboto_Mono]."""
    if prefix == "bg" and _HEX_COLOR.match(value):
        return {"background": value.lower()}
    if prefix == "text" and _HEX_COLOR.match(value):
        return {"color": value.lower()}
    if prefix == "text" and value.endswith("px") and _is_number(value[:-2]):
        return {"font_size": float(value[:-2])}
    if prefix == "font":
        # Underscores stand in for spaces inside class names
        return {"font_family": value.replace("_", " ").strip("'\"")}
    return None


def _length(value: str) -> float:
    if value.startswith("["):
        return float(value[1:-3])
    return float(value) * SPACING_UNIT


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True

