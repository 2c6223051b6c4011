"""Flexbox layout of a markup tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from socialcard.design.markup import Node
from socialcard.layout.styles import Style, inherit, resolve_style
from socialcard.layout.text import FontBook, FontHandle, ShapedRun, wrap_text

logger = logging.getLogger(__name__)

TEXT_TAG = "#text"


@dataclass
class TextLine:
    """A laid out line of text."""

    run: ShapedRun
    font: FontHandle
    x: float
    baseline: float


@dataclass
class Box:
    """
    A box in the layout tree.

    Element boxes are flex containers; text boxes are leaves holding one run
    of text. Geometry is the border box in canvas pixels.
    """

    tag: str
    style: Style
    text: str = ""
    font: Optional[FontHandle] = None
    children: list[Box] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    lines: list[TextLine] = field(default_factory=list)
    # Per-pass caches keyed by available size and wrap width
    measured: dict[tuple[float, float], tuple[float, float]] = field(
        default_factory=dict, repr=False, compare=False
    )
    wrapped: dict[float, list[ShapedRun]] = field(default_factory=dict, repr=False, compare=False)

    @property
    def is_text(self) -> bool:
        return self.tag == TEXT_TAG

    def walk(self):
        """Yield this box and its descendants in paint order."""
        yield self
        for child in self.children:
            yield from child.walk()


def build_boxes(node: Node, parent: Style, fonts: FontBook) -> Box:
    """
    Turn a markup node into a styled box tree.

    Args:
        node: Markup node.
        parent: Computed style of the parent.
        fonts: Faces text boxes are shaped with.

    Returns:
        Root Box with computed styles (not yet positioned).
    """
    style = resolve_style(node.tag, node.classes, parent)
    box = Box(tag=node.tag, style=style)
    for child in node.children:
        if isinstance(child, str):
            text_style = inherit(style)
            font = fonts.select(text_style.font_family, text_style.font_weight, text_style.font_style)
            box.children.append(Box(tag=TEXT_TAG, style=text_style, text=child, font=font))
        else:
            box.children.append(build_boxes(child, style, fonts))
    return box


def layout(root: Box, width: float, height: float) -> Box:
    """
    Position every box of the tree inside a width x height canvas.

    Args:
        root: Root box from build_boxes.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        The same root box, positioned.
    """
    margin = root.style.margin
    avail_w = width - margin[1] - margin[3]
    avail_h = height - margin[0] - margin[2]
    root_w, root_h = _measure(root, avail_w, avail_h)
    _place(root, margin[3], margin[0], root_w, root_h)
    logger.debug(f"Laid out <{root.tag}> at {root_w:.0f}x{root_h:.0f} on a {width}x{height} canvas")
    return root


def _definite(size: Optional[float], full: bool, available: float) -> Optional[float]:
    if full:
        return available
    return size


def _horizontal(edges: tuple[float, float, float, float]) -> float:
    return edges[1] + edges[3]


def _vertical(edges: tuple[float, float, float, float]) -> float:
    return edges[0] + edges[2]


def _text_lines(box: Box, max_width: float) -> list[ShapedRun]:
    runs = box.wrapped.get(max_width)
    if runs is None:
        runs = box.wrapped[max_width] = wrap_text(box.font, box.text, box.style.font_size, max_width)
    return runs


def _measure(box: Box, avail_w: float, avail_h: float) -> tuple[float, float]:
    """Preferred border-box size of box given the space its parent offers."""
    cached = box.measured.get((avail_w, avail_h))
    if cached is not None:
        return cached

    style = box.style
    fixed_w = _definite(style.width, style.width_full, avail_w)
    fixed_h = _definite(style.height, style.height_full, avail_h)
    inner_w = (fixed_w if fixed_w is not None else avail_w) - _horizontal(style.padding)
    inner_h = (fixed_h if fixed_h is not None else avail_h) - _vertical(style.padding)

    if box.is_text:
        runs = _text_lines(box, inner_w)
        content_w = max((run.width for run in runs), default=0.0)
        content_h = len(runs) * style.line_height_px
    else:
        sizes = [
            _measure(child, inner_w - _horizontal(child.style.margin), inner_h - _vertical(child.style.margin))
            for child in box.children
        ]
        outer = [
            (w + _horizontal(child.style.margin), h + _vertical(child.style.margin))
            for child, (w, h) in zip(box.children, sizes)
        ]
        if style.flex_direction == "column":
            content_w = max((w for w, _ in outer), default=0.0)
            content_h = sum(h for _, h in outer)
        else:
            content_w = sum(w for w, _ in outer)
            content_h = max((h for _, h in outer), default=0.0)

    width = fixed_w if fixed_w is not None else content_w + _horizontal(style.padding)
    height = fixed_h if fixed_h is not None else content_h + _vertical(style.padding)
    box.measured[(avail_w, avail_h)] = (width, height)
    return width, height


def _place(box: Box, x: float, y: float, width: float, height: float) -> None:
    """Assign geometry to box and lay out its content."""
    box.x, box.y, box.width, box.height = x, y, width, height

    style = box.style
    inner_x = x + style.padding[3]
    inner_y = y + style.padding[0]
    inner_w = width - _horizontal(style.padding)
    inner_h = height - _vertical(style.padding)

    if box.is_text:
        _place_text(box, inner_x, inner_y, inner_w)
        return

    column = style.flex_direction == "column"
    inner_main, inner_cross = (inner_h, inner_w) if column else (inner_w, inner_h)

    items = []
    for child in box.children:
        margin = child.style.margin
        margin_w, margin_h = _horizontal(margin), _vertical(margin)
        child_w, child_h = _measure(child, inner_w - margin_w, inner_h - margin_h)

        if style.align_items == "stretch":
            if column and child.style.width is None and not child.style.width_full:
                child_w = inner_w - margin_w
            elif not column and child.style.height is None and not child.style.height_full:
                child_h = inner_h - margin_h

        if column:
            main, cross = child_h, child_w
            main_before, main_after = margin[0], margin[2]
            cross_before, cross_after = margin[3], margin[1]
        else:
            main, cross = child_w, child_h
            main_before, main_after = margin[3], margin[1]
            cross_before, cross_after = margin[0], margin[2]
        items.append((child, main, cross, main_before, main_after, cross_before, cross_after))

    used = sum(main + before + after for _, main, _, before, after, _, _ in items)
    offset, gap = _justify(style.justify_content, inner_main - used, len(items))

    cursor = offset
    for child, main, cross, main_before, main_after, cross_before, cross_after in items:
        cursor += main_before
        free_cross = inner_cross - cross - cross_before - cross_after
        if style.align_items == "center":
            cross_pos = cross_before + free_cross / 2
        elif style.align_items == "flex-end":
            cross_pos = cross_before + free_cross
        else:
            cross_pos = cross_before

        if column:
            _place(child, inner_x + cross_pos, inner_y + cursor, cross, main)
        else:
            _place(child, inner_x + cursor, inner_y + cross_pos, main, cross)
        cursor += main + main_after + gap


def _justify(justify: str, free: float, count: int) -> tuple[float, float]:
    """Leading offset and gap between items along the main axis."""
    if justify == "center":
        return free / 2, 0.0
    if justify == "flex-end":
        return free, 0.0
    if justify == "space-between" and count > 1 and free > 0:
        return 0.0, free / (count - 1)
    if justify == "space-around" and count > 0 and free > 0:
        gap = free / count
        return gap / 2, gap
    return 0.0, 0.0


def _place_text(box: Box, x: float, y: float, width: float) -> None:
    """Break the text box into lines and position their baselines."""
    style = box.style
    font = box.font
    scale = font.scale(style.font_size)
    line_height = style.line_height_px
    # Half-leading centers the font's ascent + descent inside the line box
    half_leading = (line_height - (font.ascender - font.descender) * scale) / 2

    box.lines = []
    for index, run in enumerate(_text_lines(box, width)):
        if style.text_align == "center":
            line_x = x + (width - run.width) / 2
        elif style.text_align == "right":
            line_x = x + width - run.width
        else:
            line_x = x
        baseline = y + index * line_height + half_leading + font.ascender * scale
        box.lines.append(TextLine(run=run, font=font, x=line_x, baseline=baseline))
