"""Text shaping and glyph outlines using HarfBuzz and FreeType."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Iterable, Optional

import freetype
import uharfbuzz as hb

from socialcard.config import FontFace
from socialcard.errors import FontAssetError, LayoutError
from socialcard.types import FontStyle

logger = logging.getLogger(__name__)

# OpenType features applied when shaping
SHAPING_FEATURES = {"kern": True, "liga": True}


@dataclass(frozen=True)
class Glyph:
    """
    A positioned glyph.

    Attributes:
        gid: Glyph index in the font.
        x: Pen position relative to the start of the run, in pixels.
        y: Vertical offset from the baseline, in pixels (positive = up).
    """
    gid: int
    x: float
    y: float


@dataclass(frozen=True)
class ShapedRun:
    """Shaped text at a given size."""

    text: str
    font_size: float
    glyphs: tuple[Glyph, ...]
    width: float


# Outline segment: ("M"|"L", (x, y)), ("Q", (x1, y1, x, y)), ("C", (...)), ("Z", ())
Segment = tuple[str, tuple[float, ...]]


class FontHandle:
    """
    HarfBuzz and FreeType objects for one FontFace.

    Handles are not thread-safe (FreeType glyph slots are mutable), so each
    render builds its own from the shared font bytes.
    """

    def __init__(self, face: FontFace) -> None:
        self.face = face

        hb_face = hb.Face(face.data)
        self.units_per_em = hb_face.upem
        self._hb_font = hb.Font(hb_face)
        self._hb_font.scale = (self.units_per_em, self.units_per_em)

        # FreeType reads lazily from the stream, keep it alive with the face
        self._stream = BytesIO(face.data)
        try:
            self._ft_face = freetype.Face(self._stream)
        except freetype.FT_Exception as e:
            raise FontAssetError(f"Cannot open font {face.name} {face.weight}: {e}") from e

        self.ascender = self._ft_face.ascender
        self.descender = self._ft_face.descender
        self._outlines: dict[int, tuple[Segment, ...]] = {}

    def scale(self, font_size: float) -> float:
        """Pixels per font unit at font_size."""
        return font_size / self.units_per_em

    def missing_characters(self, text: str) -> list[str]:
        """Visible characters of text that the font has no glyph for."""
        return [
            char for char in text
            if not char.isspace() and self._ft_face.get_char_index(ord(char)) == 0
        ]

    def shape(self, text: str, font_size: float) -> ShapedRun:
        """
        Shape text into positioned glyphs.

        Args:
            text: Text to shape (a single line).
            font_size: Font size in pixels.

        Returns:
            ShapedRun with glyph positions in pixels.

        Raises:
            LayoutError: If the font cannot display a character of text.
        """
        if missing := self.missing_characters(text):
            raise LayoutError(
                f"Font {self.face.name} {self.face.weight} has no glyph for "
                f"{''.join(sorted(set(missing)))!r}"
            )

        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        hb.shape(self._hb_font, buf, SHAPING_FEATURES)

        scale = self.scale(font_size)
        glyphs = []
        pen_x = 0.0
        for info, pos in zip(buf.glyph_infos, buf.glyph_positions):
            glyphs.append(Glyph(
                gid=info.codepoint,
                x=(pen_x + pos.x_offset) * scale,
                y=pos.y_offset * scale,
            ))
            pen_x += pos.x_advance

        return ShapedRun(text=text, font_size=font_size, glyphs=tuple(glyphs), width=pen_x * scale)

    def outline(self, gid: int) -> tuple[Segment, ...]:
        """
        Outline of a glyph in font units (y up).

        Args:
            gid: Glyph index.

        Returns:
            Path segments; empty for blank glyphs such as space.
        """
        if gid in self._outlines:
            return self._outlines[gid]

        self._ft_face.load_glyph(gid, freetype.FT_LOAD_NO_SCALE | freetype.FT_LOAD_NO_BITMAP)
        segments: list[Segment] = []

        def move_to(a, ctx):
            if segments:
                segments.append(("Z", ()))
            segments.append(("M", (a.x, a.y)))
            return 0

        def line_to(a, ctx):
            segments.append(("L", (a.x, a.y)))
            return 0

        def conic_to(a, b, ctx):
            segments.append(("Q", (a.x, a.y, b.x, b.y)))
            return 0

        def cubic_to(a, b, c, ctx):
            segments.append(("C", (a.x, a.y, b.x, b.y, c.x, c.y)))
            return 0

        self._ft_face.glyph.outline.decompose(
            None, move_to=move_to, line_to=line_to, conic_to=conic_to, cubic_to=cubic_to
        )
        if segments:
            segments.append(("Z", ()))

        self._outlines[gid] = tuple(segments)
        return self._outlines[gid]


class FontBook:
    """
    The faces available to one render, selected CSS-style.

    Args:
        faces: Font faces from the card configuration (at least one).
    """

    def __init__(self, faces: Iterable[FontFace]) -> None:
        self.faces = tuple(faces)
        if not self.faces:
            raise FontAssetError("No font faces configured")
        self.default_family = self.faces[0].name
        self._handles: dict[FontFace, FontHandle] = {}

    def select(self, family: Optional[str], weight: int, style: FontStyle) -> FontHandle:
        """
        Pick the face closest to the requested family, weight and style.

        Family matches case-insensitively and falls back to every face; then
        the matching style is preferred, then the nearest weight. Between two
        equally near weights, the heavier wins for bold requests (> 500) and
        the lighter otherwise.

        Args:
            family: Requested family, None for the default family.
            weight: Requested CSS weight.
            style: Requested style.

        Returns:
            FontHandle for the chosen face.
        """
        wanted = (family or self.default_family).lower()
        candidates = [face for face in self.faces if face.name.lower() == wanted]
        if not candidates:
            logger.debug(f"No face for family '{family}', using all faces")
            candidates = list(self.faces)

        def distance(face: FontFace) -> tuple[int, int, int]:
            heavier = face.weight > weight
            tie_break = int(heavier) if weight <= 500 else int(not heavier)
            return (int(face.style != style), abs(face.weight - weight), tie_break)

        face = min(candidates, key=distance)
        if face not in self._handles:
            self._handles[face] = FontHandle(face)
        return self._handles[face]


def wrap_text(handle: FontHandle, text: str, font_size: float, max_width: float) -> list[ShapedRun]:
    """
    Break text into shaped lines no wider than max_width.

    Lines break at spaces only; a word wider than max_width gets a line of
    its own and overflows.

    Args:
        handle: Font to shape with.
        text: Whitespace-collapsed text.
        font_size: Font size in pixels.
        max_width: Available line width in pixels.

    Returns:
        Shaped lines, empty for empty text.
    """
    if not text:
        return []

    whole = handle.shape(text, font_size)
    if whole.width <= max_width:
        return [whole]

    lines: list[ShapedRun] = []
    current: Optional[ShapedRun] = None
    for word in text.split(" "):
        candidate = handle.shape(f"{current.text} {word}" if current else word, font_size)
        if current is not None and candidate.width > max_width:
            lines.append(current)
            current = handle.shape(word, font_size)
        else:
            current = candidate
    if current is not None:
        lines.append(current)

    logger.debug(f"Wrapped {text!r} into {len(lines)} line(s) at {max_width:.1f}px")
    return lines
