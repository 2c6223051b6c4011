"""SVG serialization of a laid out box tree."""

from html import escape

from socialcard.layout.engine import Box, TextLine

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def fmt(value: float) -> str:
    """Format a coordinate with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def line_path(line: TextLine) -> str:
    """
    Path data for a line of text with glyph outlines placed on its baseline.

    Args:
        line: Laid out text line.

    Returns:
        SVG path data, empty when the line has no visible glyphs.
    """
    commands = []
    run = line.run
    font = line.font
    scale = font.scale(run.font_size)
    for glyph in run.glyphs:
        origin_x = line.x + glyph.x
        origin_y = line.baseline - glyph.y
        for op, coords in font.outline(glyph.gid):
            if op == "Z":
                commands.append("Z")
                continue
            # Font units are y-up, SVG is y-down
            points = []
            for i in range(0, len(coords), 2):
                points.append(fmt(origin_x + coords[i] * scale))
                points.append(fmt(origin_y - coords[i + 1] * scale))
            commands.append(op + " ".join(points))
    return "".join(commands)


def to_svg(root: Box, width: int, height: int) -> str:
    """
    Serialize a positioned box tree as an SVG document.

    Backgrounds become rects and each line of text one filled path, so the
    document needs no fonts to display.

    Args:
        root: Positioned root box.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        SVG document as a string.
    """
    parts = [
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="{SVG_NAMESPACE}">'
    ]
    for box in root.walk():
        if box.style.background:
            parts.append(
                f'<rect x="{fmt(box.x)}" y="{fmt(box.y)}" width="{fmt(box.width)}" '
                f'height="{fmt(box.height)}" fill="{escape(box.style.background)}"/>'
            )
        for line in box.lines:
            if data := line_path(line):
                parts.append(f'<path d="{data}" fill="{escape(box.style.color)}" fill-rule="nonzero"/>')
    parts.append("</svg>")
    return "".join(parts)
