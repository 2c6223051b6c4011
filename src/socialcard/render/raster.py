"""SVG rasterization using CairoSVG."""

import logging
from xml.etree.ElementTree import ParseError

import cairosvg

from socialcard.errors import RasterizeError
from socialcard.render.image import load_image_from_bytes, save_image_to_bytes

logger = logging.getLogger(__name__)


def svg_to_png(svg: str, width: int, height: int) -> bytes:
    """
    Rasterize an SVG document to PNG.

    The document is drawn at its own size (one user unit per pixel) and
    flattened to opaque RGB. Cairo draws the same pixels for the same
    document, so equal SVGs give equal PNG bytes.

    Args:
        svg: SVG document.
        width: Expected image width in pixels.
        height: Expected image height in pixels.

    Returns:
        PNG-encoded image bytes.

    Raises:
        RasterizeError: If the SVG cannot be parsed or drawn, or the image
            does not come out at width x height.
    """
    try:
        drawn = cairosvg.svg2png(bytestring=svg.encode("utf-8"))
    except (ParseError, ValueError) as e:
        raise RasterizeError(f"Malformed SVG: {e}") from e

    img = load_image_from_bytes(drawn)
    if img.size != (width, height):
        raise RasterizeError(f"Rasterized image is {img.size[0]}x{img.size[1]}, expected {width}x{height}")

    png = save_image_to_bytes(img.convert("RGB"), "PNG")
    logger.debug(f"Rasterized {width}x{height} image into {len(png)} bytes of PNG")
    return png
