"""Font asset loading and management."""

import logging
from io import BytesIO
from pathlib import Path

import freetype

from socialcard.config import DEFAULT_FONTS_DIR, FontFace, FontsConfig
from socialcard.errors import FontAssetError
from socialcard.fonts.google import get_google_font
from socialcard.types import FontStyle

logger = logging.getLogger(__name__)

FONTS_DIR = DEFAULT_FONTS_DIR

# Weight -> file name of the faces shipped with the card
FONT_FILES: dict[int, str] = {
    400: "roboto-mono-regular.ttf",
    700: "roboto-mono-700.ttf",
}


def load_font_face(path: Path, name: str, weight: int = 400, style: FontStyle = "normal") -> FontFace:
    """
    Read a TrueType file into memory as a FontFace.

    The bytes are opened with FreeType once so a corrupt file fails here,
    at startup, and not on the first render.

    Args:
        path: Path to the font file.
        name: Family name to register the face under.
        weight: CSS weight of the face (100-900).
        style: "normal" or "italic".

    Returns:
        FontFace holding the raw font bytes.

    Raises:
        FontAssetError: If the file is missing, unreadable or not a font.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FontAssetError(f"Cannot read font file {path}: {e}") from e

    try:
        face = freetype.Face(BytesIO(data))
    except freetype.FT_Exception as e:
        raise FontAssetError(f"Not a usable font file {path}: {e}") from e

    logger.info(
        f"Loaded font: {name} {weight} {style} from {path.name} "
        f"({face.num_glyphs} glyphs, {len(data)} bytes)"
    )
    return FontFace(name=name, weight=weight, style=style, data=data)


def load_font_faces(fonts: FontsConfig) -> tuple[FontFace, ...]:
    """
    Load the regular and bold faces named in the fonts configuration.

    Args:
        fonts: Fonts configuration.

    Returns:
        Tuple of (regular, bold) FontFace objects.

    Raises:
        FontAssetError: If either face cannot be loaded.
    """
    return (
        load_font_face(fonts.regular, fonts.family, weight=400),
        load_font_face(fonts.bold, fonts.family, weight=700),
    )


def fetch_fonts(dest_dir: Path = FONTS_DIR, family: str = "Roboto Mono") -> list[Path]:
    """
    Download the card's font faces from Google Fonts.

    Args:
        dest_dir: Directory to write the TTF files into.
        family: Google Fonts family name.

    Returns:
        Paths of the faces that are now present.

    Raises:
        FontAssetError: If any face could not be downloaded.
    """
    paths = []
    for weight, filename in FONT_FILES.items():
        path = get_google_font(family, weight, dest_dir / filename)
        if path is None:
            raise FontAssetError(f"Could not download {family} (weight {weight}) from Google Fonts")
        paths.append(path)
    return paths
