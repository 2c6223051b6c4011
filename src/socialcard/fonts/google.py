"""Google Fonts downloader."""

import logging
import re
from pathlib import Path
from typing import Optional

import requests

logger = logging.getLogger(__name__)

CSS_API_URL = "https://fonts.googleapis.com/css"


def get_google_font(family: str, weight: int, dest_path: Path) -> Optional[Path]:
    """
    Download a Google Font face to dest_path.

    An existing file at dest_path is reused without downloading.

    Args:
        family: Font family name (e.g., "Roboto Mono").
        weight: Font weight (e.g., 400 for regular, 700 for bold).
        dest_path: Where to write the TTF file.

    Returns:
        Path to the TTF file, or None if download failed.
    """
    if dest_path.exists():
        logger.info(f"Using existing font file: {dest_path.name}")
        return dest_path

    dest_path.parent.mkdir(parents=True, exist_ok=True)

    # Format: https://fonts.googleapis.com/css?family=Roboto+Mono:700&display=swap
    font_url = f"{CSS_API_URL}?family={family.replace(' ', '+')}:{weight}&display=swap"

    try:
        logger.info(f"Downloading Google Font: {family} (weight {weight})")

        # CSS API v1 answers plain clients with TTF URLs
        css_response = requests.get(font_url, timeout=10)
        css_response.raise_for_status()

        font_file_url = _extract_font_url_from_css(css_response.text)
        if not font_file_url:
            logger.error(f"Failed to extract font URL from CSS for {family}")
            return None

        font_response = requests.get(font_file_url, timeout=30)
        font_response.raise_for_status()

        dest_path.write_bytes(font_response.content)
        logger.info(f"Downloaded Google Font to {dest_path}")

        return dest_path

    except requests.RequestException as e:
        logger.error(f"Failed to download Google Font {family} (weight {weight}): {e}")
        return None


def _extract_font_url_from_css(css_content: str) -> Optional[str]:
    """
    Extract the font file URL from Google Fonts CSS.

    Args:
        css_content: CSS content from Google Fonts API.

    Returns:
        URL to the font file (TTF), or None if not found.
    """
    url_pattern = r'src:\s*url\((https://[^)]+\.ttf)\)'

    match = re.search(url_pattern, css_content)
    if match:
        return match.group(1)

    # Any TTF URL in the stylesheet
    ttf_pattern = r'(https://[^\s\'"]+\.ttf)'
    match = re.search(ttf_pattern, css_content)
    if match:
        return match.group(1)

    return None
