"""Raster image helpers using Pillow."""

from io import BytesIO

from PIL import Image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def load_image_from_bytes(image_data: bytes) -> Image.Image:
    """
    Open encoded image bytes (PNG, JPEG, etc.) as a PIL Image.

    Pixel data is decoded lazily on first access.
    """
    return Image.open(BytesIO(image_data))


def save_image_to_bytes(img: Image.Image, format: str = "PNG") -> bytes:
    """
    Encode a PIL Image.

    Pillow writes no timestamps into PNG output, so equal images encode
    to equal bytes.

    Args:
        img: PIL Image object.
        format: Image format (PNG, JPEG, etc.).

    Returns:
        Encoded image bytes.
    """
    buffer = BytesIO()
    img.save(buffer, format=format)
    return buffer.getvalue()


def get_image_dimensions(image_data: bytes) -> tuple[int, int]:
    """(width, height) in pixels, read from the image header."""
    img = load_image_from_bytes(image_data)
    return img.size


def is_png(image_data: bytes) -> bool:
    """Check the PNG file signature."""
    return image_data.startswith(PNG_SIGNATURE)
