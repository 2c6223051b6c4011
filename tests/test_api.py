import pytest

from socialcard import (
    CardConfig,
    FontAssetError,
    LayoutError,
    create_card_config,
    load_config,
    render_card_png,
    render_card_svg,
)
from socialcard.render import load_image_from_bytes
from socialcard.render.image import get_image_dimensions, is_png

BACKGROUND_RGB = (0x1D, 0x1F, 0x21)
WHITE = (255, 255, 255)


def test_render_card_png_size(card_config):
    png = render_card_png(card_config)

    assert is_png(png)
    assert get_image_dimensions(png) == (1200, 630)


def test_render_card_png_is_deterministic(card_config):
    assert render_card_png(card_config) == render_card_png(card_config)


def test_jane_doe_card_pixels(card_config):
    img = load_image_from_bytes(render_card_png(card_config)).convert("RGB")

    # Background in the corners
    for xy in [(0, 0), (1199, 0), (0, 629), (1199, 629)]:
        assert img.getpixel(xy) == BACKGROUND_RGB

    # White heading strokes around the center, nothing white near the edges
    center = img.crop((300, 255, 900, 375))
    assert WHITE in {color for _, color in center.getcolors(maxcolors=1 << 16)}
    top = img.crop((0, 0, 1200, 200))
    assert top.getcolors() == [(1200 * 200, BACKGROUND_RGB)]


def test_empty_author_renders_background(card_config):
    config = card_config.model_copy(update={"author": ""})

    img = load_image_from_bytes(render_card_png(config)).convert("RGB")

    assert img.size == (1200, 630)
    assert img.getcolors() == [(1200 * 630, BACKGROUND_RGB)]


def test_render_card_svg(card_config):
    svg = render_card_svg(card_config)

    assert svg.startswith("<svg")
    assert 'width="1200" height="630"' in svg


def test_unshapeable_author_fails(card_config):
    config = card_config.model_copy(update={"author": "漢字"})

    with pytest.raises(LayoutError):
        render_card_png(config)


def test_create_card_config_from_file(config_file, font_faces):
    card_config = create_card_config(load_config(config_file))

    assert card_config.author == "Jane Doe"
    assert (card_config.width, card_config.height) == (1200, 630)
    assert [face.weight for face in card_config.fonts] == [400, 700]
    assert card_config.fonts[0].data == font_faces[0].data


def test_card_config_is_frozen(card_config):
    with pytest.raises(ValueError):
        card_config.author = "Someone Else"


def test_missing_font_fails_startup(write_config, tmp_path):
    config_file = write_config(bold=tmp_path / "Missing.ttf")

    with pytest.raises(FontAssetError, match="Missing.ttf"):
        create_card_config(load_config(config_file))


def test_corrupt_font_fails_startup(write_config, tmp_path):
    corrupt = tmp_path / "corrupt.ttf"
    corrupt.write_bytes(b"definitely not a font")
    config_file = write_config(regular=corrupt)

    with pytest.raises(FontAssetError, match="corrupt.ttf"):
        create_card_config(load_config(config_file))


def test_card_config_requires_fonts():
    with pytest.raises(ValueError):
        CardConfig(author="Jane Doe")
