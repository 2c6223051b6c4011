from pathlib import Path

import pytest
import reportlab

from socialcard.config import CardConfig
from socialcard.fonts import load_font_face

# Bitstream Vera ships with ReportLab, so tests need no network or system fonts
VERA_DIR = Path(reportlab.__file__).parent / "fonts"
VERA_REGULAR = VERA_DIR / "Vera.ttf"
VERA_BOLD = VERA_DIR / "VeraBd.ttf"
VERA_FAMILY = "Bitstream Vera Sans"


@pytest.fixture(scope="session")
def font_faces():
    return (
        load_font_face(VERA_REGULAR, VERA_FAMILY, weight=400),
        load_font_face(VERA_BOLD, VERA_FAMILY, weight=700),
    )


@pytest.fixture
def card_config(font_faces):
    return CardConfig(fonts=font_faces, author="Jane Doe")


@pytest.fixture
def write_config(tmp_path):
    """Factory writing a config.toml, by default pointing at the Vera fonts."""

    def write(author="Jane Doe", regular=VERA_REGULAR, bold=VERA_BOLD):
        path = tmp_path / "config.toml"
        path.write_text(
            "[site]\n"
            f'author = "{author}"\n'
            "\n"
            "[fonts]\n"
            f'family = "{VERA_FAMILY}"\n'
            f'regular = "{Path(regular).as_posix()}"\n'
            f'bold = "{Path(bold).as_posix()}"\n'
        )
        return path

    return write


@pytest.fixture
def config_file(write_config):
    return write_config()
