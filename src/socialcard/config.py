"""Configuration loading and validation."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from socialcard.types import FontStyle

DEFAULT_FONTS_DIR = Path(__file__).parent / "fonts"

# Open Graph image size
CARD_WIDTH = 1200
CARD_HEIGHT = 630


class SiteConfig(BaseModel):
    """Site-wide settings shared with the rest of the site."""

    author: str
    """Display text rendered on the card."""


class FontsConfig(BaseModel):
    """Font assets embedded into the card."""

    family: str = "Roboto Mono"
    """Family name the faces are registered under."""

    regular: Path = DEFAULT_FONTS_DIR / "roboto-mono-regular.ttf"
    """TrueType file for the regular (400) weight."""

    bold: Path = DEFAULT_FONTS_DIR / "roboto-mono-700.ttf"
    """TrueType file for the bold (700) weight."""


class Config(BaseModel):
    """Root configuration."""

    site: SiteConfig
    fonts: FontsConfig = Field(default_factory=FontsConfig)


class FontFace(BaseModel):
    """A single font face held in memory."""

    model_config = ConfigDict(frozen=True)

    name: str
    weight: int = 400
    style: FontStyle = "normal"
    data: bytes = Field(repr=False)


class CardConfig(BaseModel):
    """
    Everything needed to render the card.

    Built once at startup and shared read-only between renders.
    """

    model_config = ConfigDict(frozen=True)

    width: int = CARD_WIDTH
    height: int = CARD_HEIGHT
    fonts: tuple[FontFace, ...]
    author: str


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from TOML file.

    Relative font paths are resolved against the directory holding the config file.

    Args:
        config_path: Path to config file. If None, looks for config.toml in current directory.

    Returns:
        Validated Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = Path.cwd() / "config.toml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.toml.example to config.toml and set the site author."
        )

    with open(config_path, "rb") as f:
        config_dict = tomllib.load(f)

    config = Config(**config_dict)

    base_dir = config_path.parent
    fonts = config.fonts.model_copy(
        update={
            "regular": _resolve_path(config.fonts.regular, base_dir),
            "bold": _resolve_path(config.fonts.bold, base_dir),
        }
    )
    return config.model_copy(update={"fonts": fonts})


def _resolve_path(path: Path, base_dir: Path) -> Path:
    return path if path.is_absolute() else base_dir / path
