"""CLI interface for the social card renderer."""

import logging
from pathlib import Path

import click

from socialcard.api import create_card_config, render_card_png, render_card_svg
from socialcard.config import load_config
from socialcard.errors import CardError
from socialcard.fonts import FONTS_DIR, fetch_fonts


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def main(verbose: bool) -> None:
    """Render and serve the site's social preview card."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    default=Path("social-card.png"),
    show_default=True,
    help="Output file path.",
)
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config.toml file. Defaults to ./config.toml",
)
@click.option(
    "--svg",
    is_flag=True,
    help="Write the intermediate SVG instead of the PNG.",
)
def render(output: Path, config: Path | None, svg: bool) -> None:
    """Render the card to a file."""
    try:
        card_config = create_card_config(load_config(config))

        if svg:
            output.write_text(render_card_svg(card_config), encoding="utf-8")
        else:
            output.write_bytes(render_card_png(card_config))

        click.echo(f"✓ Card ({card_config.width}x{card_config.height}) saved to: {output}")

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        raise SystemExit(1)
    except CardError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


@main.command()
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to config.toml file. Defaults to ./config.toml",
)
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind.")
@click.option("--port", type=int, default=8000, show_default=True, help="Port to listen on.")
def serve(config: Path | None, host: str, port: int) -> None:
    """Serve the card over HTTP at /social-card.png."""
    import uvicorn

    from socialcard.server import create_app

    try:
        app = create_app(config_path=config)
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    except CardError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    uvicorn.run(app, host=host, port=port)


@main.command("fetch-fonts")
@click.option(
    "--dest",
    type=click.Path(file_okay=False, path_type=Path),
    default=FONTS_DIR,
    show_default=True,
    help="Directory to download the font files into.",
)
def fetch_fonts_command(dest: Path) -> None:
    """Download the Roboto Mono faces used by the card from Google Fonts."""
    try:
        paths = fetch_fonts(dest)
    except CardError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    for path in paths:
        click.echo(f"✓ {path}")


if __name__ == "__main__":
    main()
