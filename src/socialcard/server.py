"""HTTP endpoint serving the social card."""

import logging
from pathlib import Path

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from socialcard import __version__
from socialcard.api import create_card_config, render_card_png
from socialcard.config import CardConfig, load_config

logger = logging.getLogger(__name__)

CARD_PATH = "/social-card.png"

# The card only changes with a redeploy, so caches may keep it forever
CACHE_CONTROL = "public, max-age=31536000, immutable"

router = APIRouter()


@router.get(CARD_PATH)
async def social_card(request: Request) -> Response:
    """
    Render the social card as a PNG.

    Takes no parameters. Rendering runs in the threadpool; any failure
    propagates and becomes a 500.
    """
    card_config: CardConfig = request.app.state.card_config
    png = await run_in_threadpool(render_card_png, card_config)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": CACHE_CONTROL},
    )


def create_app(card_config: CardConfig | None = None, config_path: Path | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    The card configuration (including both fonts) is built here, before the
    app serves anything, so a broken font fails startup.

    Args:
        card_config: Ready card configuration. If None, built from config_path.
        config_path: Path to config.toml, used when card_config is None.

    Returns:
        FastAPI app serving the card at /social-card.png.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        FontAssetError: If a font file is missing or corrupt.
    """
    if card_config is None:
        card_config = create_card_config(load_config(config_path))

    app = FastAPI(title="socialcard", version=__version__)
    app.state.card_config = card_config
    app.include_router(router)
    logger.info(f"Serving social card at {CARD_PATH}")
    return app
