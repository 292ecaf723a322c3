"""FastAPI app factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from leafid import __version__
from leafid.config import Settings, settings as default_settings
from leafid.controller import ViewController
from leafid.llm.client import AnalysisClient, AnthropicAnalysisClient

load_dotenv()

logging.basicConfig(
    level=getattr(logging, default_settings.leafid_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    if app.state.settings.bootstrap_on_startup:
        await app.state.controller.bootstrap()
    yield


def create_app(
    analysis_client: AnalysisClient | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or default_settings
    client = analysis_client or AnthropicAnalysisClient(settings)

    app = FastAPI(
        title="Leaf Identifier",
        description="Upload a leaf photo for an educational AI description of the leaf and its tree",
        version=__version__,
        lifespan=_lifespan,
    )

    app.state.settings = settings
    app.state.controller = ViewController(client, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from leafid.api.pages import router as pages_router
    from leafid.api.router import api_router

    app.include_router(api_router)
    app.include_router(pages_router)
    app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")

    logger.info("Leaf Identifier %s ready (model=%s)", __version__, settings.model_vision)
    return app


app = create_app()
