"""FastAPI application for the Golf Scorecard Sync service."""

import logging
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, GOOGLE_CLIENT_SECRETS_FILE, LOG_LEVEL
from llm.scorecard_extractor import GeminiScorecardExtractor
from session.controller import ScorecardController
from session.intake import TempFilePreviewStore
from sheets.auth import OAuthTokenFlow
from sheets.client import GoogleSheetsClient, NullSheetSyncClient

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("api.main")


def build_controller() -> ScorecardController:
    """Wire the production components together."""
    if GOOGLE_CLIENT_SECRETS_FILE.exists():
        sheets = GoogleSheetsClient(OAuthTokenFlow(GOOGLE_CLIENT_SECRETS_FILE))
    else:
        logger.warning(
            "No OAuth client secrets at %s; saving to Google Sheets is disabled",
            GOOGLE_CLIENT_SECRETS_FILE,
        )
        sheets = NullSheetSyncClient()
    return ScorecardController(
        extractor=GeminiScorecardExtractor(),
        sheets=sheets,
        previews=TempFilePreviewStore(),
    )


def create_app(controller_factory: Callable[[], ScorecardController] = build_controller) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Start the session controller; release its preview on shutdown."""
        controller = controller_factory()
        await controller.start()
        app.state.controller = controller
        yield
        controller.close()

    app = FastAPI(
        title="Golf Scorecard Sync",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import scan, sheets
    app.include_router(scan.router, prefix="/api/scan", tags=["scan"])
    app.include_router(sheets.router, prefix="/api/sheets", tags=["sheets"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
