"""FastAPI Application Entry Point.

Configures the app, lifespan, CORS, and includes all route modules.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from figma_codegen import config
from figma_codegen.logging_config import get_api_logger

logger = logging.getLogger("figma_codegen.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and warn about optional integrations."""
    get_api_logger()
    if not config.FIGMA_TOKEN:
        logger.warning(
            "FIGMA_TOKEN not set — /api/v2/figma endpoints that fetch from Figma will be "
            "unavailable. Set FIGMA_TOKEN in .env or environment to enable them."
        )
    yield


app = FastAPI(title="Figma Codegen API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from .routes.figma import router as figma_router  # noqa: E402

app.include_router(figma_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn on API_HOST:API_PORT."""
    import uvicorn

    uvicorn.run("app.main:app", host=config.API_HOST, port=config.API_PORT)
