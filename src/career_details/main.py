"""FastAPI application serving career details"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from career_details.api.career_details import router as career_details_router
from career_details.data import get_content_store, get_progression_store
from career_details.middleware import StructLogMiddleware
from career_details.settings import settings
from career_details.utils.setup_logging import setup_logging

setup_logging()
logger = structlog.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Load the content assets before serving so broken assets fail startup."""
    store = get_content_store()
    progressions = get_progression_store()
    logger.info(
        "Career content ready",
        careers=len(store),
        progressions=len(progressions),
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app.PROJECT_NAME,
        description="Career details: typical day, responsibilities, skills and entry paths",
        version=settings.app.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.add_middleware(StructLogMiddleware)
    app.include_router(career_details_router, tags=["Career Details"])

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
