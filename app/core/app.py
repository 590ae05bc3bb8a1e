from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api.main import api_router
from app.services.sources.factory import build_default_adapters

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    app.state.adapters = build_default_adapters()
    logger.info(f"Registered content sources: {[a.name for a in app.state.adapters]}")
    yield
    for adapter in app.state.adapters:
        try:
            await adapter.close()
        except Exception as exc:
            logger.warning(f"Failed to close source '{adapter.name}': {exc}")
    logger.info("Content source clients closed")


app = FastAPI(
    title=settings.APP_NAME,
    description="Personality profiling and personalized recommendations",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
