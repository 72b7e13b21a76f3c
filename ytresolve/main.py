"""
YouTube Link Resolver - FastAPI application entry point.

Resolves YouTube video page URLs (watch pages, short links, embeds,
shorts, live, oEmbed and attribution redirectors) into HLS variant or
progressive links plus subtitle tracks via the InnerTube player API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routes.api import router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("YouTube Link Resolver starting up...")

    settings = get_settings()
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Default client: {settings.default_client}")
    logger.info(f"Resolve timeout: {settings.resolve_timeout}s")

    yield

    logger.info("YouTube Link Resolver shutting down...")


app = FastAPI(
    title="YouTube Link Resolver",
    description=(
        "Resolves YouTube video page URLs into playable HLS or progressive "
        "links and subtitle tracks using the InnerTube player API."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

_origins = [o.strip() for o in get_settings().cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["*"],
    allow_credentials=bool(_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/", tags=["root"])
async def root():
    return {
        "name": "YouTube Link Resolver",
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "resolve": "/api/resolve",
            "clients": "/api/clients",
            "health": "/api/health",
        },
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ytresolve.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
