"""
FastAPI application for shellbox.

Only the side-effect free utilities are served. Process termination and the
countdown timer block or act on the host, so they stay CLI-only.
"""
import logging

from fastapi import FastAPI

from shellbox import __version__
from shellbox.core.config import load_settings
from shellbox.core.log import configure_logging

from .routers import calendar, text, url

logger = logging.getLogger(__name__)

app = FastAPI(
    title="shellbox API",
    description="Read-only HTTP access to the shellbox utilities",
    version=__version__,
)

app.include_router(url.router)
app.include_router(text.router)
app.include_router(calendar.router)


@app.get("/")
async def root():
    """Root endpoint with API information"""
    return {
        "name": "shellbox API",
        "version": __version__,
        "endpoints": [
            "/url/parse?url=... - URL decomposition",
            "/text/phonetic?text=... - NATO phonetic spelling",
            "/calendar/{year}/{month} - Month layout",
            "/docs - API documentation",
            "/health - Health check",
        ]
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "shellbox"}


def run() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.logging.level, settings.logging.log_file)
    logger.info(f"Starting API server on {settings.api.host}:{settings.api.port}")
    uvicorn.run(app, host=settings.api.host, port=settings.api.port)


if __name__ == "__main__":
    run()
