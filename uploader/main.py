"""
FastAPI application factory — entry point for the upload service.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from uploader.api.router import router
from uploader.config import settings
from uploader.logging_config import setup_logging
from uploader.middleware.error_handler import ErrorHandlerMiddleware, RequestIdMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown hooks."""
    setup_logging(settings.LOG_LEVEL)
    settings.UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    logger.info("Storing uploads in %s, serving assets from %s", settings.UPLOAD_DIR, settings.PUBLIC_DIR)

    yield

    logger.info("Upload service shutting down")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Uploader",
        description="Accepts file uploads and serves them back as static files.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # ── Middleware (last added is outermost) ─────────────
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # ── Routes ───────────────────────────────────────────
    app.include_router(router)

    # ── Static file serving (after routes, root mount last) ──
    app.mount("/uploads", StaticFiles(directory=str(settings.UPLOAD_DIR), check_dir=False), name="uploads")
    if settings.PUBLIC_DIR.exists():
        app.mount("/", StaticFiles(directory=str(settings.PUBLIC_DIR)), name="public")

    return app


app = create_app()


def run():
    import uvicorn

    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "uploader.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_config=None,
    )


if __name__ == "__main__":
    run()
