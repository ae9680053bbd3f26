"""Aggregates all page and upload routers into a single router."""

from fastapi import APIRouter

from uploader.api.health import router as health_router
from uploader.api.pages import router as pages_router
from uploader.api.uploads import router as uploads_router

router = APIRouter()

router.include_router(pages_router)
router.include_router(uploads_router)
router.include_router(health_router)
