"""Upload form page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from uploader.config import settings
from uploader.dependencies import templates

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def upload_form(request: Request):
    return templates.TemplateResponse(request, "index.html", {"max_files": settings.MAX_FILES})
