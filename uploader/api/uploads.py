"""Upload routes — single file and multiple files."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.responses import HTMLResponse

from uploader.dependencies import get_upload_service, templates
from uploader.services.upload_service import UploadService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_class=HTMLResponse)
async def upload_file(
    request: Request,
    file: UploadFile = File(...),
    service: UploadService = Depends(get_upload_service),
):
    try:
        stored = await service.save_upload(file)
    except ValueError as e:
        logger.warning("Rejected upload: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return templates.TemplateResponse(request, "uploaded.html", {"file": stored})


@router.post("/upload-multiple", response_class=HTMLResponse)
async def upload_multiple(
    request: Request,
    files: list[UploadFile] = File(...),
    service: UploadService = Depends(get_upload_service),
):
    try:
        stored = await service.save_multiple(files)
    except ValueError as e:
        logger.warning("Rejected multi-file upload: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return templates.TemplateResponse(request, "uploaded_many.html", {"files": stored})
