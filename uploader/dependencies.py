"""FastAPI dependency injection — templates, storage, upload service."""

from fastapi import Depends
from fastapi.templating import Jinja2Templates

from uploader.config import settings
from uploader.services.upload_service import UploadService
from uploader.utils.storage import LocalStorage, get_storage

templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))


def get_upload_service(storage: LocalStorage = Depends(get_storage)) -> UploadService:
    return UploadService(storage)
