"""Upload service — validate uploaded files and write them to storage."""

import logging

from fastapi import UploadFile

from uploader.config import settings
from uploader.schemas.upload import StoredFile
from uploader.utils.storage import LocalStorage

logger = logging.getLogger(__name__)


class UploadService:
    def __init__(self, storage: LocalStorage):
        self.storage = storage

    async def save_upload(self, file: UploadFile) -> StoredFile:
        """Validate and store one uploaded file under a fresh timestamp name."""
        if not file.filename:
            raise ValueError("No file selected")

        data = await file.read()
        if settings.MAX_UPLOAD_SIZE_MB is not None:
            size_mb = len(data) / (1024 * 1024)
            if size_mb > settings.MAX_UPLOAD_SIZE_MB:
                raise ValueError(
                    f"File '{file.filename}' too large ({size_mb:.1f} MB). "
                    f"Max is {settings.MAX_UPLOAD_SIZE_MB} MB."
                )

        name = self.storage.generate_name(file.filename)
        await self.storage.store_bytes(data, name)
        logger.info("Stored %s as %s (%d bytes)", file.filename, name, len(data))

        return StoredFile(
            original_filename=file.filename,
            stored_name=name,
            url=self.storage.get_url(name),
            file_size=len(data),
            content_type=file.content_type,
        )

    async def save_multiple(self, files: list[UploadFile]) -> list[StoredFile]:
        """
        Store up to MAX_FILES files. The count is checked before anything is
        written; if a later file fails, the ones already stored are removed.
        """
        if len(files) > settings.MAX_FILES:
            raise ValueError(f"Too many files ({len(files)}). Max is {settings.MAX_FILES} per upload.")

        results: list[StoredFile] = []
        try:
            for f in files:
                results.append(await self.save_upload(f))
        except Exception:
            logger.warning("Multi-file upload failed, removing %d stored file(s)", len(results))
            for stored in results:
                try:
                    await self.storage.delete(stored.stored_name)
                except OSError:
                    logger.exception("Failed to remove %s during rollback", stored.stored_name)
            raise
        return results
