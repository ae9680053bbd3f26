"""Stored upload schema."""

from pydantic import BaseModel


class StoredFile(BaseModel):
    original_filename: str
    stored_name: str
    url: str
    file_size: int
    content_type: str | None = None
