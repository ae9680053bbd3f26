"""File storage for uploads — local filesystem implementation."""

import logging
import threading
import time
from pathlib import Path, PurePath
from urllib.parse import quote

from uploader.config import settings

logger = logging.getLogger(__name__)

_stamp_lock = threading.Lock()
_last_stamp = 0


def _now_millis() -> int:
    return time.time_ns() // 1_000_000


def _next_stamp() -> int:
    """Millisecond timestamp, strictly increasing within the process."""
    global _last_stamp
    with _stamp_lock:
        _last_stamp = max(_now_millis(), _last_stamp + 1)
        return _last_stamp


def extension_of(filename: str) -> str:
    """
    Extension of the last path component: everything from its last dot, dot
    included. Leading dots do not start one, so ".bashrc" has none and
    "notes." has ".".
    """
    # Browsers on Windows may send the full client path
    name = PurePath(filename.replace("\\", "/")).name
    dot = name.rfind(".")
    if dot == -1 or not name[:dot].strip("."):
        return ""
    return name[dot:]


class LocalStorage:
    """Stores uploaded files flat under UPLOAD_DIR."""

    def __init__(self, base: Path | None = None):
        self.base = base or settings.UPLOAD_DIR
        self.base.mkdir(parents=True, exist_ok=True)

    def _resolve(self, name: str) -> Path:
        path = self.base / name
        # Stored names are flat; anything else is not ours to touch
        if path.parent != self.base:
            raise ValueError(f"Invalid stored name: {name}")
        return path

    def generate_name(self, filename: str) -> str:
        ext = extension_of(filename)
        stamp = _next_stamp()
        while (self.base / f"{stamp}{ext}").exists():
            stamp = _next_stamp()
        return f"{stamp}{ext}"

    async def store_bytes(self, data: bytes, name: str) -> str:
        dest = self._resolve(name)
        dest.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), dest)
        return name

    async def delete(self, name: str) -> None:
        path = self._resolve(name)
        if path.exists():
            path.unlink()

    def get_url(self, name: str) -> str:
        return f"/uploads/{quote(name)}"


def get_storage() -> LocalStorage:
    return LocalStorage()
