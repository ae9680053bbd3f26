"""
Service configuration using Pydantic BaseSettings.
Loads from .env and provides typed access to all uploader settings.
"""

from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Server ───────────────────────────────────────────
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    # ── Storage ──────────────────────────────────────────
    UPLOAD_DIR: Path = Path("./uploads")
    PUBLIC_DIR: Path = Path("./public")
    TEMPLATES_DIR: Path = Path(__file__).parent / "templates"

    # ── Upload limits ────────────────────────────────────
    MAX_FILES: int = 10
    MAX_UPLOAD_SIZE_MB: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
