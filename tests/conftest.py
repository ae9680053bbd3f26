import pytest
from fastapi.testclient import TestClient

from uploader.config import settings
from uploader.main import create_app


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    uploads = tmp_path / "uploads"
    public = tmp_path / "public"
    public.mkdir()
    (public / "styles.css").write_text("body { margin: 0; }")

    monkeypatch.setattr(settings, "UPLOAD_DIR", uploads)
    monkeypatch.setattr(settings, "PUBLIC_DIR", public)
    return uploads


@pytest.fixture
def app(upload_dir):
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
