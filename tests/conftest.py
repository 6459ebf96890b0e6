from __future__ import annotations

import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from PIL import Image

from imagefilter.config import Settings
from imagefilter.main import create_app
from imagefilter.services import image_filter

SECRET = "test-secret"


def make_image_bytes(fmt: str = "PNG", size: tuple[int, int] = (40, 30)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise image_filter.requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    return tmp_path / "artifacts"


@pytest.fixture
def settings(tmp_dir: Path) -> Settings:
    return Settings(JWT_SECRET=SECRET, REQUIRE_AUTH=True, TMP_DIR=str(tmp_dir))


@pytest.fixture
def client(settings: Settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def token() -> str:
    return jwt.encode({"sub": "tester"}, SECRET, algorithm="HS256")


@pytest.fixture
def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fake_download(monkeypatch):
    """Serve a generated PNG for every download; records requested URLs."""
    calls: list[str] = []

    def fake_get(url, timeout=None, stream=False):
        calls.append(url)
        return FakeResponse(make_image_bytes())

    monkeypatch.setattr(image_filter.requests, "get", fake_get)
    return calls


@pytest.fixture
def image_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def fake_response():
    return FakeResponse
