"""Pytest 配置和 fixtures。"""

from __future__ import annotations

import base64
import sys
from pathlib import Path
from typing import Any

import pytest

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent

# 添加 src 目录到 Python 路径
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from google_image_gen.config import GoogleEnvConfig  # noqa: E402

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake image payload"
PNG_B64 = base64.b64encode(PNG_BYTES).decode("utf-8")


class FakeResponse:
    """aiohttp 响应替身。"""

    def __init__(self, status: int = 200, payload: Any = None, text: str = "") -> None:
        self.status = status
        self.headers = {"Content-Type": "application/json"}
        self._payload = payload if payload is not None else {}
        self._text = text

    async def json(self) -> Any:
        return self._payload

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FakeSession:
    """aiohttp.ClientSession 替身，按顺序返回预设响应并记录请求。"""

    def __init__(self, *responses: FakeResponse, error: Exception | None = None) -> None:
        self._responses = list(responses)
        self._error = error
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, json: Any = None, headers: dict[str, str] | None = None) -> FakeResponse:
        self.requests.append({"url": url, "json": json, "headers": headers or {}})
        if self._error is not None:
            raise self._error
        return self._responses.pop(0)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> GoogleEnvConfig:
    """带 API key 的配置。"""
    return GoogleEnvConfig(api_key="test-key-123456789", base_url="https://example.test")


@pytest.fixture
def config_no_key() -> GoogleEnvConfig:
    """没有 API key 的配置。"""
    return GoogleEnvConfig(api_key="", base_url="https://example.test")


@pytest.fixture
def gemini_ok_response() -> FakeResponse:
    """Interactions API 成功响应。"""
    return FakeResponse(payload={
        "outputs": [
            {"type": "text", "text": "Here is your image"},
            {"type": "image", "data": PNG_B64, "mime_type": "image/png"},
        ],
    })


@pytest.fixture
def imagen_ok_response() -> FakeResponse:
    """Imagen :predict 成功响应。"""
    return FakeResponse(payload={
        "predictions": [
            {"bytesBase64Encoded": PNG_B64, "mimeType": "image/png"},
        ],
    })


@pytest.fixture
def ref_images(tmp_path: Path) -> list[str]:
    """创建两张参考图片。"""
    first = tmp_path / "first.jpg"
    first.write_bytes(b"jpeg data")
    second = tmp_path / "second.webp"
    second.write_bytes(b"webp data")
    return [str(first), str(second)]
