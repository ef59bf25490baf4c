"""Provider 共用的 HTTP 请求逻辑。"""

from __future__ import annotations

import logging
import time
from typing import Any

import aiohttp

from ..debug_utils import API_KEY_HEADER, EventCallback, sanitize_for_debug, sanitize_headers
from ..errors import ImageAPIError

__all__ = ["build_headers", "post_json"]

logger = logging.getLogger(__name__)


def build_headers(api_key: str) -> dict[str, str]:
    """构建请求头，没有 key 时不带认证头。"""
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers[API_KEY_HEADER] = api_key
    return headers


async def post_json(
    session: aiohttp.ClientSession,
    url: str,
    body: dict[str, Any],
    headers: dict[str, str],
    request_id: str = "",
    event_callback: EventCallback | None = None,
) -> dict[str, Any]:
    """POST JSON 请求并返回解析后的响应体。

    非 2xx 响应抛出 ImageAPIError，网络错误原样抛出。
    """

    def emit(event: dict[str, Any]) -> None:
        if event_callback:
            event_callback(event)

    sanitized_body = sanitize_for_debug(body)
    logger.debug("POST %s body=%s", url, sanitized_body)
    emit({
        "type": "api_request",
        "request_id": request_id,
        "url": url,
        "method": "POST",
        "headers": sanitize_headers(headers),
        "body": sanitized_body,
    })

    start_time = time.time()
    async with session.post(url, json=body, headers=headers) as resp:
        duration_ms = int((time.time() - start_time) * 1000)
        resp_headers = dict(resp.headers)

        if 200 <= resp.status < 300:
            api_response = await resp.json()
            emit({
                "type": "api_response",
                "request_id": request_id,
                "status_code": resp.status,
                "duration_ms": duration_ms,
                "headers": resp_headers,
                "body": sanitize_for_debug(api_response),
            })
            return api_response

        error_text = await resp.text()
        emit({
            "type": "api_response",
            "request_id": request_id,
            "status_code": resp.status,
            "duration_ms": duration_ms,
            "headers": resp_headers,
            "body": error_text[:2000],
        })
        logger.debug("API error %s from %s: %s", resp.status, url, error_text[:200])
        raise ImageAPIError(resp.status, error_text, url)
