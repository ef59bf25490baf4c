"""Imagen Provider - 使用 models/{model}:predict API 生成图像。

google-image-gen v0.1.0

适用于 Imagen 文生图模型，不支持参考图片。宽高比和分辨率要求同时写进
提示词，并把宽高比作为请求参数传递。
"""

from __future__ import annotations

import base64
import logging
from typing import Any

import aiohttp

from ..config import GoogleEnvConfig
from ..debug_utils import EventCallback
from ..errors import ImageExtractionError, NoImageError
from ..types import CliArgs, GeneratedImage, Quality
from ._http import build_headers, post_json

__all__ = [
    "ImagenPredictProvider",
    "build_prompt_with_aspect",
    "extract_image_bytes",
]

logger = logging.getLogger(__name__)


def build_prompt_with_aspect(prompt: str, aspect_ratio: str | None, quality: str | None) -> str:
    """在提示词后追加宽高比和高分辨率说明。"""
    result = prompt
    if aspect_ratio:
        result += f" Aspect ratio: {aspect_ratio}."
    if quality == Quality.HIGH_2K.value:
        result += " High resolution 2048px."
    return result


def extract_image_bytes(image: GeneratedImage) -> bytes:
    """优先使用原始字节，其次解码 base64。"""
    if image.data:
        return image.data
    if image.base64:
        return base64.b64decode(image.base64)
    raise ImageExtractionError()


class ImagenPredictProvider:
    """Imagen Provider。

    API key 缺失时不在本地报错，由服务端返回认证错误。
    """

    def __init__(self, config: GoogleEnvConfig, event_callback: EventCallback | None = None) -> None:
        self._config = config
        self._event_callback = event_callback

    def build_request_body(self, prompt: str, args: CliArgs) -> dict[str, Any]:
        """构建请求体。"""
        parameters: dict[str, Any] = {"sampleCount": args.n}
        if args.aspect_ratio:
            parameters["aspectRatio"] = args.aspect_ratio

        return {
            "instances": [
                {"prompt": build_prompt_with_aspect(prompt, args.aspect_ratio, args.quality)},
            ],
            "parameters": parameters,
        }

    def _parse_images(self, api_response: dict[str, Any]) -> list[GeneratedImage]:
        """解析 predictions 列表。"""
        images: list[GeneratedImage] = []
        for prediction in api_response.get("predictions") or []:
            images.append(GeneratedImage(base64=prediction.get("bytesBase64Encoded") or None))
        return images

    async def generate(
        self,
        prompt: str,
        model: str,
        args: CliArgs,
        session: aiohttp.ClientSession,
        request_id: str = "",
    ) -> bytes:
        """生成图像，只取第一张。

        Raises:
            ImageAPIError: 非 200 响应
            NoImageError: 结果列表为空
            ImageExtractionError: 第一张图片没有可用数据
        """
        url = f"{self._config.api_base}/models/{model}:predict"
        body = self.build_request_body(prompt, args)

        logger.info("Generating image with Imagen (%s)...", model)
        api_response = await post_json(
            session,
            url,
            body,
            build_headers(self._config.api_key),
            request_id,
            self._event_callback,
        )

        images = self._parse_images(api_response)
        if not images:
            raise NoImageError()
        if len(images) > 1:
            logger.debug("Imagen returned %d images, using the first", len(images))

        return extract_image_bytes(images[0])
