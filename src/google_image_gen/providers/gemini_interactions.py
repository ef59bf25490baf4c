"""Gemini Interactions Provider - 使用 /interactions API 生成图像。

google-image-gen v0.1.0

适用于 Gemini 多模态模型，支持参考图片输入。
"""

from __future__ import annotations

import base64
import logging
from typing import Any

import aiohttp

from ..config import GoogleEnvConfig
from ..debug_utils import EventCallback
from ..errors import ImageConfigError, NoImageError
from ..image_codec import read_image_as_base64
from ..types import CliArgs, ImageConfig, ImageSize, Quality
from ._http import build_headers, post_json

__all__ = ["GeminiInteractionsProvider", "get_image_size"]

logger = logging.getLogger(__name__)


def get_image_size(args: CliArgs) -> str:
    """选择输出分辨率。

    显式 image_size 优先；否则 quality=2k 对应 2K，其余为 1K。
    4K 只能通过显式 image_size 获得。
    """
    if args.image_size:
        return args.image_size
    if args.quality == Quality.HIGH_2K.value:
        return ImageSize.SIZE_2K.value
    return ImageSize.SIZE_1K.value


class GeminiInteractionsProvider:
    """Gemini Interactions Provider。

    使用 /interactions API 生成图像，只请求 image 输出。
    """

    def __init__(self, config: GoogleEnvConfig, event_callback: EventCallback | None = None) -> None:
        self._config = config
        self._event_callback = event_callback

    def build_input(self, prompt: str, args: CliArgs) -> list[dict[str, Any]]:
        """构建输入序列：参考图片（按给定顺序）在前，文本提示词在最后。"""
        items: list[dict[str, Any]] = []
        for ref_path in args.reference_images:
            items.append(read_image_as_base64(ref_path).to_input())
        items.append({"type": "text", "text": prompt})
        return items

    def build_image_config(self, args: CliArgs) -> ImageConfig:
        """构建 image_config，未指定宽高比时不设置。"""
        return ImageConfig(
            image_size=get_image_size(args),
            aspect_ratio=args.aspect_ratio or None,
        )

    def build_request_body(self, prompt: str, model: str, args: CliArgs) -> dict[str, Any]:
        """构建请求体。"""
        return {
            "model": model,
            "input": self.build_input(prompt, args),
            "response_modalities": ["image"],
            "generation_config": {
                "image_config": self.build_image_config(args).to_dict(),
            },
        }

    def _extract_image(self, api_response: dict[str, Any]) -> bytes:
        """返回第一个带数据的 image 输出。"""
        for output in api_response.get("outputs") or []:
            if output.get("type") == "image" and output.get("data"):
                return base64.b64decode(output["data"])
        raise NoImageError()

    async def generate(
        self,
        prompt: str,
        model: str,
        args: CliArgs,
        session: aiohttp.ClientSession,
        request_id: str = "",
    ) -> bytes:
        """生成图像。

        Raises:
            ImageConfigError: 未配置 API key（在任何文件读取和网络请求之前）
            ImageAPIError: 非 200 响应
            NoImageError: 响应中没有图片
        """
        if not self._config.is_configured:
            raise ImageConfigError("GOOGLE_API_KEY or GEMINI_API_KEY is required")

        url = f"{self._config.api_base}/interactions"
        body = self.build_request_body(prompt, model, args)

        logger.info(
            "Generating image with Gemini... %s",
            body["generation_config"]["image_config"],
        )
        api_response = await post_json(
            session,
            url,
            body,
            build_headers(self._config.api_key),
            request_id,
            self._event_callback,
        )
        logger.info("Generation completed.")

        return self._extract_image(api_response)
