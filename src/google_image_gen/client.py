"""Google 图像生成客户端。

google-image-gen v0.1.0

根据模型 ID 分发到两种 API：
1. Imagen 模型 -> models/{model}:predict（文生图，忽略参考图片）
2. 其他模型 -> /interactions（Gemini 多模态，支持参考图片）
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

import aiohttp

from .config import GoogleEnvConfig, get_google_config
from .debug_utils import EventCallback, mask_token
from .models import get_default_model, is_google_imagen, is_google_multimodal
from .providers import GeminiInteractionsProvider, ImagenPredictProvider
from .types import CliArgs

__all__ = ["GoogleImageClient", "generate_image"]

logger = logging.getLogger(__name__)


class GoogleImageClient:
    """Google 图像生成客户端。

    Example:
        async with GoogleImageClient() as client:
            data = await client.generate_image(
                "A beautiful sunset over mountains",
                args=CliArgs(aspect_ratio="16:9"),
            )
    """

    def __init__(
        self,
        config: GoogleEnvConfig | None = None,
        event_callback: EventCallback | None = None,
    ) -> None:
        """初始化客户端。

        Args:
            config: 环境配置（可选，默认从环境变量加载）
            event_callback: 事件回调函数
        """
        self._config = config or get_google_config()
        self._event_callback = event_callback
        self._session: aiohttp.ClientSession | None = None

        self._gemini = GeminiInteractionsProvider(self._config, event_callback)
        self._imagen = ImagenPredictProvider(self._config, event_callback)

    @property
    def config(self) -> GoogleEnvConfig:
        return self._config

    async def __aenter__(self) -> "GoogleImageClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        """获取或创建 HTTP 会话。"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """关闭 HTTP 会话。"""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    def _emit_event(self, event: dict[str, Any]) -> None:
        """发送事件到回调。"""
        if self._event_callback:
            self._event_callback(event)

    async def generate_image(
        self,
        prompt: str,
        model: str | None = None,
        args: CliArgs | None = None,
    ) -> bytes:
        """生成一张图片并返回原始字节。

        Args:
            prompt: 提示词
            model: 模型 ID（默认 GOOGLE_IMAGE_MODEL 或内置默认值）
            args: 命令行参数

        Returns:
            图片字节

        Raises:
            provider 抛出的任何异常，原样传递，不重试
        """
        model = model or get_default_model(self._config)
        args = args or CliArgs()
        request_id = str(uuid.uuid4())[:8]
        use_imagen = is_google_imagen(model)

        self._emit_event({
            "type": "generation_started",
            "request_id": request_id,
            "model": model,
            "provider": "imagen" if use_imagen else "gemini",
            "prompt": prompt[:100],
            "image_count": len(args.reference_images),
        })

        if use_imagen:
            if args.reference_images:
                logger.warning("Reference images not supported with Imagen models, ignoring.")
            generator = self._imagen.generate
        else:
            if args.reference_images and not is_google_multimodal(model):
                logger.warning("Reference images are only supported with Gemini multimodal models.")
            generator = self._gemini.generate

        session = await self._get_session()
        try:
            data = await generator(prompt, model, args, session, request_id)
        except Exception as e:
            self._emit_event({
                "type": "generation_failed",
                "request_id": request_id,
                "error": str(e),
                "api_url": getattr(e, "api_url", ""),
                "auth_hint": mask_token(self._config.api_key),
            })
            raise

        self._emit_event({
            "type": "generation_completed",
            "request_id": request_id,
            "byte_count": len(data),
            "success": True,
        })
        return data


async def generate_image(
    prompt: str,
    model: str | None = None,
    args: CliArgs | None = None,
    config: GoogleEnvConfig | None = None,
) -> bytes:
    """单次调用：创建客户端、生成图片、关闭会话。"""
    async with GoogleImageClient(config) as client:
        return await client.generate_image(prompt, model, args)
