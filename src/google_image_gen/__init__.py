"""Google 图像生成模块。

google-image-gen v0.1.0

按模型 ID 把图像生成请求分发到 Gemini 多模态接口或 Imagen 文生图接口，
返回原始图片字节。

环境变量:
    GOOGLE_API_KEY / GEMINI_API_KEY: API key
    GOOGLE_BASE_URL: API 端点 URL
    GOOGLE_IMAGE_MODEL: 默认模型
    GOOGLE_IMAGE_LOG_DEBUG: 日志调试模式
"""

from __future__ import annotations

__version__ = "0.1.0"

from .client import GoogleImageClient, generate_image
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    GoogleEnvConfig,
    get_google_config,
)
from .errors import (
    ImageAPIError,
    ImageConfigError,
    ImageExtractionError,
    ImageGenError,
    NoImageError,
)
from .logging_setup import configure_logging
from .models import (
    GOOGLE_IMAGEN_MODELS,
    GOOGLE_MULTIMODAL_MODELS,
    get_default_model,
    is_google_imagen,
    is_google_multimodal,
)
from .types import (
    CliArgs,
    GeneratedImage,
    ImageConfig,
    ImageSize,
    Quality,
    ReferenceImage,
)

__all__ = [
    "__version__",
    # Client
    "GoogleImageClient",
    "generate_image",
    # Config
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "GoogleEnvConfig",
    "get_google_config",
    # Errors
    "ImageGenError",
    "ImageConfigError",
    "ImageAPIError",
    "NoImageError",
    "ImageExtractionError",
    # Logging
    "configure_logging",
    # Models
    "GOOGLE_IMAGEN_MODELS",
    "GOOGLE_MULTIMODAL_MODELS",
    "get_default_model",
    "is_google_imagen",
    "is_google_multimodal",
    # Types
    "CliArgs",
    "GeneratedImage",
    "ImageConfig",
    "ImageSize",
    "Quality",
    "ReferenceImage",
]
