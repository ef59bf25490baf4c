"""Image providers 模块。

google-image-gen v0.1.0

提供两种 Google API 格式的图像生成实现。
"""

from __future__ import annotations

from .gemini_interactions import GeminiInteractionsProvider, get_image_size
from .imagen_predict import (
    ImagenPredictProvider,
    build_prompt_with_aspect,
    extract_image_bytes,
)

__all__ = [
    "GeminiInteractionsProvider",
    "ImagenPredictProvider",
    "get_image_size",
    "build_prompt_with_aspect",
    "extract_image_bytes",
]
