"""模型分类。

根据模型 ID 判断使用哪种 API：
- Imagen 模型走 :predict 文生图接口
- 其他模型（包括未知模型）走 Gemini Interactions 接口
"""

from __future__ import annotations

from .config import GoogleEnvConfig, get_google_config

__all__ = [
    "GOOGLE_MULTIMODAL_MODELS",
    "GOOGLE_IMAGEN_MODELS",
    "is_google_multimodal",
    "is_google_imagen",
    "get_default_model",
]

GOOGLE_MULTIMODAL_MODELS = ("gemini-3-pro-image-preview",)
GOOGLE_IMAGEN_MODELS = ("imagen-3.0-generate-002", "imagen-3.0-generate-001")


def is_google_multimodal(model: str) -> bool:
    """模型 ID 是否包含已知的多模态模型名（子串匹配）。"""
    return any(m in model for m in GOOGLE_MULTIMODAL_MODELS)


def is_google_imagen(model: str) -> bool:
    """模型 ID 是否包含已知的 Imagen 模型名（子串匹配）。"""
    return any(m in model for m in GOOGLE_IMAGEN_MODELS)


def get_default_model(config: GoogleEnvConfig | None = None) -> str:
    """获取默认模型（GOOGLE_IMAGE_MODEL 或内置默认值）。"""
    return (config or get_google_config()).model
