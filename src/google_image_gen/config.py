"""Google 图像生成配置。

google-image-gen v0.1.0

环境变量:
    GOOGLE_API_KEY: API key（优先）
    GEMINI_API_KEY: API key（GOOGLE_API_KEY 未设置时使用）
    GOOGLE_BASE_URL: API 端点 URL（默认 Google AI Studio，两个 provider 共用）
    GOOGLE_IMAGE_MODEL: 默认模型 ID
    GOOGLE_IMAGE_LOG_DEBUG: 日志调试模式 (true/1/yes/on)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_BASE_URL",
    "GoogleEnvConfig",
    "get_google_config",
]

# 默认模型 ID
DEFAULT_MODEL = "gemini-3-pro-image-preview"

# 默认 API 端点 URL
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"

# 默认 API 版本路径
DEFAULT_API_VERSION = "v1beta"


def _normalize_base_url(url: str) -> str:
    """规范化端点 URL，去掉末尾斜杠。"""
    return url.strip().rstrip("/")


def _parse_bool(value: str | None, default: bool = False) -> bool:
    """解析布尔值环境变量。"""
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


@dataclass
class GoogleEnvConfig:
    """Google 环境配置。

    进程启动时构建一次，之后显式传给客户端，测试无需修改环境变量。

    Attributes:
        api_key: API key（可能为空）
        base_url: API 端点 URL（不含版本路径）
        model: 默认模型 ID
        log_debug: 日志调试模式
    """
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    log_debug: bool = False

    @property
    def is_configured(self) -> bool:
        """检查是否已配置 API key。"""
        return bool(self.api_key)

    @property
    def api_base(self) -> str:
        """带版本路径的 API 基础 URL。"""
        url = _normalize_base_url(self.base_url)
        if url.endswith(("/v1", "/v1beta", "/v1alpha")):
            return url
        return f"{url}/{DEFAULT_API_VERSION}"


def get_google_config() -> GoogleEnvConfig:
    """从环境变量加载配置。

    Returns:
        GoogleEnvConfig 实例
    """
    # 优先使用 GOOGLE_API_KEY，回退到 GEMINI_API_KEY
    api_key = os.environ.get("GOOGLE_API_KEY") or os.environ.get("GEMINI_API_KEY") or ""

    # 空字符串视为未设置
    raw_url = os.environ.get("GOOGLE_BASE_URL") or DEFAULT_BASE_URL
    model = os.environ.get("GOOGLE_IMAGE_MODEL") or DEFAULT_MODEL

    return GoogleEnvConfig(
        api_key=api_key,
        base_url=_normalize_base_url(raw_url),
        model=model,
        log_debug=_parse_bool(os.environ.get("GOOGLE_IMAGE_LOG_DEBUG")),
    )
