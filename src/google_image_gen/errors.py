"""图像生成异常类。

google-image-gen v0.1.0
"""

from __future__ import annotations

__all__ = [
    "ImageGenError",
    "ImageConfigError",
    "ImageAPIError",
    "NoImageError",
    "ImageExtractionError",
]


class ImageGenError(Exception):
    """图像生成基础异常。"""
    pass


class ImageConfigError(ImageGenError):
    """配置错误（如缺少 API key）。"""
    pass


class ImageAPIError(ImageGenError):
    """API 调用错误（非 2xx 响应）。

    Attributes:
        status_code: HTTP 状态码
        message: 错误消息
        api_url: 请求的 API 完整路径
    """

    def __init__(self, status_code: int, message: str, api_url: str = "") -> None:
        self.status_code = status_code
        self.message = message
        self.api_url = api_url
        super().__init__(f"[{status_code}] {message}")


class NoImageError(ImageGenError):
    """响应成功但不包含图片。"""

    def __init__(self, message: str = "No image in response") -> None:
        super().__init__(message)


class ImageExtractionError(ImageGenError):
    """图片条目既没有原始字节也没有 base64 数据。"""

    def __init__(self, message: str = "Cannot extract image data") -> None:
        super().__init__(message)
