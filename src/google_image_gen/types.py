"""图像生成类型定义。

google-image-gen v0.1.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = [
    "ImageSize",
    "Quality",
    "CliArgs",
    "ImageConfig",
    "ReferenceImage",
    "GeneratedImage",
]


class ImageSize(str, Enum):
    """输出图片分辨率。"""
    SIZE_1K = "1K"  # 最高 1024x1024
    SIZE_2K = "2K"  # 最高 2048x2048
    SIZE_4K = "4K"  # 最高 4096x4096


class Quality(str, Enum):
    """输出质量档位。"""
    NORMAL = "normal"
    HIGH_2K = "2k"


@dataclass
class CliArgs:
    """命令行参数（由外部解析器提供，只读使用）。

    Attributes:
        reference_images: 参考图片路径列表（按顺序）
        aspect_ratio: 宽高比，如 "16:9"
        quality: 质量档位（normal/2k）
        image_size: 显式分辨率（1K/2K/4K），优先于 quality
        n: 请求生成数量
    """
    reference_images: list[str] = field(default_factory=list)
    aspect_ratio: str | None = None
    quality: str | None = None
    image_size: str | None = None
    n: int = 1


@dataclass
class ImageConfig:
    """Gemini 生成配置中的 image_config。"""
    image_size: str = ImageSize.SIZE_1K.value
    aspect_ratio: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """转换为请求体格式，未设置的宽高比不输出。"""
        result: dict[str, Any] = {"image_size": self.image_size}
        if self.aspect_ratio:
            result["aspect_ratio"] = self.aspect_ratio
        return result


@dataclass
class ReferenceImage:
    """已编码的参考图片。

    Attributes:
        data: base64 编码数据
        mime_type: MIME 类型（由扩展名推断）
    """
    data: str
    mime_type: str = "image/png"

    def to_input(self) -> dict[str, Any]:
        """转换为 Interactions API 的图片输入条目。"""
        return {"type": "image", "data": self.data, "mime_type": self.mime_type}


@dataclass
class GeneratedImage:
    """Imagen 返回的单张图片。

    REST :predict 响应只带 base64（bytesBase64Encoded）；data 供直接持有字节的调用方使用。

    Attributes:
        data: 原始字节
        base64: base64 编码数据
    """
    data: bytes | None = None
    base64: str | None = None
