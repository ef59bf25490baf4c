"""图片编解码工具。

google-image-gen v0.1.0

仅用于读取参考图片并编码为 base64。MIME 类型只看扩展名，不做内容嗅探。
"""

from __future__ import annotations

import base64
from pathlib import Path

from .types import ReferenceImage

__all__ = [
    "get_mime_type",
    "read_image_as_base64",
]

# 扩展名 -> MIME 类型，其余一律视为 PNG
_EXT_MIME_MAP = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}


def get_mime_type(file_path: str | Path) -> str:
    """根据扩展名获取 MIME 类型。

    Args:
        file_path: 文件路径

    Returns:
        MIME 类型字符串，默认 image/png
    """
    ext = Path(file_path).suffix.lower()
    return _EXT_MIME_MAP.get(ext, "image/png")


def read_image_as_base64(file_path: str | Path) -> ReferenceImage:
    """读取图片文件并编码为 base64。

    Args:
        file_path: 图片文件路径

    Returns:
        ReferenceImage 实例

    Raises:
        FileNotFoundError: 文件不存在
        OSError: 读取失败
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    with open(path, "rb") as f:
        data = base64.b64encode(f.read()).decode("utf-8")

    return ReferenceImage(data=data, mime_type=get_mime_type(path))
