"""日志配置。

默认输出到 stderr；调试模式下包内日志级别为 DEBUG（请求/响应体已脱敏）。
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = ["LOG_FORMAT", "configure_logging"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_PACKAGE_LOGGER = "google_image_gen"


class _PackageStreamHandler(logging.StreamHandler):
    """configure_logging 安装的 handler，用于重复调用时识别。"""


def configure_logging(debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """配置日志输出。

    重复调用只替换输出流和级别，不会叠加 handler。

    Args:
        debug: 包内日志使用 DEBUG 级别（否则 INFO）
        stream: 输出流，默认 stderr

    Returns:
        包的根 logger
    """
    # 配置 root logger（第三方库）为 WARNING，减少噪音
    logging.basicConfig(level=logging.WARNING)

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    handler = next(
        (h for h in package_logger.handlers if isinstance(h, _PackageStreamHandler)),
        None,
    )
    if handler is None:
        handler = _PackageStreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    else:
        handler.setStream(stream or sys.stderr)

    # 只对 google_image_gen 命名空间启用详细日志
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    # 已有自己的 handler，不再重复输出到 root
    package_logger.propagate = False
    return package_logger
