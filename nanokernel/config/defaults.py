"""
默认配置 - 内核的所有默认配置值
Default configuration - all default configuration values of the kernel.
"""

from __future__ import annotations

from typing import Any


def build_default_config() -> dict[str, Any]:
    """
    构建默认配置
    Build the default configuration.
    """
    return {
        # 日志配置
        "logging": {
            "level": "WARNING",
            "colored": True,
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
