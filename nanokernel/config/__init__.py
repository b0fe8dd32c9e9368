"""
配置模块
Configuration module.
"""

from nanokernel.config.defaults import build_default_config
from nanokernel.config.manager import Settings, overlay

__all__ = ["Settings", "build_default_config", "overlay"]
