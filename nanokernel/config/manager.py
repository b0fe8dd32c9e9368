"""
配置管理器 - 合并和访问内核配置
Settings - merges and accesses kernel configuration.

支持默认值合并和嵌套键访问，不读写任何文件。
Supports default value merging and nested key access; never touches files.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from nanokernel.config.defaults import build_default_config

logger = logging.getLogger(__name__)


class Settings:
    """
    配置中心 - 内核的配置
    Settings - the kernel's configuration.

    支持：
    - 嵌套键访问（如 "logging.level"）
    - 用户配置逐层覆盖默认值
    """

    def __init__(
        self,
        overrides: Mapping[str, Any] | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        if defaults is None:
            defaults = build_default_config()
        self._config = overlay(defaults, overrides or {})

    def get(self, key: str, default: Any = None) -> Any:
        """
        获取配置值（支持嵌套键，如 "logging.level"）
        Get config value (supports nested keys like "logging.level").
        """
        current: Any = self._config
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return default
            current = current[k]
        return current

    def set(self, key: str, value: Any) -> None:
        """
        设置配置值（支持嵌套键）
        Set config value (supports nested keys).
        """
        *parents, leaf = key.split(".")
        node = self._config
        for name in parents:
            child = node.get(name)
            if not isinstance(child, dict):
                # 非字典的中间值被替换为新的分支
                child = node[name] = {}
            node = child
        node[leaf] = value
        logger.debug("配置已更新: %s", key)

    def as_dict(self) -> dict[str, Any]:
        """获取完整配置字典的副本 / Get a copy of the full config dictionary."""
        return copy.deepcopy(self._config)


def overlay(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    返回 base 被 overrides 覆盖后的新字典，两边都是映射时逐层合并
    Return a new dict of ``base`` with ``overrides`` laid on top; where both
    sides hold a mapping the merge descends into it. Inputs are not modified.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in overrides.items():
        below = merged.get(key)
        if isinstance(value, Mapping):
            merged[key] = overlay(below if isinstance(below, Mapping) else {}, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
