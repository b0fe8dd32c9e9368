"""
参数存储 - 进程内键值对参数
Parameter store - in-process key-value parameters.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from nanokernel.errors import NotFoundError
from nanokernel.kernel.operations import ParamOp, parse_operation

logger = logging.getLogger(__name__)


class ParameterStore:
    """
    参数存储 - 设置、检查、删除或读取任意值
    Parameter store - sets, checks, removes or returns arbitrary values.

    存储的 None 与"不存在"是不同的，请使用 has() 区分。
    A stored None differs from absence; use has() to tell them apart.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._lock = threading.RLock()

    def __call__(
        self,
        key: str,
        operation: ParamOp | str | None = None,
        value: Any = None,
    ) -> Any:
        op = parse_operation(ParamOp, operation, ParamOp.GET)
        if op is ParamOp.HAS:
            return self.has(key)
        if op is ParamOp.SET:
            self.set(key, value)
        elif op is ParamOp.DELETE:
            self.delete(key)
        elif op is ParamOp.DEFAULT:
            return self.get_or_default(key, value)
        else:
            return self.get(key)
        return None

    def has(self, key: str) -> bool:
        return key in self._values

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def delete(self, key: str) -> None:
        """删除键，不存在时忽略 / Remove a key; absent keys are ignored."""
        with self._lock:
            self._values.pop(key, None)

    def get_or_default(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def get(self, key: str) -> Any:
        """获取值，不存在时抛出 NotFoundError / Get a value or raise NotFoundError."""
        try:
            return self._values[key]
        except KeyError:
            raise NotFoundError(f'Parameter "{key}" is not defined.') from None

    def update(self, values: Mapping[str, Any]) -> None:
        """批量设置 / Set several parameters at once."""
        with self._lock:
            self._values.update(values)
        logger.debug("已批量设置 %d 个参数", len(values))

    def keys(self) -> list[str]:
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
