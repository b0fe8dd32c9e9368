"""
操作类型 - 各原语的调度操作枚举
Operation kinds - dispatch operation enums of each primitive.

每个操作既可以用名称（"has"）也可以用简写符号（"?"）指定。
Each operation may be given by name ("has") or by shorthand symbol ("?").
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from nanokernel.errors import ArgumentError

E = TypeVar("E", bound=Enum)


class ServiceOp(str, Enum):
    """服务容器操作 / Service container operations."""

    HAS = "has"
    SET = "set"
    GET = "get"

    @classmethod
    def _missing_(cls, value: object) -> ServiceOp | None:
        return _SERVICE_SYMBOLS.get(value)


class ParamOp(str, Enum):
    """参数存储操作 / Parameter store operations."""

    HAS = "has"
    SET = "set"
    DELETE = "del"
    DEFAULT = "default"
    GET = "get"

    @classmethod
    def _missing_(cls, value: object) -> ParamOp | None:
        return _PARAM_SYMBOLS.get(value)


class EventOp(str, Enum):
    """事件分发器操作 / Event dispatcher operations."""

    ON = "on"
    EMIT = "emit"

    @classmethod
    def _missing_(cls, value: object) -> EventOp | None:
        return _EVENT_SYMBOLS.get(value)


_SERVICE_SYMBOLS = {"?": ServiceOp.HAS, "=": ServiceOp.SET}

_PARAM_SYMBOLS = {
    "?": ParamOp.HAS,
    "=": ParamOp.SET,
    "x": ParamOp.DELETE,
    "??": ParamOp.DEFAULT,
}

_EVENT_SYMBOLS = {"@": EventOp.ON, ">>": EventOp.EMIT}


def parse_operation(
    kind: type[E], operation: E | str | None, default: E | None = None
) -> E:
    """
    将字符串或枚举解析为操作，未知操作抛出 ArgumentError
    Resolve a string or enum member into an operation of ``kind``.
    """
    if operation is None:
        if default is None:
            raise ArgumentError("Operation not passed to function.")
        return default
    try:
        return kind(operation)
    except (ValueError, TypeError):
        raise ArgumentError(f'Operation "{operation}" is not defined.') from None
