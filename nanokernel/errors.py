"""
内核异常 - 所有原语共用的错误类型
Kernel errors - error types shared by all primitives.
"""

from __future__ import annotations


class KernelError(Exception):
    """内核错误基类 / Base class of all kernel errors."""


class ArgumentError(KernelError, TypeError):
    """
    参数缺失或形状错误（例如未传入工厂、未知操作）
    A required argument is missing or malformed (no factory, unknown operation).
    """


class NotFoundError(KernelError, LookupError):
    """
    查找未注册的标识、键或中间件栈
    Lookup of an identifier, key or stack that was never registered.
    """
