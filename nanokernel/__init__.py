"""
nanokernel - 无类组合的微型框架核心
nanokernel - a tiny composition core for building applications from functions.
"""

from nanokernel.errors import ArgumentError, KernelError, NotFoundError
from nanokernel.kernel import (
    EventDispatcher,
    EventOp,
    Kernel,
    Lifecycle,
    MiddlewareRunner,
    MiddlewareStack,
    ParameterStore,
    ParamOp,
    ServiceContainer,
    ServiceOp,
    get_kernel,
    reset_kernel,
    turn_back,
)
from nanokernel.kernel.bootstrap import app, event, middleware, param

__app_name__ = "nanokernel"
__version__ = "1.0.0"

__all__ = [
    "Kernel",
    "ServiceContainer",
    "Lifecycle",
    "ParameterStore",
    "EventDispatcher",
    "MiddlewareRunner",
    "MiddlewareStack",
    "turn_back",
    "ServiceOp",
    "ParamOp",
    "EventOp",
    "KernelError",
    "ArgumentError",
    "NotFoundError",
    "get_kernel",
    "reset_kernel",
    "app",
    "param",
    "event",
    "middleware",
]
