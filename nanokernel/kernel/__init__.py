"""
微内核模块 - 框架的最小化核心
Microkernel module - the minimal core of the framework.

包含依赖注入容器、参数存储、事件分发器、中间件运行器和启动引导。
Contains DI container, parameter store, event dispatcher, middleware runner
and bootstrap logic.
"""

from nanokernel.kernel.bootstrap import Kernel, get_kernel, reset_kernel
from nanokernel.kernel.container import Lifecycle, ServiceContainer
from nanokernel.kernel.dispatcher import EventDispatcher
from nanokernel.kernel.middleware import MiddlewareRunner, MiddlewareStack, turn_back
from nanokernel.kernel.operations import EventOp, ParamOp, ServiceOp
from nanokernel.kernel.params import ParameterStore

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
    "get_kernel",
    "reset_kernel",
]
