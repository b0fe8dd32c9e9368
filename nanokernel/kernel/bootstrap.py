"""
启动引导器 - 把四个原语组合成一个内核
Bootstrap - bundles the four primitives into one kernel.

应用可以显式持有 Kernel 实例，也可以使用模块级函数访问进程默认内核。
Applications may hold a Kernel explicitly or use the module-level functions,
which forward to the process-wide default kernel.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from nanokernel.config.manager import Settings
from nanokernel.kernel.container import ServiceContainer
from nanokernel.kernel.dispatcher import EventDispatcher
from nanokernel.kernel.logging import configure_from_settings
from nanokernel.kernel.middleware import MiddlewareRunner, MiddlewareStack
from nanokernel.kernel.operations import EventOp, ParamOp, ServiceOp
from nanokernel.kernel.params import ParameterStore

logger = logging.getLogger(__name__)


class Kernel:
    """
    内核 - 持有服务容器、参数存储、事件分发器和中间件
    Kernel - owns the service container, parameter store, event dispatcher
    and middleware.

    四个原语相互独立，内核只负责把它们放在一起。
    The primitives are independent; the kernel only keeps them together.
    """

    def __init__(self, settings: Settings | Mapping[str, Any] | None = None) -> None:
        if not isinstance(settings, Settings):
            settings = Settings(settings)
        self.settings = settings
        self.services = ServiceContainer()
        self.params = ParameterStore()
        self.events = EventDispatcher()
        self.middleware = MiddlewareRunner()
        # 单栈变体：匿名栈，中间件不接收栈名
        self.pipeline = MiddlewareStack()

    def configure_logging(self) -> logging.Logger:
        """按配置中的 logging 段设置日志 / Apply the logging section of the settings."""
        return configure_from_settings(self.settings.get("logging", {}))


_kernel: Kernel | None = None
_kernel_lock = threading.Lock()


def get_kernel() -> Kernel:
    """获取进程默认内核，首次使用时创建 / Get the default kernel, created lazily."""
    global _kernel
    if _kernel is None:
        with _kernel_lock:
            if _kernel is None:
                _kernel = Kernel()
                logger.debug("已创建默认内核")
    return _kernel


def reset_kernel(kernel: Kernel | None = None) -> Kernel:
    """
    替换进程默认内核（用于测试隔离）
    Replace the default kernel (for test isolation).
    """
    global _kernel
    with _kernel_lock:
        _kernel = kernel if kernel is not None else Kernel()
    return _kernel


def app(
    service_id: str,
    operation: ServiceOp | str | None = None,
    factory: Callable[[], Any] | None = None,
) -> Any:
    """默认内核的服务容器 / Service container of the default kernel."""
    return get_kernel().services(service_id, operation, factory)


def param(key: str, operation: ParamOp | str | None = None, value: Any = None) -> Any:
    """默认内核的参数存储 / Parameter store of the default kernel."""
    return get_kernel().params(key, operation, value)


def event(name: str, operation: EventOp | str, *arguments: Any) -> None:
    """默认内核的事件分发器 / Event dispatcher of the default kernel."""
    get_kernel().events(name, operation, *arguments)


def middleware(stack_id: str, *arguments: Any) -> Any:
    """默认内核的中间件运行器 / Middleware runner of the default kernel."""
    return get_kernel().middleware(stack_id, *arguments)
