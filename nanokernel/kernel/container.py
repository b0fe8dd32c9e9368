"""
依赖注入容器 - 按字符串标识管理服务工厂
Dependency Injection Container - manages service factories by string id.

标识以下划线开头的服务为瞬态，其余为单例。
Services whose id starts with an underscore are transient, all others are singletons.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum, auto
from typing import Any

from nanokernel.errors import ArgumentError, NotFoundError
from nanokernel.kernel.operations import ServiceOp, parse_operation

logger = logging.getLogger(__name__)

TRANSIENT_PREFIX = "_"


class Lifecycle(Enum):
    """服务生命周期类型 / Service lifecycle type."""

    # 单例：首次获取时创建，之后复用
    SINGLETON = auto()
    # 瞬态：每次获取创建新实例
    TRANSIENT = auto()

    @classmethod
    def for_id(cls, service_id: str) -> Lifecycle:
        """根据标识拼写选择生命周期 / Pick the lifecycle from the id spelling."""
        if service_id.startswith(TRANSIENT_PREFIX):
            return cls.TRANSIENT
        return cls.SINGLETON


class ServiceDescriptor:
    """
    服务描述符 - 记录如何创建和管理一个服务
    Service descriptor - records how to create and manage a service.
    """

    __slots__ = ("factory", "lifecycle", "instance", "created")

    def __init__(self, factory: Callable[[], Any], lifecycle: Lifecycle):
        self.factory = factory
        self.lifecycle = lifecycle
        self.instance: Any = None
        # None 也是合法的单例结果，因此单独记录是否已创建
        self.created = False


class ServiceContainer:
    """
    服务容器 - 按名称注册和获取服务
    Service container - registers and resolves services by name.

    支持：
    - 单例/瞬态生命周期（由标识前缀决定）
    - 重复注册时替换旧条目并丢弃已缓存的单例
    - 调度形式 ``container(id, op, factory)``
    """

    def __init__(self) -> None:
        self._registry: dict[str, ServiceDescriptor] = {}
        # 可重入锁，允许工厂内部再次访问容器
        self._lock = threading.RLock()

    def __call__(
        self,
        service_id: str,
        operation: ServiceOp | str | None = None,
        factory: Callable[[], Any] | None = None,
    ) -> Any:
        op = parse_operation(ServiceOp, operation, ServiceOp.GET)
        if op is ServiceOp.HAS:
            return self.has(service_id)
        if op is ServiceOp.SET:
            self.set(service_id, factory)
            return None
        return self.get(service_id)

    def has(self, service_id: str) -> bool:
        """检查是否注册了指定名称的服务 / Check if a named service is registered."""
        return service_id in self._registry

    def set(self, service_id: str, factory: Callable[[], Any] | None) -> None:
        """
        注册一个服务工厂
        Register a service factory.
        """
        if factory is None or not callable(factory):
            raise ArgumentError("Definition not passed to function.")

        lifecycle = Lifecycle.for_id(service_id)
        with self._lock:
            self._registry[service_id] = ServiceDescriptor(factory, lifecycle)

        logger.debug("已注册服务: 名称=%s, 生命周期=%s", service_id, lifecycle.name)

    def get(self, service_id: str) -> Any:
        """
        按名称解析服务
        Resolve a service by name.
        """
        descriptor = self._registry.get(service_id)
        if descriptor is None:
            raise NotFoundError(f'Service (object) "{service_id}" is not defined.')

        if descriptor.lifecycle is Lifecycle.TRANSIENT:
            return descriptor.factory()

        if descriptor.created:
            return descriptor.instance

        with self._lock:
            # 双重检查（防止并发重复创建）
            if not descriptor.created:
                descriptor.instance = descriptor.factory()
                descriptor.created = True
                logger.debug("已创建单例服务: %s", service_id)
            return descriptor.instance

    def lifecycle(self, service_id: str) -> Lifecycle:
        """获取服务的生命周期 / Get the lifecycle of a registered service."""
        descriptor = self._registry.get(service_id)
        if descriptor is None:
            raise NotFoundError(f'Service (object) "{service_id}" is not defined.')
        return descriptor.lifecycle

    def ids(self) -> list[str]:
        """获取所有注册的服务名称 / Get all registered service ids."""
        return list(self._registry)

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._registry

    def __len__(self) -> int:
        return len(self._registry)
