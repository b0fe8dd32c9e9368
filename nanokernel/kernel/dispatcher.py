"""
事件分发器 - 基于发布/订阅模式的命名监听器
Event dispatcher - named listeners based on the publish/subscribe pattern.

监听器按注册顺序执行；返回 {"stop": True} 的监听器会终止本次分发。
Listeners run in registration order; a listener returning {"stop": True}
halts the current emission.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from nanokernel.errors import ArgumentError
from nanokernel.kernel.operations import EventOp, parse_operation

logger = logging.getLogger(__name__)

STOP_KEY = "stop"


@dataclass(frozen=True)
class ListenerBinding:
    """
    监听器绑定 - 将处理函数绑定到事件上
    Listener binding - binds a callable to an event.
    """

    event: str
    name: str
    listener: Callable[..., Any]

    @property
    def key(self) -> str:
        """复合键 "事件 监听器名" / Composite "event listener-name" key."""
        return f"{self.event} {self.name}"


def is_stop_signal(output: Any) -> bool:
    """判断监听器输出是否要求终止分发 / Whether a listener output halts the emission."""
    return isinstance(output, Mapping) and output.get(STOP_KEY) is True


class EventDispatcher:
    """
    事件分发器 - 管理监听器的注册和事件的分发
    Event dispatcher - manages listener registration and event emission.
    """

    def __init__(self) -> None:
        # 事件名 -> 按注册顺序排列的绑定
        self._listeners: dict[str, list[ListenerBinding]] = {}
        self._lock = threading.RLock()

    def __call__(
        self, event: str, operation: EventOp | str, *arguments: Any
    ) -> None:
        op = parse_operation(EventOp, operation)
        if op is EventOp.ON:
            if len(arguments) != 2:
                raise ArgumentError("Listener not passed to function.")
            self.on(event, arguments[0], arguments[1])
        else:
            self.emit(event, *arguments)

    def on(self, event: str, listener_name: str, listener: Callable[..., Any]) -> None:
        """
        注册监听器，重复注册会追加新条目
        Register a listener; registering the same name again appends a duplicate.
        """
        if not isinstance(listener_name, str) or not callable(listener):
            raise ArgumentError("Listener not passed to function.")

        binding = ListenerBinding(event=event, name=listener_name, listener=listener)
        with self._lock:
            self._listeners.setdefault(event, []).append(binding)

        logger.debug("已连接监听器 %s", binding.key)

    def emit(self, event: str, *payload: Any) -> None:
        """
        分发事件，按注册顺序调用监听器
        Emit an event, invoking listeners in registration order.
        """
        with self._lock:
            # 快照，监听器内部注册的新监听器不影响本次分发
            bindings = list(self._listeners.get(event, ()))

        for binding in bindings:
            if is_stop_signal(binding.listener(*payload)):
                logger.debug("事件 %s 被监听器 %s 终止", event, binding.name)
                break

    def listener_names(self, event: str) -> list[str]:
        """获取事件的监听器名称（按顺序） / Listener names of an event, in order."""
        return [binding.name for binding in self._listeners.get(event, ())]

    def listener_count(self, event: str | None = None) -> int:
        """获取监听器数量 / Get the number of registered listeners."""
        if event is None:
            return sum(len(bindings) for bindings in self._listeners.values())
        return len(self._listeners.get(event, ()))
