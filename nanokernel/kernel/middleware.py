"""
中间件系统 - 注册或运行按名称区分的中间件栈
Middleware system - registers or runs independently named middleware stacks.

调用时第一个参数是可调用对象则注册中间件，否则以这些参数运行栈。
每个中间件通过再次调用栈来把控制权交给下一个中间件，不调用则结束本次运行。
Calling with a callable first argument registers it; otherwise the arguments
run through the stack. A middleware forwards by calling the stack again;
not calling it ends the run.

    runner = MiddlewareRunner()

    def double(stack_id, x):
        return runner(stack_id, x * 2)

    def increment(stack_id, x):
        return (x + 1,)

    runner("math", double)
    runner("math", increment)
    runner("math", 5)  # -> (11,)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from nanokernel.errors import ArgumentError, NotFoundError

logger = logging.getLogger(__name__)

# 中间件的调用类型：(栈名, *参数) -> 新的参数元组
Handler = Callable[..., Any]


def turn_back(*arguments: Any) -> tuple[Any, ...]:
    """
    空白中间件 - 原样返回参数
    Blank middleware - returns its arguments unchanged.
    """
    return arguments


class MiddlewareStack:
    """
    中间件栈 - 一组有序中间件和一个显式游标
    Middleware stack - an ordered handler sequence with an explicit cursor.

    索引 0 是隐式的空白中间件：空栈表现为恒等变换，
    最后一个中间件继续转发时也会原样拿回参数。
    Index 0 is the implicit blank handler: an empty stack behaves as identity,
    and a last handler that forwards gets its own arguments back.

    不在运行中的调用开启新一轮运行，游标回到起点，
    因此每次外部调用都从第一个中间件完整走一遍。
    A call made while no run is in progress starts a new run from the first
    handler, so every outer invocation makes exactly one pass.

    stack_id 为 None 时是匿名栈，中间件只接收参数而不接收栈名。
    With stack_id None the stack is anonymous and handlers get only the arguments.
    """

    def __init__(
        self,
        stack_id: str | None = None,
        lock: threading.RLock | None = None,
    ) -> None:
        self.stack_id = stack_id
        self._handlers: list[Handler] = [turn_back]
        self._cursor = 0
        # 当前运行的嵌套深度，0 表示没有运行在进行
        self._depth = 0
        # 运行期间持有锁，同一个栈上的并发运行被串行化；
        # 同一运行器的栈共用一把锁，跨栈嵌套运行时加锁顺序不会颠倒
        self._lock = lock if lock is not None else threading.RLock()

    def __call__(self, *arguments: Any) -> tuple[Any, ...] | None:
        if arguments and callable(arguments[0]):
            self.use(arguments[0])
            return None
        return self.run(*arguments)

    def use(self, handler: Handler) -> None:
        """
        添加中间件到栈尾
        Append a handler to the tail of the stack.
        """
        if not callable(handler):
            raise ArgumentError("Middleware not passed to function.")
        with self._lock:
            self._handlers.append(handler)
        logger.debug("已添加中间件到栈 %s: %s", self.name, _handler_name(handler))

    def run(self, *arguments: Any) -> tuple[Any, ...] | Any:
        """
        将游标推进到下一个中间件并调用它
        Advance the cursor to the next handler and invoke it.
        """
        with self._lock:
            if self._depth == 0:
                self._cursor = 0
            elif self._cursor == 0:
                # 本轮已经走完，之后的转发都是恒等变换
                return turn_back(*arguments)

            self._cursor = (self._cursor + 1) % len(self._handlers)
            if self._cursor == 0:
                return turn_back(*arguments)

            handler = self._handlers[self._cursor]
            self._depth += 1
            try:
                if self.stack_id is None:
                    return handler(*arguments)
                return handler(self.stack_id, *arguments)
            finally:
                self._depth -= 1

    @property
    def name(self) -> str:
        return self.stack_id if self.stack_id is not None else "<anonymous>"

    @property
    def count(self) -> int:
        """中间件数量（不含空白中间件） / Number of handlers, blank excluded."""
        return len(self._handlers) - 1

    @property
    def running(self) -> bool:
        """是否有运行在进行 / Whether a run is in progress."""
        return self._depth > 0


class MiddlewareRunner:
    """
    中间件运行器 - 管理多个独立的中间件栈
    Middleware runner - manages several independent middleware stacks.

    每个栈名拥有独立的中间件序列和游标，首次注册时隐式创建。
    Every stack id owns its own handlers and cursor; a stack is created
    implicitly on first registration.

    所有栈共用运行器的可重入锁，同一时刻只有一个线程在运行器内运行。
    All stacks share the runner's re-entrant lock, so only one thread runs
    inside the runner at a time.
    """

    def __init__(self) -> None:
        self._stacks: dict[str, MiddlewareStack] = {}
        self._lock = threading.RLock()

    def __call__(self, stack_id: str, *arguments: Any) -> tuple[Any, ...] | None:
        if arguments and callable(arguments[0]):
            self.use(stack_id, arguments[0])
            return None
        return self.run(stack_id, *arguments)

    def use(self, stack_id: str, handler: Handler) -> None:
        """注册中间件，栈不存在时创建 / Register a handler, creating the stack if needed."""
        with self._lock:
            stack = self._stacks.get(stack_id)
            if stack is None:
                stack = MiddlewareStack(stack_id, lock=self._lock)
                self._stacks[stack_id] = stack
                logger.debug("已创建中间件栈: %s", stack_id)
        stack.use(handler)

    def run(self, stack_id: str, *arguments: Any) -> tuple[Any, ...] | Any:
        """以给定参数运行栈 / Run the named stack with the given arguments."""
        return self.stack(stack_id).run(*arguments)

    def stack(self, stack_id: str) -> MiddlewareStack:
        stack = self._stacks.get(stack_id)
        if stack is None:
            raise NotFoundError(f'Stack "{stack_id}" is not defined.')
        return stack

    def has(self, stack_id: str) -> bool:
        return stack_id in self._stacks

    def stack_ids(self) -> list[str]:
        return list(self._stacks)


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__
