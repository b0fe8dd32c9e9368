"""Tests for the kernel bundle and the module-level facade."""

import logging

import pytest

import nanokernel
from nanokernel import (
    ArgumentError,
    Kernel,
    NotFoundError,
    app,
    event,
    get_kernel,
    middleware,
    param,
    reset_kernel,
)
from nanokernel.kernel.logging import KernelConsoleHandler, ROOT_LOGGER_NAME


def test_kernels_are_isolated():
    first = Kernel()
    second = Kernel()

    first.params.set("name", "first")
    first.services.set("db", object)

    assert second.params.has("name") is False
    assert second.services.has("db") is False


def test_default_kernel_is_lazy_and_shared():
    assert get_kernel() is get_kernel()


def test_reset_kernel_replaces_default(kernel):
    assert reset_kernel(kernel) is kernel
    assert get_kernel() is kernel


def test_facade_forwards_to_default_kernel():
    app("clock", "=", lambda: "tick")
    param("timezone", "set", "UTC")

    kernel = get_kernel()
    assert kernel.services.get("clock") == "tick"
    assert kernel.params.get("timezone") == "UTC"
    assert app("clock") == "tick"
    assert param("timezone") == "UTC"
    assert param("locale", "??", "en") == "en"


def test_facade_errors():
    with pytest.raises(NotFoundError):
        app("missing")
    with pytest.raises(NotFoundError):
        param("missing")
    with pytest.raises(ArgumentError):
        app("db", "set")
    with pytest.raises(NotFoundError):
        middleware("missing", 1)


def test_primitives_compose_through_the_facade():
    """A request pipeline reading services and parameters and emitting events."""
    seen = []

    app("greeter", "set", lambda: "Hello")
    param("punctuation", "set", "!")
    event("greeted", "on", "recorder", lambda text: seen.append(text))

    def greet(stack_id, name):
        return middleware(stack_id, f"{app('greeter')}, {name}")

    def punctuate(stack_id, text):
        text += param("punctuation")
        event("greeted", "emit", text)
        return (text,)

    middleware("request", greet)
    middleware("request", punctuate)

    assert middleware("request", "Ada") == ("Hello, Ada!",)
    assert middleware("request", "Bob") == ("Hello, Bob!",)
    assert seen == ["Hello, Ada!", "Hello, Bob!"]


def test_pipeline_is_single_anonymous_stack(kernel):
    kernel.pipeline(lambda value: (value.strip(),))
    assert kernel.pipeline("  padded  ") == ("padded",)


def test_version():
    assert nanokernel.__version__


def test_configure_logging_from_settings():
    kernel = Kernel({"logging": {"level": "DEBUG", "colored": False}})

    logger = kernel.configure_logging()
    kernel.configure_logging()

    handlers = [h for h in logger.handlers if isinstance(h, KernelConsoleHandler)]
    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(handlers) == 1

    logger.removeHandler(handlers[0])
    logger.setLevel(logging.NOTSET)


def test_event_facade_requires_operation():
    with pytest.raises(ArgumentError):
        event("save", None)
