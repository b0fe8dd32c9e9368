"""Tests for settings and logging setup."""

import io
import logging

import colorlog

from nanokernel.config import Settings, build_default_config, overlay
from nanokernel.kernel.logging import (
    KernelConsoleHandler,
    get_logger,
    setup_logging,
)


def test_defaults_are_merged():
    settings = Settings({"logging": {"level": "DEBUG"}})

    assert settings.get("logging.level") == "DEBUG"
    assert settings.get("logging.colored") is True


def test_get_missing_key_returns_default():
    settings = Settings()
    assert settings.get("logging.missing", "fallback") == "fallback"
    assert settings.get("logging.level.deeper") is None


def test_set_nested_key():
    settings = Settings()
    settings.set("app.name", "demo")
    assert settings.get("app.name") == "demo"
    assert settings.as_dict()["app"] == {"name": "demo"}


def test_defaults_are_not_shared():
    first = Settings()
    first.set("logging.level", "ERROR")
    assert Settings().get("logging.level") == build_default_config()["logging"]["level"]


def test_custom_defaults():
    settings = Settings({"a": {"b": 1}}, defaults={"a": {"b": 2, "c": 3}})
    assert settings.as_dict() == {"a": {"b": 1, "c": 3}}


def test_setup_logging_uses_colored_formatter():
    stream = io.StringIO()
    logger = setup_logging("INFO", stream=stream)
    try:
        handler = next(h for h in logger.handlers if isinstance(h, KernelConsoleHandler))
        assert isinstance(handler.formatter, colorlog.ColoredFormatter)

        get_logger("tests").info("hello")
        assert "hello" in stream.getvalue()
    finally:
        for handler in list(logger.handlers):
            if isinstance(handler, KernelConsoleHandler):
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_get_logger_namespacing():
    assert get_logger("nanokernel.kernel").name == "nanokernel.kernel"
    assert get_logger("plugins").name == "nanokernel.plugins"


def test_overlay_descends_into_nested_mappings():
    base = {"logging": {"level": "WARNING", "colored": True}, "name": "kernel"}
    overrides = {"logging": {"level": "DEBUG"}, "extra": [1]}

    merged = overlay(base, overrides)

    assert merged == {
        "logging": {"level": "DEBUG", "colored": True},
        "name": "kernel",
        "extra": [1],
    }
    assert base["logging"]["level"] == "WARNING"
    assert "extra" not in base


def test_overlay_scalar_replaces_mapping_and_back():
    assert overlay({"a": {"b": 1}}, {"a": 5}) == {"a": 5}
    assert overlay({"a": 5}, {"a": {"b": 1}}) == {"a": {"b": 1}}


def test_overrides_are_copied():
    overrides = {"logging": {"level": "DEBUG"}}
    settings = Settings(overrides)

    settings.set("logging.level", "ERROR")

    assert overrides["logging"]["level"] == "DEBUG"


def test_set_replaces_scalar_branch():
    settings = Settings()
    settings.set("logging.level.name", "INFO")
    assert settings.get("logging.level") == {"name": "INFO"}
