"""Unit tests for the parameter store."""

import pytest

from nanokernel import ArgumentError, NotFoundError
from nanokernel.kernel.operations import ParamOp
from nanokernel.kernel.params import ParameterStore


@pytest.fixture
def params():
    return ParameterStore()


def test_set_and_get(params):
    params.set("debug", True)
    assert params.get("debug") is True


def test_set_overwrites(params):
    params.set("retries", 1)
    params.set("retries", 3)
    assert params.get("retries") == 3


def test_has_distinguishes_none_from_absence(params):
    assert params.has("token") is False
    params.set("token", None)
    assert params.has("token") is True
    assert params.get("token") is None


def test_get_unknown_raises_not_found(params):
    with pytest.raises(NotFoundError, match='Parameter "missing"'):
        params.get("missing")


def test_get_or_default(params):
    assert params.get_or_default("missing", "fallback") == "fallback"
    assert params.get_or_default("missing") is None

    params.set("present", 0)
    assert params.get_or_default("present", 10) == 0


def test_delete(params):
    params.set("debug", True)
    params.delete("debug")
    assert params.has("debug") is False


def test_delete_absent_is_noop(params):
    params.delete("never-set")
    assert len(params) == 0


def test_update_and_keys(params):
    params.update({"a": 1, "b": 2})
    assert params.keys() == ["a", "b"]
    assert "a" in params


@pytest.mark.parametrize(
    "operation",
    [ParamOp.DEFAULT, "default", "??"],
)
def test_dispatch_default_forms(params, operation):
    assert params("missing", operation, "fallback") == "fallback"


def test_dispatch_lifecycle_with_symbols(params):
    params("name", "=", "kernel")
    assert params("name", "?") is True
    assert params("name") == "kernel"

    params("name", "x")
    assert params("name", "?") is False
    with pytest.raises(NotFoundError):
        params("name")


def test_dispatch_unknown_operation(params):
    with pytest.raises(ArgumentError):
        params("name", "pop")
