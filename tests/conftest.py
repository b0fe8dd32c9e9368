"""
Pytest configuration for nanokernel tests.

Provides a fresh kernel per test and resets the process-wide default kernel
so facade tests never see state left by another test.
"""
import pytest

from nanokernel import Kernel, reset_kernel


@pytest.fixture
def kernel():
    """A fresh kernel owned by the test."""
    return Kernel()


@pytest.fixture(autouse=True)
def default_kernel():
    """Replace the default kernel before every test."""
    return reset_kernel()


@pytest.fixture
def counting_factory():
    """Factory that returns a new object and records how often it ran."""
    calls = []

    def factory():
        calls.append(1)
        return object()

    factory.calls = calls
    return factory
