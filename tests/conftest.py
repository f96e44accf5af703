"""Shared test fixtures and helpers for tagged-logger tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import os
from typing import TYPE_CHECKING

import pytest

from tagged_logger.core.constants import ENV_PREFIX
from tagged_logger.infra.config import configure_host, reset_host
from tagged_logger.infra.environment import StaticPredicate
from tagged_logger.infra.sinks import MemorySink

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ("TestEnv",)


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars.setdefault(name, os.getenv(name))
        os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture(autouse=True)
def clean_host(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from production defaults with no installed sink."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIX):
            monkeypatch.delenv(name)
    reset_host()
    yield
    reset_host()


@pytest.fixture
def memory_sink() -> MemorySink:
    """Provide an empty recording sink."""
    return MemorySink()


@pytest.fixture
def dev_host(memory_sink: MemorySink) -> MemorySink:
    """Install a recording sink with development mode switched on."""
    configure_host(sink=memory_sink, predicate=StaticPredicate(True))
    return memory_sink


@pytest.fixture
def prod_host(memory_sink: MemorySink) -> MemorySink:
    """Install a recording sink with development mode switched off."""
    configure_host(sink=memory_sink, predicate=StaticPredicate(False))
    return memory_sink
