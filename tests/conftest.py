"""Shared pytest fixtures for all test types."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host LOG_/RBAC_ variables from leaking into settings."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "RBAC_MULTI_ROLE_POLICY", "RBAC_STRICT_LINT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """CLI runs call setup_logging, which replaces root handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
