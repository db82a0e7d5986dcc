"""Shared pytest fixtures for the architect test suite."""

from __future__ import annotations

import pytest

from architect.core.logging import setup_logging


@pytest.fixture(autouse=True, scope="session")
def _configure_logging() -> None:
    setup_logging()


@pytest.fixture(autouse=True)
def _no_cc(monkeypatch: pytest.MonkeyPatch) -> None:
    # Compiler detection must not depend on the developer's shell.
    monkeypatch.delenv("CC", raising=False)
