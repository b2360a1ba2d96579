"""Shared pytest fixtures for calcdemo tests."""

import pytest

from calcdemo.core.environment import INT_BITS_VAR, LOG_LEVEL_VAR, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default settings unless it opts in."""
    monkeypatch.delenv(INT_BITS_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)


@pytest.fixture
def int32() -> Settings:
    """C-int-sized settings (the default)."""
    return Settings(int_bits=32)


@pytest.fixture
def unbounded() -> Settings:
    """Settings using Python's arbitrary precision integers."""
    return Settings(int_bits=0)
