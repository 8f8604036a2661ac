"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest

from bigdecimal.config import MAX_SCALE_ENV, MIN_SCALE_ENV, get_config


@pytest.fixture(autouse=True)
def default_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against the default scale bounds.

    Tests that need other bounds set the environment variables themselves
    and call get_config.cache_clear().
    """
    monkeypatch.delenv(MIN_SCALE_ENV, raising=False)
    monkeypatch.delenv(MAX_SCALE_ENV, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def narrow_scale(monkeypatch: pytest.MonkeyPatch) -> None:
    """Restrict scales to [-10, 10]."""
    monkeypatch.setenv(MIN_SCALE_ENV, "-10")
    monkeypatch.setenv(MAX_SCALE_ENV, "10")
    get_config.cache_clear()
