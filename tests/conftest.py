"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from typing import Any

import pytest

from flower_discovery.config import get_settings
from flower_discovery.schemas import Flower


@pytest.fixture
def make_flower() -> Callable[..., Flower]:
    """Factory for flowers generated on 2025-06-``day`` at noon UTC."""

    def factory(name: str = "Damask Rose", day: int = 1, **kwargs: Any) -> Flower:
        kwargs.setdefault("generated_date", datetime(2025, 6, day, 12, 0, tzinfo=UTC))
        kwargs.setdefault("descriptor", name.lower())
        return Flower(name=name, **kwargs)

    return factory


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Settings are cached per process; re-read them for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
