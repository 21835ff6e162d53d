"""Общие фикстуры для тестов."""

from typing import Iterator

import pytest

from emailaddress.config import get_settings


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Фиксирует переменные окружения и сбрасывает кэш настроек."""
    monkeypatch.setenv("EMAILADDRESS_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("EMAILADDRESS_SHOW_BANNER", "false")
    monkeypatch.setenv("EMAILADDRESS_SHOW_REASON", "true")
    monkeypatch.setenv("EMAILADDRESS_STRIP_INPUT", "true")
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
