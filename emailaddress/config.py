"""Загрузка конфигурации утилит из переменных окружения."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"


@dataclass(frozen=True)
class CLISettings:
    """Параметры консольных утилит."""

    log_level: int
    show_banner: bool
    show_reason: bool
    strip_input: bool


@dataclass(frozen=True)
class Settings:
    """Глобальные настройки приложения."""

    cli: CLISettings


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_log_level(key: str, default: int = logging.WARNING) -> int:
    name = _env(key).upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.cli.log_level, format=LOG_FORMAT)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    cli = CLISettings(
        log_level=_env_log_level("EMAILADDRESS_LOG_LEVEL"),
        show_banner=_env_bool("EMAILADDRESS_SHOW_BANNER", True),
        show_reason=_env_bool("EMAILADDRESS_SHOW_REASON", True),
        strip_input=_env_bool("EMAILADDRESS_STRIP_INPUT", True),
    )
    return Settings(cli=cli)
