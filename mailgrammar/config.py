"""Загрузка конфигурации консольной утилиты из переменных окружения."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    """Глобальные настройки утилиты. Грамматика адреса от них не зависит."""

    log_level: str
    show_parsed: bool
    input_encoding: str

    def logging_level(self) -> int:
        """Числовой уровень логирования; неизвестное имя даёт INFO."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_bool(key: str, default: bool = False) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    return Settings(
        log_level=_env("MAILGRAMMAR_LOG_LEVEL", "INFO") or "INFO",
        show_parsed=_env_bool("MAILGRAMMAR_SHOW_PARSED", False),
        input_encoding=_env("MAILGRAMMAR_INPUT_ENCODING", "utf-8") or "utf-8",
    )
