"""Общие фикстуры для тестов."""

from typing import Iterator

import pytest

from mailgrammar.config import get_settings


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Убирает переменные окружения утилиты и сбрасывает кэш настроек."""
    for key in ("MAILGRAMMAR_LOG_LEVEL", "MAILGRAMMAR_SHOW_PARSED", "MAILGRAMMAR_INPUT_ENCODING"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
