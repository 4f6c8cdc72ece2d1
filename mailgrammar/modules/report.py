"""Пакетная проверка адресов и итоговая статистика."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

from mailgrammar.modules.address import ParsedAddress
from mailgrammar.modules.validator import parse, validate

LOGGER = logging.getLogger("mailgrammar.report")


@dataclass(frozen=True)
class CheckResult:
    """Результат проверки одной строки."""

    raw: str
    valid: bool
    parsed: Optional[ParsedAddress]


@dataclass
class ValidationSummary:
    """Счётчики пакетной проверки."""

    processed: int = 0
    valid: int = 0
    invalid: int = 0

    @property
    def all_valid(self) -> bool:
        return self.processed > 0 and self.invalid == 0


def check_addresses(values: Iterable[str]) -> Tuple[List[CheckResult], ValidationSummary]:
    """Проверяет строки по очереди и считает валидные и невалидные."""
    summary = ValidationSummary()
    results: List[CheckResult] = []

    for raw in values:
        valid = validate(raw)
        parsed = parse(raw) if valid else None
        results.append(CheckResult(raw=raw, valid=valid, parsed=parsed))
        summary.processed += 1
        if valid:
            summary.valid += 1
        else:
            summary.invalid += 1

    if summary.invalid:
        LOGGER.debug("Отклонено адресов: %s из %s", summary.invalid, summary.processed)
    return results, summary


def read_addresses(handle: TextIO) -> Iterator[str]:
    """Читает адреса построчно, срезая только перевод строки.

    Пробелы по краям значимы и не удаляются. Пустые строки и строки,
    начинающиеся с '#', пропускаются.
    """
    for line in handle:
        value = line.rstrip("\r\n")
        if not value or value.startswith("#"):
            continue
        yield value
