"""Проверка и разбор адресов электронной почты по грамматике RFC 5322.

Любое нарушение правил даёт один и тот же результат: ``False`` у
:func:`validate` и ``None`` у :func:`parse`. Причина отказа пишется только в
DEBUG-лог.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from mailgrammar.modules.address import ParsedAddress
from mailgrammar.modules.comments import strip_comments
from mailgrammar.modules.constants import MAX_ADDRESS_LENGTH
from mailgrammar.modules.display_name import (
    split_for_parse,
    split_for_validation,
    validate_display_name,
)
from mailgrammar.modules.domain import validate_domain
from mailgrammar.modules.local_part import validate_local_part

LOGGER = logging.getLogger("mailgrammar.validator")


def split_addr_spec(addr_spec: str) -> Optional[Tuple[str, str]]:
    """Делит addr-spec по последнему @ на локальную часть и домен."""
    at_index = addr_spec.rfind("@")
    if at_index <= 0 or at_index == len(addr_spec) - 1:
        return None
    return addr_spec[:at_index], addr_spec[at_index + 1:]


def _check_addr_spec(addr_spec: str) -> Optional[Tuple[str, str]]:
    parts = split_addr_spec(addr_spec)
    if parts is None:
        LOGGER.debug("Не удалось выделить локальную часть и домен: %r", addr_spec)
        return None

    local_part, domain = parts
    if not validate_local_part(local_part):
        LOGGER.debug("Локальная часть отклонена: %r", local_part)
        return None
    if not validate_domain(domain):
        LOGGER.debug("Домен отклонён: %r", domain)
        return None
    return local_part, domain


def _prepare(value: object) -> Optional[str]:
    """Возвращает строку без комментариев или None, если вход сразу отклонён."""
    if not isinstance(value, str) or not value.strip():
        return None
    if value != value.strip():
        LOGGER.debug("Пробельные символы по краям адреса: %r", value)
        return None

    cleaned = strip_comments(value)
    if len(cleaned) > MAX_ADDRESS_LENGTH:
        LOGGER.debug("Адрес длиннее %s символов.", MAX_ADDRESS_LENGTH)
        return None
    return cleaned


def validate(value: object) -> bool:
    """True, если строка целиком соответствует грамматике адреса."""
    cleaned = _prepare(value)
    if cleaned is None:
        return False

    split = split_for_validation(cleaned)
    if split is None:
        LOGGER.debug("Некорректные угловые скобки: %r", cleaned)
        return False

    if split.display_name and not validate_display_name(split.display_name):
        LOGGER.debug("Отображаемое имя отклонено: %r", split.display_name)
        return False

    return _check_addr_spec(split.addr_spec) is not None


is_rfc_compliant = validate


def parse(value: object) -> Optional[ParsedAddress]:
    """Разбирает адрес на части; None, если адрес не проходит :func:`validate`."""
    if not validate(value):
        return None

    cleaned = strip_comments(value)  # type: ignore[arg-type]
    split = split_for_parse(cleaned)
    if split is None:
        return None

    parts = _check_addr_spec(split.addr_spec)
    if parts is None:
        LOGGER.debug("Разбор по первой '<' не совпал с проверкой: %r", cleaned)
        return None

    local_part, domain = parts
    return ParsedAddress(display_name=split.display_name, local_part=local_part, domain=domain)
