"""Проверка локальной части адреса (до последнего @)."""

from __future__ import annotations

from mailgrammar.modules.constants import (
    LOCAL_PART_SPECIALS,
    MAX_LOCAL_PART_LENGTH,
    is_letter_or_digit,
)
from mailgrammar.modules.quoted_string import is_quoted, validate_quoted_string


def is_local_part_char(char: str) -> bool:
    return is_letter_or_digit(char) or char in LOCAL_PART_SPECIALS


def validate_local_part(local_part: str) -> bool:
    """Проверяет локальную часть: строку в кавычках либо dot-atom."""
    if not local_part or len(local_part) > MAX_LOCAL_PART_LENGTH:
        return False

    if is_quoted(local_part):
        return validate_quoted_string(local_part)

    if local_part.startswith(".") or local_part.endswith("."):
        return False
    if ".." in local_part:
        return False

    return all(is_local_part_char(char) for char in local_part)
