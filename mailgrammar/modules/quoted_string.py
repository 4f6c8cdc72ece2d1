"""Грамматика строки в кавычках (локальная часть и отображаемое имя)."""

from __future__ import annotations

from mailgrammar.modules.constants import DEL, FIRST_PRINTABLE


def is_quoted(value: str) -> bool:
    """Строка начинается и заканчивается двойной кавычкой."""
    return value.startswith('"') and value.endswith('"')


def validate_quoted_string(value: str) -> bool:
    """Проверяет строку вида "...": непустое содержимое, корректные экранирования."""
    if len(value) < 2 or not is_quoted(value):
        return False

    content = value[1:-1]
    if not content:
        return False

    index = 0
    while index < len(content):
        char = content[index]
        if char == "\\":
            # незавершённое экранирование в конце строки
            if index + 1 >= len(content):
                return False
            index += 2
            continue

        code = ord(char)
        if char == '"' or code < FIRST_PRINTABLE or code == DEL:
            return False
        index += 1

    return True
