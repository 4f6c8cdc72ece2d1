"""Удаление комментариев в круглых скобках."""

from __future__ import annotations


def strip_comments(value: str) -> str:
    """Возвращает строку без комментариев, сохраняя кавычки и экранирование.

    Вложенные комментарии удаляются целиком. Скобки внутри кавычек остаются
    как есть. Несбалансированные скобки здесь не отклоняются: остаток с
    мусором отсеют проверки символов.
    """
    if not value:
        return value

    result = []
    depth = 0
    in_quotes = False
    escaped = False

    for char in value:
        if escaped:
            if depth == 0:
                result.append(char)
            escaped = False
            continue

        if char == "\\":
            escaped = True
            if depth == 0:
                result.append(char)
            continue

        if not in_quotes and char == "(":
            depth += 1
        elif not in_quotes and char == ")":
            depth -= 1
        elif char == '"' and depth == 0:
            in_quotes = not in_quotes
            result.append(char)
        elif depth == 0:
            result.append(char)

    return "".join(result)
