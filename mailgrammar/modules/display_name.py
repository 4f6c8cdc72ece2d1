"""Отображаемое имя и адрес в угловых скобках: Name <local@domain>."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mailgrammar.modules.constants import FIRST_PRINTABLE, LAST_PRINTABLE
from mailgrammar.modules.quoted_string import is_quoted, validate_quoted_string


@dataclass(frozen=True)
class AngleSplit:
    """Результат разбора строки на отображаемое имя и addr-spec."""

    display_name: str
    addr_spec: str


def has_angle_addr(value: str) -> bool:
    return "<" in value and value.endswith(">")


def split_for_validation(value: str) -> Optional[AngleSplit]:
    """Делит строку по последней паре <...>; None при перепутанных скобках.

    Без угловых скобок вся строка считается addr-spec.
    """
    if not has_angle_addr(value):
        return AngleSplit(display_name="", addr_spec=value)

    angle_start = value.rfind("<")
    angle_end = value.rfind(">")
    if angle_start < 0 or angle_end <= angle_start:
        return None

    return AngleSplit(
        display_name=value[:angle_start].strip(),
        addr_spec=value[angle_start + 1:angle_end].strip(),
    )


def split_for_parse(value: str) -> Optional[AngleSplit]:
    """Делит строку по первой '<' и снимает один слой кавычек с имени."""
    if not has_angle_addr(value):
        return AngleSplit(display_name="", addr_spec=value)

    angle_start = value.find("<")
    angle_end = value.rfind(">")
    if angle_start < 0 or angle_end <= angle_start:
        return None

    return AngleSplit(
        display_name=unquote_display_name(value[:angle_start].strip()),
        addr_spec=value[angle_start + 1:angle_end].strip(),
    )


def unquote_display_name(name: str) -> str:
    if len(name) >= 2 and is_quoted(name):
        return name[1:-1]
    return name


def validate_display_name(name: str) -> bool:
    """Пустое имя допустимо; имя в кавычках проверяется как quoted-string.

    Для имени без кавычек разрешён весь печатный ASCII, а за его пределами
    только буквы, цифры и пробел.
    """
    if not name:
        return True

    name = name.strip()
    if is_quoted(name):
        return validate_quoted_string(name)

    for char in name:
        code = ord(char)
        if FIRST_PRINTABLE <= code <= LAST_PRINTABLE:
            continue
        if not (char.isalpha() or char.isdecimal() or char == " "):
            return False
    return True
