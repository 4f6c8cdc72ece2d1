"""Проверка доменов-литералов вида [192.0.2.1] и [IPv6:2001:db8::1].

IPv6 проверяется упрощённо: повторное сжатие ``::`` и семантика ведущих нулей
не контролируются.
"""

from __future__ import annotations

from mailgrammar.modules.constants import (
    HEX_DIGITS,
    IPV4_PARTS,
    IPV6_PREFIX,
    MAX_IPV4_OCTET,
    MAX_IPV6_GROUP_DIGITS,
    MAX_IPV6_GROUPS,
)

_IPV6_ALWAYS_VALID = {"::", "::1"}


def is_ip_literal(domain: str) -> bool:
    return domain.startswith("[") and domain.endswith("]")


def validate_ip_literal(literal: str) -> bool:
    """Снимает квадратные скобки и проверяет IPv4 или IPv6 (с префиксом IPv6:)."""
    if len(literal) < 2 or not is_ip_literal(literal):
        return False

    content = literal[1:-1]
    if content[: len(IPV6_PREFIX)].lower() == IPV6_PREFIX:
        return is_valid_ipv6(content[len(IPV6_PREFIX):])
    return is_valid_ipv4(content)


def is_valid_ipv4(value: str) -> bool:
    """Ровно четыре десятичных октета 0..255 без ведущих нулей."""
    parts = value.split(".")
    if len(parts) != IPV4_PARTS:
        return False

    for part in parts:
        if not part or not (part.isascii() and part.isdigit()):
            return False
        if len(part) > 1 and part.startswith("0"):
            return False
        if int(part) > MAX_IPV4_OCTET:
            return False
    return True


def is_valid_ipv6(value: str) -> bool:
    if value in _IPV6_ALWAYS_VALID:
        return True
    if not value:
        return False
    if any(char not in HEX_DIGITS and char != ":" for char in value):
        return False
    if ":::" in value:
        return False

    groups = value.split(":")
    if len(groups) > MAX_IPV6_GROUPS:
        return False

    compressed = "::" in value
    if not compressed and len(groups) != MAX_IPV6_GROUPS:
        return False

    for group in groups:
        if not group:
            if not compressed:
                return False
            continue
        if len(group) > MAX_IPV6_GROUP_DIGITS:
            return False
    return True
