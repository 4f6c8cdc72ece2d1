"""Проверка доменной части адреса и отдельных меток."""

from __future__ import annotations

from mailgrammar.modules.constants import (
    MAX_DOMAIN_LABELS,
    MAX_DOMAIN_LENGTH,
    MAX_LABEL_LENGTH,
    MIN_TLD_LENGTH,
    is_letter_or_digit,
)
from mailgrammar.modules.ip_literal import is_ip_literal, validate_ip_literal


def validate_domain(domain: str) -> bool:
    """Проверяет доменное имя (минимум две метки) или IP-литерал."""
    if not domain or len(domain) > MAX_DOMAIN_LENGTH:
        return False

    if is_ip_literal(domain):
        return validate_ip_literal(domain)

    if domain.startswith(".") or domain.endswith("."):
        return False
    if ".." in domain:
        return False

    labels = domain.split(".")
    # домен без TLD не принимается
    if len(labels) < 2 or len(labels) > MAX_DOMAIN_LABELS:
        return False
    if len(labels[-1]) < MIN_TLD_LENGTH:
        return False

    return all(validate_label(label) for label in labels)


def validate_label(label: str) -> bool:
    """Метка: 1..63 символа, буквы, цифры и дефис не по краям."""
    if not label or len(label) > MAX_LABEL_LENGTH:
        return False
    if label.startswith("-") or label.endswith("-"):
        return False
    return all(is_letter_or_digit(char) or char == "-" for char in label)
