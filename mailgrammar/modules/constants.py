"""Ограничения грамматики адреса и наборы допустимых символов."""

from __future__ import annotations

MAX_ADDRESS_LENGTH = 320
MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63
MAX_DOMAIN_LABELS = 127
MIN_TLD_LENGTH = 2

MAX_IPV4_OCTET = 255
IPV4_PARTS = 4
MAX_IPV6_GROUPS = 8
MAX_IPV6_GROUP_DIGITS = 4
IPV6_PREFIX = "ipv6:"

LOCAL_PART_SPECIALS = frozenset("!#$%&'*+-/=?^_`{|}~.")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

DEL = 127
FIRST_PRINTABLE = 32
LAST_PRINTABLE = 126


def is_letter_or_digit(char: str) -> bool:
    """Буква любого алфавита или десятичная цифра (категории L* и Nd)."""
    return char.isalpha() or char.isdecimal()
