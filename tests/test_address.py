"""Тесты значения ParsedAddress."""

import pytest

from mailgrammar.modules.address import ParsedAddress


def test_address_and_str() -> None:
    plain = ParsedAddress(display_name="", local_part="john.doe", domain="example.com")
    assert plain.address == "john.doe@example.com"
    assert str(plain) == "john.doe@example.com"

    named = ParsedAddress(display_name="John Doe", local_part="john.doe", domain="example.com")
    assert str(named) == '"John Doe" <john.doe@example.com>'


def test_str_escapes_quotes_once() -> None:
    raw = ParsedAddress(display_name='Say "hi"', local_part="a", domain="example.com")
    assert str(raw) == '"Say \\"hi\\"" <a@example.com>'

    escaped = ParsedAddress(display_name='Say \\"hi\\"', local_part="a", domain="example.com")
    assert str(escaped) == '"Say \\"hi\\"" <a@example.com>'


def test_equality_is_case_insensitive() -> None:
    first = ParsedAddress(display_name="A", local_part="User", domain="Example.COM")
    second = ParsedAddress(display_name="B", local_part="user", domain="example.com")

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first != ParsedAddress(display_name="", local_part="other", domain="example.com")
    assert first != "user@example.com"


def test_ascii_domain() -> None:
    assert ParsedAddress("", "user", "München.de").ascii_domain == "xn--mnchen-3ya.de"
    assert ParsedAddress("", "user", "Example.com").ascii_domain == "example.com"
    assert ParsedAddress("", "user", "[192.168.2.1]").ascii_domain == "[192.168.2.1]"


def test_requires_local_part_and_domain() -> None:
    with pytest.raises(ValueError):
        ParsedAddress(display_name="", local_part="", domain="example.com")
    with pytest.raises(ValueError):
        ParsedAddress(display_name="", local_part="user", domain="")
