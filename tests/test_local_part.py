"""Тесты проверки локальной части."""

from mailgrammar.modules.local_part import validate_local_part


def test_dot_atom_accepts_allowed_characters() -> None:
    assert validate_local_part("user.name+tag")
    assert validate_local_part("!name")
    assert validate_local_part("user_name")
    for char in "!#$%&'*+-/=?^_`{|}~":
        assert validate_local_part(f"user{char}"), char
    assert validate_local_part("éléonore")
    assert validate_local_part("δοκιμή")
    assert validate_local_part("我買")


def test_dot_atom_dot_placement() -> None:
    assert not validate_local_part(".user")
    assert not validate_local_part("user.")
    assert not validate_local_part("user..name")
    assert not validate_local_part("...")


def test_dot_atom_rejects_forbidden_characters() -> None:
    for char in " @()<>[]:;,\\\t\x00\x7f\"":
        assert not validate_local_part(f"us{char}er"), repr(char)


def test_local_part_length_limit() -> None:
    assert validate_local_part("a" * 64)
    assert not validate_local_part("a" * 65)
    assert not validate_local_part("")


def test_quoted_local_part() -> None:
    assert validate_local_part('"user..name"')
    assert validate_local_part('"john smith"')
    assert not validate_local_part('""')
    assert not validate_local_part('"')
