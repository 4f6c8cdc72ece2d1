"""Тесты пакетной проверки адресов."""

import io

from mailgrammar.modules.report import ValidationSummary, check_addresses, read_addresses


def test_check_addresses_counts_results() -> None:
    results, summary = check_addresses(
        ["user@example.com", "user@domain.c", '"John Doe" <john.doe@example.com>']
    )

    assert summary.processed == 3
    assert summary.valid == 2
    assert summary.invalid == 1
    assert summary.all_valid is False

    assert results[0].valid is True
    assert results[0].parsed is not None
    assert results[0].parsed.address == "user@example.com"
    assert results[1].valid is False
    assert results[1].parsed is None
    assert results[2].parsed is not None
    assert results[2].parsed.display_name == "John Doe"


def test_summary_all_valid_requires_input() -> None:
    assert ValidationSummary().all_valid is False
    _, summary = check_addresses(["a@b.co"])
    assert summary.all_valid is True


def test_read_addresses_keeps_significant_whitespace() -> None:
    handle = io.StringIO("# список\nuser@example.com\r\n\n user@example.com\nlast@example.com")

    values = list(read_addresses(handle))

    assert values == ["user@example.com", " user@example.com", "last@example.com"]
