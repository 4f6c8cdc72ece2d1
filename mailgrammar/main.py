"""Консольная проверка адресов электронной почты."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from mailgrammar.config import get_settings
from mailgrammar.modules.report import CheckResult, check_addresses, read_addresses

LOGGER = logging.getLogger("mailgrammar.main")


def _print_result(result: CheckResult, show_parsed: bool) -> None:
    verdict = "VALID" if result.valid else "INVALID"
    print(f"'{result.raw:<40}' is {verdict}")
    if show_parsed and result.parsed is not None:
        print(f"  Display Name: '{result.parsed.display_name}'")
        print(f"  Local Part: '{result.parsed.local_part}'")
        print(f"  Domain: '{result.parsed.domain}'")
        print(f"  Full Address: '{result.parsed.address}'")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Проверяет адреса из аргументов и/или файла, возвращает код выхода."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="RFC 5322 email address checker")
    parser.add_argument("addresses", nargs="*", help="Адреса для проверки")
    parser.add_argument(
        "--file",
        type=argparse.FileType("r", encoding=settings.input_encoding),
        help="Файл с адресами, по одному на строку",
    )
    parser.add_argument(
        "--parse",
        action="store_true",
        default=settings.show_parsed,
        help="Показывать имя, локальную часть и домен для валидных адресов",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.logging_level(),
        format="%(asctime)s %(levelname)s %(name)s :: %(message)s",
    )

    values: List[str] = list(args.addresses)
    if args.file is not None:
        with args.file as handle:
            values.extend(read_addresses(handle))

    if not values:
        parser.print_usage()
        LOGGER.warning("Не передано ни одного адреса.")
        return 2

    results, summary = check_addresses(values)
    for result in results:
        _print_result(result, args.parse)

    LOGGER.info(
        "Готово: проверено %s адресов, валидных %s, невалидных %s",
        summary.processed,
        summary.valid,
        summary.invalid,
    )
    return 0 if summary.all_valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
