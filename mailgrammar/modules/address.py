"""Разобранный адрес электронной почты."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class ParsedAddress:
    """Неизменяемый результат разбора: имя, локальная часть, домен.

    Сравнение и хеширование выполняются по ``address`` без учёта регистра.
    """

    display_name: str
    local_part: str
    domain: str

    def __post_init__(self) -> None:
        if not self.local_part or not self.domain:
            raise ValueError("local_part and domain must be non-empty")
        if self.display_name is None:
            object.__setattr__(self, "display_name", "")

    @property
    def address(self) -> str:
        return f"{self.local_part}@{self.domain}"

    @property
    def ascii_domain(self) -> str:
        """Домен в punycode (IDNA); при ошибке кодека — в нижнем регистре."""
        domain = self.domain.lower()
        try:
            return domain.encode("idna").decode("ascii")
        except UnicodeError:
            return domain

    def __str__(self) -> str:
        if not self.display_name:
            return self.address
        name = self.display_name.replace('\\"', '"').replace('"', '\\"')
        return f'"{name}" <{self.address}>'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedAddress):
            return NotImplemented
        return self.address.casefold() == other.address.casefold()

    def __hash__(self) -> int:
        return hash(self.address.casefold())
