from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from vending.domain.common.errors import InvalidConfigError
from vending.domain.common.money import format_minor_units


class CurrencyPosition(str, Enum):
    BEFORE = "BEFORE"
    AFTER = "AFTER"


# Integer codes accepted for configs written against the numeric convention.
_LEGACY_POSITION_CODES = {
    0: CurrencyPosition.BEFORE,
    1: CurrencyPosition.AFTER,
}


def parse_position(value: Any) -> CurrencyPosition:
    if isinstance(value, CurrencyPosition):
        return value
    if isinstance(value, bool):
        raise InvalidConfigError(f"currency position must be BEFORE or AFTER, got {value!r}")
    if isinstance(value, int) and value in _LEGACY_POSITION_CODES:
        return _LEGACY_POSITION_CODES[value]
    if isinstance(value, str):
        try:
            return CurrencyPosition(value.strip().upper())
        except ValueError:
            pass
    raise InvalidConfigError(f"currency position must be BEFORE or AFTER, got {value!r}")


@dataclass(frozen=True)
class CurrencySettings:
    sign: str
    spacer: str
    position: CurrencyPosition

    def __post_init__(self) -> None:
        if not isinstance(self.sign, str) or not self.sign.strip():
            raise InvalidConfigError("currency sign must be a non-empty string")
        if not isinstance(self.spacer, str):
            raise InvalidConfigError("currency spacer must be a string")
        if not isinstance(self.position, CurrencyPosition):
            raise InvalidConfigError(
                f"currency position must be BEFORE or AFTER, got {self.position!r}"
            )
        object.__setattr__(self, "sign", self.sign.strip())

    def format_price(self, amount_cents: int) -> str:
        number = format_minor_units(amount_cents)
        if self.position == CurrencyPosition.BEFORE:
            return f"{self.sign}{self.spacer}{number}"
        return f"{number}{self.spacer}{self.sign}"


def currency_from_mapping(settings: Mapping[str, Any]) -> CurrencySettings:
    if "spacer" not in settings:
        raise InvalidConfigError("currency settings must contain a 'spacer' string")
    return CurrencySettings(
        sign=settings.get("sign"),
        spacer=settings["spacer"],
        position=parse_position(settings.get("position")),
    )
