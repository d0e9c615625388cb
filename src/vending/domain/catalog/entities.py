from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, Mapping

from vending.domain.common.errors import InvalidPriceStepError, InvalidPriceTableError
from vending.domain.common.money import to_decimal, to_minor_units

PRICE_STEP_CENTS = 5


@dataclass(frozen=True)
class DrinkPrice:
    name: str
    price_cents: int

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidPriceTableError("drink name must be non-empty")
        if self.price_cents <= 0:
            raise InvalidPriceTableError(f"price of {self.name!r} must be positive")
        if self.price_cents % PRICE_STEP_CENTS != 0:
            raise InvalidPriceStepError(
                f"price of {self.name!r} must be a multiple of {PRICE_STEP_CENTS} cents"
            )


@dataclass(frozen=True)
class PriceTable:
    drinks: tuple[DrinkPrice, ...]

    def __post_init__(self) -> None:
        if not self.drinks:
            raise InvalidPriceTableError("price table must contain at least one drink")
        seen: set[str] = set()
        for drink in self.drinks:
            if drink.name in seen:
                raise InvalidPriceTableError(f"duplicate drink name {drink.name!r}")
            seen.add(drink.name)

    def price_of(self, name: str) -> int | None:
        for drink in self.drinks:
            if drink.name == name:
                return drink.price_cents
        return None

    def __contains__(self, name: object) -> bool:
        return any(drink.name == name for drink in self.drinks)

    def __iter__(self) -> Iterator[DrinkPrice]:
        return iter(self.drinks)

    def __len__(self) -> int:
        return len(self.drinks)


def _is_positive_number(price: Any) -> bool:
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal, str)):
        return False
    try:
        return to_decimal(price) > 0
    except ValueError:
        return False


def build_price_table(prices: Mapping[str, Any]) -> PriceTable:
    """Validate raw ``name -> major-unit price`` pairs into a :class:`PriceTable`.

    Names are trimmed and kept case-sensitive. Prices are rounded half-up to
    whole cents before the step check, so ``0.449999`` is treated as ``0.45``.
    """
    if not prices:
        raise InvalidPriceTableError("price table must contain at least one drink")

    drinks: list[DrinkPrice] = []
    for raw_name, raw_price in prices.items():
        if not isinstance(raw_name, str) or not raw_name.strip():
            raise InvalidPriceTableError("drink names must be non-empty strings")
        if not _is_positive_number(raw_price):
            raise InvalidPriceTableError(
                f"price of {raw_name.strip()!r} must be a positive number, got {raw_price!r}"
            )

        try:
            price_cents = to_minor_units(raw_price)
        except ValueError as exc:
            raise InvalidPriceTableError(
                f"price of {raw_name.strip()!r} is out of range, got {raw_price!r}"
            ) from exc
        if price_cents % PRICE_STEP_CENTS != 0:
            raise InvalidPriceStepError(
                f"price of {raw_name.strip()!r} must be a multiple of "
                f"{PRICE_STEP_CENTS} cents, got {raw_price!r}"
            )
        drinks.append(DrinkPrice(name=raw_name.strip(), price_cents=price_cents))

    return PriceTable(drinks=tuple(drinks))
