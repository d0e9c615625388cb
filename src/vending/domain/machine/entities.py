from __future__ import annotations

from typing import Any, Mapping

from vending.domain.catalog.entities import PriceTable, build_price_table
from vending.domain.common.money import to_exact_minor_units
from vending.domain.currency.entities import CurrencySettings, currency_from_mapping
from vending.domain.machine.coins import COIN_DENOMINATIONS, is_accepted_coin, make_change
from vending.domain.machine.results import (
    BalanceView,
    ChangeReturned,
    CoinAccepted,
    DrinkList,
    DrinkNotFound,
    DrinkQuote,
    InsufficientFunds,
    InvalidCoin,
    InvalidDrinkName,
    NoChangeDue,
    PurchaseSucceeded,
)


class VendingMachine:
    """Coin balance and purchase engine.

    Every operation returns a result describing what happened. Rejected
    operations leave the balance untouched and are reported through the
    result, never raised.
    """

    def __init__(self, currency: CurrencySettings, price_table: PriceTable) -> None:
        self._currency = currency
        self._price_table = price_table
        self._balance_cents = 0

    @property
    def currency(self) -> CurrencySettings:
        return self._currency

    @property
    def price_table(self) -> PriceTable:
        return self._price_table

    @property
    def balance_cents(self) -> int:
        return self._balance_cents

    def put_coin(self, amount: Any) -> CoinAccepted | InvalidCoin:
        try:
            amount_cents = to_exact_minor_units(amount)
        except ValueError:
            amount_cents = None

        if amount_cents is None or not is_accepted_coin(amount_cents):
            accepted = ", ".join(
                self._currency.format_price(coin) for coin in sorted(COIN_DENOMINATIONS)
            )
            return InvalidCoin(
                message=f"The machine accepts coins of: {accepted}",
                amount=str(amount),
                accepted_denominations=COIN_DENOMINATIONS,
            )

        self._balance_cents += amount_cents
        return CoinAccepted(
            message=(
                f"You inserted {self._currency.format_price(amount_cents)}, "
                f"your balance is {self._currency.format_price(self._balance_cents)}"
            ),
            amount_cents=amount_cents,
            balance_cents=self._balance_cents,
        )

    def buy_drink(
        self, name: Any
    ) -> InvalidDrinkName | DrinkNotFound | InsufficientFunds | PurchaseSucceeded:
        if not isinstance(name, str) or not name:
            return InvalidDrinkName(
                message="The drink name must be a non-empty string",
                name=str(name),
            )

        drink_name = name.strip()
        price_cents = self._price_table.price_of(drink_name)
        if price_cents is None:
            return DrinkNotFound(
                message=f"The drink {drink_name!r} was not found",
                name=drink_name,
            )

        if price_cents > self._balance_cents:
            return InsufficientFunds(
                message=(
                    f"Insufficient balance for {drink_name!r}: costs "
                    f"{self._currency.format_price(price_cents)}, you have "
                    f"{self._currency.format_price(self._balance_cents)}"
                ),
                name=drink_name,
                price_cents=price_cents,
                balance_cents=self._balance_cents,
            )

        self._balance_cents -= price_cents
        return PurchaseSucceeded(
            message=(
                f"You bought {drink_name!r} for {self._currency.format_price(price_cents)}, "
                f"your balance is {self._currency.format_price(self._balance_cents)}"
            ),
            name=drink_name,
            price_cents=price_cents,
            balance_cents=self._balance_cents,
        )

    def get_coins(self) -> NoChangeDue | ChangeReturned:
        if self._balance_cents == 0:
            return NoChangeDue(message="There is no change to return")

        total_cents = self._balance_cents
        coins = make_change(total_cents)
        self._balance_cents = 0

        breakdown = ", ".join(
            f"{stack.count}x{self._currency.format_price(stack.denomination)}" for stack in coins
        )
        return ChangeReturned(
            message=(
                f"Your change is {self._currency.format_price(total_cents)} "
                f"in coins of: {breakdown}"
            ),
            total_cents=total_cents,
            coins=coins,
        )

    def view_drinks(self) -> DrinkList:
        quotes = tuple(
            DrinkQuote(
                name=drink.name,
                price_cents=drink.price_cents,
                formatted_price=self._currency.format_price(drink.price_cents),
            )
            for drink in self._price_table
        )
        lines = "\n".join(f"{quote.name}: {quote.formatted_price}" for quote in quotes)
        return DrinkList(message=f"Drinks:\n{lines}", drinks=quotes)

    def view_amount(self) -> BalanceView:
        formatted = self._currency.format_price(self._balance_cents)
        return BalanceView(
            message=f"Your balance is {formatted}",
            balance_cents=self._balance_cents,
            formatted_balance=formatted,
        )


def create_vending_machine(
    currency_settings: Mapping[str, Any],
    drinks: Mapping[str, Any],
) -> VendingMachine:
    return VendingMachine(
        currency=currency_from_mapping(currency_settings),
        price_table=build_price_table(drinks),
    )
