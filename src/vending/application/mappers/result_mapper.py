from __future__ import annotations

from vending.application.dto.responses import CoinStackResponse, DrinkResponse, ResultResponse
from vending.domain.currency.entities import CurrencySettings
from vending.domain.machine.results import (
    ChangeReturned,
    CoinAccepted,
    DrinkList,
    DrinkNotFound,
    InsufficientFunds,
    InvalidCoin,
    InvalidDrinkName,
    MachineResult,
    PurchaseSucceeded,
)


def to_result_response(
    result: MachineResult,
    balance_cents: int,
    currency: CurrencySettings,
) -> ResultResponse:
    response = ResultResponse(
        kind=result.kind.value,
        isError=result.is_error,
        message=result.message,
        balanceCents=balance_cents,
    )

    if isinstance(result, CoinAccepted):
        response.amountCents = result.amount_cents
    elif isinstance(result, InvalidCoin):
        response.acceptedDenominations = [
            currency.format_price(coin) for coin in result.accepted_denominations
        ]
    elif isinstance(result, (InvalidDrinkName, DrinkNotFound)):
        response.drinkName = result.name
    elif isinstance(result, (InsufficientFunds, PurchaseSucceeded)):
        response.drinkName = result.name
        response.amountCents = result.price_cents
    elif isinstance(result, ChangeReturned):
        response.amountCents = result.total_cents
        response.coins = [
            CoinStackResponse(
                count=stack.count,
                denominationCents=stack.denomination,
                formattedDenomination=currency.format_price(stack.denomination),
            )
            for stack in result.coins
        ]
    elif isinstance(result, DrinkList):
        response.drinks = [
            DrinkResponse(
                name=quote.name,
                priceCents=quote.price_cents,
                formattedPrice=quote.formatted_price,
            )
            for quote in result.drinks
        ]

    return response
