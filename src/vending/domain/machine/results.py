from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from vending.domain.machine.coins import CoinStack


class ResultKind(str, Enum):
    COIN_ACCEPTED = "COIN_ACCEPTED"
    INVALID_COIN = "INVALID_COIN"
    INVALID_DRINK_NAME = "INVALID_DRINK_NAME"
    DRINK_NOT_FOUND = "DRINK_NOT_FOUND"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    PURCHASE_SUCCEEDED = "PURCHASE_SUCCEEDED"
    NO_CHANGE_DUE = "NO_CHANGE_DUE"
    CHANGE_RETURNED = "CHANGE_RETURNED"
    DRINK_LIST = "DRINK_LIST"
    BALANCE_VIEW = "BALANCE_VIEW"


ERROR_KINDS = frozenset(
    {
        ResultKind.INVALID_COIN,
        ResultKind.INVALID_DRINK_NAME,
        ResultKind.DRINK_NOT_FOUND,
        ResultKind.INSUFFICIENT_FUNDS,
        ResultKind.NO_CHANGE_DUE,
    }
)


@dataclass(frozen=True)
class MachineResult:
    kind: ClassVar[ResultKind]
    message: str

    @property
    def is_error(self) -> bool:
        return self.kind in ERROR_KINDS


@dataclass(frozen=True)
class CoinAccepted(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.COIN_ACCEPTED
    amount_cents: int
    balance_cents: int


@dataclass(frozen=True)
class InvalidCoin(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.INVALID_COIN
    amount: str
    accepted_denominations: tuple[int, ...]


@dataclass(frozen=True)
class InvalidDrinkName(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.INVALID_DRINK_NAME
    name: str


@dataclass(frozen=True)
class DrinkNotFound(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.DRINK_NOT_FOUND
    name: str


@dataclass(frozen=True)
class InsufficientFunds(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.INSUFFICIENT_FUNDS
    name: str
    price_cents: int
    balance_cents: int


@dataclass(frozen=True)
class PurchaseSucceeded(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.PURCHASE_SUCCEEDED
    name: str
    price_cents: int
    balance_cents: int


@dataclass(frozen=True)
class NoChangeDue(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.NO_CHANGE_DUE


@dataclass(frozen=True)
class ChangeReturned(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.CHANGE_RETURNED
    total_cents: int
    coins: tuple[CoinStack, ...]


@dataclass(frozen=True)
class DrinkQuote:
    name: str
    price_cents: int
    formatted_price: str


@dataclass(frozen=True)
class DrinkList(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.DRINK_LIST
    drinks: tuple[DrinkQuote, ...]


@dataclass(frozen=True)
class BalanceView(MachineResult):
    kind: ClassVar[ResultKind] = ResultKind.BALANCE_VIEW
    balance_cents: int
    formatted_balance: str
