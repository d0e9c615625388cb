from __future__ import annotations

from dataclasses import dataclass

# Largest first; greedy change-making relies on this order.
COIN_DENOMINATIONS: tuple[int, ...] = (100, 50, 20, 10, 5)
SMALLEST_DENOMINATION = COIN_DENOMINATIONS[-1]


@dataclass(frozen=True)
class CoinStack:
    count: int
    denomination: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("count must be >= 1")
        if self.denomination not in COIN_DENOMINATIONS:
            raise ValueError(f"unknown denomination {self.denomination}")

    @property
    def total_cents(self) -> int:
        return self.count * self.denomination


def is_accepted_coin(amount_cents: int) -> bool:
    return amount_cents in COIN_DENOMINATIONS


def make_change(amount_cents: int) -> tuple[CoinStack, ...]:
    """Split ``amount_cents`` into coin stacks, largest denomination first.

    Greedy selection is optimal for this denomination set. Denominations that
    would be used zero times are left out.
    """
    if amount_cents < 0:
        raise ValueError("amount_cents must be >= 0")
    if amount_cents % SMALLEST_DENOMINATION != 0:
        raise ValueError(f"amount_cents must be a multiple of {SMALLEST_DENOMINATION}")

    stacks: list[CoinStack] = []
    remaining = amount_cents
    for denomination in COIN_DENOMINATIONS:
        count = remaining // denomination
        if count >= 1:
            stacks.append(CoinStack(count=count, denomination=denomination))
            remaining -= count * denomination

    if remaining != 0:
        raise ValueError(f"could not split {amount_cents} into coins, {remaining} left over")
    return tuple(stacks)
