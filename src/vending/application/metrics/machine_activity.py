from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

from vending.domain.machine.results import (
    ChangeReturned,
    CoinAccepted,
    MachineResult,
    PurchaseSucceeded,
)

RESULTS_TOTAL = Counter(
    "vending_results_total",
    "Total number of machine results observed by kind.",
    ["kind"],
)

COINS_ACCEPTED_TOTAL = Counter(
    "vending_coins_accepted_total",
    "Total number of coins accepted by denomination.",
    ["denomination_cents"],
)

PURCHASES_TOTAL = Counter(
    "vending_purchases_total",
    "Total number of successful purchases by drink.",
    ["drink"],
)

REVENUE_CENTS_TOTAL = Counter(
    "vending_revenue_cents_total",
    "Total price of successful purchases in cents.",
)

CHANGE_RETURNED_CENTS = Histogram(
    "vending_change_returned_cents",
    "Amount of change returned per request in cents.",
    buckets=(5, 10, 20, 50, 100, 200, 500, 1000),
)

BALANCE_CENTS = Gauge(
    "vending_balance_cents",
    "Current machine balance in cents.",
    ["machine_id"],
)


def record_result(result: MachineResult) -> None:
    RESULTS_TOTAL.labels(kind=result.kind.value).inc()

    if isinstance(result, CoinAccepted):
        COINS_ACCEPTED_TOTAL.labels(denomination_cents=str(result.amount_cents)).inc()
    elif isinstance(result, PurchaseSucceeded):
        PURCHASES_TOTAL.labels(drink=result.name).inc()
        REVENUE_CENTS_TOTAL.inc(result.price_cents)
    elif isinstance(result, ChangeReturned):
        CHANGE_RETURNED_CENTS.observe(result.total_cents)


def record_balance(machine_id: str, balance_cents: int) -> None:
    BALANCE_CENTS.labels(machine_id=machine_id).set(balance_cents)
