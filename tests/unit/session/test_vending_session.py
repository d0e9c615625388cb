from __future__ import annotations

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from vending.application.dto.requests import CommandRequest
from vending.application.dto.responses import ResultResponse
from vending.application.use_cases.vending_session import VendingSession
from vending.domain.machine.entities import create_vending_machine


class FakeNotifier:
    def __init__(self) -> None:
        self.results: list[ResultResponse] = []

    def notify(self, result: ResultResponse) -> None:
        self.results.append(result)


class BrokenNotifier:
    def notify(self, result: ResultResponse) -> None:
        raise ConnectionError("sink unavailable")


def _session(notifier=None) -> VendingSession:
    machine = create_vending_machine(
        {"sign": "лв.", "spacer": "", "position": "AFTER"},
        {"Milk": 0.5, "Espresso": 0.40, "Long Espresso": 0.60},
    )
    return VendingSession(machine=machine, notifier=notifier or FakeNotifier())


def test_chained_calls_return_same_session_and_notify_in_order() -> None:
    notifier = FakeNotifier()
    session = _session(notifier)

    returned = (
        session.buy_drink("espresso")
        .buy_drink("Espresso")
        .view_drinks()
        .put_coin(2)
        .put_coin(1)
        .buy_drink("Espresso")
        .get_coins()
        .view_amount()
        .get_coins()
    )

    assert returned is session
    assert [result.kind for result in notifier.results] == [
        "DRINK_NOT_FOUND",
        "INSUFFICIENT_FUNDS",
        "DRINK_LIST",
        "INVALID_COIN",
        "COIN_ACCEPTED",
        "PURCHASE_SUCCEEDED",
        "CHANGE_RETURNED",
        "BALANCE_VIEW",
        "NO_CHANGE_DUE",
    ]
    assert session.results == notifier.results
    assert session.machine.balance_cents == 0


def test_response_payloads() -> None:
    notifier = FakeNotifier()
    session = _session(notifier)

    session.put_coin("1.00").buy_drink("Long Espresso").get_coins().view_drinks()
    accepted, bought, change, listing = notifier.results

    assert accepted.amountCents == 100
    assert accepted.balanceCents == 100
    assert not accepted.isError
    assert bought.drinkName == "Long Espresso"
    assert bought.amountCents == 60
    assert bought.balanceCents == 40
    assert change.amountCents == 40
    assert [(coin.count, coin.denominationCents) for coin in change.coins] == [(2, 20)]
    assert change.coins[0].formattedDenomination == "0.20лв."
    assert change.balanceCents == 0
    assert [drink.name for drink in listing.drinks] == ["Milk", "Espresso", "Long Espresso"]


def test_invalid_coin_response_lists_denominations() -> None:
    session = _session()

    session.put_coin(0.03)

    result = session.last_result
    assert result is not None
    assert result.isError
    assert result.acceptedDenominations == ["1.00лв.", "0.50лв.", "0.20лв.", "0.10лв.", "0.05лв."]
    assert result.balanceCents == 0


def test_run_folds_command_list() -> None:
    session = _session()

    session.run(
        [
            CommandRequest(op="put_coin", amount="0.50"),
            CommandRequest(op="buy_drink", name="Milk"),
            CommandRequest(op="view_amount"),
        ]
    )

    assert [result.kind for result in session.results] == [
        "COIN_ACCEPTED",
        "PURCHASE_SUCCEEDED",
        "BALANCE_VIEW",
    ]
    assert session.machine.balance_cents == 0


def test_notifier_failure_is_logged_and_chain_continues(caplog) -> None:
    session = _session(BrokenNotifier())

    with caplog.at_level(logging.INFO, logger="vending.session"):
        session.put_coin(1).buy_drink("Milk")

    assert session.machine.balance_cents == 50
    assert len(session.results) == 2
    messages = [record.getMessage() for record in caplog.records]
    assert messages.count("result_notify_failed") == 2
    assert messages.count("operation_complete") == 2
    completed = [record for record in caplog.records if record.getMessage() == "operation_complete"]
    assert completed[1].operation == "buy_drink"
    assert completed[1].kind == "PURCHASE_SUCCEEDED"
    assert completed[1].balance_cents == 50


def test_result_history_keeps_only_the_most_recent_entries() -> None:
    machine = create_vending_machine(
        {"sign": "лв.", "spacer": "", "position": "AFTER"}, {"Milk": 0.5}
    )
    session = VendingSession(machine=machine, notifier=FakeNotifier(), history_size=2)

    session.put_coin(1).view_amount().buy_drink("Milk")

    assert [result.kind for result in session.results] == ["BALANCE_VIEW", "PURCHASE_SUCCEEDED"]
    assert session.last_result.kind == "PURCHASE_SUCCEEDED"
