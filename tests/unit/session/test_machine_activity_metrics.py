from __future__ import annotations

import sys
from pathlib import Path

from prometheus_client import REGISTRY

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from vending.application.use_cases.vending_session import VendingSession
from vending.domain.machine.entities import create_vending_machine


class NullNotifier:
    def notify(self, result) -> None:
        return None


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_session_records_metrics() -> None:
    machine = create_vending_machine(
        {"sign": "$", "spacer": "", "position": "BEFORE"},
        {"Metrics Cola": 0.65},
    )
    session = VendingSession(machine=machine, notifier=NullNotifier(), machine_id="vm_metrics")

    purchases_before = _sample("vending_purchases_total", {"drink": "Metrics Cola"})
    revenue_before = _sample("vending_revenue_cents_total")
    coins_before = _sample("vending_coins_accepted_total", {"denomination_cents": "50"})
    invalid_before = _sample("vending_results_total", {"kind": "INVALID_COIN"})

    session.put_coin(0.5).put_coin(0.2).put_coin(0.03).buy_drink("Metrics Cola")

    assert _sample("vending_purchases_total", {"drink": "Metrics Cola"}) == purchases_before + 1
    assert _sample("vending_revenue_cents_total") == revenue_before + 65
    assert _sample("vending_coins_accepted_total", {"denomination_cents": "50"}) == coins_before + 1
    assert _sample("vending_results_total", {"kind": "INVALID_COIN"}) == invalid_before + 1
    assert _sample("vending_balance_cents", {"machine_id": "vm_metrics"}) == 5
