from __future__ import annotations

import logging
import time
from collections import deque
from typing import Any, Callable, Iterable

from opentelemetry import trace

from vending.application.dto.requests import CommandRequest
from vending.application.dto.responses import ResultResponse
from vending.application.mappers.result_mapper import to_result_response
from vending.application.metrics.machine_activity import record_balance, record_result
from vending.application.ports.notifier import ResultNotifier
from vending.domain.machine.entities import VendingMachine
from vending.domain.machine.results import MachineResult

logger = logging.getLogger("vending.session")
tracer = trace.get_tracer("vending.session")

DEFAULT_MACHINE_ID = "vm_001"
DEFAULT_HISTORY_SIZE = 1000


class VendingSession:
    """Fluent front for a single :class:`VendingMachine`.

    Each command runs the engine operation, maps the result to a
    :class:`ResultResponse`, records metrics, logs it, hands it to the
    notifier, and returns the session so calls can be chained::

        session.put_coin("1.00").buy_drink("Espresso").get_coins()
    """

    def __init__(
        self,
        machine: VendingMachine,
        notifier: ResultNotifier,
        machine_id: str = DEFAULT_MACHINE_ID,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ) -> None:
        self._machine = machine
        self._notifier = notifier
        self._machine_id = machine_id
        self._results: deque[ResultResponse] = deque(maxlen=history_size)

    @property
    def machine(self) -> VendingMachine:
        return self._machine

    @property
    def machine_id(self) -> str:
        return self._machine_id

    @property
    def results(self) -> list[ResultResponse]:
        return list(self._results)

    @property
    def last_result(self) -> ResultResponse | None:
        return self._results[-1] if self._results else None

    def put_coin(self, amount: Any) -> VendingSession:
        return self._dispatch("put_coin", lambda: self._machine.put_coin(amount))

    def buy_drink(self, name: Any) -> VendingSession:
        return self._dispatch("buy_drink", lambda: self._machine.buy_drink(name))

    def get_coins(self) -> VendingSession:
        return self._dispatch("get_coins", self._machine.get_coins)

    def view_drinks(self) -> VendingSession:
        return self._dispatch("view_drinks", self._machine.view_drinks)

    def view_amount(self) -> VendingSession:
        return self._dispatch("view_amount", self._machine.view_amount)

    def run(self, commands: Iterable[CommandRequest]) -> VendingSession:
        for command in commands:
            if command.op == "put_coin":
                self.put_coin(command.amount)
            elif command.op == "buy_drink":
                self.buy_drink(command.name)
            elif command.op == "get_coins":
                self.get_coins()
            elif command.op == "view_drinks":
                self.view_drinks()
            elif command.op == "view_amount":
                self.view_amount()
        return self

    def _dispatch(self, operation: str, action: Callable[[], MachineResult]) -> VendingSession:
        with tracer.start_as_current_span(f"vending.{operation}") as span:
            started = time.perf_counter()
            result = action()
            balance_cents = self._machine.balance_cents
            response = to_result_response(result, balance_cents, self._machine.currency)
            duration_ms = (time.perf_counter() - started) * 1000

            span.set_attribute("vending.machine_id", self._machine_id)
            span.set_attribute("vending.result_kind", result.kind.value)
            span.set_attribute("vending.balance_cents", balance_cents)

            record_result(result)
            record_balance(self._machine_id, balance_cents)
            logger.info(
                "operation_complete",
                extra={
                    "machine_id": self._machine_id,
                    "operation": operation,
                    "kind": result.kind.value,
                    "balance_cents": balance_cents,
                    "amount_cents": response.amountCents,
                    "duration_ms": round(duration_ms, 2),
                },
            )

            self._results.append(response)
            try:
                self._notifier.notify(response)
            except Exception:
                logger.exception(
                    "result_notify_failed",
                    extra={"machine_id": self._machine_id, "operation": operation},
                )
        return self
