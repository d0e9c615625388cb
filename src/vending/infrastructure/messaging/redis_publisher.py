from __future__ import annotations

from datetime import datetime, timezone

from vending.application.dto.responses import ResultResponse
from vending.application.mappers.event_envelope import serialize_result_event
from vending.application.ports.notifier import ResultNotifier
from vending.infrastructure.messaging.redis_client import get_redis_client
from vending.infrastructure.observability.logging_config import current_trace_fields


def result_channel(machine_id: str) -> str:
    return f"events:{machine_id}"


class RedisResultNotifier(ResultNotifier):
    def __init__(self, machine_id: str, timeout_seconds: float | None = None) -> None:
        self._machine_id = machine_id
        self._timeout_seconds = timeout_seconds

    def notify(self, result: ResultResponse) -> None:
        trace_id, _ = current_trace_fields()
        message = serialize_result_event(
            occurred_at=datetime.now(timezone.utc),
            machine_id=self._machine_id,
            result=result,
            trace_id=trace_id,
        )
        get_redis_client(timeout_seconds=self._timeout_seconds).publish(
            result_channel(self._machine_id), message
        )
