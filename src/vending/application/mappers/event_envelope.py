from __future__ import annotations

import json
from datetime import datetime
from typing import Any
from uuid import uuid4

from vending.application.dto.responses import ResultResponse


def _serialize_event(
    *,
    event_type: str,
    occurred_at: datetime,
    machine_id: str,
    payload: dict[str, Any],
    trace_id: str | None,
) -> str:
    envelope = {
        "event_id": str(uuid4()),
        "event_type": event_type,
        "occurred_at": occurred_at.isoformat(),
        "trace_id": trace_id,
        "machine_id": machine_id,
        "payload": payload,
    }
    return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False)


def result_event_type(result: ResultResponse) -> str:
    return f"vending.{result.kind.lower()}"


def serialize_result_event(
    *,
    occurred_at: datetime,
    machine_id: str,
    result: ResultResponse,
    trace_id: str | None,
) -> str:
    return _serialize_event(
        event_type=result_event_type(result),
        occurred_at=occurred_at,
        machine_id=machine_id,
        trace_id=trace_id,
        payload=result.model_dump(mode="json"),
    )
