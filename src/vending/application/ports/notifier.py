from __future__ import annotations

from typing import Protocol

from vending.application.dto.responses import ResultResponse


class ResultNotifier(Protocol):
    def notify(self, result: ResultResponse) -> None: ...
