from __future__ import annotations

import logging
import sys
from typing import TextIO

from vending.application.dto.responses import ResultResponse
from vending.application.ports.notifier import ResultNotifier

ERROR_PREFIX = "error: "


class ConsoleResultNotifier(ResultNotifier):
    """Writes result messages to a stream; error results go to a second stream."""

    def __init__(self, stream: TextIO | None = None, error_stream: TextIO | None = None) -> None:
        self._stream = stream
        self._error_stream = error_stream

    def notify(self, result: ResultResponse) -> None:
        if result.isError:
            target = self._error_stream or sys.stderr
            target.write(f"{ERROR_PREFIX}{result.message}\n")
        else:
            target = self._stream or sys.stdout
            target.write(f"{result.message}\n")
        target.flush()


class LoggingResultNotifier(ResultNotifier):
    def __init__(self, logger_name: str = "vending.results") -> None:
        self._logger = logging.getLogger(logger_name)

    def notify(self, result: ResultResponse) -> None:
        level = logging.WARNING if result.isError else logging.INFO
        self._logger.log(
            level,
            result.message,
            extra={
                "kind": result.kind,
                "balance_cents": result.balanceCents,
                "amount_cents": result.amountCents,
            },
        )
