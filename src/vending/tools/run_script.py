from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Sequence

from vending.application.ports.notifier import ResultNotifier
from vending.application.use_cases.configure_machine import (
    ConfigureMachine,
    InvalidCommandScriptError,
    parse_command_script,
    parse_machine_config,
)
from vending.application.use_cases.vending_session import DEFAULT_MACHINE_ID, VendingSession
from vending.domain.common.errors import MachineConfigurationError
from vending.infrastructure.messaging.redis_publisher import RedisResultNotifier
from vending.infrastructure.notifiers.console import ConsoleResultNotifier, LoggingResultNotifier
from vending.infrastructure.observability.logging_config import configure_logging
from vending.infrastructure.observability.otel import configure_otel

DEMO_CONFIG: dict[str, Any] = {
    "currency": {"sign": "лв.", "spacer": "", "position": "AFTER"},
    "drinks": {
        "Milk": 0.50,
        "Espresso": 0.40,
        "Long Espresso": 0.60,
    },
}

DEMO_SCRIPT: dict[str, Any] = {
    "commands": [
        {"op": "buy_drink", "name": "espresso"},
        {"op": "buy_drink", "name": "Espresso"},
        {"op": "view_drinks"},
        {"op": "put_coin", "amount": 2},
        {"op": "put_coin", "amount": 1},
        {"op": "buy_drink", "name": "Espresso"},
        {"op": "get_coins"},
        {"op": "view_amount"},
        {"op": "get_coins"},
    ]
}


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build a vending machine from a JSON config and replay a command script."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a machine config JSON file. Defaults to the built-in demo machine.",
    )
    parser.add_argument(
        "--script",
        type=Path,
        default=None,
        help="Path to a command script JSON file. Defaults to the built-in demo sequence.",
    )
    parser.add_argument(
        "--notifier",
        choices=("console", "log", "redis"),
        default="console",
        help="Where to send operation results.",
    )
    parser.add_argument(
        "--machine-id",
        default=os.getenv("VENDING_MACHINE_ID", DEFAULT_MACHINE_ID),
        help="Identifier used in logs, metrics and Redis channels.",
    )
    return parser.parse_args(argv)


def _build_notifier(kind: str, machine_id: str) -> ResultNotifier:
    if kind == "redis":
        return RedisResultNotifier(machine_id=machine_id)
    if kind == "log":
        return LoggingResultNotifier()
    return ConsoleResultNotifier()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    configure_otel()

    try:
        raw_config = args.config.read_text(encoding="utf-8") if args.config else DEMO_CONFIG
        raw_script = args.script.read_text(encoding="utf-8") if args.script else DEMO_SCRIPT
    except (OSError, UnicodeDecodeError) as exc:
        print(f"cannot read input: {exc}", file=sys.stderr)
        return 1

    try:
        machine = ConfigureMachine().execute(parse_machine_config(raw_config))
        script = parse_command_script(raw_script)
    except (MachineConfigurationError, InvalidCommandScriptError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    session = VendingSession(
        machine=machine,
        notifier=_build_notifier(args.notifier, args.machine_id),
        machine_id=args.machine_id,
    )
    session.run(script.commands)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
