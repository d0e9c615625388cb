from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from vending.application.dto.requests import CommandScriptRequest, MachineConfigRequest
from vending.domain.catalog.entities import build_price_table
from vending.domain.common.errors import InvalidConfigError, InvalidPriceTableError
from vending.domain.currency.entities import CurrencySettings, parse_position
from vending.domain.machine.entities import VendingMachine


class InvalidCommandScriptError(Exception):
    pass


def _first_error_location(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors or not errors[0].get("loc"):
        return ""
    return str(errors[0]["loc"][0])


def parse_machine_config(raw: str | bytes | Mapping[str, Any]) -> MachineConfigRequest:
    """Validate the shape of a machine configuration.

    Shape problems in the currency section (or anywhere outside ``drinks``)
    surface as :class:`InvalidConfigError`; problems in ``drinks`` surface as
    :class:`InvalidPriceTableError`. Value rules are left to the domain.
    """
    try:
        if isinstance(raw, (str, bytes)):
            return MachineConfigRequest.model_validate_json(raw)
        return MachineConfigRequest.model_validate(raw)
    except ValidationError as exc:
        if _first_error_location(exc) == "drinks":
            raise InvalidPriceTableError(f"invalid drinks section: {exc}") from exc
        raise InvalidConfigError(f"invalid machine configuration: {exc}") from exc


def parse_command_script(raw: str | bytes | Mapping[str, Any]) -> CommandScriptRequest:
    try:
        if isinstance(raw, (str, bytes)):
            return CommandScriptRequest.model_validate_json(raw)
        return CommandScriptRequest.model_validate(raw)
    except ValidationError as exc:
        raise InvalidCommandScriptError(f"invalid command script: {exc}") from exc


class ConfigureMachine:
    def execute(self, request: MachineConfigRequest) -> VendingMachine:
        currency = CurrencySettings(
            sign=request.currency.sign,
            spacer=request.currency.spacer,
            position=parse_position(request.currency.position),
        )
        return VendingMachine(
            currency=currency,
            price_table=build_price_table(request.drinks),
        )
