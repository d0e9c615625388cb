from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, Strict, StrictFloat, StrictInt, StrictStr


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


# Strict members keep booleans from being coerced into 1 / 1.00.
MoneyInput = Annotated[Decimal, Strict()] | StrictInt | StrictFloat | StrictStr


class CurrencySettingsRequest(CamelBaseModel):
    sign: str
    spacer: str
    position: StrictStr | StrictInt


class MachineConfigRequest(CamelBaseModel):
    currency: CurrencySettingsRequest
    drinks: dict[str, MoneyInput]


CommandOp = Literal["put_coin", "buy_drink", "get_coins", "view_drinks", "view_amount"]


class CommandRequest(CamelBaseModel):
    op: CommandOp
    amount: MoneyInput | None = None
    name: str | None = None


class CommandScriptRequest(CamelBaseModel):
    commands: list[CommandRequest] = Field(default_factory=list)
