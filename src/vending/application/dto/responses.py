from __future__ import annotations

from pydantic import BaseModel, Field


class CoinStackResponse(BaseModel):
    count: int
    denominationCents: int
    formattedDenomination: str


class DrinkResponse(BaseModel):
    name: str
    priceCents: int
    formattedPrice: str


class ResultResponse(BaseModel):
    kind: str
    isError: bool
    message: str
    balanceCents: int
    amountCents: int | None = None
    drinkName: str | None = None
    coins: list[CoinStackResponse] = Field(default_factory=list)
    drinks: list[DrinkResponse] = Field(default_factory=list)
    acceptedDenominations: list[str] = Field(default_factory=list)
