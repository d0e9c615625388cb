from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

CENTS_PER_UNIT = 100


def to_decimal(amount: Any) -> Decimal:
    if isinstance(amount, bool) or amount is None:
        raise ValueError(f"amount must be a number, got {amount!r}")
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        value = Decimal(repr(amount))
    elif isinstance(amount, str):
        try:
            value = Decimal(amount.strip())
        except InvalidOperation as exc:
            raise ValueError(f"amount must be a number, got {amount!r}") from exc
    else:
        raise ValueError(f"amount must be a number, got {amount!r}")

    if not value.is_finite():
        raise ValueError(f"amount must be finite, got {amount!r}")
    return value


def _scale(amount: Any) -> Decimal:
    value = to_decimal(amount)
    try:
        return value * CENTS_PER_UNIT
    except ArithmeticError as exc:
        raise ValueError(f"amount is out of range: {amount!r}") from exc


def to_minor_units(amount: Any) -> int:
    """Convert a major-unit amount to cents, rounding half-up."""
    scaled = _scale(amount)
    try:
        return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except ArithmeticError as exc:
        raise ValueError(f"amount is out of range: {amount!r}") from exc


def to_exact_minor_units(amount: Any) -> int:
    """Convert a major-unit amount to cents, rejecting sub-cent fractions."""
    scaled = _scale(amount)
    try:
        is_whole = scaled == scaled.to_integral_value()
    except ArithmeticError as exc:
        raise ValueError(f"amount is out of range: {amount!r}") from exc
    if not is_whole:
        raise ValueError(f"amount has a fraction of a cent: {amount!r}")
    return int(scaled)


def format_minor_units(amount_cents: int) -> str:
    sign = "-" if amount_cents < 0 else ""
    units, cents = divmod(abs(amount_cents), CENTS_PER_UNIT)
    return f"{sign}{units}.{cents:02d}"
