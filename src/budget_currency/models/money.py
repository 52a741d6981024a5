"""Exact monetary values stored as integer minor units."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import total_ordering

from pydantic import BaseModel, ConfigDict

CENT = Decimal("0.01")


def to_decimal(value: int | float | Decimal | str) -> Decimal:
    """Convert a number to ``Decimal`` without binary float artefacts.

    Floats go through ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its exact binary expansion.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a monetary value")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, int):
        result = Decimal(value)
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a decimal number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Non-finite monetary value: {value!r}")
    return result


def round_cents(value: Decimal) -> Decimal:
    """Round to two places, half away from zero."""
    try:
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Too many digits for a monetary value: {value}") from exc


@total_ordering
class Money(BaseModel):
    """A monetary amount with exactly two implied fractional digits."""

    model_config = ConfigDict(frozen=True)

    cents: int = 0

    @classmethod
    def from_value(cls, value: Money | int | float | Decimal | str) -> Money:
        if isinstance(value, Money):
            return value
        return cls(cents=int(round_cents(to_decimal(value)) * 100))

    @classmethod
    def zero(cls) -> Money:
        return cls(cents=0)

    @property
    def amount(self) -> Decimal:
        return (Decimal(self.cents) / 100).quantize(CENT)

    @property
    def is_negative(self) -> bool:
        return self.cents < 0

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents + other.cents)

    def __radd__(self, other):
        # sum() starts from 0
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> Money:
        return Money(cents=-self.cents)

    def __abs__(self) -> Money:
        return Money(cents=abs(self.cents))

    def __lt__(self, other: Money) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents < other.cents

    def __bool__(self) -> bool:
        return self.cents != 0

    def __str__(self) -> str:
        return str(self.amount)
