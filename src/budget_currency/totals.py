"""Expense totals and comparison against a budget target."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from enum import StrEnum

from budget_currency.context import CurrencyContext, get_default_context
from budget_currency.models.money import Money


class TargetComparison(StrEnum):
    MATCHES = "matches"
    UNDER = "under"
    OVER = "over"


def total_amount(
    amounts: Iterable[str | int | float | Decimal | Money | None],
    context: CurrencyContext | None = None,
) -> Money:
    """Sum expense amounts, parsing any text entries with *context*'s format."""
    context = context or get_default_context()
    return sum((context.parse_amount(a) for a in amounts), Money.zero())


def compare_to_target(total: Money, target: Money) -> TargetComparison:
    """Compare an expense total with the target, to the cent."""
    if total == target:
        return TargetComparison.MATCHES
    if total < target:
        return TargetComparison.UNDER
    return TargetComparison.OVER


def target_gap(total: Money, target: Money) -> Money:
    """How far the total is from the target; positive when over."""
    return total - target
