"""Render ``Money`` in a host's display convention."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from budget_currency.models.money import CENT, Money
from budget_currency.models.number_format import NumberFormat


def group_thousands(integer_digits: str, separator: str | None) -> str:
    """Insert *separator* every three digits from the right."""
    if not separator or len(integer_digits) <= 3:
        return integer_digits
    head = len(integer_digits) % 3 or 3
    groups = [integer_digits[:head]]
    groups.extend(integer_digits[i:i + 3] for i in range(head, len(integer_digits), 3))
    return separator.join(groups)


def format_money(value: Money, fmt: NumberFormat) -> str:
    """Format *value* according to *fmt*.

    Examples with the default (US) format and symbol ``$``: ``1234.5`` gives
    ``"$1,234.50"`` and ``-3`` gives ``"-$3.00"``. A zero-decimal currency
    rounds half away from zero to whole units.
    """
    magnitude = abs(value).amount
    if fmt.use_decimals:
        magnitude = magnitude.quantize(CENT, rounding=ROUND_HALF_UP)
        integer_digits, fraction = f"{magnitude:f}".split(".")
    else:
        magnitude = magnitude.quantize(Decimal(1), rounding=ROUND_HALF_UP)
        integer_digits, fraction = f"{magnitude:f}", ""

    number = group_thousands(integer_digits, fmt.thousands_separator)
    if fraction:
        number = f"{number}{fmt.decimal_separator}{fraction}"

    sign = "-" if value.is_negative and magnitude != 0 else ""
    if not fmt.symbol:
        return f"{sign}{number}"

    space = " " if fmt.symbol_space else ""
    if fmt.symbol_first:
        return f"{sign}{fmt.symbol}{space}{number}"
    return f"{sign}{number}{space}{fmt.symbol}"
