"""Lenient parsing of user-typed amounts.

``parse`` turns whatever a user typed into an amount field into ``Money``.
Currency symbols and letters are dropped, the locale's separators are
normalised, and arithmetic such as ``"12,50*3"`` is evaluated. Anything
unintelligible becomes zero rather than an error.
"""

from __future__ import annotations

import re
from decimal import Decimal

import structlog

from budget_currency.errors import ExpressionError
from budget_currency.models.money import Money
from budget_currency.models.number_format import NumberFormat
from budget_currency.parsing.expression import evaluate, has_operator

logger = structlog.get_logger(__name__)

_EXPRESSION_CHARS = frozenset("0123456789+-*/() ")

# Longest leading decimal literal, like JavaScript's parseFloat
_LEADING_LITERAL = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")

_SLASH_DECIMAL = re.compile(r"/(\d{2})$")


def filter_input(text: str, fmt: NumberFormat) -> str:
    """Keep digits, operators, parentheses, spaces and the format's separators."""
    allowed = _EXPRESSION_CHARS | {fmt.decimal_separator}
    if fmt.thousands_separator:
        allowed = allowed | {fmt.thousands_separator}
    return "".join(ch for ch in text if ch in allowed)


def normalize(text: str, fmt: NumberFormat) -> str:
    """Rewrite filtered input with ``.`` as the only decimal point.

    Thousands separators and spaces are removed. For formats with a slash
    decimal separator, a trailing ``/`` plus two digits is the decimal point
    and every other slash stays a division.
    """
    fraction = ""
    if fmt.decimal_separator == "/":
        match = _SLASH_DECIMAL.search(text)
        if match is not None:
            fraction = "." + match.group(1)
            text = text[: match.start()]

    text = text.replace(" ", "")
    if fmt.thousands_separator and fmt.thousands_separator != " ":
        text = text.replace(fmt.thousands_separator, "")
    if fmt.decimal_separator not in (".", "/"):
        text = text.replace(fmt.decimal_separator, ".")
    return text + fraction


def parse_literal(text: str) -> Decimal:
    """Read the leading decimal literal of *text*; zero if there is none."""
    match = _LEADING_LITERAL.match(text)
    if match is None:
        return Decimal(0)
    return Decimal(match.group(1))


def parse(text: str | int | float | Decimal | Money | None, fmt: NumberFormat) -> Money:
    """Parse user input into ``Money`` using *fmt*'s separators.

    Numbers are returned rounded to the cent. Text is filtered, normalised,
    and evaluated when it contains arithmetic; if evaluation fails the
    leading literal is used instead. Never raises.
    """
    if isinstance(text, (Money, int, float, Decimal)) and not isinstance(text, bool):
        return _to_money(text)
    if text is None:
        return Money.zero()

    raw = str(text).strip()
    if not raw:
        return Money.zero()

    cleaned = normalize(filter_input(raw, fmt), fmt)
    if not cleaned:
        return Money.zero()

    if has_operator(cleaned) or "(" in cleaned or ")" in cleaned:
        try:
            return _to_money(evaluate(cleaned))
        except ExpressionError as e:
            logger.info("expression_evaluation_failed", error=str(e), text=raw, normalized=cleaned)

    return _to_money(parse_literal(cleaned))


def _to_money(value: Money | int | float | Decimal) -> Money:
    try:
        return Money.from_value(value)
    except ValueError as e:
        # NaN, infinity, or too large to hold in cents
        logger.info("amount_unrepresentable", error=str(e))
        return Money.zero()
