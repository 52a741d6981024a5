"""Restricted arithmetic for amount fields.

Users can type ``12.50*3`` or ``(40+35)/2`` into an amount input. This module
evaluates such text without handing it to ``eval``. The grammar is::

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := '-' factor | NUMBER | '(' expr ')'

Input must already be locale-normalised: digits, ``.`` as the decimal point,
``+ - * / ( )`` and optional whitespace.
"""

from __future__ import annotations

import decimal
import re
from decimal import Decimal

from budget_currency.errors import ExpressionError, MismatchedParentheses, NonFiniteResult

MAX_NESTING_DEPTH = 50

TOKEN_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)|(\S)")

# A binary operator has an operand (digit, "." or ")") somewhere to its left
_BINARY_OPERATOR = re.compile(r"[\d.)]\s*[-+*/]")


def tokenize(expr: str) -> list[str | Decimal]:
    """Split *expr* into ``Decimal`` literals and single-character symbols."""
    tokens: list[str | Decimal] = []
    for match in TOKEN_PATTERN.finditer(expr):
        number, symbol = match.groups()
        if number is not None:
            tokens.append(Decimal(number))
        elif symbol is not None:
            if symbol not in "+-*/()":
                raise ExpressionError(f"Unexpected character {symbol!r} in {expr!r}")
            tokens.append(symbol)
    return tokens


class _Parser:
    def __init__(self, tokens: list[str | Decimal]):
        self._tokens = tokens
        self._pos = 0
        self._depth = 0

    def _peek(self) -> str | Decimal | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next(self) -> str | Decimal | None:
        token = self._peek()
        self._pos += 1
        return token

    def parse(self) -> Decimal:
        if not self._tokens:
            raise ExpressionError("Empty expression")
        value = self._expr()
        leftover = self._peek()
        if leftover == ")":
            raise MismatchedParentheses("Unexpected ')'")
        if leftover is not None:
            raise ExpressionError(f"Unexpected token {leftover!r}")
        return value

    def _expr(self) -> Decimal:
        value = self._term()
        while self._peek() in ("+", "-"):
            op = self._next()
            right = self._term()
            value = value + right if op == "+" else value - right
        return value

    def _term(self) -> Decimal:
        value = self._factor()
        while self._peek() in ("*", "/"):
            op = self._next()
            right = self._factor()
            value = value * right if op == "*" else value / right
        return value

    def _factor(self) -> Decimal:
        token = self._next()
        if isinstance(token, Decimal):
            return token
        if token == "-":
            return -self._nested(self._factor)
        if token == "(":
            value = self._nested(self._expr)
            if self._next() != ")":
                raise MismatchedParentheses("Missing ')'")
            return value
        if token is None:
            raise ExpressionError("Unexpected end of expression")
        if token == ")":
            raise MismatchedParentheses("Unexpected ')'")
        raise ExpressionError(f"Unexpected operator {token!r}")

    def _nested(self, rule) -> Decimal:
        self._depth += 1
        if self._depth > MAX_NESTING_DEPTH:
            raise ExpressionError(f"Expression nested deeper than {MAX_NESTING_DEPTH} levels")
        try:
            return rule()
        finally:
            self._depth -= 1


def evaluate(expr: str) -> Decimal:
    """Evaluate a normalised arithmetic expression.

    Raises:
        MismatchedParentheses: a ``(`` or ``)`` has no partner.
        NonFiniteResult: the result is infinite or NaN (division by zero).
        ExpressionError: anything else malformed.
    """
    tokens = tokenize(expr)
    with decimal.localcontext() as ctx:
        ctx.traps[decimal.DivisionByZero] = False
        ctx.traps[decimal.InvalidOperation] = False
        ctx.traps[decimal.Overflow] = False
        result = _Parser(tokens).parse()
    if not result.is_finite():
        raise NonFiniteResult(f"{expr!r} evaluated to {result}")
    return result


def has_operator(text: str) -> bool:
    """Return True if *text* contains a binary ``+ - * /``.

    A leading sign such as ``-12.50`` is not an operator.
    """
    return _BINARY_OPERATOR.search(text) is not None
