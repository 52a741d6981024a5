"""Exceptions raised by the currency core.

Everything here is recoverable: the amount parser catches ``ExpressionError``
and falls back to reading a plain decimal literal.
"""

from __future__ import annotations


class CurrencyError(Exception):
    """Base class for currency core errors."""


class ExpressionError(CurrencyError, ValueError):
    """An arithmetic expression could not be evaluated."""


class MismatchedParentheses(ExpressionError):
    """An opening parenthesis has no matching closing one, or vice versa."""


class NonFiniteResult(ExpressionError):
    """Evaluation produced infinity or NaN (for example division by zero)."""
