"""Test the restricted arithmetic evaluator."""
from decimal import Decimal

import pytest

from budget_currency.errors import ExpressionError, MismatchedParentheses, NonFiniteResult
from budget_currency.parsing.expression import MAX_NESTING_DEPTH, evaluate, has_operator, tokenize


class TestEvaluate:
    def test_precedence(self):
        assert evaluate("1+2*3") == 7

    def test_parentheses(self):
        assert evaluate("(1+2)*3") == 9

    def test_nested_parentheses(self):
        assert evaluate("((2+3)*(4-1))/5") == 3

    def test_division(self):
        assert evaluate("10/4") == Decimal("2.5")

    def test_left_to_right(self):
        assert evaluate("10-4-3") == 3
        assert evaluate("24/4/3") == 2

    def test_unary_minus(self):
        assert evaluate("-5+2") == -3
        assert evaluate("3*-2") == -6
        assert evaluate("-(2+3)") == -5

    def test_decimals_are_exact(self):
        assert evaluate("0.1+0.2") == Decimal("0.3")

    def test_whitespace_ignored(self):
        assert evaluate(" 12.50 * 3 ") == Decimal("37.50")

    def test_single_number(self):
        assert evaluate("42") == 42


class TestErrors:
    def test_missing_close_paren(self):
        with pytest.raises(MismatchedParentheses):
            evaluate("(1+2")

    def test_extra_close_paren(self):
        with pytest.raises(MismatchedParentheses):
            evaluate("1+2)")

    def test_division_by_zero(self):
        with pytest.raises(NonFiniteResult):
            evaluate("5/0")

    def test_zero_by_zero(self):
        with pytest.raises(NonFiniteResult):
            evaluate("0/0")

    def test_trailing_operator(self):
        with pytest.raises(ExpressionError):
            evaluate("5+")

    def test_doubled_operator(self):
        with pytest.raises(ExpressionError):
            evaluate("5*/2")

    def test_malformed_literal(self):
        with pytest.raises(ExpressionError):
            evaluate("1.2.3+1")

    def test_unexpected_character(self):
        with pytest.raises(ExpressionError):
            evaluate("2^3")

    def test_empty(self):
        with pytest.raises(ExpressionError):
            evaluate("")

    def test_too_deep(self):
        depth = MAX_NESTING_DEPTH + 1
        with pytest.raises(ExpressionError):
            evaluate("(" * depth + "1" + ")" * depth)

    def test_errors_are_value_errors(self):
        assert issubclass(MismatchedParentheses, ValueError)
        assert issubclass(NonFiniteResult, ExpressionError)


class TestTokenize:
    def test_tokens(self):
        assert tokenize("12.5*(3-1)") == [Decimal("12.5"), "*", "(", Decimal(3), "-", Decimal(1), ")"]


class TestHasOperator:
    @pytest.mark.parametrize("text", ["1+2", "3*4", "10/4", "5-2", "(1)-2", "1.5 + 2"])
    def test_operator(self, text):
        assert has_operator(text) is True

    @pytest.mark.parametrize("text", ["-23.66", "1234.56", "", "+5"])
    def test_no_operator(self, text):
        assert has_operator(text) is False
