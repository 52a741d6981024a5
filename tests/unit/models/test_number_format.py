"""Test NumberFormat validation."""
import pytest
from pydantic import ValidationError

from budget_currency.models.number_format import DetectionOutcome, DetectionResult, NumberFormat


class TestNumberFormat:
    def test_default_is_us_style(self):
        fmt = NumberFormat.default()
        assert fmt.symbol == ""
        assert fmt.decimal_separator == "."
        assert fmt.thousands_separator == ","
        assert fmt.use_decimals is True

    def test_same_separators_rejected(self):
        with pytest.raises(ValidationError):
            NumberFormat(decimal_separator=",", thousands_separator=",")

    def test_same_separators_allowed_without_decimals(self):
        fmt = NumberFormat(decimal_separator=",", thousands_separator=",", use_decimals=False)
        assert fmt.use_decimals is False

    def test_unknown_decimal_separator_rejected(self):
        with pytest.raises(ValidationError):
            NumberFormat(decimal_separator=";")

    def test_unknown_thousands_separator_rejected(self):
        with pytest.raises(ValidationError):
            NumberFormat(thousands_separator="_")

    def test_no_grouping_allowed(self):
        assert NumberFormat(thousands_separator=None).thousands_separator is None

    def test_immutable(self):
        fmt = NumberFormat()
        with pytest.raises(ValidationError):
            fmt.symbol = "$"


class TestDetectionResult:
    def test_confident(self):
        result = DetectionResult(format=NumberFormat(), outcome=DetectionOutcome.LOOKUP,
                                 example="£1", amount_text="1")
        assert result.confident is True

    def test_ambiguous_not_confident(self):
        result = DetectionResult(format=NumberFormat(), outcome=DetectionOutcome.AMBIGUOUS,
                                 example="12", amount_text="12")
        assert result.confident is False
