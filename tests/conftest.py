"""Shared test fixtures."""
import pytest

import budget_currency.context as currency_context
from budget_currency.config import Settings
from budget_currency.context import CurrencyContext
from budget_currency.models.number_format import NumberFormat


@pytest.fixture
def us_format():
    return NumberFormat(symbol="$", symbol_first=True, symbol_space=False,
                        decimal_separator=".", thousands_separator=",", use_decimals=True)


@pytest.fixture
def euro_format():
    return NumberFormat(symbol="€", symbol_first=False, symbol_space=True,
                        decimal_separator=",", thousands_separator=".", use_decimals=True)


@pytest.fixture
def space_format():
    return NumberFormat(symbol="kr", symbol_first=False, symbol_space=True,
                        decimal_separator=",", thousands_separator=" ", use_decimals=True)


@pytest.fixture
def slash_format():
    return NumberFormat(symbol="ریال", symbol_first=False, symbol_space=True,
                        decimal_separator="/", thousands_separator=",", use_decimals=True)


@pytest.fixture
def yen_format():
    return NumberFormat(symbol="¥", symbol_first=True, symbol_space=False,
                        decimal_separator=".", thousands_separator=",", use_decimals=False)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def context(settings):
    return CurrencyContext(settings=settings)


@pytest.fixture
def fresh_default_context(monkeypatch):
    """Give module-level helpers a clean process-wide context."""
    monkeypatch.setattr(currency_context, "_default_context", None)
    yield
