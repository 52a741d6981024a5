"""Test settings and logging setup."""
import json

import pytest
import structlog
from pydantic import ValidationError

from budget_currency.config import Settings
from budget_currency.formatting.formatter import format_money
from budget_currency.models.money import Money
from budget_currency.utils.logging import get_logger, setup_logging


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.fallback_symbol == "£"
        fmt = settings.default_format()
        assert fmt.decimal_separator == "."
        assert fmt.thousands_separator == ","

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("CURRENCY_DEFAULT_SYMBOL", "€")
        monkeypatch.setenv("CURRENCY_DEFAULT_DECIMAL_SEPARATOR", ",")
        monkeypatch.setenv("CURRENCY_DEFAULT_THOUSANDS_SEPARATOR", ".")
        fmt = Settings().default_format()
        assert fmt.symbol == "€"
        assert fmt.decimal_separator == ","
        assert fmt.thousands_separator == "."

    def test_suffix_symbol_space(self, monkeypatch):
        monkeypatch.setenv("CURRENCY_DEFAULT_SYMBOL", "kr")
        monkeypatch.setenv("CURRENCY_DEFAULT_SYMBOL_FIRST", "false")
        monkeypatch.setenv("CURRENCY_DEFAULT_SYMBOL_SPACE", "true")
        monkeypatch.setenv("CURRENCY_DEFAULT_DECIMAL_SEPARATOR", ",")
        monkeypatch.setenv("CURRENCY_DEFAULT_THOUSANDS_SEPARATOR", ".")
        fmt = Settings().default_format()
        assert fmt.symbol_space is True
        assert format_money(Money.from_value("1234.56"), fmt) == "1.234,56 kr"

    def test_symbol_space_off_by_default(self):
        assert Settings().default_format().symbol_space is False

    def test_invalid_separator(self):
        with pytest.raises(ValidationError):
            Settings(default_decimal_separator=";")


class TestLogging:
    @pytest.fixture(autouse=True)
    def _restore_structlog(self):
        yield
        structlog.reset_defaults()

    def test_json_output(self, capsys):
        setup_logging("debug", json_output=True)
        get_logger("test", component="parser").info("format_cache_reset")
        line = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert line["event"] == "format_cache_reset"
        assert line["component"] == "parser"
        assert line["level"] == "info"

    def test_level_filters(self, capsys):
        setup_logging("WARNING", json_output=True)
        get_logger("test").info("hidden_event")
        assert "hidden_event" not in capsys.readouterr().out

    def test_console_output_from_settings(self, capsys):
        setup_logging(settings=Settings(log_json=False))
        get_logger("test").info("format_detected")
        out = capsys.readouterr().out
        assert "format_detected" in out
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.strip())
