"""Configuration via environment variables with CURRENCY_ prefix."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from budget_currency.models.number_format import NumberFormat


class Settings(BaseSettings):
    """Currency core configuration.

    The ``default_*`` settings describe the format used when no example text
    yields a detection. They default to US style with no symbol.
    """

    model_config = SettingsConfigDict(env_prefix="CURRENCY_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool = True

    # ── Fallback format ────────────────────────────────────────────────────
    default_symbol: str = ""
    default_symbol_first: bool = True
    default_symbol_space: bool = False
    default_decimal_separator: str = Field(default=".", pattern=r"^[.,/]$")
    default_thousands_separator: Annotated[str, Field(pattern=r"^[,.' ]$")] | None = ","
    default_use_decimals: bool = True

    # Shown as an input prefix when detection found no symbol
    fallback_symbol: str = "£"

    def default_format(self) -> NumberFormat:
        return NumberFormat(
            symbol=self.default_symbol,
            symbol_first=self.default_symbol_first,
            symbol_space=self.default_symbol_space,
            decimal_separator=self.default_decimal_separator,
            thousands_separator=self.default_thousands_separator,
            use_decimals=self.default_use_decimals,
        )
