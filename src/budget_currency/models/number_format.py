"""Number-format descriptors shared by detection, parsing and formatting.

``NumberFormat`` describes how the host displays money: which symbol, on which
side, and which characters separate decimals and thousand groups. Detection
produces one, the parser reads it to normalise user input, and the formatter
renders amounts with it.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, model_validator

DECIMAL_SEPARATORS = frozenset({".", ",", "/"})
THOUSANDS_SEPARATORS = frozenset({",", ".", "'", " "})


class NumberFormat(BaseModel):
    """The display convention for monetary amounts."""

    model_config = ConfigDict(frozen=True)

    symbol: str = ""
    symbol_first: bool = True
    symbol_space: bool = False
    decimal_separator: str = "."
    thousands_separator: str | None = ","
    use_decimals: bool = True

    @model_validator(mode="after")
    def _check_separators(self) -> NumberFormat:
        if self.decimal_separator not in DECIMAL_SEPARATORS:
            raise ValueError(f"Unsupported decimal separator: {self.decimal_separator!r}")
        if self.thousands_separator is not None and self.thousands_separator not in THOUSANDS_SEPARATORS:
            raise ValueError(f"Unsupported thousands separator: {self.thousands_separator!r}")
        if self.use_decimals and self.decimal_separator == self.thousands_separator:
            raise ValueError(
                f"Decimal and thousands separator are both {self.decimal_separator!r}"
            )
        return self

    @classmethod
    def default(cls) -> NumberFormat:
        """US style: no symbol, ``1,234.56``."""
        return cls()


class FormatDefaults(BaseModel):
    """A lookup-table row: the canonical convention for one currency."""

    model_config = ConfigDict(frozen=True)

    code: str
    thousands_separator: str = ","
    decimal_separator: str = "."
    symbol_space: bool = False
    use_decimals: bool = True


class DetectionOutcome(StrEnum):
    DETECTED = "detected"
    LOOKUP = "lookup"
    AMBIGUOUS = "ambiguous"


class DetectionResult(BaseModel):
    """Result of inferring a ``NumberFormat`` from one example string.

    ``outcome`` records where the grouping character came from. ``ambiguous``
    means the example showed no grouping and nothing in the lookup table could
    say whether the currency groups thousands at all, so defaults were used.
    """

    model_config = ConfigDict(frozen=True)

    format: NumberFormat
    outcome: DetectionOutcome
    example: str
    amount_text: str

    @property
    def confident(self) -> bool:
        return self.outcome is not DetectionOutcome.AMBIGUOUS
