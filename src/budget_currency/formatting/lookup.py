"""Canonical number formats per currency symbol or ISO code.

Used when example text cannot show whether, or how, a currency groups
thousands (any amount below 1000). Rows are kept in an explicit ordered list
so that partial matches resolve the same way every time.
"""

from __future__ import annotations

from budget_currency.models.number_format import FormatDefaults

# Default fallback (US-style), keyed by the empty symbol
DEFAULT_FORMAT_DEFAULTS = FormatDefaults(code="", thousands_separator=",", decimal_separator=".")

_US = dict(thousands_separator=",", decimal_separator=".", symbol_space=False)
_EU_DOT = dict(thousands_separator=".", decimal_separator=",", symbol_space=False)
_SPACE_COMMA = dict(thousands_separator=" ", decimal_separator=",", symbol_space=True)

FORMAT_TABLE: list[tuple[str, FormatDefaults]] = [
    # Nordic kroner
    ("kr", FormatDefaults(code="NOK", **_SPACE_COMMA)),
    ("NOK", FormatDefaults(code="NOK", **_SPACE_COMMA)),
    ("SEK", FormatDefaults(code="SEK", **_SPACE_COMMA)),
    ("DKK", FormatDefaults(code="DKK", thousands_separator=".", decimal_separator=",", symbol_space=True)),
    # Turkish lira
    ("₺", FormatDefaults(code="TRY", **_EU_DOT)),
    ("TRY", FormatDefaults(code="TRY", **_EU_DOT)),
    ("TL", FormatDefaults(code="TRY", **_EU_DOT)),
    # Euro
    ("€", FormatDefaults(code="EUR", **_EU_DOT)),
    ("EUR", FormatDefaults(code="EUR", **_EU_DOT)),
    # US dollar
    ("$", FormatDefaults(code="USD", **_US)),
    ("USD", FormatDefaults(code="USD", **_US)),
    # Pound sterling
    ("£", FormatDefaults(code="GBP", **_US)),
    ("GBP", FormatDefaults(code="GBP", **_US)),
    # Yen (no minor unit)
    ("JPY", FormatDefaults(code="JPY", **_US, use_decimals=False)),
    # Swiss franc
    ("CHF", FormatDefaults(code="CHF", thousands_separator="'", decimal_separator=".", symbol_space=True)),
    # Indian rupee
    ("₹", FormatDefaults(code="INR", **_US)),
    ("INR", FormatDefaults(code="INR", **_US)),
    # Russian ruble
    ("₽", FormatDefaults(code="RUB", **_SPACE_COMMA)),
    ("RUB", FormatDefaults(code="RUB", **_SPACE_COMMA)),
    # Central Europe
    ("PLN", FormatDefaults(code="PLN", **_SPACE_COMMA)),
    ("zł", FormatDefaults(code="PLN", **_SPACE_COMMA)),
    ("CZK", FormatDefaults(code="CZK", **_SPACE_COMMA)),
    ("Kč", FormatDefaults(code="CZK", **_SPACE_COMMA)),
    ("HUF", FormatDefaults(code="HUF", **_SPACE_COMMA, use_decimals=False)),
    ("Ft", FormatDefaults(code="HUF", **_SPACE_COMMA, use_decimals=False)),
    # Brazilian real
    ("R$", FormatDefaults(code="BRL", **_EU_DOT)),
    ("BRL", FormatDefaults(code="BRL", **_EU_DOT)),
    # Other dollars
    ("CAD", FormatDefaults(code="CAD", **_US)),
    ("AUD", FormatDefaults(code="AUD", **_US)),
    ("NZD", FormatDefaults(code="NZD", **_US)),
    # South African rand
    ("ZAR", FormatDefaults(code="ZAR", thousands_separator=" ", decimal_separator=",", symbol_space=False)),
    ("R", FormatDefaults(code="ZAR", thousands_separator=" ", decimal_separator=",", symbol_space=False)),
    # Mexican peso
    ("MXN", FormatDefaults(code="MXN", **_US)),
    # Chinese yuan
    ("CNY", FormatDefaults(code="CNY", **_US)),
    ("元", FormatDefaults(code="CNY", **_US)),
]

# Symbols shared by currencies with different conventions. The example text
# decides: visible decimals mean the second code, none mean the first.
AMBIGUOUS_SYMBOLS: dict[str, tuple[str, str]] = {
    "¥": ("JPY", "CNY"),
    "￥": ("JPY", "CNY"),
}

_BY_CODE: dict[str, FormatDefaults] = {}
for _key, _row in FORMAT_TABLE:
    _BY_CODE.setdefault(_row.code, _row)


def lookup(symbol: str) -> FormatDefaults | None:
    """Find the canonical format for a currency symbol or code.

    Matching order:
    1. Exact key
    2. Case-insensitive key
    3. Substring in either direction (case-insensitive); the longest key
       wins, ties go to table order

    ``lookup("")`` returns the US-style default. Returns ``None`` when nothing
    matches. Ambiguous symbols (see ``AMBIGUOUS_SYMBOLS``) are not resolved
    here; use ``resolve_ambiguous``.
    """
    symbol = symbol.strip()
    if not symbol:
        return DEFAULT_FORMAT_DEFAULTS

    for key, row in FORMAT_TABLE:
        if key == symbol:
            return row

    folded = symbol.casefold()
    for key, row in FORMAT_TABLE:
        if key.casefold() == folded:
            return row

    candidates = [
        (key, row) for key, row in FORMAT_TABLE
        if key.casefold() in folded or folded in key.casefold()
    ]
    if candidates:
        # sorted() is stable, so equal lengths keep table order
        return sorted(candidates, key=lambda item: len(item[0]), reverse=True)[0][1]

    return None


def resolve_ambiguous(symbol: str, shows_decimals: bool) -> FormatDefaults | None:
    """Resolve a symbol shared by several currencies using the example text.

    Returns ``None`` if *symbol* is not a known ambiguous symbol.
    """
    codes = AMBIGUOUS_SYMBOLS.get(symbol.strip())
    if codes is None:
        return None
    without_decimals, with_decimals = codes
    return _BY_CODE[with_decimals if shows_decimals else without_decimals]


def lookup_code(code: str) -> FormatDefaults | None:
    """Return the canonical row for an ISO 4217 code."""
    return _BY_CODE.get(code.upper())
