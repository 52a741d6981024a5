"""Infer the number format in effect from example display text.

Given a string such as ``"£12.50"``, ``"117 174,73 kr"`` or ``"1.234,56 €"``
this finds the amount, classifies its separators and works out the currency
symbol and its placement. Small amounts cannot show thousand grouping, so the
lookup table fills the gap when the symbol is recognised.
"""

from __future__ import annotations

import re

import structlog

from budget_currency.formatting.lookup import DEFAULT_FORMAT_DEFAULTS, lookup, resolve_ambiguous
from budget_currency.models.number_format import (
    DetectionOutcome,
    DetectionResult,
    FormatDefaults,
    NumberFormat,
)

logger = structlog.get_logger(__name__)

# Tried in order; none may stop in the middle of a run of digits.
AMOUNT_PATTERN = re.compile(
    r"""
    \d{1,3}(?:[ .,']\d{3})+(?:[.,/]\d{2})?(?!\d)   # grouped: 1,234.56  117 174,73  1'234
    | \d+[.,/]\d{2}(?!\d)                          # ungrouped with fraction: 12.50  117174/73
    | \d+                                          # bare integer
    """,
    re.VERBOSE,
)

_AMOUNT_RUN = r"(?:\d{1,3}(?:[ .,']\d{3})+(?:[.,/]\d{2})?|\d+[.,/]\d{2}|\d+)(?!\d)"

# A currency-like snippet inside a larger block of text: an amount with an
# optional short symbol token directly before it, or else directly after it
EXAMPLE_PATTERN = re.compile(
    r"(?<!\S)[^\d\s]{1,4} ?" + _AMOUNT_RUN
    + r"|" + _AMOUNT_RUN + r"(?: ?[^\d\s]{1,4}(?!\S))?"
)

FRACTION_SUFFIX = re.compile(r"[.,/]\d{2}$")

_SPACE_VARIANTS = str.maketrans({"\u00a0": " ", "\u202f": " ", "\u2009": " ", "\u2019": "'"})
_LEADING_SIGN_CHARS = "-\u2212+("
_TRAILING_SIGN_CHARS = "-\u2212+)"


def normalize_spaces(text: str) -> str:
    """Map no-break and thin spaces to plain spaces, and typographic apostrophes to ``'``."""
    return text.translate(_SPACE_VARIANTS)


def _classify_separators(run: str) -> tuple[str, str, bool, bool]:
    """Work out the separators used in a numeric run.

    Returns ``(decimal, thousands, decimal_confirmed, grouping_confirmed)``.
    The ``*_confirmed`` flags are false when the run gave no evidence and the
    value is only a default.
    """
    # 1. Trailing "/dd" is a decimal slash; grouping is whatever remains
    if "/" in run and re.search(r"/\d{2}$", run):
        integer_part = run[: run.rindex("/")]
        for sep in (",", ".", " ", "'"):
            if sep in integer_part:
                return "/", sep, True, True
        return "/", ",", True, False

    # 2. Space or apostrophe grouping; a later , or . is the decimal point
    for group_sep in (" ", "'"):
        if group_sep in run:
            last_group = run.rindex(group_sep)
            last_comma = run.rfind(",")
            last_dot = run.rfind(".")
            if last_comma > last_group and last_comma > last_dot:
                return ",", group_sep, True, True
            if last_dot > last_group and last_dot > last_comma:
                return ".", group_sep, True, True
            if "," in run:
                return ",", group_sep, True, True
            if "." in run:
                return ".", group_sep, True, True
            return ".", group_sep, False, True

    # 3. Both , and . : the later one is the decimal point
    if "." in run and "," in run:
        if run.rindex(".") > run.rindex(","):
            return ".", ",", True, True
        return ",", ".", True, True

    # 4. Only one of them: two trailing digits mean decimal
    for sep, other in ((".", ","), (",", ".")):
        if sep in run:
            if len(run.rsplit(sep, 1)[1]) == 2:
                # "1.234" must not read as a fraction, so grouping is only
                # assumed for runs long enough to contain it
                return sep, other, True, len(run) > 6
            return other, sep, False, True

    # 5. No separators at all
    return ".", ",", False, False


def _split_symbol(text: str, start: int, end: int) -> tuple[str, bool, bool]:
    """Return ``(symbol, symbol_first, symbol_space)`` around the run at ``[start, end)``.

    Sign characters on either side of the symbol (``-$12.50``, ``€ -12,50``,
    ``12,50- €``) are not part of it. ``symbol_space`` looks at the character
    next to the symbol itself, not the one next to the digits.
    """
    before = text[:start].strip(_LEADING_SIGN_CHARS + " ")
    if before:
        symbol_end = text.rindex(before, 0, start) + len(before)
        return before, True, text[symbol_end] == " "

    after = text[end:].strip(_TRAILING_SIGN_CHARS + " ")
    if after:
        symbol_start = text.index(after, end)
        return after, False, text[symbol_start - 1] == " "
    return "", True, False


def detect(example: str | None) -> DetectionResult | None:
    """Infer a ``NumberFormat`` from a single example string.

    Returns ``None`` when the text contains no amount. Never raises.
    """
    if not example:
        return None
    text = normalize_spaces(example).strip()
    match = AMOUNT_PATTERN.search(text)
    if match is None:
        return None

    run = match.group(0)
    decimal_sep, thousands_sep, decimal_confirmed, grouping_confirmed = _classify_separators(run)
    symbol, symbol_first, symbol_space = _split_symbol(text, match.start(), match.end())
    shows_decimals = FRACTION_SUFFIX.search(run) is not None
    use_decimals = shows_decimals
    outcome = DetectionOutcome.DETECTED

    if not grouping_confirmed:
        row = _defaults_for_symbol(symbol, shows_decimals)
        if row is not None:
            outcome = DetectionOutcome.LOOKUP
            logger.debug("format_lookup_used", symbol=symbol, code=row.code, example=example)
        else:
            outcome = DetectionOutcome.AMBIGUOUS
            row = DEFAULT_FORMAT_DEFAULTS
            logger.debug("format_detection_ambiguous", symbol=symbol, example=example)

        if not decimal_confirmed:
            decimal_sep = row.decimal_separator
        thousands_sep = row.thousands_separator
        use_decimals = row.use_decimals or shows_decimals

    if thousands_sep == decimal_sep:
        thousands_sep = "." if decimal_sep == "," else ","

    fmt = NumberFormat(
        symbol=symbol,
        symbol_first=symbol_first,
        symbol_space=symbol_space,
        decimal_separator=decimal_sep,
        thousands_separator=thousands_sep,
        use_decimals=use_decimals,
    )
    return DetectionResult(format=fmt, outcome=outcome, example=example, amount_text=run)


def _defaults_for_symbol(symbol: str, shows_decimals: bool) -> FormatDefaults | None:
    if not symbol:
        return None
    row = resolve_ambiguous(symbol, shows_decimals)
    if row is not None:
        return row
    return lookup(symbol)


def find_amount_example(text: str | None) -> str | None:
    """Extract the first currency-like snippet from a block of page text.

    For example ``"Available 1 234,56 kr\\nAssigned"`` gives ``"1 234,56 kr"``.
    Only a short token (up to four characters) directly next to the amount is
    kept as a symbol candidate.
    """
    if not text:
        return None
    match = EXAMPLE_PATTERN.search(normalize_spaces(text))
    if match is None:
        return None
    return match.group(0).strip()
