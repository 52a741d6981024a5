"""The detected-format cache and the operations collaborators call.

A ``CurrencyContext`` remembers the first confident format it detects and
uses it for every later parse and format call. The host page decides when the
cache is stale and calls ``reset`` or ``refresh``.

Module-level ``detect_format``, ``parse_amount``, ``format_amount`` and
``reset`` work on a process-wide default context.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from decimal import Decimal

import structlog

from budget_currency.config import Settings
from budget_currency.formatting.detection import detect
from budget_currency.formatting.formatter import format_money
from budget_currency.models.money import Money
from budget_currency.models.number_format import DetectionResult, NumberFormat
from budget_currency.parsing import amount

logger = structlog.get_logger(__name__)

ExampleSource = Callable[[], Iterable[str]]


class CurrencyContext:
    """Holds the cached ``NumberFormat`` and applies it to parsing and formatting.

    ``example_source`` is called lazily, the first time a format is needed and
    nothing is cached, to fetch the example strings currently on display.
    """

    def __init__(self, example_source: ExampleSource | None = None, settings: Settings | None = None):
        self._example_source = example_source
        self._settings = settings or Settings()
        self._cached: NumberFormat | None = None

    @property
    def cached_format(self) -> NumberFormat | None:
        return self._cached

    @property
    def default_format(self) -> NumberFormat:
        return self._settings.default_format()

    def detect_format(self, example_texts: Iterable[str]) -> NumberFormat:
        """Detect the format from *example_texts*, tried in order.

        The first confident detection is cached and returned. If every example
        was ambiguous, the first ambiguous format is returned but not cached.
        If no example contains an amount, the default format is returned.
        """
        fallback: DetectionResult | None = None
        for text in example_texts:
            result = detect(text)
            if result is None:
                continue
            if result.confident:
                self._cached = result.format
                logger.debug("format_detected", example=text, outcome=result.outcome, format=result.format.model_dump())
                return result.format
            if fallback is None:
                fallback = result

        if fallback is not None:
            logger.debug("format_detection_ambiguous_only", example=fallback.example)
            return fallback.format
        logger.debug("format_detection_default_used")
        return self.default_format

    @property
    def number_format(self) -> NumberFormat:
        """The cached format, detecting from ``example_source`` if nothing is cached."""
        if self._cached is not None:
            return self._cached
        if self._example_source is not None:
            return self.detect_format(self._example_source())
        return self.default_format

    @property
    def symbol(self) -> str:
        """The detected currency symbol, or the configured fallback when there is none."""
        return self.number_format.symbol or self._settings.fallback_symbol

    def parse_amount(self, text: str | int | float | Decimal | Money | None) -> Money:
        if isinstance(text, (Money, int, float, Decimal)) and not isinstance(text, bool):
            # Numbers need no format, so skip detection
            return amount.parse(text, NumberFormat.default())
        return amount.parse(text, self.number_format)

    def format_amount(self, value: str | int | float | Decimal | Money | None) -> str:
        """Format *value*; text is parsed first."""
        fmt = self.number_format
        money = value if isinstance(value, Money) else amount.parse(value, fmt)
        return format_money(money, fmt)

    def reset(self) -> None:
        self._cached = None
        logger.info("format_cache_reset")

    def refresh(self, example_texts: Iterable[str] | None = None) -> NumberFormat:
        """Drop the cache and detect again from *example_texts* or ``example_source``."""
        self.reset()
        if example_texts is not None:
            return self.detect_format(example_texts)
        return self.number_format


_default_context: CurrencyContext | None = None


def get_default_context() -> CurrencyContext:
    global _default_context
    if _default_context is None:
        _default_context = CurrencyContext()
    return _default_context


def set_example_source(example_source: ExampleSource | None) -> None:
    """Install the callable the default context uses to fetch example text."""
    global _default_context
    _default_context = CurrencyContext(example_source=example_source)


def detect_format(example_texts: Iterable[str]) -> NumberFormat:
    return get_default_context().detect_format(example_texts)


def parse_amount(text: str | int | float | Decimal | Money | None) -> Money:
    return get_default_context().parse_amount(text)


def format_amount(value: str | int | float | Decimal | Money | None) -> str:
    return get_default_context().format_amount(value)


def reset() -> None:
    get_default_context().reset()
