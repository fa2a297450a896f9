"""Exception hierarchy for currency table generation.

Per-item conditions (a locale without a currency, an unknown code) are
returned by catalog lookups as values, never raised through the aggregator.
Format errors are raised by the decoder when a table does not match its
declared counts. Sink failures are plain ``OSError`` and propagate unmodified.

Hierarchy:
    CurrencyTableError (base)
    ├─ UnsupportedLocaleError (locale has no currency / cannot render one)
    ├─ UnknownCurrencyError (code is not ISO 4217)
    └─ TableFormatError (binary table malformed)
       └─ TruncatedTableError (stream ended before a declared count)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "CurrencyTableError",
    "ErrorContext",
    "TableFormatError",
    "TruncatedTableError",
    "UnknownCurrencyError",
    "UnsupportedLocaleError",
]


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for lookup and format errors.

    Attributes:
        locale_code: Locale involved in the failed lookup (empty if none)
        currency_code: Currency involved in the failed lookup (empty if none)
        offset: Byte offset in the table where reading failed (-1 if n/a)
    """

    locale_code: str = ""
    currency_code: str = ""
    offset: int = -1


class CurrencyTableError(Exception):
    """Base exception for all currency table errors.

    Attributes:
        context: Structured context for diagnosis
    """

    def __init__(self, message: str, context: ErrorContext | None = None) -> None:
        """Initialize CurrencyTableError.

        Args:
            message: Human-readable error description
            context: Structured context (optional)
        """
        super().__init__(message)
        self.context = context if context is not None else ErrorContext()


class UnsupportedLocaleError(CurrencyTableError):
    """Locale has no associated currency, or cannot render a currency symbol.

    Expected per-locale condition: the aggregator skips the locale.
    """

    def __init__(self, message: str, *, locale_code: str, currency_code: str = "") -> None:
        super().__init__(
            message,
            ErrorContext(locale_code=locale_code, currency_code=currency_code),
        )

    @property
    def locale_code(self) -> str:
        return self.context.locale_code


class UnknownCurrencyError(CurrencyTableError):
    """Currency code is not a recognised ISO 4217 code.

    Expected per-code condition: the aggregator skips the code.
    """

    def __init__(self, message: str, *, currency_code: str) -> None:
        super().__init__(message, ErrorContext(currency_code=currency_code))

    @property
    def currency_code(self) -> str:
        return self.context.currency_code


class TableFormatError(CurrencyTableError):
    """Binary table does not match the wire format.

    Raised for negative counts, undecodable strings and trailing bytes.
    """

    def __init__(self, message: str, *, offset: int) -> None:
        super().__init__(message, ErrorContext(offset=offset))

    @property
    def offset(self) -> int:
        return self.context.offset


class TruncatedTableError(TableFormatError, EOFError):
    """Stream ended before a declared count or length was satisfied."""
