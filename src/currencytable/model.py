"""Currency table data model.

All types are immutable, hashable and built once per generation run.
``CurrencyRecord`` validates its ordering invariants at construction so
that anything handed to the encoder is already in wire order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

__all__ = [
    "Currency",
    "CurrencyCode",
    "CurrencyRecord",
    "LocaleTag",
    "SymbolVariants",
    "sorted_variants",
]


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type LocaleTag = str
"""Canonical BCP-47 locale tag (e.g., 'en-NZ'). Compared by exact string."""

type CurrencyCode = str
"""ISO 4217 alphabetic code (e.g., 'NZD', 'EUR')."""

type SymbolVariants = tuple[tuple[str, tuple[LocaleTag, ...]], ...]
"""Symbol to locales pairs, sorted by symbol."""


# ============================================================================
# DATA CLASSES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO 4217 currency.

    Attributes:
        code: ISO 4217 alphabetic code (e.g., 'NZD').
        default_fraction_digits: Minor unit digits; -1 when there is none.
        numeric_code: ISO 4217 numeric code; 0 when the code has none.
    """

    code: CurrencyCode
    default_fraction_digits: int
    numeric_code: int


@dataclass(frozen=True, slots=True)
class CurrencyRecord:
    """One row of the currency table.

    Attributes:
        currency: The currency this record describes.
        default_symbol: Symbol used when no locale context is given.
        locales: Locales whose own currency is this one, sorted ascending.
            Empty for currencies selected only by explicit code.
        symbol_variants: Every other observed symbol with the locales that
            render it. Sorted by symbol; each locale tuple sorted ascending.
            Never contains ``default_symbol``.

    Raises:
        ValueError: If any ordering or exclusion invariant is violated.
    """

    currency: Currency
    default_symbol: str
    locales: tuple[LocaleTag, ...] = ()
    symbol_variants: SymbolVariants = ()

    def __post_init__(self) -> None:
        _require_sorted(self.locales, f"locales of {self.currency.code}")
        symbols = [symbol for symbol, _ in self.symbol_variants]
        _require_sorted(symbols, f"symbol variants of {self.currency.code}")
        if self.default_symbol in symbols:
            msg = (
                f"default symbol {self.default_symbol!r} of {self.currency.code} "
                "must not appear among its symbol variants"
            )
            raise ValueError(msg)
        for symbol, locales in self.symbol_variants:
            _require_sorted(locales, f"locales of symbol {symbol!r}")

    @property
    def code(self) -> CurrencyCode:
        return self.currency.code

    def symbol_map(self) -> dict[str, tuple[LocaleTag, ...]]:
        """Symbol variants as a plain dict (insertion ordered by symbol)."""
        return dict(self.symbol_variants)


def sorted_variants(symbol_to_locales: Mapping[str, Iterable[LocaleTag]]) -> SymbolVariants:
    """Freeze a symbol to locales mapping into wire order.

    Args:
        symbol_to_locales: Mapping of symbol to any iterable of locale tags

    Returns:
        Tuple of (symbol, sorted locales) pairs sorted by symbol. Duplicate
        locales collapse.
    """
    return tuple(
        (symbol, tuple(sorted(set(locales))))
        for symbol, locales in sorted(symbol_to_locales.items())
    )


def _require_sorted(values: Iterable[str], what: str) -> None:
    previous: str | None = None
    for value in values:
        if previous is not None and value <= previous:
            msg = f"{what} must be unique and sorted ascending: {previous!r} before {value!r}"
            raise ValueError(msg)
        previous = value
