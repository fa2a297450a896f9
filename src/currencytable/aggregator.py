"""Aggregation of locales and explicit codes into currency records.

Resolves each locale to its currency, groups locales per currency, maps every
display symbol of that currency across the whole locale population, selects a
default symbol and folds in explicitly requested currencies that no locale
reached.

Default symbol selection:
    The symbol rendered by the most locales wins. Ties resolve to the
    lexicographically smallest symbol so output never depends on iteration
    order. A currency no locale can render falls back to its ISO code.

Deduplication:
    A ``seen`` set of currency codes is threaded through a ``reduce`` fold
    as part of an immutable accumulator. Locale-derived records are folded
    first, so an explicit code that a locale already reached is dropped and
    the locale-derived record (with its locales) is kept.

Per-item lookup failures are skipped and logged at DEBUG. Nothing here
raises for bad tags or unknown codes; the result is only smaller.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import partial, reduce

from currencytable.catalog import BabelCurrencyCatalog, CurrencyCatalog
from currencytable.model import (
    Currency,
    CurrencyCode,
    CurrencyRecord,
    LocaleTag,
    sorted_variants,
)

__all__ = [
    "aggregate",
    "build_symbol_map",
    "choose_default_symbol",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Accumulator:
    """Fold state: codes already emitted and the records emitted so far."""

    seen: frozenset[CurrencyCode] = frozenset()
    records: tuple[CurrencyRecord, ...] = ()

    def add(self, record: CurrencyRecord) -> _Accumulator:
        return _Accumulator(
            seen=self.seen | {record.code},
            records=(*self.records, record),
        )


def build_symbol_map(
    currency: Currency,
    locales: Iterable[LocaleTag],
    catalog: CurrencyCatalog,
) -> dict[str, list[LocaleTag]]:
    """Group locales by the symbol they render for ``currency``.

    Locales whose lookup fails, or that render an empty symbol, are skipped.

    Args:
        currency: Currency to render
        locales: Locale population; visited in the given order
        catalog: Symbol lookup

    Returns:
        Symbol to locales, locales in visiting order.
    """
    symbol_to_locales: dict[str, list[LocaleTag]] = {}
    for locale in locales:
        symbol, error = catalog.resolve_symbol(currency, locale)
        if error is not None:
            logger.debug("Skipping %s symbol for %s: %s", currency.code, locale, error)
            continue
        if not symbol:
            continue
        symbol_to_locales.setdefault(symbol, []).append(locale)
    return symbol_to_locales


def choose_default_symbol(symbol_to_locales: Mapping[str, Iterable[LocaleTag]]) -> str | None:
    """Pick the symbol rendered by the most locales.

    Ties resolve to the lexicographically smallest symbol.

    Returns:
        The winning symbol, or None for an empty mapping.

    Example:
        >>> choose_default_symbol({"$": ["en-US"], "US$": ["en-AU"]})
        '$'
    """
    best: str | None = None
    best_count = -1
    for symbol in sorted(symbol_to_locales):
        count = len(set(symbol_to_locales[symbol]))
        if count > best_count:
            best, best_count = symbol, count
    return best


def _group_by_currency(
    locales: Iterable[LocaleTag],
    catalog: CurrencyCatalog,
) -> dict[CurrencyCode, tuple[Currency, list[LocaleTag]]]:
    grouped: dict[CurrencyCode, tuple[Currency, list[LocaleTag]]] = {}
    for locale in locales:
        currency, error = catalog.resolve_locale_currency(locale)
        if error is not None or currency is None:
            logger.debug("Skipping locale without currency: %s", error)
            continue
        grouped.setdefault(currency.code, (currency, []))[1].append(locale)
    return grouped


def _fold_locale_currency(
    state: _Accumulator,
    group: tuple[Currency, list[LocaleTag]],
    *,
    population: tuple[LocaleTag, ...],
    ranking: tuple[LocaleTag, ...] | None,
    catalog: CurrencyCatalog,
) -> _Accumulator:
    currency, native_locales = group
    symbols = build_symbol_map(currency, population, catalog)
    ranked = symbols if ranking is None else build_symbol_map(currency, ranking, catalog)
    default_symbol = choose_default_symbol(ranked) or currency.code
    symbols.pop(default_symbol, None)

    return state.add(CurrencyRecord(
        currency=currency,
        default_symbol=default_symbol,
        locales=tuple(sorted(set(native_locales))),
        symbol_variants=sorted_variants(symbols),
    ))


def _fold_explicit_code(
    state: _Accumulator,
    code: CurrencyCode,
    *,
    population: tuple[LocaleTag, ...],
    catalog: CurrencyCatalog,
) -> _Accumulator:
    currency, error = catalog.resolve_currency_by_code(code)
    if error is not None or currency is None:
        logger.debug("Skipping explicit currency code: %s", error)
        return state
    if currency.code in state.seen:
        logger.debug("Currency %s already emitted for its locales", currency.code)
        return state

    # No locale affinity: the code itself is the default symbol
    symbols = build_symbol_map(currency, population, catalog)
    symbols.pop(currency.code, None)

    return state.add(CurrencyRecord(
        currency=currency,
        default_symbol=currency.code,
        symbol_variants=sorted_variants(symbols),
    ))


def aggregate(
    locales: Iterable[LocaleTag],
    currency_codes: Iterable[CurrencyCode],
    *,
    catalog: CurrencyCatalog | None = None,
    symbol_locales: Iterable[LocaleTag] | None = None,
) -> tuple[CurrencyRecord, ...]:
    """Build the currency records for a locale set and explicit codes.

    Args:
        locales: Locale tags; duplicates collapse
        currency_codes: Explicit ISO 4217 codes to include regardless of
            whether any locale uses them
        catalog: Lookup collaborator (default: BabelCurrencyCatalog)
        symbol_locales: Wider population used only to rank the default
            symbol of locale-derived currencies (default: ``locales``)

    Returns:
        One record per distinct currency, sorted by currency code.

    Example:
        >>> records = aggregate(["en-NZ"], ["XXX"])
        >>> [record.code for record in records]
        ['NZD', 'XXX']
    """
    if catalog is None:
        catalog = BabelCurrencyCatalog()

    population = tuple(sorted(set(locales)))
    ranking = None if symbol_locales is None else tuple(sorted(set(symbol_locales)))
    codes = sorted(set(currency_codes))

    grouped = _group_by_currency(population, catalog)

    state = reduce(
        partial(_fold_locale_currency, population=population, ranking=ranking, catalog=catalog),
        grouped.values(),
        _Accumulator(),
    )
    state = reduce(
        partial(_fold_explicit_code, population=population, catalog=catalog),
        codes,
        state,
    )

    records = tuple(sorted(state.records, key=lambda record: record.code))
    logger.debug(
        "Aggregated %d currency record(s) from %d locale(s) and %d explicit code(s)",
        len(records),
        len(population),
        len(codes),
    )
    return records
