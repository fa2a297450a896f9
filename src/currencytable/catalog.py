"""Locale and currency lookups backed by Unicode CLDR via Babel.

The aggregator consumes lookups through the ``CurrencyCatalog`` protocol so
tests and embedders can supply their own data. ``BabelCurrencyCatalog`` is
the default implementation.

API: every lookup returns ``tuple[value | None, CurrencyTableError | None]``;
exactly one element is None. Lookups NEVER raise for an unsupported locale
or unknown code. Logic bugs propagate.

Thread-safe. Results cached per normalized input via lru_cache.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import Protocol

from babel import UnknownLocaleError
from babel.localedata import locale_identifiers
from babel.numbers import get_currency_symbol, get_territory_currencies

from currencytable.constants import (
    CLDR_GENERIC_CURRENCY_SIGN,
    DEFAULT_LOCALE_FILTER,
    ISO_4217_DECIMAL_DIGITS,
    ISO_4217_DEFAULT_DECIMALS,
    ISO_4217_NUMERIC_CODES,
    ISO_CURRENCY_CODE_LENGTH,
    MAX_LOCALE_CACHE_SIZE,
)
from currencytable.errors import UnknownCurrencyError, UnsupportedLocaleError
from currencytable.locale_utils import compile_filter, get_babel_locale, to_language_tag
from currencytable.model import Currency, CurrencyCode, LocaleTag

__all__ = [
    "BabelCurrencyCatalog",
    "CurrencyCatalog",
    "clear_catalog_cache",
    "list_currency_codes",
    "list_locale_tags",
]

logger = logging.getLogger(__name__)


# pylint: disable=unnecessary-ellipsis
class CurrencyCatalog(Protocol):
    """Lookups the aggregator needs from a locale/currency database."""

    def resolve_locale_currency(
        self, locale: LocaleTag
    ) -> tuple[Currency | None, UnsupportedLocaleError | None]:
        """Currency natively used by ``locale``."""
        ...

    def resolve_symbol(
        self, currency: Currency, locale: LocaleTag
    ) -> tuple[str | None, UnsupportedLocaleError | None]:
        """Display symbol of ``currency`` in ``locale``; may be empty."""
        ...

    def resolve_currency_by_code(
        self, code: CurrencyCode
    ) -> tuple[Currency | None, UnknownCurrencyError | None]:
        """Currency for an ISO 4217 alphabetic code."""
        ...
# pylint: enable=unnecessary-ellipsis


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _currency_by_code_impl(
    code: str,
) -> tuple[Currency | None, UnknownCurrencyError | None]:
    """Internal cached implementation for resolve_currency_by_code."""
    if len(code) != ISO_CURRENCY_CODE_LENGTH or not code.isalpha() or not code.isupper():
        return (None, UnknownCurrencyError(
            f"Malformed currency code '{code}'", currency_code=code
        ))

    numeric_code = ISO_4217_NUMERIC_CODES.get(code)
    if numeric_code is None:
        return (None, UnknownCurrencyError(
            f"Unknown currency code '{code}'", currency_code=code
        ))

    return (
        Currency(
            code=code,
            default_fraction_digits=ISO_4217_DECIMAL_DIGITS.get(code, ISO_4217_DEFAULT_DECIMALS),
            numeric_code=numeric_code,
        ),
        None,
    )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _locale_currency_impl(
    locale: str,
) -> tuple[Currency | None, UnsupportedLocaleError | None]:
    """Internal cached implementation for resolve_locale_currency."""
    try:
        babel_locale = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        return (None, UnsupportedLocaleError(
            f"Unknown locale '{locale}': {e}", locale_code=locale
        ))

    territory = babel_locale.territory
    if not territory:
        return (None, UnsupportedLocaleError(
            f"Locale '{locale}' has no territory and therefore no currency",
            locale_code=locale,
        ))

    # First currently active legal tender currency of the territory
    codes = get_territory_currencies(territory)
    if not codes:
        return (None, UnsupportedLocaleError(
            f"Territory '{territory}' of locale '{locale}' has no current currency",
            locale_code=locale,
        ))

    currency, error = _currency_by_code_impl(codes[0])
    if error is not None:
        return (None, UnsupportedLocaleError(
            f"Locale '{locale}' uses '{codes[0]}' which is not an ISO 4217 currency",
            locale_code=locale,
            currency_code=codes[0],
        ))
    return (currency, None)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _symbol_impl(
    code: str,
    locale: str,
) -> tuple[str | None, UnsupportedLocaleError | None]:
    """Internal cached implementation for resolve_symbol.

    Babel falls back to the code itself when the locale has no symbol.
    CLDR's generic currency sign is not a display symbol and maps to "".
    """
    try:
        babel_locale = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        return (None, UnsupportedLocaleError(
            f"Unknown locale '{locale}': {e}", locale_code=locale, currency_code=code
        ))
    symbol = get_currency_symbol(code, locale=babel_locale)
    if symbol == CLDR_GENERIC_CURRENCY_SIGN:
        return ("", None)
    return (symbol, None)


class BabelCurrencyCatalog:
    """``CurrencyCatalog`` backed by Babel's CLDR data.

    Stateless; all instances share the module-level caches.

    Example:
        >>> catalog = BabelCurrencyCatalog()
        >>> currency, error = catalog.resolve_locale_currency("en-NZ")
        >>> currency.code, currency.numeric_code, error
        ('NZD', 554, None)
    """

    __slots__ = ()

    def resolve_locale_currency(
        self, locale: LocaleTag
    ) -> tuple[Currency | None, UnsupportedLocaleError | None]:
        return _locale_currency_impl(locale)

    def resolve_symbol(
        self, currency: Currency, locale: LocaleTag
    ) -> tuple[str | None, UnsupportedLocaleError | None]:
        return _symbol_impl(currency.code, locale)

    def resolve_currency_by_code(
        self, code: CurrencyCode
    ) -> tuple[Currency | None, UnknownCurrencyError | None]:
        return _currency_by_code_impl(code.strip().upper())


# ============================================================================
# ENUMERATION
# ============================================================================


@functools.cache
def _all_locale_tags() -> tuple[LocaleTag, ...]:
    return tuple(sorted(to_language_tag(identifier) for identifier in locale_identifiers()))


def list_locale_tags(locale_filter: str = DEFAULT_LOCALE_FILTER) -> tuple[LocaleTag, ...]:
    """List CLDR locales as BCP-47 tags.

    Args:
        locale_filter: Selector expression (see ``compile_filter``)

    Returns:
        Matching tags, sorted ascending.
    """
    accepts = compile_filter(locale_filter)
    tags = tuple(tag for tag in _all_locale_tags() if accepts(tag))
    logger.debug("Locale filter '%s' selected %d locale(s)", locale_filter, len(tags))
    return tags


def list_currency_codes(currency_filter: str = "*") -> tuple[CurrencyCode, ...]:
    """List known ISO 4217 codes.

    Args:
        currency_filter: Selector expression (see ``compile_filter``)

    Returns:
        Matching codes, sorted ascending.
    """
    accepts = compile_filter(currency_filter)
    return tuple(code for code in sorted(ISO_4217_NUMERIC_CODES) if accepts(code))


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_catalog_cache() -> None:
    """Clear all catalog caches.

    Call this if you need to free memory after a large generation run.
    Thread-safe.
    """
    _currency_by_code_impl.cache_clear()
    _locale_currency_impl.cache_clear()
    _symbol_impl.cache_clear()
    _all_locale_tags.cache_clear()
    get_babel_locale.cache_clear()
