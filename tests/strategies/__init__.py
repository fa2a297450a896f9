"""Hypothesis strategies for currencytable property-based testing.

Strategies are organized by domain:

- tables: Synthetic locale/currency worlds backed by FakeCatalog

Usage:
    from tests.strategies import catalog_worlds
    from tests.strategies.tables import locale_tags, currencies
"""

from .tables import catalog_worlds, currencies, currency_codes, locale_tags

__all__ = [
    "catalog_worlds",
    "currencies",
    "currency_codes",
    "locale_tags",
]
