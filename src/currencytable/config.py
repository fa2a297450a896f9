"""Generator configuration.

Provides a single frozen dataclass that encapsulates the options of a table
build: which locales and explicit currencies to select, how trace lines are
prefixed and how the default symbol is ranked.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from currencytable.constants import (
    DEFAULT_COMMENT_PREFIX,
    DEFAULT_CURRENCY_FILTER,
    DEFAULT_LOCALE_FILTER,
)

__all__ = ["GeneratorConfig"]


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for ``generate_table``.

    All fields have sensible defaults; ``GeneratorConfig()`` selects every
    CLDR locale plus the ``XXX`` no-currency code.

    Attributes:
        locale_filter: Selector expression over CLDR locale tags
            (default: ``"*"``). See ``compile_filter``.
        currency_filter: Selector expression over ISO 4217 codes added
            regardless of locale use (default: ``"XXX"``). Empty selects none.
        comment_prefix: Prepended to every trace line (default: ``"// "``).
        rank_default_symbol_across_all_locales: If True, the default symbol
            of a locale-derived currency is the most common symbol across
            every CLDR locale rather than only the selected ones (default:
            False). Symbol variants always come from the selected locales.

    Example:
        >>> config = GeneratorConfig(locale_filter="de*", currency_filter="")
        >>> config.comment_prefix
        '// '
    """

    locale_filter: str = DEFAULT_LOCALE_FILTER
    currency_filter: str = DEFAULT_CURRENCY_FILTER
    comment_prefix: str = DEFAULT_COMMENT_PREFIX
    rank_default_symbol_across_all_locales: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If the locale filter is blank or the comment prefix
                contains a line break.
        """
        if not self.locale_filter.strip():
            msg = "locale_filter must select at least one pattern"
            raise ValueError(msg)
        if "\n" in self.comment_prefix or "\r" in self.comment_prefix:
            msg = "comment_prefix must not contain line breaks"
            raise ValueError(msg)
