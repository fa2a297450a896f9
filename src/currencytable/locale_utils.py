"""Locale utilities for BCP-47 and POSIX conversion and tag selection.

Centralizes locale format normalization used throughout the codebase.
Tags enter and leave the package as BCP-47 (``en-NZ``); Babel is always
called with the POSIX form (``en_NZ``).

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from babel import Locale, UnknownLocaleError

from currencytable.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from currencytable.model import LocaleTag

__all__ = [
    "canonical_language_tag",
    "compile_filter",
    "get_babel_locale",
    "normalize_locale",
    "to_language_tag",
]

logger = logging.getLogger(__name__)

_WILDCARD = "*"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("en-NZ")
        'en_NZ'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def to_language_tag(identifier: str) -> str:
    """Convert a POSIX/CLDR identifier to a BCP-47 tag.

    Example:
        >>> to_language_tag("zh_Hant_HK")
        'zh-Hant-HK'
    """
    return identifier.replace("_", "-")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def canonical_language_tag(locale_code: str) -> LocaleTag | None:
    """Canonicalize a locale code through CLDR.

    Args:
        locale_code: Locale code in any letter case, BCP-47 or POSIX

    Returns:
        Canonical BCP-47 tag, or None if CLDR does not know the locale.

    Example:
        >>> canonical_language_tag("EN-NZ")
        'en-NZ'
    """
    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("Dropping unknown locale '%s': %s", locale_code, e)
        return None
    return to_language_tag(str(locale))


def compile_filter(expression: str) -> Callable[[str], bool]:
    """Compile a comma separated selector expression into a predicate.

    Each selector is one of:
    - ``*``: matches everything
    - ``prefix*``: case-insensitive prefix match
    - anything else: case-insensitive exact match

    Whitespace around selectors is ignored. An empty expression matches
    nothing.

    Args:
        expression: Selector expression such as ``"en-*,de-CH"``

    Returns:
        Predicate over tags or codes.

    Example:
        >>> accepts = compile_filter("DE*,fr-CH")
        >>> accepts("de-AT"), accepts("fr-CH"), accepts("fr-FR")
        (True, True, False)
    """
    exact: set[str] = set()
    prefixes: list[str] = []

    for selector in expression.split(","):
        selector = selector.strip().casefold()
        if not selector:
            continue
        if selector.endswith(_WILDCARD):
            prefixes.append(selector.rstrip(_WILDCARD))
        else:
            exact.add(selector)

    def accepts(value: str) -> bool:
        folded = value.casefold()
        return folded in exact or any(folded.startswith(prefix) for prefix in prefixes)

    return accepts
