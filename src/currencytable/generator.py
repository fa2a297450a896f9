"""Table generation: selection, aggregation and encoding in one pass.

``generate`` writes a table for caller-supplied locales and codes to open
sinks. ``generate_table`` selects locales and codes from CLDR using a
``GeneratorConfig``, owns the output files and returns a one-line summary
suitable for build logs.

Output sinks are always closed, including when a lookup raises an
unexpected error. Sink errors propagate unmodified.

Python 3.13+.
"""

from __future__ import annotations

import contextlib
import io
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO, TextIO

from currencytable.aggregator import aggregate
from currencytable.catalog import CurrencyCatalog, list_currency_codes, list_locale_tags
from currencytable.config import GeneratorConfig
from currencytable.encoder import encode
from currencytable.locale_utils import canonical_language_tag
from currencytable.model import CurrencyCode, CurrencyRecord, LocaleTag

__all__ = ["generate", "generate_table", "summarize"]

logger = logging.getLogger(__name__)


def summarize(count: int, label: str, selector: str) -> str:
    """Describe a selection for build logs.

    Example:
        >>> summarize(7, "Locale", "de*")
        '7 Locale(s) "de*"'
    """
    return f'{count} {label}(s) "{selector}"'


def _canonical_tags(locale_tags: Iterable[str]) -> tuple[LocaleTag, ...]:
    # Tags CLDR cannot parse are kept verbatim; the catalog decides on them.
    return tuple(sorted({canonical_language_tag(tag) or tag for tag in locale_tags}))


def generate(
    locale_tags: Iterable[str],
    currency_codes: Iterable[CurrencyCode],
    data: BinaryIO,
    comments: TextIO,
    *,
    catalog: CurrencyCatalog | None = None,
    config: GeneratorConfig | None = None,
    symbol_locales: Iterable[LocaleTag] | None = None,
) -> tuple[CurrencyRecord, ...]:
    """Aggregate and encode a table to open sinks.

    Args:
        locale_tags: Locale tags in any case; canonicalized and deduplicated
        currency_codes: Explicit ISO 4217 codes
        data: Binary sink
        comments: Trace sink
        catalog: Lookup collaborator (default: BabelCurrencyCatalog)
        config: Supplies the trace comment prefix (default: GeneratorConfig())
        symbol_locales: Wider population for default symbol ranking

    Returns:
        The records written.
    """
    if config is None:
        config = GeneratorConfig()

    records = aggregate(
        _canonical_tags(locale_tags),
        currency_codes,
        catalog=catalog,
        symbol_locales=symbol_locales,
    )
    size = encode(records, data, comments, comment_prefix=config.comment_prefix)
    logger.debug("Encoded %d currency record(s) in %d byte(s)", len(records), size)
    return records


def generate_table(
    path: str | Path,
    trace_path: str | Path | None = None,
    *,
    config: GeneratorConfig | None = None,
    catalog: CurrencyCatalog | None = None,
) -> str:
    """Select locales and codes from CLDR and write the table to files.

    Args:
        path: Destination of the binary table
        trace_path: Destination of the trace (discarded if None)
        config: Selection and formatting options (default: GeneratorConfig())
        catalog: Lookup collaborator (default: BabelCurrencyCatalog)

    Returns:
        Summary such as ``'7 Locale(s) "de*", 1 Currency(s) "XXX"'``.

    Raises:
        OSError: If either output file cannot be written.
    """
    if config is None:
        config = GeneratorConfig()

    locale_tags = list_locale_tags(config.locale_filter)
    currency_codes = list_currency_codes(config.currency_filter)
    symbol_locales = list_locale_tags() if config.rank_default_symbol_across_all_locales else None

    if not locale_tags:
        logger.warning("Locale filter '%s' selected no locales", config.locale_filter)

    with contextlib.ExitStack() as stack:
        data = stack.enter_context(Path(path).open("wb"))
        if trace_path is None:
            comments: TextIO = stack.enter_context(io.StringIO())
        else:
            comments = stack.enter_context(Path(trace_path).open("w", encoding="utf-8"))

        records = generate(
            locale_tags,
            currency_codes,
            data,
            comments,
            catalog=catalog,
            config=config,
            symbol_locales=symbol_locales,
        )

    summary = ", ".join((
        summarize(len(locale_tags), "Locale", config.locale_filter),
        summarize(len(currency_codes), "Currency", config.currency_filter),
    ))
    logger.info("Wrote %d currency record(s) to %s: %s", len(records), path, summary)
    return summary
