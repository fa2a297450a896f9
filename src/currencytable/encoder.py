"""Binary and trace encoding of currency records.

Wire format (big-endian; every integer is a signed 32-bit value; every string
is an int32 UTF-8 byte length followed by the bytes)::

    recordCount
    repeat recordCount:
        currencyCode, defaultFractionDigits, numericCode, defaultSymbol
        localeCount, localeCount x locale
        symbolEntryCount
        repeat symbolEntryCount:
            symbol, symbolLocaleCount, symbolLocaleCount x locale

Each logical field is written through ``CommentedWriter`` which performs the
binary write and the matching ``key=value`` trace line together. A blank
trace line separates records. The trace is diagnostic only::

    recordCount=2
    currencyCode=EUR
    defaultFractionDigits=2
    numericCode=978
    defaultSymbol=€
    locales=de,de-AT
    symbols=1
    EUR=de-CH,de-LI
    <blank>

Each symbol variant is folded into a single line keyed by the symbol.

Sink failures propagate unmodified.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import struct
from collections.abc import Iterable, Sequence
from typing import BinaryIO, TextIO

from currencytable.constants import (
    INT32_MAX,
    INT32_MIN,
    TRACE_CURRENCY_CODE,
    TRACE_DEFAULT_FRACTION_DIGITS,
    TRACE_DEFAULT_SYMBOL,
    TRACE_LOCALES,
    TRACE_NUMERIC_CODE,
    TRACE_RECORD_COUNT,
    TRACE_SYMBOL_COUNT,
)
from currencytable.model import CurrencyRecord, LocaleTag

__all__ = [
    "CommentedWriter",
    "encode",
    "encode_to_bytes",
]

_INT32 = struct.Struct(">i")


class CommentedWriter:
    """Writes each field to a binary sink and a trace sink in lockstep.

    Attributes:
        bytes_written: Number of bytes written to the binary sink so far.
    """

    __slots__ = ("_comments", "_data", "_prefix", "bytes_written")

    def __init__(self, data: BinaryIO, comments: TextIO, *, prefix: str = "") -> None:
        self._data = data
        self._comments = comments
        self._prefix = prefix
        self.bytes_written = 0

    def _write(self, payload: bytes) -> None:
        self._data.write(payload)
        self.bytes_written += len(payload)

    def _write_int(self, value: int) -> None:
        if not INT32_MIN <= value <= INT32_MAX:
            msg = f"{value} does not fit in a signed 32-bit integer"
            raise ValueError(msg)
        self._write(_INT32.pack(value))

    def _write_string(self, value: str) -> None:
        encoded = value.encode("utf-8")
        self._write_int(len(encoded))
        self._write(encoded)

    def comment(self, key: str, value: object) -> None:
        """Emit one ``key=value`` trace line."""
        self._comments.write(f"{self._prefix}{key}={value}\n")

    def blank_line(self) -> None:
        """Emit a record separator."""
        self._comments.write(f"{self._prefix.rstrip()}\n")

    def int_field(self, key: str, value: int) -> None:
        self.comment(key, value)
        self._write_int(value)

    def string_field(self, key: str, value: str) -> None:
        self.comment(key, value)
        self._write_string(value)

    def string_list_field(self, key: str, values: Sequence[str]) -> None:
        """Write a count-prefixed string list as a single csv trace line."""
        self.comment(key, ",".join(values))
        self._write_int(len(values))
        for value in values:
            self._write_string(value)

    def symbol_variants_field(
        self, variants: Sequence[tuple[str, Sequence[LocaleTag]]]
    ) -> None:
        """Write the count-prefixed symbol map.

        The count gets its own trace line. Each symbol and its locales share
        one ``symbol=locale,locale`` line.
        """
        self.int_field(TRACE_SYMBOL_COUNT, len(variants))
        for symbol, locales in variants:
            self._write_string(symbol)
            self.string_list_field(symbol, locales)


def _encode_record(writer: CommentedWriter, record: CurrencyRecord) -> None:
    currency = record.currency
    writer.string_field(TRACE_CURRENCY_CODE, currency.code)
    writer.int_field(TRACE_DEFAULT_FRACTION_DIGITS, currency.default_fraction_digits)
    writer.int_field(TRACE_NUMERIC_CODE, currency.numeric_code)
    writer.string_field(TRACE_DEFAULT_SYMBOL, record.default_symbol)
    writer.string_list_field(TRACE_LOCALES, record.locales)
    writer.symbol_variants_field(record.symbol_variants)
    writer.blank_line()


def encode(
    records: Iterable[CurrencyRecord],
    data: BinaryIO,
    comments: TextIO,
    *,
    comment_prefix: str = "",
) -> int:
    """Stream records to a binary sink and a trace sink.

    Args:
        records: Records in output order (as returned by ``aggregate``)
        data: Binary sink
        comments: Text sink receiving one line per written field
        comment_prefix: Prepended to every trace line (e.g. ``"// "``)

    Returns:
        Number of bytes written to ``data``.

    Raises:
        OSError: If either sink fails.
        ValueError: If an integer does not fit in 32 bits.
    """
    records = tuple(records)
    writer = CommentedWriter(data, comments, prefix=comment_prefix)
    writer.int_field(TRACE_RECORD_COUNT, len(records))
    for record in records:
        _encode_record(writer, record)
    return writer.bytes_written


def encode_to_bytes(records: Iterable[CurrencyRecord]) -> tuple[bytes, tuple[str, ...]]:
    """Encode records in memory.

    Returns:
        Tuple of (binary table, trace lines).

    Example:
        >>> data, trace = encode_to_bytes(())
        >>> data, trace
        (b'\\x00\\x00\\x00\\x00', ('recordCount=0',))
    """
    data = io.BytesIO()
    comments = io.StringIO()
    encode(records, data, comments)
    return data.getvalue(), tuple(comments.getvalue().splitlines())
