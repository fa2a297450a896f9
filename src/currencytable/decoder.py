"""Reader for the binary currency table.

Reads exactly what ``encode`` writes and fails fast on any mismatch between
declared counts and the bytes that follow.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
import struct
from typing import BinaryIO

from currencytable.errors import TableFormatError, TruncatedTableError
from currencytable.model import Currency, CurrencyRecord, LocaleTag, SymbolVariants

__all__ = ["decode", "read_table"]

_INT32 = struct.Struct(">i")


class _TableReader:
    __slots__ = ("_offset", "_stream")

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._offset = 0

    def _read(self, size: int) -> bytes:
        payload = self._stream.read(size)
        if len(payload) != size:
            msg = f"Expected {size} byte(s) at offset {self._offset}, found {len(payload)}"
            raise TruncatedTableError(msg, offset=self._offset)
        self._offset += size
        return payload

    def read_int(self) -> int:
        (value,) = _INT32.unpack(self._read(_INT32.size))
        return value

    def read_count(self, what: str) -> int:
        offset = self._offset
        count = self.read_int()
        if count < 0:
            msg = f"Negative {what} {count} at offset {offset}"
            raise TableFormatError(msg, offset=offset)
        return count

    def read_string(self) -> str:
        length = self.read_count("string length")
        offset = self._offset
        try:
            return self._read(length).decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"Invalid UTF-8 string at offset {offset}: {e}"
            raise TableFormatError(msg, offset=offset) from e

    def read_locales(self) -> tuple[LocaleTag, ...]:
        return tuple(self.read_string() for _ in range(self.read_count("locale count")))

    def read_record(self) -> CurrencyRecord:
        offset = self._offset
        currency = Currency(
            code=self.read_string(),
            default_fraction_digits=self.read_int(),
            numeric_code=self.read_int(),
        )
        default_symbol = self.read_string()
        locales = self.read_locales()
        variants: SymbolVariants = tuple(
            (self.read_string(), self.read_locales())
            for _ in range(self.read_count("symbol entry count"))
        )
        try:
            return CurrencyRecord(
                currency=currency,
                default_symbol=default_symbol,
                locales=locales,
                symbol_variants=variants,
            )
        except ValueError as e:
            raise TableFormatError(f"Record at offset {offset}: {e}", offset=offset) from e

    def expect_end(self) -> None:
        if self._stream.read(1):
            msg = f"Trailing bytes after last record at offset {self._offset}"
            raise TableFormatError(msg, offset=self._offset)


def read_table(stream: BinaryIO) -> tuple[CurrencyRecord, ...]:
    """Read a complete table from a binary stream.

    Args:
        stream: Binary stream positioned at the record count

    Returns:
        Records in stored order.

    Raises:
        TruncatedTableError: Stream ended before a declared count was met.
        TableFormatError: Negative count, invalid UTF-8, an out-of-order
            record, or bytes left after the last record.
    """
    reader = _TableReader(stream)
    records = tuple(reader.read_record() for _ in range(reader.read_count("record count")))
    reader.expect_end()
    return records


def decode(data: bytes) -> tuple[CurrencyRecord, ...]:
    """Decode an in-memory table. See ``read_table``."""
    return read_table(io.BytesIO(data))
