"""currencytable - compact currency and locale tables from Unicode CLDR.

Builds a deterministic table of selected currencies: numeric attributes, a
default display symbol, the locales that use each currency natively and the
locales that render every other symbol. The table is written as a dense
binary stream plus a human-readable trace for runtimes that ship without a
locale database.

Public API:
    aggregate - Build CurrencyRecord values from locales and explicit codes
    encode - Stream records to binary and trace sinks
    decode - Read a binary table back
    generate_table - Select from CLDR and write table files
    GeneratorConfig - Selection and formatting options
    BabelCurrencyCatalog - CLDR-backed lookups used by default

Exceptions:
    CurrencyTableError - Base exception class
    UnsupportedLocaleError - Locale has no currency or cannot render one
    UnknownCurrencyError - Code is not ISO 4217
    TableFormatError - Binary table does not match its declared counts
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .aggregator import aggregate
from .catalog import BabelCurrencyCatalog, CurrencyCatalog
from .config import GeneratorConfig
from .decoder import decode, read_table
from .encoder import encode, encode_to_bytes
from .errors import (
    CurrencyTableError,
    TableFormatError,
    TruncatedTableError,
    UnknownCurrencyError,
    UnsupportedLocaleError,
)
from .generator import generate, generate_table
from .model import Currency, CurrencyRecord

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("currencytable")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelCurrencyCatalog",
    "Currency",
    "CurrencyCatalog",
    "CurrencyRecord",
    "CurrencyTableError",
    "GeneratorConfig",
    "TableFormatError",
    "TruncatedTableError",
    "UnknownCurrencyError",
    "UnsupportedLocaleError",
    "__version__",
    "aggregate",
    "decode",
    "encode",
    "encode_to_bytes",
    "generate",
    "generate_table",
    "read_table",
]
