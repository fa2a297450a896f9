"""Shared constants for currencytable.

Single source of truth for ISO 4217 reference data, cache bounds, trace keys
and default selection filters. Placing constants here avoids circular imports
between the catalog, aggregator and encoder.

Constants are grouped by domain:
- ISO 4217: numeric codes and minor units
- Cache limits: Memory bounds for memoised CLDR lookups
- Wire format: Field keys used in trace output
- Selection: Default locale and currency filters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # ISO 4217
    "ISO_4217_NUMERIC_CODES",
    "ISO_4217_DECIMAL_DIGITS",
    "ISO_4217_DEFAULT_DECIMALS",
    "NO_MINOR_UNIT",
    "ISO_CURRENCY_CODE_LENGTH",
    "CLDR_GENERIC_CURRENCY_SIGN",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Wire format
    "INT32_MIN",
    "INT32_MAX",
    "TRACE_RECORD_COUNT",
    "TRACE_CURRENCY_CODE",
    "TRACE_DEFAULT_FRACTION_DIGITS",
    "TRACE_NUMERIC_CODE",
    "TRACE_DEFAULT_SYMBOL",
    "TRACE_LOCALES",
    "TRACE_SYMBOL_COUNT",
    # Selection
    "DEFAULT_LOCALE_FILTER",
    "DEFAULT_CURRENCY_FILTER",
    "DEFAULT_COMMENT_PREFIX",
]

# ============================================================================
# ISO 4217
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Fraction digits reported for codes whose minor unit is "N.A." in ISO 4217
# (precious metals, bond units, SDR, the testing and no-currency codes).
NO_MINOR_UNIT: int = -1

# CLDR placeholder for currencies without a display symbol (e.g. XXX).
CLDR_GENERIC_CURRENCY_SIGN: str = "\u00a4"

# Minor units for every code that does not use the default of 2.
ISO_4217_DECIMAL_DIGITS: dict[str, int] = {
    # Zero decimals
    "BIF": 0, "CLP": 0, "DJF": 0, "GNF": 0, "ISK": 0, "JPY": 0,
    "KMF": 0, "KRW": 0, "PYG": 0, "RWF": 0, "UGX": 0, "UYI": 0,
    "VND": 0, "VUV": 0, "XAF": 0, "XOF": 0, "XPF": 0,
    # Three decimals
    "BHD": 3, "IQD": 3, "JOD": 3, "KWD": 3, "LYD": 3, "OMR": 3, "TND": 3,
    # Four decimals
    "CLF": 4, "UYW": 4,
    # No minor unit
    "XAG": NO_MINOR_UNIT, "XAU": NO_MINOR_UNIT, "XBA": NO_MINOR_UNIT,
    "XBB": NO_MINOR_UNIT, "XBC": NO_MINOR_UNIT, "XBD": NO_MINOR_UNIT,
    "XDR": NO_MINOR_UNIT, "XPD": NO_MINOR_UNIT, "XPT": NO_MINOR_UNIT,
    "XSU": NO_MINOR_UNIT, "XTS": NO_MINOR_UNIT, "XUA": NO_MINOR_UNIT,
    "XXX": NO_MINOR_UNIT,
}

ISO_4217_DEFAULT_DECIMALS: int = 2

# ISO 4217 numeric codes. Membership in this table defines a known code.
ISO_4217_NUMERIC_CODES: dict[str, int] = {
    "AED": 784, "AFN": 971, "ALL": 8, "AMD": 51, "ANG": 532,
    "AOA": 973, "ARS": 32, "AUD": 36, "AWG": 533, "AZN": 944,
    "BAM": 977, "BBD": 52, "BDT": 50, "BGN": 975, "BHD": 48,
    "BIF": 108, "BMD": 60, "BND": 96, "BOB": 68, "BOV": 984,
    "BRL": 986, "BSD": 44, "BTN": 64, "BWP": 72, "BYN": 933,
    "BZD": 84, "CAD": 124, "CDF": 976, "CHE": 947, "CHF": 756,
    "CHW": 948, "CLF": 990, "CLP": 152, "CNY": 156, "COP": 170,
    "COU": 970, "CRC": 188, "CUC": 931, "CUP": 192, "CVE": 132,
    "CZK": 203, "DJF": 262, "DKK": 208, "DOP": 214, "DZD": 12,
    "EGP": 818, "ERN": 232, "ETB": 230, "EUR": 978, "FJD": 242,
    "FKP": 238, "GBP": 826, "GEL": 981, "GHS": 936, "GIP": 292,
    "GMD": 270, "GNF": 324, "GTQ": 320, "GYD": 328, "HKD": 344,
    "HNL": 340, "HRK": 191, "HTG": 332, "HUF": 348, "IDR": 360,
    "ILS": 376, "INR": 356, "IQD": 368, "IRR": 364, "ISK": 352,
    "JMD": 388, "JOD": 400, "JPY": 392, "KES": 404, "KGS": 417,
    "KHR": 116, "KMF": 174, "KPW": 408, "KRW": 410, "KWD": 414,
    "KYD": 136, "KZT": 398, "LAK": 418, "LBP": 422, "LKR": 144,
    "LRD": 430, "LSL": 426, "LYD": 434, "MAD": 504, "MDL": 498,
    "MGA": 969, "MKD": 807, "MMK": 104, "MNT": 496, "MOP": 446,
    "MRU": 929, "MUR": 480, "MVR": 462, "MWK": 454, "MXN": 484,
    "MXV": 979, "MYR": 458, "MZN": 943, "NAD": 516, "NGN": 566,
    "NIO": 558, "NOK": 578, "NPR": 524, "NZD": 554, "OMR": 512,
    "PAB": 590, "PEN": 604, "PGK": 598, "PHP": 608, "PKR": 586,
    "PLN": 985, "PYG": 600, "QAR": 634, "RON": 946, "RSD": 941,
    "RUB": 643, "RWF": 646, "SAR": 682, "SBD": 90, "SCR": 690,
    "SDG": 938, "SEK": 752, "SGD": 702, "SHP": 654, "SLE": 925,
    "SLL": 694, "SOS": 706, "SRD": 968, "SSP": 728, "STN": 930,
    "SVC": 222, "SYP": 760, "SZL": 748, "THB": 764, "TJS": 972,
    "TMT": 934, "TND": 788, "TOP": 776, "TRY": 949, "TTD": 780,
    "TWD": 901, "TZS": 834, "UAH": 980, "UGX": 800, "USD": 840,
    "USN": 997, "UYI": 940, "UYU": 858, "UYW": 927, "UZS": 860,
    "VED": 926, "VES": 928, "VND": 704, "VUV": 548, "WST": 882,
    "XAF": 950, "XAG": 961, "XAU": 959, "XBA": 955, "XBB": 956,
    "XBC": 957, "XBD": 958, "XCD": 951, "XCG": 532, "XDR": 960,
    "XOF": 952, "XPD": 964, "XPF": 953, "XPT": 962, "XSU": 994,
    "XTS": 963, "XUA": 965, "XXX": 999, "YER": 886, "ZAR": 710,
    "ZMW": 967, "ZWG": 924, "ZWL": 932,
}

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached CLDR locale parses and per-locale lookups.
# CLDR ships roughly 1000 locale identifiers; a full table build touches each
# of them once per currency, so the bound covers a complete run.
MAX_LOCALE_CACHE_SIZE: int = 2048

# ============================================================================
# WIRE FORMAT
# ============================================================================

# Every integer on the wire is a big-endian signed 32-bit value.
INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

# Trace keys, one per emitted field. Each symbol variant is keyed by its symbol.
TRACE_RECORD_COUNT: str = "recordCount"
TRACE_CURRENCY_CODE: str = "currencyCode"
TRACE_DEFAULT_FRACTION_DIGITS: str = "defaultFractionDigits"
TRACE_NUMERIC_CODE: str = "numericCode"
TRACE_DEFAULT_SYMBOL: str = "defaultSymbol"
TRACE_LOCALES: str = "locales"
TRACE_SYMBOL_COUNT: str = "symbols"

# ============================================================================
# SELECTION
# ============================================================================

# Select every CLDR locale.
DEFAULT_LOCALE_FILTER: str = "*"

# The no-currency code is always carried so runtimes have a fallback.
DEFAULT_CURRENCY_FILTER: str = "XXX"

DEFAULT_COMMENT_PREFIX: str = "// "
