#!/usr/bin/env python3
"""Verify the ISO 4217 tables against Babel CLDR data.

Compares ISO_4217_NUMERIC_CODES and ISO_4217_DECIMAL_DIGITS with what Babel
knows, so a CLDR upgrade that introduces a new territory currency is noticed
before locales start dropping out of generated tables.

Checks:
    1. Structural: Minor-unit entries without a numeric code (internal bug).
    2. Coverage gaps: Current tender currencies of some CLDR territory that
       are missing from ISO_4217_NUMERIC_CODES. Locales of those territories
       are skipped by the catalog (actionable).
    3. Discrepancies: Hardcoded minor units differing from
       babel.numbers.get_currency_precision(). Informational; CLDR reflects
       usage rather than the ISO standard.
    4. Unknown to Babel: Hardcoded codes Babel has no name for. Shown only
       with --verbose.

Exit codes:
    0: No structural errors or coverage gaps.
    1: Structural errors, coverage gaps, or import failures.

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys


def _check_structure(numeric: dict[str, int], digits: dict[str, int]) -> list[str]:
    """Minor-unit entries must name known codes."""
    return [
        f"  {code}: In ISO_4217_DECIMAL_DIGITS but not in ISO_4217_NUMERIC_CODES"
        for code in sorted(digits)
        if code not in numeric
    ]


def _check_coverage_gaps(numeric: dict[str, int]) -> list[str]:
    """Current territory currencies we cannot describe."""
    from babel.core import get_global  # noqa: PLC0415

    missing: dict[str, list[str]] = {}
    for territory, currencies in get_global("territory_currencies").items():
        # Data format: list of (code, start_date, end_date, tender)
        for code, _start, end, tender in currencies:
            if end is None and tender and code not in numeric:
                missing.setdefault(code, []).append(territory)
    return [
        f"  {code}: used by {', '.join(sorted(territories))}"
        for code, territories in sorted(missing.items())
    ]


def _check_discrepancies(
    numeric: dict[str, int],
    digits: dict[str, int],
    default_decimals: int,
    no_minor_unit: int,
) -> list[str]:
    """Compare hardcoded minor units against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for code in sorted(numeric):
        ours = digits.get(code, default_decimals)
        if ours == no_minor_unit:
            continue
        babel_val = get_currency_precision(code)
        if ours != babel_val:
            result.append(f"  {code}: ISO 4217={ours}, Babel CLDR={babel_val}")
    return result


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify ISO 4217 tables against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List hardcoded codes Babel does not know.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run ISO 4217 verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from currencytable.constants import (  # noqa: PLC0415
        ISO_4217_DECIMAL_DIGITS,
        ISO_4217_DEFAULT_DECIMALS,
        ISO_4217_NUMERIC_CODES,
        NO_MINOR_UNIT,
    )

    babel_currencies = list_currencies()

    errors = _check_structure(ISO_4217_NUMERIC_CODES, ISO_4217_DECIMAL_DIGITS)
    gaps = _check_coverage_gaps(ISO_4217_NUMERIC_CODES)
    discrepancies = _check_discrepancies(
        ISO_4217_NUMERIC_CODES, ISO_4217_DECIMAL_DIGITS, ISO_4217_DEFAULT_DECIMALS, NO_MINOR_UNIT,
    )
    unknown = [f"  {code}" for code in sorted(ISO_4217_NUMERIC_CODES)
               if code not in babel_currencies]

    print("ISO 4217 Table Verification")
    print("=" * 50)
    print(f"Hardcoded codes:  {len(ISO_4217_NUMERIC_CODES)}")
    print(f"Babel currencies: {len(babel_currencies)}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Minor-unit entry without a numeric code",
        errors,
    )
    _print_section(
        "[ERROR] Coverage gaps",
        "Territory currency missing from ISO_4217_NUMERIC_CODES; its locales are skipped",
        gaps,
    )
    _print_section(
        "[WARN] ISO 4217 vs Babel discrepancies",
        "Hardcoded ISO 4217 data is authoritative; Babel CLDR may differ",
        discrepancies,
    )
    if args.verbose:
        _print_section("[INFO] Unknown to Babel", "Hardcoded code without CLDR name", unknown)
    elif unknown:
        print(f"[INFO] {len(unknown)} code(s) unknown to Babel. Use --verbose to list.")
        print()

    if errors or gaps:
        print(f"[FAIL] {len(errors)} structural error(s), {len(gaps)} coverage gap(s).")
        print("[EXIT-CODE] 1")
        return 1

    print(f"[PASS] {len(discrepancies)} discrepancy(ies).")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
