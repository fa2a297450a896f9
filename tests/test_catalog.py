"""Tests for the Babel-backed catalog.

Only facts that are stable across CLDR releases are asserted.
"""

import pytest

from currencytable.catalog import (
    BabelCurrencyCatalog,
    _currency_by_code_impl,
    clear_catalog_cache,
    list_currency_codes,
    list_locale_tags,
)
from currencytable.constants import ISO_4217_NUMERIC_CODES, NO_MINOR_UNIT
from currencytable.errors import UnknownCurrencyError, UnsupportedLocaleError
from currencytable.model import Currency

catalog = BabelCurrencyCatalog()


class TestResolveLocaleCurrency:
    """Tests for locale -> currency resolution."""

    @pytest.mark.parametrize(
        ("locale", "expected"),
        [
            ("en-NZ", Currency("NZD", 2, 554)),
            ("en-AU", Currency("AUD", 2, 36)),
            ("de-CH", Currency("CHF", 2, 756)),
            ("de-DE", Currency("EUR", 2, 978)),
            ("ja-JP", Currency("JPY", 0, 392)),
            ("ar-KW", Currency("KWD", 3, 414)),
        ],
    )
    def test_known_locales(self, locale: str, expected: Currency) -> None:
        currency, error = catalog.resolve_locale_currency(locale)
        assert error is None
        assert currency == expected

    def test_language_without_territory(self) -> None:
        """A bare language has no currency."""
        currency, error = catalog.resolve_locale_currency("en")
        assert currency is None
        assert isinstance(error, UnsupportedLocaleError)
        assert error.locale_code == "en"

    def test_unknown_locale(self) -> None:
        currency, error = catalog.resolve_locale_currency("qq-QQ")
        assert currency is None
        assert isinstance(error, UnsupportedLocaleError)

    def test_never_raises_for_garbage(self) -> None:
        currency, error = catalog.resolve_locale_currency("!!")
        assert currency is None
        assert error is not None


class TestResolveSymbol:
    """Tests for (currency, locale) -> symbol."""

    def test_native_symbol(self) -> None:
        nzd, _ = catalog.resolve_currency_by_code("NZD")
        assert nzd is not None
        assert catalog.resolve_symbol(nzd, "en-NZ") == ("$", None)

    def test_euro_sign(self) -> None:
        eur, _ = catalog.resolve_currency_by_code("EUR")
        assert eur is not None
        assert catalog.resolve_symbol(eur, "de-DE") == ("€", None)

    @pytest.mark.parametrize("locale", ["en-NZ", "de-CH", "de", "ja-JP"])
    def test_generic_sign_is_no_symbol(self, locale: str) -> None:
        """CLDR's generic currency sign for XXX is reported as no symbol."""
        xxx, _ = catalog.resolve_currency_by_code("XXX")
        assert xxx is not None
        assert catalog.resolve_symbol(xxx, locale) == ("", None)

    def test_unknown_locale(self) -> None:
        eur, _ = catalog.resolve_currency_by_code("EUR")
        assert eur is not None
        symbol, error = catalog.resolve_symbol(eur, "qq-QQ")
        assert symbol is None
        assert isinstance(error, UnsupportedLocaleError)
        assert error.context.currency_code == "EUR"


class TestResolveCurrencyByCode:
    """Tests for code -> currency."""

    def test_no_currency_code(self) -> None:
        assert catalog.resolve_currency_by_code("XXX") == (Currency("XXX", NO_MINOR_UNIT, 999), None)

    def test_case_and_whitespace_insensitive(self) -> None:
        currency, error = catalog.resolve_currency_by_code(" nzd ")
        assert error is None
        assert currency == Currency("NZD", 2, 554)

    def test_precious_metal(self) -> None:
        currency, _ = catalog.resolve_currency_by_code("XAU")
        assert currency == Currency("XAU", NO_MINOR_UNIT, 959)

    @pytest.mark.parametrize("code", ["QQQ", "US", "EURO", "", "12A"])
    def test_unknown_codes(self, code: str) -> None:
        currency, error = catalog.resolve_currency_by_code(code)
        assert currency is None
        assert isinstance(error, UnknownCurrencyError)

    def test_numeric_codes_unique_except_guilder(self) -> None:
        """Numeric codes identify currencies; only ANG/XCG share one."""
        seen: dict[int, str] = {}
        for code, numeric in ISO_4217_NUMERIC_CODES.items():
            if numeric in seen:
                assert {seen[numeric], code} == {"ANG", "XCG"}
            seen[numeric] = code


class TestEnumeration:
    """Tests for list_locale_tags() and list_currency_codes()."""

    def test_locale_tags_are_bcp47_and_sorted(self) -> None:
        tags = list_locale_tags()
        assert len(tags) > 500
        assert tags == tuple(sorted(tags))
        assert "en-NZ" in tags
        assert all("_" not in tag for tag in tags)

    def test_locale_filter(self) -> None:
        tags = list_locale_tags("de*")
        assert "de" in tags
        assert "de-CH" in tags
        assert all(tag.startswith("de") for tag in tags)

    def test_currency_filter(self) -> None:
        assert list_currency_codes("XXX") == ("XXX",)
        assert list_currency_codes("") == ()
        assert "NZD" in list_currency_codes()

    def test_cache_clear(self, fresh_catalog_cache: None) -> None:
        catalog.resolve_currency_by_code("NZD")
        assert _currency_by_code_impl.cache_info().currsize == 1
        clear_catalog_cache()
        assert _currency_by_code_impl.cache_info().currsize == 0
