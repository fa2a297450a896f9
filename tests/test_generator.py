"""Tests for table generation end to end.

Tests cover:
- generate() with caller-supplied tags and sinks
- generate_table() selecting from CLDR and owning output files
- Sink cleanup on unexpected errors
- GeneratorConfig validation
"""

import io
import re
from pathlib import Path

import pytest

from currencytable.config import GeneratorConfig
from currencytable.decoder import decode
from currencytable.generator import generate, generate_table, summarize
from tests.fakes import german_catalog


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.locale_filter == "*"
        assert config.currency_filter == "XXX"
        assert config.comment_prefix == "// "
        assert config.rank_default_symbol_across_all_locales is False

    def test_immutable(self) -> None:
        config = GeneratorConfig()
        with pytest.raises(AttributeError):
            config.locale_filter = "en*"  # type: ignore[misc]

    def test_blank_locale_filter_rejected(self) -> None:
        with pytest.raises(ValueError, match="locale_filter"):
            GeneratorConfig(locale_filter="  ")

    def test_multiline_prefix_rejected(self) -> None:
        with pytest.raises(ValueError, match="comment_prefix"):
            GeneratorConfig(comment_prefix="#\n")


class TestSummarize:
    def test_format(self) -> None:
        assert summarize(7, "Locale", "de*") == '7 Locale(s) "de*"'


class TestGenerate:
    """Tests for generate() with explicit sinks."""

    def test_tags_canonicalized_and_deduplicated(self) -> None:
        data = io.BytesIO()
        comments = io.StringIO()
        records = generate(
            ["DE-CH", "de_CH", "de-LI", "de", "de-AT"],
            [],
            data,
            comments,
            catalog=german_catalog(),
        )

        assert [record.code for record in records] == ["CHF", "EUR"]
        assert records[0].locales == ("de-CH", "de-LI")
        assert decode(data.getvalue()) == records
        assert comments.getvalue().startswith("// recordCount=2\n")

    def test_prefix_from_config(self) -> None:
        comments = io.StringIO()
        generate(
            ["de-CH"], [], io.BytesIO(), comments,
            catalog=german_catalog(),
            config=GeneratorConfig(comment_prefix="# "),
        )
        assert comments.getvalue().splitlines()[1] == "# currencyCode=CHF"

    def test_empty(self) -> None:
        data = io.BytesIO()
        comments = io.StringIO()
        assert generate([], [], data, comments, catalog=german_catalog()) == ()
        assert data.getvalue() == b"\x00\x00\x00\x00"
        assert comments.getvalue() == "// recordCount=0\n"


class TestGenerateTable:
    """Tests for generate_table() against CLDR."""

    def test_german_locales(self, tmp_path: Path) -> None:
        table = tmp_path / "currency.bin"
        trace = tmp_path / "currency.txt"

        summary = generate_table(
            table, trace, config=GeneratorConfig(locale_filter="de*", currency_filter="XXX")
        )

        assert re.fullmatch(r'\d+ Locale\(s\) "de\*", 1 Currency\(s\) "XXX"', summary)
        records = decode(table.read_bytes())
        codes = [record.code for record in records]
        assert codes == sorted(codes)
        assert {"CHF", "EUR", "XXX"} <= set(codes)

        by_code = {record.code: record for record in records}
        assert by_code["CHF"].locales[:2] == ("de-CH", "de-LI")
        assert "de-DE" in by_code["EUR"].locales
        assert by_code["EUR"].default_symbol == "€"
        assert by_code["XXX"].locales == ()
        assert by_code["XXX"].default_symbol == "XXX"
        assert by_code["XXX"].symbol_variants == ()

        lines = trace.read_text(encoding="utf-8").splitlines()
        assert lines[0] == f"// recordCount={len(records)}"
        assert "// currencyCode=CHF" in lines

    def test_nz_and_no_currency_code(self, tmp_path: Path) -> None:
        table = tmp_path / "nz.bin"
        summary = generate_table(table, config=GeneratorConfig(locale_filter="en-NZ"))

        assert summary == '1 Locale(s) "en-NZ", 1 Currency(s) "XXX"'
        nzd, xxx = decode(table.read_bytes())
        assert (nzd.code, nzd.currency.default_fraction_digits, nzd.currency.numeric_code) == (
            "NZD", 2, 554,
        )
        assert nzd.locales == ("en-NZ",)
        assert nzd.default_symbol == "$"
        assert nzd.symbol_variants == ()
        assert (xxx.code, xxx.currency.default_fraction_digits, xxx.currency.numeric_code) == (
            "XXX", -1, 999,
        )
        assert xxx.default_symbol == "XXX"
        assert xxx.locales == ()
        assert xxx.symbol_variants == ()

    def test_rank_default_symbol_across_all_locales(self, tmp_path: Path) -> None:
        """Ranking over all of CLDR prefers the widely used NZ$."""
        table = tmp_path / "nz.bin"
        generate_table(
            table,
            config=GeneratorConfig(
                locale_filter="en-NZ",
                currency_filter="",
                rank_default_symbol_across_all_locales=True,
            ),
        )

        (nzd,) = decode(table.read_bytes())
        assert nzd.default_symbol == "NZ$"
        assert nzd.symbol_map() == {"$": ("en-NZ",)}

    def test_every_locale_currency_present(self, tmp_path: Path) -> None:
        """The full table has one record per distinct resolvable currency."""
        table = tmp_path / "all.bin"
        generate_table(table, config=GeneratorConfig(currency_filter=""))

        records = decode(table.read_bytes())
        codes = [record.code for record in records]
        assert len(codes) > 25
        assert len(codes) == len(set(codes))
        assert "XXX" not in codes
        for record in records:
            assert record.locales
            assert record.default_symbol
            assert record.currency.numeric_code != 0

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            generate_table(tmp_path / "missing" / "table.bin",
                           config=GeneratorConfig(locale_filter="en-NZ"))

    def test_sinks_closed_on_unexpected_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Both files are closed when a lookup blows up mid-generation."""
        opened: list[io.IOBase] = []
        real_open = Path.open

        def recording_open(self: Path, *args: object, **kwargs: object) -> io.IOBase:
            handle = real_open(self, *args, **kwargs)  # type: ignore[arg-type]
            opened.append(handle)
            return handle

        monkeypatch.setattr(Path, "open", recording_open)
        catalog = german_catalog()
        catalog.explode_on = frozenset({"de-CH"})

        with pytest.raises(RuntimeError, match="exploded"):
            generate_table(
                tmp_path / "table.bin",
                tmp_path / "table.txt",
                config=GeneratorConfig(locale_filter="de-CH"),
                catalog=catalog,
            )

        assert len(opened) == 2
        assert all(handle.closed for handle in opened)
