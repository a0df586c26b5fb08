"""Tests for the catalog record ingestion module."""

import pytest

from src.catalog.config import CATALOG_COLUMNS
from src.catalog.ingestion import (
    CatalogIngester,
    CatalogSourceError,
    SourceUnavailableError,
)

from conftest import HEADER, SAMPLE_CATALOG, make_record


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def ingester():
    return CatalogIngester()


def _fields(n):
    return ",".join(f"f{i}" for i in range(n))


# ---------------------------------------------------------------------------
# Record splitting
# ---------------------------------------------------------------------------

class TestSplitRecords:
    def test_header_is_always_skipped(self, ingester):
        # A header that happens to look like a valid record is still skipped
        lines = [make_record(99), make_record(1)]
        df, skipped = ingester.split_records(lines)
        assert len(df) == 1
        assert df.iloc[0]["entity_id"] == "1"
        assert skipped == 0

    def test_nineteen_fields_skipped(self, ingester):
        df, skipped = ingester.split_records([HEADER, _fields(19)])
        assert len(df) == 0
        assert skipped == 1

    def test_twenty_fields_accepted(self, ingester):
        df, skipped = ingester.split_records([HEADER, _fields(20)])
        assert len(df) == 1
        assert skipped == 0

    def test_extra_fields_ignored(self, ingester):
        df, _ = ingester.split_records([HEADER, _fields(23)])
        assert list(df.columns) == CATALOG_COLUMNS
        assert df.iloc[0]["power"] == "f19"

    def test_columns_in_positional_order(self, ingester):
        df, _ = ingester.split_records([HEADER, make_record(7, name="Seren", power=2200)])
        row = df.iloc[0]
        assert row["entity_id"] == "7"
        assert row["name"] == "Seren"
        assert row["power"] == "2200"

    def test_values_stay_strings(self, ingester):
        df, _ = ingester.split_records([HEADER, make_record(1)])
        assert all(isinstance(v, str) for v in df.iloc[0])

    def test_windows_line_endings_stripped(self, ingester):
        df, _ = ingester.split_records([HEADER + "\r\n", make_record(1, power=250) + "\r\n"])
        assert df.iloc[0]["power"] == "250"

    def test_blank_lines_count_as_skipped(self, ingester):
        df, skipped = ingester.split_records([HEADER, "", make_record(1), ""])
        assert len(df) == 1
        assert skipped == 2

    def test_no_quote_handling(self, ingester):
        """A quoted name containing a comma shifts the fields like the raw split does."""
        line = make_record(1, name='"Brann, the Bold"')
        df, _ = ingester.split_records([HEADER, line])
        assert df.iloc[0]["name"] == '"Brann'

    def test_empty_input(self, ingester):
        df, skipped = ingester.split_records([])
        assert len(df) == 0
        assert list(df.columns) == CATALOG_COLUMNS
        assert skipped == 0

    def test_header_only(self, ingester):
        df, skipped = ingester.split_records([HEADER])
        assert len(df) == 0
        assert skipped == 0

    def test_custom_delimiter(self):
        ingester = CatalogIngester(delimiter=";")
        line = make_record(3).replace(",", ";")
        df, _ = ingester.split_records([HEADER, line])
        assert df.iloc[0]["entity_id"] == "3"

    def test_multi_character_delimiter_rejected(self):
        with pytest.raises(ValueError):
            CatalogIngester(delimiter=";;")


# ---------------------------------------------------------------------------
# File reading
# ---------------------------------------------------------------------------

class TestReadLines:
    def test_reads_sample_file(self, ingester):
        lines = ingester.read_lines(SAMPLE_CATALOG)
        assert lines[0].startswith("Id,IsEnemy,Name")
        assert len(lines) == 11

    def test_missing_file_raises_source_error(self, ingester, tmp_path):
        with pytest.raises(CatalogSourceError):
            ingester.read_lines(tmp_path / "missing.csv")

    def test_source_error_is_source_unavailable(self, ingester, tmp_path):
        with pytest.raises(SourceUnavailableError) as exc_info:
            ingester.read_lines(tmp_path / "missing.csv")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory_raises_source_error(self, ingester, tmp_path):
        with pytest.raises(CatalogSourceError):
            ingester.read_lines(tmp_path)

    def test_invalid_utf8_raises_source_error(self, ingester, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_bytes(b"\xff\xfe\xfa not text")
        with pytest.raises(CatalogSourceError):
            ingester.read_lines(path)

    def test_bom_is_stripped(self, ingester, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_text("\ufeff" + HEADER + "\n" + make_record(1) + "\n", encoding="utf-8")
        lines = ingester.read_lines(path)
        assert lines[0] == HEADER
