"""Raw record ingestion for hero catalog exports.

Handles the quirks of the spreadsheet export the catalog is built from:
- A header line that is always skipped, whatever it contains
- Records split on the raw delimiter with no quote handling
- Short records (fewer than 20 fields) that are dropped, not fatal
- Windows line endings and trailing extra columns
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

import pandas as pd

from src.catalog.config import CATALOG_COLUMNS, FIELD_DELIMITER, MIN_RECORD_FIELDS

logger = logging.getLogger(__name__)


class SourceUnavailableError(Exception):
    """Raised when a data source or destination cannot be read or written."""


class CatalogSourceError(SourceUnavailableError):
    """Raised when the catalog file is missing or unreadable."""


class CatalogIngester:
    """Turns raw catalog lines into a DataFrame of unparsed string fields.

    The returned DataFrame has exactly the ``CATALOG_COLUMNS`` columns, one
    row per accepted record, every value still a string. Type coercion is
    left to :class:`~src.catalog.cleaning.CatalogCleaner`.
    """

    def __init__(self, delimiter: str = FIELD_DELIMITER):
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter

    def read_lines(self, path: Path) -> List[str]:
        """Read every line of *path*.

        Raises:
            CatalogSourceError: if the file is missing, unreadable, or not
                valid UTF-8.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8-sig") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogSourceError(f"Cannot read catalog file {path}: {e}") from e

        logger.info("Read %d lines from %s", len(lines), path.name)
        return lines

    def split_records(self, lines: Iterable[str]) -> Tuple[pd.DataFrame, int]:
        """Split raw lines into positional fields.

        The first line is the header and is skipped unconditionally.

        Returns:
            ``(records_df, skipped)`` where *skipped* is the number of
            records dropped for having fewer than ``MIN_RECORD_FIELDS``
            fields.
        """
        rows: List[List[str]] = []
        skipped = 0

        for line_number, line in enumerate(lines, start=1):
            if line_number == 1:
                continue

            fields = line.rstrip("\r\n").split(self.delimiter)
            if len(fields) < MIN_RECORD_FIELDS:
                skipped += 1
                logger.debug(
                    "Skipping line %d: %d fields (need %d)",
                    line_number, len(fields), MIN_RECORD_FIELDS,
                )
                continue

            rows.append(fields[:MIN_RECORD_FIELDS])

        records = pd.DataFrame(rows, columns=CATALOG_COLUMNS, dtype=object)

        if skipped:
            logger.warning("Skipped %d malformed catalog record(s)", skipped)
        logger.info("Split %d catalog records", len(records))
        return records, skipped
