"""Type coercion for raw catalog records.

Applies the catalog's safe-parse policy:
- Opponent flag is true only for "true", "yes" or "1" (any case)
- Unparsable numbers become 0 / 0.0 instead of failing the load
- Integer fields must hold whole numbers within +/- 2**53; counts and
  ranks must be >= 0
- Every substitution is counted so callers can report data quality
"""

import logging
import math
from typing import Tuple

import pandas as pd

from src.catalog.config import (
    FLOAT_COLUMNS,
    INT_COLUMNS,
    MAX_INT_FIELD_VALUE,
    NON_NEGATIVE_COLUMNS,
    TRUTHY_VALUES,
)

logger = logging.getLogger(__name__)


class CatalogCleaner:
    """Converts string records from the ingester into typed columns."""

    # ------------------------------------------------------------------
    # Scalar helpers
    # ------------------------------------------------------------------
    @staticmethod
    def parse_opponent_flag(value) -> bool:
        """Parse the opponent flag.

        Examples:
            "TRUE" -> True
            " yes" -> True
            "1"    -> True
            "no"   -> False
            ""     -> False
        """
        if value is None or pd.isna(value):
            return False
        return str(value).strip().lower() in TRUTHY_VALUES

    # ------------------------------------------------------------------
    # Column helpers
    # ------------------------------------------------------------------
    @staticmethod
    def coerce_int_column(
        series: pd.Series, non_negative: bool = False
    ) -> Tuple[pd.Series, int]:
        """Coerce a string column to ints, defaulting bad values to 0.

        Returns:
            ``(ints, defaulted)`` where *defaulted* counts substituted cells.
        """
        if series.empty:
            return series.astype("int64"), 0

        numeric = pd.to_numeric(series.astype(object).str.strip(), errors="coerce")
        numeric = numeric.astype("float64")
        valid = (numeric.abs() <= MAX_INT_FIELD_VALUE) & (numeric == numeric.round())
        if non_negative:
            valid &= numeric >= 0

        defaulted = int((~valid).sum())
        ints = numeric.where(valid, 0).astype("int64")
        return ints, defaulted

    @staticmethod
    def coerce_float_column(series: pd.Series) -> Tuple[pd.Series, int]:
        """Coerce a string column to finite floats, defaulting bad values to 0.0."""
        if series.empty:
            return series.astype("float64"), 0

        numeric = pd.to_numeric(series.astype(object).str.strip(), errors="coerce")
        numeric = numeric.astype("float64")
        valid = numeric.abs() < math.inf

        defaulted = int((~valid).sum())
        floats = numeric.where(valid, 0.0).astype("float64")
        return floats, defaulted

    # ------------------------------------------------------------------
    # DataFrame-level cleaning
    # ------------------------------------------------------------------
    def clean_records(self, records: pd.DataFrame) -> Tuple[pd.DataFrame, int]:
        """Clean a DataFrame produced by ``CatalogIngester.split_records``.

        String columns are kept as-is; ``is_opponent`` becomes bool and
        every numeric column is coerced under the safe-parse policy.

        Returns:
            ``(cleaned_df, defaulted_fields)``
        """
        out = records.copy()
        defaulted_total = 0

        out["is_opponent"] = out["is_opponent"].apply(self.parse_opponent_flag).astype(bool)

        for col in INT_COLUMNS:
            out[col], defaulted = self.coerce_int_column(
                out[col], non_negative=col in NON_NEGATIVE_COLUMNS
            )
            defaulted_total += defaulted

        for col in FLOAT_COLUMNS:
            out[col], defaulted = self.coerce_float_column(out[col])
            defaulted_total += defaulted

        if defaulted_total:
            logger.warning(
                "Defaulted %d unparsable numeric field(s) to zero", defaulted_total
            )
        logger.info("Cleaned %d catalog records", len(out))
        return out, defaulted_total
