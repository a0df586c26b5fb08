"""Report export - write simulation results as a delimited text report."""

import csv
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from src.catalog.entity_catalog import Entity
from src.catalog.ingestion import SourceUnavailableError
from src.reporting.config import (
    DEFAULT_REPORT_NAME,
    HEADER_CORNER_LABEL,
    REPORT_DELIMITER,
    RESULTS_DIR,
    TEAM_SECTION_LABEL,
    WIN_RATE_ROW_LABEL,
)
from src.simulation_engine.models import OpponentConfiguration, WinRateMatrix

logger = logging.getLogger(__name__)


class ReportExportError(SourceUnavailableError):
    """Raised when the report destination cannot be written."""


class ReportExporter:
    """Serializes a win-rate matrix plus team/opponent details.

    Layout::

        Team vs Enemy Setup,"Setup #1 (Level: 1, Stars: 1, Difficulty: 1)",...
        Win Rate (%),12.3,...

        Team Composition:
        Name,Level: 1,Stars: 1,Power: 100,Type: Tank,Role: Front

    With the default comma delimiter the setup headers are written
    quoted as shown. Any other cell containing the delimiter, a double
    quote or a line break is quoted the same way so the header and
    win-rate columns line up.
    """

    def __init__(self, delimiter: str = REPORT_DELIMITER):
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def export(
        self,
        team: Sequence[Entity],
        opponent_configs: List[OpponentConfiguration],
        matrix: WinRateMatrix,
        sink: TextIO,
    ):
        """Write the report to *sink* (anything with ``write(str)``)."""
        if len(opponent_configs) != len(matrix.win_rates):
            raise ValueError(
                f"Matrix has {len(matrix.win_rates)} column(s) but "
                f"{len(opponent_configs)} opponent setup(s) were given"
            )

        writer = csv.writer(
            sink,
            delimiter=self.delimiter,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator="\n",
        )

        writer.writerow(
            [HEADER_CORNER_LABEL]
            + [self._setup_header(cfg) for cfg in opponent_configs]
        )
        writer.writerow(
            [WIN_RATE_ROW_LABEL] + [f"{rate:.1f}" for rate in matrix.win_rates]
        )
        writer.writerow([])
        writer.writerow([TEAM_SECTION_LABEL])
        for member in team:
            writer.writerow(self._member_row(member))

    def export_to_file(
        self,
        team: Sequence[Entity],
        opponent_configs: List[OpponentConfiguration],
        matrix: WinRateMatrix,
        path: Optional[Path] = None,
    ) -> Path:
        """Write the report to *path* atomically.

        The report is written to a temporary file beside *path* and moved
        into place, so a failure never leaves a partial report.

        Args:
            path: Destination file. Defaults to
                ``data/results/TeamBattleSimulationResults.csv``.

        Returns:
            Path to the written report.

        Raises:
            ReportExportError: If the destination cannot be written.
        """
        path = Path(path) if path is not None else RESULTS_DIR / DEFAULT_REPORT_NAME

        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                self.export(team, opponent_configs, matrix, tmp)
            os.replace(tmp_name, path)
        except OSError as e:
            raise ReportExportError(f"Failed to export results to {path}: {e}") from e
        finally:
            # Only left behind when the move did not happen
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.info(
            "Exported results for %d setup(s) and %d hero(es) to %s",
            len(opponent_configs), len(team), path,
        )
        return path

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _setup_header(config: OpponentConfiguration) -> str:
        return (
            f"Setup #{config.setup_id} (Level: {config.level}, "
            f"Stars: {config.stars}, Difficulty: {config.difficulty:g})"
        )

    @staticmethod
    def _member_row(member: Entity) -> List[str]:
        return [
            member.name,
            f"Level: {member.level}",
            f"Stars: {member.star}",
            f"Power: {member.power}",
            f"Type: {member.entity_type}",
            f"Role: {member.role}",
        ]
