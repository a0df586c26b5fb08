"""Run a complete battle balance simulation from a hero catalog file.

Usage:
    python -m src.simulation_engine.run_simulation [CATALOG] --team ID[,ID...] [options]

Examples:
    python -m src.simulation_engine.run_simulation --team 1,2,3
    python -m src.simulation_engine.run_simulation heroes.csv --team 4 --battles 5000 \\
        --setups 5 --level 2 --seed 42 --output results.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from src.catalog.config import SAMPLE_CATALOG_FILE
from src.catalog.entity_catalog import EntityCatalog
from src.logging_config import setup_logging
from src.reporting.report_exporter import ReportExporter
from src.reporting.summary import format_results_table
from src.simulation_engine.batch_simulator import BatchSimulator
from src.simulation_engine.models import SimulationSettings, WinRateMatrix
from src.simulation_engine.opponents import configs_from_settings
from src.simulation_engine.outcome import OutcomeSampler, SeededRandomSource
from src.team_manager.team_builder import TeamBuilder

logger = logging.getLogger(__name__)


class LoggingProgress:
    """Progress sink that logs once per *step* of completion."""

    def __init__(self, step: float = 0.1):
        self.step = step
        self._next_mark = step
        self.last_fraction = 0.0

    def __call__(self, fraction: float, label: str):
        self.last_fraction = fraction
        if fraction >= self._next_mark:
            logger.info("Progress %3.0f%% - %s", fraction * 100, label)
            while self._next_mark <= fraction:
                self._next_mark += self.step


def parse_team_ids(raw: str) -> List[int]:
    """Parse ``"1,2,3"`` into ``[1, 2, 3]``."""
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Team must be comma-separated ids: {raw!r}") from e


def run_simulation(
    catalog_path: Path,
    team_ids: List[int],
    settings: Optional[SimulationSettings] = None,
    seed: Optional[int] = None,
    output_path: Optional[Path] = None,
) -> Tuple[WinRateMatrix, Optional[Path]]:
    """Load heroes, build the team, simulate, and optionally export.

    Args:
        catalog_path: Hero catalog file (header line plus 20-field records).
        team_ids: Entity ids to select, in order (at most 5).
        settings: Trial count and default opponent parameters.
        seed: Seed for the randomness source; None draws a fresh seed.
        output_path: Where to write the report; None skips export.

    Returns:
        ``(matrix, report_path)``; *report_path* is None when not exported.

    Raises:
        CatalogSourceError: If the catalog cannot be read.
        SelectionError: If a team id is invalid or the team is too large.
        PreconditionNotMet: If the run cannot start.
        ReportExportError: If the report cannot be written.
    """
    settings = settings or SimulationSettings()

    # 1. Load catalog
    logger.info("Step 1/4: Loading hero catalog %s...", catalog_path)
    catalog = EntityCatalog()
    builder = TeamBuilder(catalog)
    load_result = builder.load_catalog_file(catalog_path)
    if load_result.has_warnings:
        logger.warning(
            "Catalog data quality: %d record(s) skipped, %d field(s) defaulted",
            load_result.skipped_records, load_result.defaulted_fields,
        )

    # 2. Build team and opponents
    logger.info("Step 2/4: Selecting team %s...", team_ids)
    for entity_id in team_ids:
        builder.select(entity_id)
    opponent_configs = configs_from_settings(settings)

    # 3. Simulate
    logger.info("Step 3/4: Running %d battles per setup...", settings.trials_per_matchup)
    sampler = OutcomeSampler(SeededRandomSource(seed))
    simulator = BatchSimulator(catalog, sampler)
    matrix = simulator.run(
        builder.members,
        opponent_configs,
        settings.trials_per_matchup,
        progress=LoggingProgress(),
    )

    print(format_results_table(opponent_configs, matrix))

    # 4. Export
    report_path = None
    if output_path is not None:
        logger.info("Step 4/4: Exporting results...")
        report_path = ReportExporter().export_to_file(
            builder.members, opponent_configs, matrix, output_path
        )
    else:
        logger.info("Step 4/4: No output path given, skipping export")

    return matrix, report_path


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationSettings()
    parser = argparse.ArgumentParser(
        prog="python -m src.simulation_engine.run_simulation",
        description="Estimate team win rates against configurable enemy setups.",
    )
    parser.add_argument("catalog", type=Path, nargs="?", default=SAMPLE_CATALOG_FILE,
                        help="hero catalog CSV file (default: bundled sample)")
    parser.add_argument("--team", type=parse_team_ids, required=True,
                        help="comma-separated entity ids (max 5)")
    parser.add_argument("--battles", type=int, default=defaults.trials_per_matchup,
                        help="battles per enemy setup")
    parser.add_argument("--setups", type=int, default=defaults.opponent_setups,
                        help="number of enemy setups")
    parser.add_argument("--level", type=int, default=defaults.opponent_level)
    parser.add_argument("--skill-level", type=int, default=defaults.opponent_skill_level)
    parser.add_argument("--stars", type=int, default=defaults.opponent_stars)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", type=Path, default=None,
                        help="write the results report to this file")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    settings = SimulationSettings(
        trials_per_matchup=args.battles,
        opponent_setups=args.setups,
        opponent_level=args.level,
        opponent_skill_level=args.skill_level,
        opponent_stars=args.stars,
    )

    try:
        _, report_path = run_simulation(
            args.catalog, args.team, settings, seed=args.seed, output_path=args.output
        )
    except Exception:
        logger.exception("Simulation failed")
        return 1

    if report_path is not None:
        print(f"Results exported: {report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
