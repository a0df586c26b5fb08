"""Batch simulator - runs many trials per matchup and aggregates win rates."""

import logging
from typing import Callable, List, Optional, Sequence

from src.catalog.entity_catalog import Entity, EntityCatalog
from src.simulation_engine.models import OpponentConfiguration, WinRateMatrix
from src.simulation_engine.outcome import OutcomeSampler
from src.simulation_engine.strength import StrengthCalculator

logger = logging.getLogger(__name__)

ProgressSink = Callable[[float, str], None]

COMPLETE_LABEL = "Simulation complete"


class SimulationError(Exception):
    """Base class for errors raised by a simulation run."""


class PreconditionNotMet(SimulationError):
    """Raised before any trial runs when the inputs cannot be simulated."""


class CatalogNotLoadedError(PreconditionNotMet):
    """Raised when no hero data has been loaded."""


class EmptyTeamError(PreconditionNotMet):
    """Raised when the team has no members."""


class NoOpponentConfigsError(PreconditionNotMet):
    """Raised when there are no opponent setups to simulate against."""


class InvalidTrialCountError(PreconditionNotMet):
    """Raised when fewer than one trial per matchup is requested."""


class SimulationCancelled(SimulationError):
    """Raised when the caller stops the run between matchups."""


class BatchSimulator:
    """Runs the selected team against every opponent setup.

    Coordinates StrengthCalculator (scalar strengths) and OutcomeSampler
    (one win/loss per trial) and owns the WinRateMatrix for one run.
    Matchups run in list order; a fresh matrix is returned by every run.
    """

    def __init__(
        self,
        catalog: EntityCatalog,
        sampler: OutcomeSampler,
        strength: Optional[StrengthCalculator] = None,
    ):
        self.catalog = catalog
        self.sampler = sampler
        self.strength = strength or StrengthCalculator()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        team: Sequence[Entity],
        opponent_configs: List[OpponentConfiguration],
        trials_per_matchup: int,
        progress: Optional[ProgressSink] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> WinRateMatrix:
        """Simulate *trials_per_matchup* battles against each setup.

        Args:
            team: Heroes fighting together (1-5 entities).
            opponent_configs: Setups to fight, one matrix column each.
            trials_per_matchup: Independent trials per setup.
            progress: Called after every trial with the fraction of all
                trials done so far and a label naming the current matchup.
            should_stop: Checked before each matchup; returning True
                abandons the run.

        Returns:
            :class:`WinRateMatrix` of win percentages, one per setup.

        Raises:
            PreconditionNotMet: If the catalog is not loaded, the team is
                empty, no setups were given, or *trials_per_matchup* < 1.
            SimulationCancelled: If *should_stop* returned True.
            RandomSourceError: If the randomness source fails.
        """
        self._check_preconditions(team, opponent_configs, trials_per_matchup)

        total_setups = len(opponent_configs)
        total_trials = total_setups * trials_per_matchup
        matrix = WinRateMatrix.allocate(opponent_configs, trials_per_matchup)

        logger.info(
            "Simulating team of %d against %d setup(s), %d battles each",
            len(team), total_setups, trials_per_matchup,
        )

        for setup_idx, config in enumerate(opponent_configs):
            if should_stop is not None and should_stop():
                logger.info(
                    "Simulation cancelled before setup %d/%d",
                    setup_idx + 1, total_setups,
                )
                raise SimulationCancelled(
                    f"Cancelled after {setup_idx} of {total_setups} matchups"
                )

            wins = 0
            for trial in range(trials_per_matchup):
                if self.simulate_battle(team, config):
                    wins += 1

                if progress is not None:
                    fraction = (setup_idx * trials_per_matchup + trial) / total_trials
                    progress(
                        fraction,
                        f"Team vs Enemy Setup {setup_idx + 1}/{total_setups}, "
                        f"Battle {trial + 1}/{trials_per_matchup}",
                    )

            rate = matrix.set_win_rate(setup_idx, wins)
            logger.debug(
                "Setup #%d: %d/%d wins (%.1f%%)",
                config.setup_id, wins, trials_per_matchup, rate,
            )

        if progress is not None:
            progress(1.0, COMPLETE_LABEL)

        logger.info(
            "Simulation complete: %s",
            ", ".join(
                f"#{sid}={rate:.1f}%"
                for sid, rate in zip(matrix.setup_ids, matrix.win_rates)
            ),
        )
        return matrix

    def simulate_battle(
        self, team: Sequence[Entity], config: OpponentConfiguration
    ) -> bool:
        """Resolve one trial; strengths are recomputed every call."""
        team_strength = self.strength.team_strength(team)
        opponent_strength = self.strength.opponent_strength(config)
        return self.sampler.resolve(team_strength, opponent_strength)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _check_preconditions(
        self,
        team: Sequence[Entity],
        opponent_configs: List[OpponentConfiguration],
        trials_per_matchup: int,
    ):
        if not self.catalog.is_loaded:
            raise CatalogNotLoadedError("Please load character data first")

        if len(team) == 0:
            raise EmptyTeamError("Please select at least one character")

        if len(opponent_configs) == 0:
            raise NoOpponentConfigsError("Please configure at least one enemy setup")

        if trials_per_matchup < 1:
            raise InvalidTrialCountError(
                f"Number of battles must be at least 1 (got {trials_per_matchup})"
            )
