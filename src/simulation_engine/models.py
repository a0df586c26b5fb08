"""Data models for the simulation engine."""

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from src.simulation_engine.config import (
    DEFAULT_OPPONENT_LEVEL,
    DEFAULT_OPPONENT_SETUPS,
    DEFAULT_OPPONENT_SKILL_LEVEL,
    DEFAULT_OPPONENT_STARS,
    DEFAULT_TRIALS_PER_MATCHUP,
)

TEAM_ROW_LABEL = "Selected Team"


@dataclass
class OpponentConfiguration:
    """A parameterized stand-in for an enemy setup.

    Fields stay writable so each setup can be tuned after the batch is
    created; the simulator only reads them.
    """

    setup_id: int  # 1-based
    level: int
    skill_level: int  # stored, not used by the strength model
    stars: int
    difficulty: float

    @property
    def label(self) -> str:
        return f"Setup #{self.setup_id}"


@dataclass(frozen=True)
class SimulationSettings:
    """Parameters for one simulation run, fixed once the run starts."""

    trials_per_matchup: int = DEFAULT_TRIALS_PER_MATCHUP
    opponent_setups: int = DEFAULT_OPPONENT_SETUPS
    opponent_level: int = DEFAULT_OPPONENT_LEVEL
    opponent_skill_level: int = DEFAULT_OPPONENT_SKILL_LEVEL
    opponent_stars: int = DEFAULT_OPPONENT_STARS


@dataclass
class WinRateMatrix:
    """Win percentages of the selected team against each opponent setup.

    A single row (the team) by one column per opponent configuration, in
    the order the configurations were simulated.
    """

    setup_ids: List[int]
    trials_per_matchup: int
    win_rates: List[float] = field(default_factory=list)

    @classmethod
    def allocate(
        cls, opponent_configs: List[OpponentConfiguration], trials_per_matchup: int
    ) -> "WinRateMatrix":
        """Create a zero-filled matrix sized for *opponent_configs*."""
        return cls(
            setup_ids=[cfg.setup_id for cfg in opponent_configs],
            trials_per_matchup=trials_per_matchup,
            win_rates=[0.0] * len(opponent_configs),
        )

    @property
    def shape(self) -> tuple:
        return (1, len(self.win_rates))

    def set_win_rate(self, column: int, wins: int) -> float:
        """Record *wins* out of ``trials_per_matchup`` as a percentage."""
        rate = 100.0 * wins / self.trials_per_matchup
        self.win_rates[column] = rate
        return rate

    def get_win_rate(self, column: int) -> float:
        return self.win_rates[column]

    def to_dataframe(self) -> pd.DataFrame:
        """One-row DataFrame indexed by team, columns labelled by setup."""
        return pd.DataFrame(
            [self.win_rates],
            index=[TEAM_ROW_LABEL],
            columns=[f"Setup #{setup_id}" for setup_id in self.setup_ids],
        )
