"""Console-friendly summaries of a simulation run."""

from typing import List

import pandas as pd

from src.reporting.config import RATING_BANDS
from src.simulation_engine.models import OpponentConfiguration, WinRateMatrix


def rating_band(win_rate: float) -> str:
    """Name the band a win percentage falls in.

    Examples:
        85.0 -> "strong"
        50.0 -> "favorable"
        30.0 -> "contested"
        12.5 -> "weak"
    """
    for lower_bound, name in RATING_BANDS:
        if win_rate >= lower_bound:
            return name
    return RATING_BANDS[-1][1]


def results_frame(
    opponent_configs: List[OpponentConfiguration], matrix: WinRateMatrix
) -> pd.DataFrame:
    """One row per opponent setup with its parameters, win rate and band."""
    rows = []
    for config, rate in zip(opponent_configs, matrix.win_rates):
        rows.append({
            "Setup": config.label,
            "Level": config.level,
            "Skill": config.skill_level,
            "Stars": config.stars,
            "Difficulty": config.difficulty,
            "Win Rate (%)": round(rate, 1),
            "Band": rating_band(rate),
        })
    return pd.DataFrame(rows)


def format_results_table(
    opponent_configs: List[OpponentConfiguration], matrix: WinRateMatrix
) -> str:
    """Plain-text results table for printing."""
    return results_frame(opponent_configs, matrix).to_string(index=False)
