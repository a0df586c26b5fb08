"""Single-trial outcome resolution.

Turns two strengths into a bounded win probability and draws one
win/loss from an injected randomness source, so runs can be replayed
with a seeded or scripted source.
"""

import logging
import math
import random
from typing import Optional, Protocol

from src.simulation_engine.config import MAX_WIN_PROBABILITY, MIN_WIN_PROBABILITY

logger = logging.getLogger(__name__)


class RandomSourceError(Exception):
    """Raised when the randomness source fails or returns an invalid draw."""


class RandomSource(Protocol):
    """Anything that can draw a uniform float in ``[0, 1)``."""

    def uniform01(self) -> float:
        ...


class SeededRandomSource:
    """``random.Random``-backed source; the same seed replays the same draws."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def uniform01(self) -> float:
        return self._rng.random()


def win_probability(team_strength: float, opponent_strength: float) -> float:
    """Team's chance to win one trial.

    Formula::

        p = clamp(team / (team + opponent), 0.1, 0.9)

    When both strengths are zero the ratio is undefined and the floor
    probability is used.
    """
    total = team_strength + opponent_strength
    if total == 0:
        return MIN_WIN_PROBABILITY

    ratio = team_strength / total
    if math.isnan(ratio):
        return MIN_WIN_PROBABILITY
    return min(max(ratio, MIN_WIN_PROBABILITY), MAX_WIN_PROBABILITY)


class OutcomeSampler:
    """Resolves trials against a single randomness source."""

    def __init__(self, rng: RandomSource):
        self.rng = rng

    def draw(self) -> float:
        """Draw one value from the source, validating the ``[0, 1)`` contract."""
        try:
            value = self.rng.uniform01()
        except Exception as e:
            raise RandomSourceError(f"Randomness source failed: {e}") from e

        if not isinstance(value, (int, float)) or not 0.0 <= value < 1.0:
            raise RandomSourceError(
                f"Randomness source returned {value!r}, expected a float in [0, 1)"
            )
        return value

    def resolve(self, team_strength: float, opponent_strength: float) -> bool:
        """Return True when the team wins this trial."""
        p = win_probability(team_strength, opponent_strength)
        return self.draw() < p
