"""Team and opponent strength model.

A placeholder for real combat rules: each side collapses to one scalar
that the outcome sampler compares.
"""

from typing import Sequence

from src.catalog.entity_catalog import Entity
from src.simulation_engine.config import (
    LEVEL_WEIGHT,
    OPPONENT_BASE_STRENGTH,
    STAR_WEIGHT,
    TEAM_SIZE_BONUS,
    TEAM_SIZE_BONUS_DIVISOR,
)
from src.simulation_engine.models import OpponentConfiguration


class StrengthCalculator:
    """Compute scalar strengths for a team and for an opponent setup.

    The calculator is stateless: weights are fixed at construction and all
    data is passed in via method arguments.
    """

    def __init__(
        self,
        level_weight: float = LEVEL_WEIGHT,
        star_weight: float = STAR_WEIGHT,
        size_bonus: float = TEAM_SIZE_BONUS,
        opponent_base: float = OPPONENT_BASE_STRENGTH,
    ):
        self.level_weight = level_weight
        self.star_weight = star_weight
        self.size_bonus = size_bonus
        self.opponent_base = opponent_base

    def entity_contribution(self, entity: Entity) -> float:
        """Strength one hero adds before the team-size multiplier.

        Formula::

            power * (1 + level_weight * level + star_weight * star)
        """
        return entity.power * (
            1.0 + self.level_weight * entity.level + self.star_weight * entity.star
        )

    def team_size_multiplier(self, team_size: int) -> float:
        """1.0 for a solo hero, rising linearly to ``1 + size_bonus`` at five."""
        if team_size <= 1:
            return 1.0
        return 1.0 + self.size_bonus * (team_size - 1) / TEAM_SIZE_BONUS_DIVISOR

    def team_strength(self, team: Sequence[Entity]) -> float:
        """Summed hero contributions times the team-size multiplier.

        The multiplier is applied once to the total, not per hero.
        """
        base = sum(self.entity_contribution(entity) for entity in team)
        return base * self.team_size_multiplier(len(team))

    def opponent_strength(self, config: OpponentConfiguration) -> float:
        """``opponent_base * level * stars * difficulty``.

        Skill level does not contribute.
        """
        return self.opponent_base * config.level * config.stars * config.difficulty
