"""Opponent setup creation and per-setup overrides."""

import logging
from dataclasses import fields
from typing import List

from src.simulation_engine.config import (
    BASE_DIFFICULTY,
    DEFAULT_OPPONENT_LEVEL,
    DEFAULT_OPPONENT_SKILL_LEVEL,
    DEFAULT_OPPONENT_STARS,
    DIFFICULTY_STEP,
)
from src.simulation_engine.models import OpponentConfiguration, SimulationSettings

logger = logging.getLogger(__name__)

_OVERRIDABLE_FIELDS = {
    f.name for f in fields(OpponentConfiguration) if f.name != "setup_id"
}


def create_opponent_configs(
    count: int,
    level: int = DEFAULT_OPPONENT_LEVEL,
    skill_level: int = DEFAULT_OPPONENT_SKILL_LEVEL,
    stars: int = DEFAULT_OPPONENT_STARS,
) -> List[OpponentConfiguration]:
    """Create *count* setups sharing the default parameters.

    Setup ids run from 1; difficulty rises by ``DIFFICULTY_STEP`` per
    setup, starting at ``BASE_DIFFICULTY`` (1.0, 1.25, 1.5, ...).
    """
    if count < 0:
        raise ValueError(f"Opponent setup count must be >= 0, got {count}")

    configs = [
        OpponentConfiguration(
            setup_id=i + 1,
            level=level,
            skill_level=skill_level,
            stars=stars,
            difficulty=BASE_DIFFICULTY + i * DIFFICULTY_STEP,
        )
        for i in range(count)
    ]
    logger.info(
        "Created %d opponent setups (level=%d, skill=%d, stars=%d)",
        count, level, skill_level, stars,
    )
    return configs


def configs_from_settings(settings: SimulationSettings) -> List[OpponentConfiguration]:
    """Default opponent setups described by *settings*."""
    return create_opponent_configs(
        settings.opponent_setups,
        level=settings.opponent_level,
        skill_level=settings.opponent_skill_level,
        stars=settings.opponent_stars,
    )


def override_opponent_config(
    configs: List[OpponentConfiguration], setup_id: int, **changes
) -> OpponentConfiguration:
    """Change individual fields of one setup in place.

    Raises:
        KeyError: if no setup has *setup_id*.
        ValueError: if *changes* names a field that cannot be overridden.
    """
    unknown = set(changes) - _OVERRIDABLE_FIELDS
    if unknown:
        raise ValueError(
            f"Cannot override {sorted(unknown)}; "
            f"overridable fields are {sorted(_OVERRIDABLE_FIELDS)}"
        )

    for config in configs:
        if config.setup_id == setup_id:
            for name, value in changes.items():
                setattr(config, name, value)
            logger.debug("Overrode setup #%d: %s", setup_id, changes)
            return config

    raise KeyError(f"No opponent setup with id {setup_id}")
