"""Team builder - orchestrates hero selection against a loaded catalog."""

import logging
from pathlib import Path
from typing import List

from src.catalog.entity_catalog import Entity, EntityCatalog, LoadResult
from src.team_manager.config import MAX_TEAM_SIZE
from src.team_manager.selection_rules import (
    SelectionError,
    SelectionLimitExceeded,
    SelectionRules,
)
from src.team_manager.team import Team

logger = logging.getLogger(__name__)


class TeamBuilder:
    """Main controller for team selection.

    Coordinates between EntityCatalog (hero lookup), SelectionRules
    (validation) and Team (state mutation). A rejected selection never
    changes the team.
    """

    def __init__(self, catalog: EntityCatalog, max_size: int = MAX_TEAM_SIZE):
        self.catalog = catalog
        self.rules = SelectionRules()
        self.team = Team(max_size=max_size)

    def load_catalog_file(self, path: Path) -> LoadResult:
        """Load a catalog file and drop the current selection.

        The selection is kept if the load fails.
        """
        result = self.catalog.load_file(path)
        self.team.clear()
        return result

    def select(self, entity_id: int) -> Entity:
        """Validate and add a hero to the team.

        Returns:
            The selected entity.

        Raises:
            SelectionLimitExceeded: If the team is already full.
            SelectionError: If the hero is unknown, an opponent, or
                already selected.
        """
        try:
            self.rules.check_limit(self.team)
        except SelectionLimitExceeded:
            logger.warning(
                "Selection of %s rejected: team full (%d/%d)",
                entity_id, self.team.size, self.team.max_size,
            )
            raise

        entity = self.catalog.get_entity(entity_id)
        if entity is None:
            raise SelectionError(f"Character {entity_id} not found in loaded data")

        is_valid, error_msg = self.rules.validate_selection(self.team, entity)
        if not is_valid:
            logger.warning("Invalid selection attempted: %s", error_msg)
            raise SelectionError(error_msg)

        self.team.add_member(entity)
        logger.info(
            "Selected %s (%s, Lvl %d, %d PWR) -> team %d/%d",
            entity.name,
            entity.entity_type,
            entity.level,
            entity.power,
            self.team.size,
            self.team.max_size,
        )
        return entity

    def deselect(self, entity_id: int) -> bool:
        """Remove a hero from the team.

        Returns:
            True if the hero was on the team, False otherwise.
        """
        removed = self.team.remove_member(entity_id)
        if removed is None:
            return False
        logger.info("Deselected %s -> team %d/%d", removed.name, self.team.size, self.team.max_size)
        return True

    def clear(self):
        """Drop every selected hero."""
        self.team.clear()

    def available_entities(self) -> List[Entity]:
        """Roster heroes not yet on the team, in catalog order."""
        return [e for e in self.catalog.roster if not self.team.contains(e.entity_id)]

    @property
    def members(self) -> List[Entity]:
        return list(self.team.members)
