"""Team selection rule enforcement."""

from typing import Optional, Tuple

from src.catalog.entity_catalog import Entity
from src.team_manager.team import Team


class SelectionError(Exception):
    """Raised when a hero cannot be added to the team."""

    pass


class SelectionLimitExceeded(SelectionError):
    """Raised when adding a hero would grow the team past its size limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"You can select a maximum of {limit} characters")


class SelectionRules:
    """Validates additions to a team."""

    def check_limit(self, team: Team):
        """Raise :class:`SelectionLimitExceeded` if *team* is already full."""
        if team.is_full:
            raise SelectionLimitExceeded(team.max_size)

    def validate_selection(
        self, team: Team, entity: Entity
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if *entity* may join *team* (size limit excluded).

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Opponents never join the selectable team
        if entity.is_opponent:
            return False, f"{entity.name} is an opponent and cannot be selected"

        # Check 2: Members are distinct
        if team.contains(entity.entity_id):
            return False, f"{entity.name} is already on the team"

        return True, None
