from src.team_manager.selection_rules import (
    SelectionError,
    SelectionLimitExceeded,
    SelectionRules,
)
from src.team_manager.team import Team
from src.team_manager.team_builder import TeamBuilder

__all__ = [
    "SelectionError",
    "SelectionLimitExceeded",
    "SelectionRules",
    "Team",
    "TeamBuilder",
]
