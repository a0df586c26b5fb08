"""Team data model - the ordered hero selection sent into a simulation."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from src.catalog.entity_catalog import Entity
from src.team_manager.config import MAX_TEAM_SIZE


@dataclass
class Team:
    """Ordered selection of distinct heroes."""

    members: List[Entity] = field(default_factory=list)
    max_size: int = MAX_TEAM_SIZE

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.max_size

    def contains(self, entity_id: int) -> bool:
        """Whether a hero with *entity_id* is already selected."""
        return self.find(entity_id) is not None

    def find(self, entity_id: int) -> Optional[Entity]:
        for member in self.members:
            if member.entity_id == entity_id:
                return member
        return None

    def add_member(self, entity: Entity):
        """Append *entity*; callers validate first."""
        self.members.append(entity)

    def remove_member(self, entity_id: int) -> Optional[Entity]:
        """Remove and return the member with *entity_id*, if present."""
        member = self.find(entity_id)
        if member is not None:
            self.members.remove(member)
        return member

    def clear(self):
        self.members.clear()

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.members)
