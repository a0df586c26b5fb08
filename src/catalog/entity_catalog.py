"""Entity catalog - single owner of the hero roster loaded from a data file."""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from src.catalog.cleaning import CatalogCleaner
from src.catalog.config import CATALOG_COLUMNS, FIELD_DELIMITER
from src.catalog.ingestion import CatalogIngester

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entity:
    """A combatant record with the stats from one catalog line."""

    entity_id: int
    is_opponent: bool
    name: str
    entity_type: str
    role: str
    faction: str
    troop: str
    troop_count: int
    attack: float
    health: float
    attack_range: float
    attack_interval: float
    critical_rating: float
    accuracy: float
    dodge: float
    dps: float
    movement_speed: float
    level: int
    star: int
    power: int

    @classmethod
    def from_row(cls, row: pd.Series) -> "Entity":
        """Build an entity from a cleaned catalog row."""
        return cls(
            entity_id=int(row["entity_id"]),
            is_opponent=bool(row["is_opponent"]),
            name=str(row["name"]),
            entity_type=str(row["entity_type"]),
            role=str(row["role"]),
            faction=str(row["faction"]),
            troop=str(row["troop"]),
            troop_count=int(row["troop_count"]),
            attack=float(row["attack"]),
            health=float(row["health"]),
            attack_range=float(row["attack_range"]),
            attack_interval=float(row["attack_interval"]),
            critical_rating=float(row["critical_rating"]),
            accuracy=float(row["accuracy"]),
            dodge=float(row["dodge"]),
            dps=float(row["dps"]),
            movement_speed=float(row["movement_speed"]),
            level=int(row["level"]),
            star=int(row["star"]),
            power=int(row["power"]),
        )


@dataclass
class LoadResult:
    """Outcome of a catalog load, including data-quality counters."""

    roster: List[Entity] = field(default_factory=list)
    skipped_records: int = 0  # fewer than 20 fields
    defaulted_fields: int = 0  # numeric fields replaced by 0 / 0.0
    excluded_opponents: int = 0  # opponent-flagged records left out of the roster

    @property
    def has_warnings(self) -> bool:
        return bool(self.skipped_records or self.defaulted_fields)


class EntityCatalog:
    """Holds the selectable roster of non-opponent entities.

    The roster is replaced only when a load succeeds; a failed load leaves
    whatever was loaded before (or nothing, for a fresh catalog).
    """

    def __init__(self, delimiter: str = FIELD_DELIMITER):
        self.ingester = CatalogIngester(delimiter)
        self.cleaner = CatalogCleaner()
        self._roster: List[Entity] = []
        self._by_id: Dict[int, Entity] = {}
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, lines: Iterable[str]) -> LoadResult:
        """Parse catalog lines and replace the roster.

        Args:
            lines: Raw delimited lines; the first one is a header.

        Returns:
            :class:`LoadResult` with the new roster and skip/default counts.
        """
        records, skipped = self.ingester.split_records(lines)
        cleaned, defaulted = self.cleaner.clean_records(records)

        entities = [Entity.from_row(row) for _, row in cleaned.iterrows()]
        roster = [e for e in entities if not e.is_opponent]

        result = LoadResult(
            roster=roster,
            skipped_records=skipped,
            defaulted_fields=defaulted,
            excluded_opponents=len(entities) - len(roster),
        )

        self._roster = list(roster)
        self._by_id = {}
        for entity in roster:
            if entity.entity_id in self._by_id:
                logger.warning(
                    "Duplicate entity id %d (%s); lookups return the first record",
                    entity.entity_id, entity.name,
                )
                continue
            self._by_id[entity.entity_id] = entity
        self._loaded = True

        logger.info(
            "Loaded %d heroes (%d opponents excluded, %d records skipped, "
            "%d fields defaulted)",
            len(roster), result.excluded_opponents, skipped, defaulted,
        )
        return result

    def load_file(self, path: Path) -> LoadResult:
        """Read and load a catalog file.

        Raises:
            CatalogSourceError: if the file cannot be read. The current
                roster is left unchanged.
        """
        lines = self.ingester.read_lines(Path(path))
        return self.load(lines)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def is_loaded(self) -> bool:
        """Whether a load has succeeded on this catalog."""
        return self._loaded

    @property
    def roster(self) -> List[Entity]:
        """Selectable (non-opponent) entities in file order."""
        return list(self._roster)

    def get_entity(self, entity_id: int) -> Optional[Entity]:
        """Look up a roster entity by id."""
        return self._by_id.get(entity_id)

    def to_dataframe(self) -> pd.DataFrame:
        """Roster as a DataFrame, one row per entity."""
        return pd.DataFrame([asdict(e) for e in self._roster], columns=CATALOG_COLUMNS)

    def __len__(self) -> int:
        return len(self._roster)
