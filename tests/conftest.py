"""Shared fixtures for the battle balance test suite."""

import pytest

from src.catalog.config import SAMPLE_CATALOG_FILE
from src.catalog.entity_catalog import Entity, EntityCatalog

SAMPLE_CATALOG = SAMPLE_CATALOG_FILE

HEADER = (
    "Id,IsEnemy,Name,Type,Role,Faction,Troop,TroopCount,ATK,HP,Range,ATKTime,"
    "CritRating,Accuracy,Dodge,DPS,MovementSpeed,Level,Star,Power"
)


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

def make_record(entity_id=1, is_enemy="FALSE", name=None, level=1, star=1,
                power=100, **overrides):
    """Build one 20-field catalog line."""
    fields = {
        "id": str(entity_id),
        "is_enemy": is_enemy,
        "name": name or f"Hero {entity_id}",
        "type": "Warrior",
        "role": "Tank",
        "faction": "Northguard",
        "troop": "Shieldbearers",
        "troop_count": "10",
        "atk": "100",
        "hp": "1000",
        "range": "1.5",
        "atk_time": "1.2",
        "crit": "5",
        "accuracy": "90",
        "dodge": "10",
        "dps": "83.3",
        "move": "3.5",
        "level": str(level),
        "star": str(star),
        "power": str(power),
    }
    fields.update(overrides)
    return ",".join(fields.values())


def make_entity(entity_id=1, power=100, level=1, star=1, is_opponent=False,
                name=None, **overrides):
    """Build an Entity directly, bypassing the catalog."""
    values = dict(
        entity_id=entity_id,
        is_opponent=is_opponent,
        name=name or f"Hero {entity_id}",
        entity_type="Warrior",
        role="Tank",
        faction="Northguard",
        troop="Shieldbearers",
        troop_count=10,
        attack=100.0,
        health=1000.0,
        attack_range=1.5,
        attack_interval=1.2,
        critical_rating=5.0,
        accuracy=90.0,
        dodge=10.0,
        dps=83.3,
        movement_speed=3.5,
        level=level,
        star=star,
        power=power,
    )
    values.update(overrides)
    return Entity(**values)


class ScriptedRandomSource:
    """Replays a fixed sequence of draws, cycling when exhausted."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def uniform01(self):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def loaded_catalog():
    """Catalog with five plain heroes (ids 1-5)."""
    catalog = EntityCatalog()
    lines = [HEADER] + [make_record(i, power=100 * i) for i in range(1, 6)]
    catalog.load(lines)
    return catalog


# ------------------------------------------------------------------
# Data-reading fixtures
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def sample_catalog():
    """Catalog loaded from the bundled sample file."""
    catalog = EntityCatalog()
    catalog.load_file(SAMPLE_CATALOG)
    return catalog
