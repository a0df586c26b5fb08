from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
SAMPLE_CATALOG_FILE = DATA_DIR / "sample" / "heroes_sample.csv"

# Records are split on the raw delimiter; quoting is not interpreted
FIELD_DELIMITER = ","

# Positional layout of a catalog record (extra trailing fields are ignored)
CATALOG_COLUMNS = [
    "entity_id", "is_opponent", "name", "entity_type", "role",
    "faction", "troop", "troop_count",
    "attack", "health", "attack_range", "attack_interval",
    "critical_rating", "accuracy", "dodge", "dps", "movement_speed",
    "level", "star", "power",
]

MIN_RECORD_FIELDS = len(CATALOG_COLUMNS)  # 20

INT_COLUMNS = ["entity_id", "troop_count", "level", "star", "power"]

FLOAT_COLUMNS = [
    "attack", "health", "attack_range", "attack_interval",
    "critical_rating", "accuracy", "dodge", "dps", "movement_speed",
]

# Counts and ranks that can never be negative
NON_NEGATIVE_COLUMNS = {"troop_count", "level", "star", "power"}

# Opponent-flag values treated as true (compared lower-cased and trimmed)
TRUTHY_VALUES = {"true", "yes", "1"}

# Integer fields larger than this in magnitude are defaulted; float64 holds
# every whole number up to 2**53 exactly and int64 cannot overflow below it
MAX_INT_FIELD_VALUE = 2 ** 53
