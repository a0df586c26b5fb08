from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

RESULTS_DIR = PROJECT_ROOT / "data" / "results"
DEFAULT_REPORT_NAME = "TeamBattleSimulationResults.csv"

# Cells holding the delimiter are quoted (RFC 4180 minimal quoting)
REPORT_DELIMITER = ","

# Report labels
HEADER_CORNER_LABEL = "Team vs Enemy Setup"
WIN_RATE_ROW_LABEL = "Win Rate (%)"
TEAM_SECTION_LABEL = "Team Composition:"

# Win-rate bands, checked top down (lower bound in percent, name)
RATING_BANDS = [
    (80.0, "strong"),
    (50.0, "favorable"),
    (30.0, "contested"),
    (0.0, "weak"),
]
