# Strength model weights
LEVEL_WEIGHT = 0.05  # per hero level
STAR_WEIGHT = 0.10  # per hero star
TEAM_SIZE_BONUS = 0.8  # extra strength at a full team, scaled by (size - 1) / 4
TEAM_SIZE_BONUS_DIVISOR = 4.0

OPPONENT_BASE_STRENGTH = 1000.0

# Win probability is clamped so no matchup is a guaranteed win or loss
MIN_WIN_PROBABILITY = 0.1
MAX_WIN_PROBABILITY = 0.9

# Batch defaults
DEFAULT_TRIALS_PER_MATCHUP = 1000
DEFAULT_OPPONENT_SETUPS = 3

# Default opponent parameters
DEFAULT_OPPONENT_LEVEL = 1
DEFAULT_OPPONENT_SKILL_LEVEL = 1
DEFAULT_OPPONENT_STARS = 1
BASE_DIFFICULTY = 1.0
DIFFICULTY_STEP = 0.25  # added per setup index
