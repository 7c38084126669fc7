# Default roster configuration
DEFAULT_ROSTER_SLOTS = {
    "QB": 1,
    "RB": 2,
    "WR": 2,
    "TE": 1,
    "FLEX": 1,
    "DST": 1,
    "K": 1,
    "BENCH": 6,
}

FLEX_ELIGIBLE_POSITIONS = {"RB", "WR", "TE"}

# Default league settings
DEFAULT_LEAGUE_SIZE = 12
DEFAULT_DRAFT_TYPE = "snake"
MIN_LEAGUE_SIZE = 2
MAX_LEAGUE_SIZE = 20

# Seconds on the clock for each pick
PICK_CLOCK_SECONDS = 90.0
