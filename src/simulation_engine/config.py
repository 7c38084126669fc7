# Roster depth each position needs before demand drops to zero
POSITION_MAX = {
    "QB": 2,
    "RB": 4,
    "WR": 5,
    "TE": 2,
    "K": 1,
    "DST": 1,
}

# Positions the market analyzer watches for runs
TRACKED_TREND_POSITIONS = ("QB", "RB", "WR", "TE")

# Market trend detection
TREND_WINDOW_SIZE = 5  # Trailing picks inspected
TREND_MIN_PICKS = 3  # Picks at one position within the window to call a run
TREND_CONFIDENCE = 0.8

# Candidate defaults
DEFAULT_ADP = 999.0  # Stand-in for candidates without an ADP

# Opponent model parameters
INITIAL_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95
CONFIDENCE_LEARNING_RATE = 0.1
SIGNIFICANT_DEVIATION = 0.3
ADAPTATION_RATE = 0.1  # Scaled by personality adaptability
PANIC_THRESHOLD = 0.7
PICK_TIME_RANGE = (30.0, 90.0)  # Seconds
PICK_TIME_SMOOTHING = 0.1

# Shortlist / weighted selection
SHORTLIST_BASE_SIZE = 3
SELECTION_DECAY = 0.7
ALTERNATIVES_COUNT = 3

# Scoring chain weights
VALUE_FOCUS_WEIGHT = 0.2
REACH_PENALTY_WEIGHT = 0.3
TREND_FOLLOWING_WEIGHT = 0.15
RECENCY_BIAS_WEIGHT = 0.1
RISK_PENALTY_WEIGHT = 0.2
TREND_RUN_THRESHOLD = 2  # Run length that triggers trend-following
HIGH_RISK_THRESHOLD = 0.5

# Player risk components
AGE_RISK_STEPS = ((30, 0.2), (32, 0.2))  # (age strictly above, added risk)
INJURY_RISK_WEIGHT = 0.3
POSITION_BASE_RISK = {"RB": 0.1}

# Pick classification thresholds (on pick_number - adp)
MAJOR_REACH_DEVIATION = 15
REACH_DEVIATION = 5
VALUE_DEVIATION = -10
TREND_FOLLOW_RUN = 3
OBSERVED_REACH_DEVIATION = 10
OBSERVED_VALUE_DEVIATION = -5

# Strategy advisor
RECOMMENDATION_POOL_SIZE = 10
EARLY_ROUND_THRESHOLD = 3
EARLY_ROUND_POSITIONS = ("RB", "WR")
HIGH_DEMAND_THRESHOLD = 0.7

# Scouting
AGGRESSIVE_REACH_RATE = 0.3
MODERATE_REACH_RATE = 0.1
