from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
RAW_DATA_DIR = DATA_DIR / "raw"

# Valid base positions
VALID_POSITIONS = {"QB", "RB", "WR", "TE", "K", "DST"}

# Aliases that map to canonical position names
POSITION_ALIASES = {
    "PK": "K",
    "DEF": "DST",
    "D/ST": "DST",
}

# Accepted source headers for each candidate field (first match wins)
COLUMN_ALIASES = {
    "player_id": ["player_id", "ID", "PLAYER ID"],
    "name": ["name", "Player", "PLAYER NAME", "PLAYER"],
    "position": ["position", "Position", "POS"],
    "team": ["team", "Team", "TEAM", "Team_Abbr"],
    "projection": ["projection", "FPTS", "Projection", "PROJ"],
    "adp": ["adp", "ADP", "AVG"],
    "age": ["age", "Age", "AGE"],
    "injury_risk": ["injury_risk", "Injury_Risk", "INJURY RISK"],
    "recent_form": ["recent_form", "Recent_Form", "FORM"],
}

REQUIRED_FIELDS = ("name", "position")

# Rankings export read when no file is given on the command line
DEFAULT_CANDIDATES_FILE = RAW_DATA_DIR / "rankings.csv"
