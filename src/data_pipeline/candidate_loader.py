"""Load draft candidates from rankings/projection CSV exports.

Handles the usual export quirks:
- Position strings with embedded rank (WR12 -> WR) and aliases (DEF -> DST)
- Comma-formatted numbers (e.g., "1,204.5")
- Varying header names between sources
- Blank rows and players without a usable position
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from src.data_pipeline.config import (
    COLUMN_ALIASES,
    POSITION_ALIASES,
    REQUIRED_FIELDS,
    VALID_POSITIONS,
)
from src.simulation_engine.models import DraftCandidate

logger = logging.getLogger(__name__)

# Letters followed by optional digits
_POS_PATTERN = re.compile(r"^([A-Za-z/]+?)(\d+)?$")

_NUMERIC_FIELDS = ("projection", "adp", "age", "injury_risk", "recent_form")


class LoaderError(Exception):
    """Raised when a candidate source cannot be read."""


def _parse_numeric(value):
    """Parse a numeric string that may contain commas (e.g., '1,204.5' -> 1204.5)."""
    if pd.isna(value):
        return float("nan")
    if isinstance(value, (int, float)):
        return float(value)
    s = str(value).replace(",", "").strip().strip('"')
    if s == "":
        return float("nan")
    try:
        return float(s)
    except ValueError:
        return float("nan")


def _optional(value) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def extract_base_position(pos_str) -> Optional[str]:
    """Extract the base position from a rank-embedded string.

    Examples:
        "WR1"  -> "WR"
        "RB23" -> "RB"
        "DEF4" -> "DST"
    """
    if pd.isna(pos_str):
        return None

    m = _POS_PATTERN.match(str(pos_str).strip())
    if not m:
        return None

    letters = m.group(1).upper()
    canonical = POSITION_ALIASES.get(letters, letters)
    return canonical if canonical in VALID_POSITIONS else None


class CandidateLoader:
    """Builds :class:`DraftCandidate` lists from CSV files or DataFrames."""

    def from_csv(self, filepath: Path) -> List[DraftCandidate]:
        filepath = Path(filepath)
        if not filepath.exists():
            raise LoaderError(f"Expected file not found: {filepath}")

        logger.info("Reading candidates: %s", filepath.name)
        df = pd.read_csv(filepath, quotechar='"')
        return self.from_dataframe(df)

    def from_dataframe(self, df: pd.DataFrame) -> List[DraftCandidate]:
        """Convert a raw DataFrame to candidates sorted by ADP.

        Raises:
            LoaderError: If a required column (name, position) is missing.
        """
        normalized = self.normalize(df)
        candidates = [self._row_to_candidate(row) for _, row in normalized.iterrows()]
        logger.info("Loaded %d draft candidates", len(candidates))
        return candidates

    def normalize(self, df: pd.DataFrame) -> pd.DataFrame:
        """Rename, clean and sort a raw DataFrame into canonical columns."""
        columns = self._resolve_columns(df)
        missing = [f for f in REQUIRED_FIELDS if f not in columns]
        if missing:
            raise LoaderError(
                f"Missing required column(s) {missing}; "
                f"found {list(df.columns)}"
            )

        out = pd.DataFrame({field: df[source] for field, source in columns.items()})

        out["name"] = out["name"].astype("string").str.strip('"').str.strip()
        out["position"] = out["position"].map(extract_base_position)

        before = len(out)
        out = out.dropna(subset=["name", "position"])
        out = out[out["name"] != ""]
        dropped = before - len(out)
        if dropped:
            logger.warning("Dropped %d rows without a usable name/position", dropped)

        for field in _NUMERIC_FIELDS:
            if field in out.columns:
                out[field] = out[field].map(_parse_numeric)
            else:
                out[field] = float("nan")

        if "team" not in out.columns:
            out["team"] = ""
        out["team"] = out["team"].fillna("").astype(str).str.strip()

        if "player_id" not in out.columns:
            out["player_id"] = [self._make_player_id(n, p) for n, p in zip(out["name"], out["position"])]
        out["player_id"] = out["player_id"].astype(str)

        # Missing ADP sorts last; original row order breaks ties
        out = out.sort_values("adp", na_position="last", kind="stable")
        return out.reset_index(drop=True)

    @staticmethod
    def _resolve_columns(df: pd.DataFrame) -> Dict[str, str]:
        resolved = {}
        for field, aliases in COLUMN_ALIASES.items():
            for alias in aliases:
                if alias in df.columns:
                    resolved[field] = alias
                    break
        return resolved

    @staticmethod
    def _make_player_id(name: str, position: str) -> str:
        slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
        return f"{slug}-{position.lower()}"

    @staticmethod
    def _row_to_candidate(row: pd.Series) -> DraftCandidate:
        age = _optional(row["age"])
        recent_form = _optional(row["recent_form"])
        return DraftCandidate(
            player_id=row["player_id"],
            name=str(row["name"]),
            position=row["position"],
            team=row["team"],
            projection=_optional(row["projection"]),
            adp=_optional(row["adp"]),
            age=int(age) if age is not None else None,
            injury_risk=_optional(row["injury_risk"]),
            recent_form=recent_form if recent_form is not None else 0.0,
        )
