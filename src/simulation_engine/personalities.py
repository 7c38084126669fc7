"""Catalog of computer drafter personalities."""

from typing import Dict, Tuple

from src.simulation_engine.models import PersonalityProfile, Tendencies

PERSONALITY_CATALOG: Tuple[PersonalityProfile, ...] = (
    PersonalityProfile(
        personality_id="value-hunter",
        name="Value Hunter",
        description="Focuses on ADP value and finding steals",
        tendencies=Tendencies(
            reach_tendency=0.2,
            value_focus=0.9,
            position_balance=0.7,
            risk_tolerance=0.6,
            needs_focus=0.4,
            recency_bias=0.3,
            trend_following=0.4,
        ),
        position_priorities={"RB": 1.2, "WR": 1.1, "QB": 0.8, "TE": 0.9, "K": 0.5, "DST": 0.5},
        draft_strategy="Value-based with opportunistic picks",
        adaptability=0.8,
    ),
    PersonalityProfile(
        personality_id="zero-rb",
        name="Zero RB Advocate",
        description="Avoids early RBs, focuses on WR/QB",
        tendencies=Tendencies(
            reach_tendency=0.6,
            value_focus=0.5,
            position_balance=0.3,
            risk_tolerance=0.8,
            needs_focus=0.9,
            recency_bias=0.4,
            trend_following=0.2,
        ),
        position_priorities={"RB": 0.4, "WR": 1.5, "QB": 1.3, "TE": 1.1, "K": 0.6, "DST": 0.6},
        draft_strategy="Zero RB with early QB/WR focus",
        adaptability=0.5,
    ),
    PersonalityProfile(
        personality_id="robust-rb",
        name="Robust RB",
        description="Prioritizes RB depth and reliability",
        tendencies=Tendencies(
            reach_tendency=0.4,
            value_focus=0.6,
            position_balance=0.4,
            risk_tolerance=0.3,
            needs_focus=0.8,
            recency_bias=0.2,
            trend_following=0.6,
        ),
        position_priorities={"RB": 1.6, "WR": 0.8, "QB": 0.7, "TE": 0.8, "K": 0.5, "DST": 0.5},
        draft_strategy="RB-heavy with handcuff focus",
        adaptability=0.6,
    ),
    PersonalityProfile(
        personality_id="contrarian",
        name="Contrarian",
        description="Goes against popular trends and runs",
        tendencies=Tendencies(
            reach_tendency=0.7,
            value_focus=0.4,
            position_balance=0.6,
            risk_tolerance=0.9,
            needs_focus=0.5,
            recency_bias=0.1,
            trend_following=0.1,
        ),
        position_priorities={"RB": 1.0, "WR": 1.0, "QB": 1.0, "TE": 1.0, "K": 0.8, "DST": 0.8},
        draft_strategy="Anti-trend with contrarian picks",
        adaptability=0.9,
    ),
    PersonalityProfile(
        personality_id="analytics-focused",
        name="Analytics Guru",
        description="Relies heavily on projections and advanced metrics",
        tendencies=Tendencies(
            reach_tendency=0.3,
            value_focus=0.8,
            position_balance=0.8,
            risk_tolerance=0.4,
            needs_focus=0.6,
            recency_bias=0.2,
            trend_following=0.3,
        ),
        position_priorities={"RB": 1.1, "WR": 1.1, "QB": 0.9, "TE": 0.9, "K": 0.4, "DST": 0.4},
        draft_strategy="Projection-based with analytical edge",
        adaptability=0.7,
    ),
    PersonalityProfile(
        personality_id="panic-drafter",
        name="Panic Drafter",
        description="Makes emotional decisions under pressure",
        tendencies=Tendencies(
            reach_tendency=0.8,
            value_focus=0.3,
            position_balance=0.5,
            risk_tolerance=0.7,
            needs_focus=0.9,
            recency_bias=0.8,
            trend_following=0.9,
        ),
        position_priorities={"RB": 1.2, "WR": 1.2, "QB": 1.0, "TE": 1.0, "K": 0.7, "DST": 0.7},
        draft_strategy="Reactive with emotional picks",
        adaptability=0.3,
    ),
)

_BY_ID: Dict[str, PersonalityProfile] = {p.personality_id: p for p in PERSONALITY_CATALOG}


def get_personality(personality_id: str) -> PersonalityProfile:
    """Look up a catalog personality by id.

    Raises:
        KeyError: If no personality has that id.
    """
    try:
        return _BY_ID[personality_id]
    except KeyError:
        raise KeyError(
            f"Unknown personality {personality_id!r}. "
            f"Must be one of: {sorted(_BY_ID)}"
        ) from None
