"""Per-candidate metrics shared by the opponent model and strategy advisor.

All helpers are pure functions of a candidate, a roster or a draft context.
"""

from typing import Dict, Iterable

from src.simulation_engine.config import (
    AGE_RISK_STEPS,
    INJURY_RISK_WEIGHT,
    POSITION_BASE_RISK,
    POSITION_MAX,
    TREND_FOLLOW_RUN,
)
from src.simulation_engine.models import DraftCandidate, DraftContext


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def position_max(position: str) -> int:
    return POSITION_MAX.get(position, 1)


def position_need(position: str, roster_count: int) -> float:
    """Fraction of the position's roster depth still unfilled (0-1)."""
    maximum = position_max(position)
    return max(0, maximum - roster_count) / maximum


def player_risk(candidate: DraftCandidate) -> float:
    """Risk scalar in [0, 1] built from age, injury signal and position."""
    risk = 0.0
    if candidate.age is not None:
        for age_limit, step in AGE_RISK_STEPS:
            if candidate.age > age_limit:
                risk += step
    if candidate.injury_risk is not None:
        risk += clamp(candidate.injury_risk) * INJURY_RISK_WEIGHT
    risk += POSITION_BASE_RISK.get(candidate.position, 0.0)
    return clamp(risk)


def recent_performance_signal(candidate: DraftCandidate) -> float:
    """Volatility proxy in [-1, 1]; 0 when the candidate carries no signal."""
    return clamp(candidate.recent_form, -1.0, 1.0)


def pick_value(candidate: DraftCandidate, context: DraftContext) -> float:
    """ADP value on a 0-100 scale (50 means taken right at ADP)."""
    return clamp(50 + context.adp_delta(candidate) * 2, 0.0, 100.0)


def market_timing(candidate: DraftCandidate, context: DraftContext) -> float:
    run = context.position_run(candidate.position)
    if run >= TREND_FOLLOW_RUN:
        return 90.0
    if run == 0:
        return 60.0
    return 75.0


def position_likelihood(
    position_priorities: Dict[str, float],
    roster_positions: Iterable[str],
) -> Dict[str, float]:
    """Normalised probability of each position being drafted next.

    Weight per position is ``priority * need``. Returns an empty mapping
    when every weight is zero.
    """
    counts: Dict[str, int] = {}
    for position in roster_positions:
        counts[position] = counts.get(position, 0) + 1

    weights = {
        position: priority * position_need(position, counts.get(position, 0))
        for position, priority in position_priorities.items()
    }
    total = sum(weights.values())
    if total <= 0:
        return {}
    return {position: weight / total for position, weight in weights.items()}
