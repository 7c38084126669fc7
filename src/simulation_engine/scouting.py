"""Opponent scouting summaries built from a team's pick history."""

from dataclasses import dataclass
from typing import Dict, Sequence

from src.simulation_engine.config import (
    AGGRESSIVE_REACH_RATE,
    MODERATE_REACH_RATE,
    OBSERVED_REACH_DEVIATION,
    OBSERVED_VALUE_DEVIATION,
    REACH_DEVIATION,
)
from src.simulation_engine.models import DraftCandidate, PickRecord


@dataclass(frozen=True)
class OpponentScoutingReport:
    team_id: int
    picks_observed: int
    reach_rate: float
    value_rate: float
    risk_profile: str  # "conservative", "moderate" or "aggressive"
    draft_strategy: str
    position_counts: Dict[str, int]


def reach_rate(picks: Sequence[PickRecord]) -> float:
    """Share of picks taken well ahead of the candidate's ADP."""
    reaches = sum(1 for pick in picks if pick.adp_deviation > OBSERVED_REACH_DEVIATION)
    return min(1.0, reaches / max(len(picks), 1))


def value_rate(picks: Sequence[PickRecord]) -> float:
    values = sum(1 for pick in picks if pick.adp_deviation < OBSERVED_VALUE_DEVIATION)
    return min(1.0, values / max(len(picks), 1))


def risk_profile(picks: Sequence[PickRecord]) -> str:
    rate = reach_rate(picks)
    if rate > AGGRESSIVE_REACH_RATE:
        return "aggressive"
    if rate > MODERATE_REACH_RATE:
        return "moderate"
    return "conservative"


def count_positions(
    picks: Sequence[PickRecord], roster: Sequence[DraftCandidate] = ()
) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for candidate in [pick.candidate for pick in picks] + list(roster):
        counts[candidate.position] = counts.get(candidate.position, 0) + 1
    return counts


def infer_draft_strategy(
    picks: Sequence[PickRecord], roster: Sequence[DraftCandidate] = ()
) -> str:
    """Label a team's approach from its RB/WR balance and ADP discipline."""
    counts = count_positions(picks, roster)
    rb_count = counts.get("RB", 0)
    wr_count = counts.get("WR", 0)

    if rb_count > wr_count + 1:
        return "RB Heavy"
    if wr_count > rb_count + 1:
        return "WR Heavy"
    if picks and all(pick.adp_deviation < REACH_DEVIATION for pick in picks):
        return "Value Based"
    return "Balanced"


def build_scouting_report(
    team_id: int,
    picks: Sequence[PickRecord],
    roster: Sequence[DraftCandidate] = (),
) -> OpponentScoutingReport:
    team_picks = [pick for pick in picks if pick.team_id == team_id]
    return OpponentScoutingReport(
        team_id=team_id,
        picks_observed=len(team_picks),
        reach_rate=reach_rate(team_picks),
        value_rate=value_rate(team_picks),
        risk_profile=risk_profile(team_picks),
        draft_strategy=infer_draft_strategy(team_picks, roster),
        position_counts=count_positions(team_picks, roster),
    )
