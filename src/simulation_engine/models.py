"""Data models for the simulation engine."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from src.simulation_engine.config import (
    DEFAULT_ADP,
    REACH_DEVIATION,
    TRACKED_TREND_POSITIONS,
    TREND_WINDOW_SIZE,
)


class TrendDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class PickClassification(str, Enum):
    """How an observed pick relates to the candidate's ADP and the market."""

    MAJOR_REACH = "major_reach"
    REACH = "reach"
    VALUE = "value"
    TREND_FOLLOW = "trend_follow"
    STANDARD = "standard"

    @property
    def is_reach(self) -> bool:
        return self in (PickClassification.MAJOR_REACH, PickClassification.REACH)


@dataclass(frozen=True)
class DraftCandidate:
    """A draft-eligible player. Read-only for the duration of a simulation."""

    player_id: str
    name: str
    position: str
    team: str = ""
    projection: Optional[float] = None
    adp: Optional[float] = None
    age: Optional[int] = None
    injury_risk: Optional[float] = None  # 0-1, None when unknown
    recent_form: float = 0.0  # -1 (cold) to 1 (hot)

    @property
    def effective_adp(self) -> float:
        """ADP with missing values pushed to the back of the board."""
        return self.adp if self.adp is not None else DEFAULT_ADP


@dataclass
class Tendencies:
    """Seven independent behavioural scalars, each in [0, 1]."""

    reach_tendency: float
    value_focus: float
    position_balance: float
    risk_tolerance: float
    needs_focus: float
    recency_bias: float
    trend_following: float

    def copy(self) -> "Tendencies":
        return replace(self)

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class PersonalityProfile:
    """Named drafter archetype. Shared by reference, never mutated."""

    personality_id: str
    name: str
    description: str
    tendencies: Tendencies
    position_priorities: Dict[str, float]
    draft_strategy: str
    adaptability: float

    def position_priority(self, position: str) -> float:
        return self.position_priorities.get(position, 1.0)


@dataclass
class PredictedBehavior:
    next_position_likelihood: Dict[str, float]
    reach_probability: float
    average_pick_time: float
    panic_threshold: float


@dataclass(frozen=True)
class AdaptationEvent:
    """One entry of an opponent model's adaptation log."""

    round: int
    trigger: PickClassification
    adjustment: Dict[str, float]
    confidence: float
    adapted: bool


@dataclass(frozen=True)
class Team:
    """Snapshot of a league team as seen by the engine."""

    team_id: int
    name: str = ""
    roster: Tuple[DraftCandidate, ...] = ()

    def position_count(self, position: str) -> int:
        return sum(1 for candidate in self.roster if candidate.position == position)


@dataclass(frozen=True)
class PickRecord:
    """A completed pick. Draft history is an append-only list of these."""

    pick_number: int
    team_id: int
    candidate: DraftCandidate
    timestamp: str
    reasoning: str
    confidence: float
    adp_deviation: float  # pick_number - adp
    was_reach: bool
    strategy_alignment: float
    elapsed_seconds: Optional[float] = None

    @classmethod
    def create(
        cls,
        pick_number: int,
        team_id: int,
        candidate: DraftCandidate,
        reasoning: str = "",
        confidence: float = 0.0,
        strategy_alignment: float = 0.0,
        elapsed_seconds: Optional[float] = None,
    ) -> "PickRecord":
        adp_deviation = pick_number - candidate.effective_adp
        return cls(
            pick_number=pick_number,
            team_id=team_id,
            candidate=candidate,
            timestamp=datetime.now().isoformat(),
            reasoning=reasoning,
            confidence=confidence,
            adp_deviation=adp_deviation,
            was_reach=adp_deviation > REACH_DEVIATION,
            strategy_alignment=strategy_alignment,
            elapsed_seconds=elapsed_seconds,
        )


@dataclass(frozen=True)
class MarketTrend:
    position: str
    direction: TrendDirection
    magnitude: float
    confidence: float
    time_window: int
    caused_by: Tuple[str, ...] = ()


@dataclass
class PickRecommendation:
    """Ranked suggestion returned by predictions and the strategy advisor."""

    candidate: DraftCandidate
    reasoning: List[str]
    confidence: float
    risk: float
    value: float
    strategic_fit: float
    market_timing: float
    alternatives: List[DraftCandidate] = field(default_factory=list)

    @property
    def score(self) -> float:
        return self.confidence * self.value * self.strategic_fit


@dataclass(frozen=True)
class DraftContext:
    """Per-pick view of the simulation. Rebuilt before every pick."""

    current_round: int
    current_pick: int
    available_players: Tuple[DraftCandidate, ...]
    recent_picks: Tuple[PickRecord, ...] = ()
    position_runs: Dict[str, int] = field(default_factory=dict)
    market_trends: Tuple[MarketTrend, ...] = ()
    time_remaining: float = 0.0

    @classmethod
    def build(
        cls,
        current_round: int,
        current_pick: int,
        available_players: Sequence[DraftCandidate],
        draft_history: Sequence[PickRecord] = (),
        market_trends: Sequence[MarketTrend] = (),
        time_remaining: float = 0.0,
        recent_window: int = 2 * TREND_WINDOW_SIZE,
    ) -> "DraftContext":
        """Build a context from the full draft history.

        Keeps the trailing *recent_window* picks and derives the position
        run counters from them.
        """
        recent = tuple(draft_history[-recent_window:]) if recent_window else ()
        return cls(
            current_round=current_round,
            current_pick=current_pick,
            available_players=tuple(available_players),
            recent_picks=recent,
            position_runs=calculate_position_runs(recent),
            market_trends=tuple(market_trends),
            time_remaining=time_remaining,
        )

    def position_run(self, position: str) -> int:
        return self.position_runs.get(position, 0)

    def adp_delta(self, candidate: DraftCandidate) -> float:
        """Picks until the candidate's ADP; positive means he is falling."""
        return candidate.effective_adp - self.current_pick


def calculate_position_runs(picks: Sequence[PickRecord]) -> Dict[str, int]:
    """Length of the unbroken streak at each tracked position.

    Only the trailing ``TREND_WINDOW_SIZE`` picks are examined, walking back
    from the most recent pick until a different position breaks the streak.
    """
    window = list(picks[-TREND_WINDOW_SIZE:])
    runs: Dict[str, int] = {}
    for position in TRACKED_TREND_POSITIONS:
        count = 0
        for pick in reversed(window):
            if pick.candidate.position != position:
                break
            count += 1
        runs[position] = count
    return runs
