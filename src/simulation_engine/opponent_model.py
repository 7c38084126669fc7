"""Adaptive behaviour model for a single computer-controlled team.

Each opposing team gets one :class:`OpponentModel` at the start of a
simulation. The model predicts the team's next selection by scoring every
available candidate through a chain of personality-driven multipliers, then
adapts its tendencies as the team's real picks come in.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from src.simulation_engine.candidate_metrics import (
    clamp,
    market_timing,
    pick_value,
    player_risk,
    position_likelihood,
    recent_performance_signal,
)
from src.simulation_engine.config import (
    ADAPTATION_RATE,
    ALTERNATIVES_COUNT,
    CONFIDENCE_LEARNING_RATE,
    HIGH_RISK_THRESHOLD,
    INITIAL_CONFIDENCE,
    MAJOR_REACH_DEVIATION,
    MAX_CONFIDENCE,
    OBSERVED_REACH_DEVIATION,
    OBSERVED_VALUE_DEVIATION,
    PANIC_THRESHOLD,
    PICK_TIME_RANGE,
    PICK_TIME_SMOOTHING,
    REACH_DEVIATION,
    REACH_PENALTY_WEIGHT,
    RECENCY_BIAS_WEIGHT,
    RISK_PENALTY_WEIGHT,
    SELECTION_DECAY,
    SHORTLIST_BASE_SIZE,
    SIGNIFICANT_DEVIATION,
    TREND_FOLLOW_RUN,
    TREND_FOLLOWING_WEIGHT,
    TREND_RUN_THRESHOLD,
    VALUE_DEVIATION,
    VALUE_FOCUS_WEIGHT,
)
from src.simulation_engine.models import (
    AdaptationEvent,
    DraftCandidate,
    DraftContext,
    PersonalityProfile,
    PickClassification,
    PickRecommendation,
    PickRecord,
    PredictedBehavior,
    Team,
    Tendencies,
)
from src.simulation_engine.random_source import RandomSource

logger = logging.getLogger(__name__)

ScoredCandidate = Tuple[DraftCandidate, float]


def shortlist_size(confidence: float) -> int:
    """Number of top-scored candidates considered for the final pick.

    Less confident models widen the shortlist and make more surprising picks.
    """
    return max(1, math.ceil(SHORTLIST_BASE_SIZE * (1 + (1 - confidence))))


def weighted_random_index(size: int, rng: RandomSource) -> int:
    """Pick an index in ``range(size)`` with weight ``SELECTION_DECAY ** i``."""
    if size <= 1:
        return 0
    weights = [SELECTION_DECAY ** i for i in range(size)]
    remaining = rng.random() * sum(weights)
    for index, weight in enumerate(weights):
        remaining -= weight
        if remaining <= 0:
            return index
    return 0


def classify_pick(pick: PickRecord, context: DraftContext) -> PickClassification:
    if pick.adp_deviation > MAJOR_REACH_DEVIATION:
        return PickClassification.MAJOR_REACH
    if pick.adp_deviation > REACH_DEVIATION:
        return PickClassification.REACH
    if pick.adp_deviation < VALUE_DEVIATION:
        return PickClassification.VALUE
    if context.position_run(pick.candidate.position) >= TREND_FOLLOW_RUN:
        return PickClassification.TREND_FOLLOW
    return PickClassification.STANDARD


@dataclass
class OpponentModel:
    """Personality plus adaptive state for one opposing team."""

    team_id: int
    personality: PersonalityProfile
    adapted_tendencies: Tendencies
    predicted_behavior: PredictedBehavior
    confidence: float = INITIAL_CONFIDENCE
    adaptation_history: List[AdaptationEvent] = field(default_factory=list)
    roster_positions: List[str] = field(default_factory=list)
    last_prediction: Optional[PickRecommendation] = None

    @classmethod
    def create(
        cls,
        team: Team,
        personality: PersonalityProfile,
        rng: RandomSource,
    ) -> "OpponentModel":
        """Build a fresh model from the team's current roster."""
        roster_positions = [candidate.position for candidate in team.roster]
        tendencies = personality.tendencies.copy()
        predicted = PredictedBehavior(
            next_position_likelihood=position_likelihood(
                personality.position_priorities, roster_positions
            ),
            reach_probability=tendencies.reach_tendency,
            average_pick_time=rng.uniform(*PICK_TIME_RANGE),
            panic_threshold=PANIC_THRESHOLD,
        )
        return cls(
            team_id=team.team_id,
            personality=personality,
            adapted_tendencies=tendencies,
            predicted_behavior=predicted,
            roster_positions=roster_positions,
        )

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------

    def score_candidate(self, candidate: DraftCandidate, context: DraftContext) -> float:
        """Personality-weighted desirability of *candidate* at this pick.

        Formula (applied in order)::

            score = projection
                  * position priority
                  * (1 + value_focus * 0.2)       if falling past ADP
                    (1 - reach_tendency * 0.3)    otherwise
                  * (1 + trend_following * 0.15)  if position run >= 2
                  * (1 + recency_bias * recent_form * 0.1)
                  * (1 - (1 - risk_tolerance) * 0.2)  if risk > 0.5
        """
        tendencies = self.adapted_tendencies

        score = candidate.projection or 0.0
        score *= self.personality.position_priority(candidate.position)

        if context.adp_delta(candidate) > 0:
            score *= 1 + tendencies.value_focus * VALUE_FOCUS_WEIGHT
        else:
            score *= 1 - tendencies.reach_tendency * REACH_PENALTY_WEIGHT

        if context.position_run(candidate.position) >= TREND_RUN_THRESHOLD:
            score *= 1 + tendencies.trend_following * TREND_FOLLOWING_WEIGHT

        score *= 1 + (
            tendencies.recency_bias
            * recent_performance_signal(candidate)
            * RECENCY_BIAS_WEIGHT
        )

        if player_risk(candidate) > HIGH_RISK_THRESHOLD:
            score *= 1 - (1 - tendencies.risk_tolerance) * RISK_PENALTY_WEIGHT

        return score

    def rank_candidates(self, context: DraftContext) -> List[ScoredCandidate]:
        """All available candidates with scores, best first (stable)."""
        scored = [
            (candidate, self.score_candidate(candidate, context))
            for candidate in context.available_players
        ]
        return sorted(scored, key=lambda item: item[1], reverse=True)

    def predict_pick(
        self,
        context: DraftContext,
        rng: RandomSource,
    ) -> Optional[PickRecommendation]:
        """Predict this team's next selection, or None if the pool is empty.

        The prediction is kept until the next :meth:`update` scores it
        against the pick the team actually makes.
        """
        recommendation = self._draw_from_shortlist(context, rng)
        self.last_prediction = recommendation
        if recommendation is not None:
            logger.debug(
                "Team %s (%s) predicted to take %s (%s)",
                self.team_id,
                self.personality.name,
                recommendation.candidate.name,
                recommendation.candidate.position,
            )
        return recommendation

    def select_pick(
        self,
        context: DraftContext,
        rng: RandomSource,
    ) -> Optional[PickRecommendation]:
        """Make this team's actual selection with its own draw.

        Uses the same shortlist as :meth:`predict_pick` but leaves the stored
        prediction alone, so the two can disagree.
        """
        return self._draw_from_shortlist(context, rng)

    def _draw_from_shortlist(
        self,
        context: DraftContext,
        rng: RandomSource,
    ) -> Optional[PickRecommendation]:
        ranked = self.rank_candidates(context)
        if not ranked:
            return None

        shortlist = [candidate for candidate, _ in ranked[: shortlist_size(self.confidence)]]
        selected = shortlist[weighted_random_index(len(shortlist), rng)]
        # Runners-up behind the top-ranked entry, whichever entry was drawn
        alternatives = shortlist[1 : 1 + ALTERNATIVES_COUNT]

        return PickRecommendation(
            candidate=selected,
            reasoning=self.explain(selected, context),
            confidence=self.confidence,
            risk=player_risk(selected),
            value=pick_value(selected, context),
            strategic_fit=min(100.0, self.personality.position_priority(selected.position) * 50),
            market_timing=market_timing(selected, context),
            alternatives=alternatives,
        )

    def explain(self, candidate: DraftCandidate, context: DraftContext) -> List[str]:
        reasoning = [f"{self.personality.name} personality favors this type of pick"]

        adp_delta = context.adp_delta(candidate)
        if adp_delta > 5:
            reasoning.append(
                f"Good value - {candidate.name} typically goes "
                f"{adp_delta:.1f} picks later"
            )

        if self.personality.position_priority(candidate.position) > 1.2:
            reasoning.append(
                f"High priority position ({candidate.position}) for this drafter"
            )

        run = context.position_run(candidate.position)
        if run >= TREND_RUN_THRESHOLD and self.adapted_tendencies.trend_following > 0.5:
            reasoning.append(f"Following {candidate.position} run ({run} recent picks)")

        return reasoning

    # ------------------------------------------------------------------
    # Adaptation
    # ------------------------------------------------------------------

    def update(self, pick: PickRecord, context: DraftContext, rng: RandomSource) -> AdaptationEvent:
        """Learn from a pick this team just made.

        Every call appends an :class:`AdaptationEvent`; tendencies only move
        when the pick deviates significantly from the personality's expected
        reach or value behaviour.
        """
        classification = classify_pick(pick, context)
        expected = self.personality.tendencies

        observed_reach = 1.0 if pick.adp_deviation > OBSERVED_REACH_DEVIATION else 0.0
        observed_value = 1.0 if pick.adp_deviation < OBSERVED_VALUE_DEVIATION else 0.0
        reach_deviation = abs(observed_reach - expected.reach_tendency)
        value_deviation = abs(observed_value - expected.value_focus)

        adjustment: Dict[str, float] = {}
        strength = self.personality.adaptability * ADAPTATION_RATE
        if reach_deviation > SIGNIFICANT_DEVIATION:
            step = strength if classification.is_reach else -strength
            adjustment["reach_tendency"] = self._nudge("reach_tendency", step)
        if value_deviation > SIGNIFICANT_DEVIATION:
            step = strength if classification is PickClassification.VALUE else -strength
            adjustment["value_focus"] = self._nudge("value_focus", step)

        accuracy = self._prediction_accuracy(pick, rng)
        self.confidence = clamp(
            self.confidence + (accuracy - 0.5) * CONFIDENCE_LEARNING_RATE,
            0.0,
            MAX_CONFIDENCE,
        )

        event = AdaptationEvent(
            round=context.current_round,
            trigger=classification,
            adjustment=adjustment,
            confidence=self.confidence,
            adapted=bool(adjustment),
        )
        self.adaptation_history.append(event)

        self.roster_positions.append(pick.candidate.position)
        self._refresh_predicted_behavior(pick)
        self.last_prediction = None

        if adjustment:
            logger.info(
                "Team %s adapted after %s pick of %s: %s (confidence %.2f)",
                self.team_id,
                classification.value,
                pick.candidate.name,
                adjustment,
                self.confidence,
            )
        return event

    def _nudge(self, tendency: str, step: float) -> float:
        """Shift one adapted tendency, clamped to [0, 1]; returns the delta."""
        old = getattr(self.adapted_tendencies, tendency)
        new = clamp(old + step)
        setattr(self.adapted_tendencies, tendency, new)
        return new - old

    def _prediction_accuracy(self, pick: PickRecord, rng: RandomSource) -> float:
        """Score how well the last prediction matched the actual pick (0-1).

        Without a stored prediction there is nothing to compare against, so
        a synthetic estimate based on current confidence is used instead.
        """
        prediction = self.last_prediction
        if prediction is None:
            noise = (rng.random() - 0.5) * 0.4
            return clamp(0.5 + self.confidence * 0.3 + noise)

        actual_id = pick.candidate.player_id
        if prediction.candidate.player_id == actual_id:
            return 1.0
        if any(alt.player_id == actual_id for alt in prediction.alternatives):
            return 0.75
        if prediction.candidate.position == pick.candidate.position:
            return 0.5
        return 0.25

    def _refresh_predicted_behavior(self, pick: PickRecord) -> None:
        average_pick_time = self.predicted_behavior.average_pick_time
        if pick.elapsed_seconds is not None:
            average_pick_time = (
                average_pick_time * (1 - PICK_TIME_SMOOTHING)
                + pick.elapsed_seconds * PICK_TIME_SMOOTHING
            )

        self.predicted_behavior = PredictedBehavior(
            next_position_likelihood=position_likelihood(
                self.personality.position_priorities, self.roster_positions
            ),
            reach_probability=self.adapted_tendencies.reach_tendency,
            average_pick_time=average_pick_time,
            panic_threshold=self.predicted_behavior.panic_threshold,
        )
