"""Pick recommendations for the user's own team."""

import logging
from typing import Dict, List

from src.simulation_engine.candidate_metrics import (
    market_timing,
    pick_value,
    player_risk,
    position_max,
    position_need,
)
from src.simulation_engine.config import (
    EARLY_ROUND_POSITIONS,
    EARLY_ROUND_THRESHOLD,
    HIGH_DEMAND_THRESHOLD,
    RECOMMENDATION_POOL_SIZE,
)
from src.simulation_engine.models import (
    DraftCandidate,
    DraftContext,
    PickRecommendation,
    Team,
)
from src.simulation_engine.opponent_model import OpponentModel

logger = logging.getLogger(__name__)


class StrategyAdvisor:
    """Rank the top of the board for the user's team.

    Only the first ``RECOMMENDATION_POOL_SIZE`` available candidates (in the
    order the context provides them) are evaluated. Each is rated on
    confidence, ADP value and roster fit; the final order is by the product
    of the three.
    """

    def generate_recommendations(
        self,
        user_team: Team,
        context: DraftContext,
        opponent_models: Dict[int, OpponentModel],
    ) -> List[PickRecommendation]:
        pool = context.available_players[:RECOMMENDATION_POOL_SIZE]

        recommendations = []
        for candidate in pool:
            roster_count = user_team.position_count(candidate.position)
            recommendations.append(
                PickRecommendation(
                    candidate=candidate,
                    reasoning=self._reasoning(
                        candidate, roster_count, context, opponent_models
                    ),
                    confidence=self._confidence(candidate, roster_count, context),
                    risk=player_risk(candidate),
                    value=pick_value(candidate, context),
                    strategic_fit=position_need(candidate.position, roster_count) * 100,
                    market_timing=market_timing(candidate, context),
                )
            )

        # sorted() is stable, ties keep board order
        ranked = sorted(recommendations, key=lambda rec: rec.score, reverse=True)
        if ranked:
            logger.debug(
                "Top recommendation for team %s at pick %d: %s (score %.1f)",
                user_team.team_id,
                context.current_pick,
                ranked[0].candidate.name,
                ranked[0].score,
            )
        return ranked

    @staticmethod
    def _confidence(
        candidate: DraftCandidate, roster_count: int, context: DraftContext
    ) -> float:
        # Additive score, intentionally not capped at 1
        confidence = 0.5
        if roster_count == 0:
            confidence += 0.3
        if context.adp_delta(candidate) > 5:
            confidence += 0.2
        if (
            context.current_round <= EARLY_ROUND_THRESHOLD
            and candidate.position in EARLY_ROUND_POSITIONS
        ):
            confidence += 0.2
        return confidence

    def _reasoning(
        self,
        candidate: DraftCandidate,
        roster_count: int,
        context: DraftContext,
        opponent_models: Dict[int, OpponentModel],
    ) -> List[str]:
        reasoning = []

        if roster_count < position_max(candidate.position) / 2:
            reasoning.append(f"Addresses critical {candidate.position} need")

        adp_delta = context.adp_delta(candidate)
        if adp_delta > 10:
            reasoning.append(f"Exceptional value - falling {adp_delta:.1f} picks")

        if opponent_demand(candidate.position, opponent_models) > HIGH_DEMAND_THRESHOLD:
            reasoning.append("High probability other teams target this player")

        return reasoning


def opponent_demand(position: str, opponent_models: Dict[int, OpponentModel]) -> float:
    """Mean likelihood, across opponents, that *position* is drafted next."""
    if not opponent_models:
        return 0.0
    total = sum(
        model.predicted_behavior.next_position_likelihood.get(position, 0.0)
        for model in opponent_models.values()
    )
    return total / len(opponent_models)
