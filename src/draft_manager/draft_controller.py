"""Draft controller - runs mock-draft picks through the simulation engine."""

import dataclasses
import logging
from typing import Dict, List, Optional

from src.draft_manager.config import PICK_CLOCK_SECONDS
from src.draft_manager.draft_rules import DraftRules, ValidationError
from src.draft_manager.draft_state import DraftState, TeamRoster
from src.simulation_engine.engine import DraftSimulationEngine
from src.simulation_engine.models import (
    DraftCandidate,
    DraftContext,
    PickRecommendation,
    PickRecord,
)

logger = logging.getLogger(__name__)


class DraftController:
    """Main controller for mock-draft orchestration.

    Coordinates DraftRules (validation and slot assignment), DraftState
    (state mutation) and the DraftSimulationEngine (computer picks, user
    recommendations and opponent adaptation).
    """

    def __init__(
        self,
        draft_state: DraftState,
        engine: Optional[DraftSimulationEngine] = None,
        personality_ids: Optional[Dict[int, str]] = None,
    ):
        self.draft_state = draft_state
        self.rules = DraftRules(draft_state)
        self.engine = engine or DraftSimulationEngine()
        self.engine.initialize_opponent_models(
            [team.to_team() for team in draft_state.teams if not team.is_human],
            personality_ids=personality_ids,
        )

    def build_context(self, team_id: Optional[int] = None) -> DraftContext:
        """Snapshot the draft for the next pick.

        When *team_id* is given the candidate pool is restricted to players
        that team still has roster room for.
        """
        if team_id is None:
            pool = self.draft_state.get_available_candidates()
        else:
            pool = self.rules.eligible_candidates(self.draft_state.get_team(team_id))

        context = DraftContext.build(
            current_round=self.draft_state.current_round,
            current_pick=self.draft_state.current_pick,
            available_players=pool,
            draft_history=self.draft_state.all_picks,
            time_remaining=PICK_CLOCK_SECONDS,
        )
        trends = self.engine.analyze_market_trends(context)
        return dataclasses.replace(context, market_trends=tuple(trends))

    def make_pick(
        self,
        team_id: int,
        player_id: str,
        recommendation: Optional[PickRecommendation] = None,
        elapsed_seconds: Optional[float] = None,
    ) -> PickRecord:
        """Validate and execute a draft pick.

        The resulting record is fed back to the team's opponent model (a
        no-op for the human team).

        Raises:
            ValidationError: If the pick is illegal (wrong turn, player
                already drafted, position full, draft complete, etc.)
        """
        if self.draft_state.is_complete:
            raise ValidationError("Draft is already complete")

        is_valid, error_msg = self.rules.validate_pick(team_id, player_id)
        if not is_valid:
            logger.warning("Invalid pick attempted: %s", error_msg)
            raise ValidationError(error_msg)

        candidate = self.draft_state.get_candidate(player_id)
        team = self.draft_state.get_team(team_id)
        slot = self.rules.determine_roster_slot(team, candidate.position)

        pick = PickRecord.create(
            pick_number=self.draft_state.current_pick,
            team_id=team_id,
            candidate=candidate,
            reasoning="; ".join(recommendation.reasoning) if recommendation else "",
            confidence=recommendation.confidence if recommendation else 0.0,
            strategy_alignment=recommendation.strategic_fit if recommendation else 0.0,
            elapsed_seconds=elapsed_seconds,
        )

        team.add_player(candidate, slot)
        self.draft_state.available_players.remove(player_id)
        self.draft_state.all_picks.append(pick)

        logger.info(
            "Pick %d (Rd %d): Team %d (%s) selects %s (%s) -> %s",
            pick.pick_number,
            self.draft_state.current_round,
            team_id,
            team.team_name,
            candidate.name,
            candidate.position,
            slot,
        )

        # Built after the pick is recorded so position runs include it
        self.engine.update_opponent_model(team_id, pick, self.build_context())

        self.draft_state.advance_to_next_pick()
        self.draft_state.check_if_complete()

        return pick

    def recommend(self, team_id: int) -> Optional[PickRecommendation]:
        """Choose a pick for *team_id* at the current board.

        Computer teams use their opponent model's prediction; the human team
        takes the top strategy recommendation.
        """
        team = self.draft_state.get_team(team_id)
        context = self.build_context(team_id)

        if team.is_human:
            recommendations = self.engine.generate_strategy_recommendations(
                team.to_team(), context
            )
            return recommendations[0] if recommendations else None
        return self.engine.predict_opponent_pick(team_id, context)

    def simulate_pick(self) -> PickRecord:
        """Make the pick for whichever team is on the clock.

        A computer team's model first records its prediction, then the team
        makes its own independent draw; the update that follows scores one
        against the other. Falls back to the best-ADP eligible player when
        no recommendation is available.

        Raises:
            ValidationError: If the draft is complete or the team has no
                eligible players left.
        """
        if self.draft_state.is_complete:
            raise ValidationError("Draft is already complete")

        team = self.draft_state.get_current_team()
        recommendation = self.recommend(team.team_id)
        if not team.is_human:
            recommendation = self.engine.select_opponent_pick(
                team.team_id, self.build_context(team.team_id)
            )

        if recommendation is not None:
            candidate = recommendation.candidate
        else:
            eligible = self.rules.eligible_candidates(team)
            if not eligible:
                raise ValidationError(f"No eligible players for team {team.team_id}")
            candidate = min(eligible, key=lambda c: c.effective_adp)

        return self.make_pick(team.team_id, candidate.player_id, recommendation)

    def simulate_picks(self, count: int) -> List[PickRecord]:
        """Simulate up to *count* picks, stopping early if the draft ends."""
        picks = []
        for _ in range(count):
            if self.draft_state.is_complete:
                break
            picks.append(self.simulate_pick())
        return picks

    def run_to_completion(self) -> List[PickRecord]:
        """Simulate every remaining pick."""
        logger.info("Starting mock draft simulation...")
        picks = []
        while not self.draft_state.is_complete:
            try:
                picks.append(self.simulate_pick())
            except ValidationError as e:
                logger.warning(
                    "Could not complete pick %d: %s", self.draft_state.current_pick, e
                )
                break
        logger.info("Mock draft complete: %d picks made", len(picks))
        return picks

    @property
    def is_complete(self) -> bool:
        return self.draft_state.is_complete

    def get_current_team(self) -> TeamRoster:
        return self.draft_state.get_current_team()

    def get_team_picks(self, team_id: int) -> List[PickRecord]:
        return [pick for pick in self.draft_state.all_picks if pick.team_id == team_id]

    def get_draft_summary(self) -> Dict:
        """Summary of every team's picks, projections and scouting profile."""
        summary = {
            "draft_id": self.draft_state.draft_id,
            "completed_at": self.draft_state.completed_at,
            "total_picks": len(self.draft_state.all_picks),
            "teams": [],
        }

        for team in self.draft_state.teams:
            model = self.engine.get_opponent_model(team.team_id)
            report = self.engine.scout_opponent(
                team.team_id, self.get_team_picks(team.team_id)
            )
            summary["teams"].append(
                {
                    "team_id": team.team_id,
                    "team_name": team.team_name,
                    "is_human": team.is_human,
                    "personality": model.personality.name if model else None,
                    "picks": [c.name for c in team.picks],
                    "projected_points": self._projected_points(team.picks),
                    "draft_strategy": report.draft_strategy if report else None,
                }
            )

        return summary

    @staticmethod
    def _projected_points(candidates: List[DraftCandidate]) -> float:
        return round(sum(c.projection or 0.0 for c in candidates), 1)
