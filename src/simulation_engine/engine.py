"""Draft simulation orchestrator.

Owns the personality catalog and one :class:`OpponentModel` per opposing
team, and routes prediction/adaptation calls to them. Each simulation run
constructs its own engine; nothing here is module-level state.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from src.simulation_engine.market_analyzer import MarketAnalyzer
from src.simulation_engine.models import (
    DraftContext,
    MarketTrend,
    PersonalityProfile,
    PickRecommendation,
    PickRecord,
    Team,
)
from src.simulation_engine.opponent_model import OpponentModel
from src.simulation_engine.personalities import PERSONALITY_CATALOG
from src.simulation_engine.random_source import RandomSource
from src.simulation_engine.scouting import OpponentScoutingReport, build_scouting_report
from src.simulation_engine.strategy_advisor import StrategyAdvisor

logger = logging.getLogger(__name__)


class DraftSimulationEngine:
    """Public entry point for opponent modelling during a mock draft.

    Args:
        rng: Random source used for personality assignment and pick
            selection. Defaults to an unseeded :class:`RandomSource`.
        personalities: Personality catalog to draw from. Defaults to the
            built-in six archetypes.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        personalities: Optional[Sequence[PersonalityProfile]] = None,
    ):
        self.rng = rng or RandomSource()
        self.personalities = tuple(
            PERSONALITY_CATALOG if personalities is None else personalities
        )
        if not self.personalities:
            raise ValueError("personalities cannot be empty")
        self.opponent_models: Dict[int, OpponentModel] = {}
        self.market_analyzer = MarketAnalyzer()
        self.strategy_advisor = StrategyAdvisor()

    def initialize_opponent_models(
        self,
        teams: Iterable[Team],
        personality_ids: Optional[Dict[int, str]] = None,
    ) -> None:
        """Create one model per team, replacing any existing models.

        Args:
            teams: Opposing teams to model.
            personality_ids: Optional ``team_id -> personality_id`` pins;
                unpinned teams draw a personality at random.

        Raises:
            KeyError: If a pinned personality id is not in the catalog.
        """
        by_id = {p.personality_id: p for p in self.personalities}
        pins = personality_ids or {}

        self.opponent_models = {}
        for team in teams:
            if team.team_id in pins:
                personality_id = pins[team.team_id]
                if personality_id not in by_id:
                    raise KeyError(f"Unknown personality {personality_id!r}")
                personality = by_id[personality_id]
            else:
                personality = self.rng.choice(self.personalities)

            self.opponent_models[team.team_id] = OpponentModel.create(
                team, personality, self.rng
            )
            logger.debug("Team %s assigned personality %s", team.team_id, personality.name)

        logger.info("Initialized %d opponent models", len(self.opponent_models))

    def get_opponent_model(self, team_id: int) -> Optional[OpponentModel]:
        return self.opponent_models.get(team_id)

    def predict_opponent_pick(
        self, team_id: int, context: DraftContext
    ) -> Optional[PickRecommendation]:
        """Predict a team's next pick; None for unknown teams or an empty pool."""
        model = self.opponent_models.get(team_id)
        if model is None:
            logger.debug("No opponent model for team %s", team_id)
            return None
        return model.predict_pick(context, self.rng)

    def select_opponent_pick(
        self, team_id: int, context: DraftContext
    ) -> Optional[PickRecommendation]:
        """Draw the pick a computer team actually makes.

        Independent of :meth:`predict_opponent_pick`, so a stored prediction
        can be scored against it. None for unknown teams or an empty pool.
        """
        model = self.opponent_models.get(team_id)
        if model is None:
            logger.debug("No opponent model for team %s", team_id)
            return None
        return model.select_pick(context, self.rng)

    def update_opponent_model(
        self, team_id: int, pick: PickRecord, context: DraftContext
    ) -> None:
        """Feed an observed pick back to the team's model. No-op if unknown."""
        model = self.opponent_models.get(team_id)
        if model is None:
            logger.debug("Ignoring pick for unmodelled team %s", team_id)
            return
        model.update(pick, context, self.rng)

    def analyze_market_trends(self, context: DraftContext) -> List[MarketTrend]:
        return self.market_analyzer.analyze_trends(context)

    def generate_strategy_recommendations(
        self, user_team: Team, context: DraftContext
    ) -> List[PickRecommendation]:
        return self.strategy_advisor.generate_recommendations(
            user_team, context, self.opponent_models
        )

    def scout_opponent(
        self, team_id: int, picks: Sequence[PickRecord]
    ) -> Optional[OpponentScoutingReport]:
        """Summarise a modelled team's observed picks; None if unknown."""
        if team_id not in self.opponent_models:
            return None
        return build_scouting_report(team_id, picks)
