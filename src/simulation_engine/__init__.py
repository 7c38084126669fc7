from src.simulation_engine.engine import DraftSimulationEngine
from src.simulation_engine.market_analyzer import MarketAnalyzer
from src.simulation_engine.models import (
    AdaptationEvent,
    DraftCandidate,
    DraftContext,
    MarketTrend,
    PersonalityProfile,
    PickClassification,
    PickRecommendation,
    PickRecord,
    PredictedBehavior,
    Team,
    Tendencies,
    TrendDirection,
)
from src.simulation_engine.opponent_model import OpponentModel
from src.simulation_engine.personalities import PERSONALITY_CATALOG, get_personality
from src.simulation_engine.random_source import RandomSource
from src.simulation_engine.scouting import OpponentScoutingReport
from src.simulation_engine.strategy_advisor import StrategyAdvisor

__all__ = [
    "AdaptationEvent",
    "DraftCandidate",
    "DraftContext",
    "DraftSimulationEngine",
    "MarketAnalyzer",
    "MarketTrend",
    "OpponentModel",
    "OpponentScoutingReport",
    "PERSONALITY_CATALOG",
    "PersonalityProfile",
    "PickClassification",
    "PickRecommendation",
    "PickRecord",
    "PredictedBehavior",
    "RandomSource",
    "StrategyAdvisor",
    "Team",
    "Tendencies",
    "TrendDirection",
    "get_personality",
]
