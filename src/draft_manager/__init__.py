from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_rules import DraftRules, ValidationError
from src.draft_manager.draft_state import (
    DraftState,
    LeagueConfig,
    TeamRoster,
)

__all__ = [
    "DraftController",
    "DraftRules",
    "DraftState",
    "LeagueConfig",
    "TeamRoster",
    "ValidationError",
]
