"""Run a full mock draft against computer opponents.

Usage:
    python -m src.draft_manager.run_mock_draft [candidates.csv] [league_size] [seed] [human_team_id] [log_level]

Examples:
    python -m src.draft_manager.run_mock_draft
    python -m src.draft_manager.run_mock_draft data/raw/rankings.csv
    python -m src.draft_manager.run_mock_draft data/raw/rankings.csv 10 42 3
    python -m src.draft_manager.run_mock_draft data/raw/rankings.csv 12 7 0 DEBUG
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from src.data_pipeline.candidate_loader import CandidateLoader
from src.data_pipeline.config import DEFAULT_CANDIDATES_FILE
from src.draft_manager.config import (
    DEFAULT_DRAFT_TYPE,
    DEFAULT_LEAGUE_SIZE,
    DEFAULT_ROSTER_SLOTS,
    MAX_LEAGUE_SIZE,
    MIN_LEAGUE_SIZE,
)
from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_state import DraftState, LeagueConfig
from src.logging_config import setup_logging
from src.simulation_engine.engine import DraftSimulationEngine
from src.simulation_engine.random_source import RandomSource

logger = logging.getLogger(__name__)


def run_mock_draft(
    candidates_file: Path,
    league_size: int = DEFAULT_LEAGUE_SIZE,
    seed: Optional[int] = None,
    human_team_id: Optional[int] = 0,
) -> Dict:
    """Load candidates, simulate every pick and return the draft summary."""
    if not MIN_LEAGUE_SIZE <= league_size <= MAX_LEAGUE_SIZE:
        raise ValueError(
            f"League size must be between {MIN_LEAGUE_SIZE} and {MAX_LEAGUE_SIZE}"
        )

    candidates = CandidateLoader().from_csv(candidates_file)

    league_config = LeagueConfig(
        league_id=f"mock_{league_size}team",
        league_size=league_size,
        draft_type=DEFAULT_DRAFT_TYPE,
        roster_slots=dict(DEFAULT_ROSTER_SLOTS),
    )
    draft_state = DraftState.create_new(
        league_config=league_config,
        team_names=[f"Team {i + 1}" for i in range(league_size)],
        human_team_id=human_team_id,
        candidates=candidates,
    )

    engine = DraftSimulationEngine(rng=RandomSource(seed))
    controller = DraftController(draft_state, engine)
    controller.run_to_completion()

    return controller.get_draft_summary()


if __name__ == "__main__":
    candidates_file = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CANDIDATES_FILE
    league_size = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_LEAGUE_SIZE
    seed = int(sys.argv[3]) if len(sys.argv) > 3 else None
    human_team_id = int(sys.argv[4]) if len(sys.argv) > 4 else 0
    log_level = sys.argv[5] if len(sys.argv) > 5 else "INFO"

    setup_logging(log_level)

    try:
        summary = run_mock_draft(candidates_file, league_size, seed, human_team_id)
    except Exception:
        logger.exception("Mock draft failed")
        sys.exit(1)

    for team in summary["teams"]:
        label = "YOU" if team["is_human"] else team["personality"]
        print(
            f"{team['team_name']:<10} [{label}] {team['draft_strategy']}: "
            f"{team['projected_points']} pts"
        )
        print("    " + ", ".join(team["picks"]))
