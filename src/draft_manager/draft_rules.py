"""Draft rule enforcement, pick validation and roster slot assignment."""

from typing import List, Optional, Tuple

from src.draft_manager.config import FLEX_ELIGIBLE_POSITIONS
from src.draft_manager.draft_state import DraftState, TeamRoster
from src.simulation_engine.models import DraftCandidate


class ValidationError(Exception):
    """Raised when a pick violates draft rules."""

    pass


class DraftRules:
    """Enforces all draft rules and validation logic."""

    def __init__(self, draft_state: DraftState):
        self.draft_state = draft_state

    def validate_pick(
        self, team_id: int, player_id: str
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a pick is legal.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        if not 0 <= team_id < len(self.draft_state.teams):
            return False, f"Team {team_id} is not in this draft"

        if team_id != self.draft_state.current_team_id:
            return (
                False,
                f"Not team {team_id}'s turn "
                f"(current: {self.draft_state.current_team_id})",
            )

        candidate = self.draft_state.get_candidate(player_id)
        if candidate is None:
            return False, f"Player {player_id} not found in player pool"

        if not self.draft_state.is_player_available(player_id):
            return False, f"{candidate.name} has already been drafted"

        team = self.draft_state.get_team(team_id)
        if self.determine_roster_slot(team, candidate.position) is None:
            return False, (
                f"Cannot draft another {candidate.position}. "
                f"Position full, no FLEX space, and bench full"
            )

        return True, None

    def determine_roster_slot(self, team: TeamRoster, position: str) -> Optional[str]:
        """
        Determine which roster slot a player should fill.

        Priority: specific position -> FLEX (if eligible) -> BENCH.
        Returns None when no slot is open.
        """
        config = self.draft_state.league_config

        if team.get_slot_count(position) < config.get_slot_limit(position):
            return position

        if position in FLEX_ELIGIBLE_POSITIONS:
            if team.get_slot_count("FLEX") < config.get_slot_limit("FLEX"):
                return "FLEX"

        if team.get_slot_count("BENCH") < config.get_slot_limit("BENCH"):
            return "BENCH"

        return None

    def eligible_candidates(self, team: TeamRoster) -> List[DraftCandidate]:
        """Available candidates the team still has room for, in board order."""
        open_positions = {}
        eligible = []
        for candidate in self.draft_state.get_available_candidates():
            position = candidate.position
            if position not in open_positions:
                open_positions[position] = (
                    self.determine_roster_slot(team, position) is not None
                )
            if open_positions[position]:
                eligible.append(candidate)
        return eligible
