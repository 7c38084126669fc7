"""Draft state data models - single source of truth for a mock draft."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional
import uuid

from src.simulation_engine.models import DraftCandidate, PickRecord, Team


@dataclass
class TeamRoster:
    """Represents a single team's roster."""

    team_id: int
    team_name: str
    is_human: bool
    roster: Dict[str, List[DraftCandidate]] = field(default_factory=dict)
    picks: List[DraftCandidate] = field(default_factory=list)

    def get_slot_count(self, slot: str) -> int:
        """Get number of players in a roster slot."""
        return len(self.roster.get(slot, []))

    def get_position_count(self, position: str) -> int:
        """Get number of drafted players at a position, whatever their slot."""
        return sum(1 for candidate in self.picks if candidate.position == position)

    def add_player(self, candidate: DraftCandidate, slot: str):
        """Add player to roster at the given slot."""
        self.roster.setdefault(slot, []).append(candidate)
        self.picks.append(candidate)

    def to_team(self) -> Team:
        """Read-only snapshot handed to the simulation engine."""
        return Team(team_id=self.team_id, name=self.team_name, roster=tuple(self.picks))


@dataclass
class LeagueConfig:
    """League configuration settings."""

    league_id: str
    league_size: int
    draft_type: str = "snake"
    roster_slots: Dict[str, int] = field(default_factory=dict)

    def total_rounds(self) -> int:
        """Calculate total number of draft rounds."""
        if not self.roster_slots:
            raise ValueError("roster_slots cannot be empty")
        return sum(self.roster_slots.values())

    def get_slot_limit(self, slot: str) -> int:
        return self.roster_slots.get(slot, 0)


@dataclass
class DraftState:
    """Complete mock draft state."""

    draft_id: str
    league_config: LeagueConfig
    draft_start_time: str
    current_pick: int
    current_round: int
    current_team_id: int
    draft_order: List[int]
    teams: List[TeamRoster]
    all_picks: List[PickRecord]
    available_players: List[str]  # player ids, in board (ADP) order
    player_data: Dict[str, DraftCandidate]
    is_complete: bool = False
    completed_at: Optional[str] = None

    @classmethod
    def create_new(
        cls,
        league_config: LeagueConfig,
        team_names: List[str],
        human_team_id: Optional[int],
        candidates: List[DraftCandidate],
    ) -> "DraftState":
        """Factory method to create a new draft.

        Args:
            league_config: League settings.
            team_names: One name per team, in draft order.
            human_team_id: Team driven by strategy recommendations, or None
                for a fully computer-drafted simulation.
            candidates: Player pool in board order.
        """
        if len(team_names) != league_config.league_size:
            raise ValueError(
                f"team_names length ({len(team_names)}) must match "
                f"league_size ({league_config.league_size})"
            )
        if human_team_id is not None and not 0 <= human_team_id < league_config.league_size:
            raise ValueError(
                f"human_team_id ({human_team_id}) must be in range "
                f"[0, {league_config.league_size})"
            )

        teams = [
            TeamRoster(
                team_id=i,
                team_name=name,
                is_human=(i == human_team_id),
                roster={slot: [] for slot in league_config.roster_slots},
            )
            for i, name in enumerate(team_names)
        ]

        player_data = {candidate.player_id: candidate for candidate in candidates}
        if len(player_data) != len(candidates):
            raise ValueError("candidate player_id values must be unique")

        draft_order = list(range(league_config.league_size))

        return cls(
            draft_id=str(uuid.uuid4()),
            league_config=league_config,
            draft_start_time=datetime.now().isoformat(),
            current_pick=1,
            current_round=1,
            current_team_id=draft_order[0],
            draft_order=draft_order,
            teams=teams,
            all_picks=[],
            available_players=[candidate.player_id for candidate in candidates],
            player_data=player_data,
        )

    def get_current_team(self) -> TeamRoster:
        """Get the team currently on the clock."""
        return self.teams[self.current_team_id]

    def get_team(self, team_id: int) -> TeamRoster:
        return self.teams[team_id]

    def is_player_available(self, player_id: str) -> bool:
        return player_id in self.available_players

    def get_candidate(self, player_id: str) -> Optional[DraftCandidate]:
        return self.player_data.get(player_id)

    def get_available_candidates(self) -> List[DraftCandidate]:
        return [self.player_data[pid] for pid in self.available_players]

    def advance_to_next_pick(self):
        """Move to next pick (handles snake draft logic)."""
        if self.is_complete:
            return

        self.current_pick += 1

        # Update round first so team calculation uses correct direction
        self.current_round = (
            (self.current_pick - 1) // self.league_config.league_size
        ) + 1

        picks_in_round = (self.current_pick - 1) % self.league_config.league_size
        if self.league_config.draft_type == "snake" and self.current_round % 2 == 0:
            team_index = self.league_config.league_size - 1 - picks_in_round
        else:
            team_index = picks_in_round
        self.current_team_id = self.draft_order[team_index]

    def total_picks(self) -> int:
        return self.league_config.league_size * self.league_config.total_rounds()

    def check_if_complete(self) -> bool:
        """Check if draft is complete (all rounds done or the pool is empty)."""
        self.is_complete = (
            self.current_pick > self.total_picks() or not self.available_players
        )

        if self.is_complete and not self.completed_at:
            self.completed_at = datetime.now().isoformat()

        return self.is_complete
