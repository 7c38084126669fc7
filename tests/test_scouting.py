"""Tests for opponent scouting summaries."""

import pytest

from src.simulation_engine.models import DraftCandidate, PickRecord
from src.simulation_engine.scouting import (
    build_scouting_report,
    infer_draft_strategy,
    reach_rate,
    risk_profile,
    value_rate,
)


def _make_pick(position, pick_number, adp, team_id=3):
    candidate = DraftCandidate(
        player_id=f"{position}{pick_number}", name=f"{position} {pick_number}",
        position=position, projection=100.0, adp=adp,
    )
    return PickRecord.create(pick_number=pick_number, team_id=team_id, candidate=candidate)


class TestRates:
    def test_empty_history(self):
        assert reach_rate([]) == 0.0
        assert value_rate([]) == 0.0
        assert risk_profile([]) == "conservative"

    def test_reach_and_value_rates(self):
        picks = [
            _make_pick("RB", 20, 5.0),   # +15 reach
            _make_pick("WR", 30, 40.0),  # -10 value
            _make_pick("QB", 40, 38.0),  # +2 neither
            _make_pick("TE", 50, 52.0),  # -2 neither
        ]
        assert reach_rate(picks) == pytest.approx(0.25)
        assert value_rate(picks) == pytest.approx(0.25)

    @pytest.mark.parametrize("reaches, expected", [
        (0, "conservative"),
        (2, "moderate"),
        (4, "aggressive"),
    ])
    def test_risk_profile(self, reaches, expected):
        picks = [_make_pick("WR", 30 + i, 5.0) for i in range(reaches)]
        picks += [_make_pick("WR", 60 + i, 60.0) for i in range(10 - reaches)]
        assert risk_profile(picks) == expected


class TestInferDraftStrategy:
    def test_rb_heavy(self):
        picks = [_make_pick("RB", i, float(i)) for i in range(1, 4)]
        assert infer_draft_strategy(picks) == "RB Heavy"

    def test_wr_heavy_counts_roster(self):
        roster = [
            DraftCandidate(player_id=f"w{i}", name="W", position="WR") for i in range(3)
        ]
        assert infer_draft_strategy([], roster) == "WR Heavy"

    def test_value_based(self):
        picks = [_make_pick("RB", 10, 12.0), _make_pick("WR", 20, 30.0)]
        assert infer_draft_strategy(picks) == "Value Based"

    def test_balanced(self):
        picks = [_make_pick("RB", 10, 2.0), _make_pick("WR", 20, 30.0)]
        assert infer_draft_strategy(picks) == "Balanced"


class TestBuildScoutingReport:
    def test_filters_to_team(self):
        picks = [
            _make_pick("RB", 10, 2.0, team_id=3),
            _make_pick("RB", 11, 2.0, team_id=4),
        ]
        report = build_scouting_report(3, picks)
        assert report.team_id == 3
        assert report.picks_observed == 1
        assert report.position_counts == {"RB": 1}
        assert report.reach_rate == pytest.approx(0.0)
