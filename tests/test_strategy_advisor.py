"""Tests for user-team pick recommendations."""

import pytest

from src.simulation_engine.models import DraftCandidate, DraftContext, Team
from src.simulation_engine.opponent_model import OpponentModel
from src.simulation_engine.personalities import get_personality
from src.simulation_engine.random_source import RandomSource
from src.simulation_engine.strategy_advisor import StrategyAdvisor, opponent_demand


# ── Helpers ──────────────────────────────────────────────────────────


def _make_candidate(pid, position="WR", adp=10.0, projection=150.0):
    return DraftCandidate(
        player_id=pid, name=f"Player {pid}", position=position,
        projection=projection, adp=adp,
    )


def _make_context(available, current_pick=1, current_round=1):
    return DraftContext.build(
        current_round=current_round,
        current_pick=current_pick,
        available_players=available,
    )


def _make_models(*personality_ids):
    rng = RandomSource(3)
    return {
        team_id: OpponentModel.create(Team(team_id=team_id), get_personality(pid), rng)
        for team_id, pid in enumerate(personality_ids, start=1)
    }


# ── Recommendations ──────────────────────────────────────────────────


class TestGenerateRecommendations:
    def setup_method(self):
        self.advisor = StrategyAdvisor()

    def test_only_top_ten_considered(self):
        pool = [_make_candidate(f"c{i}", adp=float(i)) for i in range(1, 16)]
        recs = self.advisor.generate_recommendations(
            Team(team_id=0), _make_context(pool), {}
        )
        assert len(recs) == 10
        assert {r.candidate.player_id for r in recs} == {f"c{i}" for i in range(1, 11)}

    def test_empty_pool(self):
        assert self.advisor.generate_recommendations(
            Team(team_id=0), _make_context([]), {}
        ) == []

    def test_confidence_is_additive_and_unclamped(self):
        rb = _make_candidate("rb", "RB", adp=20.0)
        recs = self.advisor.generate_recommendations(
            Team(team_id=0), _make_context([rb], current_pick=1, current_round=1), {}
        )
        # 0.5 base + 0.3 empty position + 0.2 value + 0.2 early RB
        assert recs[0].confidence == pytest.approx(1.2)
        assert recs[0].value == pytest.approx(88.0)
        assert recs[0].strategic_fit == pytest.approx(100.0)

    def test_need_reduces_strategic_fit(self):
        roster = tuple(_make_candidate(f"have{i}", "RB") for i in range(2))
        rb = _make_candidate("rb", "RB", adp=20.0)
        recs = self.advisor.generate_recommendations(
            Team(team_id=0, roster=roster), _make_context([rb]), {}
        )
        assert recs[0].strategic_fit == pytest.approx(50.0)
        # No empty-position bonus once the team has RBs
        assert recs[0].confidence == pytest.approx(0.9)

    def test_late_round_drops_early_position_bonus(self):
        wr = _make_candidate("wr", "WR", adp=50.0)
        recs = self.advisor.generate_recommendations(
            Team(team_id=0), _make_context([wr], current_pick=50, current_round=5), {}
        )
        assert recs[0].confidence == pytest.approx(0.8)

    def test_sorted_by_product_descending(self):
        pool = [
            _make_candidate("k", "K", adp=30.0),
            _make_candidate("reach", "WR", adp=1.0),
            _make_candidate("value", "RB", adp=40.0),
        ]
        recs = self.advisor.generate_recommendations(
            Team(team_id=0), _make_context(pool, current_pick=10), {}
        )
        scores = [r.confidence * r.value * r.strategic_fit for r in recs]
        assert scores == sorted(scores, reverse=True)
        assert recs[0].candidate.player_id == "value"

    def test_ties_keep_board_order(self):
        pool = [_make_candidate(f"twin{i}", "WR", adp=10.0) for i in range(4)]
        recs = self.advisor.generate_recommendations(
            Team(team_id=0), _make_context(pool), {}
        )
        assert [r.candidate.player_id for r in recs] == ["twin0", "twin1", "twin2", "twin3"]

    def test_reasoning_flags_need_and_value(self):
        te = _make_candidate("te", "TE", adp=30.0)
        recs = self.advisor.generate_recommendations(
            Team(team_id=0), _make_context([te], current_pick=5), {}
        )
        assert "Addresses critical TE need" in recs[0].reasoning
        assert "Exceptional value - falling 25.0 picks" in recs[0].reasoning

    def test_opponent_demand_does_not_change_ranking(self):
        pool = [_make_candidate(f"c{i}", pos, adp=float(i + 1))
                for i, pos in enumerate(["QB", "RB", "WR", "TE"])]
        context = _make_context(pool)
        without = self.advisor.generate_recommendations(Team(team_id=0), context, {})
        with_models = self.advisor.generate_recommendations(
            Team(team_id=0), context, _make_models("zero-rb", "robust-rb")
        )
        assert [r.candidate for r in without] == [r.candidate for r in with_models]


class TestOpponentDemand:
    def test_no_models(self):
        assert opponent_demand("RB", {}) == 0.0

    def test_mean_across_models(self):
        models = _make_models("zero-rb", "robust-rb")
        expected = sum(
            m.predicted_behavior.next_position_likelihood["RB"] for m in models.values()
        ) / 2
        assert opponent_demand("RB", models) == pytest.approx(expected)

    def test_unknown_position_counts_zero(self):
        assert opponent_demand("FB", _make_models("contrarian")) == 0.0
