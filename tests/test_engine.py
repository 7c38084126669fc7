"""Tests for the draft simulation orchestrator."""

import pytest

from src.simulation_engine.engine import DraftSimulationEngine
from src.simulation_engine.models import (
    DraftCandidate,
    DraftContext,
    PickRecord,
    Team,
)
from src.simulation_engine.personalities import PERSONALITY_CATALOG, get_personality
from src.simulation_engine.random_source import RandomSource


# ── Helpers ──────────────────────────────────────────────────────────


def _make_teams(count=4):
    return [Team(team_id=i, name=f"Team {i}") for i in range(count)]


def _make_engine(seed=11, teams=None, personality_ids=None):
    engine = DraftSimulationEngine(rng=RandomSource(seed))
    engine.initialize_opponent_models(
        teams if teams is not None else _make_teams(), personality_ids=personality_ids
    )
    return engine


def _make_pick(team_id=1, pick_number=5, adp=5.0):
    candidate = DraftCandidate(
        player_id="picked", name="Picked Player", position="RB",
        projection=200.0, adp=adp,
    )
    return PickRecord.create(pick_number=pick_number, team_id=team_id, candidate=candidate)


# ── Initialization ───────────────────────────────────────────────────


class TestInitializeOpponentModels:
    def test_one_model_per_team(self):
        engine = _make_engine()
        assert sorted(engine.opponent_models) == [0, 1, 2, 3]
        for team_id, model in engine.opponent_models.items():
            assert model.team_id == team_id
            assert model.personality in PERSONALITY_CATALOG

    def test_pinned_personalities(self):
        engine = _make_engine(personality_ids={0: "contrarian", 2: "zero-rb"})
        assert engine.get_opponent_model(0).personality is get_personality("contrarian")
        assert engine.get_opponent_model(2).personality is get_personality("zero-rb")

    def test_unknown_pinned_personality_raises(self):
        engine = DraftSimulationEngine(rng=RandomSource(1))
        with pytest.raises(KeyError):
            engine.initialize_opponent_models(_make_teams(1), {0: "gambler"})

    def test_models_do_not_share_tendencies(self):
        pins = {0: "value-hunter", 1: "value-hunter"}
        engine = _make_engine(teams=_make_teams(2), personality_ids=pins)
        first = engine.get_opponent_model(0)
        second = engine.get_opponent_model(1)
        assert first.adapted_tendencies is not second.adapted_tendencies
        first.adapted_tendencies.value_focus = 0.0
        assert second.adapted_tendencies.value_focus == 0.9

    def test_reinitialize_replaces_models(self):
        engine = _make_engine()
        engine.initialize_opponent_models(_make_teams(2))
        assert sorted(engine.opponent_models) == [0, 1]

    def test_same_seed_same_assignments(self):
        first = _make_engine(seed=21)
        second = _make_engine(seed=21)
        assert [m.personality.personality_id for m in first.opponent_models.values()] == [
            m.personality.personality_id for m in second.opponent_models.values()
        ]

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError, match="personalities cannot be empty"):
            DraftSimulationEngine(personalities=[])

    def test_custom_catalog_used(self):
        engine = DraftSimulationEngine(
            rng=RandomSource(4), personalities=[get_personality("contrarian")]
        )
        engine.initialize_opponent_models(_make_teams(3))
        assert {m.personality.personality_id for m in engine.opponent_models.values()} == {
            "contrarian"
        }


# ── Prediction & update routing ──────────────────────────────────────


class TestRouting:
    def test_predict_unknown_team_returns_none(self, opening_context):
        assert _make_engine().predict_opponent_pick(99, opening_context) is None

    def test_predict_empty_pool_returns_none(self):
        context = DraftContext.build(current_round=1, current_pick=1, available_players=[])
        assert _make_engine().predict_opponent_pick(1, context) is None

    def test_predict_known_team(self, opening_context, candidate_pool):
        prediction = _make_engine().predict_opponent_pick(1, opening_context)
        assert prediction is not None
        assert prediction.candidate in candidate_pool

    def test_prediction_deterministic_with_seed(self, opening_context):
        first = _make_engine(seed=8).predict_opponent_pick(2, opening_context)
        second = _make_engine(seed=8).predict_opponent_pick(2, opening_context)
        assert first.candidate == second.candidate

    def test_select_unknown_team_returns_none(self, opening_context):
        assert _make_engine().select_opponent_pick(99, opening_context) is None

    def test_select_does_not_replace_prediction(self, opening_context, candidate_pool):
        engine = _make_engine()
        prediction = engine.predict_opponent_pick(1, opening_context)
        selection = engine.select_opponent_pick(1, opening_context)
        assert selection.candidate in candidate_pool
        assert engine.get_opponent_model(1).last_prediction is prediction

    def test_update_unknown_team_is_noop(self, opening_context):
        engine = _make_engine()
        before = {tid: len(m.adaptation_history) for tid, m in engine.opponent_models.items()}
        engine.update_opponent_model("nonexistent-team", _make_pick(), opening_context)
        after = {tid: len(m.adaptation_history) for tid, m in engine.opponent_models.items()}
        assert before == after

    def test_update_known_team_records_event(self, opening_context):
        engine = _make_engine()
        engine.update_opponent_model(1, _make_pick(team_id=1), opening_context)
        model = engine.get_opponent_model(1)
        assert len(model.adaptation_history) == 1
        assert model.roster_positions == ["RB"]


# ── Delegations ──────────────────────────────────────────────────────


class TestDelegations:
    def test_analyze_market_trends(self):
        picks = [_make_pick(team_id=i % 4, pick_number=i) for i in range(1, 4)]
        context = DraftContext.build(
            current_round=1, current_pick=4, available_players=[], draft_history=picks,
        )
        trends = _make_engine().analyze_market_trends(context)
        assert [t.position for t in trends] == ["RB"]

    def test_generate_strategy_recommendations(self, opening_context):
        recs = _make_engine().generate_strategy_recommendations(
            Team(team_id=0), opening_context
        )
        assert len(recs) == 10
        scores = [r.score for r in recs]
        assert scores == sorted(scores, reverse=True)

    def test_scout_known_and_unknown(self):
        engine = _make_engine()
        picks = [_make_pick(team_id=1, pick_number=25, adp=5.0)]
        report = engine.scout_opponent(1, picks)
        assert report.picks_observed == 1
        assert report.risk_profile == "aggressive"
        assert engine.scout_opponent(42, picks) is None
