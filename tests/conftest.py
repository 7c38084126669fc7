"""Shared fixtures for the simulation engine and mock-draft test suites."""

import pytest

from src.simulation_engine.models import DraftCandidate, DraftContext
from src.simulation_engine.random_source import RandomSource


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

POOL_SPECS = [
    # (id, position, projection, adp)
    ("rb1", "RB", 280.0, 1.0), ("wr1", "WR", 270.0, 2.0),
    ("rb2", "RB", 260.0, 3.0), ("wr2", "WR", 255.0, 4.0),
    ("qb1", "QB", 320.0, 5.0), ("te1", "TE", 200.0, 6.0),
    ("rb3", "RB", 230.0, 7.0), ("wr3", "WR", 228.0, 8.0),
    ("wr4", "WR", 220.0, 9.0), ("rb4", "RB", 210.0, 10.0),
    ("qb2", "QB", 300.0, 11.0), ("te2", "TE", 170.0, 12.0),
    ("wr5", "WR", 205.0, 13.0), ("rb5", "RB", 190.0, 14.0),
    ("k1", "K", 140.0, 30.0), ("dst1", "DST", 130.0, 32.0),
]


@pytest.fixture
def rng():
    """Seeded random source so every test run draws the same sequence."""
    return RandomSource(seed=1234)


@pytest.fixture
def candidate_pool():
    return [
        DraftCandidate(
            player_id=pid,
            name=f"Player {pid}",
            position=pos,
            team="TST",
            projection=proj,
            adp=adp,
        )
        for pid, pos, proj, adp in POOL_SPECS
    ]


@pytest.fixture
def opening_context(candidate_pool):
    """Context for pick 1 of round 1 with the full pool available."""
    return DraftContext.build(
        current_round=1,
        current_pick=1,
        available_players=candidate_pool,
    )
