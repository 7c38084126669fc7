"""Tests for loading draft candidates from CSV exports."""

import textwrap

import pandas as pd
import pytest

from src.data_pipeline.candidate_loader import (
    CandidateLoader,
    LoaderError,
    extract_base_position,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def loader():
    return CandidateLoader()


@pytest.fixture
def rankings_df():
    return pd.DataFrame({
        "PLAYER NAME": ["Ja'Marr Chase", "Bijan Robinson", "Josh Allen", "Nobody", "Ravens"],
        "TEAM": ["CIN", "ATL", "BUF", "FA", "BAL"],
        "POS": ["WR1", "RB1", "QB1", "XX9", "DEF1"],
        "ADP": ["1.5", "1.2", None, "200", "140.0"],
        "FPTS": ["1,204.5", "310.0", "390.2", "0", "120"],
        "AGE": [25, 23, 29, 30, None],
    })


# ---------------------------------------------------------------------------
# Position parsing
# ---------------------------------------------------------------------------

class TestExtractBasePosition:
    @pytest.mark.parametrize("raw, expected", [
        ("WR1", "WR"),
        ("RB23", "RB"),
        ("QB", "QB"),
        ("DEF4", "DST"),
        ("PK2", "K"),
        ("xx1", None),
        (None, None),
    ])
    def test_positions(self, raw, expected):
        assert extract_base_position(raw) == expected


# ---------------------------------------------------------------------------
# DataFrame conversion
# ---------------------------------------------------------------------------

class TestFromDataFrame:
    def test_drops_unknown_positions(self, loader, rankings_df):
        candidates = loader.from_dataframe(rankings_df)
        assert "Nobody" not in [c.name for c in candidates]
        assert len(candidates) == 4

    def test_sorted_by_adp_missing_last(self, loader, rankings_df):
        names = [c.name for c in loader.from_dataframe(rankings_df)]
        assert names == ["Bijan Robinson", "Ja'Marr Chase", "Ravens", "Josh Allen"]

    def test_fields_parsed(self, loader, rankings_df):
        by_name = {c.name: c for c in loader.from_dataframe(rankings_df)}

        chase = by_name["Ja'Marr Chase"]
        assert chase.position == "WR"
        assert chase.team == "CIN"
        assert chase.projection == pytest.approx(1204.5)
        assert chase.adp == pytest.approx(1.5)
        assert chase.age == 25
        assert chase.injury_risk is None
        assert chase.recent_form == 0.0

        assert by_name["Josh Allen"].adp is None
        assert by_name["Ravens"].position == "DST"
        assert by_name["Ravens"].age is None

    def test_generated_player_ids_unique(self, loader, rankings_df):
        candidates = loader.from_dataframe(rankings_df)
        ids = [c.player_id for c in candidates]
        assert len(set(ids)) == len(ids)
        assert "bijan-robinson-rb" in ids

    def test_existing_player_ids_kept(self, loader):
        df = pd.DataFrame({
            "player_id": ["p-1", "p-2"],
            "name": ["A", "B"],
            "position": ["TE", "K"],
            "adp": [3, 4],
        })
        assert [c.player_id for c in loader.from_dataframe(df)] == ["p-1", "p-2"]

    def test_missing_required_column_raises(self, loader):
        df = pd.DataFrame({"PLAYER NAME": ["A"], "ADP": [1]})
        with pytest.raises(LoaderError, match="position"):
            loader.from_dataframe(df)


# ---------------------------------------------------------------------------
# CSV reading
# ---------------------------------------------------------------------------

class TestFromCsv:
    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(LoaderError, match="not found"):
            loader.from_csv(tmp_path / "nope.csv")

    def test_reads_quoted_export(self, loader, tmp_path):
        path = tmp_path / "rankings.csv"
        path.write_text(textwrap.dedent("""\
            "PLAYER NAME","TEAM","POS","ADP","FPTS"
            "Puka Nacua","LAR","WR4","9.1","1,010.0"
            "Brock Bowers","LV","TE1","20.4","250.5"
            "","","","",""
        """))
        candidates = loader.from_csv(path)
        assert [c.name for c in candidates] == ["Puka Nacua", "Brock Bowers"]
        assert candidates[0].projection == pytest.approx(1010.0)
        assert candidates[1].position == "TE"
