"""Tests for the per-season outcome counter."""

import pytest

from src.credits.diagnostics import Diagnostics, MISSING_SEASON
from src.credits.outcomes import count_outcomes, outcome_for, to_season_arrays


class TestOutcomeFor:
    @pytest.mark.parametrize("description,expected", [
        ("X DEFENDS Y", "defended"),
        ("CHORBY SOUL eats", "chorby"),
        ("A CONSUMER wrestled", "wrestled"),
        ("SALMON cannon fired", "cannon"),
        ("ordinary eat", "success"),
    ])
    def test_categories(self, description, expected):
        assert outcome_for(description) == expected

    def test_precedence_defends_first(self):
        assert outcome_for("A CONSUMER ATTACKS CHORBY SOUL! York Silk DEFENDS") == "defended"

    def test_precedence_chorby_over_wrestled(self):
        assert outcome_for("A CONSUMER ATTACKS CHORBY SOUL") == "chorby"


class TestCountOutcomes:
    def test_one_of_each_in_season_one(self):
        events = [
            {"season": 1, "description": d}
            for d in ["X DEFENDS Y", "CHORBY SOUL eats", "A CONSUMER wrestled", "SALMON cannon fired", "ordinary eat"]
        ]
        counts = count_outcomes(events)
        assert counts["defended"][1] == 1
        assert counts["chorby"][1] == 1
        assert counts["wrestled"][1] == 1
        assert counts["cannon"][1] == 1
        assert counts["success"][1] == 1

    def test_counts_accumulate_per_season(self):
        events = [
            {"season": 11, "description": "ordinary eat"},
            {"season": 11, "description": "ordinary eat"},
            {"season": 12, "description": "ordinary eat"},
        ]
        assert count_outcomes(events)["success"] == {11: 2, 12: 1}

    def test_every_category_present(self):
        assert count_outcomes([]) == {"success": {}, "chorby": {}, "defended": {}, "cannon": {}, "wrestled": {}}


class TestSeasonArrays:
    def test_sparse_seasons_become_none(self):
        arrays = to_season_arrays({"success": {1: 2, 3: 1}, "cannon": {}})
        assert arrays["success"] == [None, 2, None, 1]
        assert arrays["cannon"] == []


class TestEventsWithoutSeason:
    def test_missing_or_null_season_is_skipped_and_reported(self):
        events = [
            {"id": "e1", "season": 2, "description": "SALMON"},
            {"id": "e2", "description": "SALMON"},
            {"id": "e3", "season": None, "description": "ordinary eat"},
        ]
        diagnostics = Diagnostics()
        counts = count_outcomes(events, diagnostics)

        assert counts["cannon"] == {2: 1}
        assert counts["success"] == {}
        reported = diagnostics.by_code(MISSING_SEASON)
        assert [d.context["event_id"] for d in reported] == ["e2", "e3"]

    def test_season_arrays_still_build(self):
        counts = count_outcomes([{"id": "e1", "season": None, "description": "SALMON"}])
        assert to_season_arrays(counts)["cannon"] == []
