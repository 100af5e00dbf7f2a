"""Tests for credits ordering."""

from src.credits.models import CompositeRecord, DisplayLine
from src.credits.sorter import chronological_key, sort_lines, sort_records, surname_key


def _record(rid, name, season=1, day=1):
    return CompositeRecord(rid, primary_name=name, season=season, day=day)


class TestSurnameKey:
    def test_two_word_name(self):
        assert surname_key("Jim Barnes") == "Barnes Jim"

    def test_single_word_name_unchanged(self):
        assert surname_key("NaN") == "NaN"

    def test_three_word_name(self):
        assert surname_key("Wyatt Mason IV") == "Mason IV Wyatt"

    def test_missing_name(self):
        assert surname_key(None) == ""


class TestSortRecords:
    def test_sorted_by_surname(self):
        records = [
            _record("a", "Jessica Telephone"),
            _record("b", "Jim Barnes"),
            _record("c", "NaN"),
        ]
        assert [r.record_id for r in sort_records(records)] == ["b", "c", "a"]

    def test_same_player_sorted_chronologically(self):
        later = _record("later", "Jim Barnes", season=5, day=20)
        earlier = _record("earlier", "Jim Barnes", season=5, day=10)
        assert chronological_key(earlier) == 1010
        assert chronological_key(later) == 1020
        assert [r.record_id for r in sort_records([later, earlier])] == ["earlier", "later"]

    def test_season_outranks_day(self):
        a = _record("a", "Jim Barnes", season=4, day=150)
        b = _record("b", "Jim Barnes", season=5, day=1)
        assert [r.record_id for r in sort_records([b, a])] == ["a", "b"]

    def test_full_ties_keep_input_order(self):
        records = [_record(str(i), "Jim Barnes", season=3, day=3) for i in range(5)]
        assert [r.record_id for r in sort_records(records)] == ["0", "1", "2", "3", "4"]


class TestSortLines:
    def test_lines_follow_their_records(self):
        pairs = [
            (_record("a", "Jessica Telephone"), DisplayLine("Jessica Telephone", "7.5/10")),
            (_record("b", "Jim Barnes"), DisplayLine("Jim Barnes's Bat", "2.5/10")),
        ]
        assert [line.target for line in sort_lines(pairs)] == ["Jim Barnes's Bat", "Jessica Telephone"]
