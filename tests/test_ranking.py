"""Tests for merging and ranking candidate streams."""

from namecraft.models import GeneratedName, PatternType
from namecraft.ranking import dedupe_names, filter_by_score, rank_candidates, sort_by_score


def make(name, score, pattern=PatternType.COMPOUND):
    return GeneratedName(name=name, pattern=pattern, source_words=(), score=score)


class TestRankCandidates:
    """Tests for rank_candidates."""

    def test_filter_dedupe_sort_truncate(self):
        streams = [
            [make('Alpha', 60), make('Beta', 30)],
            [make('ALPHA', 90), make('Gamma', 75), make('Delta', 50)],
        ]
        ranked = rank_candidates(streams, min_score=40, count=3)
        assert [(n.name, n.score) for n in ranked] == [('Gamma', 75), ('Alpha', 60), ('Delta', 50)]

    def test_threshold_applied_before_dedup(self):
        streams = [[make('Alpha', 20)], [make('alpha', 80)]]
        ranked = rank_candidates(streams, min_score=40)
        assert [n.name for n in ranked] == ['alpha']

    def test_empty_result_is_valid(self):
        assert rank_candidates([[make('Alpha', 10)]], min_score=50) == []
        assert rank_candidates([], min_score=0) == []

    def test_zero_count(self):
        assert rank_candidates([[make('Alpha', 90)]], count=0) == []


class TestHelpers:
    """Tests for the individual ranking steps."""

    def test_filter_by_score_is_inclusive(self):
        names = filter_by_score([make('A', 40), make('B', 39)], 40)
        assert [n.name for n in names] == ['A']

    def test_dedupe_keeps_first(self):
        names = dedupe_names([make('Flow', 50), make('flow', 90), make('FLOW', 70)])
        assert len(names) == 1
        assert names[0].score == 50

    def test_sort_is_stable(self):
        names = sort_by_score([make('A', 50), make('B', 70), make('C', 50), make('D', 70)])
        assert [n.name for n in names] == ['B', 'D', 'A', 'C']
