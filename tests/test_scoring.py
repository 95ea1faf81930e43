"""Tests for the brandability scorer."""

import pytest

from namecraft.scoring import PRODUCT_SCORING, STARTUP_SCORING, NameScorer


@pytest.fixture
def startup_scorer():
    return NameScorer(STARTUP_SCORING)


@pytest.fixture
def product_scorer():
    return NameScorer(PRODUCT_SCORING)


class TestStartupScoring:
    """Tests for the startup scoring profile."""

    def test_short_balanced_name_scores_high(self, startup_scorer):
        assert startup_scorer.score('DataHub') >= 80

    def test_exact_breakdown(self, startup_scorer):
        result = startup_scorer.breakdown('DataHub')
        assert result.length == 15
        assert result.vowels == 10
        assert result.consonants == 5
        assert result.leading_letter == 0
        assert result.total == 80

    def test_long_name_penalized(self, startup_scorer):
        short = startup_scorer.score('DataHub')
        padded = startup_scorer.score('DataHubDataHubDataHub')
        assert padded == 55
        assert short - padded >= 10

    def test_consonant_cluster_loses_bonus(self, startup_scorer):
        assert startup_scorer.breakdown('Strngth').consonants == 0

    def test_leading_letter_bonus(self, startup_scorer):
        assert startup_scorer.breakdown('Apex').leading_letter == 5
        assert startup_scorer.breakdown('Zeal').leading_letter == 0

    def test_poor_vowel_ratio_penalized(self, startup_scorer):
        # 1 vowel in 7 letters
        assert startup_scorer.breakdown('Brightz').vowels == -5


class TestProductScoring:
    """Tests for the product scoring profile."""

    def test_suffix_and_camel_case_bonuses(self, product_scorer):
        result = product_scorer.breakdown('DataHub')
        assert result.suffix == 10
        assert result.camel_case == 5
        assert result.total == 95

    def test_long_name_penalized(self, product_scorer):
        assert product_scorer.score('DataHubDataHubDataHub') == 70

    def test_no_leading_letter_bonus(self, product_scorer):
        assert product_scorer.breakdown('Apex').leading_letter == 0


class TestScoreBounds:
    """Scores always land in 0..100."""

    @pytest.mark.parametrize('name', ['', 'a', 'x' * 60, 'Aeiouaeiou', 'Bcdfghjklm'])
    def test_bounded(self, startup_scorer, product_scorer, name):
        assert 0 <= startup_scorer.score(name) <= 100
        assert 0 <= product_scorer.score(name) <= 100

    def test_deterministic(self, startup_scorer):
        assert startup_scorer.score_batch(['Flickr', 'Cloudify']) == startup_scorer.score_batch(['Flickr', 'Cloudify'])

    def test_to_dict(self, startup_scorer):
        data = startup_scorer.breakdown('DataHub').to_dict()
        assert data['total'] == 80
        assert set(data['breakdown']) == {'length', 'vowels', 'suffix', 'camel_case', 'consonants', 'leading_letter'}
