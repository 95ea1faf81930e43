"""Tests for word banks and their fallback lookups."""

import pytest

from namecraft.wordbanks import WordBank
from namecraft.wordbanks.product import (
    CATEGORY_WORDS,
    PRODUCT_SUFFIXES,
    TIER_NAMES,
    get_category_words,
    get_tier_names,
)
from namecraft.wordbanks.startup import (
    INDUSTRY_WORDS,
    PREFIXES,
    SUFFIXES,
    get_all_prefixes,
    get_all_suffixes,
    get_industry_words,
)


class TestWordBank:
    """Tests for the WordBank mapping."""

    def test_lookup_known_tag(self):
        bank = WordBank({'a': ['x', 'y'], 'b': ['z']}, default='a')
        assert bank.lookup('b') == ('z',)

    def test_lookup_unknown_tag_falls_back(self):
        bank = WordBank({'a': ['x', 'y'], 'b': ['z']}, default='a')
        assert bank.lookup('nope') == ('x', 'y')
        assert bank.lookup(None) == ('x', 'y')
        assert bank.lookup('') == ('x', 'y')

    def test_lookup_ignores_case_and_punctuation(self):
        bank = WordBank({'projectManagement': ['task']}, default='projectManagement')
        assert bank.lookup('project-management') == ('task',)
        assert bank.lookup('PROJECT MANAGEMENT') == ('task',)

    def test_is_read_only(self):
        bank = WordBank({'a': ['x']}, default='a')
        with pytest.raises(TypeError):
            bank['b'] = ('y',)
        assert isinstance(bank['a'], tuple)

    def test_empty_category_rejected(self):
        with pytest.raises(ValueError):
            WordBank({'a': []}, default='a')

    def test_missing_default_rejected(self):
        with pytest.raises(ValueError):
            WordBank({'a': ['x']}, default='b')

    def test_flatten_keeps_category_order(self):
        bank = WordBank({'a': ['x', 'y'], 'b': ['z']}, default='a')
        assert bank.flatten() == ('x', 'y', 'z')


class TestStartupBanks:
    """Tests for the startup vocabularies."""

    def test_defaults(self):
        assert SUFFIXES.default == 'modern'
        assert PREFIXES.default == 'quality'
        assert INDUSTRY_WORDS.default == 'general'

    def test_industry_lookup(self):
        assert get_industry_words('fintech')[0] == 'pay'
        assert get_industry_words('FinTech') == get_industry_words('fintech')

    def test_unknown_industry_uses_general(self):
        assert get_industry_words('underwater-basket-weaving') == INDUSTRY_WORDS['general']

    def test_all_affixes_are_non_empty(self):
        assert 'ify' in get_all_suffixes()
        assert 'cyber' in get_all_prefixes()


class TestProductBanks:
    """Tests for the product vocabularies."""

    def test_defaults(self):
        assert PRODUCT_SUFFIXES.default == 'tech'
        assert CATEGORY_WORDS.default == 'projectManagement'

    def test_category_lookup(self):
        assert get_category_words('crm')[0] == 'lead'
        assert get_category_words(None) == CATEGORY_WORDS['projectManagement']

    def test_tier_names_for_model(self):
        assert get_tier_names('enterprise')[0] == 'Enterprise'

    def test_all_tier_names(self):
        tiers = get_tier_names('all')
        assert tiers[:4] == ('Free', 'Starter', 'Basic', 'Lite')
        assert len(tiers) == sum(len(v) for v in TIER_NAMES.values())
