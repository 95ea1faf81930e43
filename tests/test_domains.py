"""Tests for heuristic domain suggestions."""

from namecraft.domains import DomainSynthesizer
from namecraft.models import GeneratedName, NameWithDomain, PatternType


class TestSuggest:
    """Tests for DomainSynthesizer.suggest."""

    def test_fixed_set_of_nine(self):
        suggestions = DomainSynthesizer().suggest('DataHub')
        assert [s.domain for s in suggestions] == [
            'datahub.com', 'datahub.io', 'datahub.co', 'datahub.ai', 'datahub.app',
            'getdatahub.com', 'trydatahub.com', 'usedatahub.com', 'datahubhq.com',
        ]

    def test_com_is_assumed_taken(self):
        suggestions = DomainSynthesizer().suggest('Zentrova')
        assert suggestions[0].tld == '.com'
        assert suggestions[0].likely_available is False

    def test_variants_assumed_free(self):
        suggestions = DomainSynthesizer().suggest('ab')
        assert all(s.likely_available for s in suggestions[5:])

    def test_length_thresholds(self):
        by_tld = {s.tld: s.likely_available for s in DomainSynthesizer().suggest('abcd')[:5]}
        assert by_tld == {'.com': False, '.io': True, '.co': False, '.ai': True, '.app': True}

        short = DomainSynthesizer().suggest('abc')[:5]
        assert not any(s.likely_available for s in short)

    def test_domain_shape(self):
        for s in DomainSynthesizer().suggest('Cloudify'):
            assert s.tld.startswith('.')
            assert s.domain.endswith(s.tld)
            assert s.domain == s.domain.lower()


class TestEnrich:
    """Tests for DomainSynthesizer.enrich."""

    def test_enrich_wraps_names(self):
        name = GeneratedName(name='Flickr', pattern=PatternType.MODIFIED, source_words=('flicker',), score=70)
        enriched = DomainSynthesizer().enrich([name])
        assert isinstance(enriched[0], NameWithDomain)
        assert enriched[0].name == 'Flickr'
        assert enriched[0].score == 70
        assert len(enriched[0].domains) == 9

    def test_to_dict_includes_domains(self):
        name = GeneratedName(name='Flickr', pattern=PatternType.MODIFIED, source_words=('flicker',), score=70)
        data = DomainSynthesizer().enrich([name])[0].to_dict()
        assert data['pattern'] == 'modified'
        assert data['domains'][0] == {'domain': 'flickr.com', 'tld': '.com', 'likely_available': False}
