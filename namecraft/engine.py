"""Pattern-only name generation engine."""

import logging
from typing import Dict, List, Optional

from .domains import DomainSynthesizer
from .generators import AffixGenerator, CompoundGenerator, SpellingGenerator
from .models import GENERATIVE_PATTERNS, GeneratedName, GenerateOptions, NameWithDomain, PatternType
from .profiles import NamingProfile, PRODUCT_PROFILE, STARTUP_PROFILE
from .ranking import rank_candidates
from .scoring import NameScorer

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 50


class NameEngine:
    """Generates, scores, and ranks names for one naming profile.

    Generation is exhaustive and deterministic: the same options always
    produce the same ranked list.
    """

    def __init__(self, profile: NamingProfile = STARTUP_PROFILE, domains: Optional[DomainSynthesizer] = None):
        self.profile = profile
        self.scorer = NameScorer(profile.scoring)
        self.affixes = AffixGenerator(self.scorer)
        self.compounds = CompoundGenerator(self.scorer)
        self.spelling = SpellingGenerator(self.scorer)
        self.domains = domains or DomainSynthesizer()

    def base_words(self, options: GenerateOptions) -> List[str]:
        """Keywords widened with topic (and, for startups, positive) words."""
        p = self.profile
        words = list(options.keywords)
        words.extend(p.topic_words.lookup(options.topic)[:p.topic_word_limit])
        words.extend(p.compound_words[:p.positive_word_limit])

        if p.lowercase_keywords:
            words = [w.lower() for w in words]

        # Order-preserving dedup
        return list(dict.fromkeys(words))

    def _run_pattern(self, pattern: PatternType, words: List[str], style: Optional[str]) -> List[GeneratedName]:
        p = self.profile
        if pattern is PatternType.PREFIX_WORD:
            return self.affixes.generate_prefix_word(
                words, p.prefixes, p.prefix_categories(style),
                word_limit=p.affix_word_limit, category_major=p.category_major_affixes
            )
        if pattern is PatternType.WORD_SUFFIX:
            return self.affixes.generate_word_suffix(
                words, p.suffixes, p.suffix_categories(style),
                word_limit=p.affix_word_limit, title_suffix=p.title_suffix,
                category_major=p.category_major_affixes
            )
        if pattern is PatternType.COMPOUND:
            return self.compounds.generate_compound(words, p.compound_words)
        if pattern is PatternType.MODIFIED:
            return self.spelling.generate(words)
        if pattern is PatternType.LETTER_WORD:
            return self.affixes.generate_letter_word(words)
        if pattern is PatternType.ACTION_OBJECT:
            return self.compounds.generate_action_object(p.action_verbs, words)
        if pattern is PatternType.ADJECTIVE_NOUN:
            return self.compounds.generate_adjective_noun(p.adjectives, words)
        # Catalog-only patterns (invented, acronym, ...) have no generator
        return []

    def selected_patterns(self, options: GenerateOptions) -> List[PatternType]:
        """Requested patterns in generation order, or the profile defaults."""
        if options.patterns is None:
            return list(self.profile.default_patterns)
        requested = set(options.patterns)
        ordered = [pt for pt in self.profile.default_patterns if pt in requested]
        ordered.extend(pt for pt in GENERATIVE_PATTERNS if pt in requested and pt not in ordered)
        return ordered

    def generate_streams(self, options: GenerateOptions) -> Dict[PatternType, List[GeneratedName]]:
        """Raw scored candidates per pattern, before ranking."""
        words = self.base_words(options)
        return {
            pattern: self._run_pattern(pattern, words, options.style)
            for pattern in self.selected_patterns(options)
        }

    def generate_names(self, options: Optional[GenerateOptions] = None) -> List[GeneratedName]:
        """Pattern-based generation; no external calls."""
        options = options or GenerateOptions()
        streams = self.generate_streams(options)
        candidates = sum(len(s) for s in streams.values())

        count = DEFAULT_COUNT if options.count is None else options.count
        names = rank_candidates(list(streams.values()), min_score=options.min_score, count=count)
        logger.debug(
            "%s engine: %d candidates from %d patterns -> %d names",
            self.profile.name, candidates, len(streams), len(names)
        )
        return names

    def generate_names_with_domains(self, options: Optional[GenerateOptions] = None) -> List[NameWithDomain]:
        return self.domains.enrich(self.generate_names(options))


_engines: Dict[str, NameEngine] = {}


def get_engine(profile: NamingProfile = STARTUP_PROFILE) -> NameEngine:
    """Shared engine per profile; engines hold no mutable state."""
    if profile.name not in _engines:
        _engines[profile.name] = NameEngine(profile)
    return _engines[profile.name]


def generate_names(options: Optional[GenerateOptions] = None, **kwargs) -> List[GeneratedName]:
    """Generate startup names from patterns.

    Accepts either a ``GenerateOptions`` or its fields as keyword arguments::

        generate_names(keywords=['cloud', 'data'], industry='saas', count=20)
    """
    if options is None:
        options = GenerateOptions(**kwargs)
    return get_engine(STARTUP_PROFILE).generate_names(options)


def generate_names_with_domains(options: Optional[GenerateOptions] = None, **kwargs) -> List[NameWithDomain]:
    if options is None:
        options = GenerateOptions(**kwargs)
    return get_engine(STARTUP_PROFILE).generate_names_with_domains(options)


def generate_product_names(options: Optional[GenerateOptions] = None, **kwargs) -> List[GeneratedName]:
    """Generate product and feature names from patterns (DataHub, TrackTask)."""
    if options is None:
        options = GenerateOptions(**kwargs)
    return get_engine(PRODUCT_PROFILE).generate_names(options)
