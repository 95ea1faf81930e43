"""Naming profiles: the word banks, style maps, and scoring for one engine.

The startup and product generators are the same engine with different
configuration, so each is a ``NamingProfile`` value rather than its own code.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .models import PatternType
from .scoring import PRODUCT_SCORING, STARTUP_SCORING, ScoringProfile
from .wordbanks import WordBank
from .wordbanks import product, startup


@dataclass(frozen=True)
class NamingProfile:
    """Everything the engine needs to know about one naming domain."""
    name: str
    topic_words: WordBank
    prefixes: WordBank
    suffixes: WordBank
    prefix_styles: Mapping[Optional[str], Tuple[str, ...]]
    suffix_styles: Mapping[Optional[str], Tuple[str, ...]]
    scoring: ScoringProfile
    default_patterns: Tuple[PatternType, ...]
    # Words joined with base words by the compound pattern
    compound_words: Tuple[str, ...] = ()
    action_verbs: Tuple[str, ...] = ()
    adjectives: Tuple[str, ...] = ()
    # How many topic/positive words widen the keyword pool (None = all)
    topic_word_limit: Optional[int] = None
    positive_word_limit: int = 0
    lowercase_keywords: bool = False
    # Bound on base words fed to the affix generators (None = all)
    affix_word_limit: Optional[int] = None
    title_suffix: bool = False
    # Walk every word for one affix category before moving to the next
    category_major_affixes: bool = False

    def prefix_categories(self, style: Optional[str] = None) -> Tuple[str, ...]:
        return self.prefix_styles.get(style, self.prefix_styles[None])

    def suffix_categories(self, style: Optional[str] = None) -> Tuple[str, ...]:
        return self.suffix_styles.get(style, self.suffix_styles[None])


STARTUP_PROFILE = NamingProfile(
    name='startup',
    topic_words=startup.INDUSTRY_WORDS,
    prefixes=startup.PREFIXES,
    suffixes=startup.SUFFIXES,
    prefix_styles=MappingProxyType({
        'modern': ('fresh', 'simple', 'action'),
        'techy': ('tech', 'motion', 'scale'),
        'playful': ('action', 'fresh', 'simple'),
        'professional': ('quality', 'open', 'scale'),
        'classic': ('quality', 'simple'),
        None: ('quality', 'fresh', 'action'),
    }),
    suffix_styles=MappingProxyType({
        'modern': ('modern', 'tech'),
        'techy': ('tech', 'modern', 'action'),
        'playful': ('modern', 'action', 'social'),
        'professional': ('premium', 'latin'),
        'classic': ('latin', 'premium', 'nature'),
        None: ('modern', 'tech', 'action'),
    }),
    scoring=STARTUP_SCORING,
    default_patterns=(
        PatternType.PREFIX_WORD,
        PatternType.WORD_SUFFIX,
        PatternType.COMPOUND,
        PatternType.MODIFIED,
        PatternType.LETTER_WORD,
    ),
    compound_words=startup.POSITIVE_WORDS,
    action_verbs=tuple(startup.PREFIXES['action']),
    adjectives=startup.POSITIVE_WORDS,
    topic_word_limit=15,
    positive_word_limit=10,
    lowercase_keywords=True,
)


PRODUCT_PROFILE = NamingProfile(
    name='product',
    topic_words=product.CATEGORY_WORDS,
    prefixes=product.PRODUCT_PREFIXES,
    suffixes=product.PRODUCT_SUFFIXES,
    prefix_styles=MappingProxyType({
        'modern': ('action', 'innovation'),
        'professional': ('quality', 'scope'),
        'playful': ('action', 'simple'),
        'technical': ('tech', 'scope'),
        None: ('action', 'simple'),
    }),
    suffix_styles=MappingProxyType({
        'modern': ('app', 'tech'),
        'professional': ('platform', 'premium'),
        'playful': ('app', 'action'),
        'technical': ('tech', 'platform'),
        None: ('tech', 'app'),
    }),
    scoring=PRODUCT_SCORING,
    default_patterns=(
        PatternType.WORD_SUFFIX,
        PatternType.PREFIX_WORD,
        PatternType.ACTION_OBJECT,
        PatternType.ADJECTIVE_NOUN,
    ),
    compound_words=product.ACTION_VERBS,
    action_verbs=product.ACTION_VERBS,
    adjectives=product.DESCRIPTIVE_ADJECTIVES,
    affix_word_limit=10,
    title_suffix=True,
    category_major_affixes=True,
)


PROFILES = MappingProxyType({
    STARTUP_PROFILE.name: STARTUP_PROFILE,
    PRODUCT_PROFILE.name: PRODUCT_PROFILE,
})
