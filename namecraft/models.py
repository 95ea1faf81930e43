"""Core data types shared by generators, scoring, and the pipeline."""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import InvalidOptionsError


class PatternType(str, Enum):
    """Naming pattern tags."""
    PREFIX_WORD = 'prefix_word'                # QuickBooks
    WORD_SUFFIX = 'word_suffix'                # Cloudify
    PREFIX_WORD_SUFFIX = 'prefix_word_suffix'  # SuperCloudly
    COMPOUND = 'compound'                      # MailChimp
    PORTMANTEAU = 'portmanteau'                # Instagram
    MODIFIED = 'modified'                      # Flickr
    INVENTED = 'invented'                      # Spotify
    REAL_WORD = 'real_word'                    # Slack
    ACRONYM = 'acronym'                        # IBM
    LETTER_WORD = 'letter_word'                # iCloud
    WORD_LETTER = 'word_letter'                # Web3
    ACTION_OBJECT = 'action_object'            # AutoSync
    ADJECTIVE_NOUN = 'adjective_noun'          # SmartSearch


# Pattern types that have a generator behind them
GENERATIVE_PATTERNS = (
    PatternType.PREFIX_WORD,
    PatternType.WORD_SUFFIX,
    PatternType.COMPOUND,
    PatternType.MODIFIED,
    PatternType.LETTER_WORD,
    PatternType.ACTION_OBJECT,
    PatternType.ADJECTIVE_NOUN,
)

STYLES = ('modern', 'classic', 'playful', 'professional', 'techy', 'technical')


@dataclass(frozen=True)
class Pattern:
    """Catalog entry describing a naming pattern."""
    type: PatternType
    name: str
    description: str
    examples: Tuple[str, ...]
    weight: int  # documentation only, generation is exhaustive


@dataclass(frozen=True)
class GeneratedName:
    """A scored name candidate."""
    name: str
    pattern: PatternType
    source_words: Tuple[str, ...]
    score: int
    reasoning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'name': self.name,
            'pattern': self.pattern.value,
            'source_words': list(self.source_words),
            'score': self.score,
        }
        if self.reasoning:
            result['reasoning'] = self.reasoning
        return result


@dataclass(frozen=True)
class DomainSuggestion:
    """Heuristic domain suggestion; never a network lookup."""
    domain: str
    tld: str
    likely_available: bool


@dataclass(frozen=True)
class NameWithDomain(GeneratedName):
    """A generated name enriched with domain suggestions."""
    domains: Tuple[DomainSuggestion, ...] = ()

    @classmethod
    def wrap(cls, name: GeneratedName, domains=()) -> 'NameWithDomain':
        return cls(
            name=name.name,
            pattern=name.pattern,
            source_words=name.source_words,
            score=name.score,
            reasoning=name.reasoning,
            domains=tuple(domains),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result['domains'] = [asdict(d) for d in self.domains]
        return result


@dataclass
class GenerateOptions:
    """Options accepted by the pattern path and the AI pipeline.

    ``industry`` is used by the startup profile and ``category`` by the
    product profile; when both are set ``category`` wins.
    """
    keywords: List[str] = field(default_factory=list)
    industry: Optional[str] = None
    category: Optional[str] = None
    style: Optional[str] = None
    # None means the entry point's own default (50 for patterns, 20 for the pipeline)
    count: Optional[int] = None
    patterns: Optional[List[PatternType]] = None
    min_score: int = 40
    validate: bool = False
    include_domains: bool = True

    def __post_init__(self):
        if self.count is not None and self.count < 0:
            raise InvalidOptionsError(f"count must be >= 0, got {self.count}")
        if self.style is not None and self.style not in STYLES:
            raise InvalidOptionsError(
                f"Unknown style '{self.style}'. Available styles: {', '.join(STYLES)}"
            )
        if self.patterns is not None:
            resolved = []
            for pattern in self.patterns:
                try:
                    resolved.append(PatternType(pattern))
                except ValueError:
                    raise InvalidOptionsError(f"Unknown pattern type '{pattern}'") from None
            self.patterns = resolved

    @property
    def topic(self) -> Optional[str]:
        """Word-bank tag to look up: category if given, else industry."""
        return self.category or self.industry
