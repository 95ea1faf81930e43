"""Name scoring - a deterministic brandability heuristic."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ScoringProfile:
    """Thresholds and bonuses for one naming configuration."""
    name: str
    ideal_length: Tuple[int, int]
    ideal_bonus: int
    acceptable_length: Tuple[int, int]
    acceptable_bonus: int
    long_threshold: int
    long_penalty: int
    vowel_band: Tuple[float, float]
    vowel_bonus: int = 10
    # Ratios outside this band are penalized; None disables the penalty
    poor_vowel_band: Optional[Tuple[float, float]] = None
    poor_vowel_penalty: int = -5
    good_suffixes: Tuple[str, ...] = ()
    suffix_bonus: int = 10
    camel_case_bonus: int = 0
    consonant_bonus: int = 5
    leading_letter_bonus: int = 0
    base: int = 50


STARTUP_SCORING = ScoringProfile(
    name='startup',
    ideal_length=(5, 10),
    ideal_bonus=15,
    acceptable_length=(4, 12),
    acceptable_bonus=10,
    long_threshold=15,
    long_penalty=-10,
    vowel_band=(0.3, 0.5),
    poor_vowel_band=(0.2, 0.6),
    leading_letter_bonus=5,
)

PRODUCT_SCORING = ScoringProfile(
    name='product',
    ideal_length=(4, 12),
    ideal_bonus=15,
    acceptable_length=(3, 15),
    acceptable_bonus=10,
    long_threshold=20,
    long_penalty=-10,
    vowel_band=(0.25, 0.5),
    good_suffixes=('Hub', 'Base', 'Flow', 'Sync', 'Desk', 'Box', 'Kit', 'Pro', 'ly', 'ify', 'io'),
    camel_case_bonus=5,
)


@dataclass
class ScoreBreakdown:
    """Per-rule contributions to a name's score."""
    name: str
    total: int
    length: int
    vowels: int
    suffix: int
    camel_case: int
    consonants: int
    leading_letter: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'total': self.total,
            'breakdown': {
                'length': self.length,
                'vowels': self.vowels,
                'suffix': self.suffix,
                'camel_case': self.camel_case,
                'consonants': self.consonants,
                'leading_letter': self.leading_letter,
            }
        }


class NameScorer:
    """Scores candidate names on a 0-100 scale."""

    VOWELS = re.compile(r'[aeiou]', re.IGNORECASE)
    CONSONANT_RUN = re.compile(r'[bcdfghjklmnpqrstvwxyz]{4,}', re.IGNORECASE)
    CAMEL_CASE = re.compile(r'^[A-Z][a-z]+[A-Z]')
    # Vowels plus the consonants brand names most often open with
    LEADING_LETTERS = re.compile(r'^[aeiousmtbcnp]', re.IGNORECASE)

    def __init__(self, profile: ScoringProfile = STARTUP_SCORING):
        self.profile = profile

    def _score_length(self, name: str) -> int:
        p = self.profile
        length = len(name)
        if p.ideal_length[0] <= length <= p.ideal_length[1]:
            return p.ideal_bonus
        elif p.acceptable_length[0] <= length <= p.acceptable_length[1]:
            return p.acceptable_bonus
        elif length > p.long_threshold:
            return p.long_penalty
        return 0

    def _score_vowels(self, name: str) -> int:
        p = self.profile
        if not name:
            return 0
        ratio = len(self.VOWELS.findall(name)) / len(name)
        if p.vowel_band[0] <= ratio <= p.vowel_band[1]:
            return p.vowel_bonus
        if p.poor_vowel_band and (ratio < p.poor_vowel_band[0] or ratio > p.poor_vowel_band[1]):
            return p.poor_vowel_penalty
        return 0

    def _score_suffix(self, name: str) -> int:
        if any(name.endswith(s) for s in self.profile.good_suffixes):
            return self.profile.suffix_bonus
        return 0

    def _score_camel_case(self, name: str) -> int:
        if self.profile.camel_case_bonus and self.CAMEL_CASE.match(name):
            return self.profile.camel_case_bonus
        return 0

    def _score_consonants(self, name: str) -> int:
        if self.CONSONANT_RUN.search(name):
            return 0
        return self.profile.consonant_bonus

    def _score_leading_letter(self, name: str) -> int:
        if self.profile.leading_letter_bonus and self.LEADING_LETTERS.match(name):
            return self.profile.leading_letter_bonus
        return 0

    def breakdown(self, name: str) -> ScoreBreakdown:
        """Score a name and keep each rule's contribution."""
        parts = {
            'length': self._score_length(name),
            'vowels': self._score_vowels(name),
            'suffix': self._score_suffix(name),
            'camel_case': self._score_camel_case(name),
            'consonants': self._score_consonants(name),
            'leading_letter': self._score_leading_letter(name),
        }
        total = max(0, min(100, self.profile.base + sum(parts.values())))
        return ScoreBreakdown(name=name, total=total, **parts)

    def score(self, name: str) -> int:
        return self.breakdown(name).total

    def score_batch(self, names: List[str]) -> List[int]:
        return [self.score(name) for name in names]
