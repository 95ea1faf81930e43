"""Two-word generators: compounds, action + object, adjective + noun."""

from typing import List, Optional, Sequence

from ..models import GeneratedName, PatternType
from ..scoring import NameScorer


class CompoundGenerator:
    """Generates names by joining two capitalized words (MailChimp, AutoSync)."""

    # Cross products are bounded to the head of each list
    COMPOUND_LIMIT = 10
    FEATURE_LIMIT = 8

    def __init__(self, scorer: Optional[NameScorer] = None):
        self.scorer = scorer or NameScorer()

    def _pair(
        self,
        first_words: Sequence[str],
        second_words: Sequence[str],
        pattern: PatternType,
        limit: int,
        allow_same: bool = True
    ) -> List[GeneratedName]:
        results = []

        for word1 in first_words[:limit]:
            for word2 in second_words[:limit]:
                if not allow_same and word1 == word2:
                    continue
                name = word1.capitalize() + word2.capitalize()
                results.append(GeneratedName(
                    name=name,
                    pattern=pattern,
                    source_words=(word1, word2),
                    score=self.scorer.score(name),
                ))

        return results

    def generate_compound(self, words1: Sequence[str], words2: Sequence[str]) -> List[GeneratedName]:
        """Combine two word lists, never pairing a word with itself."""
        return self._pair(words1, words2, PatternType.COMPOUND, self.COMPOUND_LIMIT, allow_same=False)

    def generate_action_object(self, actions: Sequence[str], objects: Sequence[str]) -> List[GeneratedName]:
        """TrackTask, SyncLead."""
        return self._pair(actions, objects, PatternType.ACTION_OBJECT, self.FEATURE_LIMIT)

    def generate_adjective_noun(self, adjectives: Sequence[str], nouns: Sequence[str]) -> List[GeneratedName]:
        """SmartSearch, QuickView."""
        return self._pair(adjectives, nouns, PatternType.ADJECTIVE_NOUN, self.FEATURE_LIMIT)
