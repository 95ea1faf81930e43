"""Modified-spelling generator (Flickr, Toolz, Cloudify)."""

from typing import List, Optional, Sequence

from ..models import GeneratedName, PatternType
from ..modifiers import Applied, SPELLING_MODIFIERS, apply_modifier
from ..scoring import NameScorer


class SpellingGenerator:
    """Applies orthographic modifiers to base words."""

    def __init__(self, scorer: Optional[NameScorer] = None, modifiers: Sequence[str] = SPELLING_MODIFIERS):
        self.scorer = scorer or NameScorer()
        self.modifiers = tuple(modifiers)

    def generate(self, words: Sequence[str]) -> List[GeneratedName]:
        """Respell each word with every modifier, skipping no-ops."""
        results = []

        for word in words:
            for modifier_name in self.modifiers:
                result = apply_modifier(word, modifier_name)
                if not isinstance(result, Applied) or result.word == word:
                    continue
                name = result.word.capitalize()
                results.append(GeneratedName(
                    name=name,
                    pattern=PatternType.MODIFIED,
                    source_words=(word,),
                    score=self.scorer.score(name),
                ))

        return results
