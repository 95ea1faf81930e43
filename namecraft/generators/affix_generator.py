"""Affix generators: prefix + word, word + suffix, letter + word."""

from typing import Iterator, List, Optional, Sequence, Tuple

from ..models import GeneratedName, PatternType
from ..scoring import NameScorer
from ..wordbanks import WordBank


class AffixGenerator:
    """Generates names by attaching prefixes, suffixes, or single letters."""

    # Only the first few affixes of each category are used
    AFFIXES_PER_CATEGORY = 5

    # iCloud, eCommerce, xFactor
    LETTERS = ('i', 'e', 'x', 'a', 'o', 'u', 'n')

    def __init__(self, scorer: Optional[NameScorer] = None):
        self.scorer = scorer or NameScorer()

    def _make(self, name: str, pattern: PatternType, source_words) -> GeneratedName:
        return GeneratedName(
            name=name,
            pattern=pattern,
            source_words=tuple(source_words),
            score=self.scorer.score(name),
        )

    def _pairs(
        self,
        words: Sequence[str],
        bank: WordBank,
        categories: Sequence[str],
        word_limit: Optional[int],
        category_major: bool
    ) -> Iterator[Tuple[str, str]]:
        """(word, affix) pairs, word-major unless ``category_major``."""
        words = words[:word_limit]
        if category_major:
            for category in categories:
                for word in words:
                    for affix in bank.lookup(category)[:self.AFFIXES_PER_CATEGORY]:
                        yield word, affix
        else:
            for word in words:
                for category in categories:
                    for affix in bank.lookup(category)[:self.AFFIXES_PER_CATEGORY]:
                        yield word, affix

    def generate_prefix_word(
        self,
        words: Sequence[str],
        prefixes: WordBank,
        categories: Sequence[str],
        word_limit: Optional[int] = None,
        category_major: bool = False
    ) -> List[GeneratedName]:
        """Prefix + word (QuickBooks)."""
        results = []

        for word, prefix in self._pairs(words, prefixes, categories, word_limit, category_major):
            name = prefix.capitalize() + word.capitalize()
            results.append(self._make(name, PatternType.PREFIX_WORD, (prefix, word)))

        return results

    def generate_word_suffix(
        self,
        words: Sequence[str],
        suffixes: WordBank,
        categories: Sequence[str],
        word_limit: Optional[int] = None,
        title_suffix: bool = False,
        category_major: bool = False
    ) -> List[GeneratedName]:
        """Word + suffix (Cloudify).

        With ``title_suffix`` the suffix is capitalized (DataHub); otherwise it
        is appended lowercase and a trailing 'e' is dropped before an
        'i'-initial suffix (Simplify).
        """
        results = []

        for word, suffix in self._pairs(words, suffixes, categories, word_limit, category_major):
            if title_suffix:
                name = word.capitalize() + suffix.capitalize()
            else:
                base = word[:-1] if word.endswith('e') and suffix.startswith('i') else word
                name = base.capitalize() + suffix
            results.append(self._make(name, PatternType.WORD_SUFFIX, (word, suffix)))

        return results

    def generate_letter_word(self, words: Sequence[str]) -> List[GeneratedName]:
        """Single lowercase letter + word (iCloud)."""
        results = []

        for word in words:
            for letter in self.LETTERS:
                name = letter + word.capitalize()
                results.append(self._make(name, PatternType.LETTER_WORD, (letter, word)))

        return results
