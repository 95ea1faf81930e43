"""Static categorized vocabularies used by the pattern generators."""

import re
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple


class WordBank(Mapping):
    """Read-only mapping of category tag to an ordered tuple of word fragments.

    Unknown or empty tags resolve to ``default`` instead of raising, so
    ``lookup`` never returns an empty list.
    """

    def __init__(self, categories: Mapping[str, Iterable[str]], default: str):
        frozen: Dict[str, Tuple[str, ...]] = {}
        for tag, words in categories.items():
            words = tuple(words)
            if not words:
                raise ValueError(f"Word bank category '{tag}' is empty")
            frozen[tag] = words
        if default not in frozen:
            raise ValueError(f"Default category '{default}' is not defined")
        self._categories = MappingProxyType(frozen)
        self._normalized = MappingProxyType(
            {self._normalize(tag): tag for tag in frozen}
        )
        self.default = default

    @staticmethod
    def _normalize(tag: str) -> str:
        return re.sub(r'[^a-z]', '', tag.lower())

    def __getitem__(self, tag: str) -> Tuple[str, ...]:
        return self._categories[tag]

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"WordBank({list(self._categories)!r}, default={self.default!r})"

    def lookup(self, tag: Optional[str] = None) -> Tuple[str, ...]:
        """Case-insensitive lookup that ignores non-letters in the tag."""
        if not tag:
            return self._categories[self.default]
        key = self._normalized.get(self._normalize(tag))
        if key is None:
            return self._categories[self.default]
        return self._categories[key]

    def flatten(self) -> Tuple[str, ...]:
        """All words across categories, in category order."""
        return tuple(word for words in self._categories.values() for word in words)


__all__ = ['WordBank']
