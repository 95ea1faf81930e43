"""Domain suggestions with heuristic availability estimates.

Nothing here touches the network; ``likely_available`` is a guess based on
how contested a TLD is and how short the name is.
"""

from typing import Iterable, List, Sequence, Tuple

from .models import DomainSuggestion, GeneratedName, NameWithDomain


class DomainSynthesizer:
    """Derives a fixed set of domain variations from a name."""

    # (tld, minimum name length for the estimate to lean available)
    # .com is assumed taken regardless of length
    DEFAULT_TLDS: Tuple[Tuple[str, int], ...] = (
        ('.com', 0),
        ('.io', 4),
        ('.co', 5),
        ('.ai', 4),
        ('.app', 4),
    )

    # Discovery variants on .com; these usually are free
    DEFAULT_PREFIXES: Tuple[str, ...] = ('get', 'try', 'use')
    DEFAULT_SUFFIXES: Tuple[str, ...] = ('hq',)

    def __init__(
        self,
        tlds: Sequence[Tuple[str, int]] = DEFAULT_TLDS,
        prefixes: Sequence[str] = DEFAULT_PREFIXES,
        suffixes: Sequence[str] = DEFAULT_SUFFIXES
    ):
        self.tlds = tuple(tlds)
        self.prefixes = tuple(prefixes)
        self.suffixes = tuple(suffixes)

    def suggest(self, name: str) -> List[DomainSuggestion]:
        """Domain variations for a single name, in a fixed order."""
        base = name.lower()
        suggestions = []

        for tld, min_length in self.tlds:
            if tld == '.com':
                likely = False
            else:
                likely = len(base) >= min_length
            suggestions.append(DomainSuggestion(domain=f"{base}{tld}", tld=tld, likely_available=likely))

        for prefix in self.prefixes:
            suggestions.append(DomainSuggestion(domain=f"{prefix}{base}.com", tld='.com', likely_available=True))

        for suffix in self.suffixes:
            suggestions.append(DomainSuggestion(domain=f"{base}{suffix}.com", tld='.com', likely_available=True))

        return suggestions

    def enrich(self, names: Iterable[GeneratedName]) -> List[NameWithDomain]:
        return [NameWithDomain.wrap(n, self.suggest(n.name)) for n in names]
