"""Merging, deduplication, and ranking of candidate streams."""

from typing import Iterable, List, Sequence, TypeVar

from .models import GeneratedName

N = TypeVar('N', bound=GeneratedName)


def filter_by_score(names: Iterable[N], min_score: int) -> List[N]:
    return [n for n in names if n.score >= min_score]


def dedupe_names(names: Iterable[N]) -> List[N]:
    """Drop case-insensitive repeats, keeping the first occurrence."""
    seen = set()
    unique = []
    for n in names:
        key = n.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(n)
    return unique


def sort_by_score(names: Iterable[N]) -> List[N]:
    """Stable sort, highest score first."""
    return sorted(names, key=lambda n: n.score, reverse=True)


def rank_candidates(
    streams: Sequence[Iterable[N]],
    min_score: int = 0,
    count: int = 50
) -> List[N]:
    """Merge candidate streams into a ranked, deduplicated shortlist.

    Order of operations matters: the threshold is applied before dedup, so a
    low-scoring first spelling never shadows a higher-scoring later one.
    """
    merged = [n for stream in streams for n in stream]
    ranked = sort_by_score(dedupe_names(filter_by_score(merged, min_score)))
    return ranked[:count]
