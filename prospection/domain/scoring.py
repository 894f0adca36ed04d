"""Category scoring for binary and frequency encodings."""

from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from .categories import CATEGORY_ORDER, Category
from .models import CategoryScores, MatchEntry, ScoredMatch
from .options import Encoding, SortKey


def contribution(entry: MatchEntry, encoding: Encoding, wordcount: int) -> float:
    """Weight a single matched term adds to its category, before the intercept.

    Binary encoding counts each distinct term once, however often it repeats.
    """
    if wordcount <= 0:
        return 0.0
    if encoding is Encoding.FREQUENCY:
        return (entry.count / wordcount) * entry.weight
    return entry.weight


def score_category(entries: Sequence[MatchEntry], intercept: float, encoding: Encoding, wordcount: int) -> float:
    """Intercept plus summed contributions; the bare intercept when wordcount is zero."""
    if wordcount <= 0:
        return intercept
    lex = 0.0
    for entry in entries:
        lex += contribution(entry, encoding, wordcount)
    return lex + intercept


def score_matches(matches: Mapping[Category, Sequence[MatchEntry]], encoding: Encoding, wordcount: int) -> CategoryScores:
    return {
        category: score_category(matches.get(category, ()), category.intercept, encoding, wordcount)
        for category in CATEGORY_ORDER
    }


def round_scores(scores: Mapping[Category, float], places: int) -> Dict[str, float]:
    """Round at the output boundary, keyed by category name."""
    return {category.value: round(scores[category], places) for category in CATEGORY_ORDER}


_SORT_KEYS = {
    SortKey.FREQ: lambda match: match.count,
    SortKey.WEIGHT: lambda match: match.weight,
    SortKey.LEX: lambda match: match.contribution,
}


def scored_matches(
    entries: Sequence[MatchEntry],
    encoding: Encoding,
    wordcount: int,
    *,
    sort_by: SortKey = SortKey.LEX,
    places: int = 9,
) -> List[ScoredMatch]:
    """Annotate matches with their contribution, sorted descending by ``sort_by``.

    Ties fall back to the term, ascending.
    """
    scored = [
        ScoredMatch(
            term=entry.term,
            count=entry.count,
            weight=entry.weight,
            contribution=round(contribution(entry, encoding, wordcount), places),
        )
        for entry in entries
    ]
    key = _SORT_KEYS[SortKey(sort_by)]
    scored.sort(key=lambda match: match.term)
    scored.sort(key=key, reverse=True)
    return scored


__all__ = ["contribution", "round_scores", "score_category", "score_matches", "scored_matches"]
