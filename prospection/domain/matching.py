"""Lexicon matching over a hashed token-count index.

Matching is a two-level reduction: for each category, every candidate term
is tested for presence in a ``Counter`` of the token sequence. The candidate
side can be either the category's lexicon entries (cost grows with the
lexicon) or the distinct tokens of the input (cost grows with the text).
Both strategies emit entries in lexicon insertion order, so downstream sums
are bit-identical whichever one runs.
"""

from __future__ import annotations

import math
from collections import Counter
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from .categories import CATEGORY_ORDER, Category
from .lexicon import Lexicon
from .models import MatchEntry


class MatchStrategy(str, Enum):
    AUTO = "auto"
    LEXICON = "lexicon"
    TOKENS = "tokens"


def in_weight_range(weight: float, min_weight: float, max_weight: float) -> bool:
    """Inclusive on both bounds."""
    return min_weight <= weight <= max_weight


def build_token_index(tokens: Iterable[str]) -> Counter:
    return Counter(tokens)


def _discount_overlaps(index: Counter, lexicon: Lexicon, min_weight: float, max_weight: float) -> Counter:
    """Remove unigram occurrences already accounted for by matched phrases.

    Each occurrence of a multi-word lexicon term (in range, any category)
    subtracts its count from every component word, floored at zero.
    """
    adjusted = Counter(index)
    for phrase, count in index.items():
        if " " not in phrase:
            continue
        matched = False
        for category in CATEGORY_ORDER:
            weight = lexicon.weight(category, phrase)
            if weight is not None and in_weight_range(weight, min_weight, max_weight):
                matched = True
                break
        if not matched:
            continue
        for word in phrase.split(" "):
            if word in adjusted:
                adjusted[word] = max(0, adjusted[word] - count)
    return +adjusted


def _scan_lexicon(category: Category, index: Counter, lexicon: Lexicon, min_weight: float, max_weight: float) -> List[MatchEntry]:
    entries: List[MatchEntry] = []
    for term, weight in lexicon.terms(category).items():
        count = index.get(term, 0)
        if count and in_weight_range(weight, min_weight, max_weight):
            entries.append(MatchEntry(term=term, count=count, weight=weight))
    return entries


def _scan_tokens(category: Category, index: Counter, lexicon: Lexicon, min_weight: float, max_weight: float) -> List[MatchEntry]:
    terms = lexicon.terms(category)
    found: List[Tuple[int, MatchEntry]] = []
    for token, count in index.items():
        weight = terms.get(token)
        if weight is None or not in_weight_range(weight, min_weight, max_weight):
            continue
        found.append((lexicon.position(category, token), MatchEntry(term=token, count=count, weight=weight)))
    found.sort(key=lambda item: item[0])
    return [entry for _, entry in found]


def match_lexicon(
    tokens: Iterable[str],
    lexicon: Lexicon,
    *,
    min_weight: float = -math.inf,
    max_weight: float = math.inf,
    overlap: bool = True,
    strategy: MatchStrategy = MatchStrategy.AUTO,
) -> Dict[Category, List[MatchEntry]]:
    """Return the in-range lexicon entries present in ``tokens``, per category.

    Every category is present in the result; categories without matches map
    to an empty list.
    """
    index = build_token_index(tokens)
    if not overlap:
        index = _discount_overlaps(index, lexicon, min_weight, max_weight)

    strategy = MatchStrategy(strategy)
    matches: Dict[Category, List[MatchEntry]] = {}
    for category in CATEGORY_ORDER:
        if strategy is MatchStrategy.AUTO:
            use_tokens = len(index) < len(lexicon.terms(category))
        else:
            use_tokens = strategy is MatchStrategy.TOKENS
        scan = _scan_tokens if use_tokens else _scan_lexicon
        matches[category] = scan(category, index, lexicon, min_weight, max_weight)
    return matches


__all__ = ["MatchStrategy", "build_token_index", "in_weight_range", "match_lexicon"]
