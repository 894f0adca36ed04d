"""Immutable category -> term -> weight table."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Set, Tuple

from .categories import CATEGORY_ORDER, Category, parse_category


class LexiconError(ValueError):
    """Raised when lexicon data is missing categories or holds bad weights."""


class Lexicon:
    """Read-only weighted lexicon shared by every analysis call.

    Terms are single words or space-joined phrases of up to three words.
    Each category keeps its terms in insertion order, and that order is the
    summation order used by the scorer.
    """

    __slots__ = ("_entries", "_positions", "_arities")

    def __init__(self, entries: Mapping[object, Mapping[str, object]]) -> None:
        frozen: Dict[Category, Mapping[str, float]] = {}
        positions: Dict[Category, Mapping[str, int]] = {}
        arities: Set[int] = set()

        for raw_category, terms in entries.items():
            try:
                category = parse_category(raw_category)
            except ValueError as exc:
                raise LexiconError(str(exc)) from exc
            if not isinstance(terms, Mapping):
                raise LexiconError(f"Category {category.value} must map terms to weights")
            table: Dict[str, float] = {}
            for raw_term, raw_weight in terms.items():
                term = " ".join(str(raw_term).lower().split())
                if not term:
                    continue
                if isinstance(raw_weight, bool):
                    raise LexiconError(f"Weight for {term!r} in {category.value} is not numeric")
                try:
                    weight = float(raw_weight)
                except (TypeError, ValueError):
                    raise LexiconError(f"Weight for {term!r} in {category.value} is not numeric") from None
                if not math.isfinite(weight):
                    raise LexiconError(f"Weight for {term!r} in {category.value} is not finite")
                table[term] = weight
                arities.add(term.count(" ") + 1)
            frozen[category] = MappingProxyType(table)
            positions[category] = MappingProxyType({term: index for index, term in enumerate(table)})

        missing = [category.value for category in CATEGORY_ORDER if category not in frozen]
        if missing:
            raise LexiconError(f"Lexicon is missing categories: {', '.join(missing)}")

        self._entries: Mapping[Category, Mapping[str, float]] = MappingProxyType(frozen)
        self._positions: Mapping[Category, Mapping[str, int]] = MappingProxyType(positions)
        self._arities: Tuple[int, ...] = tuple(sorted(arities))

    def __getitem__(self, category: object) -> Mapping[str, float]:
        return self._entries[parse_category(category)]

    def __iter__(self) -> Iterator[Category]:
        return iter(CATEGORY_ORDER)

    def __len__(self) -> int:
        return sum(len(terms) for terms in self._entries.values())

    def __repr__(self) -> str:
        sizes = ", ".join(f"{category.value}={len(self._entries[category])}" for category in CATEGORY_ORDER)
        return f"Lexicon({sizes})"

    def terms(self, category: Category) -> Mapping[str, float]:
        return self._entries[category]

    def weight(self, category: Category, term: str) -> Optional[float]:
        return self._entries[category].get(term)

    def position(self, category: Category, term: str) -> int:
        """Insertion index of ``term`` within ``category``."""
        return self._positions[category][term]

    @property
    def arities(self) -> Tuple[int, ...]:
        """Distinct word counts of the terms, ascending."""
        return self._arities

    def weight_bounds(self) -> Tuple[float, float]:
        weights = [weight for terms in self._entries.values() for weight in terms.values()]
        if not weights:
            return (0.0, 0.0)
        return (min(weights), max(weights))

    def describe(self) -> Dict[str, object]:
        low, high = self.weight_bounds()
        return {
            "categories": {category.value: len(self._entries[category]) for category in CATEGORY_ORDER},
            "entries": len(self),
            "arities": list(self._arities),
            "min_weight": low,
            "max_weight": high,
        }


__all__ = ["Lexicon", "LexiconError"]
