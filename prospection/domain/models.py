"""Per-call value objects produced by the matcher and scorer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .categories import Category


@dataclass(frozen=True, slots=True)
class MatchEntry:
    """A lexicon term found in the token sequence, with its occurrence count."""

    term: str
    count: int
    weight: float

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"MatchEntry count must be >= 1, got {self.count}")


@dataclass(frozen=True, slots=True)
class ScoredMatch:
    """A match annotated with its contribution to the category score."""

    term: str
    count: int
    weight: float
    contribution: float

    def as_tuple(self) -> Tuple[str, int, float, float]:
        return (self.term, self.count, self.weight, self.contribution)


CategoryScores = Dict[Category, float]


__all__ = ["CategoryScores", "MatchEntry", "ScoredMatch"]
