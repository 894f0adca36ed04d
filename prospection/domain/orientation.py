from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .categories import CATEGORY_ORDER, Category

NO_ORIENTATION = "No temporal orientation association detected."


@dataclass(frozen=True, slots=True)
class Orientation:
    """Winning category and score; ``category`` is None below zero or when nothing was detected."""

    leader: Category
    score: float
    detected: bool = True

    @property
    def category(self) -> Optional[Category]:
        return self.leader if self.detected and self.score >= 0 else None

    def describe(self, *, more: bool = False, places: int = 9) -> str:
        score = round(self.score, places)
        if self.category is None:
            if more:
                return f"{NO_ORIENTATION} {self.leader.label} scored highest at {score}."
            return NO_ORIENTATION
        if more:
            return f"{self.leader.label} {score}"
        return self.leader.label


def select_orientation(scores: Mapping[Category, float], *, detected: bool = True) -> Orientation:
    """Arg-max over PAST, PRESENT, FUTURE; only a strictly greater score displaces an earlier one."""
    leader = CATEGORY_ORDER[0]
    best = scores[leader]
    for category in CATEGORY_ORDER[1:]:
        value = scores[category]
        if value > best:
            leader, best = category, value
    return Orientation(leader=leader, score=best, detected=detected)


def orientation_label(scores: Mapping[Category, float], *, more: bool = False, places: int = 9) -> str:
    return select_orientation(scores).describe(more=more, places=places)


__all__ = ["NO_ORIENTATION", "Orientation", "orientation_label", "select_orientation"]
