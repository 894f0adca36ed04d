from __future__ import annotations

from enum import Enum
from typing import Mapping, Tuple


class Category(str, Enum):
    """Temporal categories scored by the lexicon."""

    PAST = "PAST"
    PRESENT = "PRESENT"
    FUTURE = "FUTURE"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def intercept(self) -> float:
        return INTERCEPTS[self]


# Tie-break order for orientation: earlier categories win ties.
CATEGORY_ORDER: Tuple[Category, ...] = (Category.PAST, Category.PRESENT, Category.FUTURE)

INTERCEPTS: Mapping[Category, float] = {
    Category.PAST: -0.649406376419,
    Category.PRESENT: 0.236749577324,
    Category.FUTURE: -0.570547567181,
}


def parse_category(value: object) -> Category:
    """Return the Category named by ``value`` (case-insensitive)."""

    if isinstance(value, Category):
        return value
    text = str(value or "").strip().upper()
    try:
        return Category(text)
    except ValueError:
        raise ValueError(f"Unknown temporal category: {value!r}") from None


__all__ = ["CATEGORY_ORDER", "Category", "INTERCEPTS", "parse_category"]
