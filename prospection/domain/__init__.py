"""Domain-level objects shared by the engine, workers and adapters."""

from __future__ import annotations

from .categories import CATEGORY_ORDER, INTERCEPTS, Category, parse_category
from .lexicon import Lexicon, LexiconError
from .matching import MatchStrategy, match_lexicon
from .models import MatchEntry, ScoredMatch
from .ngrams import NGrams, expand_tokens
from .options import AnalysisOptions, DEFAULT_OPTIONS, Encoding, Locale, OutputMode, SortKey
from .orientation import NO_ORIENTATION, Orientation, orientation_label, select_orientation
from .scoring import contribution, round_scores, score_category, score_matches, scored_matches

__all__ = [
    "AnalysisOptions",
    "CATEGORY_ORDER",
    "Category",
    "DEFAULT_OPTIONS",
    "Encoding",
    "INTERCEPTS",
    "Lexicon",
    "LexiconError",
    "Locale",
    "MatchEntry",
    "MatchStrategy",
    "NGrams",
    "NO_ORIENTATION",
    "Orientation",
    "OutputMode",
    "ScoredMatch",
    "SortKey",
    "contribution",
    "expand_tokens",
    "match_lexicon",
    "orientation_label",
    "parse_category",
    "round_scores",
    "score_category",
    "score_matches",
    "scored_matches",
    "select_orientation",
]
