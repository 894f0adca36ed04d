"""Lexicon-based temporal orientation scoring (past, present, future)."""

from __future__ import annotations

from prospection.analysis import Analysis, Analyzer, analyze, get_analyzer
from prospection.domain import (
    AnalysisOptions,
    Category,
    Encoding,
    Lexicon,
    LexiconError,
    NO_ORIENTATION,
    OutputMode,
)

__version__ = "0.3.0"

__all__ = [
    "Analysis",
    "AnalysisOptions",
    "Analyzer",
    "Category",
    "Encoding",
    "Lexicon",
    "LexiconError",
    "NO_ORIENTATION",
    "OutputMode",
    "analyze",
    "get_analyzer",
    "__version__",
]
