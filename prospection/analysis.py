"""Temporal orientation analysis: normalize, tokenize, match, score, dispatch.

``Analyzer`` holds only read-only collaborators (lexicon, tokenizer and
spelling translator), so one instance can serve concurrent callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from prospection.adapters.lexicon_store import get_lexicon
from prospection.adapters.spelling import translate_gb_to_us
from prospection.adapters.tokenizer import tokenize
from prospection.domain import (
    CATEGORY_ORDER,
    AnalysisOptions,
    Category,
    Lexicon,
    Locale,
    MatchEntry,
    MatchStrategy,
    OutputMode,
    SortKey,
    expand_tokens,
    match_lexicon,
    round_scores,
    score_matches,
    scored_matches,
    select_orientation,
)

logger = logging.getLogger(__name__)

Tokenizer = Callable[[str], Sequence[str]]
Translator = Callable[[str], str]
MatchRow = Tuple[str, int, float, float]
Result = Union[str, Dict[str, Any]]


@dataclass(frozen=True)
class Analysis:
    """Everything computed for one input before it is shaped for output."""

    text: str
    tokens: Tuple[str, ...]
    wordcount: int
    matches: Dict[Category, List[MatchEntry]]
    scores: Dict[Category, float]
    options: AnalysisOptions

    @property
    def has_tokens(self) -> bool:
        return bool(self.tokens)

    def lex(self) -> Dict[str, float]:
        return round_scores(self.scores, self.options.places)

    def match_rows(self, sort_by: Optional[SortKey] = None) -> Dict[str, List[MatchRow]]:
        key = sort_by or self.options.sort_by
        return {
            category.value: [
                match.as_tuple()
                for match in scored_matches(
                    self.matches[category],
                    self.options.encoding,
                    self.wordcount,
                    sort_by=key,
                    places=self.options.places,
                )
            ]
            for category in CATEGORY_ORDER
        }

    def orientation(self, *, more: Optional[bool] = None) -> str:
        verbose = self.options.more if more is None else more
        selected = select_orientation(self.scores, detected=self.has_tokens)
        return selected.describe(more=verbose, places=self.options.places)

    def render(self) -> Result:
        mode = self.options.output
        if mode is OutputMode.ORIENTATION:
            return self.orientation()
        if mode is OutputMode.MATCHES:
            return self.match_rows()
        if mode is OutputMode.FULL:
            return {"lex": self.lex(), "matches": self.match_rows()}
        return self.lex()


class Analyzer:
    """Scores text against an injected lexicon."""

    def __init__(
        self,
        lexicon: Lexicon,
        *,
        tokenizer: Tokenizer = tokenize,
        translator: Translator = translate_gb_to_us,
        strategy: MatchStrategy = MatchStrategy.AUTO,
    ) -> None:
        self.lexicon = lexicon
        self.tokenizer = tokenizer
        self.translator = translator
        self.strategy = MatchStrategy(strategy)

    def normalize(self, text: Any, locale: Locale = Locale.US) -> Optional[str]:
        """Coerce to str, translate GB spelling when asked, lowercase and trim.

        Returns None when there is nothing to analyze.
        """
        if text is None:
            return None
        value = text if isinstance(text, str) else str(text)
        if locale is Locale.GB:
            value = self.translator(value)
        value = value.lower().strip()
        return value or None

    def run(self, text: Any, options: Optional[Any] = None, **overrides: Any) -> Optional[Analysis]:
        opts = AnalysisOptions.coerce(options, **overrides)
        normalized = self.normalize(text, opts.locale)
        if normalized is None:
            logger.warning("No input text supplied; nothing to analyze")
            return None

        tokens = list(self.tokenizer(normalized) or [])
        expanded = expand_tokens(tokens, opts.ngrams) if tokens else tokens
        wordcount = len(expanded) if opts.wc_grams else len(tokens)

        matches = match_lexicon(
            expanded,
            self.lexicon,
            min_weight=opts.min_weight,
            max_weight=opts.max_weight,
            overlap=opts.overlap,
            strategy=self.strategy,
        )
        scores = score_matches(matches, opts.encoding, wordcount)
        return Analysis(
            text=normalized,
            tokens=tuple(expanded),
            wordcount=wordcount,
            matches=matches,
            scores=scores,
            options=opts,
        )

    def analyze(self, text: Any, options: Optional[Any] = None, **overrides: Any) -> Optional[Result]:
        """Analyze ``text`` and return the shape selected by the ``output`` option.

        ``None`` or blank input returns None rather than a zero-valued result.
        """
        analysis = self.run(text, options, **overrides)
        if analysis is None:
            return None
        return analysis.render()

    __call__ = analyze


@lru_cache(maxsize=1)
def get_analyzer() -> Analyzer:
    return Analyzer(get_lexicon())


def analyze(text: Any, options: Optional[Any] = None, **overrides: Any) -> Optional[Result]:
    """Analyze ``text`` with the default lexicon."""
    return get_analyzer().analyze(text, options, **overrides)


__all__ = ["Analysis", "Analyzer", "analyze", "get_analyzer"]
