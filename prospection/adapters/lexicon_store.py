"""Load the weighted prospection lexicon from JSON."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from prospection.config import get_settings
from prospection.domain import Lexicon, LexiconError

logger = logging.getLogger(__name__)


def load_lexicon(path: Path) -> Lexicon:
    """Read ``{"PAST": {term: weight}, "PRESENT": {...}, "FUTURE": {...}}`` from ``path``."""
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise LexiconError(f"Lexicon file not found: {path}") from None
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise LexiconError(f"Lexicon file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise LexiconError(f"Lexicon file {path} must hold a JSON object")
    lexicon = Lexicon(data)
    logger.info("Loaded lexicon from %s: %r", path, lexicon)
    return lexicon


@lru_cache(maxsize=1)
def get_lexicon(path: Optional[Path] = None) -> Lexicon:
    """Return the process-wide lexicon, loading it on first use.

    Without ``PROSPECTION_LEXICON_PATH`` this is the packaged
    ``sample_lexicon.json``, whose weights are illustrative and are not the
    published prospection model.
    """
    return load_lexicon(path or get_settings().lexicon_path)


__all__ = ["get_lexicon", "load_lexicon"]
