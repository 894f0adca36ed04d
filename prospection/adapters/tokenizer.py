from __future__ import annotations

import re
from typing import List

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})
_TOKEN_RE = re.compile(r"[a-z0-9]+(?:'[a-z0-9]+)*")


def tokenize(text: str) -> List[str]:
    """Split ``text`` into lowercase word tokens, keeping contractions whole."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower().translate(_APOSTROPHES))


__all__ = ["tokenize"]
