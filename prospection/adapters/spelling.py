"""British to American spelling substitution applied before matching."""

from __future__ import annotations

import re
from typing import Dict

GB_TO_US: Dict[str, str] = {
    "analyse": "analyze",
    "analysed": "analyzed",
    "analysing": "analyzing",
    "apologise": "apologize",
    "apologised": "apologized",
    "behaviour": "behavior",
    "behaviours": "behaviors",
    "cancelled": "canceled",
    "cancelling": "canceling",
    "centre": "center",
    "centres": "centers",
    "colour": "color",
    "colours": "colors",
    "defence": "defense",
    "favour": "favor",
    "favourite": "favorite",
    "favourites": "favorites",
    "flavour": "flavor",
    "grey": "gray",
    "honour": "honor",
    "humour": "humor",
    "jewellery": "jewelry",
    "labour": "labor",
    "licence": "license",
    "metre": "meter",
    "metres": "meters",
    "mum": "mom",
    "neighbour": "neighbor",
    "neighbours": "neighbors",
    "organise": "organize",
    "organised": "organized",
    "organising": "organizing",
    "practise": "practice",
    "practised": "practiced",
    "programme": "program",
    "programmes": "programs",
    "realise": "realize",
    "realised": "realized",
    "realising": "realizing",
    "recognise": "recognize",
    "recognised": "recognized",
    "rumour": "rumor",
    "theatre": "theater",
    "travelled": "traveled",
    "travelling": "traveling",
    "travellers": "travelers",
    "tyre": "tire",
    "tyres": "tires",
}

_PATTERN = re.compile(r"\b(" + "|".join(sorted(GB_TO_US, key=len, reverse=True)) + r")\b", re.IGNORECASE)


def translate_gb_to_us(text: str) -> str:
    """Replace British spellings with American ones, whole words only.

    Replacements are emitted in lowercase; callers case-fold afterwards.
    """
    if not text:
        return text
    return _PATTERN.sub(lambda match: GB_TO_US[match.group(0).lower()], text)


__all__ = ["GB_TO_US", "translate_gb_to_us"]
