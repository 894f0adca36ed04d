from __future__ import annotations

import pytest

from prospection.analysis import Analyzer
from prospection.domain import Lexicon

FIXTURE_ENTRIES = {
    "PAST": {
        "yesterday": 0.5,
        "was": 0.25,
        "last night": 0.75,
        "tomorrow": -0.5,
    },
    "PRESENT": {
        "now": 0.4,
        "is": 0.2,
        "going": 0.1,
        "right now": 0.3,
        "favorite": 0.3,
        "was": -0.1,
        "tomorrow": -0.4,
    },
    "FUTURE": {
        "tomorrow": 0.8,
        "will": 0.5,
        "going to": 0.6,
        "going to be": 0.4,
        "yesterday": -0.9,
    },
}


@pytest.fixture()
def lexicon() -> Lexicon:
    return Lexicon(FIXTURE_ENTRIES)


@pytest.fixture()
def analyzer(lexicon: Lexicon) -> Analyzer:
    return Analyzer(lexicon)
