from __future__ import annotations

import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from prospection.adapters import lexicon_store
from prospection.config import DEFAULT_LEXICON_PATH
from prospection.domain import Category, LexiconError


@pytest.fixture(autouse=True)
def _clear_lexicon_cache():
    lexicon_store.get_lexicon.cache_clear()
    yield
    lexicon_store.get_lexicon.cache_clear()


def test_load_lexicon_from_file(tmp_path: Path) -> None:
    path = tmp_path / "lexicon.json"
    path.write_text(
        json.dumps({"PAST": {"Was": 0.3}, "PRESENT": {"right  now": 0.2}, "FUTURE": {"will": "0.5"}}),
        encoding="utf-8",
    )

    lexicon = lexicon_store.load_lexicon(path)

    assert dict(lexicon.terms(Category.PAST)) == {"was": 0.3}
    assert dict(lexicon.terms(Category.PRESENT)) == {"right now": 0.2}
    assert lexicon.weight(Category.FUTURE, "will") == 0.5


def test_missing_file_raises_lexicon_error(tmp_path: Path) -> None:
    with pytest.raises(LexiconError):
        lexicon_store.load_lexicon(tmp_path / "absent.json")


def test_invalid_json_raises_lexicon_error(tmp_path: Path) -> None:
    path = tmp_path / "lexicon.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(LexiconError):
        lexicon_store.load_lexicon(path)


def test_packaged_sample_lexicon_loads() -> None:
    lexicon = lexicon_store.load_lexicon(DEFAULT_LEXICON_PATH)

    assert DEFAULT_LEXICON_PATH.name == "sample_lexicon.json"
    assert lexicon.weight_bounds() == (-0.9772179, 1.15807005)
    assert lexicon.arities == (1, 2, 3)
    assert all(len(lexicon.terms(category)) > 0 for category in Category)


def test_get_lexicon_uses_settings_and_caches(monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "lexicon.json"
    path.write_text(json.dumps({"PAST": {}, "PRESENT": {"now": 0.1}, "FUTURE": {}}), encoding="utf-8")
    monkeypatch.setattr(lexicon_store, "get_settings", lambda: SimpleNamespace(lexicon_path=path))

    first = lexicon_store.get_lexicon()
    second = lexicon_store.get_lexicon()

    assert first is second
    assert len(first) == 1
