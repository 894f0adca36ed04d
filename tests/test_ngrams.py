from __future__ import annotations

import pytest

from prospection.domain import NGrams, expand_tokens


def test_ngrams_slide_one_word_at_a_time() -> None:
    assert list(NGrams("i am going to win", 2)) == ["i am", "am going", "going to", "to win"]
    assert list(NGrams("i am going to win", 3)) == ["i am going", "am going to", "going to win"]


def test_ngrams_are_restartable() -> None:
    phrases = NGrams("we will see", 2)

    first = list(phrases)
    second = list(phrases)

    assert first == second == ["we will", "will see"]
    assert len(phrases) == 2


def test_ngrams_collapse_whitespace() -> None:
    assert list(NGrams("  going \t to\n be ", 2)) == ["going to", "to be"]


@pytest.mark.parametrize("text", ["", "tomorrow", "see you"])
def test_ngrams_shorter_than_arity_are_empty(text: str) -> None:
    phrases = NGrams(text, 3)

    assert list(phrases) == []
    assert len(phrases) == 0


def test_ngrams_reject_non_positive_arity() -> None:
    with pytest.raises(ValueError):
        NGrams("a b", 0)


def test_expand_tokens_appends_arities_in_ascending_order() -> None:
    expanded = expand_tokens(["a", "b", "c"], {3, 2})

    assert expanded == ["a", "b", "c", "a b", "b c", "a b c"]


def test_expand_tokens_without_arities_copies_tokens() -> None:
    tokens = ["a", "b"]

    expanded = expand_tokens(tokens, ())

    assert expanded == tokens
    assert expanded is not tokens


def test_ngrams_window_over_token_sequences() -> None:
    tokens = ["i", "can't", "wait"]

    assert list(NGrams(tokens, 2)) == ["i can't", "can't wait"]
    assert expand_tokens(tokens, {2}) == ["i", "can't", "wait", "i can't", "can't wait"]
