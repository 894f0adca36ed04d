from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Union


class NGrams:
    """Lazy, restartable sequence of ``n``-word phrases over a word sequence.

    ``words`` is normally the tokenizer output; a plain string is split on
    whitespace. Phrases are joined with a single space using a stride-1
    sliding window, and fewer than ``n`` words yield nothing. Each call to
    ``iter()`` starts again from the first phrase.
    """

    __slots__ = ("words", "n")

    def __init__(self, words: Union[str, Sequence[str]], n: int) -> None:
        if n < 1:
            raise ValueError(f"n-gram arity must be positive, got {n}")
        self.words: Tuple[str, ...] = tuple(words.split() if isinstance(words, str) else words)
        self.n = n

    def __iter__(self) -> Iterator[str]:
        for start in range(len(self.words) - self.n + 1):
            yield " ".join(self.words[start : start + self.n])

    def __len__(self) -> int:
        return max(0, len(self.words) - self.n + 1)

    def __repr__(self) -> str:
        return f"NGrams(n={self.n}, phrases={len(self)})"


def expand_tokens(tokens: Sequence[str], arities: Iterable[int]) -> List[str]:
    """Return ``tokens`` followed by their phrases of every arity, ascending."""
    expanded = list(tokens)
    for n in sorted(set(arities)):
        expanded.extend(NGrams(tokens, n))
    return expanded


__all__ = ["NGrams", "expand_tokens"]
