from __future__ import annotations

from typing import Iterable, List, Tuple

from ngram_analyzer.models import Token
from ngram_analyzer.streams import TokenListSource, TokenSource


def make_tokens(words: Iterable[str], separator: str = " ") -> List[Token]:
    """Lay ``words`` out as if they came from one text joined by ``separator``."""
    tokens: List[Token] = []
    offset = 0
    for word in words:
        tokens.append(Token(text=word, start_char=offset, end_char=offset + len(word)))
        offset += len(word) + len(separator)
    return tokens


def word_source(*words: str) -> TokenListSource:
    return TokenListSource(make_tokens(words))


def drain(source: TokenSource) -> List[Tuple[str, int, int]]:
    """Read every remaining token as ``(text, start, end)`` tuples."""
    out: List[Tuple[str, int, int]] = []
    while source.advance():
        out.append((source.text, source.start_offset, source.end_offset))
    return out


class CountingSource(TokenSource):
    """Wraps a source and records how many times it was advanced."""

    def __init__(self, source: TokenSource) -> None:
        super().__init__()
        self._source = source
        self.pulls = 0
        self.resets = 0

    def advance(self) -> bool:
        self.pulls += 1
        if not self._source.advance():
            return False
        # Hand out the wrapped buffer itself, like a stage that reuses it.
        self._current = self._source.current
        return True

    def reset(self) -> None:
        self.resets += 1
        self._source.reset()


class FailingSource(TokenSource):
    """Yields ``tokens`` and then raises ``error`` on the next pull."""

    def __init__(self, tokens: Iterable[Token], error: Exception) -> None:
        super().__init__()
        self._inner = TokenListSource(tokens)
        self._error = error

    def advance(self) -> bool:
        if self._inner.advance():
            self._current = self._inner.current
            return True
        raise self._error

    def reset(self) -> None:
        self._inner.reset()
