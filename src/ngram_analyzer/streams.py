from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Sequence

from .models import TermBuffer, Token


class TokenSource(ABC):
    """Pull-based producer of tokens, one at a time.

    Every stage of an analysis chain implements this interface: tokenizers
    produce tokens from text, filters wrap another ``TokenSource`` and expose
    the same shape outward.
    """

    def __init__(self) -> None:
        self._current = TermBuffer()

    @abstractmethod
    def advance(self) -> bool:
        """Move to the next token. Return False once the stream is exhausted."""
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """Return the source to its initial state so it can be consumed again."""
        raise NotImplementedError

    @property
    def current(self) -> TermBuffer:
        """Buffer holding the current token; overwritten by each ``advance()``."""
        return self._current

    @property
    def text(self) -> str:
        return self._current.text

    @property
    def length(self) -> int:
        return self._current.length

    @property
    def start_offset(self) -> int:
        return self._current.start_char

    @property
    def end_offset(self) -> int:
        return self._current.end_char

    def token(self) -> Token:
        """Snapshot of the current token that stays valid after ``advance()``."""
        return self._current.snapshot()

    def __iter__(self) -> Iterator[Token]:
        while self.advance():
            yield self.token()


class TokenListSource(TokenSource):
    """Replays a fixed sequence of tokens through a single reused buffer."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        super().__init__()
        self._tokens: Sequence[Token] = list(tokens)
        self._position = 0

    def advance(self) -> bool:
        if self._position >= len(self._tokens):
            return False
        token = self._tokens[self._position]
        self._position += 1
        self._current.set_term(token.text)
        self._current.set_offsets(token.start_char, token.end_char)
        self._current.type = token.type
        return True

    def reset(self) -> None:
        self._position = 0
        self._current.clear()


def collect_tokens(source: TokenSource) -> List[Token]:
    """Drain ``source`` and return snapshots of every token it produced."""
    return list(source)
