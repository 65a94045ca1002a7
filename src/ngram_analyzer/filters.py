from __future__ import annotations

import unicodedata
from typing import AbstractSet, Iterable

from .models import TermBuffer
from .streams import TokenSource
from .tokenization import ACRONYM, APOSTROPHE

# Classic English stop set used by standard analyzers.
ENGLISH_STOP_WORDS = frozenset(
    "a an and are as at be but by for if in into is it no not of on or such "
    "that the their then there these they this to was will with".split()
)

_FOLDING_OVERRIDES = {
    "ß": "ss",
    "æ": "ae",
    "Æ": "AE",
    "œ": "oe",
    "Œ": "OE",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "đ": "d",
    "Đ": "D",
    "þ": "th",
    "Þ": "TH",
}


def _copy_token(target: TermBuffer, upstream: TermBuffer) -> None:
    target.set_term(upstream.chars, upstream.length)
    target.set_offsets(upstream.start_char, upstream.end_char)
    target.type = upstream.type


def fold_to_ascii(text: str) -> str:
    """Replace accented Latin characters with their closest ASCII spelling."""
    pieces = []
    for char in text:
        if char in _FOLDING_OVERRIDES:
            pieces.append(_FOLDING_OVERRIDES[char])
            continue
        decomposed = unicodedata.normalize("NFKD", char)
        pieces.append("".join(c for c in decomposed if not unicodedata.combining(c)))
    return "".join(pieces)


class StandardFilter(TokenSource):
    """Removes possessive ``'s`` from words and dots from acronyms."""

    def __init__(self, source: TokenSource) -> None:
        super().__init__()
        self._source = source

    def advance(self) -> bool:
        if not self._source.advance():
            return False
        _copy_token(self._current, self._source.current)
        term = self._current
        if term.type == APOSTROPHE and term.length >= 2:
            if term.chars[term.length - 2] == "'" and term.chars[term.length - 1] in (
                "s",
                "S",
            ):
                term.length -= 2
        elif term.type == ACRONYM:
            stripped = [char for char in term.chars[: term.length] if char != "."]
            term.set_term(stripped)
        return True

    def reset(self) -> None:
        self._source.reset()
        self._current.clear()


class ASCIIFoldingFilter(TokenSource):
    """Folds accented characters so "café" and "cafe" index identically."""

    def __init__(self, source: TokenSource) -> None:
        super().__init__()
        self._source = source

    def advance(self) -> bool:
        if not self._source.advance():
            return False
        upstream = self._source.current
        _copy_token(self._current, upstream)
        text = upstream.text
        if not text.isascii():
            self._current.set_term(fold_to_ascii(text))
        return True

    def reset(self) -> None:
        self._source.reset()
        self._current.clear()


class LowerCaseFilter(TokenSource):
    def __init__(self, source: TokenSource) -> None:
        super().__init__()
        self._source = source

    def advance(self) -> bool:
        if not self._source.advance():
            return False
        _copy_token(self._current, self._source.current)
        self._current.set_term(self._current.text.lower())
        return True

    def reset(self) -> None:
        self._source.reset()
        self._current.clear()


class StopFilter(TokenSource):
    """Drops tokens whose text is in ``stop_words``."""

    def __init__(
        self,
        source: TokenSource,
        stop_words: Iterable[str] = ENGLISH_STOP_WORDS,
        ignore_case: bool = False,
    ) -> None:
        super().__init__()
        self._source = source
        self._ignore_case = ignore_case
        if ignore_case:
            self._stop_words: AbstractSet[str] = frozenset(
                word.lower() for word in stop_words
            )
        else:
            self._stop_words = frozenset(stop_words)

    @property
    def stop_words(self) -> AbstractSet[str]:
        return self._stop_words

    def advance(self) -> bool:
        while self._source.advance():
            text = self._source.text
            if self._ignore_case:
                text = text.lower()
            if text in self._stop_words:
                continue
            _copy_token(self._current, self._source.current)
            return True
        return False

    def reset(self) -> None:
        self._source.reset()
        self._current.clear()
