from __future__ import annotations

from typing import List

from .config import validate_gram_bounds
from .streams import TokenSource

DEFAULT_MIN_GRAM = 1
DEFAULT_MAX_GRAM = 2

GRAM_TOKEN_TYPE = "gram"


class GramGenerator(TokenSource):
    """
    Expands each upstream token into its prefixes of length
    ``min_gram`` through ``max_gram``.

    Grams are anchored at the first character of their token ("front edge");
    interior and suffix substrings are never produced. For ``"cat"`` with the
    default bounds the stream is ``"c"``, ``"ca"``. Tokens shorter than
    ``min_gram`` produce nothing and the stream moves on to the next one.

    The upstream buffer is copied as soon as a token is pulled, because the
    upstream is free to overwrite it on its next ``advance()``. The upstream is
    only advanced once every gram of the buffered token has been emitted.
    """

    def __init__(
        self,
        source: TokenSource,
        min_gram: int = DEFAULT_MIN_GRAM,
        max_gram: int = DEFAULT_MAX_GRAM,
    ) -> None:
        """
        Args:
            source: upstream stream holding the tokens to expand.
            min_gram: the smallest gram to generate.
            max_gram: the largest gram to generate.

        Raises:
            ConfigurationError: if ``min_gram < 1`` or ``min_gram > max_gram``.
        """
        validate_gram_bounds(min_gram, max_gram)
        super().__init__()
        self._source = source
        self._min_gram = min_gram
        self._max_gram = max_gram

        self._term_chars: List[str] | None = None
        self._term_length = 0
        self._token_start = 0
        self._gram_size = min_gram

    @property
    def min_gram(self) -> int:
        return self._min_gram

    @property
    def max_gram(self) -> int:
        return self._max_gram

    def advance(self) -> bool:
        while True:
            if self._term_chars is None:
                if not self._source.advance():
                    return False
                upstream = self._source.current
                self._term_chars = upstream.chars[: upstream.length]
                self._term_length = upstream.length
                self._token_start = upstream.start_char
                self._gram_size = self._min_gram
            if self._gram_size <= min(self._max_gram, self._term_length):
                self._current.clear()
                self._current.set_term(self._term_chars, self._gram_size)
                self._current.set_offsets(
                    self._token_start, self._token_start + self._gram_size
                )
                self._current.type = GRAM_TOKEN_TYPE
                self._gram_size += 1
                return True
            self._term_chars = None

    def reset(self, source: TokenSource | None = None) -> None:
        """Drop the buffered token and reset the upstream source.

        When ``source`` is given it replaces the upstream before the reset.
        """
        if source is not None:
            self._source = source
        self._source.reset()
        self._term_chars = None
        self._term_length = 0
        self._token_start = 0
        self._gram_size = self._min_gram
        self._current.clear()
