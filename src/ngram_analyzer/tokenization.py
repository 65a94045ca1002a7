from __future__ import annotations

import logging
import re
from typing import Iterator, List, TextIO

from .models import Token
from .streams import TokenSource

logger = logging.getLogger(__name__)

ALPHANUM = "<ALPHANUM>"
APOSTROPHE = "<APOSTROPHE>"
ACRONYM = "<ACRONYM>"
COMPANY = "<COMPANY>"
EMAIL = "<EMAIL>"
HOST = "<HOST>"
NUM = "<NUM>"
CJ = "<CJ>"

DEFAULT_MAX_TOKEN_LENGTH = 255

# Chinese/Japanese characters are emitted one per token.
_CJ = (
    r"[\u3040-\u309f\u30a0-\u30ff\u3100-\u312f\u31f0-\u31ff\u3300-\u337f"
    r"\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff\uff65-\uff9f]"
)
_LETTER = r"(?:(?!" + _CJ + r")[^\W\d_])"
_ALNUM_CHAR = r"(?:(?!" + _CJ + r")[^\W_])"
_ALNUM = _ALNUM_CHAR + "+"
_HAS_DIGIT = _ALNUM_CHAR + r"*\d" + _ALNUM_CHAR + "*"
_NUM_SEP = r"[_\-/.,]"

# Alternatives are tried in order, so longer token classes come first.
TOKEN_PATTERN = re.compile(
    r"(?P<email>" + _ALNUM + r"(?:[._\-]" + _ALNUM + r")*@"
    + _ALNUM + r"(?:[.\-]" + _ALNUM + r")+)"
    r"|(?P<acronym>(?:" + _LETTER + r"\.){2,})"
    r"|(?P<company>" + _LETTER + r"+[&@]" + _LETTER + r"+)"
    r"|(?P<num>" + _ALNUM + r"(?:" + _NUM_SEP + _ALNUM + r")*?" + _NUM_SEP
    + _HAS_DIGIT + r"(?:" + _NUM_SEP + _ALNUM + r")*"
    r"|" + _HAS_DIGIT + r"(?:" + _NUM_SEP + _ALNUM + r")+)"
    r"|(?P<host>" + _ALNUM + r"(?:\." + _ALNUM + r")+)"
    r"|(?P<apostrophe>" + _LETTER + r"+(?:'" + _LETTER + r"+)+)"
    r"|(?P<alphanum>" + _ALNUM + r")"
    r"|(?P<cj>" + _CJ + r")",
    re.UNICODE,
)

_GROUP_TYPES = {
    "email": EMAIL,
    "acronym": ACRONYM,
    "company": COMPANY,
    "num": NUM,
    "host": HOST,
    "apostrophe": APOSTROPHE,
    "alphanum": ALPHANUM,
    "cj": CJ,
}


def _iter_matches(text: str) -> Iterator[Token]:
    for match in TOKEN_PATTERN.finditer(text):
        yield Token(
            text=match.group(),
            start_char=match.start(),
            end_char=match.end(),
            type=_GROUP_TYPES[match.lastgroup or "alphanum"],
        )


def tokenize_words(text: str) -> List[Token]:
    """Tokenize text into word tokens with character offsets."""
    return list(_iter_matches(text))


class StandardTokenizer(TokenSource):
    """Splits a character stream into word, number, host, email and CJK tokens.

    The reader is consumed on the first ``advance()``; errors raised while
    reading propagate to the caller. Tokens longer than ``max_token_length``
    are skipped.
    """

    def __init__(
        self, reader: TextIO, max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH
    ) -> None:
        super().__init__()
        self._reader = reader
        self.max_token_length = max_token_length
        self._text: str | None = None
        self._matches: Iterator[Token] | None = None

    def advance(self) -> bool:
        if self._matches is None:
            if self._text is None:
                self._text = self._reader.read()
            self._matches = _iter_matches(self._text)
        for token in self._matches:
            if token.length > self.max_token_length:
                logger.debug(
                    "Skipping %d-character token at offset %d",
                    token.length,
                    token.start_char,
                )
                continue
            self._current.set_term(token.text)
            self._current.set_offsets(token.start_char, token.end_char)
            self._current.type = token.type
            return True
        return False

    def reset(self, reader: TextIO | None = None) -> None:
        """Rewind to the first token, optionally switching to a new reader."""
        if reader is not None:
            self._reader = reader
            self._text = None
        self._matches = None
        self._current.clear()
