from __future__ import annotations

import io
import logging
from typing import List, TextIO

from .config import AnalyzerConfig
from .filters import (
    ENGLISH_STOP_WORDS,
    ASCIIFoldingFilter,
    LowerCaseFilter,
    StandardFilter,
    StopFilter,
)
from .models import Token
from .ngram import GramGenerator
from .streams import TokenSource, collect_tokens
from .tokenization import StandardTokenizer

logger = logging.getLogger(__name__)


class NGramAnalyzer:
    """
    Builds the indexing chain for a field: standard tokenization, possessive
    and acronym cleanup, lowercasing, stopword removal and finally prefix
    grams of 3 to 6 characters.

    The 3..6 bounds differ from ``GramGenerator``'s own defaults (1..2).
    Both are kept as-is since changing either alters what existing indexes
    contain.
    """

    def __init__(self, config: AnalyzerConfig | None = None) -> None:
        self.config = (config or AnalyzerConfig()).validate()
        stop_words = self.config.stop_words
        self.stop_words = (
            ENGLISH_STOP_WORDS if stop_words is None else frozenset(stop_words)
        )

    def token_stream(self, field_name: str, reader: TextIO) -> TokenSource:
        """Return the gram stream for ``reader``. All fields share one chain."""
        cfg = self.config
        logger.debug(
            "Building n-gram chain for field %r (grams %d..%d, folding=%s)",
            field_name,
            cfg.min_gram,
            cfg.max_gram,
            cfg.ascii_folding,
        )
        stream: TokenSource = StandardTokenizer(
            reader, max_token_length=cfg.max_token_length
        )
        stream = StandardFilter(stream)
        if cfg.ascii_folding:
            stream = ASCIIFoldingFilter(stream)
        stream = LowerCaseFilter(stream)
        stream = StopFilter(stream, self.stop_words)
        return GramGenerator(stream, cfg.min_gram, cfg.max_gram)

    def analyze(self, text: str, field_name: str = "content") -> List[Token]:
        """Run ``text`` through the chain and return every gram produced."""
        return collect_tokens(self.token_stream(field_name, io.StringIO(text)))
