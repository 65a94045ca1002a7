"""
ngram_analyzer package exports the analysis chain for library consumers.
"""

from __future__ import annotations

from .analyzer import NGramAnalyzer
from .config import (
    AnalyzerConfig,
    ConfigurationError,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .models import TermBuffer, Token
from .ngram import DEFAULT_MAX_GRAM, DEFAULT_MIN_GRAM, GramGenerator
from .streams import TokenListSource, TokenSource, collect_tokens

__all__ = [
    "AnalyzerConfig",
    "ConfigurationError",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "NGramAnalyzer",
    "GramGenerator",
    "DEFAULT_MIN_GRAM",
    "DEFAULT_MAX_GRAM",
    "TokenSource",
    "TokenListSource",
    "collect_tokens",
    "TermBuffer",
    "Token",
]

__version__ = "0.1.0"
