from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml


class ConfigurationError(ValueError):
    """Raised when gram bounds or analyzer settings are invalid."""


@dataclass(slots=True)
class AnalyzerConfig:
    """Configuration options for the n-gram analysis chain."""

    min_gram: int = 3
    max_gram: int = 6
    max_token_length: int = 255
    ascii_folding: bool = False
    stop_words: List[str] | None = None

    def validate(self) -> "AnalyzerConfig":
        """Check the settings and return ``self`` so calls can be chained."""
        for name in ("min_gram", "max_gram", "max_token_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.ascii_folding, bool):
            raise ConfigurationError("ascii_folding must be true or false")
        validate_gram_bounds(self.min_gram, self.max_gram)
        if self.max_token_length < 1:
            raise ConfigurationError("max_token_length must be greater than zero")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def validate_gram_bounds(min_gram: int, max_gram: int) -> None:
    if min_gram < 1:
        raise ConfigurationError("min_gram must be greater than zero")
    if min_gram > max_gram:
        raise ConfigurationError("min_gram must not be greater than max_gram")


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(AnalyzerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    stop_words = kwargs.get("stop_words")
    if stop_words is not None:
        if not isinstance(stop_words, (list, tuple)):
            raise ConfigurationError("stop_words must be a list of words.")
        kwargs["stop_words"] = [str(word) for word in stop_words]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> AnalyzerConfig:
    """Build an AnalyzerConfig from a dictionary-like input."""
    if data is None:
        return AnalyzerConfig()
    return AnalyzerConfig(**_build_kwargs(data)).validate()


def config_from_yaml(path: str | Path) -> AnalyzerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ConfigurationError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return AnalyzerConfig()
    return config_from_yaml(path)
