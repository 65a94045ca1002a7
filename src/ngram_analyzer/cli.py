from __future__ import annotations

import json
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import TypedDict

import typer
import yaml

from .analyzer import NGramAnalyzer
from .config import AnalyzerConfig, ConfigurationError, load_config
from .models import Token

app = typer.Typer(help="N-gram analyzer CLI.", no_args_is_help=True)


class GramPayload(TypedDict):
    text: str
    start: int
    end: int


@app.command()
def analyze(
    text: str | None = typer.Option(None, "--text", "-t", help="Text to analyze."),
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="UTF-8 text file to analyze.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    field_name: str = typer.Option("content", "--field", help="Field being indexed."),
    min_gram: int | None = typer.Option(
        None, "--min-gram", help="Override the smallest gram size."
    ),
    max_gram: int | None = typer.Option(
        None, "--max-gram", help="Override the largest gram size."
    ),
) -> None:
    """Print the grams the analyzer would index, as JSON."""
    if (text is None) == (input_path is None):
        raise typer.BadParameter("Provide exactly one of --text or --input-path.")
    try:
        cfg = load_config(config)
        cfg = _apply_gram_overrides(cfg, min_gram, max_gram)
        analyzer = NGramAnalyzer(cfg)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if input_path is not None:
        with input_path.open("r", encoding="utf-8") as reader:
            grams = list(analyzer.token_stream(field_name, reader))
    else:
        grams = analyzer.analyze(text or "", field_name)

    payload = {"field": field_name, "grams": [_gram_dict(gram) for gram in grams]}
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_gram_overrides(
    config: AnalyzerConfig, min_gram: int | None, max_gram: int | None
) -> AnalyzerConfig:
    """Return a copy of ``config`` with any CLI gram bounds applied."""
    if min_gram is not None:
        config = dc_replace(config, min_gram=min_gram)
    if max_gram is not None:
        config = dc_replace(config, max_gram=max_gram)
    return config.validate()


def _gram_dict(gram: Token) -> GramPayload:
    return {"text": gram.text, "start": gram.start_char, "end": gram.end_char}


if __name__ == "__main__":
    main()
