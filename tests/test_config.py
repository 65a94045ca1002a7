from pathlib import Path

import pytest

from ngram_analyzer.config import (
    AnalyzerConfig,
    ConfigurationError,
    config_from_dict,
    load_config,
)


def test_load_config_defaults_when_no_path():
    cfg = load_config()

    assert cfg == AnalyzerConfig()
    assert (cfg.min_gram, cfg.max_gram) == (3, 6)
    assert cfg.max_token_length == 255
    assert cfg.stop_words is None


def test_load_config_reads_yaml(tmp_path: Path):
    config_path = tmp_path / "analyzer.yaml"
    config_path.write_text(
        "min_gram: 2\nmax_gram: 4\nascii_folding: true\n"
        "stop_words: [foo, bar]\nunknown_key: 1\n",
        encoding="utf-8",
    )

    cfg = load_config(config_path)

    assert cfg.min_gram == 2
    assert cfg.max_gram == 4
    assert cfg.ascii_folding is True
    assert cfg.stop_words == ["foo", "bar"]


def test_config_yaml_must_be_a_mapping(tmp_path: Path):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(config_path)


@pytest.mark.parametrize(
    "data",
    [
        {"min_gram": 0},
        {"min_gram": 7, "max_gram": 6},
        {"max_token_length": 0},
    ],
)
def test_config_from_dict_validates(data: dict):
    with pytest.raises(ConfigurationError):
        config_from_dict(data)


def test_to_dict_round_trips_through_config_from_dict():
    cfg = AnalyzerConfig(min_gram=2, max_gram=5, stop_words=["x"])

    assert config_from_dict(cfg.to_dict()) == cfg


def test_scalar_stop_words_are_rejected(tmp_path: Path):
    config_path = tmp_path / "analyzer.yaml"
    config_path.write_text("stop_words: the\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="stop_words"):
        load_config(config_path)


@pytest.mark.parametrize(
    "data",
    [
        {"min_gram": "3"},
        {"max_gram": 6.0},
        {"max_token_length": True},
        {"ascii_folding": "yes"},
    ],
)
def test_config_from_dict_rejects_wrong_types(data: dict):
    with pytest.raises(ConfigurationError):
        config_from_dict(data)
