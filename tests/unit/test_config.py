"""Unit tests for configuration loading."""

import json

import pytest

from desumasu.config import (
    Config,
    SplitterConfig,
    TokenizerConfig,
    create_default_config,
    load_config,
)


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return str(path)
    return _write


class TestDefaults:
    """Test default configuration values."""

    def test_config_defaults(self):
        config = Config()
        assert config.tokenizer == TokenizerConfig(backend="spacy", split_mode="A")
        assert config.splitter.break_conjunctions == ["が"]
        assert config.splitter.period == "。"
        assert config.log_level == "INFO"
        assert config.log_json is False

    def test_splitter_lists_are_independent(self):
        """Test default lists are not shared between instances."""
        a, b = SplitterConfig(), SplitterConfig()
        a.break_conjunctions.append("けど")
        assert b.break_conjunctions == ["が"]


class TestLoadConfig:
    """Test loading configuration files."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="config.json.sample"):
            load_config(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(str(path))

    def test_default_config_round_trip(self, write_config):
        """Test the generated default file loads back to defaults."""
        config = load_config(write_config(create_default_config()))
        assert config == Config()

    def test_sections(self, write_config):
        """Test every section is read."""
        path = write_config({
            "tokenizer": {"backend": "spacy", "split_mode": "c"},
            "splitter": {"break_conjunctions": ["が", "けど"], "period": "."},
            "log_level": "DEBUG",
            "log_json": True,
        })
        config = load_config(path)
        assert config.tokenizer.split_mode == "C"
        assert config.splitter.break_conjunctions == ["が", "けど"]
        assert config.splitter.period == "."
        assert config.log_level == "DEBUG"
        assert config.log_json is True

    def test_partial_file_keeps_defaults(self, write_config):
        config = load_config(write_config({"log_level": "WARNING"}))
        assert config.tokenizer == TokenizerConfig()
        assert config.splitter == SplitterConfig()

    def test_invalid_values_fall_back(self, write_config):
        """Test unknown backends and split modes fall back to defaults."""
        config = load_config(write_config({"tokenizer": {"backend": "mecab", "split_mode": "Z"}}))
        assert config.tokenizer.backend == "spacy"
        assert config.tokenizer.split_mode == "A"

    def test_sample_file_loads(self):
        """Test the shipped sample is valid."""
        from pathlib import Path
        sample = Path(__file__).parents[2] / "config.json.sample"
        assert load_config(str(sample)) == Config()
