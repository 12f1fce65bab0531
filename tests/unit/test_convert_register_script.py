"""Tests for the convert_register command-line script."""

import importlib.util
import json
import logging
import sys
from pathlib import Path

import pytest

import desumasu.tokenizer
from desumasu.utils.logging import HumanFormatter, StructuredFormatter
from tests.fixtures.ipadic import FixtureTokenizer, aux, noun

SCRIPT = Path(__file__).parents[2] / "scripts" / "convert_register.py"


@pytest.fixture
def script(monkeypatch):
    monkeypatch.setattr(desumasu.tokenizer, "create_tokenizer", lambda config=None: FixtureTokenizer())
    spec = importlib.util.spec_from_file_location("convert_register", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestConvertText:
    """Test line-by-line conversion."""

    def test_keeps_blank_lines(self, script):
        text = "今日は晴天だ。\n\n許さん。\n"
        assert script.convert_text(text, "polite") == "今日は晴天です。\n\n許しません。\n"

    def test_plain(self, script):
        assert script.convert_text("本を読みました。", "plain") == "本を読んだ。"

    def test_trailing_whitespace_follows_the_sentence(self, script):
        """Test spaces at the end of a line stay outside the predicate."""
        assert script.convert_text("今日は晴天だ。 \n", "polite") == "今日は晴天です。 \n"


class TestMain:
    """Test the argument handling."""

    def test_file_to_file(self, script, tmp_path, monkeypatch):
        source = tmp_path / "in.txt"
        target = tmp_path / "out.txt"
        source.write_text("明日は雨でしょう。\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["convert_register.py", str(source), "-o", str(target), "--to", "plain"])

        script.main()

        assert target.read_text(encoding="utf-8") == "明日は雨だろう。\n"

    def test_missing_input(self, script, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["convert_register.py", str(tmp_path / "nope.txt")])
        with pytest.raises(SystemExit) as exc_info:
            script.main()
        assert exc_info.value.code == 1

    def test_conversion_error_exits(self, script, tmp_path, monkeypatch):
        """Test rule-table gaps are reported instead of raised."""
        lexicon = {"雨だん": [noun("雨"), aux("だ", "だ"), aux("ん", "ん")]}
        monkeypatch.setattr(desumasu.tokenizer, "create_tokenizer", lambda config=None: FixtureTokenizer(lexicon))
        source = tmp_path / "in.txt"
        source.write_text("雨だん", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["convert_register.py", str(source)])
        with pytest.raises(SystemExit) as exc_info:
            script.main()
        assert exc_info.value.code == 1

    def test_invalid_config_exits(self, script, tmp_path, monkeypatch):
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["convert_register.py", "--config", str(config_path)])
        with pytest.raises(SystemExit) as exc_info:
            script.main()
        assert exc_info.value.code == 1


class TestLoggingOptions:
    """Test how flags and the config file set up logging."""

    @pytest.fixture
    def run(self, script, tmp_path, monkeypatch):
        source = tmp_path / "in.txt"
        source.write_text("今日は晴天だ。\n", encoding="utf-8")

        def _run(*flags, config=None):
            argv = ["convert_register.py", str(source), "-o", str(tmp_path / "out.txt"), *flags]
            if config is not None:
                config_path = tmp_path / "config.json"
                config_path.write_text(json.dumps(config), encoding="utf-8")
                argv += ["--config", str(config_path)]
            monkeypatch.setattr(sys, "argv", argv)
            script.main()
            return logging.getLogger()

        return _run

    def test_defaults_without_config(self, run):
        root = run()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, HumanFormatter)

    def test_config_sets_level_and_format(self, run):
        """Test log_level and log_json are read from the config file."""
        root = run(config={"log_level": "ERROR", "log_json": True})
        assert root.level == logging.ERROR
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_flags_override_config(self, run):
        """Test --verbose wins over the configured level."""
        root = run("--verbose", config={"log_level": "ERROR", "log_json": False})
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, HumanFormatter)

    def test_json_flag_without_config(self, run):
        root = run("--json-logs")
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
