"""
Tests for config.py - environment-driven settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from config import GameSettings, load_settings, parse_bool  # noqa: E402

ENV_VARS = ("SNAKE_WRAP", "SNAKE_HIGHSCORE_PATH", "SNAKE_LOG_LEVEL", "SNAKE_SEED")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings(use_dotenv=False)

        assert settings == GameSettings()
        assert settings.wrap is False
        assert settings.seed is None
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_WRAP", "yes")
        monkeypatch.setenv("SNAKE_HIGHSCORE_PATH", "/tmp/hs.json")
        monkeypatch.setenv("SNAKE_LOG_LEVEL", "debug")
        monkeypatch.setenv("SNAKE_SEED", "42")

        settings = load_settings(use_dotenv=False)

        assert settings.wrap is True
        assert settings.highscore_path == "/tmp/hs.json"
        assert settings.log_level == "DEBUG"
        assert settings.seed == 42

    def test_bad_seed_raises(self, monkeypatch):
        monkeypatch.setenv("SNAKE_SEED", "abc")
        with pytest.raises(ValueError):
            load_settings(use_dotenv=False)

    def test_dotenv_loaded(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config, "load_dotenv", lambda: calls.append(True))
        load_settings()
        assert calls == [True]

    def test_resolved_highscore_path_expands_user(self, monkeypatch):
        monkeypatch.setenv("HOME", "/home/player")
        settings = GameSettings(highscore_path="~/hs.json")
        assert settings.resolved_highscore_path == "/home/player/hs.json"


class TestParseBool:
    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", " on ", "yes"])
    def test_true_values(self, raw):
        assert parse_bool("X", raw) is True

    @pytest.mark.parametrize("raw", ["0", "false", "Off", "no"])
    def test_false_values(self, raw):
        assert parse_bool("X", raw) is False

    def test_missing_uses_default(self):
        assert parse_bool("X", None, default=True) is True
        assert parse_bool("X", "  ") is False

    def test_junk_raises(self):
        with pytest.raises(ValueError):
            parse_bool("SNAKE_WRAP", "maybe")
