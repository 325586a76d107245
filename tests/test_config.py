"""Tests for settings loading."""

import dataclasses
import logging

import pytest

from scholarship_eval.config import DEFAULT_GEMINI_MODEL, Settings, load_settings, resolve_log_level


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings.gemini_api_key == ""
        assert settings.gemini_model == DEFAULT_GEMINI_MODEL
        assert settings.allowed_origins == ("*",)
        assert settings.log_level == "INFO"

    def test_from_environment_mapping(self):
        settings = load_settings({
            "GEMINI_API_KEY": " secret-key ",
            "GEMINI_MODEL": "gemini-2.5-pro",
            "ALLOWED_ORIGINS": "http://localhost:3000, https://apply.example.com",
            "LOG_LEVEL": "debug",
        })
        assert settings.gemini_api_key == "secret-key"
        assert settings.gemini_model == "gemini-2.5-pro"
        assert settings.allowed_origins == ("http://localhost:3000", "https://apply.example.com")
        assert settings.log_level == "DEBUG"

    def test_blank_origins_fall_back_to_wildcard(self):
        assert load_settings({"ALLOWED_ORIGINS": " , "}).allowed_origins == ("*",)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        assert load_settings().gemini_api_key == "from-env"

    def test_api_key_not_logged(self, caplog):
        caplog.set_level("DEBUG", logger="scholarship_eval.config")
        load_settings({"GEMINI_API_KEY": "super-secret-value"})
        assert "super-secret-value" not in caplog.text
        assert "GEMINI_API_KEY set: True" in caplog.text


class TestSettings:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Settings().gemini_model = "changed"

    def test_hashable(self):
        assert hash(Settings(gemini_api_key="a")) == hash(Settings(gemini_api_key="a"))


class TestLogLevel:
    @pytest.mark.parametrize("raw,expected", [("debug", "DEBUG"), (" warning ", "WARNING"), ("ERROR", "ERROR")])
    def test_known_levels(self, raw, expected):
        assert resolve_log_level(raw) == expected

    @pytest.mark.parametrize("raw", ["verbose", "", None])
    def test_unknown_level_falls_back_to_info(self, raw):
        assert resolve_log_level(raw) == "INFO"

    def test_invalid_env_level_does_not_raise(self):
        assert load_settings({"LOG_LEVEL": "verbose"}).log_level == "INFO"

    def test_settings_level_applied_to_root_logger(self):
        load_settings({"LOG_LEVEL": "warning"})
        assert logging.getLogger().level == logging.WARNING
