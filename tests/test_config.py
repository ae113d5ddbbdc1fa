"""Tests for environment configuration."""

import os

import pytest

from reply_drafter.config import DrafterConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no drafter variables set."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "REPLY_DRAFTER_LOCALE",
        "REPLY_DRAFTER_DELAY_SECONDS",
        "REPLY_DRAFTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDrafterConfig:
    """DrafterConfig validation"""

    def test_defaults(self) -> None:
        config = DrafterConfig()
        assert config.locale == "en"
        assert config.delay_seconds == 0.0
        assert config.log_level == "INFO"

    def test_locale_normalized(self) -> None:
        assert DrafterConfig(locale="FR").locale == "fr"

    def test_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale"):
            DrafterConfig(locale="de")

    def test_negative_delay(self) -> None:
        with pytest.raises(ValueError, match="delay_seconds"):
            DrafterConfig(delay_seconds=-1)

    def test_log_level(self) -> None:
        assert DrafterConfig(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValueError, match="log level"):
            DrafterConfig(log_level="chatty")


class TestLoadConfig:
    """load_config reads the environment"""

    def test_defaults_from_empty_environment(self) -> None:
        config = load_config()
        assert config == DrafterConfig()

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("REPLY_DRAFTER_LOCALE", "fr")
        monkeypatch.setenv("REPLY_DRAFTER_DELAY_SECONDS", "1.5")
        monkeypatch.setenv("REPLY_DRAFTER_LOG_LEVEL", "warning")
        config = load_config()
        assert config.locale == "fr"
        assert config.delay_seconds == 1.5
        assert config.log_level == "WARNING"

    def test_reads_dotenv_file(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("REPLY_DRAFTER_LOCALE=fr\n", encoding="utf-8")
        try:
            assert load_config().locale == "fr"
        finally:
            os.environ.pop("REPLY_DRAFTER_LOCALE", None)

    def test_non_numeric_delay(self, monkeypatch) -> None:
        monkeypatch.setenv("REPLY_DRAFTER_DELAY_SECONDS", "soon")
        with pytest.raises(ValueError, match="must be a number"):
            load_config()

    def test_explicit_locale_wins(self, monkeypatch) -> None:
        monkeypatch.setenv("REPLY_DRAFTER_LOCALE", "xx")
        assert load_config(locale="fr").locale == "fr"
