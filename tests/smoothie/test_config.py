"""Tests for settings and logging setup."""

from loguru import logger

from smoothie import logging as smoothie_logging
from smoothie.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_to_file is False
        assert settings.currency_symbol == "$"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("SMOOTHIE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SMOOTHIE_LOG_TO_FILE", "true")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.log_to_file is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestSetupLogging:
    def test_file_sink_written_when_enabled(self, monkeypatch, tmp_path):
        monkeypatch.setattr(smoothie_logging, "LOG_DIR", tmp_path / "logs")
        smoothie_logging.setup_logging(level="INFO", log_to_file=True)
        try:
            logger.info("hello from test")
            logger.complete()
            log_file = tmp_path / "logs" / "smoothie.log"
            assert log_file.exists()
            assert "hello from test" in log_file.read_text()
        finally:
            logger.remove()

    def test_no_log_dir_without_file_sink(self, monkeypatch, tmp_path):
        monkeypatch.setattr(smoothie_logging, "LOG_DIR", tmp_path / "logs")
        smoothie_logging.setup_logging(level="INFO")
        logger.remove()
        assert not (tmp_path / "logs").exists()
