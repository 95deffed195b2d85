"""Tests for settings and logging setup."""

import logging

from roof_estimate.config import Settings
from roof_estimate.logging_config import setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ROOF_PRICE_PER_SQUARE", raising=False)
        settings = Settings(_env_file=None)
        assert settings.price_per_square == 350
        assert settings.port == 8000
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ROOF_PRICE_PER_SQUARE", "425.5")
        monkeypatch.setenv("ROOF_PORT", "9000")
        settings = Settings(_env_file=None)
        assert settings.price_per_square == 425.5
        assert settings.port == 9000


class TestSetupLogging:
    def test_sets_level_and_single_handler(self):
        root = logging.getLogger()
        saved_level, saved_handlers = root.level, list(root.handlers)
        try:
            setup_logging("debug")
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            setup_logging("WARNING")
            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
