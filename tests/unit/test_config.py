"""
Unit tests for settings.
"""

import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from config import Settings, get_settings
from olympiad.core.logging import configure_logging


class TestSettings:
    """Defaults, environment overrides and validation."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.store_backend == "memory"
        assert settings.database_url == "sqlite:///olympiad.db"
        assert settings.default_session_size == 5
        assert settings.generation_attempts_per_question == 50
        assert settings.exclusion_scope == "all"
        assert settings.streak_milestone == 25
        assert settings.random_seed is None
        assert not settings.use_rest

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "sql")
        monkeypatch.setenv("DEFAULT_SESSION_SIZE", "10")
        monkeypatch.setenv("RANDOM_SEED", "42")

        settings = Settings(_env_file=None)

        assert settings.store_backend == "sql"
        assert settings.default_session_size == 10
        assert settings.random_seed == 42

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("REST_URL=https://x.example/rest/v1\nREST_API_KEY=secret\n", encoding="utf-8")

        settings = Settings(_env_file=env)

        assert settings.use_rest

    @pytest.mark.parametrize("field,value", [
        ("store_backend", "mongo"),
        ("default_session_size", 0),
        ("exclusion_scope", "none"),
        ("streak_milestone", 0),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    """loguru sink setup."""

    def test_file_sink(self, tmp_path):
        log_file = tmp_path / "logs" / "olympiad.log"
        try:
            configure_logging(level="INFO", log_file=str(log_file))
            logger.info("session built")
            logger.debug("not written")
        finally:
            logger.remove()
            logger.add(sys.stderr)

        content = log_file.read_text(encoding="utf-8")
        assert "session built" in content
        assert "not written" not in content
