# tests/test_config.py

from __future__ import annotations

import pytest

from taskflow.config import DEFAULT_DATABASE_URL, Settings


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///tmp/x.db")
    monkeypatch.setenv("JWT_SECRET_KEY", "s3cret")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
    monkeypatch.setenv("HIDE_FOREIGN_TASKS", "true")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.database_url == "sqlite:///tmp/x.db"
    assert settings.secret_key == "s3cret"
    assert settings.port == 8080
    assert settings.access_token_expire_minutes == 5
    assert settings.hide_foreign_tasks is True
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"


def test_defaults() -> None:
    settings = Settings()

    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.port == 5000
    assert settings.access_token_expire_minutes == 60
    assert settings.hide_foreign_tasks is False
