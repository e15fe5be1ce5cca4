# File: tests/test_config.py

from app.core.config import Settings


def test_settings_read_environment_when_built(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "from-env")
    monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://a.example, http://b.example")

    settings = Settings()

    assert settings.secret_key == "from-env"
    assert settings.access_token_expire_minutes == 5
    assert settings.backend_cors_origins == ["http://a.example", "http://b.example"]


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("JWT_ALGORITHM", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    settings = Settings()

    assert settings.algorithm == "HS256"
    assert settings.debug is False
