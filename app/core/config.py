# File: app/core/config.py

"""
Settings for the Expense Tracker API.

Every field falls back to an environment variable that is read when
Settings() is built, not when this module is imported.
"""

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _env(name: str, default: str):
    return Field(default_factory=lambda: os.getenv(name, default))


class Settings(BaseModel):
    # env values arrive as strings, so factory defaults go through validation
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "Expense Tracker API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    debug: bool = _env("DEBUG", "false")
    log_level: str = _env("LOG_LEVEL", "INFO")

    # Comma separated in BACKEND_CORS_ORIGINS
    backend_cors_origins: List[str] = _env(
        "BACKEND_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    )

    database_url: str = _env("DATABASE_URL", "sqlite:///./expense_tracker.db")

    # JWT signing
    secret_key: str = _env("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    algorithm: str = _env("JWT_ALGORITHM", "HS256")
    access_token_expire_minutes: int = _env("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24))

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
