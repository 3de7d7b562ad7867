"""
Harness Configuration

Settings for talking to a bookstore server, loaded with Pydantic Settings
from BOOKSTORE_* environment variables (or a .env file).

Usage:
    export BOOKSTORE_BASE_URL=http://localhost:3030
    pytest -m integration
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HarnessSettings(BaseSettings):
    """Where the server lives and how to log in to it."""

    base_url: str = Field(
        default="http://localhost:3030",
        description="Base URL of the server under test"
    )
    email: str = Field(
        default="john.doe@example.com",
        description="Login email of the account used for write requests"
    )
    password: str = Field(
        default="password123",
        description="Password of that account"
    )
    login_path: str = Field(
        default="/user/login",
        description="Path of the login endpoint"
    )
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined as base_url + '/category', so drop a trailing slash."""
        return v.rstrip("/")

    @field_validator("login_path")
    @classmethod
    def ensure_leading_slash(cls, v: str) -> str:
        return v if v.startswith("/") else f"/{v}"


@lru_cache
def get_harness_settings() -> HarnessSettings:
    """Get cached harness settings."""
    return HarnessSettings()
