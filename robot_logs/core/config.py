"""Application configuration using pydantic settings with structured sections."""

from __future__ import annotations

import ssl
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class DatabaseSettings(BaseSettings):
    """Connection settings read from ``DB_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = "localhost"
    user: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    port: int = 5432
    driver: str = "postgresql+asyncpg"
    # Full SQLAlchemy URL, wins over the individual parts when set.
    url: Optional[str] = None

    ssl: bool = False
    # Accept the server certificate without verification. Off unless explicitly enabled.
    ssl_no_verify: bool = False

    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    create_tables: bool = True

    def build_url(self) -> str | URL:
        if self.url:
            return self.url
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.name,
        )

    def connect_args(self) -> dict[str, Any]:
        """Driver keyword arguments (TLS context for asyncpg)."""
        if not self.ssl:
            return {}
        context = ssl.create_default_context()
        if self.ssl_no_verify:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        return {"ssl": context}


class ServerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    project_name: str = "Robot Logs Service"

    cors_origins: list[str] = ["*"]
    max_body_bytes: int = 50 * 1024 * 1024
    gzip_minimum_size: int = 1000

    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @property
    def database_url(self) -> str | URL:
        return self.database.build_url()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
