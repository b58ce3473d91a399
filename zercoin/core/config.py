"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./zercoin.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None
    # Seconds a SQLite connection waits for the database write lock.
    busy_timeout: float = Field(default=30.0, gt=0)

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class LedgerSettings(BaseModel):
    """Fixed-point layout of stored amounts, matching the NUMERIC(18, 8) columns."""

    amount_scale: int = Field(default=8, ge=0)
    amount_precision: int = Field(default=18, gt=0)

    @model_validator(mode="after")
    def _scale_fits_precision(self) -> "LedgerSettings":
        if self.amount_scale >= self.amount_precision:
            raise ValueError("amount_scale must be smaller than amount_precision")
        return self


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "ZerCOIN Ledger"
    api_prefix: str = "/api"
    log_level: str = "INFO"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    ledger: LedgerSettings = LedgerSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port


@lru_cache()
def get_settings() -> Settings:
    return Settings()
