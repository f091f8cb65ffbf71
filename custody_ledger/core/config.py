from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Custody Ledger API"
    database_url: str = "sqlite:///custody_ledger.db"
    log_level: str = "INFO"
    max_accounts_per_party: int = 3

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CUSTODY_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
