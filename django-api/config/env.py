"""Environment configuration loaded with pydantic-settings.

Django settings read every deployment-specific value from here.
"""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    environment: Literal["development", "test", "production"] = "production"
    debug: bool = False
    django_secret_key: SecretStr = SecretStr("django-insecure-development-only")
    allowed_hosts: str = "localhost,127.0.0.1"

    # Database: sqlite unless a postgres host is configured
    database_name: str = "jobboard.sqlite3"
    postgres_host: str | None = None
    postgres_port: int = 5432
    postgres_user: str = "jobboard"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "jobboard"

    # Tickets
    ticket_secret: SecretStr | None = None
    ticket_id_max_attempts: int = 5

    # Salary model
    salary_train_on_startup: bool = True
    salary_training_epochs: int = 100
    salary_model_seed: int | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
