import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .calculator import PensionBasis
from .schedules import DEFAULT_VERSION

BASE_DIR = Path.cwd()


class Settings(BaseSettings):
    log_level: str = "INFO"
    schedule_version: str = Field(default=DEFAULT_VERSION, description="Rate schedule used for settlements")
    pension_basis: PensionBasis = Field(
        default=PensionBasis.FOLLOW_INSURANCE,
        description="Salary used for the pension bracket lookup",
    )

    model_config = SettingsConfigDict(env_prefix="TW_PAYROLL_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=get_settings_env_file())


def get_settings_env_file() -> str | None:
    """Resolve environment-specific env file if it exists."""
    env = os.getenv("TW_PAYROLL_ENV", "dev")
    env_file = BASE_DIR / f".env.{env}"
    default_file = BASE_DIR / ".env"
    if env_file.exists():
        return str(env_file)
    if default_file.exists():
        return str(default_file)
    return None
