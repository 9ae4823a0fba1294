from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from dtrule.validation.violations import DEFAULT_MESSAGE


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DTRULE_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Violation reporting
    VALIDATION_MODE: str = "collect_all"  # or "fail_fast"
    MAX_ERRORS: int = 50
    DATETIME_MESSAGE: str = DEFAULT_MESSAGE


@lru_cache
def get_settings() -> Settings:
    return Settings()
