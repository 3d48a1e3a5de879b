"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "SME Funding Compatibility API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Eligibility classification
    ELIGIBLE_THRESHOLD: int = Field(default=70, ge=1, le=100)
    CONDITIONAL_THRESHOLD: int = Field(default=40, ge=0, le=99)

    # Score at which an application is worth continuing
    PROCEED_THRESHOLD: int = Field(default=60, ge=0, le=100)

    @model_validator(mode="after")
    def validate_thresholds(self):
        """Eligible band must sit strictly above the conditional band."""
        if self.CONDITIONAL_THRESHOLD >= self.ELIGIBLE_THRESHOLD:
            raise ValueError(
                f"CONDITIONAL_THRESHOLD ({self.CONDITIONAL_THRESHOLD}) must be "
                f"below ELIGIBLE_THRESHOLD ({self.ELIGIBLE_THRESHOLD})"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
