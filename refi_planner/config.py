"""Application configuration management using Pydantic Settings."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Flask Configuration
    secret_key: str = Field(..., alias="SECRET_KEY")
    flask_app: str = Field(default="wsgi.py", alias="FLASK_APP")
    flask_env: str = Field(default="development", alias="FLASK_ENV")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Refinance Policy
    closing_cost_rate: float = Field(default=0.03, alias="CLOSING_COST_RATE")
    term_reduction_years: int = Field(default=15, alias="TERM_REDUCTION_YEARS")
    term_reduction_rate_markdown: float = Field(
        default=0.0025, alias="TERM_REDUCTION_RATE_MARKDOWN"
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Ensure SECRET_KEY is provided and not a placeholder."""
        if not v or v == "your-secret-key-here-change-in-production":
            raise ValueError("SECRET_KEY must be set to a secure value")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        """Validate application environment."""
        allowed_envs = {"development", "testing", "production"}
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("closing_cost_rate")
    @classmethod
    def validate_closing_cost_rate(cls, v):
        """Closing costs are a fraction of the balance."""
        if not 0 <= v < 1:
            raise ValueError("CLOSING_COST_RATE must be between 0 and 1")
        return v

    @field_validator("term_reduction_years")
    @classmethod
    def validate_term_reduction_years(cls, v):
        if not 1 <= v <= 50:
            raise ValueError("TERM_REDUCTION_YEARS must be between 1 and 50")
        return v

    @field_validator("term_reduction_rate_markdown")
    @classmethod
    def validate_rate_markdown(cls, v):
        if not 0 <= v < 0.05:
            raise ValueError("TERM_REDUCTION_RATE_MARKDOWN must be between 0 and 0.05")
        return v


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Get application settings instance."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


# Global settings instance - created on first use
_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Reset global settings instance (useful for testing)."""
    global _settings
    _settings = None
