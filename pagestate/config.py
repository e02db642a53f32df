"""Configuration management for pagestate."""

import logging
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Pagination settings with environment variable support."""

    # Pagination settings
    default_page_size: int = 100
    history_capacity: int = 10

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Metrics settings
    metrics_namespace: str = "pagestate"


    @field_validator("default_page_size", "history_capacity")
    @classmethod
    def validate_positive(cls, v):
        """Validate sizes are positive."""
        if v <= 0:
            raise ValueError("Value must be a positive integer")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    model_config = {
        "env_prefix": "PAGESTATE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get pagination settings."""
    return settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    config = config or get_settings()
    logging.basicConfig(level=config.log_level, format=config.log_format)
    logging.getLogger().setLevel(getattr(logging, config.log_level))
