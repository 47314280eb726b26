"""Application settings and configuration."""

from enum import Enum
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class LogLevel(str, Enum):
    """Log levels accepted for the quizzical loggers."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Trivia API
    trivia_api_url: str = Field(
        default="https://opentdb.com/api.php",
        description="Trivia API endpoint",
        validation_alias="TRIVIA_API_URL",
    )

    request_timeout: float = Field(
        default=10.0,
        gt=0.0,
        le=120.0,
        description="Seconds to wait for the trivia API before giving up",
        validation_alias="REQUEST_TIMEOUT",
    )

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Log level for the quizzical loggers",
        validation_alias="LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Loaded the first time and then cached for the client and CLI
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
