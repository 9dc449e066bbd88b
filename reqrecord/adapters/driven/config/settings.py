"""Configuration loading from environment variables and .env files."""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

__all__ = ["LOG_LEVELS", "Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """Runtime configuration for the request record tools.

    Attributes:
        requests_file_path: Path to the JSON file holding request records.
        log_level: Level name for application loggers.
    """

    requests_file_path: str = Field(
        ..., min_length=1, description="Path to JSON file containing request records."
    )
    log_level: str = Field(default="INFO", description="Application log level name.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the level is a standard logging level name.

        Args:
            v: Level name, any case.

        Returns:
            The upper-cased level name.

        Raises:
            ValueError: If the name is not a logging level.
        """
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level {v!r}; expected one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment.

    Required environment variables:
    - REQUESTS_FILE_PATH: Path to the JSON request file.

    Optional:
    - LOG_LEVEL: Logging level name (default INFO).

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If required env vars are missing.
        ValueError: If configuration is invalid.
    """
    try:
        requests_file_path = os.environ["REQUESTS_FILE_PATH"]
    except KeyError as e:
        raise RuntimeError(f"Missing required environment variable: {e.args[0]}") from e

    settings = Settings(
        requests_file_path=requests_file_path,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )

    logger.info(
        f"Request records configured: file={settings.requests_file_path}, "
        f"log_level={settings.log_level}"
    )

    return settings
