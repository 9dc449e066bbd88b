"""Settings port definition (DTO)."""

from dataclasses import dataclass

__all__ = ["SettingsPort"]


@dataclass
class SettingsPort:
    """Runtime settings for the entrypoint.

    Decouples the rest of the package from concrete configuration sources.

    Attributes:
        requests_file_path: JSON file holding the stored request records.
        log_level: Level name for application loggers.
    """

    requests_file_path: str
    log_level: str = "INFO"
