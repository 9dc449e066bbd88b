"""Console logging setup for the request record tools."""

import logging

__all__ = ["APP_LOGGER", "configure_logs"]

APP_LOGGER = "reqrecord"


def configure_logs(level: str = "INFO") -> None:
    """Configure console logging.

    Sets up:
    - Root logger at INFO level.
    - Pydantic loggers at WARNING level.
    - Application loggers (reqrecord) at the given level.
    - Format with timestamp, level, module, and line number.

    Args:
        level: Level name for application loggers.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
    date_format = "%d/%m/%y %H:%M:%S"

    formatter = logging.Formatter(log_format, date_format)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    # Root logger
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    root.addHandler(handler)

    # Suppress verbose library loggers
    logging.getLogger("pydantic").setLevel(logging.WARNING)

    # Application loggers
    logging.getLogger(APP_LOGGER).setLevel(level.upper())
