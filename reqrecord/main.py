"""Application entrypoint."""

import logging

from reqrecord.adapters.driven.config.settings import load_settings
from reqrecord.adapters.driven.logging.logging_config import APP_LOGGER, configure_logs
from reqrecord.adapters.driven.storage.file_store import load_requests
from reqrecord.core.collection import RequestCollection
from reqrecord.ports.request import RequestRecord
from reqrecord.ports.settings import SettingsPort

__all__ = ["main", "describe_request", "summarize"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Load, validate and summarize the configured request file.

    Startup sequence:
    1. Configure logging.
    2. Load and validate configuration.
    3. Load the request file into an id-unique collection.
    4. Log one line per request and a total.

    Returns:
        0 on success, 1 on configuration or request file errors.
    """
    configure_logs()
    logger.info("Starting request record loader...")

    try:
        config = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check REQUESTS_FILE_PATH and LOG_LEVEL.",
            exc,
        )
        return 1

    # Wrap config into port so the rest depends on the DTO, not pydantic
    settings_port = SettingsPort(
        requests_file_path=config.requests_file_path,
        log_level=config.log_level,
    )
    logging.getLogger(APP_LOGGER).setLevel(settings_port.log_level)

    try:
        collection = load_requests(settings_port.requests_file_path)
    except ValueError as exc:
        logger.error(f"Request file error: {exc}")
        return 1

    summarize(collection)
    return 0


def describe_request(record: RequestRecord) -> str:
    """Return a one-line human summary of a request."""
    return (
        f"#{record.id} {record.method.value} {record.url} "
        f"({len(record.headers)} headers, {len(record.body)} body chars)"
    )


def summarize(collection: RequestCollection) -> None:
    """Log every request of the collection in order, then the total."""
    for record in collection:
        logger.info(describe_request(record))
    logger.info(f"Loaded {len(collection)} requests.")


if __name__ == "__main__":
    raise SystemExit(main())
