"""Healthcheck validator for container orchestration."""

import logging

from reqrecord.adapters.driven.config.settings import load_settings
from reqrecord.adapters.driven.logging.logging_config import configure_logs
from reqrecord.adapters.driven.storage.file_store import load_requests

__all__ = ["main"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Run health check for container orchestration.

    Validates:
    - Required environment variables are set.
    - Request file exists and holds valid, id-unique records.

    Returns:
        0 if healthy, 1 if unhealthy.
    """
    configure_logs()

    try:
        settings = load_settings()
        collection = load_requests(settings.requests_file_path)
    except Exception as exc:
        logger.error(f"Request records healthcheck FAILED: {exc}")
        return 1

    logger.info(f"Request records healthcheck OK ({len(collection)} requests)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
