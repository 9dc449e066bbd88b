"""JSON file persistence for request collections."""

import logging
import os
import tempfile
from pathlib import Path

from reqrecord.adapters.driven.serialization.json_codec import JsonCodec
from reqrecord.core.collection import DuplicateRequestId, RequestCollection
from reqrecord.ports.codec import RequestDecodeError

__all__ = ["load_requests", "save_requests"]

logger = logging.getLogger(__name__)

_codec = JsonCodec(indent=2)


def load_requests(path: str | Path) -> RequestCollection:
    """Load and validate a request collection from a JSON array file.

    Args:
        path: File written by save_requests() or by hand.

    Returns:
        Collection in file order.

    Raises:
        ValueError: If file not found or unreadable, invalid JSON, wrong
            format, or it holds duplicate ids.
        InvalidMethod: If a record has an unsupported method.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ValueError(f"Request file not found: {path}") from e
    except OSError as e:
        raise ValueError(f"Request file cannot be read: {path} ({e})") from e

    try:
        records = _codec.decode_many(text)
    except RequestDecodeError as e:
        raise ValueError(f"Request file contains invalid request records: {path}\n{e}") from e

    try:
        collection = RequestCollection.from_records(records)
    except DuplicateRequestId as e:
        raise ValueError(f"Request file {path}: {e}") from e

    logger.debug(f"Loaded {len(collection)} requests from {path}")
    return collection


def save_requests(path: str | Path, collection: RequestCollection) -> None:
    """Write a collection as an indented JSON array, keeping its order.

    The file is replaced atomically: content goes to a sibling temporary
    file which is then renamed over the target.

    Args:
        path: Destination file.
        collection: Records to store.
    """
    target = Path(path)
    text = _codec.encode_many(collection)

    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.debug(f"Saved {len(collection)} requests to {target}")
