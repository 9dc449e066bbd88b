"""Ordered, id-unique collection of request records."""

import logging
from collections.abc import Iterable, Iterator

from reqrecord.ports.request import RequestRecord

__all__ = ["DuplicateRequestId", "RequestCollection"]

logger = logging.getLogger(__name__)


class DuplicateRequestId(ValueError):
    """Raised when a record id is already held by the collection."""

    def __init__(self, request_id: int) -> None:
        self.request_id = request_id
        super().__init__(f"Duplicate request id: {request_id}")


class RequestCollection:
    """Request log keeping records in insertion order.

    Records never check their own id; this collection is where id
    uniqueness and id assignment live.
    """

    def __init__(self) -> None:
        self._records: dict[int, RequestRecord] = {}

    @classmethod
    def from_records(cls, records: Iterable[RequestRecord]) -> "RequestCollection":
        """Build a collection, rejecting duplicate ids.

        Args:
            records: Records in the order they should be kept.

        Returns:
            New collection.

        Raises:
            DuplicateRequestId: If two records share an id.
        """
        collection = cls()
        for record in records:
            collection.add(record)
        return collection

    def add(self, record: RequestRecord) -> None:
        """Append a record.

        Raises:
            DuplicateRequestId: If the id is already present.
        """
        if record.id in self._records:
            raise DuplicateRequestId(record.id)
        self._records[record.id] = record
        logger.debug(f"Added request #{record.id} ({record.method.value} {record.url})")

    def get(self, request_id: int) -> RequestRecord:
        return self._records[request_id]

    def replace(self, record: RequestRecord) -> RequestRecord:
        """Swap in a new record with an existing id, keeping its position.

        Args:
            record: Replacement record.

        Returns:
            The record that was replaced.

        Raises:
            KeyError: If no record has that id.
        """
        previous = self._records[record.id]
        self._records[record.id] = record
        return previous

    def remove(self, request_id: int) -> RequestRecord:
        return self._records.pop(request_id)

    def next_id(self) -> int:
        """Return an id not used by any record (max + 1, or 1 when empty)."""
        return max(self._records, default=0) + 1

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RequestRecord]:
        return iter(list(self._records.values()))

    def __contains__(self, request_id: object) -> bool:
        return request_id in self._records

    def __repr__(self) -> str:
        return f"RequestCollection({list(self._records.values())!r})"
