"""Codec port definition (interface and errors)."""

from __future__ import annotations

from typing import Protocol

from reqrecord.ports.request import RequestRecord

__all__ = ["RequestCodecPort", "RequestDecodeError", "RequestEncodeError"]


class RequestDecodeError(ValueError):
    """Raised when serialized input cannot be turned into a RequestRecord.

    A bad method is never reported this way; it surfaces as InvalidMethod.
    """


class RequestEncodeError(ValueError):
    """Raised when a record holds values the target format cannot carry."""


class RequestCodecPort(Protocol):
    """Interface for turning records into text and back.

    Implementations must round-trip exactly: every field value, and header
    order including duplicate keys.
    """

    def encode(self, record: RequestRecord, /) -> str:
        """Serialize one record.

        Args:
            record: Record to serialize.

        Returns:
            Text representation.

        Raises:
            RequestEncodeError: If the format cannot represent the record.
        """
        ...

    def decode(self, text: str, /) -> RequestRecord:
        """Rebuild one record.

        Args:
            text: Output of encode().

        Returns:
            Equal record.

        Raises:
            RequestDecodeError: If text is malformed.
            InvalidMethod: If the method is not supported.
        """
        ...
