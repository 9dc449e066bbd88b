"""Request record port definition (value objects)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

__all__ = ["Header", "HttpMethod", "InvalidMethod", "RequestRecord"]


class InvalidMethod(ValueError):
    """Raised when a method is not one of the supported HTTP verbs.

    Attributes:
        method: The rejected value, exactly as supplied.
    """

    def __init__(self, method: object) -> None:
        self.method = method
        super().__init__(
            f"Invalid HTTP method {method!r}; expected one of "
            f"{', '.join(m.value for m in HttpMethod)}"
        )


@unique
class HttpMethod(str, Enum):
    """Closed set of HTTP verbs a request record may carry."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value: object) -> HttpMethod:
        """Parse untyped input into a method.

        Matching is exact: "get" and "HEAD" are both rejected.

        Args:
            value: Method literal or HttpMethod member.

        Returns:
            The matching member.

        Raises:
            InvalidMethod: If value is not one of the five literals.
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidMethod(value) from e


@dataclass(slots=True, frozen=True)
class Header:
    """One HTTP header line. Key case is kept verbatim."""

    key: str
    value: str


@dataclass(slots=True, frozen=True)
class RequestRecord:
    """Immutable description of one outbound HTTP request.

    The method may be passed as its exact literal text and is parsed to
    HttpMethod, or InvalidMethod is raised. Headers must be Header values
    (a str is not a header sequence), or TypeError is raised. Id
    uniqueness belongs to whatever collection holds the record, and url or
    header syntax belongs to the transport.

    Attributes:
        id: Caller-assigned correlation id.
        method: One of the supported HTTP verbs.
        url: Request target, kept verbatim.
        headers: Header lines in send order; duplicates allowed.
        body: Request payload; may be empty for any method.
    """

    id: int
    method: HttpMethod
    url: str
    headers: tuple[Header, ...]
    body: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", HttpMethod.parse(self.method))
        if isinstance(self.headers, (str, bytes)):
            raise TypeError(f"headers must be a sequence of Header, not {type(self.headers).__name__}")
        headers = tuple(self.headers)
        for header in headers:
            if not isinstance(header, Header):
                raise TypeError(f"headers must contain Header values, got {header!r}")
        object.__setattr__(self, "headers", headers)

    def header_values(self, key: str) -> list[str]:
        """Return values of every header named exactly `key`, in order."""
        return [h.value for h in self.headers if h.key == key]
