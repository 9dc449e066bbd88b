"""HTTP/1.1 message text codec for request records.

Renders a record as the text a client would put on the wire and parses such
text back. Header lines keep their order, duplicates and key case; the body
is everything after the blank line, verbatim. No header-name normalization
and no Content-Length handling take place.
"""

import logging
import re

from reqrecord.ports.codec import RequestDecodeError, RequestEncodeError
from reqrecord.ports.request import Header, HttpMethod, RequestRecord

__all__ = ["HTTP_VERSION", "HttpMessageCodec"]

logger = logging.getLogger(__name__)

HTTP_VERSION = "HTTP/1.1"
CRLF = "\r\n"
LF = "\n"

VERSION_PATTERN = re.compile(r"^HTTP/\d\.\d$")
LINE_BREAK_PATTERN = re.compile(r"[\r\n]")


class HttpMessageCodec:
    """Encode and decode request records as HTTP/1.1 request messages.

    The wire format has no slot for the record id, so this is not a
    RequestCodecPort: decode() requires the caller to supply the id, for
    example from RequestCollection.next_id(). Every other field round-trips
    exactly.
    """

    def encode(self, record: RequestRecord, /) -> str:
        """Render a record as request line, header lines, blank line, body.

        Raises:
            RequestEncodeError: If url, a header key or a header value
                contains a line break, or a header key is empty or holds ':'.
        """
        if LINE_BREAK_PATTERN.search(record.url):
            raise RequestEncodeError(f"Request #{record.id}: url contains a line break")
        lines = [f"{record.method.value} {record.url} {HTTP_VERSION}"]
        for header in record.headers:
            _check_header(record.id, header)
            lines.append(f"{header.key}: {header.value}")
        return CRLF.join(lines) + CRLF + CRLF + record.body

    def decode(self, text: str, /, *, id: int) -> RequestRecord:
        """Parse an HTTP/1.1 request message into a record.

        CRLF and bare LF line endings are both accepted; the ending used by
        the request line applies to the whole head.

        Args:
            text: Raw request message.
            id: Caller-assigned record id.

        Returns:
            Parsed record.

        Raises:
            RequestDecodeError: If the request line, version or a header line
                is malformed, or the head is not terminated by a blank line.
            InvalidMethod: If the method is not supported.
        """
        first_break = text.find(LF)
        if first_break < 0:
            raise RequestDecodeError("Missing end of request line")
        eol = CRLF if text[first_break - 1 : first_break] == "\r" else LF

        head, separator, body = text.partition(eol + eol)
        if not separator:
            raise RequestDecodeError("Missing blank line after headers")

        request_line, *header_lines = head.split(eol)
        method, url = _parse_request_line(request_line)
        headers = [_parse_header_line(line) for line in header_lines]

        record = RequestRecord(
            id=id,
            method=method,
            url=url,
            headers=headers,
            body=body,
        )
        logger.debug(
            f"Decoded request #{record.id}: {record.method.value} {record.url} "
            f"with {len(record.headers)} headers"
        )
        return record


def _check_header(request_id: int, header: Header) -> None:
    if not header.key or ":" in header.key:
        raise RequestEncodeError(f"Request #{request_id}: invalid header key {header.key!r}")
    if LINE_BREAK_PATTERN.search(header.key) or LINE_BREAK_PATTERN.search(header.value):
        raise RequestEncodeError(f"Request #{request_id}: header {header.key!r} contains a line break")


def _parse_request_line(line: str) -> tuple[HttpMethod, str]:
    method, space, rest = line.partition(" ")
    url, space2, version = rest.rpartition(" ")
    if not space or not space2:
        raise RequestDecodeError(f"Malformed request line: {line!r}")
    if not VERSION_PATTERN.match(version):
        raise RequestDecodeError(f"Unsupported HTTP version: {version!r}")
    return HttpMethod.parse(method), url


def _parse_header_line(line: str) -> Header:
    key, colon, value = line.partition(":")
    if not colon or not key:
        raise RequestDecodeError(f"Malformed header line: {line!r}")
    # encode() always writes exactly one space after the colon
    if value.startswith(" "):
        value = value[1:]
    return Header(key=key, value=value)
