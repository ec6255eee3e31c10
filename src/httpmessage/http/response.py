"""
=============================================================================
HTTP RESPONSE VALUE
=============================================================================

An immutable HTTP response (status code, reason phrase, headers, body,
protocol version) plus ResponseEmitter, which writes a finished response
onto a byte sink.

=============================================================================
HTTP RESPONSE ANATOMY
=============================================================================

    HTTP/1.1 404 Not Found\r\n               ← status line
    Content-Type: text/plain\r\n             ← one line per header VALUE,
    Set-Cookie: a=1\r\n                        in Headers order
    Set-Cookie: b=2\r\n
    \r\n                                     ← empty line (separator)
    no such page                             ← body bytes (if any)

=============================================================================
REASON PHRASES
=============================================================================

    Response(404).reason_phrase                       →  "Not Found"
    Response(404, reason_phrase="Gone Fishing")       →  "Gone Fishing"
    Response(200).with_status(404)                    →  "Not Found"
    Response(200).with_status(404, "Custom")          →  "Custom"
    Response(599).reason_phrase                       →  None

An explicit phrase sticks until the next with_status(); without one, the
phrase always follows the current code.

=============================================================================
"""

import io
import logging
import re
from typing import BinaryIO, Optional, Union

from ..core.stream import Stream
from ..errors import ResourceError, ValidationError
from .message import DEFAULT_PROTOCOL_VERSION, HeadersInit, Message
from .status_codes import HTTPStatus, reason_phrase as lookup_reason_phrase


logger = logging.getLogger(__name__)

MIN_STATUS = 100
MAX_STATUS = 599

# Three-digit status code given as a string: "200", "404", ...
STATUS_CODE_PATTERN = re.compile(r"^[1-5][0-9]{2}$")

DEFAULT_CHUNK_SIZE = 8192


def _validate_status(code) -> int:
    """
    Accept an int in 100..599 or a matching three-digit string.

    Raises:
        ValidationError: For anything else (including bool).
    """
    if isinstance(code, bool):
        raise ValidationError(f"Invalid status code: {code!r}", argument="code")

    if isinstance(code, int):
        if MIN_STATUS <= code <= MAX_STATUS:
            return int(code)
        raise ValidationError(
            f"Status code must be in range {MIN_STATUS}-{MAX_STATUS}, got {code}",
            argument="code",
        )

    if isinstance(code, str) and STATUS_CODE_PATTERN.match(code):
        return int(code)

    raise ValidationError(f"Invalid status code: {code!r}", argument="code")


def _validate_reason_phrase(phrase) -> Optional[str]:
    if phrase is not None and not isinstance(phrase, str):
        raise ValidationError(
            f"Reason phrase must be a string, got {type(phrase).__name__}",
            argument="reason_phrase",
        )
    return phrase


class Response(Message):
    """
    Immutable HTTP response.

        response = (Response(HTTPStatus.OK)
            .with_header("Content-Type", "text/plain")
            .with_body(Stream.from_bytes(b"hello")))

        response.status_code     # 200
        response.reason_phrase   # "OK"
    """

    __slots__ = ("_status_code", "_reason_phrase")

    def __init__(
        self,
        status_code: Union[int, str] = HTTPStatus.OK,
        headers: HeadersInit = None,
        body: Optional[Stream] = None,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
        reason_phrase: Optional[str] = None,
    ):
        """
        Args:
            status_code: Int in 100..599, or a three-digit string.
            headers: A Headers instance or a name → value(s) mapping.
            body: Body stream; an empty in-memory stream by default.
            protocol_version: e.g. "1.1".
            reason_phrase: Explicit phrase. None means "use the table";
                           "" is kept as an explicitly empty phrase.

        Raises:
            ValidationError: If any argument is invalid.
        """
        super().__init__(headers, body, protocol_version)
        self._status_code = _validate_status(status_code)
        self._reason_phrase = _validate_reason_phrase(reason_phrase)

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def reason_phrase(self) -> Optional[str]:
        """Explicit phrase if set, else the table entry for the code, else None."""
        if self._reason_phrase is not None:
            return self._reason_phrase
        return lookup_reason_phrase(self._status_code)

    def with_status(self, code: Union[int, str], reason_phrase: str = "") -> "Response":
        """
        Change the status code.

        Args:
            code: Int in 100..599, or a three-digit string.
            reason_phrase: Stored verbatim when non-empty; otherwise the
                           phrase is derived from the new code.

        Raises:
            ValidationError: If the code is invalid.
        """
        code = _validate_status(code)
        phrase = _validate_reason_phrase(reason_phrase) or None
        return self._evolve(status_code=code, reason_phrase=phrase)

    @property
    def status_line(self) -> str:
        """
        e.g. "HTTP/1.1 200 OK".

        An unknown code with no explicit phrase keeps the trailing space
        (RFC 7230: the reason phrase may be empty, the SP may not).
        """
        return f"HTTP/{self._protocol_version} {self._status_code} {self.reason_phrase or ''}"

    def __repr__(self) -> str:
        return f"<Response {self._status_code} {self.reason_phrase or ''}>"


# =============================================================================
# EMISSION
# =============================================================================


class ResponseEmitter:
    """
    Writes a finished Response onto a binary sink.

    =========================================================================
    EMISSION ORDER
    =========================================================================

        1. status line                      "HTTP/1.1 200 OK\\r\\n"
        2. one line per header value        "Name: value\\r\\n"
        3. empty line                       "\\r\\n"
        4. body, in chunk_size pieces       only when the body size is
                                            non-zero (or unknown but readable)

    Nothing is added: no Content-Length, no Date. The response is emitted
    exactly as built.

    =========================================================================
    """

    def __init__(self, sink: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Args:
            sink: Anything with a binary write() (socket.makefile("wb"),
                  an open file, io.BytesIO).
            chunk_size: Bytes read from the body per write.
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self.sink = sink
        self.chunk_size = chunk_size

    def _write(self, data: bytes) -> int:
        try:
            self.sink.write(data)
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to write to the response sink: {e}") from e
        return len(data)

    def emit(self, response: Response) -> int:
        """
        Write the response.

        Returns:
            Total number of bytes written.

        Raises:
            ResourceError: If the sink or the body stream fails.
        """
        lines = [response.status_line]
        lines.extend(f"{name}: {value}" for name, value in response.headers.lines())
        lines.append("")
        written = self._write(("\r\n".join(lines) + "\r\n").encode("utf-8"))

        body = response.body
        size = body.get_size()
        body_bytes = 0

        if size or (size is None and body.is_readable()):
            if body.is_seekable():
                body.rewind()
            # Short reads are normal on pipes and unbuffered files; only b"" ends the body
            while True:
                chunk = body.read(self.chunk_size)
                if not chunk:
                    break
                body_bytes += self._write(chunk)

        logger.debug(
            f"Emitted {response.status_line.rstrip()} "
            f"({len(response.headers)} headers, {body_bytes} body bytes)"
        )
        return written + body_bytes


def serialize_response(response: Response, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Emit a response into memory and return the bytes."""
    buffer = io.BytesIO()
    ResponseEmitter(buffer, chunk_size=chunk_size).emit(response)
    return buffer.getvalue()
