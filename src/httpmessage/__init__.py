"""
=============================================================================
HTTPMESSAGE - Immutable HTTP Message Value Types
=============================================================================

Transport-independent value objects for HTTP requests, responses, URIs and
byte-stream bodies, so that independently written HTTP components can hand
messages to each other without sharing a framework.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpmessage/
    ├── __init__.py          # Public API (this file)
    ├── __main__.py          # CLI entry point
    ├── config.py            # MessageConfig
    ├── errors.py            # ValidationError, ResourceError
    ├── log.py               # Logging setup
    ├── core/
    │   └── stream.py        # Stream: body resource wrapper
    └── http/
        ├── status_codes.py  # HTTPStatus and reason phrases
        ├── uri.py           # Uri
        ├── headers.py       # Headers
        ├── message.py       # Message base
        ├── request.py       # Request
        └── response.py      # Response, ResponseEmitter

=============================================================================
QUICK START
=============================================================================

    from httpmessage import Request, Response, Stream, Uri

    request = Request("GET", Uri(scheme="https", host="Example.COM", path="/a b"))
    request.request_target        # "/a%20b"
    request.get_header("Host")    # ["example.com"]

    response = (Response(404)
        .with_header("Content-Type", "text/plain")
        .with_body(Stream.from_bytes(b"nothing here")))
    response.reason_phrase        # "Not Found"

Every with_*() call returns a new object; nothing is modified in place.

=============================================================================
"""

__version__ = "1.0.0"

from .config import MessageConfig
from .core.stream import Stream
from .http import (
    DEFAULT_PORTS,
    Headers,
    HTTPMethod,
    HTTPStatus,
    Message,
    MessageError,
    Request,
    ResourceError,
    Response,
    ResponseEmitter,
    Uri,
    ValidationError,
    reason_phrase,
    serialize_response,
)

__all__ = [
    "Uri",
    "Headers",
    "Message",
    "Request",
    "Response",
    "Stream",
    "ResponseEmitter",
    "serialize_response",
    "HTTPMethod",
    "HTTPStatus",
    "DEFAULT_PORTS",
    "reason_phrase",
    "MessageError",
    "ValidationError",
    "ResourceError",
    "MessageConfig",
    "__version__",
]
