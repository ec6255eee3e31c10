"""
=============================================================================
HTTP MESSAGE VALUE TYPES
=============================================================================

    http/
    ├── status_codes.py  HTTPStatus enum and reason phrases
    ├── uri.py           Uri: normalized, immutable URI
    ├── headers.py       Headers: case-insensitive header multimap
    ├── message.py       Message: version + headers + body
    ├── request.py       Request, HTTPMethod
    └── response.py      Response, ResponseEmitter

Dependency order (leaf first):

    ..errors ← uri, headers, status_codes ← message ← request, response

=============================================================================
"""

from ..errors import MessageError, ResourceError, ValidationError
from .headers import Headers
from .message import DEFAULT_PROTOCOL_VERSION, Message
from .request import HTTPMethod, Request
from .response import Response, ResponseEmitter, serialize_response
from .status_codes import HTTPStatus, reason_phrase
from .uri import DEFAULT_PORTS, Uri

__all__ = [
    # Errors
    "MessageError",
    "ValidationError",
    "ResourceError",
    # Values
    "Uri",
    "Headers",
    "Message",
    "Request",
    "Response",
    # Enumerations and tables
    "HTTPMethod",
    "HTTPStatus",
    "DEFAULT_PORTS",
    "DEFAULT_PROTOCOL_VERSION",
    "reason_phrase",
    # Emission
    "ResponseEmitter",
    "serialize_response",
]
