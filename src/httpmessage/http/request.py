"""
=============================================================================
HTTP REQUEST VALUE
=============================================================================

An immutable outgoing or incoming HTTP request: method, target URI,
headers, body and protocol version.

=============================================================================
REQUEST TARGET
=============================================================================

The request target is what goes between the method and the version on
the request line:

    GET /a/b?q=1 HTTP/1.1
        ────┬───
            └── request target

It is derived from the URI unless one was set explicitly:

    ┌──────────────────────────────┬───────────────────┐
    │  URI                         │  Request target   │
    ├──────────────────────────────┼───────────────────┤
    │  (none)                      │  /                │
    │  http://example.com          │  /                │
    │  http://example.com/a/b      │  /a/b             │
    │  http://example.com/a/b?q=1  │  /a/b?q=1         │
    └──────────────────────────────┴───────────────────┘

Explicit targets cover the other RFC 7230 forms ("*" for OPTIONS,
"example.com:443" for CONNECT, absolute-form for proxies).

=============================================================================
HOST HEADER SYNCHRONIZATION
=============================================================================

At construction, a request without a Host value gets one from the URI
host. A Host header with no values counts as missing.
with_uri() then follows these rules:

    preserve_host=False:  URI has a host  →  Host is overwritten
    preserve_host=True:   no Host value AND URI has a host  →  Host is set
                          otherwise Host is left alone

=============================================================================
"""

from enum import Enum
from typing import Optional, Union

from ..core.stream import Stream
from ..errors import ValidationError
from .message import DEFAULT_PROTOCOL_VERSION, HeadersInit, Message
from .uri import Uri


class HTTPMethod(str, Enum):
    """
    The request methods a Request accepts.

    A str subclass, so ``request.method == "GET"`` holds.
    """

    GET = "GET"            # Retrieve resource
    HEAD = "HEAD"          # GET without body
    POST = "POST"          # Create resource / submit data
    PUT = "PUT"            # Replace resource
    DELETE = "DELETE"      # Delete resource
    CONNECT = "CONNECT"    # Establish tunnel (HTTPS proxy)
    OPTIONS = "OPTIONS"    # Get allowed methods (CORS preflight)
    TRACE = "TRACE"        # Echo request (debugging)
    PATCH = "PATCH"        # Partial update

    def __str__(self) -> str:
        return self.value


UriInit = Union[Uri, str, None]


def _validate_method(method) -> HTTPMethod:
    # Methods are case-sensitive: "get" is not GET
    if not isinstance(method, str):
        raise ValidationError(
            f"Method must be a string, got {type(method).__name__}",
            argument="method",
        )
    try:
        return HTTPMethod(method)
    except ValueError:
        raise ValidationError(f"Invalid HTTP method: {method!r}", argument="method") from None


def _coerce_uri(uri) -> Optional[Uri]:
    if uri is None or isinstance(uri, Uri):
        return uri
    if isinstance(uri, str):
        return Uri.parse(uri)
    raise ValidationError(
        f"URI must be a Uri or a string, got {type(uri).__name__}",
        argument="uri",
    )


def _validate_request_target(target) -> Optional[str]:
    if target is not None and not isinstance(target, str):
        raise ValidationError(
            f"Request target must be a string, got {type(target).__name__}",
            argument="request_target",
        )
    return target


class Request(Message):
    """
    Immutable HTTP request.

    =========================================================================
    USAGE
    =========================================================================

        request = Request("GET", "https://example.com/a/b?q=1")

        request.method              # HTTPMethod.GET
        request.request_target      # "/a/b?q=1"
        request.get_header("Host")  # ["example.com"]

        moved = request.with_uri(Uri.parse("https://other.example/"))
        moved.get_header("Host")    # ["other.example"]

    =========================================================================
    """

    __slots__ = ("_method", "_uri", "_request_target")

    def __init__(
        self,
        method: Union[HTTPMethod, str] = HTTPMethod.GET,
        uri: UriInit = None,
        headers: HeadersInit = None,
        body: Optional[Stream] = None,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
        request_target: Optional[str] = None,
    ):
        """
        Args:
            method: One of the nine HTTPMethod values.
            uri: A Uri, a URI string (parsed with Uri.parse), or None.
            headers: A Headers instance or a name → value(s) mapping.
                     Mapping values are not split on commas.
            body: Body stream; an empty in-memory stream by default.
            protocol_version: e.g. "1.1".
            request_target: Explicit target; None derives it from the URI.

        Raises:
            ValidationError: If any argument is invalid.
        """
        super().__init__(headers, body, protocol_version)
        self._method = _validate_method(method)
        self._uri = _coerce_uri(uri)
        self._request_target = _validate_request_target(request_target)

        if not self._headers.get("Host") and self._uri is not None and self._uri.host:
            self._headers = self._headers.with_header("Host", [self._uri.host])

    # =========================================================================
    # REQUEST TARGET
    # =========================================================================

    @property
    def request_target(self) -> str:
        """The explicit target if one was set, else origin-form from the URI."""
        if self._request_target is not None:
            return self._request_target

        if self._uri is None:
            return "/"

        target = self._uri.path or "/"
        if self._uri.query:
            target += f"?{self._uri.query}"
        return target

    def with_request_target(self, request_target: str) -> "Request":
        return self._evolve(request_target=_validate_request_target(request_target))

    # =========================================================================
    # METHOD
    # =========================================================================

    @property
    def method(self) -> HTTPMethod:
        return self._method

    def with_method(self, method: Union[HTTPMethod, str]) -> "Request":
        """
        Raises:
            ValidationError: If method is not one of the nine HTTPMethod values.
        """
        return self._evolve(method=_validate_method(method))

    # =========================================================================
    # URI
    # =========================================================================

    @property
    def uri(self) -> Optional[Uri]:
        return self._uri

    def with_uri(self, uri: Union[Uri, str], preserve_host: bool = False) -> "Request":
        """
        Replace the URI, keeping the Host header in sync.

        Args:
            uri: The new Uri (or URI string).
            preserve_host: Keep an existing Host header instead of
                           overwriting it from the new URI.
        """
        uri = _coerce_uri(uri)
        if uri is None:
            raise ValidationError("URI must not be None", argument="uri")

        headers = self._headers
        if uri.host and (not preserve_host or not headers.get("Host")):
            headers = headers.with_header("Host", [uri.host])

        return self._evolve(uri=uri, headers=headers)

    @property
    def request_line(self) -> str:
        """e.g. "GET /a/b?q=1 HTTP/1.1" """
        return f"{self._method} {self.request_target} HTTP/{self._protocol_version}"

    def __repr__(self) -> str:
        return f"<Request {self._method} {self._uri or ''}>"
