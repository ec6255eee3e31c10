"""
=============================================================================
HTTP MESSAGE BASE
=============================================================================

What requests and responses have in common: a protocol version, a header
collection and a body stream.

=============================================================================
COPY-ON-WRITE
=============================================================================

A Message never changes after construction. Every with_*() method:

    1. validates its arguments          (raises before anything is copied)
    2. makes a shallow copy of self     (copy.copy)
    3. replaces exactly ONE field on the copy
    4. returns the copy

    original = Request("GET", "http://example.com/")
    changed  = original.with_header("Accept", "text/html")

    original.has_header("Accept")   # False
    changed.has_header("Accept")    # True
    changed.uri is original.uri     # True, untouched fields are shared

Sharing is safe because Headers and Uri are immutable themselves. The one
mutable piece is the body Stream; see core/stream.py for its ownership
rules.

=============================================================================
"""

import copy
from typing import List, Mapping, Optional, TypeVar, Union

from ..core.stream import Stream
from ..errors import ValidationError
from .headers import HeaderValue, Headers


DEFAULT_PROTOCOL_VERSION = "1.1"

HeadersInit = Union[Headers, Mapping[str, HeaderValue], None]

M = TypeVar("M", bound="Message")


def _validate_protocol_version(version) -> str:
    if not isinstance(version, str):
        raise ValidationError(
            f"Protocol version must be a string, got {type(version).__name__}",
            argument="version",
        )
    return version


def _validate_body(body) -> Stream:
    if not isinstance(body, Stream):
        raise ValidationError(
            f"Body must be a Stream, got {type(body).__name__}",
            argument="body",
        )
    return body


class Message:
    """
    Base class for Request and Response.

    Attributes are exposed as read-only properties; assigning to them
    raises AttributeError.
    """

    __slots__ = ("_protocol_version", "_headers", "_body")

    def __init__(
        self,
        headers: HeadersInit = None,
        body: Optional[Stream] = None,
        protocol_version: str = DEFAULT_PROTOCOL_VERSION,
    ):
        self._protocol_version = _validate_protocol_version(protocol_version)
        self._headers = headers if isinstance(headers, Headers) else Headers(headers)
        self._body = Stream.from_bytes() if body is None else _validate_body(body)

    def _evolve(self: M, **changes) -> M:
        """Shallow copy with the named private fields replaced."""
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        return clone

    # =========================================================================
    # PROTOCOL VERSION
    # =========================================================================

    @property
    def protocol_version(self) -> str:
        """The bare version number, e.g. "1.1" (not "HTTP/1.1")."""
        return self._protocol_version

    def with_protocol_version(self: M, version: str) -> M:
        return self._evolve(protocol_version=_validate_protocol_version(version))

    # =========================================================================
    # HEADERS
    # =========================================================================

    @property
    def headers(self) -> Headers:
        return self._headers

    def has_header(self, name: str) -> bool:
        return self._headers.has(name)

    def get_header(self, name: str) -> List[str]:
        return self._headers.get(name)

    def get_header_line(self, name: str) -> str:
        return self._headers.get_line(name)

    def with_header(self: M, name: str, value: HeaderValue) -> M:
        """Replace a header; a string value is split on commas."""
        return self._evolve(headers=self._headers.with_header(name, value))

    def with_added_header(self: M, name: str, value: HeaderValue) -> M:
        """Append to a header; a string value is split on commas."""
        return self._evolve(headers=self._headers.with_added(name, value))

    def without_header(self: M, name: str) -> M:
        return self._evolve(headers=self._headers.without(name))

    # =========================================================================
    # BODY
    # =========================================================================

    @property
    def body(self) -> Stream:
        return self._body

    def with_body(self: M, body: Stream) -> M:
        return self._evolve(body=_validate_body(body))
