"""
=============================================================================
HTTP STATUS CODES (RFC 9110 / IANA registry)
=============================================================================

Status codes and the reason phrases a Response falls back to when no
explicit phrase was given.

=============================================================================
STATUS CODE CATEGORIES
=============================================================================

    ┌────────┬───────────────────────────────────────────────────────────┐
    │  1xx   │ INFORMATIONAL: request received, continuing process      │
    │  2xx   │ SUCCESS: request received, understood, accepted          │
    │  3xx   │ REDIRECTION: further action needed                       │
    │  4xx   │ CLIENT ERROR: the request is at fault                    │
    │  5xx   │ SERVER ERROR: the server failed a valid request          │
    └────────┴───────────────────────────────────────────────────────────┘

    HTTP/1.1 404 Not Found
             ─── ─────────
              │       │
              │       └── HTTPStatus.NOT_FOUND.phrase
              └────────── HTTPStatus.NOT_FOUND (== 404)

A Response accepts ANY integer in 100..599, not only the codes listed
here. Codes missing from the enum simply have no default reason phrase:

    >>> reason_phrase(404)
    'Not Found'
    >>> reason_phrase(599) is None
    True

=============================================================================
"""

from enum import IntEnum
from typing import Optional


class HTTPStatus(IntEnum):
    """
    Registered HTTP status codes, each carrying its reason phrase.

    IntEnum means members compare equal to plain ints, so
    ``response.status_code == HTTPStatus.NOT_FOUND`` works whether the
    response was built from an int or from the enum.

        >>> HTTPStatus.OK.phrase
        'OK'
        >>> HTTPStatus(418).phrase
        "I'm a teapot"
    """

    def __new__(cls, code: int, phrase: str):
        member = int.__new__(cls, code)
        member._value_ = code
        member.phrase = phrase
        return member

    # 1xx
    CONTINUE = 100, "Continue"
    SWITCHING_PROTOCOLS = 101, "Switching Protocols"
    PROCESSING = 102, "Processing"
    EARLY_HINTS = 103, "Early Hints"

    # 2xx
    OK = 200, "OK"
    CREATED = 201, "Created"
    ACCEPTED = 202, "Accepted"
    NON_AUTHORITATIVE_INFORMATION = 203, "Non-Authoritative Information"
    NO_CONTENT = 204, "No Content"
    RESET_CONTENT = 205, "Reset Content"
    PARTIAL_CONTENT = 206, "Partial Content"
    MULTI_STATUS = 207, "Multi-Status"
    ALREADY_REPORTED = 208, "Already Reported"
    IM_USED = 226, "IM Used"

    # 3xx
    MULTIPLE_CHOICES = 300, "Multiple Choices"
    MOVED_PERMANENTLY = 301, "Moved Permanently"
    FOUND = 302, "Found"
    SEE_OTHER = 303, "See Other"
    NOT_MODIFIED = 304, "Not Modified"
    USE_PROXY = 305, "Use Proxy"
    TEMPORARY_REDIRECT = 307, "Temporary Redirect"
    PERMANENT_REDIRECT = 308, "Permanent Redirect"

    # 4xx
    BAD_REQUEST = 400, "Bad Request"
    UNAUTHORIZED = 401, "Unauthorized"
    PAYMENT_REQUIRED = 402, "Payment Required"
    FORBIDDEN = 403, "Forbidden"
    NOT_FOUND = 404, "Not Found"
    METHOD_NOT_ALLOWED = 405, "Method Not Allowed"
    NOT_ACCEPTABLE = 406, "Not Acceptable"
    PROXY_AUTHENTICATION_REQUIRED = 407, "Proxy Authentication Required"
    REQUEST_TIMEOUT = 408, "Request Timeout"
    CONFLICT = 409, "Conflict"
    GONE = 410, "Gone"
    LENGTH_REQUIRED = 411, "Length Required"
    PRECONDITION_FAILED = 412, "Precondition Failed"
    CONTENT_TOO_LARGE = 413, "Content Too Large"
    URI_TOO_LONG = 414, "URI Too Long"
    UNSUPPORTED_MEDIA_TYPE = 415, "Unsupported Media Type"
    RANGE_NOT_SATISFIABLE = 416, "Range Not Satisfiable"
    EXPECTATION_FAILED = 417, "Expectation Failed"
    IM_A_TEAPOT = 418, "I'm a teapot"   # RFC 2324, kept for interop
    MISDIRECTED_REQUEST = 421, "Misdirected Request"
    UNPROCESSABLE_CONTENT = 422, "Unprocessable Content"
    LOCKED = 423, "Locked"
    FAILED_DEPENDENCY = 424, "Failed Dependency"
    TOO_EARLY = 425, "Too Early"
    UPGRADE_REQUIRED = 426, "Upgrade Required"
    PRECONDITION_REQUIRED = 428, "Precondition Required"
    TOO_MANY_REQUESTS = 429, "Too Many Requests"
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431, "Request Header Fields Too Large"
    UNAVAILABLE_FOR_LEGAL_REASONS = 451, "Unavailable For Legal Reasons"

    # 5xx
    INTERNAL_SERVER_ERROR = 500, "Internal Server Error"
    NOT_IMPLEMENTED = 501, "Not Implemented"
    BAD_GATEWAY = 502, "Bad Gateway"
    SERVICE_UNAVAILABLE = 503, "Service Unavailable"
    GATEWAY_TIMEOUT = 504, "Gateway Timeout"
    HTTP_VERSION_NOT_SUPPORTED = 505, "HTTP Version Not Supported"
    VARIANT_ALSO_NEGOTIATES = 506, "Variant Also Negotiates"
    INSUFFICIENT_STORAGE = 507, "Insufficient Storage"
    LOOP_DETECTED = 508, "Loop Detected"
    NOT_EXTENDED = 510, "Not Extended"
    NETWORK_AUTHENTICATION_REQUIRED = 511, "Network Authentication Required"

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    @property
    def is_informational(self) -> bool:
        return 100 <= self < 200

    @property
    def is_success(self) -> bool:
        return 200 <= self < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self < 600

    @property
    def is_error(self) -> bool:
        """4xx or 5xx."""
        return self >= 400


def reason_phrase(code: int) -> Optional[str]:
    """
    Default reason phrase for a status code, or None if it is unregistered.

    Accepts any integer; it does not validate the 100..599 range.
    """
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return None
