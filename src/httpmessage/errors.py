"""
=============================================================================
MESSAGE ERRORS
=============================================================================

Every failure raised by this package is one of two kinds:

    ┌──────────────────┬──────────────────────────────────────────────────┐
    │  Kind            │ Raised when                                      │
    ├──────────────────┼──────────────────────────────────────────────────┤
    │  ValidationError │ The caller passed a structurally invalid value:  │
    │                  │ non-string header name, unknown method, status   │
    │                  │ code out of range, port out of range, ...        │
    ├──────────────────┼──────────────────────────────────────────────────┤
    │  ResourceError   │ The body stream could not do what was asked:     │
    │                  │ read/write/seek failed, or the stream is not     │
    │                  │ readable/writable/seekable, or it was detached.  │
    └──────────────────┴──────────────────────────────────────────────────┘

Both derive from MessageError, so a caller can catch everything from this
package in one place. They also derive from the matching builtin
(ValueError / OSError), so generic handlers keep working.

Validation always runs BEFORE a copy is made. A rejected with_*() call
therefore leaves the original object exactly as it was.

=============================================================================
"""

from typing import Optional


class MessageError(Exception):
    """Base class for all errors raised by httpmessage."""


class ValidationError(MessageError, ValueError):
    """
    Raised when an argument is structurally invalid.

    Carries the name of the offending argument so callers (and the CLI)
    can point at it:

        try:
            uri.with_port(70000)
        except ValidationError as e:
            print(e.argument)   # "port"
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        super().__init__(message)
        self.argument = argument


class ResourceError(MessageError, OSError):
    """Raised when an operation on the underlying byte stream fails."""
