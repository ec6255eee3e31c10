"""
=============================================================================
BODY STREAM
=============================================================================

Stream wraps a Python binary file object (an open file, io.BytesIO, a
socket's makefile(), ...) and exposes the capability set a message body
needs: read, write, seek, tell, eof, size and metadata.

=============================================================================
CAPABILITIES COME FROM THE OPEN MODE
=============================================================================

Readability and writability are decided once, from the mode string the
resource was opened with, against two fixed sets:

    ┌────────┬──────────┬──────────┐
    │  Mode  │ Readable │ Writable │
    ├────────┼──────────┼──────────┤
    │  r     │   Yes    │    No    │
    │  w a x │   No     │   Yes    │
    │  r+    │   Yes    │   Yes    │
    │  w+    │   Yes    │   Yes    │
    │  a+    │   Yes    │   Yes    │
    └────────┴──────────┴──────────┘

Each mode also appears with "b" / "t" in either position ("r+b", "rb+").
Python reports open("f", "w+b").mode as "rb+", so both spellings are in.

Seekability comes from the resource itself (resource.seekable()).

=============================================================================
OWNERSHIP
=============================================================================

A Stream exclusively owns its resource:

    detach()  →  hands the raw resource back to the caller; the Stream is
                 left empty and every further I/O call raises ResourceError
    close()   →  detaches and closes the resource

Sharing one Stream between two owners is not supported; there is no lock.

=============================================================================
"""

import io
import logging
import os
import stat
from typing import Any, BinaryIO, Dict, Optional

from ..errors import ResourceError


logger = logging.getLogger(__name__)


def _with_variants(*modes: str) -> frozenset:
    """Expand base modes with b/t in both the fopen and Python positions."""
    variants = set()
    for mode in modes:
        variants.add(mode)
        for flag in ("b", "t"):
            if mode.endswith("+"):
                variants.add(mode[:-1] + flag + "+")    # "rb+"
                variants.add(mode + flag)               # "r+b"
            else:
                variants.add(mode + flag)               # "rb"
    return frozenset(variants)


READABLE_MODES = _with_variants("r", "r+", "w+", "a+", "x+", "c+")
WRITABLE_MODES = _with_variants("w", "a", "x", "c", "r+", "w+", "a+", "x+", "c+")

# io.BytesIO and friends carry no mode attribute
DEFAULT_MODE = "rb+"


class Stream:
    """
    Byte stream used as a message body.

        body = Stream.from_bytes(b"hello")
        body.read(2)           # b"he"
        body.get_contents()    # b"llo"
        body.rewind()
        str(body)              # "hello"

    Every failed operation raises ResourceError; nothing is swallowed,
    except in __str__ / __bytes__ which return an empty value instead.
    """

    def __init__(self, resource: BinaryIO, mode: Optional[str] = None):
        """
        Args:
            resource: A binary file-like object.
            mode: Open mode override. Defaults to resource.mode, or "rb+"
                  for objects without one (io.BytesIO).
        """
        self._resource: Optional[BinaryIO] = resource
        self._mode = mode or getattr(resource, "mode", None) or DEFAULT_MODE
        self._eof = False

        try:
            seekable = bool(resource.seekable())
        except (AttributeError, OSError, ValueError):
            seekable = False

        self._meta: Dict[str, Any] = {
            "mode": self._mode,
            "seekable": seekable,
            "uri": getattr(resource, "name", None),
            "stream_type": type(resource).__name__,
        }

    @classmethod
    def from_bytes(cls, data: bytes = b"") -> "Stream":
        """In-memory read/write stream positioned at the start of data."""
        return cls(io.BytesIO(data), mode="rb+")

    @classmethod
    def open(cls, path: str, mode: str = "rb") -> "Stream":
        """
        Open a file as a body stream.

        Text modes are opened in binary: a body is always bytes.
        """
        binary_mode = mode.replace("t", "")
        if "b" not in binary_mode:
            binary_mode += "b"
        try:
            return cls(open(path, binary_mode), mode=mode)
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to open {path!r}: {e}") from e

    def _require_resource(self) -> BinaryIO:
        if self._resource is None:
            raise ResourceError("Stream is detached")
        return self._resource

    # =========================================================================
    # CAPABILITIES
    # =========================================================================

    def is_readable(self) -> bool:
        return self._resource is not None and self._mode in READABLE_MODES

    def is_writable(self) -> bool:
        return self._resource is not None and self._mode in WRITABLE_MODES

    def is_seekable(self) -> bool:
        return self._resource is not None and self._meta["seekable"]

    # =========================================================================
    # I/O
    # =========================================================================

    def read(self, length: int) -> bytes:
        """
        Read up to length bytes.

        Raises:
            ResourceError: If the stream is not readable or the read fails.
        """
        resource = self._require_resource()
        if not self.is_readable():
            raise ResourceError("The stream is not readable")

        try:
            data = resource.read(length)
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to read from the stream: {e}") from e

        if len(data) < length:
            self._eof = True
        return data

    def write(self, data: bytes) -> int:
        """
        Write bytes, returning the number written.

        Raises:
            ResourceError: If the stream is not writable or the write fails.
        """
        resource = self._require_resource()
        if not self.is_writable():
            raise ResourceError("The stream is not writable")

        try:
            written = resource.write(data)
        except (OSError, ValueError, TypeError) as e:
            raise ResourceError(f"Unable to write to the stream: {e}") from e

        self._eof = False
        return written

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> None:
        """
        Move the stream position.

        Raises:
            ResourceError: If the stream is not seekable or the seek fails.
        """
        resource = self._require_resource()
        if not self.is_seekable():
            raise ResourceError("The stream is not seekable")

        try:
            resource.seek(offset, whence)
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to seek to a position in the stream: {e}") from e

        self._eof = False

    def rewind(self) -> None:
        self.seek(0)

    def tell(self) -> int:
        resource = self._require_resource()
        try:
            return resource.tell()
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to tell the position of the stream: {e}") from e

    def eof(self) -> bool:
        """
        True once a read has hit the end of the stream.

        Like C's feof(), this only flips after a short read; seeking or
        writing clears it. A detached stream is always at EOF.
        """
        return self._resource is None or self._eof

    def get_contents(self) -> bytes:
        """
        Read everything from the current position to the end.

        Raises:
            ResourceError: If the stream is not readable or the read fails.
        """
        resource = self._require_resource()
        if not self.is_readable():
            raise ResourceError("The stream is not readable")

        try:
            data = resource.read()
        except (OSError, ValueError) as e:
            raise ResourceError(f"Unable to get the stream's contents: {e}") from e

        self._eof = True
        return data

    # =========================================================================
    # METADATA
    # =========================================================================

    def get_size(self) -> Optional[int]:
        """
        Size in bytes, or None when it cannot be determined.

        Uses fstat() for regular files and the buffer length for BytesIO.
        Pipes, sockets and ttys report None: fstat() gives 0 for them.
        """
        resource = self._resource
        if resource is None:
            return None

        if isinstance(resource, io.BytesIO):
            with resource.getbuffer() as view:
                return view.nbytes

        try:
            st = os.fstat(resource.fileno())
        except (AttributeError, OSError, ValueError, io.UnsupportedOperation):
            return None
        return st.st_size if stat.S_ISREG(st.st_mode) else None

    def get_metadata(self, key: Optional[str] = None) -> Any:
        """
        Metadata about the resource: mode, seekable, uri, stream_type.

        Args:
            key: A single entry to return; None returns the whole dict.

        Returns:
            The entry, the full dict (a copy), or None for unknown keys.
        """
        if key is None:
            return dict(self._meta)
        return self._meta.get(key)

    # =========================================================================
    # OWNERSHIP
    # =========================================================================

    def detach(self) -> Optional[BinaryIO]:
        """Release ownership and return the raw resource (None if already detached)."""
        resource, self._resource = self._resource, None
        if resource is not None:
            logger.debug(f"Detached {self._meta['stream_type']} body stream")
        return resource

    def close(self) -> None:
        resource = self.detach()
        if resource is not None:
            resource.close()
            logger.debug(f"Closed {self._meta['stream_type']} body stream")

    # =========================================================================
    # CONVERSION
    # =========================================================================

    def __bytes__(self) -> bytes:
        """
        The whole stream, from the start when seekable.

        Resource errors are logged and turned into b"" rather than raised.
        """
        try:
            if self.is_seekable():
                self.rewind()
            return self.get_contents()
        except ResourceError as e:
            logger.warning(f"Suppressed error while converting stream: {e}")
            return b""

    def __str__(self) -> str:
        return bytes(self).decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        state = "detached" if self._resource is None else self._mode
        return f"<Stream {self._meta['stream_type']} {state}>"
