"""
pytest configuration and fixtures.
"""

import io
import logging

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpmessage import Request, Response, Stream, Uri


@pytest.fixture
def sample_uri() -> Uri:
    """A URI with every component set."""
    return Uri(
        scheme="HTTPS",
        user="alice",
        password="secret",
        host="Example.COM",
        port=8443,
        path="/a b/c",
        query="q=1&x=y",
        fragment="top",
    )


@pytest.fixture
def sample_request(sample_uri: Uri) -> Request:
    """A GET request with a couple of headers."""
    return Request(
        "GET",
        sample_uri,
        headers={"Accept": "text/html", "User-Agent": "pytest"},
    )


@pytest.fixture
def sample_response() -> Response:
    """A 200 response with a text body."""
    return Response(
        200,
        headers={"Content-Type": "text/plain", "Content-Length": "5"},
        body=Stream.from_bytes(b"hello"),
    )


@pytest.fixture
def tmp_file(tmp_path: Path) -> Path:
    """A small file on disk with known content."""
    path = tmp_path / "body.bin"
    path.write_bytes(b"0123456789")
    return path


class FailingIO(io.BytesIO):
    """BytesIO whose I/O always fails, for resource error tests."""

    mode = "rb+"

    def read(self, *args):
        raise OSError("read failed")

    def write(self, *args):
        raise OSError("write failed")

    def seek(self, *args):
        raise OSError("seek failed")

    def tell(self):
        raise OSError("tell failed")


@pytest.fixture
def failing_stream() -> Stream:
    """A seekable, readable, writable Stream whose operations all fail."""
    return Stream(FailingIO())


@pytest.fixture
def restore_logging():
    """Undo configure_logging() so later tests see pytest's handlers."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("httpmessage").setLevel(logging.NOTSET)
