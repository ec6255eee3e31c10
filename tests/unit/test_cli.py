"""
Unit tests for the command-line interface.
"""

import pytest

from httpmessage.__main__ import build_parser, main


pytestmark = pytest.mark.usefixtures("restore_logging")


class TestUriCommand:
    """Tests for `httpmessage uri`."""

    def test_normalizes_uri(self, capsys):
        """Test that a URI string is printed normalized."""
        assert main(["uri", "HTTPS://Example.COM:443/a b?x=1"]) == 0
        assert capsys.readouterr().out.strip() == "https://example.com/a%20b?x=1"

    def test_build_from_components(self, capsys):
        """Test building a URI from flags alone."""
        assert main(["uri", "--scheme", "http", "--host", "Example.com", "--port", "8080", "--path", "x"]) == 0
        assert capsys.readouterr().out.strip() == "http://example.com:8080/x"

    def test_components_listing(self, capsys):
        """Test --components output."""
        main(["uri", "http://bob@example.com:80/p", "--components"])
        out = capsys.readouterr().out

        assert "user_info  bob" in out
        assert "authority  bob@example.com" in out

    def test_invalid_port(self, capsys):
        """Test that validation errors exit with status 2."""
        assert main(["uri", "--port", "70000"]) == 2
        assert "Error:" in capsys.readouterr().err


class TestStatusCommand:
    """Tests for `httpmessage status`."""

    def test_status_line(self, capsys):
        """Test the status line for a known code."""
        assert main(["status", "404"]) == 0
        assert capsys.readouterr().out.strip() == "HTTP/1.1 404 Not Found"

    def test_custom_reason(self, capsys):
        """Test an explicit reason phrase."""
        main(["status", "200", "--reason", "Fine"])
        assert capsys.readouterr().out.strip() == "HTTP/1.1 200 Fine"

    def test_protocol_version(self, capsys):
        """Test the global --protocol-version flag."""
        main(["--protocol-version", "1.0", "status", "200"])
        assert capsys.readouterr().out.strip() == "HTTP/1.0 200 OK"

    def test_invalid_code(self, capsys):
        """Test an out-of-range code."""
        assert main(["status", "700"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_invalid_protocol_version(self, capsys):
        """Test that configuration errors exit with status 2."""
        assert main(["--protocol-version", "HTTP/1.1", "status", "200"]) == 2
        assert "Invalid protocol version" in capsys.readouterr().err

    def test_full_response(self, capsysbinary):
        """Test --body emits a complete response."""
        assert main(["status", "201", "--body", "made"]) == 0

        assert capsysbinary.readouterr().out == (
            b"HTTP/1.1 201 Created\r\n"
            b"Content-Type: text/plain; charset=utf-8\r\n"
            b"Content-Length: 4\r\n"
            b"\r\n"
            b"made"
        )


class TestRequestCommand:
    """Tests for `httpmessage request`."""

    def test_request_head(self, capsys):
        """Test the request line and headers."""
        assert main(["request", "GET", "https://example.com/a?b=1", "-H", "Accept: text/html"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "GET /a?b=1 HTTP/1.1",
            "Host: example.com",
            "Accept: text/html",
        ]

    def test_explicit_target(self, capsys):
        """Test --target."""
        main(["request", "OPTIONS", "http://example.com/", "--target", "*"])
        assert capsys.readouterr().out.splitlines()[0] == "OPTIONS * HTTP/1.1"

    def test_repeated_header(self, capsys):
        """Test that repeated -H flags append values."""
        main(["request", "GET", "http://example.com/", "-H", "X-A: 1", "-H", "x-a: 2"])
        out = capsys.readouterr().out.splitlines()
        assert out[-2:] == ["X-A: 1", "X-A: 2"]

    def test_malformed_header(self, capsys):
        """Test a header without a colon."""
        assert main(["request", "GET", "http://example.com/", "-H", "nocolon"]) == 2
        assert "Name: value" in capsys.readouterr().err

    def test_invalid_method(self, capsys):
        """Test an unknown method."""
        assert main(["request", "get", "http://example.com/"]) == 2


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        """Test that a subcommand is required."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_bad_chunk_size_env(self, monkeypatch, capsys):
        """Test that a non-numeric HTTPMESSAGE_CHUNK_SIZE exits with status 2."""
        monkeypatch.setenv("HTTPMESSAGE_CHUNK_SIZE", "lots")

        assert main(["status", "200"]) == 2
        assert "HTTPMESSAGE_CHUNK_SIZE" in capsys.readouterr().err

    def test_env_protocol_version_applied(self, monkeypatch, capsys):
        """Test that HTTPMESSAGE_PROTOCOL_VERSION reaches the messages the CLI builds."""
        monkeypatch.setenv("HTTPMESSAGE_PROTOCOL_VERSION", "1.0")

        assert main(["status", "404"]) == 0
        assert capsys.readouterr().out.strip() == "HTTP/1.0 404 Not Found"

    def test_env_defaults(self, monkeypatch):
        """Test that environment settings become flag defaults."""
        monkeypatch.setenv("HTTPMESSAGE_LOG_LEVEL", "debug")
        monkeypatch.setenv("HTTPMESSAGE_CHUNK_SIZE", "16")

        args = build_parser().parse_args(["status", "200"])

        assert args.log_level == "DEBUG"
        assert args.chunk_size == 16
