"""
=============================================================================
COMMAND-LINE INTERFACE
=============================================================================

Inspect how httpmessage normalizes URIs, requests and status codes
without writing any code:

    python -m httpmessage uri "HTTPS://Example.COM:443/a b?x=1"
    https://example.com/a%20b?x=1

    python -m httpmessage uri --scheme http --host Example.com --port 80 --components
    python -m httpmessage status 404
    python -m httpmessage request GET https://example.com/a?b=1 -H "Accept: text/html"

=============================================================================
EXIT STATUS
=============================================================================

    0   success
    2   invalid argument (argparse usage error or ValidationError)

=============================================================================
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LOG_FORMATS, MessageConfig
from .errors import ValidationError
from .core.stream import Stream
from .http import Request, Response, ResponseEmitter, Uri
from .log import configure_logging


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its three subcommands."""
    defaults = MessageConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="httpmessage",
        description="Normalize and inspect HTTP message value types",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpmessage uri "HTTP://Example.com:80/a b"
  python -m httpmessage uri --scheme https --host example.com --path /x --components
  python -m httpmessage status 418
  python -m httpmessage request POST http://example.com/items -H "Content-Type: application/json"
        """,
    )

    # ─────────────────────────────────────────────────────────────────────
    # GLOBAL ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=defaults.log_level.upper(),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=defaults.log_format,
        help="Log output format (default: text)",
    )
    parser.add_argument(
        "--protocol-version",
        default=defaults.protocol_version,
        help="HTTP version for built messages (default: 1.1)",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpmessage {__version__}",
    )

    parser.set_defaults(chunk_size=defaults.chunk_size)

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ─────────────────────────────────────────────────────────────────────
    # uri
    # ─────────────────────────────────────────────────────────────────────

    uri_parser = subparsers.add_parser("uri", help="Normalize a URI")
    uri_parser.add_argument("text", nargs="?", help="URI reference to parse")
    uri_parser.add_argument("--scheme")
    uri_parser.add_argument("--user")
    uri_parser.add_argument("--password")
    uri_parser.add_argument("--host")
    uri_parser.add_argument("--port", type=int)
    uri_parser.add_argument("--path")
    uri_parser.add_argument("--query")
    uri_parser.add_argument("--fragment")
    uri_parser.add_argument(
        "--components",
        action="store_true",
        help="Also print each normalized component",
    )

    # ─────────────────────────────────────────────────────────────────────
    # status
    # ─────────────────────────────────────────────────────────────────────

    status_parser = subparsers.add_parser("status", help="Show a status line")
    status_parser.add_argument("code", help="Status code (100-599)")
    status_parser.add_argument("--reason", default="", help="Explicit reason phrase")
    status_parser.add_argument(
        "--body",
        help="Emit a complete response with this text as its body",
    )

    # ─────────────────────────────────────────────────────────────────────
    # request
    # ─────────────────────────────────────────────────────────────────────

    request_parser = subparsers.add_parser("request", help="Show a request head")
    request_parser.add_argument("method", help="HTTP method (GET, POST, ...)")
    request_parser.add_argument("uri", help="Target URI")
    request_parser.add_argument(
        "--header", "-H",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="Add a header (repeatable)",
    )
    request_parser.add_argument("--target", help="Explicit request target")

    return parser


def _build_uri(args: argparse.Namespace) -> Uri:
    uri = Uri.parse(args.text) if args.text else Uri()

    overrides = {
        "scheme": args.scheme,
        "user": args.user,
        "password": args.password,
        "host": args.host,
        "port": args.port,
        "path": args.path,
        "query": args.query,
        "fragment": args.fragment,
    }
    for name, value in overrides.items():
        if value is not None:
            uri = getattr(uri, f"with_{name}")(value)
    return uri


def _parse_header(raw: str):
    name, separator, value = raw.partition(":")
    if not separator or not name.strip():
        raise ValidationError(f"Header must look like 'Name: value', got {raw!r}", argument="header")
    return name.strip(), value.strip()


def run_uri(args: argparse.Namespace) -> List[str]:
    uri = _build_uri(args)
    lines = [str(uri)]

    if args.components:
        for name in ("scheme", "user_info", "host", "port", "path", "query", "fragment", "authority"):
            value = getattr(uri, name)
            lines.append(f"  {name:<10} {'' if value is None else value}")
    return lines


def run_status(args: argparse.Namespace) -> List[str]:
    response = Response(protocol_version=args.protocol_version).with_status(args.code, args.reason)
    if args.body is None:
        return [response.status_line.rstrip()]

    body = args.body.encode("utf-8")
    response = (response
        .with_header("Content-Type", ["text/plain; charset=utf-8"])
        .with_header("Content-Length", [str(len(body))])
        .with_body(Stream.from_bytes(body)))

    sys.stdout.flush()
    ResponseEmitter(sys.stdout.buffer, chunk_size=args.chunk_size).emit(response)
    sys.stdout.buffer.flush()
    return []


def run_request(args: argparse.Namespace) -> List[str]:
    request = Request(
        args.method,
        args.uri,
        protocol_version=args.protocol_version,
        request_target=args.target,
    )
    for raw in args.header:
        name, value = _parse_header(raw)
        request = request.with_added_header(name, [value])

    lines = [request.request_line]
    lines.extend(f"{name}: {value}" for name, value in request.headers.lines())
    return lines


COMMANDS = {
    "uri": run_uri,
    "status": run_status,
    "request": run_request,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Arguments without the program name; sys.argv[1:] when None.

    Returns:
        Process exit status.
    """
    try:
        parser = build_parser()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    args = parser.parse_args(argv)

    config = MessageConfig(
        protocol_version=args.protocol_version,
        log_level=args.log_level,
        log_format=args.log_format,
        chunk_size=args.chunk_size,
    )
    try:
        config.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level, config.log_format)
    logger.debug(f"Running {args.command!r} command")

    try:
        lines = COMMANDS[args.command](args)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================
# This allows running: python -m httpmessage

if __name__ == "__main__":
    sys.exit(main())
