"""
=============================================================================
HTTPMESSAGE CLI ENTRY POINT
=============================================================================

Parse a message from a file or stdin and print the result.

=============================================================================
USAGE
=============================================================================

    # Parse a request from a file, print JSON
    python -m httpmessage request captured.txt

    # Parse a response piped on stdin
    printf 'HTTP/1.1 200 OK\\nServer: nginx\\n' | python -m httpmessage response

    # Captured traffic with CRLF line endings
    python -m httpmessage request --crlf dump.http

    # Human-readable summary instead of JSON
    python -m httpmessage response reply.txt --format text

=============================================================================
EXIT STATUS
=============================================================================

    0   message parsed, record printed on stdout
    1   message rejected, "error: <reason>: <info>" on stderr
    2   bad arguments, unreadable file or invalid configuration

=============================================================================
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence, Union

from . import __version__
from .config import LOG_LEVELS, OUTPUT_FORMATS, ParserConfig
from .http import HTTPParseError, Request, RequestParser, Response, ResponseParser


logger = logging.getLogger("httpmessage.cli")


def _setup_logging(config: ParserConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("httpmessage").setLevel(level)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpmessage",
        description="Parse a raw HTTP request or response into a structured record",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpmessage request message.txt           # JSON output
  python -m httpmessage response reply.txt -f text    # Text summary
  cat dump.http | python -m httpmessage request --crlf
        """
    )

    parser.add_argument(
        "kind",
        choices=["request", "response"],
        help="Whether the input is a request or a response"
    )

    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="File holding the message (default: stdin)"
    )

    # Defaults are None so unset flags fall through to the environment.
    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: json, env HTTPMESSAGE_FORMAT)"
    )

    parser.add_argument(
        "--crlf",
        dest="normalize_newlines",
        action="store_true",
        default=None,
        help="Convert CRLF line endings to LF before parsing"
    )

    parser.add_argument(
        "--indent",
        dest="json_indent",
        type=int,
        default=None,
        help="JSON indent, 0 for compact output (default: 2)"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpmessage {__version__}"
    )

    return parser


def _read_message(path: str) -> str:
    if path == "-":
        # Bytes, so stdin keeps "\r\n" just like a file opened below
        return sys.stdin.buffer.read().decode("utf-8")

    # newline="" keeps "\r\n" intact so --crlf decides what happens to it
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def format_text(record: Union[Request, Response]) -> str:
    """Render a parsed record as a short human-readable summary."""
    if isinstance(record, Request):
        version = f" {record.http_version.value}" if record.http_version else ""
        lines = [f"{record.method.value} {record.path}{version}"]
        for name, value in record.params.items():
            lines.append(f"  param {name} = {value}")
    else:
        lines = [
            f"{record.http_version.value} {record.status_code} {record.reason_phrase}"
        ]

    for name, value in record.headers:
        lines.append(f"  {name}: {value}")

    lines.append(f"  body: {len(record.body)} characters")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Process exit status.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    # =========================================================================
    # BUILD CONFIGURATION: defaults < environment < flags
    # =========================================================================
    try:
        config = ParserConfig.from_env()
        for name in ("output_format", "normalize_newlines", "json_indent", "log_level"):
            value = getattr(args, name)
            if value is not None:
                setattr(config, name, value)
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    _setup_logging(config)

    # =========================================================================
    # READ INPUT
    # =========================================================================
    try:
        text = _read_message(args.file)
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"cannot read {args.file}: {e}")

    if config.normalize_newlines:
        text = text.replace("\r\n", "\n")

    # =========================================================================
    # PARSE
    # =========================================================================
    message_parser = RequestParser() if args.kind == "request" else ResponseParser()
    try:
        record = message_parser.parse(text)
    except HTTPParseError as e:
        logger.warning(f"Could not parse {args.kind} from {args.file}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Parsed {args.kind} from {args.file} ({len(record.headers)} headers)")

    # =========================================================================
    # OUTPUT
    # =========================================================================
    if config.output_format == "json":
        indent = config.json_indent or None
        print(json.dumps(record.to_dict(), indent=indent))
    else:
        print(format_text(record))

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(main())
