"""
=============================================================================
CLI CONFIGURATION
=============================================================================

Settings for the command-line front end. The parser itself takes no
configuration: the grammar is fixed, so there is nothing to tune there.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    Priority (highest to lowest):

    1. Command-line arguments
       └── python -m httpmessage request --format text

    2. Environment variables
       └── HTTPMESSAGE_FORMAT=text python -m httpmessage request

    3. Default values (in this dataclass)

    ┌──────────────────────────┬────────────────────┬─────────┐
    │ Environment variable     │ Field              │ Default │
    ├──────────────────────────┼────────────────────┼─────────┤
    │ HTTPMESSAGE_FORMAT       │ output_format      │ json    │
    │ HTTPMESSAGE_CRLF         │ normalize_newlines │ false   │
    │ HTTPMESSAGE_INDENT       │ json_indent        │ 2       │
    │ HTTPMESSAGE_LOG_LEVEL    │ log_level          │ WARNING │
    └──────────────────────────┴────────────────────┴─────────┘

=============================================================================
"""

import os
from dataclasses import dataclass


OUTPUT_FORMATS = ("json", "text")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false), got {raw!r}")


@dataclass
class ParserConfig:
    """
    Configuration for `python -m httpmessage`.

    Examples:
        ParserConfig()                                  # JSON, LF only
        ParserConfig(output_format="text")              # human summary
        ParserConfig(normalize_newlines=True)           # accept CRLF input
    """

    output_format: str = "json"
    """
    How parsed records are printed.
    - "json" - record.to_dict() as JSON
    - "text" - short human-readable summary
    """

    normalize_newlines: bool = False
    """
    Convert "\\r\\n" to "\\n" before parsing.
    Messages captured off the wire use CRLF; the parser only splits on LF,
    so without this every header value would end in "\\r".
    """

    json_indent: int = 2
    """Indent for JSON output. 0 prints compact single-line JSON."""

    log_level: str = "WARNING"
    """Logging level (DEBUG shows every rejected message)."""

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """
        Create configuration from HTTPMESSAGE_* environment variables.

        Unset variables fall back to the dataclass defaults.
        """
        defaults = cls()
        indent = os.getenv("HTTPMESSAGE_INDENT")
        try:
            json_indent = int(indent) if indent is not None else defaults.json_indent
        except ValueError:
            raise ValueError(f"HTTPMESSAGE_INDENT must be an integer, got {indent!r}") from None

        return cls(
            output_format=os.getenv("HTTPMESSAGE_FORMAT", defaults.output_format).lower(),
            normalize_newlines=_env_flag("HTTPMESSAGE_CRLF", defaults.normalize_newlines),
            json_indent=json_indent,
            log_level=os.getenv("HTTPMESSAGE_LOG_LEVEL", defaults.log_level).upper(),
        )

    def validate(self) -> None:
        """Raise ValueError if any setting is out of range."""
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format: {self.output_format!r}. "
                f"Must be one of {', '.join(OUTPUT_FORMATS)}."
            )

        if self.json_indent < 0:
            raise ValueError("json_indent must be >= 0")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level!r}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )
