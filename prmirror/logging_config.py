"""
Logging Configuration — Console logging for the mirror command.

Progress lines from the git/gh sequences go through the standard
logging module so they share one format and one level switch.

## Environment Variables

- DEBUG: true/1/yes forces DEBUG level (prints every executed command)
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
- LOG_FORMAT: json, text (default: text)

## Usage

    from prmirror.logging_config import setup_logging

    setup_logging()  # Call once at startup
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

import click

# "[mirror-git] Cloning repository Org/Repo..."
_TAG_RE = re.compile(r"^\[([\w-]+)\]\s*")

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def debug_enabled() -> bool:
    """True when the DEBUG switch is set in the environment."""
    return os.environ.get("DEBUG", "").lower() in ("true", "1", "yes")


def split_tag(record: logging.LogRecord) -> Tuple[str, str]:
    """Pull the leading [tag] off a message; untagged records use the module name."""
    message = record.getMessage()
    match = _TAG_RE.match(message)
    if match:
        return match.group(1), message[match.end():]
    return record.name.rsplit(".", 1)[-1], message


class JSONFormatter(logging.Formatter):
    """
    One JSON object per line, for CI job logs.

    {"ts": "...", "level": "INFO", "step": "mirror-git", "message": "Fetching PR #42..."}
    """

    def format(self, record: logging.LogRecord) -> str:
        step, message = split_tag(record)
        entry: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "step": step,
            "message": message,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class HumanFormatter(logging.Formatter):
    """
    Console progress lines.

    12:34:56 [mirror-git] Fetching PR #42...
    12:34:57 [shell] DEBUG Executing: git checkout pr-temp
    """

    def format(self, record: logging.LogRecord) -> str:
        step, message = split_tag(record)
        prefix = f"{datetime.now():%H:%M:%S} [{step}]"

        # INFO is the normal progress stream; only flag the other levels
        if record.levelno != logging.INFO:
            level = record.levelname
            if sys.stderr.isatty():
                level = click.style(level, fg=LEVEL_COLORS.get(level))
            prefix = f"{prefix} {level}"

        line = f"{prefix} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(
    level: Optional[str] = None,
    format_type: Optional[str] = None,
) -> None:
    """
    Configure logging for the command.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
               Defaults to DEBUG when the DEBUG switch is on,
               else LOG_LEVEL env var or INFO.
        format_type: Output format (json, text).
                     Defaults to LOG_FORMAT env var or text.
    """
    if level is None and debug_enabled():
        level = "DEBUG"
    log_level = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    log_format = (format_type or os.environ.get("LOG_FORMAT", "text")).lower()

    numeric_level = getattr(logging, log_level, logging.INFO)

    formatter: logging.Formatter
    if log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = HumanFormatter()

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)
    root.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging configured: level={log_level}, format={log_format}"
    )
