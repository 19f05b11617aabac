"""
Shell Executor — Run git/gh command lines and surface failures.

Three call sites:

    run(cmd, cwd)            capture stdout, return it stripped
    run_verbose(cmd, cwd)    stream output to the console
    run_sensitive(cmd, cwd)  capture, but never log or report the command
                             or its output (credential lookups)

Any non-zero exit raises CommandFailure. Nothing is retried.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)

REDACTED = "[REDACTED]"

PathLike = Union[str, Path]


class CommandFailure(Exception):
    """Raised when a shell command exits non-zero or cannot be started."""

    def __init__(
        self,
        command: str,
        reason: str,
        returncode: Optional[int] = None,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
    ):
        self.command = command
        self.reason = reason
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [f"Command failed: {self.command}"]
        if self.reason:
            parts.append(self.reason)
        if isinstance(self.stdout, str) and self.stdout.strip():
            parts.append(f"stdout:\n{self.stdout.strip()}")
        if isinstance(self.stderr, str) and self.stderr.strip():
            parts.append(f"stderr:\n{self.stderr.strip()}")
        return "\n".join(parts)


def _execute(
    command: str,
    cwd: Optional[PathLike],
    env: Optional[Mapping[str, str]],
    capture: bool,
    redact: bool,
) -> str:
    shown = REDACTED if redact else command
    logger.debug(f"Executing: {shown}")

    redacted_failure: Optional[CommandFailure] = None
    try:
        result = subprocess.run(
            shlex.split(command),
            cwd=str(cwd or Path.cwd()),
            env=dict(env) if env is not None else None,
            capture_output=capture,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        if not redact:
            raise CommandFailure(
                command,
                f"exit status {e.returncode}",
                e.returncode,
                stdout=e.stdout,
                stderr=e.stderr,
            ) from e
        redacted_failure = CommandFailure(REDACTED, f"exit status {e.returncode}", e.returncode)
    except OSError as e:
        if not redact:
            raise CommandFailure(command, str(e)) from e
        redacted_failure = CommandFailure(REDACTED, "could not start process")
    except ValueError as e:
        # Unbalanced quotes from shlex, or a NUL byte in an argument
        if not redact:
            raise CommandFailure(command, f"invalid command line: {e}") from e
        redacted_failure = CommandFailure(REDACTED, "invalid command line")

    # Raised outside the handler so the CalledProcessError (raw argv and
    # output) is not attached as __context__.
    if redacted_failure is not None:
        raise redacted_failure

    return (result.stdout or "").strip() if capture else ""


def run(
    command: str,
    cwd: Optional[PathLike] = None,
    env: Optional[Mapping[str, str]] = None,
) -> str:
    """Run a command and return its stdout, stripped of surrounding whitespace."""
    return _execute(command, cwd, env, capture=True, redact=False)


def run_verbose(
    command: str,
    cwd: Optional[PathLike] = None,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Run a command with its output passed straight through to the console."""
    _execute(command, cwd, env, capture=False, redact=False)


def run_sensitive(command: str, cwd: Optional[PathLike] = None) -> str:
    """
    Run a command whose output is a secret.

    The command text and captured output are replaced with [REDACTED]
    in the debug trace and in any CommandFailure raised.
    """
    return _execute(command, cwd, None, capture=True, redact=True)
