"""
Validation — Request checks and the error types the CLI maps to exit codes.

    UsageError  bad or missing input            exit 1
    UserAbort   --verify prompt declined        exit 0

CommandFailure (a subprocess failed, exit 1) lives in prmirror.shell.
"""

from __future__ import annotations

from typing import IO, Optional

import click

from .config import MirrorRequest
from .github import gh_installed


class UsageError(click.UsageError):
    """Missing or invalid input. Shown with the full help text."""

    exit_code = 1

    def show(self, file: Optional[IO] = None) -> None:
        click.secho(f"\n❌ Error: {self.format_message()}\n", err=True, fg="red")
        if self.ctx is not None:
            click.echo(self.ctx.get_help(), file=file)


class UserAbort(Exception):
    """Raised when the operator declines the confirmation prompt."""


def validate_request(request: MirrorRequest) -> None:
    """Check a request before anything touches git. Raises UsageError."""
    if not request.base:
        raise UsageError("BASE branch is required")

    if request.number is None or request.number <= 0:
        raise UsageError("PR Number is required and must be greater than 0")

    if not gh_installed():
        raise UsageError("The github cli tool 'gh' must be installed")

    if not request.org:
        raise UsageError("Organization is required")

    if not request.repo:
        raise UsageError("Repository is required")


def is_confirmation(answer: Optional[str]) -> bool:
    """y / yes in any case, surrounding whitespace ignored."""
    return (answer or "").strip().lower() in ("y", "yes")
