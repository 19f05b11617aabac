"""
PR Mirror — CLI Entry Point

Usage:
    prmirror -n 123 -b main -o myorg -r myrepo
    prmirror -n 123 -o myorg -r myrepo --sync
    prmirror --clean
"""

from __future__ import annotations

# Load .env file FIRST, before the option defaults read env vars
from pathlib import Path
from dotenv import load_dotenv

_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)

import logging
from typing import List, Optional

import click

from .config import (
    DEFAULT_BASE_BRANCH,
    ENV_DEFAULT_BASE,
    ENV_DEFAULT_ORG,
    ENV_DEFAULT_REPO,
    MirrorRequest,
)
from .github import GitHubAuth, get_github_auth
from .logging_config import setup_logging
from .mirror.git_mirror import mirror, sync
from .mirror.pull_request import create_pr
from .shell import CommandFailure
from .validation import UsageError, UserAbort, is_confirmation, validate_request
from .workspace import cleanup_mirror_repo, mirror_repo_path

# Initialize logging
setup_logging()

logger = logging.getLogger(__name__)

EPILOG = """\b
Environment Variables:
  Defaults can be set in a .env file in the current directory:
  DEFAULT_ORG      Default GitHub organization
  DEFAULT_REPO     Default repository name
  DEFAULT_BASE     Default base branch
  DEBUG            Set to 'true' to log every executed command
  LOG_LEVEL        DEBUG, INFO, WARNING, ERROR (default: INFO)
  LOG_FORMAT       text or json (default: text)

\b
Examples:
  # Mirror a new PR
  prmirror -n 123 -b main -o myorg -r myrepo

\b
  # Sync an existing mirrored PR
  prmirror -n 123 -b main -o myorg -r myrepo -s

\b
  # With .env defaults (DEFAULT_ORG, DEFAULT_REPO, DEFAULT_BASE set)
  prmirror -n 123
"""


class MirrorCommand(click.Command):
    """Command whose argument-parse errors exit 1 and show the full help."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        try:
            return super().parse_args(ctx, args)
        except UsageError:
            raise
        except click.UsageError as e:
            raise UsageError(f"Error parsing arguments: {e.format_message()}", ctx) from e


def _confirm(request: MirrorRequest) -> None:
    """Show the resolved request and wait for y/yes. Raises UserAbort."""
    click.echo("\nAbout to run with:")
    for label, value in request.describe():
        click.echo(f"  {label + ':':11} {value}")
    click.echo()

    try:
        answer = click.prompt("Proceed? [y/N]", default="", show_default=False)
    except click.Abort:
        # stdin closed before an answer
        raise UserAbort() from None
    if not is_confirmation(answer):
        raise UserAbort()


def _dispatch(request: MirrorRequest, auth: GitHubAuth) -> None:
    """Run sync, or mirror followed by PR creation."""
    try:
        if request.sync:
            sync(request)
        else:
            mirror(request)
            create_pr(request, auth)
    finally:
        if request.delete_after_action:
            cleanup_mirror_repo()


@click.command(
    "prmirror",
    cls=MirrorCommand,
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-n", "--number", type=int, help="PR number to mirror (required)")
@click.option(
    "-b", "--base", envvar=ENV_DEFAULT_BASE, default=DEFAULT_BASE_BRANCH,
    show_default=True, help="Base branch name (can use DEFAULT_BASE env var)",
)
@click.option("-o", "--org", envvar=ENV_DEFAULT_ORG, default="", help="GitHub organization (can use DEFAULT_ORG env var)")
@click.option("-r", "--repo", envvar=ENV_DEFAULT_REPO, default="", help="GitHub repository name (can use DEFAULT_REPO env var)")
@click.option("-s", "--sync", "sync_", is_flag=True, help="Sync existing mirror branch")
@click.option("-c", "--clean", is_flag=True, help="Remove the mirror-repo directory and exit")
@click.option("-d", "--deleteAfterAction", "delete_after_action", is_flag=True, help="Remove the mirror-repo directory when done")
@click.option("-v", "--verify", is_flag=True, help="Show the resolved options and ask before running")
@click.pass_context
def cli(
    ctx: click.Context,
    number: Optional[int],
    base: str,
    org: str,
    repo: str,
    sync_: bool,
    clean: bool,
    delete_after_action: bool,
    verify: bool,
) -> None:
    """Mirror a pull request into a mirror/pr-NUMBER branch and open a PR for it."""
    if clean:
        cleanup_mirror_repo()
        click.secho(f"✓ Cleaned {mirror_repo_path()}", fg="green")
        return

    request = MirrorRequest(
        number=number,
        base=base,
        org=org,
        repo=repo,
        sync=sync_,
        verify=verify,
        clean=clean,
        delete_after_action=delete_after_action,
    )
    validate_request(request)

    try:
        if request.verify:
            _confirm(request)

        auth = get_github_auth()
        _dispatch(request, auth)
    except UserAbort:
        click.echo("Cancelled.")
        return
    except CommandFailure as e:
        logger.debug("Action failed", exc_info=True)
        click.secho(f"\n✗ Error: {e}", fg="red", err=True)
        ctx.exit(1)

    click.secho("\n✓ Success!", fg="green")


if __name__ == "__main__":
    cli()
