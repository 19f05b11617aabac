"""
GitHub CLI helpers — presence check and authenticated identity.

The token never leaves this module except through GitHubAuth.env(),
which builds the environment for a single gh invocation.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Dict

from .shell import run, run_sensitive

logger = logging.getLogger(__name__)

GH_BINARY = "gh"


@dataclass(frozen=True)
class GitHubAuth:
    """Credentials of the user currently logged in to gh."""

    token: str = field(repr=False)
    username: str

    def env(self) -> Dict[str, str]:
        """Process environment plus GITHUB_TOKEN/GITHUB_UNAME, for one subprocess."""
        env = dict(os.environ)
        env["GITHUB_TOKEN"] = self.token
        env["GITHUB_UNAME"] = self.username
        return env


def gh_installed() -> bool:
    """Check whether the gh CLI is on PATH."""
    return shutil.which(GH_BINARY) is not None


def get_github_auth() -> GitHubAuth:
    """Ask gh for the current token and login. Raises CommandFailure."""
    token = run_sensitive("gh auth token")
    username = run("gh api user --jq .login")
    logger.info(f"[github] Authenticated as {username}")
    return GitHubAuth(token=token, username=username)
