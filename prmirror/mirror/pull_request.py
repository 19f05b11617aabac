"""
Pull Request — Open the companion PR for a freshly pushed mirror branch.
"""

from __future__ import annotations

import logging
import shlex

from ..config import MirrorRequest
from ..github import GitHubAuth
from ..shell import run, run_verbose
from ..workspace import mirror_repo_path

logger = logging.getLogger(__name__)


def create_pr(request: MirrorRequest, auth: GitHubAuth) -> None:
    """
    Open a PR from the workspace's current branch into request.base.

    Titled "chore: Mirror PR-<number>" and assigned to the gh user. The
    credentials are passed to this one gh call through its environment.
    """
    repo_path = mirror_repo_path()
    branch = run("git rev-parse --abbrev-ref HEAD", repo_path)

    # git allows quote characters in branch names
    command = (
        f"gh pr create -a {shlex.quote(auth.username)} -B {shlex.quote(request.base)} "
        f'--fill-verbose -H {shlex.quote(branch)} -R "{request.slug}" -t "{request.pr_title}"'
    )

    logger.info(f"[mirror-pr] Opening PR {branch} → {request.base} on {request.slug}")
    run_verbose(command, repo_path, env=auth.env())
