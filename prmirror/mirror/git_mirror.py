"""
Git Mirror — Create or re-sync the mirror/pr-<number> branch.

Both flows start from a fresh clone of the target repository and fetch
refs/pull/<number>/head into a local pr-temp branch. They differ in how
the mirror branch is produced and pushed:

    mirror   branch off pr-temp, push -u      (branch must not exist)
    sync     reset existing branch, push -f   (branch must exist)

Each step is one command; CommandFailure from any step aborts the rest
and leaves the workspace as-is for the next run to clean.
"""

from __future__ import annotations

import logging

from ..config import TEMP_BRANCH, MirrorRequest
from ..shell import run_verbose
from ..workspace import MIRROR_REPO_DIR, cleanup_mirror_repo, mirror_repo_path

logger = logging.getLogger(__name__)


def _clone_and_fetch(request: MirrorRequest) -> None:
    """Fresh clone of the target repo with the PR head in pr-temp."""
    cleanup_mirror_repo()

    logger.info(f"[mirror-git] Cloning repository {request.slug}...")
    run_verbose(f'git clone "{request.remote_url}" {MIRROR_REPO_DIR}')

    logger.info(f"[mirror-git] Fetching PR #{request.number}...")
    run_verbose(
        f"git fetch origin pull/{request.number}/head:{TEMP_BRANCH}",
        mirror_repo_path(),
    )


def mirror(request: MirrorRequest) -> None:
    """Create mirror/pr-<number> from the PR head and push it upstream."""
    _clone_and_fetch(request)
    repo_path = mirror_repo_path()
    branch = request.mirror_branch

    logger.info("[mirror-git] Creating mirror branch...")
    run_verbose(f"git checkout {TEMP_BRANCH}", repo_path)
    run_verbose(f'git checkout -b "{branch}"', repo_path)

    # Empty signed commit marks when the mirror was taken
    logger.info("[mirror-git] Creating tracking commit...")
    run_verbose(
        f'git commit --allow-empty -sS -m "chore: mirror pr-{request.number}"',
        repo_path,
    )
    run_verbose(f'git push -u origin "{branch}"', repo_path)


def sync(request: MirrorRequest) -> None:
    """Hard-reset an existing mirror/pr-<number> to the PR head and force-push."""
    _clone_and_fetch(request)
    repo_path = mirror_repo_path()
    branch = request.mirror_branch

    logger.info(f"[mirror-git] Checking out {branch}...")
    run_verbose(f'git checkout "{branch}"', repo_path)

    logger.info("[mirror-git] Resetting branch to match PR head...")
    run_verbose(f"git reset --hard {TEMP_BRANCH}", repo_path)

    logger.info("[mirror-git] Creating sync commit...")
    run_verbose(
        f'git commit --allow-empty -sS -m "chore: mirror pr-{request.number} (sync)"',
        repo_path,
    )

    logger.info("[mirror-git] Force-pushing changes...")
    run_verbose(f'git push -f origin "{branch}"', repo_path)
