"""
Workspace — the single mirror-repo clone under the current directory.

Every operation clones into the same directory, so only one run may
use a given working directory at a time.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

MIRROR_REPO_DIR = "mirror-repo"


def mirror_repo_path() -> Path:
    """Absolute path of the workspace, resolved against the current directory."""
    return Path.cwd() / MIRROR_REPO_DIR


def cleanup_mirror_repo() -> None:
    """Remove the workspace and everything in it. No-op when it is absent."""
    path = mirror_repo_path()
    if not path.exists():
        return
    logger.info(f"[workspace] Removing {path}")
    shutil.rmtree(path)
