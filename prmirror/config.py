"""
Mirror Configuration — the request assembled from flags and env defaults.

Defaults are read from the environment (or a .env file in the current
directory):

    DEFAULT_BASE=main
    DEFAULT_ORG=myorg
    DEFAULT_REPO=myrepo

An explicit flag always wins over the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

ENV_DEFAULT_BASE = "DEFAULT_BASE"
ENV_DEFAULT_ORG = "DEFAULT_ORG"
ENV_DEFAULT_REPO = "DEFAULT_REPO"

DEFAULT_BASE_BRANCH = "main"
TEMP_BRANCH = "pr-temp"


@dataclass
class MirrorRequest:
    """One mirror or sync invocation."""

    number: Optional[int] = None
    base: str = DEFAULT_BASE_BRANCH
    org: str = ""
    repo: str = ""
    sync: bool = False
    verify: bool = False
    clean: bool = False
    delete_after_action: bool = False

    @property
    def slug(self) -> str:
        return f"{self.org}/{self.repo}"

    @property
    def remote_url(self) -> str:
        """SSH remote of the target repository."""
        return f"git@github.com:{self.org}/{self.repo}"

    @property
    def mirror_branch(self) -> str:
        return f"mirror/pr-{self.number}"

    @property
    def pr_title(self) -> str:
        return f"chore: Mirror PR-{self.number}"

    def describe(self) -> List[Tuple[str, str]]:
        """Field listing shown before the --verify prompt."""
        return [
            ("Base", self.base),
            ("PR number", str(self.number)),
            ("Org", self.org),
            ("Repo", self.repo),
            ("Mode", "sync" if self.sync else "mirror + create PR"),
            ("Branch", self.mirror_branch),
        ]
