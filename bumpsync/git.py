"""Version-control collaborator used to commit and tag a bump."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .shell import git


class Repository(Protocol):
    def is_clean(self) -> bool: ...

    def commit(
        self, files: Sequence[str], message: str, version: str, tag: str
    ) -> None: ...

    def checkout(self) -> None: ...


class GitRepository:
    """Repository backed by the git CLI in the current directory."""

    def is_clean(self) -> bool:
        """True when tracked files have no uncommitted changes."""
        return not git("status", "--porcelain", "--untracked-files=no")

    def commit(
        self, files: Sequence[str], message: str, version: str, tag: str
    ) -> None:
        """Stage files, commit them and create an annotated tag.

        "%s" in message is replaced with version.
        """
        message = message.replace("%s", version)
        git("add", "--", *files)
        git("commit", "-m", message)
        git("tag", "-a", tag, "-m", message)

    def checkout(self) -> None:
        """Discard working tree changes to tracked files."""
        git("checkout", "--", ".")
