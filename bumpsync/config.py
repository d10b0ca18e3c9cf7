"""Project configuration from [tool.bumpsync] in pyproject.toml.

Uses tomlkit so the same parser reads configuration and rewrites TOML
manifests. Example:

    [tool.bumpsync]
    files = ["package.json", "src/**/AssemblyInfo.cs"]
    tag-name = "release-%s"
    commit-message = "Release %s"
    precommit = "pytest -q"
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import tomlkit
from pydantic import BaseModel, ConfigDict, Field

from .files import DEFAULT_PATTERNS
from .models import UpdateOptions
from .shell import run


def command_hook(command: str) -> Callable[[], None]:
    """Wrap a shell command as a precommit hook.

    The hook raises subprocess.CalledProcessError if the command fails.
    """

    def hook() -> None:
        run(command, check=True)

    return hook


class BumpConfig(BaseModel):
    """Settings read from [tool.bumpsync].

    Attributes:
        files: Glob patterns of files carrying the version.
        tag_name: Tag template; "%s" is replaced with the new version.
        no_prefix: Use "%s" rather than "v%s" as the default tag template.
        commit_message: Commit the bump with this message when set.
        precommit: Shell command run before committing.
    """

    model_config = ConfigDict(populate_by_name=True)

    files: list[str] = Field(default_factory=lambda: list(DEFAULT_PATTERNS))
    tag_name: str | None = Field(default=None, alias="tag-name")
    no_prefix: bool = Field(default=False, alias="no-prefix")
    commit_message: str | None = Field(default=None, alias="commit-message")
    precommit: str | None = None

    def to_options(self, version: str | None = None) -> UpdateOptions:
        """Build run options for a version directive."""
        return UpdateOptions(
            version=version or "minor",
            no_prefix=self.no_prefix,
            tag_name=self.tag_name,
            commit_message=self.commit_message,
            precommit=command_hook(self.precommit) if self.precommit else None,
        )


def load_config(root: Path | None = None) -> BumpConfig:
    """Read [tool.bumpsync] from root/pyproject.toml.

    Returns defaults when the file or the table is missing.
    """
    pyproject = (root or Path.cwd()) / "pyproject.toml"
    if not pyproject.exists():
        return BumpConfig()
    doc = tomlkit.parse(pyproject.read_text())
    table = doc.get("tool", {}).get("bumpsync", {})
    # unwrap() turns tomlkit items into plain Python values
    return BumpConfig.model_validate(table.unwrap() if table else {})
