"""Subprocess helpers for git, precommit commands and console headers."""

from __future__ import annotations

import subprocess


def git(*args: str, check: bool = True) -> str:
    """Run git in the current directory and return its stripped stdout.

    Raises subprocess.CalledProcessError on a non-zero exit unless check
    is False, so a failed add/commit/tag stops the bump.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.strip()


def run(command: str, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    """Run a shell command line, streaming output to the terminal.

    Used for user-supplied hooks such as "pytest -q" or "npm test".

    Args:
        command: Command line, interpreted by the shell.
        check: If True (default), raise CalledProcessError on non-zero exit.
    """
    return subprocess.run(command, shell=True, check=check)


def step(msg: str) -> None:
    """Print a ruled header before a bump phase ("Bumping versions", "Committing")."""
    rule = "─" * 60
    print(f"\n{rule}\n{msg}\n{rule}")
