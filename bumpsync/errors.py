"""Exceptions raised by the bump pipeline.

Per-file problems are raised as FormatError and collected by the pipeline;
everything else aborts the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import UpdateOutcome


class BumpError(Exception):
    """Base class for all bumpsync errors."""


class FormatError(BumpError):
    """A single file could not be read or rewritten.

    Raised for unsupported extensions, malformed documents and source files
    without the required version annotation. Recoverable: the pipeline
    records it and moves on to the next file.
    """


class VersionResolutionError(BumpError):
    """The version directive did not produce a valid semantic version."""

    def __init__(self, directive: str) -> None:
        super().__init__(f"Version bump failed, {directive} is not valid version.")
        self.directive = directive


class RepositoryNotCleanError(BumpError):
    """A commit was requested but the working tree has uncommitted changes."""


class PrecommitError(BumpError):
    """The precommit hook failed; working tree changes were discarded."""


class UpdateError(BumpError):
    """Some files failed to update.

    Attributes:
        outcome: The partial outcome for the files that did update.
    """

    def __init__(self, message: str, outcome: UpdateOutcome) -> None:
        super().__init__(message)
        self.outcome = outcome
