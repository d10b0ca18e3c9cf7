"""Bump a semantic version consistently across JSON, TOML and AssemblyInfo files."""

from .errors import (
    BumpError,
    FormatError,
    PrecommitError,
    RepositoryNotCleanError,
    UpdateError,
    VersionResolutionError,
)
from .models import UpdateOptions, UpdateOutcome
from .pipeline import read_versions, run_update, update_files
from .versions import VERSION_ALIASES, resolve_version

__all__ = [
    "BumpError",
    "FormatError",
    "PrecommitError",
    "RepositoryNotCleanError",
    "UpdateError",
    "UpdateOptions",
    "UpdateOutcome",
    "VERSION_ALIASES",
    "VersionResolutionError",
    "read_versions",
    "resolve_version",
    "run_update",
    "update_files",
]
