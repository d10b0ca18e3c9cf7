"""Data models for bumpsync.

These Pydantic models represent the records passed between file discovery,
the update pipeline and the commit step.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

NO_VERSION = "N/A"


class FileFormat(str, Enum):
    """How a file stores its version."""

    STRUCTURED = "structured-data"
    ANNOTATED = "source-annotation"


class DiscoveredFile(BaseModel):
    """A file yielded by discovery, before any parsing.

    Attributes:
        path: Absolute path to the file on disk.
        relative: Path relative to the discovery root, used in messages.
        contents: Raw bytes as read from disk.
    """

    path: Path
    relative: str
    contents: bytes

    @property
    def basename(self) -> str:
        return self.path.name


class VersionedFile(DiscoveredFile):
    """A discovered file whose format and versions are known.

    Contents are replaced in place once the file has been rewritten.

    Attributes:
        format: Which adapter family handles this file.
        current_version: Version found in the file, or None if absent.
        new_version: Version written to the file, None until resolved.
    """

    format: FileFormat
    current_version: str | None = None
    new_version: str | None = None


class UpdateOptions(BaseModel):
    """Options for a bump run.

    Attributes:
        version: Version directive (explicit version, keyword or alias).
        no_prefix: Drop the leading "v" from the default tag template.
        tag_name: Tag template; "%s" is replaced with the new version.
        commit_message: Commit (and tag) the updated files with this message.
                        "%s" is replaced with the new version.
        precommit: Called before committing; raising aborts the commit.
    """

    version: str = "minor"
    no_prefix: bool = False
    tag_name: str | None = None
    commit_message: str | None = None
    precommit: Callable[[], None] | None = None

    @model_validator(mode="after")
    def _defaults(self) -> UpdateOptions:
        if not self.version:
            self.version = "minor"
        if not self.tag_name:
            self.tag_name = ("" if self.no_prefix else "v") + "%s"
        return self

    @classmethod
    def coerce(cls, options: UpdateOptions | str | None) -> UpdateOptions:
        """Accept a bare directive string as shorthand for options."""
        if options is None:
            return cls()
        if isinstance(options, str):
            return cls(version=options)
        return options

    def render_tag(self, version: str) -> str:
        """Fill the tag template and strip quote characters."""
        tag = (self.tag_name or "%s").replace("%s", version)
        return tag.replace('"', "").replace("'", "")


class UpdateOutcome(BaseModel):
    """Result of a bump run.

    Attributes:
        new_version: Version applied to every file, "N/A" if none resolved.
        versions: File basename → version written to it.
        message: Human-readable summary, one line per updated file.
        updated_files: Paths that were written.
        error: Aggregated per-file errors, None when every file succeeded.
    """

    new_version: str = NO_VERSION
    versions: dict[str, str] = Field(default_factory=dict)
    message: str = ""
    updated_files: list[str] = Field(default_factory=list)
    error: str | None = None


class VersionReport(BaseModel):
    """Current versions found in discovered files, without modifying them."""

    versions: dict[str, str | None] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)


class RunState(BaseModel):
    """Mutable state scoped to a single pipeline run.

    The first version resolved in a run becomes canonical: it is written to
    every later file even if that file would resolve differently on its own.
    """

    canonical_version: str | None = None
    versions: dict[str, str] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
    updated_files: list[str] = Field(default_factory=list)

    def adopt(self, version: str) -> str:
        """Record version as canonical if none is yet, and return the canonical one."""
        if self.canonical_version is None:
            self.canonical_version = version
        return self.canonical_version

    def record_error(self, relative: str, message: str) -> None:
        self.errors.append(f"{relative}: {message}")

    def error_message(self) -> str | None:
        if not self.errors:
            return None
        return "\n".join(f" * {e}" for e in self.errors)

    def outcome(self) -> UpdateOutcome:
        """Build the final outcome from everything recorded so far."""
        return UpdateOutcome(
            new_version=self.canonical_version or NO_VERSION,
            versions=dict(self.versions),
            message="\n".join(
                f"Updated {Path(p).name}" for p in self.updated_files
            ),
            updated_files=list(self.updated_files),
            error=self.error_message(),
        )
