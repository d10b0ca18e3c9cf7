"""Bump pipeline: resolve → rewrite → persist → commit.

This module orchestrates a version bump across every discovered file:
1. Check the repository is clean (only when committing)
2. For each file, pick a format adapter by extension and read its version
3. Resolve the version directive against that version
4. Rewrite the file with the run's canonical version and write it back
5. Optionally run a precommit hook, then commit and tag

Per-file problems (unsupported extension, malformed file) are collected
and reported together at the end. A directive that cannot be resolved
aborts the whole run; files already written stay written.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from .errors import (
    FormatError,
    PrecommitError,
    RepositoryNotCleanError,
    UpdateError,
    VersionResolutionError,
)
from .files import discover_files, write_file
from .formats import adapter_for, decode, encode
from .git import GitRepository, Repository
from .models import (
    DiscoveredFile,
    RunState,
    UpdateOptions,
    UpdateOutcome,
    VersionedFile,
    VersionReport,
)
from .shell import step
from .versions import resolve_version

Writer = Callable[[DiscoveredFile], Path]


def load_versioned(file: DiscoveredFile) -> VersionedFile:
    """Detect a file's format and read its current version.

    Raises:
        FormatError: If the file is unsupported or cannot be parsed.
    """
    adapter = adapter_for(file.path)
    return VersionedFile(
        path=file.path,
        relative=file.relative,
        contents=file.contents,
        format=adapter.format,
        current_version=adapter.read_version(decode(file.contents)),
    )


def read_versions(files: Iterable[DiscoveredFile | None]) -> VersionReport:
    """Collect the current version of each file without modifying anything.

    Returns:
        Report mapping file basename → current version, plus one error
        line per file that could not be read.
    """
    report = VersionReport()
    for file in files:
        if file is None:
            break
        try:
            report.versions[file.basename] = load_versioned(file).current_version
        except FormatError as exc:
            report.errors.append(f"{file.relative}: {exc}")
    return report


def _bump_file(
    file: DiscoveredFile, directive: str, state: RunState
) -> VersionedFile | None:
    """Resolve and rewrite one file. Returns None if the file was skipped."""
    try:
        versioned = load_versioned(file)
    except FormatError as exc:
        state.record_error(file.relative, str(exc))
        print(f"  Skipped {file.relative}: {exc}")
        return None

    resolved = resolve_version(directive, versioned.current_version)
    if resolved is None:
        raise VersionResolutionError(directive)

    canonical = state.adopt(resolved)
    if resolved != canonical:
        print(
            f"  Warning: {file.relative} would bump to {resolved}, "
            f"using {canonical} to keep files in step"
        )

    adapter = adapter_for(file.path)
    versioned.contents = encode(
        adapter.write_version(decode(versioned.contents), canonical)
    )
    versioned.new_version = canonical
    return versioned


def update_files(
    directive: str,
    files: Iterable[DiscoveredFile | None],
    writer: Writer = write_file,
) -> UpdateOutcome:
    """Bump the version in every file to the same new version.

    Files are processed one at a time in the order given; a None item marks
    the end of the stream. Each rewritten file is written back before the
    next file is read.

    Args:
        directive: Explicit version, increment keyword or alias.
        files: Discovered files.
        writer: Persists a rewritten file and returns its path.

    Returns:
        Outcome for the files that were updated. Its error field holds the
        aggregated per-file errors, if any.

    Raises:
        VersionResolutionError: If the directive cannot be resolved for a
            file. Files written before that point are not restored.
    """
    step(f"Bumping versions ({directive})")

    state = RunState()
    for file in files:
        if file is None:
            break
        versioned = _bump_file(file, directive, state)
        if versioned is None:
            continue

        state.versions[versioned.basename] = versioned.new_version
        state.updated_files.append(str(writer(versioned)))
        print(
            f"  {versioned.relative}: "
            f"{versioned.current_version or '<none>'} → {versioned.new_version}"
        )

    return state.outcome()


def commit_update(
    outcome: UpdateOutcome, options: UpdateOptions, repository: Repository
) -> UpdateOutcome:
    """Run the precommit hook, then commit and tag the updated files.

    Does nothing unless options.commit_message is set and files were updated.

    Raises:
        PrecommitError: If the hook raised; working tree changes are
            discarded first.
    """
    if not options.commit_message or not outcome.updated_files:
        return outcome

    step("Committing")

    if options.precommit is not None:
        try:
            options.precommit()
        except Exception as exc:
            repository.checkout()
            raise PrecommitError(f"Precommit hook failed: {exc}") from exc

    tag = options.render_tag(outcome.new_version)
    repository.commit(
        outcome.updated_files, options.commit_message, outcome.new_version, tag
    )
    outcome.message += f"\nCommitted to git and created tag {tag}"
    print(f"  Tagged {tag}")
    return outcome


def run_update(
    options: UpdateOptions | str | None = None,
    *,
    files: Iterable[DiscoveredFile | None] | None = None,
    repository: Repository | None = None,
    writer: Writer = write_file,
) -> UpdateOutcome:
    """Execute a full bump: check, update every file, then commit.

    Args:
        options: Run options, or a bare version directive.
        files: Files to update. Defaults to discover_files() in the
               current directory.
        repository: Used for the clean check and the commit. Defaults to
                    GitRepository().
        writer: Persists a rewritten file.

    Raises:
        RepositoryNotCleanError: Committing was requested on a dirty tree.
        VersionResolutionError: The directive could not be resolved.
        UpdateError: Some files failed; .outcome has the partial result.
        PrecommitError: The precommit hook failed.
    """
    options = UpdateOptions.coerce(options)
    repository = repository or GitRepository()

    if options.commit_message and not repository.is_clean():
        raise RepositoryNotCleanError(
            "Git working directory not clean, commit or stash changes first."
        )

    outcome = update_files(
        options.version,
        files if files is not None else discover_files(),
        writer=writer,
    )
    if outcome.error:
        raise UpdateError(outcome.error, outcome)

    return commit_update(outcome, options, repository)
