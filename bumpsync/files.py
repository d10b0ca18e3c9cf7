"""File discovery and persistence.

Discovery yields files lazily so that a run aborted part-way through does
not read anything past the file that failed.
"""

from __future__ import annotations

import glob
from collections.abc import Iterable, Iterator
from pathlib import Path

from .models import DiscoveredFile

DEFAULT_PATTERNS = (
    "package.json",
    "bower.json",
    "pyproject.toml",
    "**/AssemblyInfo.cs",
)

IGNORED_DIRS = frozenset({"node_modules", ".git"})


def _is_ignored(path: Path, root: Path) -> bool:
    return any(part in IGNORED_DIRS for part in path.relative_to(root).parts)


def discover_files(
    patterns: Iterable[str] = DEFAULT_PATTERNS, root: Path | None = None
) -> Iterator[DiscoveredFile]:
    """Yield files under root matching any of the glob patterns.

    Matches are yielded in pattern order, sorted within each pattern, and
    each file at most once. Anything inside node_modules/ or .git/ is
    skipped.

    Args:
        patterns: Glob patterns relative to root; "**" matches recursively.
        root: Directory to search. Defaults to the current directory.
    """
    root = (root or Path.cwd()).resolve()
    seen: set[Path] = set()
    for pattern in patterns:
        for match in sorted(glob.glob(str(root / pattern), recursive=True)):
            path = Path(match)
            if path in seen or not path.is_file() or _is_ignored(path, root):
                continue
            seen.add(path)
            yield DiscoveredFile(
                path=path,
                relative=path.relative_to(root).as_posix(),
                contents=path.read_bytes(),
            )


def write_file(file: DiscoveredFile) -> Path:
    """Write a file's contents back to its original path."""
    file.path.write_bytes(file.contents)
    return file.path
