"""Version directive resolution.

A directive is either an explicit semantic version ("2.0.0"), an increment
keyword ("major", "minor", "patch", "prerelease") or a short alias for a
keyword ("m", "pa", ...). resolve_version() turns a directive and a file's
current version into the new version.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

import semver

VERSION_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "pa": "patch",
        "pr": "prerelease",
        "ma": "major",
        "mi": "minor",
        # Single letters save keystrokes
        "m": "major",
        "p": "patch",
        "i": "minor",
    }
)

INCREMENT_KEYWORDS = ("major", "minor", "patch", "prerelease")


def normalize_directive(
    directive: str, aliases: Mapping[str, str] = VERSION_ALIASES
) -> str:
    """Lowercase a directive and expand it if it is an alias.

    Examples:
        "M" → "major"
        "Patch" → "patch"
        "1.2.3-RC.1" → "1.2.3-rc.1"
    """
    normalized = str(directive).strip().lower()
    return aliases.get(normalized, normalized)


def _explicit_version(directive: str) -> str | None:
    """Return the directive as a clean version string if it is one.

    Accepts a leading "v" or "=" ("v1.2.3" → "1.2.3").
    """
    candidate = directive.lstrip("=v").strip()
    if candidate and semver.Version.is_valid(candidate):
        return str(semver.Version.parse(candidate))
    return None


def increment(current: str | None, keyword: str) -> str | None:
    """Bump current by keyword, or return None if either is unusable.

    Prerelease bumps use the "rc" token:
        increment("1.2.3", "prerelease") → "1.2.4-rc.1"
        increment("1.2.4-rc.1", "prerelease") → "1.2.4-rc.2"
    """
    if keyword not in INCREMENT_KEYWORDS:
        return None
    try:
        version = semver.Version.parse(current)
    except (TypeError, ValueError):
        return None
    return str(version.next_version(keyword))


def resolve_version(
    directive: str,
    current: str | None,
    aliases: Mapping[str, str] = VERSION_ALIASES,
) -> str | None:
    """Compute the new version for a file.

    Args:
        directive: Explicit version, increment keyword or alias.
        current: The file's current version; may be None when the file
                 carries no version.
        aliases: Alias → keyword table.

    Returns:
        The new version string, or None when the directive is neither a
        valid version nor a keyword that can be applied to current.
    """
    normalized = normalize_directive(directive, aliases)
    explicit = _explicit_version(normalized)
    if explicit is not None:
        return explicit
    return increment(current, normalized)
