"""Format adapters: read and rewrite the version stored in a file.

Each supported extension maps to exactly one adapter. Adapters work on
decoded text and must leave everything except the version untouched:

- JsonAdapter: top-level "version" field of a JSON manifest. Indentation
  and the trailing newline of the original are reproduced on rewrite.
- TomlAdapter: [project].version (or [tool.poetry].version, or a top-level
  version) of a TOML manifest, rewritten with tomlkit.
- AssemblyInfoAdapter: AssemblyVersion / AssemblyFileVersion /
  AssemblyInformationalVersion attributes in a C# AssemblyInfo file.
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .errors import FormatError
from .models import FileFormat

ENCODING = "utf-8"


def decode(contents: bytes) -> str:
    # surrogateescape keeps undecodable bytes intact through a round trip
    return contents.decode(ENCODING, errors="surrogateescape")


def encode(text: str) -> bytes:
    return text.encode(ENCODING, errors="surrogateescape")


def detect_indent(text: str) -> str:
    """Return the indentation unit used by a document.

    The unit is the leading whitespace of the first indented line, so a
    document nested with tabs stays tab-indented and a 4-space document
    stays 4-space. Returns "" for single-line documents.
    """
    for line in text.splitlines():
        stripped = line.lstrip(" \t")
        if stripped and len(stripped) != len(line):
            return line[: len(line) - len(stripped)]
    return ""


def trailing_newline(text: str) -> str:
    """Return the run of whitespace that terminates text, if any.

    "}\\n\\n" keeps both newlines; "}" keeps none.
    """
    return text[len(text.rstrip()) :]


class FormatAdapter:
    """Base class for format adapters."""

    format: FileFormat

    def read_version(self, text: str) -> str | None:
        """Return the version stored in text, or None if it has none.

        Raises:
            FormatError: If text is not a file of this format.
        """
        raise NotImplementedError

    def write_version(self, text: str, version: str) -> str:
        """Return text with its version replaced by version."""
        raise NotImplementedError


class JsonAdapter(FormatAdapter):
    format = FileFormat.STRUCTURED

    def _load(self, text: str) -> dict[str, Any]:
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as exc:
            raise FormatError(str(exc)) from exc
        if not isinstance(doc, dict):
            raise FormatError("Top-level JSON value is not an object.")
        return doc

    def read_version(self, text: str) -> str | None:
        version = self._load(text).get("version")
        return None if version is None else str(version)

    def write_version(self, text: str, version: str) -> str:
        doc = self._load(text)
        doc["version"] = version
        indent = detect_indent(text)
        if indent:
            body = json.dumps(doc, indent=indent, ensure_ascii=False)
        else:
            body = json.dumps(doc, separators=(",", ":"), ensure_ascii=False)
        return body + trailing_newline(text)


class TomlAdapter(FormatAdapter):
    format = FileFormat.STRUCTURED

    def _load(self, text: str) -> tomlkit.TOMLDocument:
        try:
            return tomlkit.parse(text)
        except TOMLKitError as exc:
            raise FormatError(str(exc)) from exc

    @staticmethod
    def _version_table(doc: tomlkit.TOMLDocument) -> Any:
        """Find the table that holds a static version.

        Prefers [project], then [tool.poetry]. The document root is only
        used when it already carries a top-level version key.

        Raises:
            FormatError: If the version is dynamic, a table has the wrong
                type, or there is no version to bump.
        """
        if "project" in doc:
            project = doc["project"]
            if not isinstance(project, dict):
                raise FormatError("[project] is not a table.")
            if "version" in project.get("dynamic", []):
                raise FormatError("[project].version is dynamic.")
            return project
        tool = doc.get("tool", {})
        if not isinstance(tool, dict):
            raise FormatError("[tool] is not a table.")
        poetry = tool.get("poetry")
        if poetry is not None:
            if not isinstance(poetry, dict):
                raise FormatError("[tool.poetry] is not a table.")
            return poetry
        if "version" in doc:
            return doc
        raise FormatError("No [project] or [tool.poetry] version found.")

    def read_version(self, text: str) -> str | None:
        version = self._version_table(self._load(text)).get("version")
        return None if version is None else str(version)

    def write_version(self, text: str, version: str) -> str:
        doc = self._load(text)
        self._version_table(doc)["version"] = version
        return tomlkit.dumps(doc)


def _attribute_pattern(name: str) -> re.Pattern[str]:
    # Groups: 1 = text before the value, 2 = value, 3 = text after the value
    return re.compile(
        rf'^(\[assembly:\s*{name}\(\s*")([^"]+)("\s*\)\])', re.MULTILINE
    )


class AssemblyInfoAdapter(FormatAdapter):
    format = FileFormat.ANNOTATED

    version_pattern = _attribute_pattern("AssemblyVersion")
    rewrite_patterns = (
        version_pattern,
        _attribute_pattern("AssemblyFileVersion"),
        _attribute_pattern("AssemblyInformationalVersion"),
    )

    def read_version(self, text: str) -> str | None:
        match = self.version_pattern.search(text)
        if match is None:
            raise FormatError("This is possibly not an AssemblyInfo.cs file.")
        return match.group(2)

    def write_version(self, text: str, version: str) -> str:
        for pattern in self.rewrite_patterns:
            text = pattern.sub(
                lambda m: f"{m.group(1)}{version}{m.group(3)}", text, count=1
            )
        return text


ADAPTERS: Mapping[str, FormatAdapter] = MappingProxyType(
    {
        ".json": JsonAdapter(),
        ".toml": TomlAdapter(),
        ".cs": AssemblyInfoAdapter(),
    }
)


def adapter_for(path: Path | str) -> FormatAdapter:
    """Select the adapter for a file by its extension.

    Raises:
        FormatError: If no adapter handles the extension.
    """
    ext = Path(path).suffix.lower()
    adapter = ADAPTERS.get(ext)
    if adapter is None:
        raise FormatError(f"Extension '{ext}' isn't supported.")
    return adapter
