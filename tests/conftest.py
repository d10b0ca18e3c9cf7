"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from bumpsync.models import DiscoveredFile

PACKAGE_JSON = """\
{
  "name": "demo",
  "version": "1.2.3",
  "scripts": {
    "test": "jest"
  }
}
"""

ASSEMBLY_INFO = """\
using System.Reflection;
using System.Runtime.InteropServices;

[assembly: AssemblyTitle("Demo")]
[assembly: AssemblyVersion("1.2.3")]
[assembly: AssemblyFileVersion("1.2.3")]
[assembly: AssemblyInformationalVersion("1.2.3")]
[assembly: ComVisible(false)]
"""

PYPROJECT = """\
[project]
name = "demo"
# bumped by release tooling
version = "1.2.3"
dependencies = ["requests>=2.0"]
"""


def make_file(root: Path, relative: str, text: str) -> DiscoveredFile:
    """Write text under root and return it as a discovered file."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return DiscoveredFile(path=path, relative=relative, contents=path.read_bytes())


@pytest.fixture
def package_json(tmp_path: Path) -> DiscoveredFile:
    return make_file(tmp_path, "package.json", PACKAGE_JSON)


@pytest.fixture
def assembly_info(tmp_path: Path) -> DiscoveredFile:
    return make_file(tmp_path, "Properties/AssemblyInfo.cs", ASSEMBLY_INFO)


@pytest.fixture
def pyproject(tmp_path: Path) -> DiscoveredFile:
    return make_file(tmp_path, "pyproject.toml", PYPROJECT)
