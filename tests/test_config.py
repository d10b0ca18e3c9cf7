"""Tests for bumpsync.config."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from bumpsync.config import BumpConfig, command_hook, load_config
from bumpsync.files import DEFAULT_PATTERNS


class TestLoadConfig:
    def test_defaults_without_pyproject(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config == BumpConfig()
        assert config.files == list(DEFAULT_PATTERNS)

    def test_defaults_without_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert load_config(tmp_path) == BumpConfig()

    def test_reads_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            "[tool.bumpsync]\n"
            'files = ["package.json", "src/**/AssemblyInfo.cs"]\n'
            'tag-name = "release-%s"\n'
            "no-prefix = true\n"
            'commit-message = "Release %s"\n'
            'precommit = "pytest -q"\n'
        )

        config = load_config(tmp_path)

        assert config.files == ["package.json", "src/**/AssemblyInfo.cs"]
        assert config.tag_name == "release-%s"
        assert config.no_prefix is True
        assert config.commit_message == "Release %s"
        assert config.precommit == "pytest -q"

    def test_uses_cwd(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.bumpsync]\nfiles = ["a.json"]\n')
        monkeypatch.chdir(tmp_path)
        assert load_config().files == ["a.json"]


class TestToOptions:
    def test_maps_fields(self) -> None:
        config = BumpConfig(tag_name="r%s", commit_message="Release %s")
        opts = config.to_options("patch")
        assert opts.version == "patch"
        assert opts.tag_name == "r%s"
        assert opts.commit_message == "Release %s"
        assert opts.precommit is None

    def test_default_directive(self) -> None:
        assert BumpConfig().to_options().version == "minor"

    def test_no_prefix(self) -> None:
        assert BumpConfig(no_prefix=True).to_options("1.0.0").tag_name == "%s"

    @patch("bumpsync.config.run")
    def test_precommit_becomes_hook(self, mock_run: MagicMock) -> None:
        opts = BumpConfig(precommit="make test").to_options("patch")
        opts.precommit()
        mock_run.assert_called_once_with("make test", check=True)


@patch("bumpsync.config.run")
def test_command_hook_is_deferred(mock_run: MagicMock) -> None:
    """The command only runs when the hook is called."""
    hook = command_hook("npm test")
    mock_run.assert_not_called()
    hook()
    mock_run.assert_called_once_with("npm test", check=True)
