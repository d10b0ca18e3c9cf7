"""Tests for bumpsync.models."""

from __future__ import annotations

from pathlib import Path

from bumpsync.models import (
    NO_VERSION,
    DiscoveredFile,
    RunState,
    UpdateOptions,
    UpdateOutcome,
)


class TestDiscoveredFile:
    def test_basename(self) -> None:
        f = DiscoveredFile(
            path=Path("/repo/a/package.json"), relative="a/package.json", contents=b"{}"
        )
        assert f.basename == "package.json"


class TestUpdateOptions:
    def test_defaults(self) -> None:
        opts = UpdateOptions()
        assert opts.version == "minor"
        assert opts.tag_name == "v%s"
        assert opts.commit_message is None
        assert opts.precommit is None

    def test_no_prefix(self) -> None:
        assert UpdateOptions(no_prefix=True).tag_name == "%s"

    def test_explicit_tag_name_kept(self) -> None:
        opts = UpdateOptions(tag_name="release-%s", no_prefix=True)
        assert opts.tag_name == "release-%s"

    def test_empty_version_defaults_to_minor(self) -> None:
        assert UpdateOptions(version="").version == "minor"

    def test_coerce_string(self) -> None:
        assert UpdateOptions.coerce("patch").version == "patch"

    def test_coerce_none(self) -> None:
        assert UpdateOptions.coerce(None).version == "minor"

    def test_coerce_passthrough(self) -> None:
        opts = UpdateOptions(version="1.0.0")
        assert UpdateOptions.coerce(opts) is opts

    def test_render_tag(self) -> None:
        assert UpdateOptions().render_tag("1.2.3") == "v1.2.3"

    def test_render_tag_strips_quotes(self) -> None:
        opts = UpdateOptions(tag_name="\"rel-%s'")
        assert opts.render_tag("1.2.3") == "rel-1.2.3"

    def test_accepts_callable_hook(self) -> None:
        calls: list[int] = []
        opts = UpdateOptions(precommit=lambda: calls.append(1))
        opts.precommit()
        assert calls == [1]


class TestRunState:
    def test_first_version_is_canonical(self) -> None:
        state = RunState()
        assert state.adopt("1.2.4") == "1.2.4"
        assert state.adopt("2.0.0") == "1.2.4"
        assert state.canonical_version == "1.2.4"

    def test_empty_outcome(self) -> None:
        outcome = RunState().outcome()
        assert outcome == UpdateOutcome()
        assert outcome.new_version == NO_VERSION
        assert outcome.error is None

    def test_outcome_summary_and_errors(self) -> None:
        state = RunState()
        state.adopt("1.0.1")
        state.versions["package.json"] = "1.0.1"
        state.updated_files.append("/repo/package.json")
        state.record_error("notes.txt", "Extension '.txt' isn't supported.")

        outcome = state.outcome()

        assert outcome.new_version == "1.0.1"
        assert outcome.message == "Updated package.json"
        assert outcome.updated_files == ["/repo/package.json"]
        assert outcome.error == " * notes.txt: Extension '.txt' isn't supported."
