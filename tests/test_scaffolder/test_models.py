"""Tests for the scaffold data model (netai_scaffold.scaffolder.models).

Covers:
- ScaffoldEntry path normalisation and rejection of unsafe paths
- Content rules per entry kind
- Manifest consistency checks and ordering helpers
- ScaffoldReport derived views
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from netai_scaffold.scaffolder.errors import ScaffoldError, ScaffoldErrorKind
from netai_scaffold.scaffolder.models import (
    EntryKind,
    EntryResult,
    EntryStatus,
    Manifest,
    ScaffoldEntry,
    ScaffoldReport,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ScaffoldEntry
# ---------------------------------------------------------------------------


class TestScaffoldEntryPaths:
    def test_keeps_simple_relative_path(self):
        assert ScaffoldEntry.directory("api").relative_path == "api"

    def test_strips_dot_segments_and_trailing_slash(self):
        entry = ScaffoldEntry.directory("./tests//fixtures/")
        assert entry.relative_path == "tests/fixtures"

    def test_backslashes_become_forward_slashes(self):
        entry = ScaffoldEntry.empty_file("data\\logs\\.gitkeep")
        assert entry.relative_path == "data/logs/.gitkeep"

    @pytest.mark.parametrize("path", ["/etc/passwd", "C:\\temp\\x", "C:relative"])
    def test_rejects_absolute_paths(self, path):
        with pytest.raises(ValidationError):
            ScaffoldEntry.directory(path)

    @pytest.mark.parametrize("path", ["..", "../outside", "a/../../b", "a/.."])
    def test_rejects_parent_segments(self, path):
        with pytest.raises(ValidationError):
            ScaffoldEntry.empty_file(path)

    @pytest.mark.parametrize("path", ["", ".", "./"])
    def test_rejects_empty_paths(self, path):
        with pytest.raises(ValidationError):
            ScaffoldEntry.directory(path)

    @pytest.mark.parametrize("path", ["bad\x00name.txt", "api/\x00", "\x00"])
    def test_rejects_nul_bytes(self, path):
        with pytest.raises(ValidationError, match="NUL"):
            ScaffoldEntry.empty_file(path)

    def test_dotfiles_are_allowed(self):
        assert ScaffoldEntry.templated_file(".env.example", "X=1\n").relative_path == ".env.example"


class TestScaffoldEntryContent:
    def test_templated_file_requires_content(self):
        with pytest.raises(ValidationError):
            ScaffoldEntry(relative_path="README.md", kind=EntryKind.TEMPLATED_FILE)

    def test_templated_file_accepts_empty_string(self):
        entry = ScaffoldEntry.templated_file("empty.txt", "")
        assert entry.content == ""

    def test_directory_cannot_carry_content(self):
        with pytest.raises(ValidationError):
            ScaffoldEntry(relative_path="api", kind=EntryKind.DIRECTORY, content="x")

    def test_empty_file_cannot_carry_content(self):
        with pytest.raises(ValidationError):
            ScaffoldEntry(relative_path="a.txt", kind=EntryKind.EMPTY_FILE, content="x")

    def test_entries_are_frozen(self):
        entry = ScaffoldEntry.directory("api")
        with pytest.raises(ValidationError):
            entry.relative_path = "other"


class TestScaffoldEntryDerived:
    def test_depth(self):
        assert ScaffoldEntry.directory("api").depth == 1
        assert ScaffoldEntry.directory("database/migrations/versions").depth == 3

    def test_parents_nearest_first(self):
        entry = ScaffoldEntry.empty_file("a/b/c/file.txt")
        assert entry.parents == ["a/b/c", "a/b", "a"]

    def test_top_level_has_no_parents(self):
        assert ScaffoldEntry.empty_file("file.txt").parents == []

    def test_target(self, tmp_path: Path):
        entry = ScaffoldEntry.empty_file("data/logs/.gitkeep")
        assert entry.target(tmp_path) == tmp_path / "data" / "logs" / ".gitkeep"


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------


class TestManifest:
    def test_empty_manifest(self):
        manifest = Manifest()
        assert len(manifest) == 0
        assert manifest.ordered() == []
        assert manifest.directory_levels() == []

    def test_rejects_duplicate_paths(self):
        with pytest.raises(ValidationError, match="duplicate"):
            Manifest(
                entries=(
                    ScaffoldEntry.directory("api"),
                    ScaffoldEntry.directory("./api"),
                )
            )

    def test_rejects_entry_nested_under_file(self):
        with pytest.raises(ValidationError, match="nested under file"):
            Manifest(
                entries=(
                    ScaffoldEntry.empty_file("notes"),
                    ScaffoldEntry.empty_file("notes/today.txt"),
                )
            )

    def test_directories_and_files(self, example_manifest):
        assert [e.relative_path for e in example_manifest.directories()] == ["api"]
        assert [e.relative_path for e in example_manifest.files()] == [
            "api/__init__.py",
            ".gitignore",
        ]

    def test_ordered_puts_directories_first_shallow_to_deep(self):
        manifest = Manifest(
            entries=(
                ScaffoldEntry.empty_file("README.md"),
                ScaffoldEntry.directory("a/b/c"),
                ScaffoldEntry.directory("x"),
                ScaffoldEntry.directory("a/b"),
                ScaffoldEntry.empty_file("a/b/c/file.txt"),
            )
        )
        assert [e.relative_path for e in manifest.ordered()] == [
            "x",
            "a/b",
            "a/b/c",
            "README.md",
            "a/b/c/file.txt",
        ]

    def test_directory_levels(self):
        manifest = Manifest(
            entries=(
                ScaffoldEntry.directory("a/b"),
                ScaffoldEntry.directory("a"),
                ScaffoldEntry.directory("c/d"),
            )
        )
        levels = [[e.relative_path for e in level] for level in manifest.directory_levels()]
        assert levels == [["a"], ["a/b", "c/d"]]

    def test_get(self, example_manifest):
        assert example_manifest.get(".gitignore").content == "*.pyc\n"
        assert example_manifest.get("missing") is None

    def test_manifests_with_same_entries_are_equal(self):
        build = lambda: Manifest(entries=(ScaffoldEntry.directory("api"),))  # noqa: E731
        assert build() == build()


# ---------------------------------------------------------------------------
# ScaffoldReport
# ---------------------------------------------------------------------------


class TestScaffoldReport:
    def _report(self) -> ScaffoldReport:
        error = ScaffoldError(ScaffoldErrorKind.PERMISSION_DENIED, "c.txt")
        return ScaffoldReport(
            root=Path("/tmp/proj"),
            results=[
                EntryResult(entry=ScaffoldEntry.directory("a"), status=EntryStatus.CREATED),
                EntryResult(entry=ScaffoldEntry.directory("b"), status=EntryStatus.ALREADY_PRESENT),
                EntryResult(
                    entry=ScaffoldEntry.empty_file("c.txt"),
                    status=EntryStatus.FAILED,
                    error=error,
                ),
                EntryResult(entry=ScaffoldEntry.empty_file("d.txt"), status=EntryStatus.OVERWRITTEN),
                EntryResult(entry=ScaffoldEntry.empty_file("e.txt"), status=EntryStatus.SKIPPED),
            ],
        )

    def test_status_views(self):
        report = self._report()
        assert report.created == ["a"]
        assert report.already_present == ["b"]
        assert report.overwritten == ["d.txt"]
        assert report.skipped == ["e.txt"]
        assert [r.path for r in report.failed] == ["c.txt"]

    def test_counts_cover_every_status(self):
        counts = self._report().counts()
        assert list(counts) == [s.value for s in EntryStatus]
        assert sum(counts.values()) == 5

    def test_not_ok_with_failures(self):
        assert self._report().ok is False

    def test_ok_when_everything_materialised(self):
        report = ScaffoldReport(
            root=Path("."),
            results=[
                EntryResult(entry=ScaffoldEntry.directory("a"), status=EntryStatus.ALREADY_PRESENT),
                EntryResult(entry=ScaffoldEntry.empty_file("b"), status=EntryStatus.OVERWRITTEN),
            ],
        )
        assert report.ok is True

    def test_result_for(self):
        report = self._report()
        assert report.result_for("c.txt").error.kind is ScaffoldErrorKind.PERMISSION_DENIED
        assert report.result_for("zzz") is None
