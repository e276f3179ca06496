"""Data model for filesystem scaffolding.

A ``Manifest`` is an ordered, immutable list of ``ScaffoldEntry`` objects,
each describing one directory or file relative to the project root.  Running
the scaffolder over a manifest produces a ``ScaffoldReport`` with one
``EntryResult`` per entry.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import ScaffoldError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class EntryKind(str, Enum):
    """What a manifest entry materialises as."""

    DIRECTORY = "directory"
    EMPTY_FILE = "empty_file"
    TEMPLATED_FILE = "templated_file"


class EntryStatus(str, Enum):
    """Outcome of processing a single manifest entry."""

    CREATED = "created"
    ALREADY_PRESENT = "already_present"
    OVERWRITTEN = "overwritten"
    FAILED = "failed"
    SKIPPED = "skipped"


# ---------------------------------------------------------------------------
# Manifest entries
# ---------------------------------------------------------------------------


class ScaffoldEntry(BaseModel):
    """A single ``(relative_path, kind, content?)`` manifest entry."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="POSIX path relative to the project root")
    kind: EntryKind
    content: str | None = Field(
        default=None,
        description="Literal file body; only for TEMPLATED_FILE entries",
    )

    @field_validator("relative_path")
    @classmethod
    def _normalise_relative_path(cls, value: str) -> str:
        if "\x00" in value:
            raise ValueError(f"path must not contain NUL: {value!r}")
        raw = value.replace("\\", "/")
        if PurePosixPath(raw).is_absolute() or PureWindowsPath(value).drive:
            raise ValueError(f"path must be relative: {value!r}")
        parts = PurePosixPath(raw).parts
        if ".." in parts:
            raise ValueError(f"path must not contain '..': {value!r}")
        normalised = PurePosixPath(*parts).as_posix() if parts else ""
        if normalised in ("", "."):
            raise ValueError("path must not be empty")
        return normalised

    @model_validator(mode="after")
    def _check_content(self) -> "ScaffoldEntry":
        if self.kind is EntryKind.TEMPLATED_FILE and self.content is None:
            raise ValueError(f"templated file {self.relative_path!r} needs content")
        if self.kind is not EntryKind.TEMPLATED_FILE and self.content is not None:
            raise ValueError(
                f"{self.kind.value} entry {self.relative_path!r} cannot carry content"
            )
        return self

    # -- Convenience constructors ------------------------------------------

    @classmethod
    def directory(cls, path: str) -> "ScaffoldEntry":
        return cls(relative_path=path, kind=EntryKind.DIRECTORY)

    @classmethod
    def empty_file(cls, path: str) -> "ScaffoldEntry":
        return cls(relative_path=path, kind=EntryKind.EMPTY_FILE)

    @classmethod
    def templated_file(cls, path: str, content: str) -> "ScaffoldEntry":
        return cls(relative_path=path, kind=EntryKind.TEMPLATED_FILE, content=content)

    # -- Derived properties ------------------------------------------------

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def depth(self) -> int:
        """Number of path segments (``api`` is 1, ``api/v1`` is 2)."""
        return len(PurePosixPath(self.relative_path).parts)

    @property
    def parents(self) -> list[str]:
        """Ancestor paths, nearest first, excluding the project root."""
        return [
            p.as_posix()
            for p in PurePosixPath(self.relative_path).parents
            if p.as_posix() != "."
        ]

    def target(self, root: Path) -> Path:
        """Absolute location of this entry under *root*."""
        return root.joinpath(*PurePosixPath(self.relative_path).parts)


class Manifest(BaseModel):
    """Ordered, immutable collection of scaffold entries.

    Rejects duplicate paths and entries nested under a file entry.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[ScaffoldEntry, ...] = ()

    @model_validator(mode="after")
    def _check_consistency(self) -> "Manifest":
        seen: set[str] = set()
        file_paths: set[str] = set()
        for entry in self.entries:
            if entry.relative_path in seen:
                raise ValueError(f"duplicate manifest path: {entry.relative_path!r}")
            seen.add(entry.relative_path)
            if not entry.is_directory:
                file_paths.add(entry.relative_path)

        for entry in self.entries:
            blocked = file_paths.intersection(entry.parents)
            if blocked:
                raise ValueError(
                    f"{entry.relative_path!r} is nested under file entry "
                    f"{sorted(blocked)[0]!r}"
                )
        return self

    def __len__(self) -> int:
        return len(self.entries)

    def directories(self) -> list[ScaffoldEntry]:
        return [e for e in self.entries if e.is_directory]

    def files(self) -> list[ScaffoldEntry]:
        return [e for e in self.entries if not e.is_directory]

    def paths(self) -> list[str]:
        return [e.relative_path for e in self.entries]

    def get(self, relative_path: str) -> ScaffoldEntry | None:
        for entry in self.entries:
            if entry.relative_path == relative_path:
                return entry
        return None

    def ordered(self) -> list[ScaffoldEntry]:
        """Directories shallow-to-deep, then files; stable otherwise."""
        dirs = sorted(self.directories(), key=lambda e: e.depth)
        return dirs + self.files()

    def directory_levels(self) -> list[list[ScaffoldEntry]]:
        """Group directory entries by depth, shallowest level first."""
        levels: dict[int, list[ScaffoldEntry]] = {}
        for entry in self.directories():
            levels.setdefault(entry.depth, []).append(entry)
        return [levels[d] for d in sorted(levels)]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class EntryResult(BaseModel):
    """Outcome for one manifest entry."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    entry: ScaffoldEntry
    status: EntryStatus
    error: ScaffoldError | None = None

    @property
    def path(self) -> str:
        return self.entry.relative_path


class ScaffoldReport(BaseModel):
    """Aggregate outcome of one scaffold run."""

    root: Path
    results: list[EntryResult] = Field(default_factory=list)
    elapsed: float = 0.0

    def _paths(self, status: EntryStatus) -> list[str]:
        return [r.path for r in self.results if r.status is status]

    @property
    def created(self) -> list[str]:
        return self._paths(EntryStatus.CREATED)

    @property
    def already_present(self) -> list[str]:
        return self._paths(EntryStatus.ALREADY_PRESENT)

    @property
    def overwritten(self) -> list[str]:
        return self._paths(EntryStatus.OVERWRITTEN)

    @property
    def skipped(self) -> list[str]:
        return self._paths(EntryStatus.SKIPPED)

    @property
    def failed(self) -> list[EntryResult]:
        return [r for r in self.results if r.status is EntryStatus.FAILED]

    @property
    def ok(self) -> bool:
        """``True`` when every entry was materialised."""
        return not self.failed and not self.skipped

    def counts(self) -> dict[str, int]:
        """Number of entries per status, in ``EntryStatus`` order."""
        return {
            status.value: sum(1 for r in self.results if r.status is status)
            for status in EntryStatus
        }

    def result_for(self, relative_path: str) -> EntryResult | None:
        for result in self.results:
            if result.path == relative_path:
                return result
        return None
