"""Shared pytest fixtures for the netai-scaffold test suite.

Provides reusable fixtures for:
- Temporary project roots
- The small example manifest used throughout the docs
- The full default manifest and pinned digests of its generated files
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest

from netai_scaffold.scaffolder import Manifest, ScaffoldEntry, build_default_manifest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Not-yet-existing project root inside a temporary directory."""
    return tmp_path / "proj"


@pytest.fixture
def locked_dir(tmp_path: Path, monkeypatch) -> Path:
    """Existing directory whose contents cannot be inspected or created.

    ``os.stat``, ``os.lstat`` and ``os.mkdir`` raise EACCES for anything below
    it, which mimics a directory without search permission even when the
    suite runs as root.
    """
    locked = tmp_path / "locked"
    locked.mkdir()

    def _deny(real):
        def wrapper(path, *args, **kwargs):
            raw = os.fspath(path) if isinstance(path, (str, os.PathLike)) else None
            if isinstance(raw, str):
                candidate = Path(raw)
                if candidate != locked and candidate.is_relative_to(locked):
                    raise PermissionError(errno.EACCES, "Permission denied", raw)
            return real(path, *args, **kwargs)
        return wrapper

    for name in ("stat", "lstat", "mkdir"):
        monkeypatch.setattr(os, name, _deny(getattr(os, name)))
    return locked


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------

@pytest.fixture
def example_manifest() -> Manifest:
    """``api/`` directory, an empty ``__init__.py`` and a one-line ``.gitignore``."""
    return Manifest(
        entries=(
            ScaffoldEntry.directory("api"),
            ScaffoldEntry.empty_file("api/__init__.py"),
            ScaffoldEntry.templated_file(".gitignore", "*.pyc\n"),
        )
    )


@pytest.fixture(scope="session")
def default_manifest() -> Manifest:
    """The full Network AI Platform manifest."""
    return build_default_manifest()


@pytest.fixture(scope="session")
def generated_file_digests() -> dict[str, str]:
    """SHA-256 of every generated file's expected UTF-8 bytes."""
    return {
        ".env.example": "29e84f3a13a376269c0bf7fb516284f45fd03215c214bb1e52454ac18b1bab3a",
        ".gitignore": "1900089cf0bb704e8d69525ce8033d062a27bd4e35108f2fbdf7cdb88b5133ea",
        "config.py": "f2d8a39a1d454588f7a69d1db07e6f7e39830055a20ed59e4e522d0014c4ee1c",
        "Dockerfile": "9f427ff40e2ddb0a20a8f661fa588fbcc45f64fc123031be1b67de049d023859",
        "docker-compose.yml": "e83df0b82099784db0c6246d81f67e47d64b3ac8c317b76224c8c7b9740a80f8",
        "README.md": "fe5d2a9c6520055b4481a172d7ab56b256621b5ee75368f96b456ced070967e7",
        "pytest.ini": "6b1439da471049d85e33022f22c18c7b4cf854395b7eba363c4ec32c387dbfab",
    }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def snapshot_tree(root: Path) -> dict[str, bytes | None]:
    """Map every path under *root* to its bytes (``None`` for directories)."""
    tree: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        tree[rel] = None if path.is_dir() else path.read_bytes()
    return tree


@pytest.fixture
def tree_snapshot():
    return snapshot_tree
