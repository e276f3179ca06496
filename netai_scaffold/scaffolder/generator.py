"""Main scaffolding orchestrator.

Takes a ``Manifest`` and materialises it under a project root: directories
first, level by level, then every file in parallel.  Blocking filesystem
calls run in worker threads so that entries at the same level are processed
concurrently.
"""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

from .errors import ScaffoldError, ScaffoldErrorKind, from_os_error
from .models import EntryResult, EntryStatus, Manifest, ScaffoldEntry, ScaffoldReport


class Scaffolder:
    """Materialises a manifest of directories and files.

    By default every failing entry is recorded in the report and the run
    carries on with the remaining entries.  With ``fail_fast=True`` the run
    stops after the first batch that contains a failure and every entry not
    yet attempted is reported as ``SKIPPED``.

    File entries are always written in full: an existing ``EMPTY_FILE`` is
    truncated and an existing ``TEMPLATED_FILE`` is overwritten.  Use
    :meth:`find_conflicts` beforehand to learn which files would be replaced.
    """

    def __init__(self, fail_fast: bool = False) -> None:
        self.fail_fast = fail_fast

    # -- Public API --------------------------------------------------------

    async def scaffold(self, root: str | Path, manifest: Manifest) -> ScaffoldReport:
        """Create every manifest entry under *root*.

        Args:
            root: Project root directory.  Created (with ancestors) if missing.
            manifest: Entries to materialise.

        Returns:
            A ``ScaffoldReport`` with one result per entry, in manifest order.
        """
        started = time.monotonic()
        root_path = Path(root)

        try:
            resolved_root = await asyncio.to_thread(_ensure_root, root_path)
        except ScaffoldError as exc:
            results = [
                EntryResult(
                    entry=entry,
                    status=EntryStatus.FAILED,
                    error=ScaffoldError(exc.kind, entry.relative_path, exc.message),
                )
                for entry in manifest.entries
            ]
            return ScaffoldReport(
                root=root_path, results=results, elapsed=time.monotonic() - started
            )

        batches = manifest.directory_levels()
        if manifest.files():
            batches.append(manifest.files())

        outcomes: dict[str, EntryResult] = {}
        stopped = False
        for batch in batches:
            if stopped:
                for entry in batch:
                    outcomes[entry.relative_path] = EntryResult(
                        entry=entry, status=EntryStatus.SKIPPED
                    )
                continue

            batch_results = await asyncio.gather(
                *(
                    asyncio.to_thread(_materialise, entry, root_path, resolved_root)
                    for entry in batch
                )
            )
            for result in batch_results:
                outcomes[result.path] = result

            if self.fail_fast and any(r.status is EntryStatus.FAILED for r in batch_results):
                stopped = True

        return ScaffoldReport(
            root=root_path,
            results=[outcomes[entry.relative_path] for entry in manifest.entries],
            elapsed=time.monotonic() - started,
        )

    def plan(self, root: str | Path, manifest: Manifest) -> list[tuple[ScaffoldEntry, bool]]:
        """Return ``(entry, exists_on_disk)`` pairs in execution order.

        Raises:
            ScaffoldError: if an entry's target cannot be inspected.
        """
        root_path = Path(root)
        planned = []
        for entry in manifest.ordered():
            try:
                exists = _lexists(entry.target(root_path))
            except OSError as exc:
                raise from_os_error(exc, entry.relative_path) from exc
            except ValueError as exc:
                raise ScaffoldError(
                    ScaffoldErrorKind.INVALID_PATH, entry.relative_path, str(exc)
                ) from exc
            planned.append((entry, exists))
        return planned

    def find_conflicts(self, root: str | Path, manifest: Manifest) -> list[str]:
        """List file entries whose target already exists under *root*.

        These are the files a run would truncate or overwrite.
        """
        return [
            entry.relative_path
            for entry, exists in self.plan(root, manifest)
            if exists and not entry.is_directory
        ]


# ---------------------------------------------------------------------------
# Filesystem operations (run in worker threads)
# ---------------------------------------------------------------------------


def _lexists(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _ensure_root(root: Path) -> Path:
    """Create the project root and return its resolved form.

    Failures, including ones hit while inspecting the root's ancestors, are
    raised as ``ScaffoldError``.
    """
    label = str(root)
    try:
        for ancestor in reversed(root.parents):
            if ancestor.exists() and not ancestor.is_dir():
                raise ScaffoldError(
                    ScaffoldErrorKind.PARENT_IS_NOT_A_DIRECTORY,
                    label,
                    f"{ancestor} is not a directory",
                )
        if _lexists(root) and not root.is_dir():
            raise ScaffoldError(
                ScaffoldErrorKind.ALREADY_EXISTS_AS_WRONG_KIND,
                label,
                "project root exists and is not a directory",
            )
        root.mkdir(parents=True, exist_ok=True)
        return root.resolve()
    except OSError as exc:
        raise from_os_error(exc, label) from exc
    except ValueError as exc:
        raise ScaffoldError(ScaffoldErrorKind.INVALID_PATH, label, str(exc)) from exc


def _materialise(entry: ScaffoldEntry, root: Path, resolved_root: Path) -> EntryResult:
    try:
        status = _apply(entry, root, resolved_root)
    except ScaffoldError as exc:
        return EntryResult(entry=entry, status=EntryStatus.FAILED, error=exc)
    except OSError as exc:
        return EntryResult(
            entry=entry,
            status=EntryStatus.FAILED,
            error=from_os_error(exc, entry.relative_path),
        )
    except ValueError as exc:
        # e.g. an embedded NUL the OS refuses to encode
        return EntryResult(
            entry=entry,
            status=EntryStatus.FAILED,
            error=ScaffoldError(ScaffoldErrorKind.INVALID_PATH, entry.relative_path, str(exc)),
        )
    return EntryResult(entry=entry, status=status)


def _apply(entry: ScaffoldEntry, root: Path, resolved_root: Path) -> EntryStatus:
    target = entry.target(root)
    _check_isolation(entry, target, resolved_root)
    _check_ancestors(entry, root)

    if entry.is_directory:
        if target.is_dir():
            return EntryStatus.ALREADY_PRESENT
        if _lexists(target):
            raise ScaffoldError(
                ScaffoldErrorKind.ALREADY_EXISTS_AS_WRONG_KIND,
                entry.relative_path,
                "exists and is not a directory",
            )
        target.mkdir(parents=True, exist_ok=True)
        return EntryStatus.CREATED

    if target.is_dir():
        raise ScaffoldError(
            ScaffoldErrorKind.ALREADY_EXISTS_AS_WRONG_KIND,
            entry.relative_path,
            "exists and is a directory",
        )
    existed = _lexists(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(entry.content or "", encoding="utf-8", newline="")
    return EntryStatus.OVERWRITTEN if existed else EntryStatus.CREATED


def _check_isolation(entry: ScaffoldEntry, target: Path, resolved_root: Path) -> None:
    """Reject entries that resolve outside the root (e.g. through a symlink)."""
    resolved = target.resolve()
    if not resolved.is_relative_to(resolved_root):
        raise ScaffoldError(
            ScaffoldErrorKind.INVALID_PATH,
            entry.relative_path,
            f"resolves outside the project root ({resolved})",
        )


def _check_ancestors(entry: ScaffoldEntry, root: Path) -> None:
    for ancestor in reversed(entry.parents):
        path = root / ancestor
        if _lexists(path) and not path.is_dir():
            raise ScaffoldError(
                ScaffoldErrorKind.PARENT_IS_NOT_A_DIRECTORY,
                entry.relative_path,
                f"{ancestor} exists and is not a directory",
            )
