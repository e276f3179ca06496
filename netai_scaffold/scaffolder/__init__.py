"""Network AI Platform scaffolder -- materialises the project skeleton.

A static ``Manifest`` of directories, placeholder files and literal
boilerplate files is consumed by a single generic ``Scaffolder``, which
reports what it created, found already present, or overwrote.

Quick usage::

    from netai_scaffold.scaffolder import Scaffolder, build_default_manifest

    manifest = build_default_manifest()
    report = await Scaffolder().scaffold("/tmp/network-ai-platform", manifest)
    assert report.ok
"""

from netai_scaffold.scaffolder.errors import ScaffoldError, ScaffoldErrorKind
from netai_scaffold.scaffolder.generator import Scaffolder
from netai_scaffold.scaffolder.manifest import DEFAULT_PROJECT_NAME, build_default_manifest
from netai_scaffold.scaffolder.models import (
    EntryKind,
    EntryResult,
    EntryStatus,
    Manifest,
    ScaffoldEntry,
    ScaffoldReport,
)
from netai_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_PROJECT_NAME",
    "EntryKind",
    "EntryResult",
    "EntryStatus",
    "Manifest",
    "ScaffoldEntry",
    "ScaffoldError",
    "ScaffoldErrorKind",
    "ScaffoldReport",
    "Scaffolder",
    "TemplateRenderer",
    "build_default_manifest",
]
