"""netai-scaffold run configuration.

Typed settings for a single scaffold run. Uses a Pydantic v2 model so that a
bad project name or root is rejected at construction time, before anything
touches the disk.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from netai_scaffold.scaffolder.manifest import DEFAULT_PROJECT_NAME


class ScaffoldConfig(BaseModel):
    """Settings for one ``netai-scaffold`` invocation.

    The project is created at ``root / project_name``.
    """

    root: Path = Field(default=Path("."), description="Directory in which the project folder is created")
    project_name: str = Field(default=DEFAULT_PROJECT_NAME, description="Project folder name")
    force: bool = Field(default=False, description="Allow overwriting existing files")
    fail_fast: bool = Field(default=False, description="Stop at the first failing entry")
    dry_run: bool = Field(default=False, description="Only print the plan")
    quiet: bool = Field(default=False, description="Only print the summary")

    @field_validator("project_name")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if not value or value in (".", ".."):
            raise ValueError("project name must not be empty, '.' or '..'")
        if value != value.strip():
            raise ValueError(f"project name must not start or end with whitespace: {value!r}")
        if "/" in value or "\\" in value or "\x00" in value:
            raise ValueError(f"project name must be a single folder name: {value!r}")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def project_root(self) -> Path:
        """Directory the manifest is materialised into."""
        return self.root / self.project_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from parsed CLI arguments."""
        return cls(
            root=Path(args.root),
            project_name=args.name,
            force=args.force,
            fail_fast=args.fail_fast,
            dry_run=args.dry_run,
            quiet=args.quiet,
        )
