"""Jinja2 template loading for the scaffolded boilerplate files.

The literal bodies of ``.env.example``, ``Dockerfile``, ``README.md`` and the
other generated files live as ``.j2`` resources under
``netai_scaffold/scaffolder/templates/``.  They carry no template expressions,
so rendering returns the file bytes verbatim; keeping them as resources keeps
the long text blocks out of the Python source.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads and renders the boilerplate templates.

    Trailing newlines are preserved and no whitespace control is applied, so
    a template without expressions renders byte-for-byte as stored.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir), encoding="utf-8"),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"README.md.j2"``).
            context: Optional variables available inside the template.

        Returns:
            The rendered content.

        Raises:
            jinja2.TemplateNotFound: If the template does not exist.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))

    def load_raw(self, template_path: str) -> str:
        """Return the stored template text without rendering it."""
        path = self.template_dir / template_path
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )
