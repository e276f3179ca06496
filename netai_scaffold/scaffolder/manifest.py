"""Default manifest for the Network AI Platform project skeleton."""

from __future__ import annotations

from .models import Manifest, ScaffoldEntry
from .templates import TemplateRenderer


DEFAULT_PROJECT_NAME = "network-ai-platform"


# ---------------------------------------------------------------------------
# Skeleton layout
# ---------------------------------------------------------------------------

DIRECTORIES: tuple[str, ...] = (
    # API layer
    "api",
    # Configuration parsing
    "config_parser/templates",
    # Network modeling
    "network_model",
    # AI engine
    "ai_engine",
    "database/migrations/versions",
    "services",
    "utils",
    "tests/fixtures/sample_configs",
    "tests/fixtures/expected_outputs",
    "tests/integration",
    # Frontend (optional)
    "frontend/src/components",
    "frontend/src/services",
    "frontend/src/hooks",
    "frontend/src/styles",
    "frontend/public",
    "docs/architecture",
    "docs/examples",
    "docs/screenshots",
    "scripts",
    # Data storage
    "data/uploads",
    "data/exports",
    "data/backups",
    "data/logs",
    "templates/config_templates",
    "templates/email_templates",
    "templates/report_templates",
    "deployment/kubernetes",
    "deployment/terraform",
    "deployment/nginx",
    ".vscode",
)

PYTHON_PACKAGES: tuple[str, ...] = (
    "api",
    "config_parser",
    "network_model",
    "ai_engine",
    "database",
    "services",
    "utils",
    "tests",
)

# Placeholders that keep otherwise-empty data directories under version control.
GITKEEP_DIRS: tuple[str, ...] = (
    "data/uploads",
    "data/exports",
    "data/backups",
    "data/logs",
)

# Output path -> template name, in generation order.
CONFIG_TEMPLATES: dict[str, str] = {
    ".env.example": "dotenv.example.j2",
    ".gitignore": "gitignore.j2",
    "config.py": "config.py.j2",
    "Dockerfile": "Dockerfile.j2",
    "docker-compose.yml": "docker-compose.yml.j2",
}

DOC_TEMPLATES: dict[str, str] = {
    "README.md": "README.md.j2",
    "pytest.ini": "pytest.ini.j2",
}

# Printed after a successful run, preceded by ``cd <project>``.
NEXT_STEPS: tuple[str, ...] = (
    "python -m venv venv",
    "source venv/bin/activate  (or venv\\Scripts\\activate on Windows)",
    "pip install -r requirements.txt",
    "cp .env.example .env",
    "Edit .env with your settings",
    "python database/database.py init",
    "uvicorn main:app --reload",
)


# ---------------------------------------------------------------------------
# Manifest assembly
# ---------------------------------------------------------------------------


def build_default_manifest(renderer: TemplateRenderer | None = None) -> Manifest:
    """Assemble the Network AI Platform manifest.

    Template bodies are loaded once here; the returned manifest holds them as
    literal strings, so repeated calls produce equal manifests.
    """
    renderer = renderer or TemplateRenderer()

    entries: list[ScaffoldEntry] = [ScaffoldEntry.directory(d) for d in DIRECTORIES]
    entries += [ScaffoldEntry.empty_file(f"{pkg}/__init__.py") for pkg in PYTHON_PACKAGES]
    entries += [
        ScaffoldEntry.templated_file(path, renderer.render(template))
        for path, template in CONFIG_TEMPLATES.items()
    ]
    entries += [ScaffoldEntry.empty_file(f"{d}/.gitkeep") for d in GITKEEP_DIRS]
    entries += [
        ScaffoldEntry.templated_file(path, renderer.render(template))
        for path, template in DOC_TEMPLATES.items()
    ]
    return Manifest(entries=tuple(entries))
