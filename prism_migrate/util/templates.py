"""
Template loading and rendering utilities using Jinja2.
"""

import shutil
from collections.abc import Iterable
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template

# Templates shipped with the package
DEFAULT_TEMPLATES = Path(__file__).parent.parent / "templates"


def to_ts_array(values: Iterable[str]) -> str:
    """Format strings as a single-quoted TypeScript array literal."""
    return "[" + ", ".join(f"'{value}'" for value in values) + "]"


class TemplateLoader:
    """
    Loads and renders Jinja2 templates.

    Supports an override directory with fallback to the packaged defaults.
    """

    def __init__(self, templates_dir: Path | None = None):
        """
        Initialize template loader.

        Args:
            templates_dir: Optional directory whose templates take precedence
                over the packaged ones
        """
        self.custom_templates = Path(templates_dir) if templates_dir else None
        self.default_templates = DEFAULT_TEMPLATES
        self._env: Environment | None = None
        self._template_cache: dict[str, Template] = {}

    def has_custom_templates(self) -> bool:
        """Check if a custom template directory is configured and present."""
        return self.custom_templates is not None and self.custom_templates.exists()

    @property
    def env(self) -> Environment:
        """
        Get or create Jinja2 environment (cached).

        Returns:
            Cached Jinja2 Environment configured for template loading
        """
        if self._env is None:
            template_dirs = []

            if self.has_custom_templates():
                template_dirs.append(str(self.custom_templates))

            if self.default_templates.exists():
                template_dirs.append(str(self.default_templates))

            if not template_dirs:
                raise FileNotFoundError("No template directories found")

            self._env = Environment(
                loader=FileSystemLoader(template_dirs),
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
            )

            self._env.filters["ts_array"] = to_ts_array

        return self._env

    def get_template_path(self, template_name: str) -> Path:
        """
        Get path to template file, preferring the custom directory over defaults.

        Args:
            template_name: Template name (e.g., "typescript/account.ts.j2")

        Returns:
            Path to template file
        """
        if self.has_custom_templates():
            custom_template = self.custom_templates / template_name
            if custom_template.exists():
                return custom_template

        default_template = self.default_templates / template_name
        if default_template.exists():
            return default_template

        raise FileNotFoundError(
            f"Template '{template_name}' not found in custom or default templates"
        )

    def load_template(self, template_name: str) -> Template:
        """
        Load a Jinja2 template with caching.

        Args:
            template_name: Template name (e.g., "typescript/account.ts.j2")

        Returns:
            Cached Jinja2 Template object
        """
        if template_name not in self._template_cache:
            # Verify template exists (will raise if not found)
            self.get_template_path(template_name)
            self._template_cache[template_name] = self.env.get_template(template_name)

        return self._template_cache[template_name]

    def render(self, template_name: str, context: dict) -> str:
        """
        Render a template to a string.

        Args:
            template_name: Template name (e.g., "typescript/account.ts.j2")
            context: Dictionary of template variables

        Returns:
            Rendered text
        """
        return self.load_template(template_name).render(**context)

    def copy_default_templates(self, destination: Path) -> None:
        """
        Copy the packaged templates to a directory for customization.

        An existing destination is moved aside to ``<destination>.backup``.
        """
        if not self.default_templates.exists():
            raise FileNotFoundError(f"Default templates not found at {self.default_templates}")

        destination = Path(destination)
        if destination.exists():
            backup_dir = destination.with_name(destination.name + ".backup")
            if backup_dir.exists():
                shutil.rmtree(backup_dir)
            shutil.move(str(destination), str(backup_dir))

        shutil.copytree(str(self.default_templates), str(destination))
