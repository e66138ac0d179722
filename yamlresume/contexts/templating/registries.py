"""
Templating Registries

Centralized registry for loading and caching the entry templates used by the
renderers.
"""

import os
from pathlib import Path
from typing import Any, Dict, Tuple

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)

from yamlresume.contexts.templating.exceptions import TemplateRenderError
from yamlresume.contexts.templating.logger import log_template_error
from yamlresume.utils.text import is_empty, join_non_empty, set_max_consecutive_blank_lines

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("YAMLRESUME_TEMPLATES_PATH", str(Path(__file__).parent / "templates"))
)

# File extension of the markup each engine's templates emit
TEMPLATE_EXTENSIONS = {
    "latex": "tex",
    "html": "html",
    "markdown": "md",
}


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 entry templates.

    Templates are stored in templates/{engine}/{name}.{ext}.jinja (ext is tex,
    html or md) and use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>

    Rendered output is stripped and runs of blank lines collapse to one, so a
    template can put each optional line in its own paragraph and let empty
    ones disappear.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Base path for engine template directories. Defaults
                           to YAMLRESUME_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[Tuple[str, str], Template] = {}

        # Create Jinja2 environment with custom delimiters to avoid LaTeX conflicts
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            # Preserve whitespace (important for LaTeX)
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
        )
        self.env.globals["join_non_empty"] = join_non_empty
        self.env.tests["blank"] = is_empty

    def get_template(self, engine: str, name: str) -> Template:
        """
        Get a template by engine and name, loading and caching it if necessary.

        Args:
            engine: Layout engine (latex, html or markdown)
            name: Template name (e.g., 'work', 'section')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        key = (engine, name)
        if key in self._cache:
            return self._cache[key]

        template_name = self.template_name(engine, name)

        try:
            template = self.env.get_template(template_name)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{engine}/{name}' at {self.templates_path / template_name}"
            ) from e

        self._cache[key] = template
        return template

    @staticmethod
    def template_name(engine: str, name: str) -> str:
        extension = TEMPLATE_EXTENSIONS.get(engine, engine)
        return f"{engine}/{name}.{extension}.jinja"

    def get_template_path(self, engine: str, name: str) -> Path:
        """
        Get the file path for a template.

        Args:
            engine: Layout engine
            name: Template name

        Returns:
            Path to template file
        """
        return self.templates_path / self.template_name(engine, name)

    def render(self, engine: str, name: str, **context: Any) -> str:
        """
        Render a template with the given context.

        Args:
            engine: Layout engine
            name: Template name
            **context: Template variables

        Returns:
            Rendered text, stripped, with at most one blank line in a row

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateRenderError: If rendering fails (e.g., undefined variable)
        """
        template = self.get_template(engine, name)

        try:
            rendered = template.render(**context)
        except TemplateError as e:
            log_template_error(f"{engine}/{name}", e)
            raise TemplateRenderError(
                f"Failed to render template '{engine}/{name}'",
                template_name=f"{engine}/{name}",
                template_path=self.get_template_path(engine, name),
                original_error=e,
            ) from e

        return set_max_consecutive_blank_lines(rendered, max_consecutive=1).strip()

    def get_asset(self, engine: str, filename: str) -> str:
        """
        Read a static asset (e.g., a stylesheet) shipped beside the templates.

        Raises:
            FileNotFoundError: If the asset doesn't exist
        """
        asset_path = self.templates_path / engine / filename

        if not asset_path.exists():
            raise FileNotFoundError(f"Asset not found for engine '{engine}' at {asset_path}")

        return asset_path.read_text(encoding="utf-8")

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, engine: str, name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            engine: Layout engine
            name: Template name

        Returns:
            True if cached, False otherwise
        """
        return (engine, name) in self._cache
