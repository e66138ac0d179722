"""
Templating Context

Responsibilities:
- Loads per-locale term tables (section titles, labels, options, months)
- Escapes user text for LaTeX and HTML
- Parses Markdown summaries and generates LaTeX or HTML from them
- Computes the render-ready view of a resume for one layout
- Loads and caches the Jinja2 entry templates of every engine

Owns: Translations, escaping, summary markup, computed views, templates
Never: Picks a renderer or writes files
"""

from yamlresume.contexts.templating.escaping import escape_html, escape_latex, escaper_for
from yamlresume.contexts.templating.exceptions import LocaleDataError, TemplateRenderError
from yamlresume.contexts.templating.markup import (
    HtmlCodeGenerator,
    LatexCodeGenerator,
    MarkdownParser,
    Node,
)
from yamlresume.contexts.templating.preprocess import ComputedResume, compute_view
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.contexts.templating.translations import TermTable, supported_locales, terms_for

__all__ = [
    # Translations
    "TermTable",
    "terms_for",
    "supported_locales",
    # Escaping
    "escape_latex",
    "escape_html",
    "escaper_for",
    # Summary markup
    "MarkdownParser",
    "LatexCodeGenerator",
    "HtmlCodeGenerator",
    "Node",
    # Computed view
    "ComputedResume",
    "compute_view",
    # Templates
    "TemplateRegistry",
    "TemplateRenderError",
    "LocaleDataError",
]
