"""
Rendering Context

Responsibilities:
- Defines the renderer interface and the ordered section assembly
- Renders computed views as moderncv LaTeX, HTML or Markdown
- Selects the renderer for a layout's engine and template
- Builds output files from a resume file and checks for a LaTeX compiler

Owns: Renderers, renderer selection, build orchestration
Never: Validates documents or compiles LaTeX
"""

from yamlresume.contexts.rendering.base import (
    SECTION_RENDERERS,
    Renderer,
    SectionComposer,
    render_ordered_sections,
)
from yamlresume.contexts.rendering.build import BuildResult, build_resume
from yamlresume.contexts.rendering.compiler import (
    CompilerCheckResult,
    check_latex_compiler,
    require_latex_compiler,
)
from yamlresume.contexts.rendering.html import HtmlRenderer
from yamlresume.contexts.rendering.latex import STYLE_OVERRIDES, ModerncvRenderer
from yamlresume.contexts.rendering.markdown import MarkdownRenderer
from yamlresume.contexts.rendering.selection import get_resume_renderer, render_resume

__all__ = [
    # Renderer contract
    "Renderer",
    "SectionComposer",
    "SECTION_RENDERERS",
    "render_ordered_sections",
    # Renderers
    "ModerncvRenderer",
    "STYLE_OVERRIDES",
    "HtmlRenderer",
    "MarkdownRenderer",
    # Selection
    "get_resume_renderer",
    "render_resume",
    # Build and compiler check
    "build_resume",
    "BuildResult",
    "check_latex_compiler",
    "require_latex_compiler",
    "CompilerCheckResult",
]
