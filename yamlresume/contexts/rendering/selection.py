"""
Renderer selection.

Picks the renderer for one layout of a resume from the layout's engine and,
for engines with visual variants, its template. Unknown engines and
templates fail immediately.
"""

from typing import Optional

from yamlresume.contexts.rendering.base import Renderer
from yamlresume.contexts.rendering.html import HtmlRenderer
from yamlresume.contexts.rendering.latex import ModerncvRenderer, style_from_template
from yamlresume.contexts.rendering.markdown import MarkdownRenderer
from yamlresume.contexts.schema.options import TEMPLATES_BY_ENGINE
from yamlresume.contexts.templating.markup import SummaryParser
from yamlresume.contexts.templating.preprocess import (
    Resume,
    compute_view,
    resolve_layout,
    resume_to_dict,
)
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.utils.errors import YAMLResumeError


def check_layout(layout: dict) -> None:
    """
    Raise for an engine or template no renderer handles.

    Raises:
        YAMLResumeError: INVALID_ENGINE or INVALID_TEMPLATE
    """
    engine = layout.get("engine")
    if engine not in TEMPLATES_BY_ENGINE:
        raise YAMLResumeError("INVALID_ENGINE", engine=engine)

    templates = TEMPLATES_BY_ENGINE[engine]
    template = layout.get("template")
    if templates and template not in templates:
        raise YAMLResumeError("INVALID_TEMPLATE", template=template, engine=engine)


def get_resume_renderer(
    resume: Resume,
    layout_index: int = 0,
    summary_parser: Optional[SummaryParser] = None,
    locale: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
) -> Renderer:
    """
    Build the renderer for one layout of a resume.

    Args:
        resume: Validated Resume model or an equivalent mapping
        layout_index: Which layout to render
        summary_parser: Summary parser (defaults to MarkdownParser)
        locale: Locale override
        registry: Template registry shared by the renderer's templates

    Returns:
        ModerncvRenderer, HtmlRenderer or MarkdownRenderer

    Raises:
        YAMLResumeError: LAYOUT_NOT_FOUND, INVALID_ENGINE or INVALID_TEMPLATE
    """
    document = resume_to_dict(resume)
    check_layout(resolve_layout(document, layout_index))

    view = compute_view(
        document, layout_index=layout_index, locale=locale, summary_parser=summary_parser
    )

    if view.engine == "latex":
        return ModerncvRenderer(view, style=style_from_template(view.template), registry=registry)
    if view.engine == "html":
        return HtmlRenderer(view, registry=registry)
    return MarkdownRenderer(view, registry=registry)


def render_resume(
    resume: Resume,
    layout_index: int = 0,
    summary_parser: Optional[SummaryParser] = None,
    locale: Optional[str] = None,
) -> str:
    """Render one layout of a resume to text."""
    return get_resume_renderer(
        resume, layout_index=layout_index, summary_parser=summary_parser, locale=locale
    ).render()
