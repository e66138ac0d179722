"""
Renderer contract shared by the LaTeX, HTML and Markdown renderers.

A renderer is any object with one render_* method per section plus render().
Renderers do not inherit from a common base; each one holds a
SectionComposer, which renders entry templates for the view's engine and
wraps non-empty bodies in that engine's section template.
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from yamlresume.contexts.templating.preprocess import ComputedResume
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.utils.text import is_empty, join_non_empty

# Section id -> renderer method; basics renders as the summary section
SECTION_RENDERERS: Dict[str, str] = {
    "basics": "render_summary",
    "education": "render_education",
    "work": "render_work",
    "languages": "render_languages",
    "skills": "render_skills",
    "awards": "render_awards",
    "certificates": "render_certificates",
    "publications": "render_publications",
    "references": "render_references",
    "projects": "render_projects",
    "interests": "render_interests",
    "volunteer": "render_volunteer",
}


@runtime_checkable
class Renderer(Protocol):
    """
    Capability interface of a resume renderer.

    Every section method returns "" when its section has no data.
    """

    view: ComputedResume

    def render_preamble(self) -> str: ...

    def render_basics(self) -> str: ...

    def render_summary(self) -> str: ...

    def render_location(self) -> str: ...

    def render_profiles(self) -> str: ...

    def render_education(self) -> str: ...

    def render_work(self) -> str: ...

    def render_languages(self) -> str: ...

    def render_skills(self) -> str: ...

    def render_awards(self) -> str: ...

    def render_certificates(self) -> str: ...

    def render_publications(self) -> str: ...

    def render_references(self) -> str: ...

    def render_projects(self) -> str: ...

    def render_interests(self) -> str: ...

    def render_volunteer(self) -> str: ...

    def render(self) -> str: ...


class SectionComposer:
    """
    Renders entries and sections of one computed view through the registry.

    Every template receives the view's term table, content and section names
    besides its own variables.
    """

    def __init__(self, view: ComputedResume, registry: Optional[TemplateRegistry] = None):
        self.view = view
        self.engine = view.engine
        self.registry = registry or TemplateRegistry()

    def context(self, **extra) -> dict:
        context = {
            "terms": self.view.terms,
            "content": self.view.content,
            "section_names": self.view.section_names,
            "layout": self.view.layout,
        }
        context.update(extra)
        return context

    def entry(self, template: str, **extra) -> str:
        """Render one template of the view's engine."""
        return self.registry.render(self.engine, template, **self.context(**extra))

    def entries(self, section_id: str, separator: str = "\n\n", **extra) -> str:
        """Render every item of a list section with the template named after it."""
        return join_non_empty(
            (self.entry(section_id, item=item, **extra) for item in self.view.section(section_id)),
            separator,
        )

    def section(self, section_id: str, body: str, title: Optional[str] = None) -> str:
        """Wrap a body in the section template, or return "" for an empty body."""
        if is_empty(body):
            return ""
        return self.entry(
            "section",
            section_id=section_id,
            title=title if title is not None else self.view.section_names[section_id],
            body=body,
        )

    def list_section(self, section_id: str, separator: str = "\n\n", **extra) -> str:
        if is_empty(self.view.section(section_id)):
            return ""
        return self.section(section_id, self.entries(section_id, separator=separator, **extra))


def render_ordered_sections(renderer: Renderer, view: Optional[ComputedResume] = None) -> str:
    """
    Render the view's sections in order, dropping blank ones.

    Args:
        renderer: Any object implementing the Renderer interface
        view: View whose section order applies (defaults to renderer.view)

    Returns:
        Non-blank sections joined by one blank line
    """
    view = view or renderer.view
    rendered = (getattr(renderer, SECTION_RENDERERS[section])() for section in view.order)
    return join_non_empty(rendered, "\n\n")
