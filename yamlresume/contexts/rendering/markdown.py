"""
Markdown renderer.

One heading per section. Summaries are already Markdown and pass through
unchanged; list-like sections (languages, skills, interests) and the short
credential sections (awards, certificates) keep their items on consecutive
lines.
"""

from typing import Optional

from yamlresume.contexts.rendering.base import SectionComposer, render_ordered_sections
from yamlresume.contexts.rendering.logger import log_render_result, log_render_start
from yamlresume.contexts.templating.preprocess import ComputedResume
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.utils.text import join_non_empty


class MarkdownRenderer:
    """Render a computed view as a Markdown document."""

    def __init__(self, view: ComputedResume, registry: Optional[TemplateRegistry] = None):
        self.view = view
        self.sections = SectionComposer(view, registry)

    @property
    def content(self) -> dict:
        return self.view.content

    def render_preamble(self) -> str:
        # Markdown has no document preamble
        return ""

    def render_basics(self) -> str:
        return self.sections.entry("basics", basics=self.content["basics"])

    def render_summary(self) -> str:
        summary = self.content["basics"]["computed"]["summary"]
        if not summary:
            return ""
        return self.sections.section("basics", self.sections.entry("summary", summary=summary))

    def render_location(self) -> str:
        return self.sections.entry("location", location=self.content["location"])

    def render_profiles(self) -> str:
        return self.sections.entry("profiles", profiles=self.content["profiles"])

    def render_education(self) -> str:
        return self.sections.list_section("education")

    def render_work(self) -> str:
        return self.sections.list_section("work")

    def render_languages(self) -> str:
        return self.sections.list_section("languages", separator="\n")

    def render_skills(self) -> str:
        return self.sections.list_section("skills", separator="\n")

    def render_awards(self) -> str:
        return self.sections.list_section("awards", separator="\n")

    def render_certificates(self) -> str:
        return self.sections.list_section("certificates", separator="\n")

    def render_publications(self) -> str:
        return self.sections.list_section("publications")

    def render_references(self) -> str:
        return self.sections.list_section("references")

    def render_projects(self) -> str:
        return self.sections.list_section("projects")

    def render_interests(self) -> str:
        return self.sections.list_section("interests", separator="\n")

    def render_volunteer(self) -> str:
        return self.sections.list_section("volunteer")

    def render(self) -> str:
        log_render_start("markdown", self.view.template, self.view.layout_index)

        sections = render_ordered_sections(self)
        document = join_non_empty(
            [
                self.render_basics(),
                self.render_location(),
                self.render_profiles(),
                sections,
            ],
            "\n\n",
        )

        log_render_result("markdown", len(document))
        return document + "\n"
