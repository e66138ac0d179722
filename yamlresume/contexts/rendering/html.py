"""
HTML renderer.

Builds a standalone page: head with generator meta tags and the inlined
reset and template stylesheets, a header with basics, location and profiles,
the ordered sections and an optional footer. The assembled page is
pretty-printed with BeautifulSoup so the output is stable and readable.
"""

from typing import Optional

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from yamlresume.contexts.rendering.base import SectionComposer, render_ordered_sections
from yamlresume.contexts.rendering.logger import log_render_result, log_render_start
from yamlresume.contexts.templating.defaults import DEFAULT_FOOTER
from yamlresume.contexts.templating.escaping import escape_html
from yamlresume.contexts.templating.preprocess import ComputedResume
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.utils.text import join_non_empty

RESET_STYLESHEET = "reset.css"
DEFAULT_TITLE = "YAMLResume"


def prettify(html: str) -> str:
    """Re-indent an HTML document with two spaces per level, keeping &, < and > escaped."""
    soup = BeautifulSoup(html, "html.parser")
    formatter = HTMLFormatter(entity_substitution=EntitySubstitution.substitute_xml, indent=2)
    return soup.prettify(formatter=formatter)


class HtmlRenderer:
    """
    Render a computed view as a standalone HTML page.

    Args:
        view: Computed view of an HTML layout
        registry: Template registry (defaults to the bundled templates)
    """

    def __init__(self, view: ComputedResume, registry: Optional[TemplateRegistry] = None):
        self.view = view
        self.sections = SectionComposer(view, registry)

    @property
    def content(self) -> dict:
        return self.view.content

    @property
    def advanced(self) -> dict:
        return self.view.layout.get("advanced") or {}

    @property
    def show_icons(self) -> bool:
        return bool(self.advanced.get("showIcons", True))

    def title(self) -> str:
        """advanced.title, else "<name> Resume", else the product name."""
        if self.advanced.get("title"):
            return escape_html(self.advanced["title"])
        name = self.content["basics"]["name"]
        return f"{name} Resume" if name else DEFAULT_TITLE

    def stylesheet(self) -> str:
        """Reset and template CSS plus the layout's font size."""
        registry = self.sections.registry
        typography = self.view.layout.get("typography") or {}
        font_size = typography.get("fontSize", "16px")

        return "\n\n".join(
            [
                registry.get_asset("html", RESET_STYLESHEET),
                registry.get_asset("html", f"{self.view.template}.css"),
                f":root {{\n  --text-font-size: {font_size};\n}}",
            ]
        )

    def render_preamble(self) -> str:
        return self.sections.entry("head", title=self.title(), styles=self.stylesheet())

    def render_basics(self) -> str:
        return self.sections.entry(
            "basics", basics=self.content["basics"], show_icons=self.show_icons
        )

    def render_summary(self) -> str:
        summary = self.content["basics"]["computed"]["summary"]
        if not summary:
            return ""
        return self.sections.section(
            "summary",
            self.sections.entry("summary", summary=summary),
            title=self.view.section_names["basics"],
        )

    def render_location(self) -> str:
        return self.sections.entry(
            "location", location=self.content["location"], show_icons=self.show_icons
        )

    def render_profiles(self) -> str:
        return self.sections.entry("profiles", profiles=self.content["profiles"])

    def render_education(self) -> str:
        return self.sections.list_section("education", separator="\n")

    def render_work(self) -> str:
        return self.sections.list_section("work", separator="\n")

    def render_languages(self) -> str:
        return self.sections.list_section("languages", separator="\n")

    def render_skills(self) -> str:
        return self.sections.list_section("skills", separator="\n")

    def render_awards(self) -> str:
        return self.sections.list_section("awards", separator="\n")

    def render_certificates(self) -> str:
        return self.sections.list_section("certificates", separator="\n")

    def render_publications(self) -> str:
        return self.sections.list_section("publications", separator="\n")

    def render_references(self) -> str:
        return self.sections.list_section("references", separator="\n")

    def render_projects(self) -> str:
        return self.sections.list_section("projects", separator="\n")

    def render_interests(self) -> str:
        return self.sections.list_section("interests", separator="\n")

    def render_volunteer(self) -> str:
        return self.sections.list_section("volunteer", separator="\n")

    def render_footer(self) -> str:
        """advanced.footer as given (HTML allowed), or the default footer."""
        return self.advanced.get("footer", DEFAULT_FOOTER) or ""

    def render(self) -> str:
        """Render the complete, pretty-printed HTML page."""
        log_render_start("html", self.view.template, self.view.layout_index)

        header = join_non_empty(
            [self.render_basics(), self.render_location(), self.render_profiles()], "\n"
        )
        sections = render_ordered_sections(self)
        underline = ((self.view.layout.get("typography") or {}).get("links") or {}).get(
            "underline", False
        )

        document = self.sections.entry(
            "document",
            lang=self.view.locale,
            head=self.render_preamble(),
            header=header,
            sections=sections,
            footer=self.render_footer(),
            underline_links=underline,
        )
        page = prettify(document)

        log_render_result("html", len(page))
        return page
