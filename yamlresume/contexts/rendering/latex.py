"""
LaTeX renderer for the moderncv document class.

One renderer serves the three moderncv styles. The styles share every
section macro; they differ in the moderncv style token and in a couple of
entries of STYLE_OVERRIDES:

- banking redefines \\cvitem and \\cvitemwithcomment so CJK locales get a
  full-width colon, and puts a reference's email before its name
- casual and classic keep moderncv's own commands and put the name first

Every section becomes a fixed-arity \\cventry or \\cvline call. Missing
values render as empty braces, so a macro never loses an argument.
"""

import re
from typing import Dict, NamedTuple, Optional

from yamlresume.contexts.rendering.base import SectionComposer, render_ordered_sections
from yamlresume.contexts.rendering.logger import log_render_result, log_render_start
from yamlresume.contexts.templating.preprocess import ComputedResume
from yamlresume.contexts.templating.registries import TemplateRegistry
from yamlresume.utils.text import join_non_empty

# babel options for locales that need their own hyphenation rules
BABEL_OPTIONS: Dict[str, str] = {
    "es": "spanish,es-lcroman",
    "fr": "french",
    "no": "norsk",
}


class StyleOverride(NamedTuple):
    """Per-style differences on top of the shared moderncv macros."""

    cjk_colon_override: bool = False
    email_first_references: bool = False


STYLE_OVERRIDES: Dict[str, StyleOverride] = {
    "banking": StyleOverride(cjk_colon_override=True, email_first_references=True),
    "casual": StyleOverride(),
    "classic": StyleOverride(),
}

DEFAULT_STYLE = "banking"


def style_from_template(template: Optional[str]) -> str:
    """moderncv-casual -> casual; no template -> the default style."""
    if not template:
        return DEFAULT_STYLE
    return template.split("-", 1)[-1]


def normalize_unit(value: str) -> str:
    """Drop whitespace inside a LaTeX length ("2.5 cm" -> "2.5cm")."""
    return re.sub(r"\s+", "", value or "")


class ModerncvRenderer:
    """
    Render a computed view as a moderncv LaTeX document.

    Args:
        view: Computed view of a LaTeX layout
        style: banking, casual or classic (defaults to the layout's template)
        registry: Template registry (defaults to the bundled templates)

    Raises:
        KeyError: If style has no entry in STYLE_OVERRIDES
    """

    def __init__(
        self,
        view: ComputedResume,
        style: Optional[str] = None,
        registry: Optional[TemplateRegistry] = None,
    ):
        self.view = view
        self.style = style or style_from_template(view.template)
        self.overrides = STYLE_OVERRIDES[self.style]
        self.sections = SectionComposer(view, registry)

    @property
    def content(self) -> dict:
        return self.view.content

    def render_preamble(self) -> str:
        layout = self.view.layout
        margins = layout["margins"]
        page = layout["page"]
        typography = layout["typography"]

        return self.sections.entry(
            "preamble",
            paper_size=page["paperSize"],
            font_size=typography["fontSize"],
            style=self.style,
            cjk_colon_override=self.overrides.cjk_colon_override and self.view.is_cjk,
            colon=self.view.terms.colon,
            margins={side: normalize_unit(margins[side]) for side in ("top", "bottom", "left", "right")},
            show_page_numbers=page["showPageNumbers"],
            babel=BABEL_OPTIONS.get(self.view.locale, ""),
            numbers=typography["fontspec"]["numbers"],
            is_cjk=self.view.is_cjk,
        )

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
        return self.sections.entry("profiles", urls=self.content["computed"]["urls"])

    def render_education(self) -> str:
        return self.sections.list_section("education")

    def render_work(self) -> str:
        return self.sections.list_section("work")

    def render_languages(self) -> str:
        return self.sections.list_section("languages", separator="\n")

    def render_skills(self) -> str:
        return self.sections.list_section("skills", separator="\n")

    def render_awards(self) -> str:
        return self.sections.list_section("awards")

    def render_certificates(self) -> str:
        return self.sections.list_section("certificates")

    def render_publications(self) -> str:
        return self.sections.list_section("publications")

    def render_references(self) -> str:
        return self.sections.list_section(
            "references", email_first=self.overrides.email_first_references
        )

    def render_projects(self) -> str:
        return self.sections.list_section("projects")

    def render_interests(self) -> str:
        return self.sections.list_section("interests", separator="\n")

    def render_volunteer(self) -> str:
        return self.sections.list_section("volunteer")

    def render(self) -> str:
        """Render the complete .tex document."""
        log_render_start("latex", self.view.template, self.view.layout_index)

        header = join_non_empty(
            [
                self.render_preamble(),
                self.render_basics(),
                self.render_location(),
                self.render_profiles(),
            ],
            "\n\n",
        )
        sections = render_ordered_sections(self)
        document = self.sections.entry("document", header=header, sections=sections)

        log_render_result("latex", len(document))
        return document + "\n"
