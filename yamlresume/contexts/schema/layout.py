"""
Layout schemas.

A layout selects one output: the engine, the visual template, locale, page
geometry, typography, section ordering/aliasing and a few engine specific
advanced options. Each sub-object is its own field map so the layout object
is a straight composition of them.
"""

from typing import Any, Dict, List, Tuple

from yamlresume.contexts.schema import primitives as p
from yamlresume.contexts.schema.combinators import merge_fields, object_schema
from yamlresume.contexts.schema.options import (
    ENGINE_OPTIONS,
    FONT_SIZE_OPTIONS,
    FONTSPEC_NUMBERS_OPTIONS,
    LOCALE_LANGUAGE_OPTIONS,
    ORDERABLE_SECTION_IDS,
    PAPER_SIZE_OPTIONS,
    SECTION_IDS,
    TEMPLATE_OPTIONS,
    TEMPLATES_BY_ENGINE,
)

LOCALE_FIELDS = {
    "language": p.option(
        "locale language",
        LOCALE_LANGUAGE_OPTIONS,
        title="Language",
        description="The language used for section titles, terms and dates.",
    ).optional(),
}
Locale = object_schema("Locale", LOCALE_FIELDS, description="Locale settings.")

MARGIN_FIELDS = {
    position: p.margin_size(position).optional() for position in ("top", "bottom", "left", "right")
}
Margins = object_schema("Margins", MARGIN_FIELDS, description="Page margins.")

PAGE_FIELDS = {
    "showPageNumbers": p.boolean(
        "showPageNumbers", title="Show Page Numbers", description="Whether to number pages."
    ).optional(),
    "paperSize": p.option(
        "paper size", PAPER_SIZE_OPTIONS, title="Paper Size", description="The paper size."
    ).optional(),
}
Page = object_schema("Page", PAGE_FIELDS, description="Page settings.")

FONTSPEC_FIELDS = {
    "numbers": p.option(
        "fontspec numbers",
        FONTSPEC_NUMBERS_OPTIONS,
        title="Numbers",
        description="Number style, Auto picks Lining for CJK locales and OldStyle otherwise.",
    ).optional(),
}
Fontspec = object_schema("Fontspec", FONTSPEC_FIELDS)

LINKS_FIELDS = {
    "underline": p.boolean(
        "underline", title="Underline", description="Whether to underline links."
    ).optional(),
}
Links = object_schema("Links", LINKS_FIELDS)

TYPOGRAPHY_FIELDS = {
    "fontSize": p.option(
        "font size",
        FONT_SIZE_OPTIONS,
        title="Font Size",
        description="Base font size, pt values for LaTeX and px values for HTML.",
    ).optional(),
    "fontspec": p.object_of(
        "fontspec", Fontspec, title="Fontspec", description="LaTeX fontspec settings."
    ).optional(),
    "links": p.object_of("links", Links, title="Links", description="Link styling.").optional(),
}
Typography = object_schema("Typography", TYPOGRAPHY_FIELDS, description="Typography settings.")

ALIAS_FIELDS = {
    section: p.sized_string(
        f"{section} alias",
        2,
        128,
        title=f"{section.capitalize()} Alias",
        description=f"Custom title for the {section} section.",
        examples=[f"My {section.capitalize()}"],
    ).optional()
    for section in SECTION_IDS
}
Aliases = object_schema("Aliases", ALIAS_FIELDS, description="Custom section titles.")

SECTIONS_FIELDS = {
    "aliases": p.object_of(
        "aliases", Aliases, title="Aliases", description="Custom section titles."
    ).optional(),
    "order": p.list_of(
        "order",
        p.option("section", ORDERABLE_SECTION_IDS, title="Section"),
        title="Order",
        description="Custom section order, unlisted sections keep the default order.",
        examples=[["work", "education"]],
    ).optional(),
}
Sections = object_schema("Sections", SECTIONS_FIELDS, description="Section settings.")

ADVANCED_FIELDS = {
    "showIcons": p.boolean(
        "showIcons", title="Show Icons", description="Whether to show icons before contact items."
    ).optional(),
    "title": p.sized_string(
        "title",
        2,
        128,
        title="Title",
        description="HTML document title.",
        examples=["Andy Dufresne - Resume"],
    ).optional(),
    "footer": p.sized_string(
        "footer",
        2,
        512,
        title="Footer",
        description="HTML footer, may contain markup.",
        examples=["Made with YAMLResume"],
    ).optional(),
}
Advanced = object_schema("Advanced", ADVANCED_FIELDS, description="Advanced settings.")

ENGINE_SECTION = {
    "engine": p.option(
        "engine", ENGINE_OPTIONS, title="Engine", description="The renderer family."
    ).optional()
}
TEMPLATE_SECTION = {
    "template": p.option(
        "template", TEMPLATE_OPTIONS, title="Template", description="The visual template."
    ).optional()
}
LOCALE_SECTION = {
    "locale": p.object_of(
        "locale", Locale, title="Locale", description="Locale settings for this layout."
    ).optional()
}
MARGINS_SECTION = {
    "margins": p.object_of("margins", Margins, title="Margins", description="Page margins.").optional()
}
PAGE_SECTION = {
    "page": p.object_of("page", Page, title="Page", description="Page settings.").optional()
}
TYPOGRAPHY_SECTION = {
    "typography": p.object_of(
        "typography", Typography, title="Typography", description="Typography settings."
    ).optional()
}
SECTIONS_SECTION = {
    "sections": p.object_of(
        "sections", Sections, title="Sections", description="Section order and aliases."
    ).optional()
}
ADVANCED_SECTION = {
    "advanced": p.object_of(
        "advanced", Advanced, title="Advanced", description="Advanced settings."
    ).optional()
}

LAYOUT_FIELDS = merge_fields(
    ENGINE_SECTION,
    TEMPLATE_SECTION,
    LOCALE_SECTION,
    MARGINS_SECTION,
    PAGE_SECTION,
    TYPOGRAPHY_SECTION,
    SECTIONS_SECTION,
    ADVANCED_SECTION,
)
Layout = object_schema("Layout", LAYOUT_FIELDS, description="One output configuration.")


def template_violations(layout: Dict[str, Any], path: Tuple) -> List[Tuple[Tuple, str]]:
    """
    Check that a layout's template belongs to its engine.

    Args:
        layout: Plain layout mapping (as parsed from source)
        path: Path of the layout in the document

    Returns:
        List of (path, message) violations, empty when consistent
    """
    if not isinstance(layout, dict):
        return []

    engine = layout.get("engine") or "latex"
    template = layout.get("template")
    if template is None or engine not in TEMPLATES_BY_ENGINE or template not in TEMPLATE_OPTIONS:
        # Unknown values are reported by the option rules themselves
        return []

    allowed = TEMPLATES_BY_ENGINE[engine]
    if template in allowed:
        return []

    if allowed:
        options = ", ".join(f'"{option}"' for option in allowed)
        message = (
            f"template option is invalid for engine {engine}, "
            f"it must be one of the following options: {options}"
        )
    else:
        message = f"template option is not supported for engine {engine}"

    return [(path + ("template",), message)]
