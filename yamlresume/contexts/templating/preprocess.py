"""
Computed view of a resume.

compute_view takes a validated resume and one of its layouts and returns a
ComputedResume: a normalized, escaped copy of the content in which every
section is present, every item field exists (absent values become "" or []),
and derived render-ready strings live under each item's `computed` key:

- education: courses, degreeAreaAndScore, startDate, endDate, dateRange
- work, projects, volunteer: startDate, endDate, dateRange, keywords
- awards, certificates: date; publications: releaseDate
- languages: language, fluency, keywords; skills: level, keywords
- interests: keywords; location: country, fullAddress
- every section with a summary: summary compiled to the engine's markup
- LaTeX only: basics/profiles url with FontAwesome icons
- content.computed: sectionNames (localized or aliased) and, for LaTeX, urls

The input resume is never mutated; a fresh view is built per call.
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel

from yamlresume.contexts.schema.options import CJK_LOCALES, SECTION_IDS, merge_order
from yamlresume.contexts.schema.sections import (
    AWARD_FIELDS,
    BASICS_FIELDS,
    CERTIFICATE_FIELDS,
    EDUCATION_FIELDS,
    INTEREST_FIELDS,
    LANGUAGE_FIELDS,
    LOCATION_FIELDS,
    PROFILE_FIELDS,
    PROJECT_FIELDS,
    PUBLICATION_FIELDS,
    REFERENCE_FIELDS,
    SKILL_FIELDS,
    VOLUNTEER_FIELDS,
    WORK_FIELDS,
)
from yamlresume.contexts.templating.defaults import (
    DEFAULT_LOCALE_LANGUAGE,
    default_layouts,
    layout_with_defaults,
)
from yamlresume.contexts.templating.escaping import Escaper, escaper_for
from yamlresume.contexts.templating.logger import log_view_computed
from yamlresume.contexts.templating.markup import (
    CodeGenerator,
    HtmlCodeGenerator,
    LatexCodeGenerator,
    MarkdownParser,
    SummaryParser,
)
from yamlresume.contexts.templating.translations import TermTable, terms_for
from yamlresume.utils.errors import YAMLResumeError
from yamlresume.utils.text import is_empty, join_non_empty, replace_blank_lines_with_percent

OBJECT_SECTIONS = {
    "basics": BASICS_FIELDS,
    "location": LOCATION_FIELDS,
}

LIST_SECTIONS = {
    "profiles": PROFILE_FIELDS,
    "education": EDUCATION_FIELDS,
    "work": WORK_FIELDS,
    "volunteer": VOLUNTEER_FIELDS,
    "awards": AWARD_FIELDS,
    "certificates": CERTIFICATE_FIELDS,
    "publications": PUBLICATION_FIELDS,
    "skills": SKILL_FIELDS,
    "languages": LANGUAGE_FIELDS,
    "interests": INTEREST_FIELDS,
    "references": REFERENCE_FIELDS,
    "projects": PROJECT_FIELDS,
}

LIST_FIELDS = ("courses", "keywords")

DATE_RANGE_SECTIONS = ("education", "projects", "volunteer", "work")
KEYWORD_SECTIONS = ("interests", "languages", "projects", "skills", "work")
SUMMARY_SECTIONS = (
    "awards",
    "education",
    "projects",
    "publications",
    "references",
    "volunteer",
    "work",
)

# moderncv \extrainfo separator, matching the spacing of moderncv's own footer
URL_SEPARATOR = " {} {} {} • {} {} {} \n"

FA_ICON_EXCEPTIONS = {
    "Stack Overflow": r"\faStackOverflow",
    "WeChat": r"\faWeixin",
}

Resume = Union[BaseModel, Mapping[str, Any]]


@dataclass(frozen=True)
class ComputedResume:
    """
    Render-ready view of one resume for one layout.

    Attributes:
        content: Normalized, escaped content with `computed` fields
        layout: Active layout merged with its engine defaults
        locale: Resolved locale language
        terms: Term table of that locale
        layout_index: Index of the active layout
    """

    content: Dict[str, Any]
    layout: Dict[str, Any]
    locale: str
    terms: TermTable
    layout_index: int = 0

    @property
    def engine(self) -> str:
        return self.layout["engine"]

    @property
    def template(self) -> Optional[str]:
        return self.layout.get("template")

    @property
    def is_cjk(self) -> bool:
        return self.locale in CJK_LOCALES

    @property
    def order(self) -> List[str]:
        """Sections to render: custom order first, then the default order."""
        custom = (self.layout.get("sections") or {}).get("order")
        return merge_order(custom)

    @property
    def section_names(self) -> Dict[str, str]:
        return self.content["computed"]["sectionNames"]

    def section(self, section_id: str) -> Any:
        return self.content[section_id]


def resume_to_dict(resume: Resume) -> Dict[str, Any]:
    """Plain deep copy of a resume given as a validated model or a mapping."""
    if isinstance(resume, BaseModel):
        return resume.model_dump(exclude_none=True)
    return copy.deepcopy(dict(resume))


def resolve_layouts(document: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """The document's layouts: `layouts`, else `[layout]`, else the defaults."""
    layouts = document.get("layouts")
    if layouts:
        return list(layouts)

    layout = document.get("layout")
    if layout:
        return [layout]

    return default_layouts()


def resolve_layout(document: Mapping[str, Any], layout_index: int = 0) -> Dict[str, Any]:
    """
    Pick a layout by index and fill in its engine defaults.

    Raises:
        YAMLResumeError: LAYOUT_NOT_FOUND when the index is out of range
    """
    layouts = resolve_layouts(document)
    if layout_index < 0 or layout_index >= len(layouts):
        raise YAMLResumeError("LAYOUT_NOT_FOUND", index=layout_index)

    return layout_with_defaults(layouts[layout_index])


def resolve_locale(
    document: Mapping[str, Any], layout: Mapping[str, Any], locale: Optional[str] = None
) -> str:
    """Explicit locale, else the layout's, else the document's, else English."""
    if locale:
        return locale

    for source in (layout, document):
        language = (source.get("locale") or {}).get("language")
        if language:
            return language

    return DEFAULT_LOCALE_LANGUAGE


# Normalization


def normalize_content(content: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Make every section and item field present.

    basics and location become objects, every other section a list; absent
    item fields become "" (or [] for courses and keywords).
    """
    normalized: Dict[str, Any] = {}

    for section, fields in OBJECT_SECTIONS.items():
        value = dict(content.get(section) or {})
        for key in fields:
            if value.get(key) is None:
                value[key] = ""
        value["computed"] = {}
        normalized[section] = value

    for section, fields in LIST_SECTIONS.items():
        items = []
        for raw in content.get(section) or []:
            item = dict(raw or {})
            for key in fields:
                if item.get(key) is None:
                    item[key] = [] if key in LIST_FIELDS else ""
            item["computed"] = {}
            items.append(item)
        normalized[section] = items

    normalized["computed"] = {}
    return normalized


def _escape_value(value: Any, escaper: Escaper) -> Any:
    if isinstance(value, str):
        return escaper(value)
    if isinstance(value, list):
        return [escaper(item) if isinstance(item, str) else item for item in value]
    return value


def _escape_entry(entry: Dict[str, Any], escaper: Escaper) -> None:
    for key, value in entry.items():
        # summaries are escaped by the code generator, text node by text node
        if key in ("summary", "computed"):
            continue
        entry[key] = _escape_value(value, escaper)


def escape_content(content: Dict[str, Any], escaper: Escaper) -> None:
    for section in OBJECT_SECTIONS:
        _escape_entry(content[section], escaper)
    for section in LIST_SECTIONS:
        for item in content[section]:
            _escape_entry(item, escaper)


# Derived fields


def compute_education(content: Dict[str, Any], terms: TermTable) -> None:
    for item in content["education"]:
        item["computed"]["courses"] = terms.separator.join(item["courses"])

        score = ""
        if not is_empty(item["score"]):
            score = f"{terms.term('score')}{terms.colon}{item['score']}"

        item["computed"]["degreeAreaAndScore"] = join_non_empty(
            [terms.option("degrees", item["degree"]), item["area"], score], terms.comma
        )


def compute_dates(content: Dict[str, Any], terms: TermTable) -> None:
    for section in DATE_RANGE_SECTIONS:
        for item in content[section]:
            item["computed"]["startDate"] = terms.localize_date(item["startDate"])
            item["computed"]["endDate"] = terms.localize_date(item["endDate"])
            item["computed"]["dateRange"] = terms.date_range(item["startDate"], item["endDate"])

    for section in ("awards", "certificates"):
        for item in content[section]:
            item["computed"]["date"] = terms.localize_date(item["date"])

    for item in content["publications"]:
        item["computed"]["releaseDate"] = terms.localize_date(item["releaseDate"])


def compute_keywords(content: Dict[str, Any], terms: TermTable) -> None:
    for section in KEYWORD_SECTIONS:
        for item in content[section]:
            item["computed"]["keywords"] = terms.separator.join(item["keywords"])


def compute_options(content: Dict[str, Any], terms: TermTable) -> None:
    """Translated language, fluency and skill level."""
    for item in content["languages"]:
        item["computed"]["language"] = terms.option("languages", item["language"])
        item["computed"]["fluency"] = terms.option("fluencies", item["fluency"])

    for item in content["skills"]:
        item["computed"]["level"] = terms.option("levels", item["level"])


def compute_location(content: Dict[str, Any], terms: TermTable) -> None:
    """
    Translated country and full address.

    Western locales go from specific to generic (address, city, region,
    country, postal code); CJK locales from generic to specific.
    """
    location = content["location"]
    country = terms.option("countries", location["country"])

    if terms.is_cjk:
        parts = [country, location["region"], location["city"], location["address"]]
    else:
        parts = [location["address"], location["city"], location["region"], country]
    parts.append(location["postalCode"])

    location["computed"]["country"] = country
    location["computed"]["fullAddress"] = join_non_empty(parts, terms.comma)


def fa_icon(network: str) -> str:
    """FontAwesome 5 command for a network, e.g. GitHub -> \\faGithub."""
    if network in FA_ICON_EXCEPTIONS:
        return FA_ICON_EXCEPTIONS[network]
    return "\\fa" + network.capitalize()


def compute_latex_links(content: Dict[str, Any]) -> None:
    """Icon-prefixed \\href links for the moderncv header."""
    basics = content["basics"]
    basics["computed"]["url"] = ""
    if not is_empty(basics["url"]):
        basics["computed"]["url"] = f"{{\\small \\faLink}}\\ \\href{{{basics['url']}}}{{{basics['url']}}}"

    for item in content["profiles"]:
        item["computed"]["url"] = ""
        if not is_empty(item["network"]) and not is_empty(item["username"]):
            item["computed"]["url"] = (
                f"{{\\small {fa_icon(item['network'])}}}\\ "
                f"\\href{{{item['url']}}}{{@{item['username']}}}"
            )

    links = [basics["computed"]["url"]] + [item["computed"]["url"] for item in content["profiles"]]
    content["computed"]["urls"] = join_non_empty(links, URL_SEPARATOR)


def compute_summaries(
    content: Dict[str, Any],
    engine: str,
    layout: Mapping[str, Any],
    parser: SummaryParser,
    escaper: Escaper,
) -> None:
    """
    Compile each summary to the engine's markup.

    Markdown keeps the summary as written. LaTeX summaries have their blank
    lines turned into `%` lines so they can sit inside an entry macro.
    """
    entries = [content["basics"]] + [
        item for section in SUMMARY_SECTIONS for item in content[section]
    ]

    generator: Optional[CodeGenerator] = None
    if engine == "latex":
        underline = ((layout.get("typography") or {}).get("links") or {}).get("underline", False)
        generator = LatexCodeGenerator(escaper=escaper, underline_links=bool(underline))
    elif engine == "html":
        generator = HtmlCodeGenerator(escaper=escaper)

    for entry in entries:
        summary = entry["summary"]
        if generator is None or is_empty(summary):
            entry["computed"]["summary"] = summary if generator is None else ""
            continue

        compiled = generator.generate(parser.parse(summary)).strip()
        if engine == "latex":
            compiled = replace_blank_lines_with_percent(compiled)
        entry["computed"]["summary"] = compiled


def compute_section_names(
    content: Dict[str, Any], layout: Mapping[str, Any], terms: TermTable, escaper: Escaper
) -> None:
    """Section titles: layout alias when given, else the localized name."""
    aliases = (layout.get("sections") or {}).get("aliases") or {}
    content["computed"]["sectionNames"] = {
        section: escaper(aliases[section]) if aliases.get(section) else terms.section(section)
        for section in SECTION_IDS
    }


def resolve_fontspec_numbers(layout: Dict[str, Any], locale: str) -> None:
    fontspec = (layout.get("typography") or {}).get("fontspec")
    if fontspec and fontspec.get("numbers") == "Auto":
        fontspec["numbers"] = "Lining" if locale in CJK_LOCALES else "OldStyle"


def compute_view(
    resume: Resume,
    layout_index: int = 0,
    locale: Optional[str] = None,
    summary_parser: Optional[SummaryParser] = None,
    escaper: Optional[Escaper] = None,
) -> ComputedResume:
    """
    Build the computed view of a resume for one layout.

    Args:
        resume: Validated Resume model or an equivalent mapping
        layout_index: Which layout to use
        locale: Locale override (defaults to the layout's, then the document's)
        summary_parser: Summary parser (defaults to MarkdownParser)
        escaper: Text escaper (defaults to the engine's escaper)

    Returns:
        ComputedResume for that layout

    Raises:
        YAMLResumeError: LAYOUT_NOT_FOUND for an index out of range
    """
    document = resume_to_dict(resume)
    layout = resolve_layout(document, layout_index)
    engine = layout["engine"]
    terms = terms_for(resolve_locale(document, layout, locale))
    language = terms.locale
    escaper = escaper or escaper_for(engine)
    parser = summary_parser or MarkdownParser()

    content = normalize_content(document.get("content") or {})
    escape_content(content, escaper)

    compute_education(content, terms)
    compute_dates(content, terms)
    compute_keywords(content, terms)
    compute_options(content, terms)
    compute_location(content, terms)
    if engine == "latex":
        compute_latex_links(content)
    compute_summaries(content, engine, layout, parser, escaper)
    compute_section_names(content, layout, terms, escaper)
    resolve_fontspec_numbers(layout, language)

    view = ComputedResume(
        content=content,
        layout=layout,
        locale=language,
        terms=terms,
        layout_index=layout_index,
    )
    log_view_computed(engine, language, len(view.order))
    return view
