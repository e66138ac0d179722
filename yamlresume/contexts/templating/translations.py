"""
Translation term tables.

Each supported locale ships a YAML data file under locales/ holding its
punctuation, static terms ("Keywords", "Courses", ...), section titles,
translations of every option value (degrees, fluencies, levels, languages,
countries) and month names. terms_for(locale) loads a file once and returns
an immutable TermTable; unknown or empty locales fall back to English.
"""

from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from dateutil import parser as date_parser
from omegaconf import OmegaConf

from yamlresume.contexts.schema.options import CJK_LOCALES
from yamlresume.contexts.schema.primitives import YEAR_PATTERN
from yamlresume.contexts.templating.exceptions import LocaleDataError
from yamlresume.contexts.templating.logger import log_locale_fallback, log_terms_loaded

LOCALES_PATH = Path(__file__).parent / "locales"

DEFAULT_LOCALE = "en"

OPTION_CATEGORIES = ("degrees", "fluencies", "levels", "languages", "countries")

REQUIRED_TABLES = ("punctuations", "terms", "sections", "months", "date_format")

# Fills components a partial date leaves out ("Jul 2025" has no day)
DEFAULT_DATE = datetime(2000, 1, 1)

EN_DASH = "–"


def _frozen(mapping: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class TermTable:
    """
    Localized terms for one locale.

    Attributes:
        locale: Locale language code (e.g., "en", "zh-hans")
        punctuations: comma, colon and list separator
        terms: Static labels keyed by term id (courses, keywords, score)
        sections: Section titles keyed by section id
        options: Option translations keyed by category, then by option value
        months: Twelve abbreviated month names, January first
        date_format: Format string with {month} and {year} placeholders
    """

    locale: str
    punctuations: Mapping[str, str]
    terms: Mapping[str, str]
    sections: Mapping[str, str]
    options: Mapping[str, Mapping[str, str]]
    months: Tuple[str, ...]
    date_format: str

    @property
    def is_cjk(self) -> bool:
        return self.locale in CJK_LOCALES

    @property
    def comma(self) -> str:
        return self.punctuations["comma"]

    @property
    def colon(self) -> str:
        return self.punctuations["colon"]

    @property
    def separator(self) -> str:
        return self.punctuations["separator"]

    def term(self, name: str) -> str:
        return self.terms[name]

    def section(self, section_id: str) -> str:
        """Localized section title; unknown ids are returned unchanged."""
        return self.sections.get(section_id, section_id)

    def option(self, category: str, value: Optional[str]) -> str:
        """
        Translate an option value.

        Values without a translation (including every value in English) are
        returned as given; an absent value becomes the empty string.

        Example:
            >>> terms_for("zh-hans").option("degrees", "Bachelor")
            '学士'
        """
        if not value:
            return ""
        return self.options.get(category, {}).get(value, value)

    def localize_date(self, value: Optional[str]) -> str:
        """
        Render a date as abbreviated month plus year in this locale.

        Strings that cannot be parsed as a date, or that name no year, are
        returned unchanged.

        Example:
            >>> terms_for("en").localize_date("2016-09-01")
            'Sep 2016'
        """
        if not value:
            return ""
        if not YEAR_PATTERN.search(value):
            return value

        try:
            parsed = date_parser.parse(value, default=DEFAULT_DATE)
        except (ValueError, OverflowError):
            return value

        return self.date_format.format(month=self.months[parsed.month - 1], year=parsed.year)

    def date_range(self, start: Optional[str], end: Optional[str]) -> str:
        """
        Join localized start and end dates with an en dash.

        Only the start date is shown when there is no end date, and there is
        no range at all without a start date.
        """
        if not start:
            return ""

        if not end:
            return self.localize_date(start)

        return f"{self.localize_date(start)}{EN_DASH}{self.localize_date(end)}"


def _load_table(locale: str, path: Path) -> TermTable:
    data: Dict[str, Any] = OmegaConf.to_container(OmegaConf.load(path), resolve=True)

    missing = [key for key in REQUIRED_TABLES if key not in data]
    if missing:
        raise LocaleDataError(f"Locale file {path.name} is missing: {', '.join(missing)}")

    months = tuple(data["months"])
    if len(months) != 12:
        raise LocaleDataError(f"Locale file {path.name} must list 12 months, got {len(months)}")

    log_terms_loaded(locale, path)
    return TermTable(
        locale=locale,
        punctuations=_frozen(data["punctuations"]),
        terms=_frozen(data["terms"]),
        sections=_frozen(data["sections"]),
        options=MappingProxyType(
            {category: _frozen(data.get(category)) for category in OPTION_CATEGORIES}
        ),
        months=months,
        date_format=data["date_format"],
    )


def locale_path(locale: str) -> Path:
    return LOCALES_PATH / f"{locale}.yaml"


def supported_locales() -> Tuple[str, ...]:
    return tuple(sorted(path.stem for path in LOCALES_PATH.glob("*.yaml")))


@lru_cache(maxsize=None)
def terms_for(locale: Optional[str] = None) -> TermTable:
    """
    Look up the term table of a locale.

    Args:
        locale: Locale language code; None, empty or unsupported codes fall
            back to English

    Returns:
        Immutable TermTable, loaded once per locale
    """
    requested = locale or DEFAULT_LOCALE
    path = locale_path(requested)

    if not path.exists():
        log_locale_fallback(requested, DEFAULT_LOCALE)
        return terms_for(DEFAULT_LOCALE)

    return _load_table(requested, path)
