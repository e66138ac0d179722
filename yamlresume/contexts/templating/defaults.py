"""
Default layout values.

Provides the per-engine defaults merged under every user layout by
preprocess.compute_view, and the layouts used when a document declares none.
"""

import copy
from typing import Any, Dict, List, Mapping

DEFAULT_LOCALE_LANGUAGE = "en"

DEFAULT_TOP_BOTTOM_MARGIN = "2.5cm"
DEFAULT_LEFT_RIGHT_MARGIN = "1.5cm"

DEFAULT_LATEX_LAYOUT: Dict[str, Any] = {
    "engine": "latex",
    "template": "moderncv-banking",
    "margins": {
        "top": DEFAULT_TOP_BOTTOM_MARGIN,
        "bottom": DEFAULT_TOP_BOTTOM_MARGIN,
        "left": DEFAULT_LEFT_RIGHT_MARGIN,
        "right": DEFAULT_LEFT_RIGHT_MARGIN,
    },
    "page": {
        "showPageNumbers": False,
        "paperSize": "a4",
    },
    "typography": {
        "fontSize": "10pt",
        "fontspec": {"numbers": "Auto"},
        "links": {"underline": False},
    },
}

DEFAULT_HTML_LAYOUT: Dict[str, Any] = {
    "engine": "html",
    "template": "calm",
    "typography": {
        "fontSize": "16px",
        "links": {"underline": False},
    },
    "advanced": {
        "showIcons": True,
    },
}

DEFAULT_MARKDOWN_LAYOUT: Dict[str, Any] = {
    "engine": "markdown",
}

DEFAULT_LAYOUTS_BY_ENGINE: Dict[str, Dict[str, Any]] = {
    "latex": DEFAULT_LATEX_LAYOUT,
    "html": DEFAULT_HTML_LAYOUT,
    "markdown": DEFAULT_MARKDOWN_LAYOUT,
}

# Used when a document declares neither `layouts` nor `layout`
DEFAULT_RESUME_LAYOUTS = (DEFAULT_LATEX_LAYOUT, DEFAULT_MARKDOWN_LAYOUT)

DEFAULT_FOOTER = 'Generated by <a href="https://yamlresume.dev">YAMLResume</a>'


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge override into a copy of base.

    Nested mappings merge key by key; any other override value (lists
    included) replaces the base value. None values in override are ignored.

    Example:
        >>> deep_merge({"page": {"a": 1, "b": 2}}, {"page": {"b": 3}})
        {'page': {'a': 1, 'b': 3}}
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def default_layouts() -> List[Dict[str, Any]]:
    return [copy.deepcopy(layout) for layout in DEFAULT_RESUME_LAYOUTS]


def layout_with_defaults(layout: Mapping[str, Any]) -> Dict[str, Any]:
    """Fill a user layout with its engine's defaults (engine defaults to latex)."""
    engine = layout.get("engine") or "latex"
    defaults = DEFAULT_LAYOUTS_BY_ENGINE.get(engine, {"engine": engine})
    return deep_merge(defaults, layout)
