"""
Document schema.

The root object: required content, an optional document level locale and
the layouts. Layouts may be given as a list (`layouts`) or, for a single
output, as one `layout` object.
"""

from typing import Any, Callable, Dict, List, Tuple

from yamlresume import __version__
from yamlresume.contexts.schema import primitives as p
from yamlresume.contexts.schema.combinators import merge_fields, object_schema
from yamlresume.contexts.schema.layout import Layout, Locale, template_violations
from yamlresume.contexts.schema.sections import Content

SCHEMA_ID = "https://yamlresume.dev/schema.json"
SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_TITLE = "YAMLResume Schema"
SCHEMA_DESCRIPTION = "Schema of a YAMLResume document: resume content plus output layouts."

Violation = Tuple[Tuple, str]

CONTENT_SECTION = {
    "content": p.object_of("content", Content, title="Content", description="The resume content.")
}
LOCALE_SECTION = {
    "locale": p.object_of(
        "locale", Locale, title="Locale", description="Default locale for every layout."
    ).optional()
}
LAYOUTS_SECTION = {
    "layouts": p.list_of(
        "layouts",
        p.object_of("layout", Layout, title="Layout", description="One output configuration."),
        title="Layouts",
        description="Output configurations, one output per entry.",
    ).optional(),
    "layout": p.object_of(
        "layout", Layout, title="Layout", description="A single output configuration."
    ).optional(),
}

DOCUMENT_FIELDS = merge_fields(CONTENT_SECTION, LOCALE_SECTION, LAYOUTS_SECTION)

Resume = object_schema(
    "Resume", DOCUMENT_FIELDS, title=SCHEMA_TITLE, description=SCHEMA_DESCRIPTION
)


def check_layout_templates(document: Any) -> List[Violation]:
    """Every layout's template must belong to that layout's engine."""
    if not isinstance(document, dict):
        return []

    violations: List[Violation] = []
    layouts = document.get("layouts")
    if isinstance(layouts, list):
        for index, layout in enumerate(layouts):
            violations.extend(template_violations(layout, ("layouts", index)))

    violations.extend(template_violations(document.get("layout"), ("layout",)))
    return violations


# Cross-field checks run on the plain document after field validation
DOCUMENT_CHECKS: List[Callable[[Any], List[Violation]]] = [check_layout_templates]


def document_violations(document: Any) -> List[Violation]:
    violations: List[Violation] = []
    for check in DOCUMENT_CHECKS:
        violations.extend(check(document))
    return violations


def export_json_schema() -> Dict[str, Any]:
    """
    Export the document schema as a JSON Schema dictionary.

    Every field carries title, description and examples metadata; optional
    fields are titled "[optional] ...".

    Returns:
        JSON-serializable schema dictionary
    """
    schema = Resume.model_json_schema()
    return {
        "$schema": SCHEMA_DIALECT,
        "$id": SCHEMA_ID,
        "version": __version__,
        **schema,
        "title": SCHEMA_TITLE,
        "description": SCHEMA_DESCRIPTION,
    }
