"""
Schema Context

Responsibilities:
- Declares every permitted field, its type, bounds and messages
- Composes section and layout schemas into the document schema
- Exports the document schema as JSON Schema

Owns: Field rules, option tables, section/layout/document schemas
Never: Reads files or knows about source positions
"""

from yamlresume.contexts.schema.combinators import (
    SchemaCompositionError,
    merge_fields,
    object_schema,
)
from yamlresume.contexts.schema.document import (
    Resume,
    document_violations,
    export_json_schema,
)
from yamlresume.contexts.schema.primitives import Rule

__all__ = [
    # Combinators
    "merge_fields",
    "object_schema",
    "SchemaCompositionError",
    # Document schema
    "Resume",
    "document_violations",
    "export_json_schema",
    "Rule",
]
