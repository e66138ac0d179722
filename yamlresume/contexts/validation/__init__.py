"""
Validation Context

Responsibilities:
- Parses YAML/JSON source into a plain value plus a path -> position table
- Runs the document schema and collects every violation
- Locates violations in the source and formats them for display

Owns: Source parsing, positional errors, validation reports
Never: Renders output or changes the document
"""

from yamlresume.contexts.validation.report import format_positional_error, format_report
from yamlresume.contexts.validation.source_map import (
    ParsedSource,
    Position,
    detect_format,
    parse_source,
    read_source,
)
from yamlresume.contexts.validation.validator import (
    PositionalError,
    ValidationReport,
    load_resume,
    validate,
    validate_source,
)

__all__ = [
    # Parsing
    "ParsedSource",
    "Position",
    "detect_format",
    "parse_source",
    "read_source",
    # Validation
    "PositionalError",
    "ValidationReport",
    "load_resume",
    "validate",
    "validate_source",
    # Display
    "format_positional_error",
    "format_report",
]
