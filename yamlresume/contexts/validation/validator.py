"""
Validation engine.

Runs the document schema against a parsed source and reports every
violation, each annotated with the line/column of the offending value.
Validation collects all violations; it never stops at the first one.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ValidationError

from yamlresume.contexts.schema.document import Resume, document_violations
from yamlresume.contexts.validation.logger import log_validation_result, log_validation_start
from yamlresume.contexts.validation.source_map import ParsedSource, PathKey, parse_source
from yamlresume.utils.errors import YAMLResumeError


@dataclass(frozen=True)
class PositionalError:
    """
    One schema violation located in the source text.

    Attributes:
        message: Human readable message (e.g., "name is required.")
        line: 1-based line of the offending value
        column: 1-based column of the offending value
        path: Keys/indices leading to the value (e.g., ("content", "work", 0, "name"))
    """

    message: str
    line: int
    column: int
    path: PathKey

    @property
    def dotted_path(self) -> str:
        return ".".join(str(part) for part in self.path)


@dataclass
class ValidationReport:
    """
    Outcome of validating a source text.

    Exactly one of three shapes:
    - parse_error set: the text is not YAML/JSON at all, errors is empty
    - errors non-empty: the document violates the schema
    - both empty: the document is valid and resume holds the validated model
    """

    errors: List[PositionalError] = field(default_factory=list)
    parse_error: Optional[YAMLResumeError] = None
    resume: Optional[BaseModel] = None

    @property
    def ok(self) -> bool:
        return self.parse_error is None and not self.errors


def schema_violations(
    value: Any, schema: Type[BaseModel] = Resume
) -> Tuple[Optional[BaseModel], List[Tuple[PathKey, str]]]:
    """
    Validate a plain value, returning the model (if valid) and raw violations.

    Returns:
        Tuple of (validated model or None, list of (path, message))
    """
    violations: List[Tuple[PathKey, str]] = []
    model = None

    try:
        model = schema.model_validate(value)
    except ValidationError as e:
        violations.extend((tuple(error["loc"]), error["msg"]) for error in e.errors())

    if schema is Resume:
        violations.extend(document_violations(value))

    return (model if not violations else None), violations


def locate(parsed: ParsedSource, violations: List[Tuple[PathKey, str]]) -> List[PositionalError]:
    """Attach positions to raw violations and sort them by line, then column."""
    errors = []
    for path, message in violations:
        position = parsed.position_of(path)
        errors.append(
            PositionalError(message=message, line=position.line, column=position.column, path=path)
        )

    # sorted() is stable, so violations on one line keep schema order
    return sorted(errors, key=lambda error: (error.line, error.column))


def validate(
    source_text: str,
    schema: Type[BaseModel] = Resume,
    source_format: str = "yaml",
) -> List[PositionalError]:
    """
    Validate resume source text against a schema.

    Args:
        source_text: YAML or JSON text
        schema: Document schema model
        source_format: "yaml" or "json"

    Returns:
        Every violation, sorted by line (empty list when valid)

    Raises:
        YAMLResumeError: INVALID_YAML / INVALID_JSON when the text cannot be
            parsed; this is never folded into the returned violations
    """
    parsed = parse_source(source_text, source_format)
    _, violations = schema_violations(parsed.value, schema)
    return locate(parsed, violations)


def validate_source(
    source_text: str,
    source_format: str = "yaml",
    source_name: str = "<string>",
    schema: Type[BaseModel] = Resume,
) -> ValidationReport:
    """
    Validate resume source text and never raise for bad input.

    Args:
        source_text: YAML or JSON text
        source_format: "yaml" or "json"
        source_name: Name used in log messages
        schema: Document schema model

    Returns:
        ValidationReport (see class docstring for its three shapes)
    """
    log_validation_start(source_name, source_format)

    try:
        parsed = parse_source(source_text, source_format)
    except YAMLResumeError as e:
        report = ValidationReport(parse_error=e)
        log_validation_result(source_name, report)
        return report

    model, violations = schema_violations(parsed.value, schema)
    report = ValidationReport(errors=locate(parsed, violations), resume=model)
    log_validation_result(source_name, report)
    return report


def load_resume(source: Union[str, dict], source_format: str = "yaml") -> BaseModel:
    """
    Parse and validate a document, returning the validated model.

    Args:
        source: Source text or an already parsed mapping
        source_format: "yaml" or "json" (ignored for mappings)

    Returns:
        Validated Resume model

    Raises:
        YAMLResumeError: If the text cannot be parsed
        pydantic.ValidationError: If the document violates the schema
    """
    value = source if isinstance(source, dict) else parse_source(source, source_format).value
    return Resume.model_validate(value)
