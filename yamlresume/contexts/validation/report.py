"""Clang style formatting of validation results for terminal display."""

from typing import List

from yamlresume.contexts.validation.validator import PositionalError, ValidationReport
from yamlresume.utils.errors import YAMLResumeError


def _source_line(source_text: str, line: int) -> str:
    lines = source_text.splitlines()
    if 1 <= line <= len(lines):
        return lines[line - 1]
    return ""


def format_positional_error(file_path: str, source_text: str, error: PositionalError) -> str:
    """
    Format one violation as path:line:col, the source line and a caret.

    Example:
        resume.yml:4:11: warning: name should be 2 characters or more.
            name: J
                  ^
    """
    source_line = _source_line(source_text, error.line)
    caret = " " * (error.column - 1) + "^"
    return "\n".join(
        [
            f"{file_path}:{error.line}:{error.column}: warning: {error.message}",
            source_line,
            caret,
        ]
    )


def format_parse_error(file_path: str, source_text: str, error: YAMLResumeError) -> str:
    """Format a whole-file parse failure, with the source line when known."""
    if not error.has_position:
        return f"{file_path}: error: {error.message}"

    return format_positional_error(
        file_path,
        source_text,
        PositionalError(message=error.message, line=error.line, column=error.column, path=()),
    ).replace(": warning: ", ": error: ", 1)


def format_report(file_path: str, source_text: str, report: ValidationReport) -> List[str]:
    """Format every entry of a report, one block per violation."""
    if report.parse_error is not None:
        return [format_parse_error(file_path, source_text, report.parse_error)]

    return [format_positional_error(file_path, source_text, error) for error in report.errors]
