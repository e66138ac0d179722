"""Unit tests for clang style report formatting."""

import pytest

from yamlresume.contexts.validation import (
    PositionalError,
    ValidationReport,
    format_positional_error,
    format_report,
    validate_source,
)

SOURCE = "content:\n  basics:\n    name: J\n"


@pytest.mark.unit
def test_format_positional_error():
    """Test the header line, the source line and the caret."""
    error = PositionalError(
        message="name should be 2 characters or more.",
        line=3,
        column=11,
        path=("content", "basics", "name"),
    )

    lines = format_positional_error("resume.yml", SOURCE, error).split("\n")

    assert lines[0] == "resume.yml:3:11: warning: name should be 2 characters or more."
    assert lines[1] == "    name: J"
    assert lines[2] == " " * 10 + "^"


@pytest.mark.unit
def test_format_report_one_block_per_error():
    """Test that every violation gets its own block."""
    report = ValidationReport(
        errors=[
            PositionalError(message="a is required.", line=1, column=1, path=("a",)),
            PositionalError(message="b is required.", line=1, column=1, path=("b",)),
        ]
    )

    blocks = format_report("resume.yml", SOURCE, report)

    assert len(blocks) == 2
    assert "a is required." in blocks[0]


@pytest.mark.unit
def test_format_report_parse_error():
    """Test that parse failures are formatted as errors, not warnings."""
    source = "content:\n  basics: [\n"
    report = validate_source(source)

    blocks = format_report("resume.yml", source, report)

    assert len(blocks) == 1
    assert ": error: Invalid YAML format" in blocks[0]
