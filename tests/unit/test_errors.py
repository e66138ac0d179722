"""Unit tests for the error taxonomy."""

from pathlib import Path

import pytest

from yamlresume.utils.errors import ERROR_TYPES, YAMLResumeError


@pytest.mark.unit
def test_message_substitution():
    """Test that placeholders are filled from keyword arguments."""
    error = YAMLResumeError("INVALID_EXTNAME", extname="txt")

    assert error.code == "INVALID_EXTNAME"
    assert error.errno == 0x04
    assert error.message == "Invalid file extension: txt. Supported formats are: yaml, yml, json."
    assert str(error) == error.message


@pytest.mark.unit
def test_position():
    """Test optional source positions."""
    assert not YAMLResumeError("LATEX_NOT_FOUND").has_position

    error = YAMLResumeError("INVALID_YAML", line=3, column=7, error="bad indent")

    assert error.has_position
    assert (error.line, error.column) == (3, 7)
    assert error.message == "Invalid YAML format: bad indent"


@pytest.mark.unit
def test_unknown_code():
    """Test that unknown codes are rejected."""
    with pytest.raises(KeyError):
        YAMLResumeError("NOT_A_CODE")


@pytest.mark.unit
def test_errno_ranges():
    """Test that codes are grouped by range."""
    assert ERROR_TYPES["FILE_NOT_FOUND"][0] == 0x00
    assert ERROR_TYPES["INVALID_JSON"][0] == 0x21
    assert ERROR_TYPES["LAYOUT_NOT_FOUND"][0] == 0x32
    assert ERROR_TYPES["LATEX_NOT_FOUND"][0] == 0x40
    assert len({errno for errno, _ in ERROR_TYPES.values()}) == len(ERROR_TYPES)


@pytest.mark.unit
def test_every_code_is_raised():
    """Test that each error code is raised by some module of the package."""
    package = Path(__file__).resolve().parents[2] / "yamlresume"
    sources = "\n".join(
        path.read_text(encoding="utf-8")
        for path in package.rglob("*.py")
        if path.name != "errors.py"
    )

    for code in ERROR_TYPES:
        assert f'"{code}"' in sources, code
