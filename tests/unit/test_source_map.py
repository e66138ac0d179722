"""Unit tests for source parsing with positions."""

import json

import pytest

from yamlresume.contexts.validation.source_map import (
    DEFAULT_POSITION,
    Position,
    detect_format,
    parse_source,
    read_source,
)
from yamlresume.utils.errors import YAMLResumeError

YAML_SOURCE = """content:
  basics:
    name: Andy Dufresne
  education:
    - institution: University of Maine
      startDate: 2016-09-01
"""


@pytest.mark.unit
def test_yaml_positions_by_path():
    """Test that every value's start is recorded under its path."""
    parsed = parse_source(YAML_SOURCE, "yaml")

    assert parsed.position_of(("content", "basics", "name")) == Position(line=3, column=11)
    assert parsed.position_of(("content", "education", 0, "institution")) == Position(5, 20)


@pytest.mark.unit
def test_missing_path_defaults_to_first_line():
    """Test that an absent path falls back to line 1 column 1."""
    parsed = parse_source(YAML_SOURCE, "yaml")

    assert parsed.position_of(("content", "work", 0, "name")) == DEFAULT_POSITION


@pytest.mark.unit
def test_yaml_dates_stay_strings():
    """Test that YAML timestamps are not converted to dates."""
    parsed = parse_source(YAML_SOURCE, "yaml")

    assert parsed.value["content"]["education"][0]["startDate"] == "2016-09-01"


@pytest.mark.unit
def test_yaml_no_is_not_a_boolean():
    """Test that only true/false are booleans."""
    parsed = parse_source("locale:\n  language: no\nflag: true\n", "yaml")

    assert parsed.value["locale"]["language"] == "no"
    assert parsed.value["flag"] is True


@pytest.mark.unit
def test_json_positions():
    """Test that JSON values are located too."""
    parsed = parse_source('{\n  "content": {\n    "basics": {"name": "J"}\n  }\n}', "json")

    assert parsed.value["content"]["basics"]["name"] == "J"
    assert parsed.position_of(("content", "basics", "name")).line == 3


@pytest.mark.unit
def test_tab_indented_json_positions():
    """Test that tab indentation keeps JSON values locatable."""
    text = json.dumps({"content": {"basics": {"name": "J"}}}, indent="\t")
    parsed = parse_source(text, "json")

    line = text.splitlines()[3]
    assert parsed.position_of(("content", "basics", "name")) == Position(4, line.index('"J"') + 1)


@pytest.mark.unit
def test_shared_alias_positions():
    """Test that every path through a shared anchor is located."""
    parsed = parse_source("a: &x\n  k: v\nb: *x\nc: *x\n", "yaml")

    assert parsed.value["b"] == parsed.value["c"] == {"k": "v"}
    assert parsed.position_of(("a", "k")) == Position(2, 6)
    assert parsed.position_of(("b",)) == Position(2, 3)


@pytest.mark.unit
def test_recursive_alias_raises():
    """Test that a node aliased inside itself raises INVALID_YAML."""
    with pytest.raises(YAMLResumeError) as excinfo:
        parse_source("content: &a\n  basics: *a\n", "yaml")

    assert excinfo.value.code == "INVALID_YAML"
    assert "recursive alias" in excinfo.value.message


@pytest.mark.unit
def test_malformed_yaml_raises_with_position():
    """Test that unparseable YAML raises INVALID_YAML with a location."""
    with pytest.raises(YAMLResumeError) as excinfo:
        parse_source('content:\n  basics: [\n', "yaml")

    assert excinfo.value.code == "INVALID_YAML"
    assert excinfo.value.has_position


@pytest.mark.unit
def test_malformed_json_raises():
    """Test that unparseable JSON raises INVALID_JSON."""
    with pytest.raises(YAMLResumeError) as excinfo:
        parse_source('{"content": ', "json")

    assert excinfo.value.code == "INVALID_JSON"
    assert excinfo.value.line == 1


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected", [("a.yaml", "yaml"), ("a.YML", "yaml"), ("a.json", "json")]
)
def test_detect_format(name, expected):
    """Test format detection from supported extensions."""
    assert detect_format(name) == expected


@pytest.mark.unit
def test_detect_format_rejects_other_extensions():
    """Test that unsupported extensions raise INVALID_EXTNAME."""
    with pytest.raises(YAMLResumeError) as excinfo:
        detect_format("resume.toml")

    assert excinfo.value.code == "INVALID_EXTNAME"
    assert ".toml" in excinfo.value.message


@pytest.mark.unit
def test_read_source_missing_file(tmp_path):
    """Test that a missing file raises FILE_NOT_FOUND."""
    with pytest.raises(YAMLResumeError) as excinfo:
        read_source(tmp_path / "missing.yml")

    assert excinfo.value.code == "FILE_NOT_FOUND"


@pytest.mark.unit
def test_read_source_returns_text_and_format(fixtures_path):
    """Test reading a fixture file."""
    text, source_format = read_source(fixtures_path / "minimal_resume.json")

    assert source_format == "json"
    assert '"Andy Dufresne"' in text
