"""
Source parsing with position tracking.

parse_source returns two things side by side: the plain value (dicts, lists,
strings) that validation runs against, and a position table mapping every
path in the document to the 1-based line/column where its value starts.
Validation never inspects syntax nodes; it only looks positions up by path.

YAML is read with YAML 1.2 style scalars: dates stay strings and only
true/false are booleans (so `language: no` is the Norwegian locale, not
False).
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from yamlresume.utils.errors import YAMLResumeError

PathKey = Tuple[Union[str, int], ...]

SUPPORTED_FORMATS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}

BOOL_TAG = "tag:yaml.org,2002:bool"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class SourceLoader(yaml.SafeLoader):
    """SafeLoader without timestamps and with true/false as the only booleans."""

    pass


SourceLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (BOOL_TAG, TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
SourceLoader.add_implicit_resolver(
    BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")
)


@dataclass(frozen=True)
class Position:
    line: int
    column: int


DEFAULT_POSITION = Position(line=1, column=1)


@dataclass
class ParsedSource:
    """
    A parsed resume source.

    Attributes:
        value: Plain Python value of the document
        positions: Path -> start position of the value at that path
        format: "yaml" or "json"
    """

    value: Any
    positions: Dict[PathKey, Position] = field(default_factory=dict)
    format: str = "yaml"

    def position_of(self, path: PathKey) -> Position:
        """Position of the value at path, or line 1 column 1 if absent."""
        return self.positions.get(tuple(path), DEFAULT_POSITION)


def detect_format(path: Union[str, Path]) -> str:
    """
    Infer the source format from a file extension.

    Raises:
        YAMLResumeError: INVALID_EXTNAME for anything but .yaml, .yml, .json
    """
    extname = Path(path).suffix.lower()
    if extname not in SUPPORTED_FORMATS:
        raise YAMLResumeError("INVALID_EXTNAME", extname=extname or "(none)")
    return SUPPORTED_FORMATS[extname]


def collect_positions(node: yaml.Node, path: PathKey = ()) -> Dict[PathKey, Position]:
    """
    Walk a composed YAML node tree and record where each path's value starts.

    A node shared through an alias is descended into once; later references
    only record their own start.

    Raises:
        YAMLResumeError: INVALID_YAML when an alias refers to one of its own
            enclosing nodes (a document that would contain itself)
    """
    positions: Dict[PathKey, Position] = {}
    _walk(node, path, positions, ancestors=set(), seen=set())
    return positions


def _walk(node, path, positions, ancestors, seen) -> None:
    mark = node.start_mark
    positions[path] = Position(line=mark.line + 1, column=mark.column + 1)

    if not isinstance(node, (yaml.MappingNode, yaml.SequenceNode)):
        return
    if id(node) in ancestors:
        raise YAMLResumeError(
            "INVALID_YAML", line=mark.line + 1, column=mark.column + 1, error="recursive alias"
        )
    if id(node) in seen:
        return
    seen.add(id(node))

    ancestors.add(id(node))
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            _walk(value_node, path + (key_node.value,), positions, ancestors, seen)
    else:
        for index, item_node in enumerate(node.value):
            _walk(item_node, path + (index,), positions, ancestors, seen)
    ancestors.discard(id(node))


def _parse_yaml(text: str) -> ParsedSource:
    loader = SourceLoader(text)
    try:
        node = loader.get_single_node()
        positions = collect_positions(node) if node is not None else {}
        value = loader.construct_document(node) if node is not None else None
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark or e.context_mark
        raise YAMLResumeError(
            "INVALID_YAML",
            line=mark.line + 1 if mark else None,
            column=mark.column + 1 if mark else None,
            error=str(e.problem or e),
        ) from e
    except yaml.YAMLError as e:
        raise YAMLResumeError("INVALID_YAML", error=str(e)) from e
    finally:
        loader.dispose()

    return ParsedSource(value=value, positions=positions, format="yaml")


def _parse_json(text: str) -> ParsedSource:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise YAMLResumeError("INVALID_JSON", line=e.lineno, column=e.colno, error=e.msg) from e

    # JSON is YAML flow syntax, so the YAML composer can usually locate values.
    # When it cannot (e.g. "\/" escapes), errors fall back to line 1 column 1.
    # Tabs are JSON whitespace but not YAML indentation; a space keeps every column.
    positions: Dict[PathKey, Position] = {}
    try:
        node = yaml.compose(text.replace("\t", " "), Loader=SourceLoader)
    except yaml.YAMLError:
        node = None
    if node is not None:
        positions = collect_positions(node)

    return ParsedSource(value=value, positions=positions, format="json")


def parse_source(text: str, source_format: str = "yaml") -> ParsedSource:
    """
    Parse resume source text into a plain value plus a position table.

    Args:
        text: Source text
        source_format: "yaml" or "json"

    Returns:
        ParsedSource

    Raises:
        YAMLResumeError: INVALID_YAML / INVALID_JSON when the text cannot be
            parsed at all (line/column set when the parser reports one)
    """
    if source_format == "json":
        return _parse_json(text)
    if source_format == "yaml":
        return _parse_yaml(text)
    raise ValueError(f"Unsupported source format: {source_format}")


def read_source(path: Union[str, Path]) -> Tuple[str, str]:
    """
    Read a resume file and detect its format.

    Returns:
        Tuple of (text, format)

    Raises:
        YAMLResumeError: FILE_NOT_FOUND, FILE_READ_ERROR or INVALID_EXTNAME
    """
    path = Path(path)
    source_format = detect_format(path)

    if not path.exists():
        raise YAMLResumeError("FILE_NOT_FOUND", path=path)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise YAMLResumeError("FILE_READ_ERROR", path=path) from e

    return text, source_format
