"""
Error taxonomy for YAMLResume.

Every failure that is not a schema violation is raised as a YAMLResumeError.
Codes are grouped by errno range:

- 0x00: file system (missing source, unsupported extension, ...)
- 0x20: source format (YAML/JSON that cannot be parsed at all)
- 0x30: output configuration (unknown engine, template or layout index)
- 0x40: LaTeX tool chain (no compiler available)
"""

from typing import Dict, Optional, Tuple

ERROR_TYPES: Dict[str, Tuple[int, str]] = {
    "FILE_NOT_FOUND": (0x00, "Resume not found: {path}"),
    "FILE_READ_ERROR": (0x01, "Failed to read resume file: {path}"),
    "FILE_WRITE_ERROR": (0x02, "Failed to write file: {path}"),
    "INVALID_EXTNAME": (
        0x04,
        "Invalid file extension: {extname}. Supported formats are: yaml, yml, json.",
    ),
    "INVALID_YAML": (0x20, "Invalid YAML format: {error}"),
    "INVALID_JSON": (0x21, "Invalid JSON format: {error}"),
    "INVALID_ENGINE": (0x30, "Unknown layout engine: {engine}"),
    "INVALID_TEMPLATE": (0x31, 'Unknown template "{template}" for engine {engine}'),
    "LAYOUT_NOT_FOUND": (0x32, "Layout not found in resume layouts at index: {index}."),
    "LATEX_NOT_FOUND": (
        0x40,
        "LaTeX compiler not found. Please install either xelatex or tectonic",
    ),
}


class YAMLResumeError(Exception):
    """
    Exception raised for every non-validation failure.

    The message is built from the code's template by replacing each
    ``{key}`` placeholder with the matching keyword argument.

    Attributes:
        code: Error code name (key of ERROR_TYPES)
        errno: Numeric error identifier
        params: Values substituted into the message template
        line: 1-based source line, when the failure has a known location
        column: 1-based source column, when the failure has a known location
    """

    def __init__(
        self,
        code: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        **params: object,
    ):
        if code not in ERROR_TYPES:
            raise KeyError(f"Unknown error code: {code}")

        errno, template = ERROR_TYPES[code]

        self.code = code
        self.errno = errno
        self.params = params
        self.line = line
        self.column = column

        message = template
        for key, value in params.items():
            message = message.replace(f"{{{key}}}", str(value))
        self.message = message

        super().__init__(message)

    @property
    def has_position(self) -> bool:
        return self.line is not None and self.column is not None
