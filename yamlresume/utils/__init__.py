"""
Shared utilities for YAMLResume.

Common functionality used across contexts:
- Logger setup
- Text joining helpers
- Error taxonomy
"""

from yamlresume.utils.errors import ERROR_TYPES, YAMLResumeError
from yamlresume.utils.text import is_empty, join_non_empty, show_if, show_if_not_empty

__all__ = [
    "ERROR_TYPES",
    "YAMLResumeError",
    "is_empty",
    "join_non_empty",
    "show_if",
    "show_if_not_empty",
]
