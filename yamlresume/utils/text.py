"""Text composition helpers shared by the computed view and the renderers."""

import re
from typing import Any, Iterable


def is_empty(value: Any) -> bool:
    """
    Check whether a value counts as absent for rendering purposes.

    None, whitespace-only strings and empty collections are empty. Booleans
    and numbers never are.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def show_if(predicate: bool, content: str) -> str:
    """Return content when predicate holds, else the empty string."""
    return content if predicate else ""


def show_if_not_empty(value: Any, content: str) -> str:
    """Return content unless value is empty."""
    return show_if(not is_empty(value), content)


def join_non_empty(parts: Iterable[str], separator: str = "\n\n") -> str:
    """
    Join the non-blank parts with a separator.

    Example:
        >>> join_non_empty(["a", "", "  ", "b"], ", ")
        'a, b'
    """
    return separator.join(part for part in parts if not is_empty(part))


def replace_blank_lines_with_percent(content: str) -> str:
    """
    Replace each blank line with a lone LaTeX comment character.

    moderncv entry macros cannot take arguments containing paragraph breaks,
    a ``%`` line keeps the visual break without ending the argument.

    Example:
        >>> replace_blank_lines_with_percent("one\\n\\ntwo")
        'one\\n%\\ntwo'
    """
    if content == "\n":
        return ""
    return re.sub(r"^[ \t]*\n", "%\n", content, flags=re.MULTILINE)


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
    """
    if max_consecutive == 0:
        return re.sub(r"\n[ \t]*\n+", "\n", content)

    pattern = r"\n([ \t]*\n){" + str(max_consecutive + 1) + r",}"
    return re.sub(pattern, "\n" * (max_consecutive + 1), content)
