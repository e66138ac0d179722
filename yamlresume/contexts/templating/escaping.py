"""
Escapers for interpolated resume text.

An escaper is a plain callable str -> str applied to every user supplied
string before it lands in a template. LaTeX and HTML have one each; Markdown
text passes through unchanged.
"""

import html
import re
from typing import Callable, Dict

Escaper = Callable[[str], str]

LATEX_SPECIALS: Dict[str, str] = {
    "{": r"\{",
    "}": r"\}",
    "\\": r"\textbackslash{}",
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "^": r"\textasciicircum{}",
    "_": r"\_",
    "~": r"\textasciitilde{}",
}

_LATEX_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_SPECIALS))


def escape_latex(text: str) -> str:
    """
    Escape LaTeX special characters in a single pass.

    Example:
        >>> escape_latex("R&D at 100%")
        'R\\\\&D at 100\\\\%'
    """
    if not text:
        return text
    return _LATEX_PATTERN.sub(lambda match: LATEX_SPECIALS[match.group(0)], text)


def escape_html(text: str) -> str:
    """Escape &, <, >, and both quote characters."""
    if not text:
        return text
    return html.escape(text, quote=True)


def identity(text: str) -> str:
    return text


ESCAPERS: Dict[str, Escaper] = {
    "latex": escape_latex,
    "html": escape_html,
    "markdown": identity,
}


def escaper_for(engine: str) -> Escaper:
    """Escaper for a layout engine, identity for engines without one."""
    return ESCAPERS.get(engine, identity)
