"""Unit tests for text escapers."""

import pytest

from yamlresume.contexts.templating.escaping import (
    escape_html,
    escape_latex,
    escaper_for,
    identity,
)


@pytest.mark.unit
def test_escape_latex_specials():
    """Test that every LaTeX special character is escaped."""
    assert escape_latex("R&D at 100%") == r"R\&D at 100\%"
    assert escape_latex("a_b #1 $5") == r"a\_b \#1 \$5"
    assert escape_latex("{x}") == r"\{x\}"


@pytest.mark.unit
def test_escape_latex_single_pass():
    """Test that replacements are not escaped again."""
    assert escape_latex("\\") == r"\textbackslash{}"
    assert escape_latex("~^") == r"\textasciitilde{}\textasciicircum{}"


@pytest.mark.unit
def test_escape_html():
    """Test HTML entity escaping, quotes included."""
    assert escape_html('<a href="x">&</a>') == "&lt;a href=&quot;x&quot;&gt;&amp;&lt;/a&gt;"
    assert escape_html("it's") == "it&#x27;s"


@pytest.mark.unit
def test_empty_text_passes_through():
    """Test that empty strings are returned as is."""
    assert escape_latex("") == ""
    assert escape_html("") == ""


@pytest.mark.unit
def test_escaper_for_engine():
    """Test escaper selection by engine."""
    assert escaper_for("latex") is escape_latex
    assert escaper_for("html") is escape_html
    assert escaper_for("markdown") is identity
    assert escaper_for("unknown") is identity
