"""Unit tests for renderer selection."""

import pytest

from yamlresume.contexts.rendering import (
    HtmlRenderer,
    MarkdownRenderer,
    ModerncvRenderer,
    get_resume_renderer,
    render_resume,
)
from yamlresume.contexts.rendering.selection import check_layout
from yamlresume.utils.errors import YAMLResumeError


@pytest.mark.unit
@pytest.mark.parametrize(
    "index, renderer_class",
    [(0, ModerncvRenderer), (1, HtmlRenderer), (2, MarkdownRenderer)],
)
def test_renderer_per_engine(full_resume, index, renderer_class):
    """Test that each layout engine gets its renderer."""
    assert isinstance(get_resume_renderer(full_resume, layout_index=index), renderer_class)


@pytest.mark.unit
def test_latex_style_follows_template(full_resume_data, with_layout):
    """Test that the moderncv style comes from the template name."""
    document = with_layout(full_resume_data, engine="latex", template="moderncv-classic")

    assert get_resume_renderer(document).style == "classic"


@pytest.mark.unit
def test_unknown_engine(full_resume_data, with_layout):
    """Test that an unsupported engine is rejected."""
    with pytest.raises(YAMLResumeError) as excinfo:
        get_resume_renderer(with_layout(full_resume_data, engine="docx"))

    assert excinfo.value.code == "INVALID_ENGINE"


@pytest.mark.unit
def test_unknown_template(full_resume_data, with_layout):
    """Test that a template of another engine is rejected."""
    with pytest.raises(YAMLResumeError) as excinfo:
        get_resume_renderer(with_layout(full_resume_data, engine="latex", template="calm"))

    assert excinfo.value.code == "INVALID_TEMPLATE"
    assert "calm" in excinfo.value.message


@pytest.mark.unit
def test_markdown_accepts_no_template():
    """Test that markdown layouts need no template."""
    check_layout({"engine": "markdown"})


@pytest.mark.unit
def test_layout_not_found(full_resume):
    """Test that a missing layout index is rejected."""
    with pytest.raises(YAMLResumeError) as excinfo:
        get_resume_renderer(full_resume, layout_index=7)

    assert excinfo.value.code == "LAYOUT_NOT_FOUND"


@pytest.mark.unit
def test_render_resume_with_locale_override(full_resume):
    """Test rendering one layout with an explicit locale."""
    md = render_resume(full_resume, layout_index=2, locale="fr")

    assert md.startswith("# Andy Dufresne")
    assert "## Formation" in md
