"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from yamlresume.contexts.templating.exceptions import TemplateRenderError
from yamlresume.contexts.templating.registries import TemplateRegistry


@pytest.fixture
def custom_templates(tmp_path) -> Path:
    """A template tree with one markdown template full of blank lines."""
    engine_dir = tmp_path / "markdown"
    engine_dir.mkdir()
    (engine_dir / "gaps.md.jinja").write_text(
        "\n\n<<< first >>>\n\n\n\n<%% if second is not blank %%><<< second >>><%% endif %%>\n\n\n<<< third >>>\n\n",
        encoding="utf-8",
    )
    return tmp_path


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
@pytest.mark.parametrize("engine", ["latex", "html", "markdown"])
def test_get_section_template(engine):
    """Test loading the section template of every engine."""
    registry = TemplateRegistry()
    template = registry.get_template(engine, "section")

    assert template is not None
    assert registry.is_cached(engine, "section")


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("latex", "work")
    template2 = registry.get_template("latex", "work")

    assert template1 is template2
    assert not registry.is_cached("html", "work")


@pytest.mark.unit
def test_clear_cache():
    """Test that clearing the cache forgets loaded templates."""
    registry = TemplateRegistry()
    registry.get_template("markdown", "work")

    registry.clear_cache()

    assert not registry.is_cached("markdown", "work")


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("latex", "nonexistent_section")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry()
    path = registry.get_template_path("latex", "work")

    assert isinstance(path, Path)
    assert path.name == "work.tex.jinja"
    assert path.parent.name == "latex"


@pytest.mark.unit
def test_render_section():
    """Test rendering with the custom delimiters."""
    registry = TemplateRegistry()

    rendered = registry.render("markdown", "section", title="Work", body="Line")

    assert rendered == "## Work\n\nLine"


@pytest.mark.unit
def test_render_collapses_blank_lines(custom_templates):
    """Test that output is stripped and blank line runs collapse to one."""
    registry = TemplateRegistry(templates_path=custom_templates)

    assert registry.render("markdown", "gaps", first="a", second="", third="c") == "a\n\nc"
    assert registry.render("markdown", "gaps", first="a", second="b", third="c") == "a\n\nb\n\nc"


@pytest.mark.unit
def test_render_undefined_variable():
    """Test that a missing variable raises TemplateRenderError."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError) as excinfo:
        registry.render("markdown", "section", title="Work")

    assert excinfo.value.template_name == "markdown/section"
    assert excinfo.value.original_error is not None


@pytest.mark.unit
def test_join_non_empty_global(custom_templates):
    """Test that templates can call join_non_empty."""
    (custom_templates / "markdown" / "joined.md.jinja").write_text(
        '<<< join_non_empty(parts, ", ") >>>', encoding="utf-8"
    )
    registry = TemplateRegistry(templates_path=custom_templates)

    assert registry.render("markdown", "joined", parts=["a", "", "b"]) == "a, b"


@pytest.mark.unit
def test_get_asset():
    """Test reading a stylesheet shipped with the html templates."""
    registry = TemplateRegistry()

    assert "--text-font-size" in registry.get_asset("html", "calm.css")

    with pytest.raises(FileNotFoundError):
        registry.get_asset("html", "missing.css")
