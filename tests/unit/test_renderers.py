"""Unit tests for the LaTeX, HTML and Markdown renderers."""

import pytest

from yamlresume.contexts.rendering import (
    HtmlRenderer,
    MarkdownRenderer,
    ModerncvRenderer,
    Renderer,
    render_ordered_sections,
)
from yamlresume.contexts.rendering.latex import normalize_unit, style_from_template
from yamlresume.contexts.templating.preprocess import compute_view


def latex_view(data, with_layout, template="moderncv-banking", **layout):
    return compute_view(with_layout(data, engine="latex", template=template, **layout))


@pytest.mark.unit
@pytest.mark.parametrize("index, renderer_class", [(0, ModerncvRenderer), (1, HtmlRenderer), (2, MarkdownRenderer)])
def test_renderers_satisfy_interface(full_resume_data, index, renderer_class):
    """Test that every renderer implements the Renderer interface."""
    renderer = renderer_class(compute_view(full_resume_data, layout_index=index))

    assert isinstance(renderer, Renderer)


@pytest.mark.unit
def test_style_from_template():
    """Test moderncv style names derived from template names."""
    assert style_from_template("moderncv-casual") == "casual"
    assert style_from_template("moderncv-classic") == "classic"
    assert style_from_template(None) == "banking"


@pytest.mark.unit
def test_normalize_unit():
    """Test that whitespace inside lengths is removed."""
    assert normalize_unit("2.5 cm") == "2.5cm"
    assert normalize_unit("1cm") == "1cm"


@pytest.mark.unit
def test_latex_document_structure(full_resume_data):
    """Test the moderncv skeleton of a rendered document."""
    tex = ModerncvRenderer(compute_view(full_resume_data, layout_index=0)).render()

    assert tex.startswith("\\documentclass[a4paper, serif, 10pt]{moderncv}")
    assert "\\moderncvstyle{banking}" in tex
    assert "\\name{Andy Dufresne}{}" in tex
    assert "\\begin{document}" in tex
    assert tex.rstrip().endswith("\\end{document}")
    assert tex.endswith("\n")


@pytest.mark.unit
def test_latex_escapes_user_text(full_resume_data):
    """Test that special characters in summaries are escaped."""
    tex = ModerncvRenderer(compute_view(full_resume_data, layout_index=0)).render()

    assert r"R\&D budget 100\% on time" in tex


@pytest.mark.unit
def test_latex_header(full_resume_data):
    """Test address and profile links in the document header."""
    tex = ModerncvRenderer(compute_view(full_resume_data, layout_index=0)).render()

    assert "\\address{123 Main Street, Sacramento, California, United States, 95814}{}{}" in tex
    assert "\\extrainfo{" in tex
    assert "\\faGithub" in tex


@pytest.mark.unit
def test_banking_references_put_email_first(full_resume_data, with_layout):
    """Test that banking leads a reference with its email link."""
    tex = ModerncvRenderer(latex_view(full_resume_data, with_layout)).render_references()

    assert "\\cventry{\\emaillink[red@shawshank.example.com]{red@shawshank.example.com}}" in tex


@pytest.mark.unit
@pytest.mark.parametrize("template", ["moderncv-casual", "moderncv-classic"])
def test_other_styles_put_name_first(full_resume_data, with_layout, template):
    """Test that casual and classic lead a reference with its name."""
    renderer = ModerncvRenderer(latex_view(full_resume_data, with_layout, template))

    assert "\\cventry{Ellis Redding}" in renderer.render_references()
    assert f"\\moderncvstyle{{{renderer.style}}}" in renderer.render_preamble()


@pytest.mark.unit
def test_cjk_colon_override_only_for_banking(full_resume_data, with_layout):
    """Test the full-width colon redefinition for CJK banking documents."""
    locale = {"language": "zh-hans"}
    banking = ModerncvRenderer(latex_view(full_resume_data, with_layout, locale=locale))
    casual = ModerncvRenderer(
        latex_view(full_resume_data, with_layout, "moderncv-casual", locale=locale)
    )

    assert "\\renewcommand*{\\cvitem}" in banking.render_preamble()
    assert "\\renewcommand*{\\cvitem}" not in casual.render_preamble()
    assert "ctex" in casual.render_preamble()


@pytest.mark.unit
def test_latex_preamble_options(full_resume_data, with_layout):
    """Test margins, page numbers, babel and fontspec settings."""
    view = latex_view(
        full_resume_data,
        with_layout,
        margins={"top": "1 cm"},
        page={"showPageNumbers": True},
        locale={"language": "fr"},
    )

    preamble = ModerncvRenderer(view).render_preamble()

    assert "top=1cm, bottom=2.5cm, left=1.5cm, right=1.5cm" in preamble
    assert "\\nopagenumbers{}" not in preamble
    assert "\\usepackage[french]{babel}" in preamble
    assert "Numbers=OldStyle" in preamble
    assert "ctex" not in preamble


@pytest.mark.unit
def test_latex_entry_arguments(full_resume_data):
    """Test the six arguments of an education entry."""
    education = ModerncvRenderer(compute_view(full_resume_data, layout_index=0)).render_education()

    assert education.startswith("\\section{Education}")
    assert "\\cventry{Sep 2016–Jul 2020}" in education
    assert "{Bachelor, Computer Science, Score: 3.9/4.0}" in education
    assert "\\textbf{Courses}: Data Structures, Operating Systems" in education


@pytest.mark.unit
def test_empty_sections_are_omitted(minimal_resume_data, with_layout):
    """Test that sections without items render nothing."""
    view = compute_view(with_layout(minimal_resume_data, engine="latex"))
    renderer = ModerncvRenderer(view)

    assert renderer.render_work() == ""
    assert renderer.render_summary() == ""
    assert "\\section{Work}" not in renderer.render()
    assert "\\section{Education}" in renderer.render()


@pytest.mark.unit
def test_ordered_sections_follow_custom_order(full_resume_data, with_layout):
    """Test that a custom order moves sections to the front."""
    view = compute_view(
        with_layout(full_resume_data, engine="markdown", sections={"order": ["work", "education"]})
    )

    rendered = render_ordered_sections(MarkdownRenderer(view))

    assert rendered.startswith("## Work")
    assert rendered.index("## Education") < rendered.index("## Basics")


@pytest.mark.unit
def test_html_page(full_resume_data):
    """Test the standalone page structure."""
    page = HtmlRenderer(compute_view(full_resume_data, layout_index=1)).render()

    assert page.startswith("<!DOCTYPE html>")
    assert '<html lang="en">' in page
    assert "Andy Dufresne Resume" in page
    assert "--text-font-size: 16px;" in page
    assert 'data-section="summary"' in page
    assert page.index('data-section="education"') < page.index('data-section="work"')
    assert "yamlresume.dev" in page


@pytest.mark.unit
def test_html_escapes_user_text(full_resume_data):
    """Test that ampersands stay escaped after pretty-printing."""
    page = HtmlRenderer(compute_view(full_resume_data, layout_index=1)).render()

    assert "R&amp;D budget 100% on time" in page
    assert "<strong>" in page


@pytest.mark.unit
def test_html_advanced_options(full_resume_data, with_layout):
    """Test custom title, footer, icons and link underlining."""
    view = compute_view(
        with_layout(
            full_resume_data,
            engine="html",
            template="calm",
            typography={"links": {"underline": True}},
            advanced={"title": "My CV", "footer": "", "showIcons": False},
        )
    )
    renderer = HtmlRenderer(view)
    page = renderer.render()

    assert renderer.title() == "My CV"
    assert "<footer" not in page
    assert "📧" not in page
    assert '<body class="resume-underline-links">' in page


@pytest.mark.unit
def test_markdown_document(full_resume_data):
    """Test heading layout and raw summaries in Markdown."""
    md = MarkdownRenderer(compute_view(full_resume_data, layout_index=2)).render()

    assert md.startswith("# Andy Dufresne\n\nHeadline: Headed for the Pacific")
    assert "Location: 123 Main Street, Sacramento" in md
    assert "- GitHub: [@andydufresne](https://github.com/andydufresne)" in md
    assert "**strong foundation**" in md
    assert "R&D budget 100% on time" in md
    assert "- English: Native or Bilingual Proficiency, Keywords: TOEFL 110" in md
    assert md.endswith("\n")


@pytest.mark.unit
def test_markdown_localized_titles(full_resume_data, with_layout):
    """Test that section titles follow the locale."""
    view = compute_view(
        with_layout(full_resume_data, engine="markdown", locale={"language": "zh-hans"})
    )

    md = MarkdownRenderer(view).render()

    assert "## 教育背景" in md
    assert "## 工作经历" in md
