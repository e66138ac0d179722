"""Integration tests for building resume files."""

import shutil

import pytest
import yaml

from yamlresume.contexts.rendering import build_resume
from yamlresume.utils.errors import YAMLResumeError


@pytest.fixture
def source(tmp_path, fixtures_path):
    """The full resume copied into a scratch directory."""
    path = tmp_path / "resume.yml"
    shutil.copy(fixtures_path / "full_resume.yml", path)
    return path


@pytest.mark.integration
def test_build_writes_one_file_per_layout(source):
    """Test that every layout produces its own file beside the source."""
    result = build_resume(source, check_compiler=False)

    assert result.success
    assert [path.name for path in result.outputs] == ["resume.tex", "resume.html", "resume.md"]
    assert all(path.exists() for path in result.outputs)
    assert result.compiler is None
    assert (source.parent / "resume.tex").read_text(encoding="utf-8").startswith("\\documentclass")


@pytest.mark.integration
def test_build_into_output_dir(source, tmp_path):
    """Test writing outputs into a separate, created directory."""
    output_dir = tmp_path / "outs" / "resumes"

    result = build_resume(source, output_dir=output_dir, check_compiler=False)

    assert result.success
    assert all(path.parent == output_dir for path in result.outputs)


@pytest.mark.integration
def test_build_output_dir_from_environment(source, tmp_path, monkeypatch):
    """Test that YAMLRESUME_OUTPUT_DIR sets the default output directory."""
    output_dir = tmp_path / "configured"
    monkeypatch.setenv("YAMLRESUME_OUTPUT_DIR", str(output_dir))

    result = build_resume(source, check_compiler=False)

    assert result.outputs[0] == output_dir / "resume.tex"


@pytest.mark.integration
def test_second_layout_of_an_engine_gets_an_index(source):
    """Test that two LaTeX layouts do not overwrite each other."""
    document = yaml.safe_load(source.read_text(encoding="utf-8"))
    document["layouts"] = [
        {"engine": "latex", "template": "moderncv-banking"},
        {"engine": "latex", "template": "moderncv-classic"},
    ]
    source.write_text(yaml.safe_dump(document, allow_unicode=True), encoding="utf-8")

    result = build_resume(source, check_compiler=False)

    assert [path.name for path in result.outputs] == ["resume.tex", "resume-1.tex"]
    assert "\\moderncvstyle{classic}" in result.outputs[1].read_text(encoding="utf-8")


@pytest.mark.integration
def test_build_checks_compiler_for_latex(source, monkeypatch):
    """Test that a .tex output triggers the compiler check."""
    monkeypatch.setattr(shutil, "which", lambda name: None)

    result = build_resume(source)

    assert result.success
    assert result.compiler is not None
    assert not result.compiler.available


@pytest.mark.integration
def test_build_invalid_resume(tmp_path, fixtures_path):
    """Test that an invalid resume returns formatted errors and writes nothing."""
    source = tmp_path / "invalid.yml"
    shutil.copy(fixtures_path / "invalid_resume.yml", source)

    result = build_resume(source, check_compiler=False)

    assert not result.success
    assert len(result.errors) == 5
    assert result.outputs == []
    assert list(tmp_path.iterdir()) == [source]


@pytest.mark.integration
def test_build_missing_file(tmp_path):
    """Test that a missing source raises FILE_NOT_FOUND."""
    with pytest.raises(YAMLResumeError) as excinfo:
        build_resume(tmp_path / "missing.yml")

    assert excinfo.value.code == "FILE_NOT_FOUND"
