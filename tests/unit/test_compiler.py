"""Unit tests for the LaTeX compiler check."""

from pathlib import Path

import pytest

from yamlresume.contexts.rendering import compiler
from yamlresume.contexts.rendering.compiler import check_latex_compiler, require_latex_compiler
from yamlresume.utils.errors import YAMLResumeError


def fake_which(available):
    def which(name):
        return f"/usr/bin/{name}" if name in available else None

    return which


@pytest.fixture(autouse=True)
def no_preferred_compiler(monkeypatch):
    monkeypatch.delenv("LATEX_COMPILER", raising=False)


@pytest.mark.unit
def test_xelatex_found_first(monkeypatch):
    """Test that xelatex wins when both compilers exist."""
    monkeypatch.setattr(compiler.shutil, "which", fake_which({"xelatex", "tectonic"}))

    result = check_latex_compiler()

    assert result.available
    assert result.compiler == "xelatex"
    assert result.path == Path("/usr/bin/xelatex")
    assert result.error is None


@pytest.mark.unit
def test_preferred_compiler_from_environment(monkeypatch):
    """Test that LATEX_COMPILER changes the lookup order."""
    monkeypatch.setattr(compiler.shutil, "which", fake_which({"xelatex", "tectonic"}))
    monkeypatch.setenv("LATEX_COMPILER", "tectonic")

    assert check_latex_compiler().compiler == "tectonic"


@pytest.mark.unit
def test_fallback_to_tectonic(monkeypatch):
    """Test that tectonic is used when xelatex is missing."""
    monkeypatch.setattr(compiler.shutil, "which", fake_which({"tectonic"}))

    assert check_latex_compiler(preferred="xelatex").compiler == "tectonic"


@pytest.mark.unit
def test_no_compiler(monkeypatch):
    """Test the result when no compiler is installed."""
    monkeypatch.setattr(compiler.shutil, "which", fake_which(set()))

    result = check_latex_compiler()

    assert not result.available
    assert result.compiler is None
    assert "xelatex or tectonic" in result.error


@pytest.mark.unit
def test_require_latex_compiler_raises(monkeypatch):
    """Test that requiring a missing compiler raises LATEX_NOT_FOUND."""
    monkeypatch.setattr(compiler.shutil, "which", fake_which(set()))

    with pytest.raises(YAMLResumeError) as excinfo:
        require_latex_compiler()

    assert excinfo.value.code == "LATEX_NOT_FOUND"
    assert excinfo.value.errno == 0x40
