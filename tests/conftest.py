"""Shared fixtures: resume documents and the command line scripts."""

import importlib.util
from pathlib import Path

import pytest

from yamlresume.contexts.validation import load_resume, parse_source

FIXTURES_PATH = Path(__file__).parent / "fixtures"
SCRIPTS_PATH = Path(__file__).parent.parent / "scripts"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def full_resume_text() -> str:
    return (FIXTURES_PATH / "full_resume.yml").read_text(encoding="utf-8")


@pytest.fixture
def full_resume_data(full_resume_text) -> dict:
    """Full resume as a plain mapping, every section present."""
    return parse_source(full_resume_text, "yaml").value


@pytest.fixture
def full_resume(full_resume_text):
    """Full resume as a validated model."""
    return load_resume(full_resume_text, "yaml")


@pytest.fixture
def minimal_resume_data() -> dict:
    """Only the required fields: basics.name and one education entry."""
    text = (FIXTURES_PATH / "minimal_resume.json").read_text(encoding="utf-8")
    return parse_source(text, "json").value


@pytest.fixture
def with_layout():
    """Return a copy of a resume mapping with a single layout."""

    def build(data: dict, **layout) -> dict:
        document = dict(data)
        document.pop("layouts", None)
        document["layouts"] = [layout]
        return document

    return build


@pytest.fixture
def load_script():
    """Import a script from scripts/ by file name, returning its module."""

    def load(name: str):
        spec = importlib.util.spec_from_file_location(f"scripts_{name}", SCRIPTS_PATH / f"{name}.py")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return load
