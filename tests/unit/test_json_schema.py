"""Unit tests for the exported JSON Schema."""

import pytest

from yamlresume.contexts.schema import export_json_schema
from yamlresume.contexts.schema.sections import Content


def iter_properties(schema):
    for name, prop in schema["properties"].items():
        yield name, prop
    for model, definition in schema.get("$defs", {}).items():
        for name, prop in definition.get("properties", {}).items():
            yield f"{model}.{name}", prop


@pytest.fixture(scope="module")
def schema():
    return export_json_schema()


@pytest.mark.unit
def test_every_property_is_documented(schema):
    """Test that every exported property carries title, description and examples."""
    missing = [
        (name, key)
        for name, prop in iter_properties(schema)
        for key in ("title", "description", "examples")
        if not prop.get(key)
    ]

    assert missing == []


@pytest.mark.unit
def test_required_field_is_not_nullable(schema):
    """Test that a required field exports its plain type without a null branch or default."""
    name = schema["$defs"]["Basics"]["properties"]["name"]

    assert name["type"] == "string"
    assert name["minLength"] == 2
    assert "anyOf" not in name
    assert "default" not in name


@pytest.mark.unit
def test_required_object_is_not_nullable(schema):
    """Test that the required content object is a plain reference."""
    content = schema["properties"]["content"]

    assert content["$ref"].endswith("/Content")
    assert "anyOf" not in content
    assert "default" not in content


@pytest.mark.unit
def test_optional_field_stays_nullable(schema):
    """Test that optional fields keep their null branch."""
    email = schema["$defs"]["Basics"]["properties"]["email"]

    assert {"type": "null"} in email["anyOf"]
    assert email["title"].startswith("[optional] ")


@pytest.mark.unit
def test_required_list_items_are_not_nullable(schema):
    """Test that items of a list field cannot be null."""
    keywords = schema["$defs"]["WorkItem"]["properties"]["keywords"]
    array = next(branch for branch in keywords["anyOf"] if branch.get("type") == "array")

    assert array["items"]["type"] == "string"
    assert "anyOf" not in array["items"]


@pytest.mark.unit
def test_content_example_is_valid(schema):
    """Test that the derived content example passes content validation."""
    example = schema["$defs"]["Content"]["examples"][0]

    assert set(example) >= {"basics", "education"}
    Content.model_validate(example)
