"""
Schema combinators.

Section schemas are declared as field maps (field name -> Rule). Maps are
merged with merge_fields, which refuses to let two maps declare the same
field, and turned into pydantic models with object_schema.
"""

from typing import Any, Dict, Mapping, Type

from pydantic import BaseModel, ConfigDict, create_model

from yamlresume.contexts.schema.primitives import Rule

FieldMap = Dict[str, Rule]


class SchemaCompositionError(ValueError):
    """Raised at import time when composed field maps declare the same field."""

    pass


def merge_fields(*field_maps: Mapping[str, Rule]) -> FieldMap:
    """
    Merge field maps into one, preserving declaration order.

    Args:
        *field_maps: Maps from field name to Rule

    Returns:
        A new merged field map

    Raises:
        SchemaCompositionError: If a field name appears in more than one map
    """
    merged: FieldMap = {}
    for field_map in field_maps:
        for key, rule in field_map.items():
            if key in merged:
                raise SchemaCompositionError(f"Field '{key}' is declared more than once")
            merged[key] = rule
    return merged


def object_schema(
    model_name: str,
    fields: Mapping[str, Rule],
    title: str = None,
    description: str = None,
) -> Type[BaseModel]:
    """
    Build a pydantic model from a field map.

    Unknown keys are ignored. Required fields are listed under "required" in
    the JSON Schema even though the model gives them a None default (the
    default lets the field's own rule report "... is required."). The object
    is exemplified by the first example of each field.

    Args:
        model_name: Name of the generated model class
        fields: Field map (see merge_fields)
        title: JSON Schema title for the object
        description: JSON Schema description for the object

    Returns:
        Generated model class
    """
    schema_extra: Dict[str, Any] = {}
    required = [key for key, rule in fields.items() if rule.required]
    if required:
        schema_extra["required"] = required
    if title:
        schema_extra["title"] = title
    if description:
        schema_extra["description"] = description
    example = {key: rule.examples[0] for key, rule in fields.items() if rule.examples}
    if example:
        schema_extra["examples"] = [example]

    config = ConfigDict(extra="ignore", json_schema_extra=schema_extra)
    definitions = {key: rule.field() for key, rule in fields.items()}

    return create_model(model_name, __config__=config, **definitions)
