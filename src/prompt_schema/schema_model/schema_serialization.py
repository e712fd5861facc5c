"""Schema object serialization into JSON Schema mappings."""

from __future__ import annotations

import json
from typing import Any

from .schema_fields import SCHEMA_FIELDS, FieldShape
from .schema_models import SchemaObject


def schema_to_mapping(schema: SchemaObject) -> dict[str, Any]:
    """Return the JSON Schema mapping for a schema object.

    Unset fields are omitted. A single kind is written as a string, several
    kinds as a list. `properties` is kept even when empty.
    """
    mapping: dict[str, Any] = {}
    for schema_field in SCHEMA_FIELDS:
        value = getattr(schema, schema_field.attribute)
        if value is None:
            continue
        if schema_field.attribute == "kind":
            if value:
                mapping[schema_field.json_name] = value[0] if len(value) == 1 else list(value)
            continue
        if schema_field.attribute == "required":
            if value:
                mapping[schema_field.json_name] = list(value)
            continue
        mapping[schema_field.json_name] = _serialize_value(value, schema_field.shape)
    return mapping


def schema_to_json(schema: SchemaObject | None, *, indent: int | None = 2) -> str:
    """Render a schema object (or the absent schema) as JSON text."""
    payload = None if schema is None else schema_to_mapping(schema)
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def _serialize_value(value: Any, shape: FieldShape) -> Any:
    if shape is FieldShape.SCHEMA:
        return schema_to_mapping(value)
    if shape is FieldShape.BOOLEAN_OR_SCHEMA:
        return value if isinstance(value, bool) else schema_to_mapping(value)
    if shape is FieldShape.SCHEMAS:
        return [schema_to_mapping(item) for item in value]
    if shape is FieldShape.SCHEMA_MAP:
        return {name: schema_to_mapping(child) for name, child in value.items()}
    if shape in (FieldShape.LITERALS, FieldShape.STRING_OR_STRINGS, FieldShape.STRINGS):
        return list(value)
    return value
