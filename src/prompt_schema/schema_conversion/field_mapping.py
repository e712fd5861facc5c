"""Strict projection of JSON Schema mappings onto schema objects."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from prompt_schema.schema_model.schema_fields import SCHEMA_FIELDS_BY_JSON_NAME, FieldShape
from prompt_schema.schema_model.schema_models import SchemaObject

from .conversion_errors import FieldShapeError, UnrecognizedFieldNameError


def map_schema_fields(mapping: Mapping[str, Any], *, location: str = "") -> SchemaObject:
    """Build a schema object from a mapping keyed by JSON Schema field names.

    Args:
      mapping: Decoded JSON Schema document.
      location: Dotted path of the document inside its root, used in errors.

    Returns:
      The populated schema object.

    Raises:
      UnrecognizedFieldNameError: If a key is not a known JSON Schema field.
      FieldShapeError: If a value does not have the shape its field expects.
    """
    schema = SchemaObject()
    for key, value in mapping.items():
        schema_field = SCHEMA_FIELDS_BY_JSON_NAME.get(key) if isinstance(key, str) else None
        if schema_field is None:
            raise UnrecognizedFieldNameError(str(key), location)
        field_path = key if not location else f"{location}.{key}"
        converted = _SHAPE_CONVERTERS[schema_field.shape](value, field_path)
        if converted is not None:
            setattr(schema, schema_field.attribute, converted)
    return schema


def _require_list(value: Any, field_path: str, shape: FieldShape) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise FieldShapeError(field_path, value, shape.value)
    return list(value)


def _require_mapping(value: Any, field_path: str, shape: FieldShape) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise FieldShapeError(field_path, value, shape.value)
    return value


def _convert_string(value: Any, field_path: str) -> str:
    if not isinstance(value, str):
        raise FieldShapeError(field_path, value, FieldShape.STRING.value)
    return value


def _convert_string_or_strings(value: Any, field_path: str) -> list[str] | None:
    if isinstance(value, str):
        return [value] if value else None
    items = _require_list(value, field_path, FieldShape.STRING_OR_STRINGS)
    strings = []
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise FieldShapeError(f"{field_path}[{index}]", item, FieldShape.STRING.value)
        if item:
            strings.append(item)
    return strings or None


def _convert_strings(value: Any, field_path: str) -> list[str]:
    items = _require_list(value, field_path, FieldShape.STRINGS)
    for index, item in enumerate(items):
        if not isinstance(item, str):
            raise FieldShapeError(f"{field_path}[{index}]", item, FieldShape.STRING.value)
    return items


def _convert_boolean(value: Any, field_path: str) -> bool:
    if not isinstance(value, bool):
        raise FieldShapeError(field_path, value, FieldShape.BOOLEAN.value)
    return value


def _convert_unsigned_integer(value: Any, field_path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise FieldShapeError(field_path, value, FieldShape.UNSIGNED_INTEGER.value)
    return value


def _convert_number(value: Any, field_path: str) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FieldShapeError(field_path, value, FieldShape.NUMBER.value)
    return value


def _convert_opaque(value: Any, field_path: str) -> Any:  # pylint: disable=unused-argument
    return value


def _convert_literals(value: Any, field_path: str) -> list[Any]:
    return _require_list(value, field_path, FieldShape.LITERALS)


def _convert_schema(value: Any, field_path: str) -> SchemaObject:
    mapping = _require_mapping(value, field_path, FieldShape.SCHEMA)
    return map_schema_fields(mapping, location=field_path)


def _convert_boolean_or_schema(value: Any, field_path: str) -> bool | SchemaObject:
    if isinstance(value, bool):
        return value
    mapping = _require_mapping(value, field_path, FieldShape.BOOLEAN_OR_SCHEMA)
    return map_schema_fields(mapping, location=field_path)


def _convert_schemas(value: Any, field_path: str) -> list[SchemaObject]:
    items = _require_list(value, field_path, FieldShape.SCHEMAS)
    schemas = []
    for index, item in enumerate(items):
        item_path = f"{field_path}[{index}]"
        mapping = _require_mapping(item, item_path, FieldShape.SCHEMA)
        schemas.append(map_schema_fields(mapping, location=item_path))
    return schemas


def _convert_schema_map(value: Any, field_path: str) -> dict[str, SchemaObject]:
    mapping = _require_mapping(value, field_path, FieldShape.SCHEMA_MAP)
    schemas: dict[str, SchemaObject] = {}
    for name, child in mapping.items():
        child_path = f"{field_path}.{name}"
        child_mapping = _require_mapping(child, child_path, FieldShape.SCHEMA)
        schemas[str(name)] = map_schema_fields(child_mapping, location=child_path)
    return schemas


_SHAPE_CONVERTERS: dict[FieldShape, Callable[[Any, str], Any]] = {
    FieldShape.STRING: _convert_string,
    FieldShape.STRING_OR_STRINGS: _convert_string_or_strings,
    FieldShape.STRINGS: _convert_strings,
    FieldShape.BOOLEAN: _convert_boolean,
    FieldShape.UNSIGNED_INTEGER: _convert_unsigned_integer,
    FieldShape.NUMBER: _convert_number,
    FieldShape.OPAQUE: _convert_opaque,
    FieldShape.LITERALS: _convert_literals,
    FieldShape.SCHEMA: _convert_schema,
    FieldShape.BOOLEAN_OR_SCHEMA: _convert_boolean_or_schema,
    FieldShape.SCHEMAS: _convert_schemas,
    FieldShape.SCHEMA_MAP: _convert_schema_map,
}
