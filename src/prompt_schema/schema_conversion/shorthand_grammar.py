"""Picoschema shorthand grammar parser."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from prompt_schema.schema_model.schema_models import SchemaKind, SchemaObject

from .conversion_errors import (
    EnumNotArrayError,
    InvalidPicoschemaValueError,
    UnknownParentheticalTypeError,
    UnsupportedScalarTypeError,
)

SCALAR_TYPES: frozenset[str] = frozenset({"string", "boolean", "null", "number", "integer"})
ANY_TYPE = "any"
WILDCARD_DIRECTIVE = "*"


def parse_shorthand(value: Any) -> SchemaObject:
    """Parse one picoschema value into a schema object.

    Strings are scalar types with an optional description, lists are enums and
    mappings are objects whose keys may carry `?` and parenthetical directives.

    Raises:
      PicoschemaError: If the value or any nested value is not valid picoschema.
    """
    if isinstance(value, str):
        return _parse_scalar(value)
    if isinstance(value, (list, tuple)):
        return _parse_enum(value)
    if isinstance(value, Mapping):
        return _parse_object(value)
    raise InvalidPicoschemaValueError(value)


def _parse_scalar(value: str) -> SchemaObject:
    scalar_type, separator, description = value.partition(",")
    if scalar_type not in SCALAR_TYPES and scalar_type != ANY_TYPE:
        raise UnsupportedScalarTypeError(scalar_type)
    schema = SchemaObject()
    if scalar_type != ANY_TYPE:
        schema.kind = [scalar_type]
    if separator:
        schema.description = description.strip()
    return schema


def _parse_enum(values: list[Any] | tuple[Any, ...]) -> SchemaObject:
    return SchemaObject(enum=list(values))


def _parse_object(value: Mapping[Any, Any]) -> SchemaObject:
    properties: dict[str, SchemaObject] = {}
    schema = SchemaObject(
        kind=[SchemaKind.OBJECT.value],
        properties=properties,
        additional_properties=False,
    )
    for key, raw_property in value.items():
        if not isinstance(key, str):
            raise InvalidPicoschemaValueError(key)
        name, has_directive, directive = key.partition("(")
        is_optional = name.endswith("?")
        property_name = name[:-1] if is_optional else name

        child = parse_shorthand(raw_property)
        if is_optional and child.kind:
            child.add_kind(SchemaKind.NULL)

        if has_directive:
            directive = directive.removesuffix(")")
            directive_type, has_description, directive_description = directive.partition(",")
            if directive_type == WILDCARD_DIRECTIVE:
                if property_name:
                    raise UnknownParentheticalTypeError(directive_type, property_name)
                schema.additional_properties = child
                continue
            child = _apply_directive(directive_type, child, key, raw_property, is_optional)
            if has_description:
                child.description = directive_description.strip()

        if name and not is_optional:
            schema.required.append(property_name)
        properties[property_name] = child
    return schema


def _apply_directive(
    directive_type: str, child: SchemaObject, key: str, raw_property: Any, is_optional: bool
) -> SchemaObject:
    if directive_type == "array":
        return SchemaObject(kind=[SchemaKind.ARRAY.value], items=child)
    if directive_type == "object":
        return child
    if directive_type == "enum":
        if child.enum is None:
            raise EnumNotArrayError(key, raw_property)
        if is_optional:
            child.enum.append(None)
        return child
    raise UnknownParentheticalTypeError(directive_type)
