"""Declared JSON Schema field vocabulary for schema objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldShape(str, Enum):
    """Value shapes a serialized schema field can hold."""

    STRING = "a string"
    STRING_OR_STRINGS = "a string or an array of strings"
    STRINGS = "an array of strings"
    BOOLEAN = "a boolean"
    UNSIGNED_INTEGER = "a non-negative integer"
    NUMBER = "a number"
    OPAQUE = "any value"
    LITERALS = "an array of literal values"
    SCHEMA = "a schema mapping"
    BOOLEAN_OR_SCHEMA = "a boolean or a schema mapping"
    SCHEMAS = "an array of schema mappings"
    SCHEMA_MAP = "a mapping of names to schema mappings"


@dataclass(frozen=True)
class SchemaField:
    """One serialized field: its JSON name, model attribute and value shape."""

    json_name: str
    attribute: str
    shape: FieldShape


SCHEMA_FIELDS: tuple[SchemaField, ...] = (
    SchemaField("$id", "id", FieldShape.STRING),
    SchemaField("$schema", "schema", FieldShape.STRING),
    SchemaField("$ref", "ref", FieldShape.STRING),
    SchemaField("$comment", "comment", FieldShape.STRING),
    SchemaField("$defs", "definitions", FieldShape.SCHEMA_MAP),
    SchemaField("type", "kind", FieldShape.STRING_OR_STRINGS),
    SchemaField("title", "title", FieldShape.STRING),
    SchemaField("description", "description", FieldShape.STRING),
    SchemaField("format", "format", FieldShape.STRING),
    SchemaField("pattern", "pattern", FieldShape.STRING),
    SchemaField("contentEncoding", "content_encoding", FieldShape.STRING),
    SchemaField("contentMediaType", "content_media_type", FieldShape.STRING),
    SchemaField("default", "default", FieldShape.OPAQUE),
    SchemaField("const", "const", FieldShape.OPAQUE),
    SchemaField("enum", "enum", FieldShape.LITERALS),
    SchemaField("examples", "examples", FieldShape.LITERALS),
    SchemaField("minLength", "min_length", FieldShape.UNSIGNED_INTEGER),
    SchemaField("maxLength", "max_length", FieldShape.UNSIGNED_INTEGER),
    SchemaField("minItems", "min_items", FieldShape.UNSIGNED_INTEGER),
    SchemaField("maxItems", "max_items", FieldShape.UNSIGNED_INTEGER),
    SchemaField("minProperties", "min_properties", FieldShape.UNSIGNED_INTEGER),
    SchemaField("maxProperties", "max_properties", FieldShape.UNSIGNED_INTEGER),
    SchemaField("minimum", "minimum", FieldShape.NUMBER),
    SchemaField("maximum", "maximum", FieldShape.NUMBER),
    SchemaField("exclusiveMinimum", "exclusive_minimum", FieldShape.NUMBER),
    SchemaField("exclusiveMaximum", "exclusive_maximum", FieldShape.NUMBER),
    SchemaField("multipleOf", "multiple_of", FieldShape.NUMBER),
    SchemaField("uniqueItems", "unique_items", FieldShape.BOOLEAN),
    SchemaField("readOnly", "read_only", FieldShape.BOOLEAN),
    SchemaField("writeOnly", "write_only", FieldShape.BOOLEAN),
    SchemaField("deprecated", "deprecated", FieldShape.BOOLEAN),
    SchemaField("properties", "properties", FieldShape.SCHEMA_MAP),
    SchemaField("patternProperties", "pattern_properties", FieldShape.SCHEMA_MAP),
    SchemaField("required", "required", FieldShape.STRINGS),
    SchemaField("additionalProperties", "additional_properties", FieldShape.BOOLEAN_OR_SCHEMA),
    SchemaField("items", "items", FieldShape.SCHEMA),
    SchemaField("prefixItems", "prefix_items", FieldShape.SCHEMAS),
    SchemaField("allOf", "all_of", FieldShape.SCHEMAS),
    SchemaField("anyOf", "any_of", FieldShape.SCHEMAS),
    SchemaField("oneOf", "one_of", FieldShape.SCHEMAS),
    SchemaField("not", "not_", FieldShape.SCHEMA),
)

SCHEMA_FIELDS_BY_JSON_NAME: dict[str, SchemaField] = {
    schema_field.json_name: schema_field for schema_field in SCHEMA_FIELDS
}
