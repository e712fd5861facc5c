"""Picoschema to JSON Schema conversion for prompt templates."""

from .schema_conversion import PicoschemaError, convert_to_schema
from .schema_model import SchemaKind, SchemaObject, schema_to_json, schema_to_mapping

__all__ = [
    "PicoschemaError",
    "SchemaKind",
    "SchemaObject",
    "convert_to_schema",
    "schema_to_json",
    "schema_to_mapping",
]
