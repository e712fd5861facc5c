"""Schema model exports."""

from .schema_fields import SCHEMA_FIELDS, SCHEMA_FIELDS_BY_JSON_NAME, FieldShape, SchemaField
from .schema_models import RECOGNIZED_KINDS, SchemaKind, SchemaObject
from .schema_serialization import schema_to_json, schema_to_mapping

__all__ = [
    "FieldShape",
    "RECOGNIZED_KINDS",
    "SCHEMA_FIELDS",
    "SCHEMA_FIELDS_BY_JSON_NAME",
    "SchemaField",
    "SchemaKind",
    "SchemaObject",
    "schema_to_json",
    "schema_to_mapping",
]
