"""Entry point turning decoded schema values into schema objects."""

from __future__ import annotations

from typing import Any

from prompt_schema.schema_model.schema_models import SchemaKind, SchemaObject

from .field_mapping import map_schema_fields
from .fragment_detection import PassthroughFragment, classify_fragment
from .shorthand_grammar import parse_shorthand


def convert_to_schema(value: Any) -> SchemaObject | None:
    """Convert picoschema or a JSON Schema document into a schema object.

    Args:
      value: Result of decoding a YAML or JSON schema block.

    Returns:
      The schema object, or None when the value is None.

    Raises:
      PicoschemaError: If the value cannot be converted. No partial schema is
        returned.
    """
    if value is None:
        return None

    fragment = classify_fragment(value)
    if isinstance(fragment, PassthroughFragment):
        schema = map_schema_fields(fragment.document)
        if fragment.force_object:
            schema.kind = [SchemaKind.OBJECT.value]
        return schema
    return parse_shorthand(fragment.value)
