"""Schema object model entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SchemaKind(str, Enum):
    """Primitive kind tags a schema object can carry."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"


RECOGNIZED_KINDS: frozenset[str] = frozenset(kind.value for kind in SchemaKind)


@dataclass
class SchemaObject:  # pylint: disable=too-many-instance-attributes
    """Mutable JSON-Schema-like node built bottom-up by the converters.

    `kind` is an ordered set of kind tags. `additional_properties` is `False`
    for closed objects, `True` for open ones, a nested schema for
    wildcard-typed objects and `None` when left unspecified.
    """

    kind: list[str] = field(default_factory=list)
    description: str | None = None
    properties: dict[str, SchemaObject] | None = None
    required: list[str] = field(default_factory=list)
    additional_properties: bool | SchemaObject | None = None
    items: SchemaObject | None = None
    enum: list[Any] | None = None

    id: str | None = None
    schema: str | None = None
    ref: str | None = None
    comment: str | None = None
    title: str | None = None
    format: str | None = None
    pattern: str | None = None
    content_encoding: str | None = None
    content_media_type: str | None = None
    default: Any = None
    const: Any = None
    examples: list[Any] | None = None
    min_length: int | None = None
    max_length: int | None = None
    min_items: int | None = None
    max_items: int | None = None
    min_properties: int | None = None
    max_properties: int | None = None
    minimum: int | float | None = None
    maximum: int | float | None = None
    exclusive_minimum: int | float | None = None
    exclusive_maximum: int | float | None = None
    multiple_of: int | float | None = None
    unique_items: bool | None = None
    read_only: bool | None = None
    write_only: bool | None = None
    deprecated: bool | None = None
    pattern_properties: dict[str, SchemaObject] | None = None
    definitions: dict[str, SchemaObject] | None = None
    prefix_items: list[SchemaObject] | None = None
    all_of: list[SchemaObject] | None = None
    any_of: list[SchemaObject] | None = None
    one_of: list[SchemaObject] | None = None
    not_: SchemaObject | None = None

    def add_kind(self, kind: SchemaKind | str) -> None:
        """Append a kind tag unless it is already present."""
        value = kind.value if isinstance(kind, SchemaKind) else kind
        if value not in self.kind:
            self.kind.append(value)
