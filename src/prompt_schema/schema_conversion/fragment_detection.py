"""Classification of decoded values into passthrough or shorthand fragments."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from prompt_schema.schema_model.schema_models import RECOGNIZED_KINDS, SchemaKind


@dataclass(frozen=True)
class PassthroughFragment:
    """A mapping already shaped like a JSON Schema document."""

    document: Mapping[str, Any]
    force_object: bool


@dataclass(frozen=True)
class ShorthandFragment:
    """A value written in picoschema shorthand."""

    value: Any


SchemaFragment = PassthroughFragment | ShorthandFragment


def classify_fragment(value: Any) -> SchemaFragment:
    """Decide whether a decoded value is a JSON Schema document or picoschema.

    A mapping is a JSON Schema document when its `type` names a recognized
    kind, or when it has a `properties` mapping. The latter always describes an
    object, so its kind is forced to `object`.
    """
    if isinstance(value, Mapping):
        declared_type = value.get("type")
        if isinstance(declared_type, str) and declared_type in RECOGNIZED_KINDS:
            return PassthroughFragment(
                document=value,
                force_object=declared_type == SchemaKind.OBJECT.value,
            )
        if isinstance(value.get("properties"), Mapping):
            return PassthroughFragment(document=value, force_object=True)
    return ShorthandFragment(value=value)
