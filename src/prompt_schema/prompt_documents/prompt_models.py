"""Prompt document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from prompt_schema.schema_model.schema_models import SchemaObject


@dataclass(frozen=True)
class PromptDocument:  # pylint: disable=too-many-instance-attributes
    """A prompt template with its front matter converted."""

    source_path: Path | None
    model: str | None
    description: str | None
    config: Mapping[str, Any]
    input_schema: SchemaObject | None
    input_default: Mapping[str, Any]
    output_schema: SchemaObject | None
    output_format: str
    template: str
    extra: Mapping[str, Any] = field(default_factory=dict)
