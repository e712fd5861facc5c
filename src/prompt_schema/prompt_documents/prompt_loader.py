"""Prompt file loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from prompt_schema.logging_context import logger_from_context
from prompt_schema.schema_conversion import PicoschemaError, convert_to_schema
from prompt_schema.schema_model.schema_models import SchemaObject

from .prompt_models import PromptDocument

_FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<front_matter>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
_KNOWN_SECTIONS = frozenset({"model", "description", "config", "input", "output"})
_INPUT_KEYS = frozenset({"schema", "default"})
_OUTPUT_KEYS = frozenset({"schema", "format"})

DEFAULT_OUTPUT_FORMAT = "text"
SCHEMA_OUTPUT_FORMAT = "json"


class PromptDocumentError(Exception):
    """Raised when a prompt file or its front matter is invalid."""


def load_prompt_document(prompt_path: Path | str) -> PromptDocument:
    """Load a prompt file and convert the schemas in its front matter."""
    path = Path(prompt_path)
    if not path.exists():
        raise PromptDocumentError(f"Prompt file not found: {path}")
    logger_from_context().debug("loading prompt file %s", path)
    return parse_prompt_text(path.read_text(encoding="utf-8"), source_path=path)


def parse_prompt_text(text: str, *, source_path: Path | None = None) -> PromptDocument:
    """Split prompt text into front matter and template, and convert its schemas."""
    front_matter, template = _split_front_matter(text)
    parsed = _parse_front_matter(front_matter)

    input_section = _optional_mapping(parsed.get("input"), "input")
    output_section = _optional_mapping(parsed.get("output"), "output")
    _reject_unknown_keys(input_section, _INPUT_KEYS, "input")
    _reject_unknown_keys(output_section, _OUTPUT_KEYS, "output")

    input_schema = _convert_section_schema(input_section.get("schema"), "input.schema")
    output_schema = _convert_section_schema(output_section.get("schema"), "output.schema")
    output_format = _optional_string(output_section.get("format"), "output.format")
    if output_format is None:
        output_format = SCHEMA_OUTPUT_FORMAT if output_schema is not None else DEFAULT_OUTPUT_FORMAT

    return PromptDocument(
        source_path=source_path,
        model=_optional_string(parsed.get("model"), "model"),
        description=_optional_string(parsed.get("description"), "description"),
        config=dict(_optional_mapping(parsed.get("config"), "config")),
        input_schema=input_schema,
        input_default=dict(_optional_mapping(input_section.get("default"), "input.default")),
        output_schema=output_schema,
        output_format=output_format,
        template=template,
        extra={key: value for key, value in parsed.items() if key not in _KNOWN_SECTIONS},
    )


def _split_front_matter(text: str) -> tuple[str | None, str]:
    first_line = text.split("\n", 1)[0].rstrip("\r").rstrip(" \t")
    if first_line != "---":
        return None, text
    match = _FRONT_MATTER_PATTERN.match(text)
    if match is None:
        raise PromptDocumentError("Prompt front matter is missing its closing '---' line.")
    return match.group("front_matter"), text[match.end() :]


def _parse_front_matter(front_matter: str | None) -> Mapping[str, Any]:
    if front_matter is None:
        return {}
    try:
        parsed = yaml.safe_load(front_matter)
    except yaml.YAMLError as exc:
        raise PromptDocumentError(f"Failed to parse prompt front matter: {exc}") from exc
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise PromptDocumentError("Prompt front matter root must be a mapping.")
    return parsed


def _convert_section_schema(value: Any, section_name: str) -> SchemaObject | None:
    try:
        schema = convert_to_schema(value)
    except PicoschemaError as exc:
        raise PromptDocumentError(f"Invalid {section_name}: {exc}") from exc
    if schema is not None:
        logger_from_context().debug("converted %s with kind %s", section_name, schema.kind)
    return schema


def _reject_unknown_keys(section: Mapping[str, Any], allowed: frozenset[str], name: str) -> None:
    unknown = sorted(str(key) for key in section if key not in allowed)
    if unknown:
        raise PromptDocumentError(f"Unknown keys in section '{name}': {', '.join(unknown)}")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise PromptDocumentError(f"Prompt section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise PromptDocumentError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
