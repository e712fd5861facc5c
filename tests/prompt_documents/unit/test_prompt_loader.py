"""Prompt file loader tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from prompt_schema.logging_context import bound_logger
from prompt_schema.prompt_documents.prompt_loader import (
    PromptDocumentError,
    load_prompt_document,
    parse_prompt_text,
)


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_parses_front_matter_schemas_and_template() -> None:
    document = parse_prompt_text(
        """---
model: vertexai/gemini-1.5-flash
description: Summarize an article
config:
  temperature: 0.2
input:
  schema:
    article: string
    maxWords?: integer
  default:
    maxWords: 100
output:
  schema:
    summary: string
---
Summarize {{article}} in {{maxWords}} words.
"""
    )

    assert document.model == "vertexai/gemini-1.5-flash"
    assert document.description == "Summarize an article"
    assert document.config == {"temperature": 0.2}
    assert document.input_default == {"maxWords": 100}
    assert document.input_schema is not None
    assert document.input_schema.required == ["article"]
    assert document.output_schema is not None
    assert document.output_schema.kind == ["object"]
    assert document.output_format == "json"
    assert document.template == "Summarize {{article}} in {{maxWords}} words.\n"
    assert document.source_path is None


def test_output_format_defaults_to_text_without_schema() -> None:
    document = parse_prompt_text("---\nmodel: m\n---\nHello")

    assert document.output_schema is None
    assert document.input_schema is None
    assert document.output_format == "text"
    assert document.template == "Hello"


def test_explicit_output_format_wins() -> None:
    document = parse_prompt_text("---\noutput:\n  format: media\n  schema: string\n---\n")

    assert document.output_format == "media"
    assert document.output_schema is not None
    assert document.output_schema.kind == ["string"]


def test_text_without_front_matter_is_template_only() -> None:
    document = parse_prompt_text("Just a template.\n")

    assert document.template == "Just a template.\n"
    assert document.config == {}
    assert document.extra == {}


def test_empty_front_matter() -> None:
    document = parse_prompt_text("---\n---\nBody")

    assert document.template == "Body"
    assert document.model is None


def test_unknown_top_level_keys_are_kept_as_extra() -> None:
    document = parse_prompt_text("---\nname: summarize\ntools: [search]\n---\n")

    assert document.extra == {"name": "summarize", "tools": ["search"]}


def test_json_schema_passthrough_in_front_matter() -> None:
    document = parse_prompt_text(
        """---
input:
  schema:
    type: object
    properties:
      query:
        type: string
    required: [query]
---
"""
    )

    assert document.input_schema is not None
    assert document.input_schema.required == ["query"]
    assert document.input_schema.additional_properties is None


def test_unterminated_front_matter_fails() -> None:
    with pytest.raises(PromptDocumentError, match="closing '---'"):
        parse_prompt_text("---\nmodel: m\nHello")


def test_invalid_yaml_front_matter_fails() -> None:
    with pytest.raises(PromptDocumentError, match="Failed to parse prompt front matter"):
        parse_prompt_text("---\nmodel: [unclosed\n---\n")


def test_non_mapping_front_matter_fails() -> None:
    with pytest.raises(PromptDocumentError, match="root must be a mapping"):
        parse_prompt_text("---\n- one\n- two\n---\n")


def test_invalid_schema_names_section() -> None:
    with pytest.raises(PromptDocumentError, match="Invalid output.schema") as exc_info:
        parse_prompt_text("---\noutput:\n  schema:\n    size: huge\n---\n")

    assert "unsupported scalar type 'huge'" in str(exc_info.value)
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize(
    ("front_matter", "message"),
    [
        ("input: string", "Prompt section 'input' must be a mapping."),
        ("input:\n  schemas: string", "Unknown keys in section 'input': schemas"),
        ("output:\n  format: 3", "output.format must be a string."),
        ("model: 5", "model must be a string."),
        ("config: [1]", "Prompt section 'config' must be a mapping."),
    ],
)
def test_invalid_sections_fail(front_matter: str, message: str) -> None:
    with pytest.raises(PromptDocumentError) as exc_info:
        parse_prompt_text(f"---\n{front_matter}\n---\n")

    assert str(exc_info.value) == message


def test_load_prompt_document_reads_file(tmp_path: Path) -> None:
    prompt_path = _write_file(
        tmp_path / "greet.prompt",
        "---\ninput:\n  schema:\n    name: string\n---\nHi {{name}}",
    )

    document = load_prompt_document(prompt_path)

    assert document.source_path == prompt_path
    assert document.input_schema is not None
    assert document.template == "Hi {{name}}"


def test_load_prompt_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PromptDocumentError, match="Prompt file not found"):
        load_prompt_document(tmp_path / "missing.prompt")


def test_loader_logs_through_context_logger(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    prompt_path = _write_file(tmp_path / "a.prompt", "---\noutput:\n  schema: string\n---\n")
    custom = logging.getLogger("prompt_schema.tests.loader")

    with caplog.at_level(logging.DEBUG, logger="prompt_schema.tests.loader"), bound_logger(custom):
        load_prompt_document(prompt_path)

    messages = [record.getMessage() for record in caplog.records if record.name == custom.name]
    assert any("loading prompt file" in message for message in messages)
    assert any("converted output.schema" in message for message in messages)
