"""Integration tests converting the generated prompt scaffold."""

from __future__ import annotations

from pathlib import Path

from prompt_schema.prompt_documents import load_prompt_document, write_placeholder_prompt
from prompt_schema.schema_model import schema_to_mapping


def test_generated_scaffold_loads_and_converts(tmp_path: Path) -> None:
    prompt_path = write_placeholder_prompt(tmp_path / "example.prompt")

    document = load_prompt_document(prompt_path)

    assert document.model == "<REQUIRED>"
    assert document.input_default == {"tone": "neutral"}
    assert document.output_format == "json"
    assert document.template == "Write a short text about {{subject}}.\n"

    assert document.input_schema is not None
    assert schema_to_mapping(document.input_schema) == {
        "type": "object",
        "properties": {
            "subject": {"type": "string", "description": "the topic to write about"},
            "tone": {"type": ["string", "null"], "description": "optional writing tone"},
            "keywords": {
                "type": "array",
                "description": "words the text should mention",
                "items": {"type": ["string", "null"]},
            },
        },
        "required": ["subject"],
        "additionalProperties": False,
    }

    assert document.output_schema is not None
    output_mapping = schema_to_mapping(document.output_schema)
    assert output_mapping["required"] == ["title", "paragraphs", "mood"]
    assert output_mapping["additionalProperties"] == {"type": "string"}
    assert output_mapping["properties"]["paragraphs"] == {
        "type": "array",
        "items": {"type": "string"},
    }
    assert output_mapping["properties"]["mood"] == {
        "description": "overall mood of the text",
        "enum": ["HAPPY", "NEUTRAL", "SAD"],
    }
