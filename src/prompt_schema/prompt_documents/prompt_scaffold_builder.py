"""Prompt file scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_PROMPT_FILENAME = "example.prompt"

_PROMPT_SCAFFOLD_TEMPLATE = """---
# Prompt template scaffold for prompt-schema-tool.
# Replace every <REQUIRED> placeholder and adjust the schemas to your prompt.
model: "<REQUIRED>"
description: "<OPTIONAL>"
input:
  # Picoschema: "type, description". A trailing ? marks a field optional.
  schema:
    subject: string, the topic to write about
    tone?: string, optional writing tone
    keywords?(array, words the text should mention): string
  default:
    tone: neutral
output:
  format: json
  schema:
    title: string
    paragraphs(array): string
    mood(enum, overall mood of the text): [HAPPY, NEUTRAL, SAD]
    (*): string
---
Write a short text about {{subject}}.
"""


def build_placeholder_prompt() -> str:
    """Build a prompt file template with placeholder front matter."""
    return _PROMPT_SCAFFOLD_TEMPLATE


def write_placeholder_prompt(output_path: Path | str) -> Path:
    """Write the placeholder prompt file to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Prompt file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_prompt(), encoding="utf-8")
    return destination.resolve()
