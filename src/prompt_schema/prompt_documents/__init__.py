"""Prompt document exports."""

from .prompt_loader import (
    DEFAULT_OUTPUT_FORMAT,
    SCHEMA_OUTPUT_FORMAT,
    PromptDocumentError,
    load_prompt_document,
    parse_prompt_text,
)
from .prompt_models import PromptDocument
from .prompt_scaffold_builder import (
    DEFAULT_PROMPT_FILENAME,
    build_placeholder_prompt,
    write_placeholder_prompt,
)

__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "DEFAULT_PROMPT_FILENAME",
    "SCHEMA_OUTPUT_FORMAT",
    "PromptDocument",
    "PromptDocumentError",
    "build_placeholder_prompt",
    "load_prompt_document",
    "parse_prompt_text",
    "write_placeholder_prompt",
]
