"""Boundary tests for schema_conversion internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_conversion_core_does_not_import_io_or_logging() -> None:
    conversion_dir = _project_root() / "src" / "prompt_schema" / "schema_conversion"
    forbidden_import_fragments = (
        "import logging",
        "import yaml",
        "import click",
        "prompt_schema.logging_context",
        "prompt_schema.prompt_documents",
    )

    for module_path in sorted(conversion_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
