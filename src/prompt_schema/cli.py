"""Command line interface entry point."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml

from prompt_schema.logging_context import (
    configure_debug_logging,
    disable_debug_logging,
    logger_from_context,
)
from prompt_schema.prompt_documents import (
    DEFAULT_PROMPT_FILENAME,
    PromptDocumentError,
    load_prompt_document,
    write_placeholder_prompt,
)
from prompt_schema.schema_conversion import PicoschemaError, convert_to_schema
from prompt_schema.schema_model import schema_to_json, schema_to_mapping


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="prompt-schema-tool")
@click.option("--debug", is_flag=True, default=False, help="Write debug logs to stderr.")
def cli(debug: bool) -> None:
    """Picoschema to JSON Schema conversion utility."""
    if debug:
        configure_debug_logging()
        click.get_current_context().call_on_close(disable_debug_logging)


@cli.command(name="convert")
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON picoschema or JSON Schema document",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for the converted JSON Schema; prints to stdout when omitted",
)
@click.option("--indent", default=2, show_default=True, type=click.IntRange(min=0))
def convert(input_path: str, output_path: str | None, indent: int) -> None:
    """Convert a schema document into JSON Schema."""
    try:
        document = _load_schema_source(input_path)
        rendered = schema_to_json(convert_to_schema(document), indent=indent)
    except (PicoschemaError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    _emit(rendered, output_path)


@cli.command(name="inspect-prompt")
@click.option(
    "--prompt",
    "prompt_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a .prompt file with YAML front matter",
)
@click.option(
    "--section",
    type=click.Choice(["input", "output", "both"]),
    default="both",
    show_default=True,
    help="Which front matter schema to print",
)
def inspect_prompt(prompt_path: str, section: str) -> None:
    """Print the converted input/output schemas of a prompt file."""
    try:
        document = load_prompt_document(prompt_path)
    except PromptDocumentError as exc:
        raise CliError(str(exc)) from exc

    input_schema = (
        None if document.input_schema is None else schema_to_mapping(document.input_schema)
    )
    output_schema = (
        None if document.output_schema is None else schema_to_mapping(document.output_schema)
    )
    payload: Any
    if section == "input":
        payload = input_schema
    elif section == "output":
        payload = output_schema
    else:
        payload = {
            "input": input_schema,
            "output": output_schema,
            "format": document.output_format,
        }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@cli.command(name="generate-prompt")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_PROMPT_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the prompt file scaffold to write",
)
def generate_prompt(output_path: str) -> None:
    """Generate a placeholder prompt file with picoschema front matter."""
    try:
        resolved_output = write_placeholder_prompt(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _load_schema_source(input_path: str) -> Any:
    path = Path(input_path)
    if not path.exists():
        raise CliError(f"Schema file not found: {path}")
    logger_from_context().debug("reading schema document %s", path)
    text = path.read_text(encoding="utf-8")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CliError(f"Failed to parse schema document: {exc}") from exc


def _emit(rendered: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(rendered)
        return
    destination = Path(output_path)
    try:
        destination.write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
