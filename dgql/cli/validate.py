"""CLI validation command implementation.

This module implements `dgql validate`: augment a YAML schema description
and run every registered validation rule against the result.
"""

import json
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import rich_click as click

from ..core import (
    DuplicateTypeError,
    SchemaAugmentationError,
    SchemaLoadError,
    clear_context,
)
from ..validation import ValidationResult, registry
from .common import (
    EXIT_INTERNAL_ERROR,
    EXIT_INVALID,
    EXIT_LOAD_ERROR,
    build_augmented_schema,
    setup_runtime,
)

console = Console()


def _output_table_format(result: ValidationResult, file_path: str) -> None:
    """Output validation result in table format."""
    if result.is_valid:
        console.print("✅ [bold green]Validation successful[/bold green]")
        console.print(f"   📁 File: [cyan]{escape(file_path)}[/cyan]")
        console.print(f"   📏 Rules run: {len(registry.default_registry)}")
        return

    console.print(
        f"❌ [bold red]Validation failed[/bold red] ({result.error_count} errors)"
    )
    table = Table(show_header=True, header_style="bold")
    table.add_column("Rule", style="bold yellow")
    table.add_column("Type", style="cyan")
    table.add_column("Field", style="magenta")
    table.add_column("Message")
    for error in result.errors:
        message = escape(error.message)
        if error.help:
            message = f"{message}\n[dim]{escape(error.help)}[/dim]"
        table.add_row(
            escape(error.rule or ""),
            escape(error.type_name or ""),
            escape(error.field or ""),
            message,
        )
    console.print(table)


def _output_json_format(result: ValidationResult, file_path: str) -> None:
    """Output validation result in JSON format."""
    output: dict[str, Any] = {
        "status": "valid" if result.is_valid else "invalid",
        "file": file_path,
        "rule_count": len(registry.default_registry),
        "error_count": result.error_count,
        "errors": [error.to_dict() for error in result.errors],
    }
    click.echo(json.dumps(output, indent=2))


def _output_failure(format: str, error_type: str, message: str, file_path: str) -> None:
    if format == "json":
        error_output = {
            "status": "error",
            "error_type": error_type,
            "message": message,
            "file": file_path,
        }
        click.echo(json.dumps(error_output, indent=2))
    else:
        console.print(f"❌ [bold red]{escape(message)}[/bold red]")


@click.command(name="validate")
@click.argument(
    "schema_file",
    type=click.Path(exists=True, dir_okay=False, readable=True),
)
@click.option(
    "--rules",
    "-r",
    multiple=True,
    help="Module registering validation rules (repeatable)",
)
@click.option(
    "--format",
    "-f",
    "format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    help="Output format",
)
def validate_command(schema_file: str, rules: tuple[str, ...], format: str) -> None:
    """🔍 **Validate an augmented schema** against registered rules.

    \b
    Examples:
        dgql validate schema.yaml --rules myproject.schema_rules
        dgql validate schema.yaml --format json

    **Exit Codes:**
    - `0`: Validation successful ✅
    - `1`: Augmentation or validation failed ❌
    - `2`: Schema file could not be loaded 📁
    - `4`: Validation rule module could not be imported 💥
    """
    try:
        try:
            setup_runtime(schema_file, rules)
        except ImportError as e:
            _output_failure(
                format, "rule_module_error", f"Cannot load rule module: {e}", schema_file
            )
            sys.exit(EXIT_INTERNAL_ERROR)

        try:
            schema = build_augmented_schema(schema_file)
        except (SchemaLoadError, DuplicateTypeError) as e:
            _output_failure(
                format, "schema_load_error", f"Cannot load schema: {e}", schema_file
            )
            sys.exit(EXIT_LOAD_ERROR)
        except SchemaAugmentationError as e:
            _output_failure(format, "augmentation_error", str(e), schema_file)
            sys.exit(EXIT_INVALID)

        result = registry.default_registry.validate(schema)

        if format == "json":
            _output_json_format(result, schema_file)
        else:
            _output_table_format(result, schema_file)

        if not result.is_valid:
            sys.exit(EXIT_INVALID)
    finally:
        clear_context()


__all__ = ["validate_command"]
