"""CLI generate command implementation.

This module implements `dgql generate`: load a YAML schema description,
augment it with CRUD companion types and root operations, and print the
resulting SDL.
"""

from pathlib import Path
import sys

from rich.console import Console
from rich.markup import escape
import rich_click as click

from ..core import (
    DuplicateTypeError,
    SchemaAugmentationError,
    SchemaLoadError,
    clear_context,
    stringify,
)
from ..validation import registry
from .common import (
    EXIT_INTERNAL_ERROR,
    EXIT_INVALID,
    EXIT_LOAD_ERROR,
    build_augmented_schema,
    setup_runtime,
)

# Status goes to stderr; stdout carries the SDL
console = Console(stderr=True)


@click.command(name="generate")
@click.argument(
    "schema_file",
    type=click.Path(exists=True, dir_okay=False, readable=True),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write SDL to this file instead of stdout",
)
@click.option(
    "--rules",
    "-r",
    multiple=True,
    help="Module registering validation rules (repeatable)",
)
@click.option(
    "--skip-validation",
    is_flag=True,
    help="Do not run registered validation rules before writing",
)
def generate_command(
    schema_file: str, output: str | None, rules: tuple[str, ...], skip_validation: bool
) -> None:
    """⚙️ **Generate the augmented schema** as SDL.

    Adds Input, Ref, Update, Filter and Payload types plus Query and
    Mutation operations for every object type in SCHEMA_FILE.

    \b
    Examples:
        dgql generate schema.yaml
        dgql generate schema.yaml --output schema.graphql
        dgql generate schema.yaml --rules myproject.schema_rules

    **Exit Codes:**
    - `0`: Schema generated ✅
    - `1`: Augmentation or validation failed ❌
    - `2`: Schema file could not be loaded 📁
    - `4`: Validation rule module could not be imported 💥
    """
    try:
        try:
            setup_runtime(schema_file, rules)
        except ImportError as e:
            console.print(
                f"❌ [bold red]Cannot load rule module:[/bold red] {escape(str(e))}"
            )
            sys.exit(EXIT_INTERNAL_ERROR)

        try:
            schema = build_augmented_schema(schema_file)
        except (SchemaLoadError, DuplicateTypeError) as e:
            console.print(
                f"❌ [bold red]Cannot load schema:[/bold red] {escape(str(e))}"
            )
            sys.exit(EXIT_LOAD_ERROR)
        except SchemaAugmentationError as e:
            console.print("❌ [bold red]Schema augmentation failed[/bold red]")
            for error in e.errors:
                console.print(f"   • {escape(str(error))}")
            sys.exit(EXIT_INVALID)

        if not skip_validation:
            errors = registry.run_validation(schema)
            if errors:
                console.print("❌ [bold red]Schema validation failed[/bold red]")
                for validation_error in errors:
                    console.print(f"   • {escape(str(validation_error))}")
                sys.exit(EXIT_INVALID)

        sdl = stringify(schema)

        if output is None:
            click.echo(sdl, nl=False)
        else:
            Path(output).write_text(sdl, encoding="utf-8")
            console.print("✅ [green]Generated schema successfully[/green]")
            console.print(f"   📁 Output: {escape(output)}")
            console.print(f"   📊 Types: {len(schema.types)}")
    finally:
        clear_context()


__all__ = ["generate_command"]
