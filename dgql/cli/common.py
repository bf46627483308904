"""Shared pipeline steps for the CLI commands."""

from pathlib import Path

from ..config import settings
from ..core import (
    Schema,
    YamlSchemaLoader,
    augment_schema,
    bind_context,
    configure_logging,
    ensure_scalars,
)
from ..validation import load_rule_modules

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2
EXIT_INTERNAL_ERROR = 4


def setup_runtime(schema_file: str, rule_modules: tuple[str, ...]) -> None:
    """Configure logging and import validation rule modules.

    Rule modules from the environment load first, then those given on the
    command line, which fixes the order the rules run in.

    Raises:
        ImportError: If a rule module cannot be imported
    """
    configure_logging(
        environment=settings.environment,
        log_level=settings.log_level,
        json_logs=settings.json_logs,
    )
    bind_context(schema_file=schema_file)
    load_rule_modules([*settings.rule_modules, *rule_modules])


def build_augmented_schema(schema_file: str | Path) -> Schema:
    """Load a YAML schema, add built-in scalars and augment it.

    Raises:
        SchemaLoadError: If the file cannot be loaded
        DuplicateTypeError: If a type is declared twice
        SchemaAugmentationError: If augmentation fails
    """
    document = YamlSchemaLoader().load(schema_file)
    ensure_scalars(document)
    schema = Schema.from_document(document)
    augment_schema(schema)
    return schema
