"""Core functionality for schema augmentation."""

from .augment import (
    augment_schema,
    check_augmentation,
    generate_complete_schema,
    source_object_types,
)
from .derivation import (
    CompanionNames,
    derive_add_payload,
    derive_companion_types,
    derive_delete_payload,
    derive_filter,
    derive_input,
    derive_ref,
    derive_update,
    derive_update_payload,
    find_undefined_references,
)
from .exceptions import (
    DuplicateTypeError,
    NameCollisionError,
    SchemaAugmentationError,
    SchemaError,
    SchemaLoadError,
    UndefinedTypeReferenceError,
)
from .logging import (
    SchemaOperationLogger,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from .operations import add_mutation_fields, add_query_fields
from .scalars import SupportedScalar, ensure_scalars
from .schema import (
    ArgumentDefinition,
    FieldDefinition,
    Schema,
    SchemaDocument,
    TypeDefinition,
    TypeKind,
    TypeOrigin,
    TypeRef,
)
from .schema_loader import YamlSchemaLoader
from .stringify import stringify

__all__ = [
    # Schema model
    "ArgumentDefinition",
    "FieldDefinition",
    "Schema",
    "SchemaDocument",
    "TypeDefinition",
    "TypeKind",
    "TypeOrigin",
    "TypeRef",
    # Scalars
    "SupportedScalar",
    "ensure_scalars",
    # Derivation and augmentation
    "CompanionNames",
    "add_mutation_fields",
    "add_query_fields",
    "augment_schema",
    "check_augmentation",
    "derive_add_payload",
    "derive_companion_types",
    "derive_delete_payload",
    "derive_filter",
    "derive_input",
    "derive_ref",
    "derive_update",
    "derive_update_payload",
    "find_undefined_references",
    "generate_complete_schema",
    "source_object_types",
    # Serialization and loading
    "YamlSchemaLoader",
    "stringify",
    # Exceptions
    "DuplicateTypeError",
    "NameCollisionError",
    "SchemaAugmentationError",
    "SchemaError",
    "SchemaLoadError",
    "UndefinedTypeReferenceError",
    # Logging
    "SchemaOperationLogger",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
]
