"""Schema augmentation: derive companion types and root operations.

Augmentation is all-or-nothing. Every structural problem across the whole
schema is collected first; if there is any, a single
``SchemaAugmentationError`` is raised and the schema is left untouched.
"""

from .derivation import (
    CompanionNames,
    derive_companion_types,
    find_undefined_references,
)
from .exceptions import NameCollisionError, SchemaAugmentationError, SchemaError
from .logging import SchemaOperationLogger, get_logger
from .operations import (
    add_mutation_fields,
    add_query_fields,
    new_mutation_root,
    new_query_root,
)
from .schema import Schema, TypeDefinition, TypeKind, TypeOrigin, is_introspection_name

logger = get_logger(__name__)


def source_object_types(schema: Schema) -> list[TypeDefinition]:
    """Return the user-authored object types that get companions.

    Introspection types and types produced by an earlier augmentation are
    skipped. Order follows the schema's declaration order.
    """
    return [
        defn
        for defn in schema.types.values()
        if defn.kind == TypeKind.OBJECT
        and defn.origin == TypeOrigin.USER_DEFINED
        and not is_introspection_name(defn.name)
    ]


def check_augmentation(schema: Schema) -> list[SchemaError]:
    """Collect every problem that would prevent augmenting ``schema``.

    Args:
        schema: Schema to check

    Returns:
        Undefined type references and name collisions, empty if none
    """
    errors: list[SchemaError] = []
    derived_names: dict[str, str] = {}

    for defn in source_object_types(schema):
        errors.extend(find_undefined_references(schema, defn))

        for name in CompanionNames.for_type(defn.name):
            if name in schema.types or name in derived_names:
                errors.append(NameCollisionError(name, defn.name))
            else:
                derived_names[name] = defn.name

    return errors


def augment_schema(schema: Schema) -> None:
    """Install companion types and fresh Query/Mutation roots into ``schema``.

    Existing root types are replaced. User-authored types are never
    modified or removed.

    Args:
        schema: Schema to augment in place

    Raises:
        SchemaAugmentationError: If any type reference is undefined or a
            derived name collides with an existing type
    """
    with SchemaOperationLogger(logger, "augment_schema") as op:
        sources = source_object_types(schema)

        errors = check_augmentation(schema)
        if errors:
            raise SchemaAugmentationError(
                f"Schema augmentation failed with {len(errors)} error(s)", errors
            )

        query = new_query_root()
        mutation = new_mutation_root()
        staged: dict[str, TypeDefinition] = {}

        # Staging keeps new types out of schema.types until every source
        # type has been processed.
        for defn in sources:
            staged.update(derive_companion_types(schema, defn))
            add_query_fields(defn, query)
            add_mutation_fields(defn, mutation)
            op.log_progress("Derived companion types", type_name=defn.name)

        schema.types.update(staged)
        schema.query = query
        schema.mutation = mutation

        logger.info(
            "Schema augmented",
            object_types=len(sources),
            derived_types=len(staged),
            query_fields=len(query.fields),
            mutation_fields=len(mutation.fields),
        )


generate_complete_schema = augment_schema
