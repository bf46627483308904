"""Root Query and Mutation field generation.

Each object type gets two query fields (``get<T>`` and ``query<T>``) and
three mutation fields (``add<T>``, ``update<T>`` and ``delete<T>``). The
builders only append; calling them twice for the same type duplicates
fields, so the augmentor calls them exactly once per type.
"""

from .derivation import CompanionNames
from .scalars import SupportedScalar
from .schema import (
    ArgumentDefinition,
    FieldDefinition,
    TypeDefinition,
    TypeKind,
    TypeOrigin,
    TypeRef,
)

QUERY_TYPE_NAME = "Query"
MUTATION_TYPE_NAME = "Mutation"


def new_query_root() -> TypeDefinition:
    return TypeDefinition(
        kind=TypeKind.OBJECT,
        name=QUERY_TYPE_NAME,
        description="Query object contains all the query functions",
        origin=TypeOrigin.QUERY,
    )


def new_mutation_root() -> TypeDefinition:
    return TypeDefinition(
        kind=TypeKind.OBJECT,
        name=MUTATION_TYPE_NAME,
        description="Mutation object contains all the mutation functions",
        origin=TypeOrigin.MUTATION,
    )


def _id_argument() -> ArgumentDefinition:
    return ArgumentDefinition(
        name="id", type=TypeRef.named(SupportedScalar.ID.value, non_null=True)
    )


def add_query_fields(defn: TypeDefinition, query: TypeDefinition) -> None:
    """Append ``get<T>(id: ID!): T!`` and ``query<T>(filter: TFilter!): [T!]!``."""
    names = CompanionNames.for_type(defn.name)

    query.fields.append(
        FieldDefinition(
            name=f"get{defn.name}",
            type=TypeRef.named(defn.name, non_null=True),
            arguments=[_id_argument()],
            description=f"ID based query function for {defn.name}",
        )
    )
    query.fields.append(
        FieldDefinition(
            name=f"query{defn.name}",
            type=TypeRef.list_of(TypeRef.named(defn.name, non_null=True), non_null=True),
            arguments=[
                ArgumentDefinition(
                    name="filter", type=TypeRef.named(names.filter, non_null=True)
                )
            ],
            description=f"Input filter based query function for {defn.name}",
        )
    )


def add_mutation_fields(defn: TypeDefinition, mutation: TypeDefinition) -> None:
    """Append the add, update and delete mutations for ``defn``.

    The ``input`` argument of ``update<T>`` is nullable; the others are not.
    """
    names = CompanionNames.for_type(defn.name)

    mutation.fields.append(
        FieldDefinition(
            name=f"add{defn.name}",
            type=TypeRef.named(names.add_payload, non_null=True),
            arguments=[
                ArgumentDefinition(
                    name="input", type=TypeRef.named(names.input, non_null=True)
                )
            ],
            description=f"Function for adding {defn.name}",
        )
    )
    mutation.fields.append(
        FieldDefinition(
            name=f"update{defn.name}",
            type=TypeRef.named(names.update_payload, non_null=True),
            arguments=[
                _id_argument(),
                ArgumentDefinition(name="input", type=TypeRef.named(names.update)),
            ],
            description=f"Function for updating {defn.name}",
        )
    )
    mutation.fields.append(
        FieldDefinition(
            name=f"delete{defn.name}",
            type=TypeRef.named(names.delete_payload, non_null=True),
            arguments=[_id_argument()],
            description=f"Function for deleting {defn.name}",
        )
    )
