"""Companion type derivation for user-defined object types.

For every object type ``T`` the engine derives input types used by the
mutations (``TInput``, ``TRef``, ``TUpdate``), the query filter
(``TFilter``) and the three mutation payloads. Every derived field is an
independent copy, so changing one derived type never affects another or
the source type.
"""

from dataclasses import dataclass
from typing import Iterator

from .exceptions import UndefinedTypeReferenceError
from .scalars import SupportedScalar
from .schema import (
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeOrigin,
    TypeRef,
)

FILTER_FIELD_NAME = "dgraph"
DELETE_MESSAGE_FIELD = "msg"


@dataclass(frozen=True)
class CompanionNames:
    """Names of all types derived from one object type."""

    source: str
    input: str
    ref: str
    update: str
    filter: str
    add_payload: str
    update_payload: str
    delete_payload: str

    @classmethod
    def for_type(cls, name: str) -> "CompanionNames":
        return cls(
            source=name,
            input=f"{name}Input",
            ref=f"{name}Ref",
            update=f"{name}Update",
            filter=f"{name}Filter",
            add_payload=f"Add{name}Payload",
            update_payload=f"Update{name}Payload",
            delete_payload=f"Delete{name}Payload",
        )

    def __iter__(self) -> Iterator[str]:
        yield self.input
        yield self.ref
        yield self.update
        yield self.filter
        yield self.add_payload
        yield self.update_payload
        yield self.delete_payload


def is_id_field(fld: FieldDefinition) -> bool:
    """Check whether a field's underlying type is the built-in ID scalar."""
    return fld.type.name == SupportedScalar.ID.value


def find_undefined_references(
    schema: Schema, defn: TypeDefinition
) -> list[UndefinedTypeReferenceError]:
    """Report every non-ID field of ``defn`` whose type the schema lacks.

    Args:
        schema: Schema used for type lookups
        defn: Object type about to be derived from

    Returns:
        One error per field with an undefined type, empty when all resolve
    """
    return [
        UndefinedTypeReferenceError(defn.name, fld.name, fld.type.name)
        for fld in defn.fields
        if not is_id_field(fld) and schema.lookup(fld.type.name) is None
    ]


def _non_id_fields(schema: Schema, defn: TypeDefinition) -> list[FieldDefinition]:
    """Copy the non-ID fields of ``defn``, pointing object fields at ``Ref`` types.

    Raises:
        UndefinedTypeReferenceError: If a field's type is not in the schema
    """
    fields = []
    for fld in defn.fields:
        if is_id_field(fld):
            continue

        referenced = schema.lookup(fld.type.name)
        if referenced is None:
            raise UndefinedTypeReferenceError(defn.name, fld.name, fld.type.name)

        if referenced.kind == TypeKind.OBJECT:
            ref_type = fld.type.with_named_type(
                CompanionNames.for_type(referenced.name).ref
            )
            fields.append(FieldDefinition(name=fld.name, type=ref_type))
        else:
            fields.append(fld.copy())
    return fields


def derive_input(schema: Schema, defn: TypeDefinition) -> TypeDefinition:
    """Derive ``TInput``: every non-ID field, object fields as references."""
    return TypeDefinition(
        kind=TypeKind.INPUT_OBJECT,
        name=CompanionNames.for_type(defn.name).input,
        fields=_non_id_fields(schema, defn),
        origin=TypeOrigin.INPUT,
    )


def derive_ref(defn: TypeDefinition) -> TypeDefinition:
    """Derive ``TRef``: exactly the ID-typed fields of ``defn``."""
    return TypeDefinition(
        kind=TypeKind.INPUT_OBJECT,
        name=CompanionNames.for_type(defn.name).ref,
        fields=[fld.copy() for fld in defn.fields if is_id_field(fld)],
        origin=TypeOrigin.REF,
    )


def derive_update(schema: Schema, defn: TypeDefinition) -> TypeDefinition:
    """Derive ``TUpdate``: same fields as ``TInput``, all of them optional.

    Only the top-level nullability changes; list element nullability is
    kept as declared.
    """
    fields = _non_id_fields(schema, defn)
    for fld in fields:
        fld.type.non_null = False

    return TypeDefinition(
        kind=TypeKind.INPUT_OBJECT,
        name=CompanionNames.for_type(defn.name).update,
        fields=fields,
        origin=TypeOrigin.UPDATE,
    )


def derive_filter(defn: TypeDefinition) -> TypeDefinition:
    """Derive ``TFilter``.

    The filter is a single free-form ``dgraph: String`` field and does not
    depend on the shape of ``defn``.
    """
    return TypeDefinition(
        kind=TypeKind.INPUT_OBJECT,
        name=CompanionNames.for_type(defn.name).filter,
        fields=[
            FieldDefinition(
                name=FILTER_FIELD_NAME,
                type=TypeRef.named(SupportedScalar.STRING.value),
            )
        ],
        origin=TypeOrigin.FILTER,
    )


def _payload_with_object(name: str, defn: TypeDefinition) -> TypeDefinition:
    return TypeDefinition(
        kind=TypeKind.OBJECT,
        name=name,
        fields=[
            FieldDefinition(
                name=defn.name.lower(),
                type=TypeRef.named(defn.name, non_null=True),
            )
        ],
        origin=TypeOrigin.PAYLOAD,
    )


def derive_add_payload(defn: TypeDefinition) -> TypeDefinition:
    """Derive ``AddTPayload`` exposing the added object."""
    return _payload_with_object(CompanionNames.for_type(defn.name).add_payload, defn)


def derive_update_payload(defn: TypeDefinition) -> TypeDefinition:
    """Derive ``UpdateTPayload`` exposing the updated object."""
    return _payload_with_object(
        CompanionNames.for_type(defn.name).update_payload, defn
    )


def derive_delete_payload(defn: TypeDefinition) -> TypeDefinition:
    """Derive ``DeleteTPayload`` exposing a status message."""
    return TypeDefinition(
        kind=TypeKind.OBJECT,
        name=CompanionNames.for_type(defn.name).delete_payload,
        fields=[
            FieldDefinition(
                name=DELETE_MESSAGE_FIELD,
                type=TypeRef.named(SupportedScalar.STRING.value, non_null=True),
            )
        ],
        origin=TypeOrigin.PAYLOAD,
    )


def derive_companion_types(
    schema: Schema, defn: TypeDefinition
) -> dict[str, TypeDefinition]:
    """Derive all seven companion types of ``defn``, keyed by name.

    Raises:
        UndefinedTypeReferenceError: If a field's type is not in the schema
    """
    companions = [
        derive_input(schema, defn),
        derive_ref(defn),
        derive_update(schema, defn),
        derive_filter(defn),
        derive_add_payload(defn),
        derive_update_payload(defn),
        derive_delete_payload(defn),
    ]
    return {companion.name: companion for companion in companions}
