"""Core schema data structures for GraphQL schema augmentation.

This module defines the in-memory type graph that the augmentation engine
reads and extends: type definitions, fields, arguments and type references,
plus the schema container holding root Query and Mutation types.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from .exceptions import DuplicateTypeError

INTROSPECTION_PREFIX = "__"


class TypeKind(str, Enum):
    """Structural kind of a type definition."""

    OBJECT = "OBJECT"
    SCALAR = "SCALAR"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    INTERFACE = "INTERFACE"
    UNION = "UNION"


class TypeOrigin(str, Enum):
    """Where a type definition came from.

    User-authored types are USER_DEFINED; every type produced by augmentation
    is tagged with the role it was generated for, so later stages never have
    to guess a type's role from its name.
    """

    USER_DEFINED = "user_defined"
    INPUT = "input"
    REF = "ref"
    UPDATE = "update"
    FILTER = "filter"
    PAYLOAD = "payload"
    QUERY = "query"
    MUTATION = "mutation"


@dataclass
class TypeRef:
    """Reference to a type as used by a field or argument.

    Either ``named_type`` is set (a named reference) or ``element`` is set
    (a list reference). ``non_null`` always applies to this level only; the
    element of a list carries its own flag.
    """

    named_type: str | None = None
    element: Optional["TypeRef"] = None
    non_null: bool = False

    def __post_init__(self) -> None:
        if (self.named_type is None) == (self.element is None):
            raise ValueError(
                "TypeRef must have exactly one of named_type or element set"
            )

    @classmethod
    def named(cls, name: str, non_null: bool = False) -> "TypeRef":
        return cls(named_type=name, non_null=non_null)

    @classmethod
    def list_of(cls, element: "TypeRef", non_null: bool = False) -> "TypeRef":
        return cls(element=element, non_null=non_null)

    @property
    def is_list(self) -> bool:
        return self.element is not None

    @property
    def name(self) -> str:
        """Innermost named type, unwrapping any list levels."""
        if self.element is not None:
            return self.element.name
        assert self.named_type is not None
        return self.named_type

    def copy(self) -> "TypeRef":
        """Return a deep copy sharing no state with this reference."""
        if self.element is not None:
            return TypeRef(element=self.element.copy(), non_null=self.non_null)
        return TypeRef(named_type=self.named_type, non_null=self.non_null)

    def with_named_type(self, name: str) -> "TypeRef":
        """Return a copy whose innermost named type is replaced by ``name``."""
        if self.element is not None:
            return TypeRef(
                element=self.element.with_named_type(name), non_null=self.non_null
            )
        return TypeRef(named_type=name, non_null=self.non_null)

    def __str__(self) -> str:
        suffix = "!" if self.non_null else ""
        if self.element is not None:
            return f"[{self.element}]{suffix}"
        return f"{self.named_type}{suffix}"


@dataclass
class ArgumentDefinition:
    """Argument of a root operation field."""

    name: str
    type: TypeRef

    def copy(self) -> "ArgumentDefinition":
        return replace(self, type=self.type.copy())


@dataclass
class FieldDefinition:
    """Definition of a field on an object, interface or input type."""

    name: str
    type: TypeRef
    arguments: list[ArgumentDefinition] = field(default_factory=list)
    description: str = ""

    def copy(self) -> "FieldDefinition":
        """Return an independent copy, including type and arguments."""
        return replace(
            self,
            type=self.type.copy(),
            arguments=[argument.copy() for argument in self.arguments],
        )


@dataclass
class TypeDefinition:
    """Named type definition.

    Identity is the name; a schema never holds two definitions with the
    same name.
    """

    kind: TypeKind
    name: str
    fields: list[FieldDefinition] = field(default_factory=list)
    enum_values: list[str] = field(default_factory=list)
    possible_types: list[str] = field(default_factory=list)  # Union members
    description: str = ""
    origin: TypeOrigin = TypeOrigin.USER_DEFINED

    def get_field(self, name: str) -> FieldDefinition | None:
        """Return the field called ``name``, if any."""
        for fld in self.fields:
            if fld.name == name:
                return fld
        return None

    @property
    def field_names(self) -> list[str]:
        return [fld.name for fld in self.fields]


@dataclass
class SchemaDocument:
    """Ordered list of definitions as produced ahead of schema building."""

    definitions: list[TypeDefinition] = field(default_factory=list)

    def names(self) -> set[str]:
        return {definition.name for definition in self.definitions}


@dataclass
class Schema:
    """Complete schema: named types plus the root operation types.

    ``types`` keeps declaration order, which drives both augmentation order
    and serialization order.
    """

    types: dict[str, TypeDefinition] = field(default_factory=dict)
    query: TypeDefinition | None = None
    mutation: TypeDefinition | None = None

    @classmethod
    def from_document(cls, document: SchemaDocument) -> "Schema":
        """Build a schema from a document.

        Raises:
            DuplicateTypeError: If two definitions share a name
        """
        schema = cls()
        for definition in document.definitions:
            if definition.name in schema.types:
                raise DuplicateTypeError(definition.name)
            schema.types[definition.name] = definition
        return schema

    def lookup(self, name: str) -> TypeDefinition | None:
        """Return the type called ``name`` or None when it is not defined."""
        return self.types.get(name)

    def types_of_kind(self, kind: TypeKind) -> list[TypeDefinition]:
        return [defn for defn in self.types.values() if defn.kind == kind]


def is_introspection_name(name: str) -> bool:
    """Check whether a name is reserved for introspection."""
    return name.startswith(INTROSPECTION_PREFIX)
