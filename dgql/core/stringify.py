"""Render an augmented schema as SDL text.

Types are grouped into sections printed in a fixed order: object types,
scalars, input types and enums, ``Ref`` inputs, ``Filter`` inputs,
payloads, then the Query and Mutation roots. Within a section types keep
the schema's declaration order. The token layout is consumed by other
tooling and must stay exactly as produced here.
"""

from enum import Enum

from .schema import (
    FieldDefinition,
    Schema,
    TypeDefinition,
    TypeKind,
    TypeOrigin,
    is_introspection_name,
)


class Section(Enum):
    """Output sections, in print order."""

    OBJECT = 1
    SCALAR = 2
    INPUT = 3
    REF = 4
    FILTER = 5
    PAYLOAD = 6


_ORIGIN_SECTIONS = {
    TypeOrigin.REF: Section.REF,
    TypeOrigin.FILTER: Section.FILTER,
    TypeOrigin.PAYLOAD: Section.PAYLOAD,
}

_KIND_SECTIONS = {
    TypeKind.OBJECT: Section.OBJECT,
    TypeKind.INTERFACE: Section.OBJECT,
    TypeKind.UNION: Section.OBJECT,
    TypeKind.SCALAR: Section.SCALAR,
    TypeKind.INPUT_OBJECT: Section.INPUT,
    TypeKind.ENUM: Section.INPUT,
}


def section_for(defn: TypeDefinition) -> Section:
    """Pick the output section from the type's origin tag, then its kind."""
    return _ORIGIN_SECTIONS.get(defn.origin) or _KIND_SECTIONS[defn.kind]


def _visible(fields: list[FieldDefinition]) -> list[FieldDefinition]:
    return [fld for fld in fields if not is_introspection_name(fld.name)]


def _block(keyword: str, defn: TypeDefinition) -> str:
    lines = [f"{keyword} {defn.name} {{\n"]
    lines.extend(f"\t{fld.name}: {fld.type}\n" for fld in _visible(defn.fields))
    lines.append("}\n")
    return "".join(lines)


def object_string(defn: TypeDefinition) -> str:
    return _block("type", defn)


def interface_string(defn: TypeDefinition) -> str:
    return _block("interface", defn)


def input_string(defn: TypeDefinition) -> str:
    return _block("input", defn)


def enum_string(defn: TypeDefinition) -> str:
    lines = [f"enum {defn.name} {{\n"]
    lines.extend(
        f"\t{value}\n"
        for value in defn.enum_values
        if not is_introspection_name(value)
    )
    lines.append("}\n")
    return "".join(lines)


def union_string(defn: TypeDefinition) -> str:
    return f"union {defn.name} = {' | '.join(defn.possible_types)}\n"


def scalar_string(defn: TypeDefinition) -> str:
    return f"scalar {defn.name}\n"


def operation_string(keyword: str, root: TypeDefinition) -> str:
    """Render a root operation type, arguments included.

    Args:
        keyword: Root type name printed after ``type`` (Query or Mutation)
        root: Root type whose fields are the operations

    Returns:
        ``type <keyword> { ... }`` block with one operation per line
    """
    lines = [f"type {keyword} {{\n"]
    for fld in _visible(root.fields):
        arguments = ",".join(
            f"{arg.name}: {arg.type}"
            for arg in fld.arguments
            if not is_introspection_name(arg.name)
        )
        lines.append(f"\t{fld.name}({arguments}): {fld.type}\n")
    lines.append("}\n")
    return "".join(lines)


_RENDERERS = {
    TypeKind.OBJECT: object_string,
    TypeKind.INTERFACE: interface_string,
    TypeKind.UNION: union_string,
    TypeKind.INPUT_OBJECT: input_string,
    TypeKind.ENUM: enum_string,
}


def stringify(schema: Schema) -> str:
    """Return the whole schema as SDL text.

    Args:
        schema: Schema to render; it is not modified

    Returns:
        SDL text, or an empty string when the schema has no types
    """
    if not schema.types:
        return ""

    sections: dict[Section, list[str]] = {section: [] for section in Section}

    for defn in schema.types.values():
        if is_introspection_name(defn.name):
            continue
        section = section_for(defn)
        if section == Section.SCALAR:
            sections[section].append(scalar_string(defn))
        else:
            sections[section].append(_RENDERERS[defn.kind](defn) + "\n")

    parts = ["".join(sections[Section.OBJECT])]
    parts.append("".join(sections[Section.SCALAR]) + "\n")
    for section in (Section.INPUT, Section.REF, Section.FILTER, Section.PAYLOAD):
        parts.append("".join(sections[section]))

    if schema.query is not None:
        parts.append(operation_string("Query", schema.query))
    if schema.mutation is not None:
        parts.append(operation_string("Mutation", schema.mutation))

    return "".join(parts)
