"""Load base schema definitions from structured YAML files.

The YAML layout describes types as data rather than SDL text::

    types:
      Person:
        fields:
          id: {type: ID, non_null: true}
          name: {type: String, non_null: true}
          best: Person
          friends: {type: Person, list: true, item_non_null: true}
      Color:
        kind: enum
        values: [RED, GREEN]

``kind`` defaults to ``object``. A field may be a bare type name
(nullable, non-list) or a mapping.
"""

from pathlib import Path
from typing import Any

import yaml

from .exceptions import SchemaLoadError
from .logging import get_logger
from .schema import (
    FieldDefinition,
    SchemaDocument,
    TypeDefinition,
    TypeKind,
    TypeRef,
)

logger = get_logger(__name__)

_KIND_NAMES = {
    "object": TypeKind.OBJECT,
    "type": TypeKind.OBJECT,
    "scalar": TypeKind.SCALAR,
    "input": TypeKind.INPUT_OBJECT,
    "enum": TypeKind.ENUM,
    "interface": TypeKind.INTERFACE,
    "union": TypeKind.UNION,
}

_FLAG_KEYS = ("non_null", "list", "item_non_null")
_FIELD_KEYS = {"type", "description", *_FLAG_KEYS}


class YamlSchemaLoader:
    """Build a ``SchemaDocument`` from a YAML type description."""

    def load(self, path: str | Path) -> SchemaDocument:
        """Load and convert a YAML schema file.

        Args:
            path: Path to the YAML file

        Returns:
            Document with one definition per declared type

        Raises:
            SchemaLoadError: If the file cannot be read or is malformed
        """
        file_path = Path(path)
        try:
            with file_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(f"Failed to load schema '{file_path}': {e}", e) from e

        document = self.from_dict(data)
        logger.debug(
            "Schema file loaded",
            path=str(file_path),
            type_count=len(document.definitions),
        )
        return document

    def loads(self, content: str) -> SchemaDocument:
        """Convert YAML text to a document."""
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SchemaLoadError(f"Invalid YAML syntax: {e}", e) from e
        return self.from_dict(data)

    def from_dict(self, data: Any) -> SchemaDocument:
        """Convert already-decoded YAML data to a document."""
        if not isinstance(data, dict) or not isinstance(data.get("types"), dict):
            raise SchemaLoadError("Schema must be a mapping with a 'types' mapping")

        document = SchemaDocument()
        for name, type_data in data["types"].items():
            document.definitions.append(self._parse_type(str(name), type_data or {}))
        return document

    def _parse_type(self, name: str, type_data: Any) -> TypeDefinition:
        if not isinstance(type_data, dict):
            raise SchemaLoadError(f"Type '{name}' must be a mapping")

        kind_name = str(type_data.get("kind", "object")).lower()
        if kind_name not in _KIND_NAMES:
            raise SchemaLoadError(
                f"Type '{name}' has unknown kind '{kind_name}'. "
                f"Expected one of: {', '.join(sorted(_KIND_NAMES))}"
            )

        fields_data = type_data.get("fields") or {}
        if not isinstance(fields_data, dict):
            raise SchemaLoadError(f"Fields of type '{name}' must be a mapping")

        return TypeDefinition(
            kind=_KIND_NAMES[kind_name],
            name=name,
            fields=[
                self._parse_field(name, str(field_name), field_data)
                for field_name, field_data in fields_data.items()
            ],
            enum_values=[str(value) for value in type_data.get("values") or []],
            possible_types=[str(member) for member in type_data.get("types") or []],
            description=str(type_data.get("description") or ""),
        )

    @staticmethod
    def _parse_field(
        type_name: str, field_name: str, field_data: Any
    ) -> FieldDefinition:
        if isinstance(field_data, str):
            return FieldDefinition(name=field_name, type=TypeRef.named(field_data))

        if not isinstance(field_data, dict) or "type" not in field_data:
            raise SchemaLoadError(
                f"Field '{type_name}.{field_name}' must be a type name or a "
                "mapping with a 'type' key"
            )

        unknown = set(field_data) - _FIELD_KEYS
        if unknown:
            raise SchemaLoadError(
                f"Field '{type_name}.{field_name}' has unknown keys: "
                f"{', '.join(sorted(unknown))}"
            )

        flags: dict[str, bool] = {}
        for key in _FLAG_KEYS:
            value = field_data.get(key, False)
            if not isinstance(value, bool):
                raise SchemaLoadError(
                    f"Field '{type_name}.{field_name}' key '{key}' must be "
                    f"true or false, got {value!r}"
                )
            flags[key] = value

        non_null = flags["non_null"]
        if flags["list"]:
            element = TypeRef.named(
                str(field_data["type"]), non_null=flags["item_non_null"]
            )
            type_ref = TypeRef.list_of(element, non_null=non_null)
        else:
            type_ref = TypeRef.named(str(field_data["type"]), non_null=non_null)

        return FieldDefinition(
            name=field_name,
            type=type_ref,
            description=str(field_data.get("description") or ""),
        )
