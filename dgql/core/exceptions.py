"""Schema-specific exceptions for the augmentation engine."""


class SchemaError(Exception):
    """Base exception for all schema problems.

    This is the parent class for all schema-related errors, allowing callers
    to catch every structural issue with a single except clause.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize schema error.

        Args:
            message: Human-readable error description
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.cause = cause


class UndefinedTypeReferenceError(SchemaError):
    """A field refers to a type name that the schema does not define.

    Raised when deriving companion types, since there is no way to decide
    whether the field must be rewritten to its ``Ref`` counterpart.
    """

    def __init__(self, type_name: str, field_name: str, referenced_type: str):
        super().__init__(
            f"Field '{type_name}.{field_name}' references undefined type "
            f"'{referenced_type}'"
        )
        self.type_name = type_name
        self.field_name = field_name
        self.referenced_type = referenced_type


class NameCollisionError(SchemaError):
    """A derived type name is already taken by another type.

    Raised instead of overwriting, since overwriting would corrupt the
    user-defined type.
    """

    def __init__(self, name: str, source_type: str):
        super().__init__(
            f"Type '{name}' derived from '{source_type}' collides with an "
            "existing type"
        )
        self.name = name
        self.source_type = source_type


class DuplicateTypeError(SchemaError):
    """Two definitions in a document share the same type name."""

    def __init__(self, name: str):
        super().__init__(f"Type '{name}' is defined more than once")
        self.name = name


class SchemaAugmentationError(SchemaError):
    """Augmentation aborted; nothing was installed into the schema.

    Carries every structural error found across the whole schema.
    """

    def __init__(self, message: str, errors: list[SchemaError] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "\n".join(f"  - {error}" for error in self.errors)
        return f"{self.message}\n{details}"


class SchemaLoadError(SchemaError):
    """Raised when a schema description cannot be loaded."""

    pass
