"""Built-in scalar types supported by every generated schema."""

from enum import Enum

from .logging import get_logger
from .schema import Schema, SchemaDocument, TypeDefinition, TypeKind

logger = get_logger(__name__)


class SupportedScalar(str, Enum):
    """Scalars every schema gets, whether or not the author declared them."""

    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    BOOLEAN = "Boolean"
    ID = "ID"
    DATETIME = "DateTime"


def ensure_scalars(target: SchemaDocument | Schema) -> list[str]:
    """Add every supported scalar that ``target`` does not define yet.

    Works on a document (definitions are appended) or on a built schema
    (types are added). Names that are already taken are left alone, so
    calling this repeatedly is a no-op after the first call.

    Args:
        target: Schema document or schema to extend in place

    Returns:
        Names of the scalars that were added
    """
    if isinstance(target, SchemaDocument):
        existing = target.names()
    else:
        existing = set(target.types)
    added = []

    for scalar in SupportedScalar:
        if scalar.value in existing:
            continue
        definition = TypeDefinition(kind=TypeKind.SCALAR, name=scalar.value)
        if isinstance(target, SchemaDocument):
            target.definitions.append(definition)
        else:
            target.types[scalar.value] = definition
        added.append(scalar.value)

    if added:
        logger.debug("Built-in scalars added", scalars=added)
    return added
