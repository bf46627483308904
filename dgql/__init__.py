"""dgql - GraphQL schema augmentation for CRUD APIs."""

__version__ = "0.1.0"

# Re-export the main entry points for easy access
# Note: CLI components imported on-demand to avoid loading click for library use
from .core import augment_schema, ensure_scalars, stringify
from .validation import register_validation_rule, run_validation

__all__ = [
    "__version__",
    "augment_schema",
    "ensure_scalars",
    "register_validation_rule",
    "run_validation",
    "stringify",
]
