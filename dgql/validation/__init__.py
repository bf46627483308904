"""Schema validation rule registry.

Rule bodies live outside this package; they register themselves through
``register_validation_rule`` and run together via ``run_validation``.
"""

from .errors import ValidationError, ValidationResult
from .registry import (
    ValidationRule,
    ValidationRuleRegistry,
    default_registry,
    load_rule_modules,
    register_validation_rule,
    run_validation,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "ValidationRuleRegistry",
    "default_registry",
    "load_rule_modules",
    "register_validation_rule",
    "run_validation",
]
