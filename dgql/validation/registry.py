"""Registry of named schema validation rules.

A rule is a pure function of the schema that returns a ``ValidationError``
or ``None``. Rules run in registration order and every rule always runs;
a failing rule never stops the others.

Rule modules register into the process-wide default registry when they
are imported::

    from dgql.validation import register_validation_rule

    @register_validation_rule("no_empty_types")
    def no_empty_types(schema):
        ...

Pipelines that want isolation build their own ``ValidationRuleRegistry``.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
import importlib

from ..core.logging import SchemaOperationLogger, get_logger
from ..core.schema import Schema
from .errors import ValidationError, ValidationResult

logger = get_logger(__name__)

RuleCheck = Callable[[Schema], ValidationError | None]


@dataclass(frozen=True)
class ValidationRule:
    """A named schema check."""

    name: str
    check: RuleCheck


class ValidationRuleRegistry:
    """Ordered, append-only collection of validation rules."""

    def __init__(self) -> None:
        self._rules: list[ValidationRule] = []

    def register(self, name: str, check: RuleCheck) -> ValidationRule:
        """Append a rule; it runs after every rule registered before it.

        Args:
            name: Rule name, stamped onto the errors it reports
            check: Function returning an error or None

        Returns:
            The registered rule
        """
        rule = ValidationRule(name=name, check=check)
        self._rules.append(rule)
        logger.debug("Validation rule registered", rule=name, position=len(self._rules))
        return rule

    def rule(self, name: str) -> Callable[[RuleCheck], RuleCheck]:
        """Decorator form of ``register``; returns the function unchanged."""

        def decorator(check: RuleCheck) -> RuleCheck:
            self.register(name, check)
            return check

        return decorator

    @property
    def rules(self) -> list[ValidationRule]:
        return list(self._rules)

    @property
    def names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def __len__(self) -> int:
        return len(self._rules)

    def run_all(self, schema: Schema) -> list[ValidationError]:
        """Run every rule against ``schema`` and collect the reported errors.

        Args:
            schema: Schema to check; rules must not modify it

        Returns:
            Errors in rule order; an empty list means the schema passed
        """
        errors: list[ValidationError] = []

        with SchemaOperationLogger(logger, "run_validation"):
            for rule in self._rules:
                error = rule.check(schema)
                if error is None:
                    continue
                if error.rule is None:
                    error = replace(error, rule=rule.name)
                logger.debug("Validation rule failed", rule=rule.name, error=str(error))
                errors.append(error)

        return errors

    def validate(self, schema: Schema) -> ValidationResult:
        """Run every rule and wrap the outcome in a ``ValidationResult``."""
        return ValidationResult(errors=self.run_all(schema))


# Process-wide registry populated by rule modules at import time
default_registry = ValidationRuleRegistry()


def register_validation_rule(
    name: str, check: RuleCheck | None = None
) -> RuleCheck | Callable[[RuleCheck], RuleCheck]:
    """Register a rule in the default registry.

    Usable as a plain call ``register_validation_rule(name, check)`` or as
    a decorator ``@register_validation_rule(name)``.
    """
    if check is None:
        return default_registry.rule(name)
    default_registry.register(name, check)
    return check


def run_validation(schema: Schema) -> list[ValidationError]:
    """Run the default registry's rules against ``schema``."""
    return default_registry.run_all(schema)


def load_rule_modules(module_names: Iterable[str]) -> list[str]:
    """Import rule modules so their registrations reach the default registry.

    Args:
        module_names: Dotted module paths

    Returns:
        Names of the modules imported

    Raises:
        ImportError: If a module cannot be imported
    """
    loaded = []
    for module_name in module_names:
        importlib.import_module(module_name)
        loaded.append(module_name)
        logger.info("Validation rule module loaded", module=module_name)
    return loaded
