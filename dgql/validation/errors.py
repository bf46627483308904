"""Error and result data structures for schema validation rules.

Rules report at most one ``ValidationError`` each; the registry collects
them into a ``ValidationResult``.
"""

from dataclasses import dataclass, field


@dataclass
class ValidationError:
    """Represents a problem reported by a validation rule.

    Contains enough context (type and field) to help schema authors
    locate and fix the issue.
    """

    message: str
    rule: str | None = None
    type_name: str | None = None
    field: str | None = None
    help: str | None = None

    def __str__(self) -> str:
        """Return a formatted string representation of the error."""
        parts = [f"{self.rule or 'validation'}: {self.message}"]

        if self.type_name:
            parts.append(f"(type: {self.type_name})")
        if self.field:
            parts.append(f"(field: {self.field})")
        if self.help:
            parts.append(f"Help: {self.help}")

        return " ".join(parts)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "rule": self.rule,
            "message": self.message,
            "type": self.type_name,
            "field": self.field,
            "help": self.help,
        }


@dataclass
class ValidationResult:
    """Outcome of running every registered rule over a schema."""

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        """Number of validation errors."""
        return len(self.errors)

    def __str__(self) -> str:
        """Return a formatted string representation of the validation result."""
        if self.is_valid:
            return "✅ Valid"

        lines = [f"❌ Invalid ({self.error_count} errors)", "", "Errors:"]
        lines.extend(f"  - {error}" for error in self.errors)
        return "\n".join(lines)
