"""
Configuration Errors

Exception types raised while validating, composing and loading topology
configuration maps.

Author: stormconf Project
License: MIT
"""

from typing import Any, List, Optional


def type_tag(value: Any) -> str:
    """Return a short type tag for a configuration value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "map"
    if isinstance(value, (list, tuple)):
        return "list"
    return type(value).__name__


class ConfigError(ValueError):
    """Base class for configuration errors."""


class SchemaViolation(ConfigError):
    """A recognized key holds a value that does not satisfy its validator."""

    def __init__(self, key: str, expected: str, value: Any, message: Optional[str] = None):
        self.key = key
        self.expected = expected
        self.value = value
        self.actual_type = type_tag(value)
        super().__init__(
            message
            or f"'{key}' must be {expected}, got {self.actual_type}: {value!r}"
        )


class MalformedEntry(SchemaViolation):
    """A composite accumulator entry is missing a field or has a mistyped one."""

    def __init__(self, key: str, field: str, expected: str, value: Any, reason: str = ""):
        self.field = field
        detail = f" ({reason})" if reason else ""
        super().__init__(
            key,
            expected,
            value,
            message=f"Malformed entry for '{key}': field '{field}'{detail}; "
                    f"expected {expected}, got {value!r}",
        )


class ConfigValidationError(ConfigError):
    """Raised by seal() when one or more recognized keys are invalid."""

    def __init__(self, violations: List[SchemaViolation]):
        self.violations = list(violations)
        lines = "\n".join(f"  - {v}" for v in self.violations)
        super().__init__(
            f"Configuration has {len(self.violations)} schema violation(s):\n{lines}"
        )

    @property
    def keys(self) -> List[str]:
        return [v.key for v in self.violations]


class SealedConfigError(ConfigError, TypeError):
    """Attempted mutation of a sealed configuration map."""


class ConfigLoadError(ConfigError):
    """A configuration document could not be read or parsed."""
