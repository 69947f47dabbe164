"""
Key Schema Registry

Immutable lookup table from configuration key name to its validator.
Unknown keys always validate successfully so that forward-compatible and
application-private settings pass through the cluster untouched.

Author: stormconf Project
License: MIT
"""

from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from .errors import SchemaViolation
from .keys import CATALOGUE, ConfigKey
from .validators import Validator


class KeySchemaRegistry:
    """
    Read-only mapping of key names to key descriptors.

    Built once from a fixed table; there is no way to add or replace keys
    after construction.
    """

    def __init__(self, descriptors: Iterable[ConfigKey]):
        """
        Initialize the registry.

        Args:
            descriptors: Key descriptors; names must be unique

        Raises:
            ValueError: If two descriptors share a name, or an accumulating
                key is not list-validated
        """
        table = {}
        for descriptor in descriptors:
            if descriptor.name in table:
                raise ValueError(f"Duplicate configuration key: {descriptor.name}")
            if descriptor.accumulates and (
                descriptor.validator is None or descriptor.validator.element is None
            ):
                raise ValueError(
                    f"Accumulating key '{descriptor.name}' needs a list validator"
                )
            table[descriptor.name] = descriptor

        self._table: Mapping[str, ConfigKey] = MappingProxyType(table)
        self._accumulator_keys = frozenset(
            name for name, descriptor in table.items() if descriptor.accumulates
        )

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    # Immutable: copies share the instance
    def __copy__(self) -> "KeySchemaRegistry":
        return self

    def __deepcopy__(self, memo) -> "KeySchemaRegistry":
        return self

    def __reduce__(self):
        # The process-wide registry pickles by reference to the module global
        if self is REGISTRY:
            return "REGISTRY"
        return (KeySchemaRegistry, (tuple(self._table.values()),))

    @property
    def accumulator_keys(self) -> frozenset:
        """Keys whose values are lists built by appending entries."""
        return self._accumulator_keys

    def descriptor(self, key: str) -> Optional[ConfigKey]:
        return self._table.get(key)

    def lookup(self, key: str) -> Optional[Validator]:
        """Return the validator bound to ``key``, or None for unknown/opaque keys."""
        descriptor = self._table.get(key)
        return descriptor.validator if descriptor else None

    def documentation(self, key: str) -> Optional[str]:
        descriptor = self._table.get(key)
        return descriptor.doc if descriptor else None

    def is_accumulator(self, key: str) -> bool:
        return key in self._accumulator_keys

    def validate(self, key: str, value: Any) -> Optional[SchemaViolation]:
        """
        Validate a single value against its key's validator.

        Args:
            key: Configuration key name
            value: Candidate value

        Returns:
            None on success, otherwise the SchemaViolation describing the
            failure. Unknown keys always succeed, and null is accepted for
            every key as "not set".
        """
        validator = self.lookup(key)
        if validator is None or value is None or validator(value):
            return None
        return SchemaViolation(key, validator.description, value)

    def check(self, key: str, value: Any) -> None:
        """Like validate(), but raise the violation."""
        violation = self.validate(key, value)
        if violation is not None:
            raise violation

    def validate_all(self, config: Mapping[str, Any]) -> List[SchemaViolation]:
        """Validate every recognized key of ``config``, in the map's key order."""
        violations = []
        for key, value in config.items():
            violation = self.validate(key, value)
            if violation is not None:
                violations.append(violation)
        return violations


REGISTRY = KeySchemaRegistry(CATALOGUE.values())
