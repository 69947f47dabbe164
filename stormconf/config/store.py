"""
Configuration Store

The working configuration map of a topology: an ordered, heterogeneous
key/value container with two states.

- Open: values may be set, replaced, removed and appended to.
- Sealed: every recognized key has been validated and the map, including
  nested lists and maps, is frozen for the lifetime of the job.

Layered merge composes defaults, cluster and job sources into a new map.
Later sources replace earlier values, except for accumulator keys whose
lists concatenate in source order.

Author: stormconf Project
License: MIT
"""

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Iterator, List, Optional

from ..utils.logger import get_logger
from .errors import MalformedEntry, SchemaViolation, SealedConfigError, ConfigValidationError
from .registry import REGISTRY, KeySchemaRegistry

logger = get_logger(__name__)


class FrozenList(list):
    """List that rejects every mutation; compares equal to a plain list."""

    def _immutable(self, *args, **kwargs):
        raise SealedConfigError("Sealed configuration values cannot be modified")

    append = extend = insert = remove = pop = clear = sort = reverse = _immutable
    __setitem__ = __delitem__ = __iadd__ = __imul__ = _immutable

    def __reduce__(self):
        return (FrozenList, (list(self),))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return thaw(self)


class FrozenDict(dict):
    """Dict that rejects every mutation; compares equal to a plain dict."""

    def _immutable(self, *args, **kwargs):
        raise SealedConfigError("Sealed configuration values cannot be modified")

    __setitem__ = __delitem__ = __ior__ = _immutable
    clear = pop = popitem = setdefault = update = _immutable

    def __reduce__(self):
        return (FrozenDict, (dict(self),))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return thaw(self)


def freeze(value: Any) -> Any:
    """Recursively convert lists and maps into their frozen counterparts."""
    if isinstance(value, dict):
        return FrozenDict((k, freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return FrozenList(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Return a plain, independent deep copy of a configuration value."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return copy.deepcopy(value)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return list(value)
    return [value]


class ConfigMap(MutableMapping):
    """
    Topology configuration map.

    The map owns its entries: values are copied in on assignment and copied
    out by to_dict(), so no caller shares mutable state with it.
    """

    def __init__(
        self,
        initial: Optional[Mapping[str, Any]] = None,
        *,
        registry: KeySchemaRegistry = REGISTRY
    ):
        """
        Initialize an open configuration map.

        Args:
            initial: Optional source map whose entries are copied in
            registry: Key schema registry used for validation
        """
        self._registry = registry
        self._entries: Dict[str, Any] = {}
        self._sealed = False
        if initial is not None:
            for key, value in initial.items():
                self[key] = value

    @property
    def registry(self) -> KeySchemaRegistry:
        return self._registry

    @property
    def sealed(self) -> bool:
        """True once the map has been validated and frozen."""
        return self._sealed

    def _ensure_open(self) -> None:
        if self._sealed:
            raise SealedConfigError("Configuration is sealed and can no longer be modified")

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._ensure_open()
        if not isinstance(key, str):
            raise TypeError(f"Configuration keys must be strings, got {type(key).__name__}")
        self._entries[key] = thaw(value)

    def __delitem__(self, key: str) -> None:
        self._ensure_open()
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._ensure_open()
        self._entries.clear()

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"ConfigMap({self._entries!r}, {state})"

    def __reduce__(self):
        return (_rebuild, (self.to_dict(), self._registry, self._sealed))

    def __deepcopy__(self, memo) -> "ConfigMap":
        return _rebuild(self.to_dict(), self._registry, self._sealed)

    # Operations

    def set(self, key: str, value: Any) -> "ConfigMap":
        """Set a value, replacing any previous one. Returns self for chaining."""
        self[key] = value
        return self

    def append(self, key: str, entry: Any) -> "ConfigMap":
        """
        Append one entry to the list stored under ``key``.

        The entry is validated against the key's element validator before it
        is stored. A missing key starts a new list; the stored list is
        replaced, never mutated in place.

        Args:
            key: Configuration key name
            entry: Entry to append

        Returns:
            self

        Raises:
            SealedConfigError: If the map is sealed
            MalformedEntry: If a composite entry has a missing or mistyped field
            SchemaViolation: If the entry does not have the element shape
        """
        self._ensure_open()

        validator = self._registry.lookup(key)
        element = validator.element if validator is not None else None
        if element is not None and not element(entry):
            problem = element.problem(entry)
            if problem is not None:
                field, reason = problem
                raise MalformedEntry(key, field, element.description, entry, reason)
            raise SchemaViolation(key, element.description, entry)

        entries = _as_list(self._entries.get(key))
        entries.append(thaw(entry))
        self._entries[key] = entries
        logger.debug(f"Appended entry #{len(entries)} to '{key}'")
        return self

    def validate(self) -> List[SchemaViolation]:
        """Return every schema violation without changing state."""
        return self._registry.validate_all(self._entries)

    def seal(self, *, collect: bool = True) -> "ConfigMap":
        """
        Validate every recognized key and freeze the map.

        Sealing a sealed map is a no-op.

        Args:
            collect: Report all violations at once (True) or raise on the
                first one (False)

        Returns:
            self, now sealed

        Raises:
            ConfigValidationError: If collect is True and any key is invalid
            SchemaViolation: If collect is False and a key is invalid
        """
        if self._sealed:
            return self

        violations = []
        for key, value in self._entries.items():
            violation = self._registry.validate(key, value)
            if violation is None:
                continue
            logger.warning(f"Schema violation: {violation}")
            if not collect:
                raise violation
            violations.append(violation)

        if violations:
            raise ConfigValidationError(violations)

        self._entries = {key: freeze(value) for key, value in self._entries.items()}
        self._sealed = True
        logger.debug(f"Sealed configuration with {len(self._entries)} keys")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain, deep-copied dict of the entries."""
        return {key: thaw(value) for key, value in self._entries.items()}

    def copy(self) -> "ConfigMap":
        """Return a new open map holding a deep copy of the entries."""
        return ConfigMap(self._entries, registry=self._registry)


def _rebuild(entries: Dict[str, Any], registry: KeySchemaRegistry, sealed: bool) -> ConfigMap:
    """Recreate a map from plain entries, resealing it if it was sealed."""
    conf = ConfigMap(entries, registry=registry)
    if sealed:
        conf.seal()
    return conf


def merge(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
    *,
    registry: KeySchemaRegistry = REGISTRY
) -> ConfigMap:
    """
    Merge two configuration sources into a new open map.

    For every key in ``overlay``: accumulator keys concatenate the base list
    with the overlay list (bare values count as single-element lists, base
    entries first); a null overlay value adds nothing and leaves the base
    value as it was. All other keys take the overlay value. Keys only in
    ``base`` are carried through. Neither input is modified.

    Args:
        base: Lower-priority source
        overlay: Higher-priority source
        registry: Registry deciding which keys accumulate

    Returns:
        New open ConfigMap
    """
    result = ConfigMap(base, registry=registry)
    for key, value in overlay.items():
        if registry.is_accumulator(key):
            if value is None:
                # null adds no entries; keep the base value
                result.setdefault(key, None)
                continue
            result[key] = _as_list(result.get(key)) + _as_list(thaw(value))
        else:
            result[key] = value
    logger.debug(f"Merged {len(overlay)} overlay keys onto {len(base)} base keys")
    return result


def merge_layers(
    *layers: Optional[Mapping[str, Any]],
    registry: KeySchemaRegistry = REGISTRY
) -> ConfigMap:
    """
    Fold ``merge`` over layers from lowest to highest priority.

    The standard order is defaults, cluster, job. ``None`` layers are skipped.
    """
    result = ConfigMap(registry=registry)
    for layer in layers:
        if layer is None:
            continue
        result = merge(result, layer, registry=registry)
    return result
