"""
Configuration Validators

A fixed library of value-shape predicates used by the key schema registry.
Each validator pairs a predicate with a human-readable description of the
shape it accepts. Validators only accept or reject; they never coerce.

Composite accumulator entries (serialization registrations, metrics
consumers) additionally know how to explain a rejection in terms of the
offending field, so malformed entries can be reported precisely.

Author: stormconf Project
License: MIT
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


Problem = Tuple[str, str]


@dataclass(frozen=True)
class Validator:
    """
    Value-shape predicate plus the description of what it accepts.

    Attributes:
        description: Expected shape, phrased to follow "must be"
        predicate: Returns True when a value has the expected shape
        element: Element validator, for list-shaped validators
        explain: Optional hook returning (field, reason) for a rejected value
    """

    description: str
    predicate: Callable[[Any], bool]
    element: Optional["Validator"] = None
    explain: Optional[Callable[[Any], Optional[Problem]]] = None

    def __call__(self, value: Any) -> bool:
        return self.predicate(value)

    def problem(self, value: Any) -> Optional[Problem]:
        """Return (field, reason) describing why value is rejected, if known."""
        if self.predicate(value):
            return None
        if self.explain is not None:
            return self.explain(value)
        return None

    def __repr__(self) -> str:
        return f"Validator({self.description!r})"


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid number setting
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_identifier(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


IS_STRING = Validator("a string", _is_string)
IS_NUMBER = Validator("a number", _is_number)
IS_INTEGER = Validator("an integer", _is_integer)
IS_BOOLEAN = Validator("a boolean", lambda value: isinstance(value, bool))
IS_MAP = Validator("a map", lambda value: isinstance(value, dict))
IDENTIFIER = Validator("a non-empty identifier string", _is_identifier)


def list_of(element: Validator) -> Validator:
    """Accept a list (or tuple) whose every element satisfies ``element``."""

    def predicate(value: Any) -> bool:
        return isinstance(value, (list, tuple)) and all(element(item) for item in value)

    return Validator(
        description=f"a list where each element is {element.description}",
        predicate=predicate,
        element=element,
    )


def one_of(*choices: Validator) -> Validator:
    """Accept a value satisfying any of ``choices``."""
    return Validator(
        description=" or ".join(choice.description for choice in choices),
        predicate=lambda value: any(choice(value) for choice in choices),
    )


def _is_power_of_two(value: Any) -> bool:
    return _is_integer(value) and value > 0 and value & (value - 1) == 0


POWER_OF_TWO = Validator("a positive integer power of two", _is_power_of_two)

STRINGS = list_of(IS_STRING)
NUMBERS = list_of(IS_NUMBER)
STRING_OR_STRING_LIST = one_of(IS_STRING, STRINGS)
NUMBER_OR_NUMBER_LIST = one_of(IS_NUMBER, NUMBERS)


# Serialization registrations

def _serialization_problem(value: Any) -> Optional[Problem]:
    if isinstance(value, str):
        return ("class", "class identifier must not be empty")
    if not isinstance(value, dict):
        return ("entry", f"expected identifier or single-pair map, got {type(value).__name__}")
    if len(value) != 1:
        return ("entry", f"map must hold exactly one class/serializer pair, got {len(value)}")
    klass, serializer = next(iter(value.items()))
    if not _is_identifier(klass):
        return ("class", "class identifier must be a non-empty string")
    if not _is_identifier(serializer):
        return (str(klass), "serializer identifier must be a non-empty string")
    return None


def _is_serialization_entry(value: Any) -> bool:
    if isinstance(value, str):
        return _is_identifier(value)
    return isinstance(value, dict) and _serialization_problem(value) is None


SERIALIZATION_ENTRY = Validator(
    description="a class identifier or a {class: serializer} map",
    predicate=_is_serialization_entry,
    explain=_serialization_problem,
)
SERIALIZATIONS = list_of(SERIALIZATION_ENTRY)


# Metrics consumer registrations

class MetricsConsumerRecord(BaseModel):
    """Record shape of a metrics consumer registration."""

    model_config = ConfigDict(extra="forbid", strict=True)

    class_name: str = Field(
        alias="class",
        min_length=1,
        description="Identifier of the metrics consumer implementation"
    )
    parallelism_hint: int = Field(
        alias="parallelism.hint",
        ge=1,
        description="Number of consumer executors to run"
    )
    argument: Any = Field(
        ...,
        description="Opaque argument handed to the consumer on startup; may be null"
    )

    @field_validator("class_name")
    @classmethod
    def validate_class_name(cls, v):
        """Reject blank identifiers."""
        if not v.strip():
            raise ValueError("class identifier must not be blank")
        return v


def _metrics_consumer_problem(value: Any) -> Optional[Problem]:
    if isinstance(value, str):
        if _is_identifier(value):
            return None
        return ("class", "class identifier must not be empty")
    if not isinstance(value, dict):
        return ("entry", f"expected identifier or record map, got {type(value).__name__}")
    try:
        MetricsConsumerRecord.model_validate(value)
    except ValidationError as e:
        error = e.errors()[0]
        loc = error.get("loc") or ("entry",)
        return (".".join(str(part) for part in loc), error.get("msg", "invalid"))
    return None


METRICS_CONSUMER_ENTRY = Validator(
    description="a class identifier or a {class, parallelism.hint, argument} record",
    predicate=lambda value: _metrics_consumer_problem(value) is None,
    explain=_metrics_consumer_problem,
)
METRICS_CONSUMERS = list_of(METRICS_CONSUMER_ENTRY)
