"""
Accumulator Operations

Helpers that build topology configuration through typed calls instead of raw
key assignment. Accumulators append one well-formed entry to a list-valued
key; setters replace a scalar value. Both validate their input at the call
site, so a malformed registration fails where it is made rather than when the
map is sealed.

Plugins (serializers, decorators, metrics consumers, hooks) are recorded as
string identifiers. A Python class may be passed for convenience and is
stored as its dotted ``module.QualName``; nothing is ever imported or loaded.

Author: stormconf Project
License: MIT
"""

from typing import Any, Optional, Union

from . import keys
from .errors import SealedConfigError
from .store import ConfigMap

PluginRef = Union[str, type]


def plugin_identifier(ref: PluginRef) -> str:
    """
    Return the string identifier for a plugin reference.

    Args:
        ref: Identifier string or class

    Returns:
        The identifier unchanged, or the class's dotted qualified name
    """
    if isinstance(ref, type):
        return f"{ref.__module__}.{ref.__qualname__}"
    return ref


def _set(conf: ConfigMap, key: str, value: Any) -> ConfigMap:
    if conf.sealed:
        raise SealedConfigError(f"Cannot set '{key}' on a sealed configuration")
    conf.registry.check(key, value)
    return conf.set(key, value)


# Accumulators

def add_serialization(
    conf: ConfigMap,
    klass: PluginRef,
    serializer: Optional[PluginRef] = None
) -> ConfigMap:
    """
    Register a type with the serialization engine.

    Args:
        conf: Open configuration map
        klass: Type to register
        serializer: Optional custom serializer for the type

    Returns:
        conf
    """
    entry: Any = plugin_identifier(klass)
    if serializer is not None:
        entry = {entry: plugin_identifier(serializer)}
    return conf.append(keys.TOPOLOGY_KRYO_REGISTER, entry)


def add_decorator(conf: ConfigMap, klass: PluginRef) -> ConfigMap:
    """Register a decorator applied to the serialization engine."""
    return conf.append(keys.TOPOLOGY_KRYO_DECORATORS, plugin_identifier(klass))


def add_metrics_consumer(
    conf: ConfigMap,
    klass: PluginRef,
    argument: Any = None,
    parallelism_hint: int = 1
) -> ConfigMap:
    """
    Register a metrics consumer.

    Args:
        conf: Open configuration map
        klass: Metrics consumer implementation
        argument: Opaque argument handed to the consumer
        parallelism_hint: Number of consumer executors

    Returns:
        conf
    """
    entry = {
        "class": plugin_identifier(klass),
        "parallelism.hint": parallelism_hint,
        "argument": argument,
    }
    return conf.append(keys.TOPOLOGY_METRICS_CONSUMER_REGISTER, entry)


def add_task_hook(conf: ConfigMap, klass: PluginRef) -> ConfigMap:
    """Register a hook attached to every task of the topology."""
    return conf.append(keys.TOPOLOGY_AUTO_TASK_HOOKS, plugin_identifier(klass))


# Setters

def set_debug(conf: ConfigMap, is_on: bool) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_DEBUG, is_on)


def set_num_workers(conf: ConfigMap, workers: int) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_WORKERS, workers)


def set_num_ackers(conf: ConfigMap, num_executors: int) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_ACKER_EXECUTORS, num_executors)


def set_message_timeout_secs(conf: ConfigMap, secs: int) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_MESSAGE_TIMEOUT_SECS, secs)


def set_kryo_factory(conf: ConfigMap, klass: PluginRef) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_KRYO_FACTORY, plugin_identifier(klass))


def set_skip_missing_kryo_registrations(conf: ConfigMap, skip: bool) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_SKIP_MISSING_KRYO_REGISTRATIONS, skip)


def set_max_task_parallelism(conf: ConfigMap, maximum: int) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_MAX_TASK_PARALLELISM, maximum)


def set_max_spout_pending(conf: ConfigMap, maximum: int) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_MAX_SPOUT_PENDING, maximum)


def set_stats_sample_rate(conf: ConfigMap, rate: float) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_STATS_SAMPLE_RATE, rate)


def set_fall_back_on_java_serialization(conf: ConfigMap, fallback: bool) -> ConfigMap:
    return _set(conf, keys.TOPOLOGY_FALL_BACK_ON_JAVA_SERIALIZATION, fallback)
