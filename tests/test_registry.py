"""
Unit Tests for the Key Schema Registry

Tests key lookup, per-key validation, pass-through of unknown keys and the
structure of the key catalogue.

Author: stormconf Project
License: MIT
"""

import pytest

from stormconf.config import keys
from stormconf.config.errors import SchemaViolation
from stormconf.config.keys import CATALOGUE, ConfigKey
from stormconf.config.registry import REGISTRY, KeySchemaRegistry
from stormconf.config.validators import IS_NUMBER, IS_STRING, STRINGS


# One accepted and one rejected sample per validator kind
SAMPLES = [
    (keys.STORM_ZOOKEEPER_ROOT, "/storm", 42),
    (keys.TOPOLOGY_WORKERS, 4, "four"),
    (keys.TOPOLOGY_DEBUG, True, "yes"),
    (keys.SUPERVISOR_SCHEDULER_META, {"rack": "r1"}, ["rack"]),
    (keys.STORM_ZOOKEEPER_SERVERS, ["zk1", "zk2"], "zk1"),
    (keys.SUPERVISOR_SLOTS_PORTS, [6700, 6701], [6700, "6701"]),
    (keys.TOPOLOGY_EXECUTOR_RECEIVE_BUFFER_SIZE, 1024, 1000),
    (keys.WORKER_CHILDOPTS, ["-Xmx1g", "-Dx=y"], {"opts": "-Xmx1g"}),
    (keys.TOPOLOGY_KRYO_REGISTER, ["Foo", {"Bar": "BarSerializer"}], ["Foo", {"Bar": 1}]),
    (
        keys.TOPOLOGY_METRICS_CONSUMER_REGISTER,
        [{"class": "M", "parallelism.hint": 2, "argument": None}],
        [{"class": "M", "parallelism.hint": "2"}],
    ),
    (keys.ADAPTIVE_SCHEDULER_GRADIENTSTEP_RETRY_MAX_COUNTER, 3, 3.5),
]


class TestRegistryValidation:
    """Test suite for KeySchemaRegistry.validate."""

    @pytest.mark.parametrize("key,good,bad", SAMPLES)
    def test_accepts_and_rejects(self, key, good, bad):
        """Test validate succeeds iff the key's validator holds."""
        validator = REGISTRY.lookup(key)

        assert validator(good) is True
        assert REGISTRY.validate(key, good) is None

        assert validator(bad) is False
        violation = REGISTRY.validate(key, bad)
        assert isinstance(violation, SchemaViolation)
        assert violation.key == key
        assert violation.expected == validator.description
        assert violation.value == bad

    def test_violation_names_key_and_type(self):
        """Test violations carry the key, expected shape and actual type."""
        violation = REGISTRY.validate(keys.TOPOLOGY_WORKERS, "four")

        assert violation.actual_type == "string"
        assert violation.expected == "a number"
        assert "topology.workers" in str(violation)
        assert "'four'" in str(violation)

    def test_unknown_keys_pass_through(self):
        """Test unrecognized keys always validate."""
        assert REGISTRY.lookup("my.app.batch.size") is None
        assert REGISTRY.validate("my.app.batch.size", object()) is None
        assert REGISTRY.validate("my.app.batch.size", None) is None

    def test_null_is_accepted(self):
        """Test null means unset for every recognized key."""
        assert REGISTRY.validate(keys.TOPOLOGY_WORKERS, None) is None
        assert REGISTRY.validate(keys.TOPOLOGY_KRYO_REGISTER, None) is None

    def test_check_raises(self):
        """Test check raises the violation."""
        REGISTRY.check(keys.NIMBUS_HOST, "nimbus.example.com")
        with pytest.raises(SchemaViolation) as exc_info:
            REGISTRY.check(keys.NIMBUS_HOST, 10)
        assert exc_info.value.key == keys.NIMBUS_HOST

    def test_validate_all_in_key_order(self):
        """Test validate_all reports every violation in map order."""
        config = {
            keys.TOPOLOGY_WORKERS: "four",
            keys.NIMBUS_HOST: "localhost",
            "my.app.key": 1,
            keys.TOPOLOGY_DEBUG: "true",
        }

        violations = REGISTRY.validate_all(config)

        assert [v.key for v in violations] == [keys.TOPOLOGY_WORKERS, keys.TOPOLOGY_DEBUG]


class TestRegistryLookup:
    """Test suite for registry lookups and catalogue structure."""

    def test_lookup(self):
        """Test lookup returns the bound validator."""
        assert REGISTRY.lookup(keys.TOPOLOGY_WORKERS) is IS_NUMBER
        assert REGISTRY.lookup(keys.NIMBUS_HOST) is IS_STRING

    def test_key_constants_are_names(self):
        """Test key constants hold the wire names."""
        assert keys.TOPOLOGY_WORKERS == "topology.workers"
        assert keys.TOPOLOGY_KRYO_REGISTER == "topology.kryo.register"
        assert keys.TOPOLOGY_METRICS_CONSUMER_REGISTER == "topology.metrics.consumer.register"
        assert keys.WORKER_RECEIVER_THREAD_COUNT == "topology.worker.receiver.thread.count"

    def test_registry_covers_catalogue(self):
        """Test the registry holds every catalogued key."""
        assert len(REGISTRY) == len(CATALOGUE)
        assert set(REGISTRY) == set(CATALOGUE)
        assert keys.TOPOLOGY_WORKERS in REGISTRY
        assert "my.app.key" not in REGISTRY

    def test_every_key_documented(self):
        """Test every key has a validator and documentation."""
        for name in REGISTRY:
            descriptor = REGISTRY.descriptor(name)
            assert descriptor.name == name
            assert descriptor.validator is not None
            assert REGISTRY.documentation(name)

    def test_accumulator_keys(self):
        """Test the list-valued registration keys are accumulators."""
        assert REGISTRY.accumulator_keys == frozenset({
            keys.TOPOLOGY_KRYO_REGISTER,
            keys.TOPOLOGY_KRYO_DECORATORS,
            keys.TOPOLOGY_METRICS_CONSUMER_REGISTER,
            keys.TOPOLOGY_AUTO_TASK_HOOKS,
        })
        assert REGISTRY.is_accumulator(keys.TOPOLOGY_KRYO_REGISTER) is True
        assert REGISTRY.is_accumulator(keys.TOPOLOGY_WORKERS) is False

    def test_duplicate_keys_rejected(self):
        """Test a registry cannot hold the same key twice."""
        descriptor = ConfigKey("a.b", IS_STRING, "doc")
        with pytest.raises(ValueError, match="Duplicate"):
            KeySchemaRegistry([descriptor, descriptor])

    def test_accumulator_needs_list_validator(self):
        """Test accumulating keys must be list-validated."""
        with pytest.raises(ValueError, match="list validator"):
            KeySchemaRegistry([ConfigKey("a.b", IS_STRING, "doc", accumulates=True)])

    def test_custom_registry(self):
        """Test a registry built from custom descriptors."""
        registry = KeySchemaRegistry([
            ConfigKey("app.hosts", STRINGS, "Hosts", accumulates=True),
            ConfigKey("app.port", IS_NUMBER, "Port"),
        ])

        assert len(registry) == 2
        assert registry.accumulator_keys == frozenset({"app.hosts"})
        assert registry.validate("app.port", "80") is not None

    def test_descriptor_is_frozen(self):
        """Test key descriptors cannot be altered."""
        descriptor = REGISTRY.descriptor(keys.TOPOLOGY_WORKERS)
        with pytest.raises(Exception):
            descriptor.name = "topology.workers.count"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
