"""
Unit Tests for Configuration Loading

Tests client settings, layered loading of defaults, cluster documents,
environment overrides and job settings, and error handling.

Author: stormconf Project
License: MIT
"""

import pytest
import yaml

from stormconf.config import keys
from stormconf.config.config_loader import (
    CLUSTER_CONFIG_ENV,
    ENV_OVERRIDES,
    ConfigLoader,
    load_config,
)
from stormconf.config.errors import (
    ConfigLoadError,
    ConfigValidationError,
    SchemaViolation,
    SealedConfigError,
)
from stormconf.config.serialization import load
from stormconf.config.settings import DEFAULTS_PATH, ClientSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove configuration variables inherited from the environment."""
    monkeypatch.delenv(CLUSTER_CONFIG_ENV, raising=False)
    for env_name in ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    for name in ClientSettings.model_fields:
        monkeypatch.delenv(f"STORMCONF_{name.upper()}", raising=False)


@pytest.fixture
def cluster_file(tmp_path):
    """Write a cluster operator document."""
    path = tmp_path / "cluster.yaml"
    path.write_text(yaml.safe_dump({
        "nimbus.host": "nimbus.example.com",
        "topology.workers": 2,
        "topology.kryo.register": ["ClusterType"],
    }))
    return path


class TestClientSettings:
    """Test suite for ClientSettings."""

    def test_defaults(self):
        """Test default settings."""
        settings = ClientSettings()

        assert settings.log_level == "INFO"
        assert settings.fail_fast is False
        assert settings.cluster_config_path is None
        assert settings.defaults_path == DEFAULTS_PATH

    def test_log_level_case_insensitive(self):
        """Test log levels are normalized to upper case."""
        assert ClientSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValueError):
            ClientSettings(log_level="VERBOSE")

    def test_invalid_document_path(self):
        """Test configuration documents must be YAML or JSON."""
        with pytest.raises(ValueError):
            ClientSettings(cluster_config_path="/etc/storm/cluster.ini")

    def test_from_env(self, monkeypatch):
        """Test settings read from STORMCONF_* variables."""
        monkeypatch.setenv("STORMCONF_LOG_LEVEL", "warning")
        monkeypatch.setenv("STORMCONF_FAIL_FAST", "true")
        monkeypatch.setenv("STORMCONF_CLUSTER_CONFIG_PATH", "/etc/storm/cluster.yaml")

        settings = ClientSettings.from_env(load_env_file=False)

        assert settings.log_level == "WARNING"
        assert settings.fail_fast is True
        assert settings.cluster_config_path == "/etc/storm/cluster.yaml"

    def test_from_env_ignores_empty(self, monkeypatch):
        """Test empty variables leave defaults in place."""
        monkeypatch.setenv("STORMCONF_LOG_LEVEL", "")

        assert ClientSettings.from_env(load_env_file=False).log_level == "INFO"


class TestConfigLoader:
    """Test suite for ConfigLoader class."""

    def test_defaults_only(self):
        """Test the packaged defaults load and seal cleanly."""
        loader = ConfigLoader(settings=ClientSettings())

        config = loader.load()

        assert config.sealed is True
        assert config[keys.NIMBUS_HOST] == "localhost"
        assert config[keys.STORM_ZOOKEEPER_SERVERS] == ["localhost"]
        assert config[keys.TOPOLOGY_WORKERS] == 1
        assert loader.config is config

    def test_defaults_cover_only_valid_values(self):
        """Test every default passes its key's validator."""
        loader = ConfigLoader(settings=ClientSettings())

        assert loader.cluster_config().validate() == []

    def test_cluster_and_job_layers(self, cluster_file):
        """Test cluster and job layers override defaults in order."""
        loader = ConfigLoader(str(cluster_file), settings=ClientSettings())

        config = loader.load({
            keys.TOPOLOGY_WORKERS: 6,
            keys.TOPOLOGY_KRYO_REGISTER: ["JobType"],
        })

        assert config[keys.NIMBUS_HOST] == "nimbus.example.com"
        assert config[keys.TOPOLOGY_WORKERS] == 6
        assert config[keys.TOPOLOGY_KRYO_REGISTER] == ["ClusterType", "JobType"]

    def test_cluster_path_from_settings(self, cluster_file):
        """Test the cluster document path can come from settings."""
        loader = ConfigLoader(settings=ClientSettings(cluster_config_path=str(cluster_file)))

        assert loader.load()[keys.NIMBUS_HOST] == "nimbus.example.com"

    def test_missing_cluster_file_skipped(self, tmp_path):
        """Test a missing cluster document leaves an empty layer."""
        loader = ConfigLoader(str(tmp_path / "missing.yaml"), settings=ClientSettings())

        assert loader.load_cluster() == {}
        assert loader.load()[keys.NIMBUS_HOST] == "localhost"

    def test_malformed_cluster_file(self, tmp_path):
        """Test an unparseable cluster document is reported."""
        path = tmp_path / "cluster.yaml"
        path.write_text("nimbus.host: [unclosed")
        loader = ConfigLoader(str(path), settings=ClientSettings())

        with pytest.raises(ConfigLoadError):
            loader.load()

    def test_env_overrides(self, monkeypatch):
        """Test environment variable overrides."""
        monkeypatch.setenv("STORM_NIMBUS_HOST", "nimbus-env")
        monkeypatch.setenv("STORM_ZOOKEEPER_SERVERS", "zk1, zk2")
        monkeypatch.setenv("STORM_SUPERVISOR_SLOTS_PORTS", "6700,6701")
        monkeypatch.setenv("STORM_TOPOLOGY_DEBUG", "yes")
        monkeypatch.setenv("STORM_TOPOLOGY_WORKERS", "3")

        config = ConfigLoader(settings=ClientSettings()).load()

        assert config[keys.NIMBUS_HOST] == "nimbus-env"
        assert config[keys.STORM_ZOOKEEPER_SERVERS] == ["zk1", "zk2"]
        assert config[keys.SUPERVISOR_SLOTS_PORTS] == [6700, 6701]
        assert config[keys.TOPOLOGY_DEBUG] is True
        assert config[keys.TOPOLOGY_WORKERS] == 3

    def test_job_overrides_env(self, monkeypatch, cluster_file):
        """Test job settings take precedence over the environment."""
        monkeypatch.setenv("STORM_TOPOLOGY_WORKERS", "3")
        loader = ConfigLoader(str(cluster_file), settings=ClientSettings())

        assert loader.load()[keys.TOPOLOGY_WORKERS] == 3
        assert loader.load({keys.TOPOLOGY_WORKERS: 9})[keys.TOPOLOGY_WORKERS] == 9

    def test_invalid_env_value(self, monkeypatch):
        """Test an unconvertible variable raises a load error."""
        monkeypatch.setenv("STORM_TOPOLOGY_WORKERS", "four")
        loader = ConfigLoader(settings=ClientSettings())

        with pytest.raises(ConfigLoadError, match="STORM_TOPOLOGY_WORKERS"):
            loader.load()

    def test_invalid_job_value(self):
        """Test all violations are reported by default."""
        loader = ConfigLoader(settings=ClientSettings())

        with pytest.raises(ConfigValidationError) as exc_info:
            loader.load({keys.TOPOLOGY_WORKERS: "four", keys.TOPOLOGY_DEBUG: "no"})

        assert exc_info.value.keys == [keys.TOPOLOGY_DEBUG, keys.TOPOLOGY_WORKERS]

    def test_fail_fast(self):
        """Test fail_fast stops at the first violation."""
        loader = ConfigLoader(settings=ClientSettings(fail_fast=True))

        with pytest.raises(SchemaViolation) as exc_info:
            loader.load({keys.TOPOLOGY_WORKERS: "four"})

        assert not isinstance(exc_info.value, ConfigValidationError)
        assert exc_info.value.key == keys.TOPOLOGY_WORKERS

    def test_load_unsealed(self):
        """Test loading without sealing leaves the map open."""
        config = ConfigLoader(settings=ClientSettings()).load(seal=False)

        assert config.sealed is False
        config[keys.TOPOLOGY_WORKERS] = 5

    def test_loaded_config_is_sealed(self):
        """Test the loaded configuration cannot be modified."""
        config = ConfigLoader(settings=ClientSettings()).load()

        with pytest.raises(SealedConfigError):
            config[keys.TOPOLOGY_WORKERS] = 5

    def test_save_and_load(self, tmp_path):
        """Test saving a configuration and loading it back."""
        loader = ConfigLoader(settings=ClientSettings())
        config = loader.load({"my.app.key": "value"})
        path = tmp_path / "saved.json"

        loader.save(config, str(path))

        assert load(path) == config

    def test_save_without_path(self):
        """Test saving needs a destination."""
        loader = ConfigLoader(settings=ClientSettings())

        with pytest.raises(ConfigLoadError):
            loader.save({})

    def test_reload_keeps_job(self, cluster_file):
        """Test reload picks up document changes and keeps the job layer."""
        loader = ConfigLoader(str(cluster_file), settings=ClientSettings())
        loader.load({keys.TOPOLOGY_KRYO_REGISTER: ["JobType"]})

        cluster_file.write_text(yaml.safe_dump({"nimbus.host": "nimbus-2.example.com"}))
        config = loader.reload()

        assert config[keys.NIMBUS_HOST] == "nimbus-2.example.com"
        assert config[keys.TOPOLOGY_KRYO_REGISTER] == ["JobType"]
        assert loader.config is config


class TestLoadConfig:
    """Test suite for load_config function."""

    def test_load_config(self, cluster_file):
        """Test the convenience loader."""
        config = load_config({keys.TOPOLOGY_WORKERS: 4}, str(cluster_file))

        assert config.sealed is True
        assert config[keys.TOPOLOGY_WORKERS] == 4
        assert config[keys.NIMBUS_HOST] == "nimbus.example.com"

    def test_load_config_from_env(self, monkeypatch, cluster_file):
        """Test the cluster document path from the environment."""
        monkeypatch.setenv(CLUSTER_CONFIG_ENV, str(cluster_file))

        config = load_config()

        assert config[keys.TOPOLOGY_KRYO_REGISTER] == ["ClusterType"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
