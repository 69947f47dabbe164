"""
Configuration Loader

Assembles the layered topology configuration: the packaged defaults
document, the cluster operator document, environment variable overrides and
finally the job's own settings. The result is sealed before it is handed on.

Author: stormconf Project
License: MIT
"""

import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..utils.logger import get_logger
from . import keys
from .errors import ConfigLoadError
from .serialization import dump, read_document
from .settings import ENV_PREFIX, ClientSettings
from .store import ConfigMap, merge_layers

logger = get_logger(__name__)

CLUSTER_CONFIG_ENV = f"{ENV_PREFIX}CLUSTER_CONFIG"


def _to_int(raw: str) -> int:
    return int(raw.strip())


def _to_bool(raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _to_strings(raw: str) -> list:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _to_ints(raw: str) -> list:
    return [int(item) for item in _to_strings(raw)]


# Environment variable -> (configuration key, converter)
ENV_OVERRIDES: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "STORM_ZOOKEEPER_SERVERS": (keys.STORM_ZOOKEEPER_SERVERS, _to_strings),
    "STORM_ZOOKEEPER_PORT": (keys.STORM_ZOOKEEPER_PORT, _to_int),
    "STORM_LOCAL_DIR": (keys.STORM_LOCAL_DIR, str),
    "STORM_LOCAL_HOSTNAME": (keys.STORM_LOCAL_HOSTNAME, str),
    "STORM_NIMBUS_HOST": (keys.NIMBUS_HOST, str),
    "STORM_NIMBUS_THRIFT_PORT": (keys.NIMBUS_THRIFT_PORT, _to_int),
    "STORM_SUPERVISOR_SLOTS_PORTS": (keys.SUPERVISOR_SLOTS_PORTS, _to_ints),
    "STORM_TOPOLOGY_WORKERS": (keys.TOPOLOGY_WORKERS, _to_int),
    "STORM_TOPOLOGY_DEBUG": (keys.TOPOLOGY_DEBUG, _to_bool),
    "STORM_ADAPTIVE_SCHEDULER_ENABLED": (keys.ADAPTIVE_SCHEDULER_ENABLED, _to_bool),
}


class ConfigLoader:
    """
    Layered configuration loader.

    Layers, lowest priority first: defaults document, cluster operator
    document, environment overrides, job settings.
    """

    def __init__(
        self,
        cluster_config_path: Optional[str] = None,
        settings: Optional[ClientSettings] = None
    ):
        """
        Initialize the configuration loader.

        Args:
            cluster_config_path: Cluster operator document. If None, uses the
                settings value or the STORMCONF_CLUSTER_CONFIG variable.
            settings: Client settings. If None, read from the environment.
        """
        self.settings = settings or ClientSettings.from_env()
        self.cluster_config_path = (
            cluster_config_path
            or self.settings.cluster_config_path
            or os.getenv(CLUSTER_CONFIG_ENV)
        )
        self._config: Optional[ConfigMap] = None
        self._job: Optional[Mapping[str, Any]] = None

    def load_defaults(self) -> Dict[str, Any]:
        """
        Load the defaults document.

        Returns:
            Dictionary with default configuration values

        Raises:
            ConfigLoadError: If the defaults document is missing or invalid
        """
        return read_document(self.settings.defaults_path)

    def load_cluster(self) -> Dict[str, Any]:
        """
        Load the cluster operator document.

        A missing document is not an error; the layer is simply empty.
        """
        if not self.cluster_config_path:
            return {}

        path = Path(self.cluster_config_path)
        if not path.exists():
            logger.warning(f"Cluster configuration not found, skipping: {path}")
            return {}
        return read_document(path)

    def env_overrides(self) -> Dict[str, Any]:
        """
        Collect configuration overrides from environment variables.

        Returns:
            Dictionary keyed by configuration key

        Raises:
            ConfigLoadError: If a variable cannot be converted
        """
        overrides = {}
        for env_name, (key, convert) in ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if not raw:
                continue
            try:
                overrides[key] = convert(raw)
            except ValueError as e:
                raise ConfigLoadError(f"Invalid value for {env_name} ({key}): {e}") from e
        return overrides

    def cluster_config(self) -> ConfigMap:
        """Merge defaults, cluster document and environment into an open map."""
        return merge_layers(self.load_defaults(), self.load_cluster(), self.env_overrides())

    def load(self, job: Optional[Mapping[str, Any]] = None, seal: bool = True) -> ConfigMap:
        """
        Load the full layered configuration.

        Args:
            job: Job-level settings, the highest-priority layer
            seal: Validate and freeze the result

        Returns:
            Merged ConfigMap, sealed unless ``seal`` is False

        Raises:
            ConfigLoadError: If a document cannot be loaded
            ConfigValidationError: If sealing finds violations
        """
        config = merge_layers(
            self.load_defaults(),
            self.load_cluster(),
            self.env_overrides(),
            job,
        )
        if seal:
            config.seal(collect=not self.settings.fail_fast)

        self._config = config
        self._job = job
        logger.info(
            f"Configuration loaded with {len(config)} keys"
            + (f" (cluster: {self.cluster_config_path})" if self.cluster_config_path else "")
        )
        return config

    def save(self, config: Mapping[str, Any], path: Optional[str] = None) -> None:
        """
        Save configuration to a YAML or JSON document.

        Args:
            config: Configuration to save
            path: Destination (uses the cluster document path if None)
        """
        save_path = path or self.cluster_config_path
        if not save_path:
            raise ConfigLoadError("No path given to save configuration to")
        dump(config, save_path)
        logger.info(f"Configuration saved to {save_path}")

    def reload(self) -> ConfigMap:
        """Reload configuration from the documents, keeping the last job layer."""
        return self.load(self._job)

    @property
    def config(self) -> Optional[ConfigMap]:
        """Get the most recently loaded configuration."""
        return self._config


def load_config(
    job: Optional[Mapping[str, Any]] = None,
    cluster_config_path: Optional[str] = None
) -> ConfigMap:
    """
    Convenience function to load a sealed configuration.

    Args:
        job: Optional job-level settings
        cluster_config_path: Optional cluster operator document

    Returns:
        Sealed ConfigMap
    """
    loader = ConfigLoader(cluster_config_path)
    return loader.load(job)
