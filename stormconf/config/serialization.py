"""
Configuration Serialization

Serialized form of a configuration map: a document mapping string keys to
scalars, lists and nested maps, exchanged as JSON or YAML between the
submitting client, the master and the workers. Key order and list order are
preserved so a sealed map round-trips unchanged.

Author: stormconf Project
License: MIT
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from .errors import ConfigLoadError
from .registry import REGISTRY, KeySchemaRegistry
from .store import ConfigMap, thaw

FORMATS = ("json", "yaml")

_SUFFIXES = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def _check_format(fmt: str) -> str:
    fmt = fmt.lower()
    if fmt not in FORMATS:
        raise ValueError(f"Unsupported configuration format '{fmt}', expected one of {FORMATS}")
    return fmt


def format_for_path(path: Union[str, Path]) -> str:
    """Infer the document format from a file suffix."""
    suffix = Path(path).suffix.lower()
    if suffix not in _SUFFIXES:
        raise ConfigLoadError(f"Cannot infer configuration format from '{path}'")
    return _SUFFIXES[suffix]


def dumps(conf: Mapping[str, Any], fmt: str = "json") -> str:
    """
    Serialize a configuration map.

    Args:
        conf: ConfigMap or plain mapping
        fmt: "json" or "yaml"

    Returns:
        Document text
    """
    fmt = _check_format(fmt)
    document = conf.to_dict() if isinstance(conf, ConfigMap) else thaw(dict(conf))
    if fmt == "json":
        return json.dumps(document, ensure_ascii=False)
    return yaml.safe_dump(document, default_flow_style=False, sort_keys=False, allow_unicode=True)


def parse_document(text: str, fmt: str = "json", source: str = "<string>") -> Dict[str, Any]:
    """
    Parse document text into a plain dict.

    Empty documents parse to an empty dict.

    Raises:
        ConfigLoadError: If the text cannot be parsed or the root is not a
            map with string keys
    """
    fmt = _check_format(fmt)
    try:
        if fmt == "json":
            data = json.loads(text) if text.strip() else None
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigLoadError(f"Failed to parse {fmt} configuration from {source}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Configuration root must be a map in {source}, got {type(data).__name__}"
        )
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise ConfigLoadError(f"Configuration keys must be strings in {source}: {bad_keys!r}")
    return data


def loads(text: str, fmt: str = "json", *, registry: KeySchemaRegistry = REGISTRY) -> ConfigMap:
    """Deserialize document text into a new open ConfigMap."""
    return ConfigMap(parse_document(text, fmt), registry=registry)


def read_document(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and parse a configuration document from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Unable to read configuration file {path}: {e}") from e
    return parse_document(text, format_for_path(path), source=str(path))


def load(path: Union[str, Path], *, registry: KeySchemaRegistry = REGISTRY) -> ConfigMap:
    """Read a configuration document into a new open ConfigMap."""
    return ConfigMap(read_document(path), registry=registry)


def dump(conf: Mapping[str, Any], path: Union[str, Path]) -> None:
    """Write a configuration map to disk; the format follows the suffix."""
    path = Path(path)
    text = dumps(conf, format_for_path(path))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
