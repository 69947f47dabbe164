"""
Client Settings

Pydantic model for the settings of the configuration client itself: where
the defaults and cluster documents live, how logging is set up and how seal
reports violations. Values come from STORMCONF_* environment variables,
optionally provided through a .env file.

Author: stormconf Project
License: MIT
"""

import os
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "STORMCONF_"

DEFAULTS_PATH = str(Path(__file__).with_name("defaults.yaml"))


class LogLevel(str, Enum):
    """Logging level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ClientSettings(BaseModel):
    """Settings of the configuration client."""

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Client logging level"
    )
    log_json: bool = Field(
        default=False,
        description="Emit log records as JSON"
    )
    log_to_file: bool = Field(
        default=False,
        description="Also write logs to a rotating file"
    )
    log_file_path: str = Field(
        default="logs/stormconf.log",
        description="Path of the log file when file logging is enabled"
    )
    defaults_path: str = Field(
        default=DEFAULTS_PATH,
        description="Defaults document, the lowest-priority layer"
    )
    cluster_config_path: Optional[str] = Field(
        default=None,
        description="Cluster operator document layered over the defaults"
    )
    fail_fast: bool = Field(
        default=False,
        description="Stop sealing at the first violation instead of reporting all"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("defaults_path", "cluster_config_path")
    @classmethod
    def validate_document_path(cls, v):
        """Ensure configuration documents are YAML or JSON files."""
        if v is not None and Path(v).suffix.lower() not in (".yaml", ".yml", ".json"):
            raise ValueError(f"Configuration document must be .yaml, .yml or .json: {v}")
        return v

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ClientSettings":
        """
        Build settings from STORMCONF_* environment variables.

        Args:
            load_env_file: Load a .env file into the environment first

        Returns:
            Validated ClientSettings
        """
        if load_env_file:
            load_dotenv()

        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = raw
        return cls(**values)
