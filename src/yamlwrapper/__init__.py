"""yamlwrapper - Path-addressable configuration trees backed by YAML files."""

from __future__ import annotations

# Core
from yamlwrapper.section import ConfigurationSection
from yamlwrapper.configuration import Configuration, FileConfiguration
from yamlwrapper.values import ValueKind

# Formats
from yamlwrapper.yaml_configuration import YamlConfiguration
from yamlwrapper.json_configuration import JsonConfiguration
from yamlwrapper.options import DumpOptions

# Errors
from yamlwrapper.errors import (
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigSerializeError,
    ConfigurationError,
    ErrorCodes,
    ValueKindError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigurationSection",
    "Configuration",
    "FileConfiguration",
    "ValueKind",
    # Formats
    "YamlConfiguration",
    "JsonConfiguration",
    "DumpOptions",
    # Errors
    "ErrorCodes",
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigSerializeError",
    "ValueKindError",
]
