"""YAML-backed configuration using PyYAML."""

from __future__ import annotations

import logging

import yaml

from yamlwrapper.configuration import FileConfiguration
from yamlwrapper.errors import ConfigParseError, ConfigSerializeError, ValueKindError

__all__ = ["YamlConfiguration"]

logger = logging.getLogger(__name__)


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings."""


_ConfigLoader.add_constructor("tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str)


class YamlConfiguration(FileConfiguration):
    """A configuration stored as a YAML document.

    Documents are written in block style with a four space indent unless
    other ``options`` are given.

    Example::

        config = YamlConfiguration.load_from_file("settings.yml")
        port = config.get_int("server.port", 8080)
        config.set("server.name", "main")
        config.save("settings.yml")
    """

    __slots__ = ()

    def load_from_string(self, contents: str | None) -> None:
        if contents is None:
            return
        if not contents.strip():
            self.clear()
            return

        try:
            data = yaml.load(contents, Loader=_ConfigLoader)
        except yaml.YAMLError as exc:
            raise ConfigParseError(message=f"Invalid YAML: {exc}", source="yaml", cause=exc) from exc

        if data is not None and not isinstance(data, dict):
            raise ConfigParseError(
                message=f"YAML document must be a mapping, got {type(data).__name__}",
                source="yaml",
            )
        try:
            self.load(data)
        except ValueKindError as exc:
            raise ConfigParseError(message=f"Unsupported YAML value: {exc.message}", source="yaml", cause=exc) from exc

    def save_to_string(self) -> str:
        options = self.options
        try:
            return yaml.dump(
                self.save(),
                Dumper=yaml.SafeDumper,
                indent=options.indent,
                default_flow_style=options.default_flow_style,
                sort_keys=options.sort_keys,
                allow_unicode=options.allow_unicode,
                width=options.width,
            )
        except (yaml.YAMLError, TypeError) as exc:
            raise ConfigSerializeError(message=f"Cannot write YAML: {exc}", target="yaml", cause=exc) from exc
