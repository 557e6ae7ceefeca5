"""JSON-backed configuration."""

from __future__ import annotations

import json

from yamlwrapper.configuration import FileConfiguration
from yamlwrapper.errors import ConfigParseError, ConfigSerializeError, ValueKindError

__all__ = ["JsonConfiguration"]


class JsonConfiguration(FileConfiguration):
    """A configuration stored as a JSON object.

    JSON numbers follow the same kind rules as YAML ones: integers become
    INT or LONG depending on their size, and fractions become DOUBLE.
    """

    __slots__ = ()

    def load_from_string(self, contents: str | None) -> None:
        if contents is None:
            return
        if not contents.strip():
            self.clear()
            return

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(message=f"Invalid JSON: {exc}", source="json", cause=exc) from exc

        if not isinstance(data, dict):
            raise ConfigParseError(
                message=f"JSON document must be an object, got {type(data).__name__}",
                source="json",
            )
        try:
            self.load(data)
        except ValueKindError as exc:
            raise ConfigParseError(message=f"Unsupported JSON value: {exc.message}", source="json", cause=exc) from exc

    def save_to_string(self) -> str:
        options = self.options
        try:
            text = json.dumps(
                self.save(),
                indent=options.indent,
                ensure_ascii=not options.allow_unicode,
                sort_keys=options.sort_keys,
            )
        except (TypeError, ValueError) as exc:
            raise ConfigSerializeError(message=f"Cannot write JSON: {exc}", target="json", cause=exc) from exc
        return text + "\n"
