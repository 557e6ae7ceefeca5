"""Configuration documents: the root section plus load/save orchestration."""

from __future__ import annotations

import io
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any, TypeVar, Union

from yamlwrapper.errors import (
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigurationError,
)
from yamlwrapper.options import DumpOptions
from yamlwrapper.section import ConfigurationSection
from yamlwrapper.values import SectionValue

__all__ = ["Configuration", "FileConfiguration"]

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_F = TypeVar("_F", bound="FileConfiguration")


class Configuration(ConfigurationSection):
    """The root section of a configuration tree.

    A document is created empty and populated from an already-parsed nested
    mapping with :meth:`load`; :meth:`save` returns the inverse mapping.
    """

    __slots__ = ("options",)

    def __init__(self, options: DumpOptions | None = None) -> None:
        super().__init__("", SectionValue())
        self.options = options or DumpOptions()

    def clear(self) -> None:
        """Reset the document to an empty root section."""
        self._value = SectionValue()

    def load(self, mapping: Mapping[Any, Any] | None) -> None:
        """Replace the document's contents with a nested mapping.

        Nested mappings become sections; every other value is stored as a
        leaf. The new tree is built completely before it replaces the old one.

        Args:
            mapping: The parsed document, or None for an empty one.

        Raises:
            ConfigParseError: If ``mapping`` is not a mapping.
            ValueKindError: If a leaf value has no supported kind. The current
                contents are kept.
        """
        if mapping is None:
            mapping = {}
        if not isinstance(mapping, Mapping):
            raise ConfigParseError(
                message=f"Configuration root must be a mapping, got {type(mapping).__name__}"
            )
        children = self._build_children(mapping)
        self._value = self._adopt(children)
        logger.debug("Loaded configuration with %d top-level keys", len(children))

    def save(self) -> dict[str, Any]:
        """Return the document as a nested dict ready for serialization."""
        return self.get_values()


class FileConfiguration(Configuration, ABC):
    """A configuration that is read from and written to text."""

    __slots__ = ()

    @abstractmethod
    def load_from_string(self, contents: str | None) -> None:
        """Replace the contents with a parsed document.

        Raises:
            ConfigParseError: If the text is malformed. The current contents
                are kept.
        """

    @abstractmethod
    def save_to_string(self) -> str:
        """Serialize the document to text.

        Raises:
            ConfigSerializeError: If a stored value has no text form.
        """

    def load(self, source: Mapping[Any, Any] | PathLike | IO[Any] | None) -> None:  # type: ignore[override]
        """Load from a nested mapping, a file path, or a readable stream.

        Empty paths are ignored.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigIOError: If the file or stream cannot be read.
            ConfigParseError: If the contents are malformed.
        """
        if source is None or isinstance(source, Mapping):
            super().load(source)
            return
        if hasattr(source, "read"):
            self.load_from_string(self._read_stream(source))
            return
        if not os.fspath(source):
            return

        path = Path(source)
        try:
            contents = path.read_text(encoding=self.options.encoding)
        except FileNotFoundError as exc:
            raise ConfigNotFoundError(config_path=str(path), cause=exc) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigIOError(config_path=str(path), reason=str(exc), cause=exc) from exc
        logger.debug("Read configuration file %s", path)
        self.load_from_string(contents)

    def _read_stream(self, stream: IO[Any]) -> str:
        name = str(getattr(stream, "name", "<stream>"))
        try:
            data = stream.read()
            if isinstance(data, bytes):
                data = data.decode(self.options.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigIOError(config_path=name, reason=str(exc), cause=exc) from exc
        return data

    def save(self, target: PathLike | IO[Any] | None = None) -> Any:  # type: ignore[override]
        """Write the document to a file path or a writable stream.

        Without a target, returns the nested dict like
        :meth:`Configuration.save`. Missing parent directories of a file
        target are created.

        Raises:
            ConfigIOError: If the file cannot be written.
            ConfigSerializeError: If the document cannot be serialized. Nothing
                is written.
        """
        if target is None:
            return super().save()
        data = self.save_to_string()
        if hasattr(target, "write"):
            if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
                target.write(data.encode(self.options.encoding))
            else:
                target.write(data)
            return None
        if not os.fspath(target):
            return None

        path = Path(target)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(data, encoding=self.options.encoding)
        except OSError as exc:
            raise ConfigIOError(config_path=str(path), reason=str(exc), cause=exc) from exc
        logger.debug("Wrote configuration file %s", path)
        return None

    @classmethod
    def load_from_file(cls: type[_F], path: PathLike | None, options: DumpOptions | None = None) -> _F:
        """Load a configuration file, falling back to an empty document.

        A missing, unreadable or malformed file is logged and produces an
        empty configuration rather than an exception.
        """
        config = cls(options=options)
        if path is None or not os.fspath(path) or not Path(path).is_file():
            logger.debug("Configuration file %s not found, starting empty", path)
            return config
        try:
            config.load(path)
        except ConfigurationError as exc:
            logger.warning("Could not load configuration from %s: %s", path, exc)
            return cls(options=options)
        return config

    @classmethod
    def load_from_stream(cls: type[_F], stream: IO[Any] | None, options: DumpOptions | None = None) -> _F:
        """Load a configuration from a stream, falling back to an empty document."""
        config = cls(options=options)
        if stream is None:
            return config
        try:
            config.load(stream)
        except ConfigurationError as exc:
            logger.warning("Could not load configuration from stream: %s", exc)
            return cls(options=options)
        return config
