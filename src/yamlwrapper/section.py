"""ConfigurationSection: a path-addressable node of a configuration tree."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterator

from yamlwrapper.utils.path import join_path, normalize_path, split_path
from yamlwrapper.values import (
    EMPTY,
    SectionValue,
    ValueKind,
    ValueNode,
    to_value_node,
)

__all__ = ["ConfigurationSection"]

logger = logging.getLogger(__name__)


class ConfigurationSection:
    """A node in a configuration tree.

    A section has a key within its parent and holds exactly one tagged
    payload: a scalar, a list, named child sections, or nothing at all.
    Children are addressed with dotted paths relative to any node::

        root.set("database.host", "localhost")
        root.get_section("database").get_string("host")  # 'localhost'

    Reads never raise. A path that cannot be resolved, or resolves to a value
    of another kind than requested, yields the caller's default.
    """

    __slots__ = ("_key", "_parent", "_value")

    def __init__(
        self,
        key: str = "",
        value: ValueNode = EMPTY,
        parent: ConfigurationSection | None = None,
    ) -> None:
        self._key = key
        self._parent = parent
        self._value: ValueNode = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.get_path()!r}, kind={self._value.kind.value})"

    def __contains__(self, path: object) -> bool:
        return self.is_set(path)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_keys())

    # === Ancestry ===

    @property
    def key(self) -> str:
        """Name of this section within its parent; empty for the root."""
        return self._key

    def get_name(self) -> str:
        return self._key

    @property
    def parent(self) -> ConfigurationSection | None:
        return self._parent

    @property
    def kind(self) -> ValueKind:
        """Tag of the payload this section currently holds."""
        return self._value.kind

    @property
    def value(self) -> ValueNode:
        return self._value

    def is_root(self) -> bool:
        return self._parent is None

    def get_root(self) -> ConfigurationSection:
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def get_path(self) -> str:
        """Dotted path from the root to this section; the root's path is ''."""
        if self._parent is None:
            return ""
        if self._parent.is_root():
            return self._key
        return join_path(self._parent.get_path(), self._key)

    # === Resolution ===

    def _child(self, key: str) -> ConfigurationSection | None:
        if self._value.kind is not ValueKind.SECTION:
            return None
        return self._value.children.get(key)

    def _resolve(self, path: Any) -> ConfigurationSection | None:
        path = normalize_path(path)
        if path is None:
            return None
        node: ConfigurationSection | None = self
        for key in split_path(path):
            node = node._child(key)
            if node is None:
                return None
        return node

    def get(self, path: str = "", default: Any = None) -> Any:
        """Return the raw value at a path.

        Args:
            path: Dotted path relative to this section; '' means this section.
            default: Returned when nothing is set at the path.

        Returns:
            The stored scalar or list, the section itself when the path
            leads to a section, or ``default``.
        """
        node = self._resolve(path)
        if node is None or node._value.kind is ValueKind.EMPTY:
            return default
        if node._value.kind is ValueKind.SECTION:
            return node
        return node._value.raw

    def _get_kind(self, path: Any, kind: ValueKind, default: Any) -> Any:
        node = self._resolve(path)
        if node is None or node._value.kind is not kind:
            return default
        return node._value.raw

    def _is_kind(self, path: Any, kind: ValueKind) -> bool:
        node = self._resolve(path)
        return node is not None and node._value.kind is kind

    # === Typed accessors ===

    def get_string(self, path: str = "", default: str = "") -> str:
        return self._get_kind(path, ValueKind.STRING, default)

    def is_string(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.STRING)

    def get_int(self, path: str = "", default: int = 0) -> int:
        """Return a 32-bit integer; a LONG value is not an int."""
        return self._get_kind(path, ValueKind.INT, default)

    def is_int(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.INT)

    def get_long(self, path: str = "", default: int = 0) -> int:
        """Return a 64-bit integer; an INT value is not a long."""
        return self._get_kind(path, ValueKind.LONG, default)

    def is_long(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.LONG)

    def get_boolean(self, path: str = "", default: bool = False) -> bool:
        return self._get_kind(path, ValueKind.BOOLEAN, default)

    def is_boolean(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.BOOLEAN)

    def get_float(self, path: str = "", default: float = 0.0) -> float:
        """Return a single precision float; DOUBLE values are not floats."""
        return self._get_kind(path, ValueKind.FLOAT, default)

    def is_float(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.FLOAT)

    def get_double(self, path: str = "", default: float = 0.0) -> float:
        return self._get_kind(path, ValueKind.DOUBLE, default)

    def is_double(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.DOUBLE)

    def get_list(self, path: str = "", default: list[Any] | None = None) -> list[Any] | None:
        """Return a copy of the stored list."""
        node = self._resolve(path)
        if node is None or node._value.kind is not ValueKind.LIST:
            return default
        return node._raw_copy()

    def is_list(self, path: str = "") -> bool:
        return self._is_kind(path, ValueKind.LIST)

    # === Sections ===

    def get_section(self, path: str = "") -> ConfigurationSection | None:
        """Return the section at a path, or None if it is missing or a leaf."""
        node = self._resolve(path)
        if node is None:
            return None
        if node is self or node._value.kind is ValueKind.SECTION:
            return node
        return None

    def is_section(self, path: str = "") -> bool:
        return self.get_section(path) is not None

    def is_set(self, path: str = "") -> bool:
        node = self._resolve(path)
        return node is not None and node._value.kind is not ValueKind.EMPTY

    def is_holding_sections(self) -> bool:
        """True if this section has at least one child with a non-blank key."""
        if self._value.kind is not ValueKind.SECTION:
            return False
        return any(key.strip() for key in self._value.children)

    def get_keys(self, path: str = "") -> list[str]:
        """Return the ordered keys of the immediate children at a path.

        Sections that hold no keyed children, leaves and unresolvable paths
        all yield an empty list.
        """
        section = self.get_section(path)
        if section is None or not section.is_holding_sections():
            return []
        return list(section._value.children)

    def _ensure_section(self) -> SectionValue:
        if self._value.kind is not ValueKind.SECTION:
            if self._value.kind is not ValueKind.EMPTY:
                logger.debug("Replacing %s value at '%s' with a section", self._value.kind.value, self.get_path())
            self._value = SectionValue()
        return self._value

    def _child_for_write(self, key: str) -> ConfigurationSection:
        children = self._ensure_section().children
        child = children.get(key)
        if child is None:
            child = ConfigurationSection(key, parent=self)
            children[key] = child
        return child

    def create_section(self, path: str) -> ConfigurationSection | None:
        """Ensure every segment of a path exists as a section.

        Existing sections along the path are reused. An intermediate segment
        holding a leaf value is replaced by an empty section; a final segment
        that already holds a leaf value is returned as it is.

        Args:
            path: Dotted path relative to this section.

        Returns:
            The section at the end of the path, or None for a non-string path.
        """
        path = normalize_path(path)
        if path is None:
            return None
        node = self
        for key in split_path(path):
            node = node._child_for_write(key)
        if node._value.kind is ValueKind.EMPTY:
            node._value = SectionValue()
        return node

    def set(self, path: str, value: Any, kind: ValueKind | str | None = None) -> None:
        """Store a value at a path, creating intermediate sections.

        An empty path replaces this section's own value. Whatever the final
        segment held before, including a whole subtree, is replaced.

        Args:
            path: Dotted path relative to this section.
            value: A scalar, list, mapping (stored as nested sections),
                another ConfigurationSection (copied), or None to unset.
            kind: Optional ValueKind to force for a scalar or list value.

        Raises:
            ValueKindError: If the value cannot be stored. The tree is left
                unchanged.
        """
        path = normalize_path(path)
        if path is None:
            return
        # A failed conversion must leave the tree untouched.
        payload = self._build_value(value, kind)
        node = self
        for key in split_path(path):
            node = node._child_for_write(key)
        node._assign(payload)

    def _assign(self, payload: ValueNode | Mapping[str, Any]) -> None:
        if self._value.kind is ValueKind.SECTION and self._value.children:
            logger.debug("Discarding subtree at '%s'", self.get_path())
        if isinstance(payload, Mapping):
            self._value = self._adopt(payload)
        else:
            self._value = payload

    def _adopt(self, children: Mapping[str, ConfigurationSection]) -> SectionValue:
        section = SectionValue()
        for key, child in children.items():
            child._parent = self
            section.children[key] = child
        return section

    @staticmethod
    def _build_value(value: Any, kind: ValueKind | str | None) -> ValueNode | dict[str, ConfigurationSection]:
        if isinstance(value, ConfigurationSection):
            value = value.get_values() if value.kind is ValueKind.SECTION else value.get()
        if isinstance(value, Mapping):
            return ConfigurationSection._build_children(value)
        return to_value_node(value, kind)

    @staticmethod
    def _build_children(mapping: Mapping[Any, Any]) -> dict[str, ConfigurationSection]:
        """Convert a nested mapping into detached child sections.

        Parents are attached when the result is adopted by a section.
        """
        children: dict[str, ConfigurationSection] = {}
        for raw_key, raw_value in mapping.items():
            key = str(raw_key)
            child = ConfigurationSection(key)
            if isinstance(raw_value, Mapping):
                child._value = child._adopt(ConfigurationSection._build_children(raw_value))
            else:
                child._value = to_value_node(raw_value)
            children[key] = child
        return children

    # === Flattening ===

    def get_values(self) -> dict[str, Any]:
        """Flatten this section into a nested dict.

        Child sections are flattened recursively, so empty sections become
        ``{}`` and leaves contribute their raw value. A section that holds a
        leaf itself flattens to ``{key: value}``.
        """
        if self._value.kind is not ValueKind.SECTION:
            return {self._key: self._raw_copy()}
        out: dict[str, Any] = {}
        for key, child in self._value.children.items():
            if child._value.kind is ValueKind.SECTION:
                out[key] = child.get_values()
            else:
                out[key] = child._raw_copy()
        return out

    def _raw_copy(self) -> Any:
        if self._value.kind is ValueKind.LIST:
            return list(self._value.raw)
        return self._value.raw
