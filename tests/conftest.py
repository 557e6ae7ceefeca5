"""Shared test fixtures for the configuration test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from yamlwrapper import Configuration, YamlConfiguration

EXAMPLE_YAML = """\
key: value
test:
    subkey: 1
    subkey2: 2
a:
    b:
        c: true
list:
- item1
- item2
- item3
"""


@pytest.fixture
def config() -> Configuration:
    """Returns an empty in-memory configuration."""
    return Configuration()


@pytest.fixture
def example_config() -> Configuration:
    """Returns a configuration populated like the example script."""
    cfg = Configuration()
    cfg.set("key", "value")
    cfg.set("test.subkey", 1)
    cfg.set("test.subkey2", 2)
    cfg.set("a.b.c.d.e.f.g", True)
    cfg.set("list", ["item1", "item2", "item3", "item4", "item5"])
    return cfg


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    """Writes EXAMPLE_YAML to a temp file and returns its path."""
    path = tmp_path / "config.yml"
    path.write_text(EXAMPLE_YAML)
    return path


@pytest.fixture
def yaml_config() -> YamlConfiguration:
    return YamlConfiguration()


@pytest.fixture
def example_yaml() -> str:
    """Returns the text of a small YAML document."""
    return EXAMPLE_YAML
