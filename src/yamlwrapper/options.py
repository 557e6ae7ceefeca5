"""Serialization settings shared by the file-backed configurations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DumpOptions", "DEFAULT_INDENT"]

DEFAULT_INDENT = 4


class DumpOptions(BaseModel):
    """How a configuration is rendered to text and encoded to bytes."""

    model_config = ConfigDict(frozen=True)

    indent: int = Field(default=DEFAULT_INDENT, ge=2, le=9)
    default_flow_style: bool = False
    sort_keys: bool = False
    allow_unicode: bool = True
    width: int | None = Field(default=None, gt=0)
    encoding: str = "utf-8"
