"""Error hierarchy for the yamlwrapper library."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigurationError",
    "ConfigNotFoundError",
    "ConfigIOError",
    "ConfigParseError",
    "ConfigSerializeError",
    "ValueKindError",
    "ErrorCodes",
]


class ConfigurationError(Exception):
    """Base error for all yamlwrapper errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ConfigurationError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path that could not be found."""
        return self.details["config_path"]


class ConfigIOError(ConfigurationError):
    """Raised when a configuration file cannot be read or written."""

    def __init__(self, config_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_IO_ERROR",
            message=f"I/O error on configuration file '{config_path}': {reason}",
            details={"config_path": config_path, "reason": reason},
            **kwargs,
        )

    @property
    def config_path(self) -> str:
        """The path the failed operation was targeting."""
        return self.details["config_path"]


class ConfigParseError(ConfigurationError):
    """Raised when a configuration document is malformed."""

    def __init__(self, message: str, source: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_PARSE_ERROR",
            message=message,
            details={"source": source},
            **kwargs,
        )


class ConfigSerializeError(ConfigurationError):
    """Raised when a configuration document cannot be written as text."""

    def __init__(self, message: str, target: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_SERIALIZE_ERROR",
            message=message,
            details={"target": target},
            **kwargs,
        )


class ValueKindError(ConfigurationError):
    """Raised when a value cannot be stored under any (or the requested) kind."""

    def __init__(self, value: Any, kind: str | None = None, **kwargs: Any) -> None:
        type_name = type(value).__name__
        if kind is None:
            message = f"Unsupported configuration value of type '{type_name}': {value!r}"
        else:
            message = f"Value {value!r} of type '{type_name}' cannot be stored as {kind}"
        super().__init__(
            code="VALUE_KIND_ERROR",
            message=message,
            details={"value_type": type_name, "kind": kind},
            **kwargs,
        )


class ErrorCodes:
    """All library error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            create_default_config()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_IO_ERROR = "CONFIG_IO_ERROR"
    CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
    CONFIG_SERIALIZE_ERROR = "CONFIG_SERIALIZE_ERROR"
    VALUE_KIND_ERROR = "VALUE_KIND_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
