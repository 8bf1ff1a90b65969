"""
Configuration Errors
====================

Error taxonomy shared by the capability contracts and the file dispatcher.
I/O failures are not wrapped: they surface as ``OSError``.
"""

import os
from typing import Any, Optional, Tuple, Type, Union


class ConfigError(Exception):
    """Base class for every error raised by quickconfig."""


class UnsupportedKindError(ConfigError, ValueError):
    """Raised when a path's extension matches no known file kind."""

    def __init__(self, path: Union[str, os.PathLike], kind: str):
        self.path = os.fspath(path)
        self.kind = kind
        super().__init__(f"Unsupported config file kind '{kind}': {self.path}")


class ConfigParseError(ConfigError):
    """Raised when YAML or JSON text cannot be parsed."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{message} ({path})"
        super().__init__(message)


class ConfigSchemaError(ConfigError):
    """Raised when a parsed document lacks a field or has the wrong type."""


def require_field(document: Any, key: str, expected_type: Union[Type, Tuple[Type, ...]] = object) -> Any:
    """
    Fetch a required field from a parsed document.

    Args:
        document: Parsed YAML document or JSON value
        key: Field name
        expected_type: Type (or tuple of types) the value must have

    Returns:
        The field value

    Raises:
        ConfigSchemaError: If the document is not a mapping, the key is
            missing, or the value has the wrong type
    """
    if not isinstance(document, dict):
        raise ConfigSchemaError(
            f"Expected a mapping to read '{key}', got {type(document).__name__}"
        )
    if key not in document:
        raise ConfigSchemaError(f"Missing required field '{key}'")

    value = document[key]
    # bool is a subclass of int; keep the two apart
    if expected_type is int and isinstance(value, bool):
        raise ConfigSchemaError(f"Field '{key}' must be int, got bool")
    if not isinstance(value, expected_type):
        names = (
            ", ".join(t.__name__ for t in expected_type)
            if isinstance(expected_type, tuple)
            else expected_type.__name__
        )
        raise ConfigSchemaError(
            f"Field '{key}' must be {names}, got {type(value).__name__}"
        )
    return value


__all__ = [
    "ConfigError",
    "UnsupportedKindError",
    "ConfigParseError",
    "ConfigSchemaError",
    "require_field",
]
