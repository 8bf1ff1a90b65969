"""
quickconfig
===========

A simple configuration library for quickly giving an application its
configuration.

Modules:
- config: capability contracts, file dispatch and ready-made configurations
- utils: logging helpers
- cli: command-line front end (``python -m quickconfig``)
"""

__version__ = "0.1.0"

from .config import (
    ArgumentConfig,
    YamlConfig,
    JsonConfig,
    FileConfig,
    FlagConfig,
    DictConfig,
    ConfigError,
    ConfigParseError,
    ConfigSchemaError,
    UnsupportedKindError,
    require_field,
    load_from_yaml,
    load_from_json,
    load_from_file,
    save_to_file,
    write_yaml,
    write_json,
)
from .utils.logger import setup_logging

__all__ = [
    "ArgumentConfig",
    "YamlConfig",
    "JsonConfig",
    "FileConfig",
    "FlagConfig",
    "DictConfig",
    "ConfigError",
    "ConfigParseError",
    "ConfigSchemaError",
    "UnsupportedKindError",
    "require_field",
    "load_from_yaml",
    "load_from_json",
    "load_from_file",
    "save_to_file",
    "write_yaml",
    "write_json",
    "setup_logging",
]
