"""Configuration package.

Provides the capability contracts, the file dispatcher and ready-made
configurations.
"""
from .capabilities import ArgumentConfig, FileConfig, JsonConfig, YamlConfig  # noqa: F401
from .errors import (  # noqa: F401
    ConfigError,
    ConfigParseError,
    ConfigSchemaError,
    UnsupportedKindError,
    require_field,
)
from .files import (  # noqa: F401
    load_from_file,
    load_from_json,
    load_from_yaml,
    save_to_file,
    write_json,
    write_yaml,
)
from .quick import DictConfig, FlagConfig  # noqa: F401
