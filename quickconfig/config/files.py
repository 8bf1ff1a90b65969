"""
File Loading
============

Reads configuration classes from YAML and JSON files and routes a path to
the right loader by its extension.

The extension is the text after the last ``.`` in the path, compared
case-sensitively against ``yaml``, ``yml`` and ``json``. A path without a
``.`` is its own extension and matches nothing.
"""

import json
import logging
import os
from typing import Any, Callable, Dict, List, Type, TypeVar

import yaml

from .capabilities import FileConfig, JsonConfig, PathType, YamlConfig
from .errors import ConfigParseError, ConfigSchemaError, UnsupportedKindError

logger = logging.getLogger(__name__)

Y = TypeVar("Y", bound=YamlConfig)
J = TypeVar("J", bound=JsonConfig)
F = TypeVar("F", bound=FileConfig)

# Constructor failures converted to ConfigSchemaError
_SCHEMA_ERRORS = (KeyError, IndexError, TypeError, AttributeError)


# ----------------------------------------------------------------------
# Filesystem
def read_text(path: PathType) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def write_text(path: PathType, content: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


# ----------------------------------------------------------------------
# Parsed-document adapters
def parse_yaml_documents(raw_text: str, path: PathType = None) -> List[Any]:
    """
    Parse every document of a YAML stream.

    Args:
        raw_text: YAML text, possibly holding several ``---`` documents
        path: Source path, only used in error messages

    Returns:
        Parsed documents in stream order

    Raises:
        ConfigParseError: If the text is not valid YAML
    """
    source = os.fspath(path) if path is not None else None
    try:
        return list(yaml.safe_load_all(raw_text))
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Malformed YAML: {e}", source) from e


def parse_json_value(raw_text: str, path: PathType = None) -> Any:
    """
    Parse a JSON document into its value tree.

    Raises:
        ConfigParseError: If the text is not valid JSON
    """
    source = os.fspath(path) if path is not None else None
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Malformed JSON: {e}", source) from e


# ----------------------------------------------------------------------
# Serialization helpers for save_yaml / save_json implementations
def dump_yaml(data: Any) -> str:
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def dump_json(data: Any) -> str:
    # dates and timestamps parsed from YAML are written as ISO strings
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def write_yaml(path: PathType, data: Any) -> None:
    """Serialize ``data`` as block-style YAML and write it to ``path``."""
    write_text(path, dump_yaml(data))
    logger.info(f"Configuration saved to {os.fspath(path)}")


def write_json(path: PathType, data: Any) -> None:
    """Serialize ``data`` as pretty-printed JSON and write it to ``path``."""
    write_text(path, dump_json(data) + "\n")
    logger.info(f"Configuration saved to {os.fspath(path)}")


# ----------------------------------------------------------------------
# Loaders
def _read_source(path: PathType, source: str) -> str:
    try:
        return read_text(path)
    except UnicodeDecodeError as e:
        logger.error(f"Config file {source} is not valid UTF-8: {e}")
        raise ConfigParseError(f"File is not valid UTF-8: {e}", source) from e


def _construct(factory: Callable[[Any], Any], parsed: Any, path: str) -> Any:
    try:
        return factory(parsed)
    except _SCHEMA_ERRORS as e:
        logger.error(f"Failed to build configuration from {path}: {e!r}")
        raise ConfigSchemaError(f"Invalid configuration in {path}: {e!r}") from e


def load_from_yaml(cls: Type[Y], path: PathType) -> Y:
    """
    Load a YamlConfig class from a YAML file.

    Args:
        cls: Configuration class implementing YamlConfig
        path: Path to the YAML file

    Returns:
        Configuration instance built by ``cls.from_yaml``

    Raises:
        OSError: If the file cannot be read
        ConfigParseError: If the file is not UTF-8, not valid YAML, or holds no document
        ConfigSchemaError: If ``cls.from_yaml`` rejects the documents
    """
    source = os.fspath(path)
    documents = parse_yaml_documents(_read_source(path, source), source)
    if not documents:
        logger.error(f"No YAML documents found in {source}")
        raise ConfigParseError("YAML file contains no documents", source)

    config = _construct(cls.from_yaml, documents, source)
    logger.info(f"Loaded {cls.__name__} from {source} ({len(documents)} YAML document(s))")
    return config


def load_from_json(cls: Type[J], path: PathType) -> J:
    """
    Load a JsonConfig class from a JSON file.

    Raises:
        OSError: If the file cannot be read
        ConfigParseError: If the file is not UTF-8 or not valid JSON
        ConfigSchemaError: If ``cls.from_json`` rejects the value
    """
    source = os.fspath(path)
    value = parse_json_value(_read_source(path, source), source)

    config = _construct(cls.from_json, value, source)
    logger.info(f"Loaded {cls.__name__} from {source}")
    return config


def _save_yaml(config: YamlConfig, path: PathType) -> None:
    config.save_yaml(path)


def _save_json(config: JsonConfig, path: PathType) -> None:
    config.save_json(path)


LOADERS: Dict[str, Callable[[Type[FileConfig], PathType], FileConfig]] = {
    "yaml": load_from_yaml,
    "yml": load_from_yaml,
    "json": load_from_json,
}

SAVERS: Dict[str, Callable[[FileConfig, PathType], None]] = {
    "yaml": _save_yaml,
    "yml": _save_yaml,
    "json": _save_json,
}


def file_kind(path: PathType) -> str:
    """Return the text after the last ``.`` of ``path`` (the whole path if none)."""
    return os.fspath(path).split(".")[-1]


def load_from_file(cls: Type[F], path: PathType) -> F:
    """
    Load a FileConfig class from a file, choosing the loader by extension.

    Args:
        cls: Configuration class implementing both YamlConfig and JsonConfig
        path: Path ending in ``.yaml``, ``.yml`` or ``.json``

    Returns:
        Configuration instance

    Raises:
        TypeError: If ``cls`` is not a FileConfig
        UnsupportedKindError: If the extension is not a known file kind
    """
    if not (isinstance(cls, type) and issubclass(cls, FileConfig)):
        raise TypeError(f"{cls!r} must implement both YamlConfig and JsonConfig")

    kind = file_kind(path)
    loader = LOADERS.get(kind)
    if loader is None:
        logger.error(f"Unsupported config file kind '{kind}' for {os.fspath(path)}")
        raise UnsupportedKindError(path, kind)

    logger.debug(f"Dispatching {os.fspath(path)} to {loader.__name__}")
    return loader(cls, path)


def save_to_file(config: FileConfig, path: PathType) -> None:
    """
    Save a FileConfig instance, choosing the format by extension.

    Raises:
        TypeError: If ``config`` is not a FileConfig
        UnsupportedKindError: If the extension is not a known file kind
        OSError: If the file cannot be written
    """
    if not isinstance(config, FileConfig):
        raise TypeError(f"{type(config).__name__} must implement both YamlConfig and JsonConfig")

    kind = file_kind(path)
    saver = SAVERS.get(kind)
    if saver is None:
        logger.error(f"Unsupported config file kind '{kind}' for {os.fspath(path)}")
        raise UnsupportedKindError(path, kind)

    try:
        saver(config, path)
    except OSError as e:
        logger.error(f"Failed to save configuration to {os.fspath(path)}: {e}")
        raise


__all__ = [
    "read_text",
    "write_text",
    "parse_yaml_documents",
    "parse_json_value",
    "dump_yaml",
    "dump_json",
    "write_yaml",
    "write_json",
    "load_from_yaml",
    "load_from_json",
    "file_kind",
    "load_from_file",
    "save_to_file",
]
