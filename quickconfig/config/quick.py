"""Ready-made configurations for quick starts.

``FlagConfig`` gathers ``--flag`` style arguments and ``DictConfig`` wraps a
plain mapping, for projects that do not need their own configuration class.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .capabilities import ArgumentConfig, JsonConfig, PathType, YamlConfig
from .errors import ConfigSchemaError
from .files import write_json, write_yaml

logger = logging.getLogger(__name__)


@dataclass
class FlagConfig(ArgumentConfig):
    """
    Command-line flags the program was run with.

    A flag is any argument that starts with ``--`` and does not contain
    ``:``. Order and duplicates are kept.
    """

    flags: List[str] = field(default_factory=list)

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> "FlagConfig":
        return cls([arg for arg in args if arg.startswith("--") and ":" not in arg])

    def __contains__(self, flag: str) -> bool:
        return flag in self.flags

    def __iter__(self) -> Iterator[str]:
        return iter(self.flags)

    def __len__(self) -> int:
        return len(self.flags)


def _as_mapping(value: Any, source: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigSchemaError(
            f"Top-level {source} value must be a mapping, got {type(value).__name__}"
        )
    return value


class DictConfig(YamlConfig, JsonConfig):
    """Mapping-backed configuration with dict and attribute access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(data) if data else {}

    @classmethod
    def from_yaml(cls, documents: List[Any]) -> "DictConfig":
        if len(documents) > 1:
            logger.debug(f"Using first of {len(documents)} YAML documents")
        return cls(_as_mapping(documents[0], "YAML"))

    @classmethod
    def from_json(cls, value: Any) -> "DictConfig":
        return cls(_as_mapping(value, "JSON"))

    def save_yaml(self, path: PathType) -> None:
        write_yaml(path, self.data)

    def save_json(self, path: PathType) -> None:
        write_json(path, self.data)

    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictConfig):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"DictConfig({self.data!r})"

    # Attribute-style access convenience
    def __getattr__(self, item: str) -> Any:
        if item == "data":
            raise AttributeError(item)
        try:
            return self.data[item]
        except KeyError as e:
            raise AttributeError(item) from e


__all__ = ["FlagConfig", "DictConfig"]
