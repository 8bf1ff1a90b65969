"""
Configuration Capabilities
==========================

Independent capability contracts a configuration class can opt into:

- ArgumentConfig: built from command-line arguments
- YamlConfig: built from / saved to YAML
- JsonConfig: built from / saved to JSON
- FileConfig: composite of YamlConfig and JsonConfig, required by the
  file dispatcher in ``quickconfig.config.files``

A class implements only the capabilities it needs. Any class implementing
both YamlConfig and JsonConfig is treated as a FileConfig without having to
inherit from it.

Example::

    @dataclass
    class AppConfig(YamlConfig, JsonConfig):
        test: bool = False

        @classmethod
        def from_yaml(cls, documents):
            return cls(test=require_field(documents[0], "test", bool))

        def save_yaml(self, path):
            write_yaml(path, {"test": self.test})

        ...
"""

import os
import sys
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Type, TypeVar, Union

PathType = Union[str, os.PathLike]

A = TypeVar("A", bound="ArgumentConfig")
Y = TypeVar("Y", bound="YamlConfig")
J = TypeVar("J", bound="JsonConfig")


class ArgumentConfig(ABC):
    """Configuration that can be created from command-line arguments."""

    @classmethod
    @abstractmethod
    def from_arguments(cls: Type[A], args: Sequence[str]) -> A:
        """
        Build a configuration from the arguments the program was run with.

        Must accept an empty sequence and must not raise. Arguments the
        configuration does not recognize are ignored.

        Args:
            args: Command-line arguments, usually ``sys.argv``

        Returns:
            New configuration instance
        """

    @classmethod
    def from_command_line(cls: Type[A]) -> A:
        """Build a configuration from ``sys.argv``."""
        return cls.from_arguments(list(sys.argv))


class YamlConfig(ABC):
    """Configuration that can be created from and saved to a YAML file."""

    @classmethod
    @abstractmethod
    def from_yaml(cls: Type[Y], documents: List[Any]) -> Y:
        """
        Build a configuration from the parsed documents of a YAML file.

        A file may hold several ``---`` separated documents; the list keeps
        them in file order and always holds at least one.

        Raises:
            ConfigSchemaError: If an expected field is missing or mistyped
        """

    @abstractmethod
    def save_yaml(self, path: PathType) -> None:
        """
        Write this configuration to ``path`` as YAML, replacing any content.

        Raises:
            OSError: If the path cannot be written
        """


class JsonConfig(ABC):
    """Configuration that can be created from and saved to a JSON file."""

    @classmethod
    @abstractmethod
    def from_json(cls: Type[J], value: Any) -> J:
        """
        Build a configuration from a parsed JSON value.

        Raises:
            ConfigSchemaError: If an expected field is missing or mistyped
        """

    @abstractmethod
    def save_json(self, path: PathType) -> None:
        """
        Write this configuration to ``path`` as JSON, replacing any content.

        Raises:
            OSError: If the path cannot be written
        """


class FileConfig(YamlConfig, JsonConfig):
    """Configuration that can be loaded from every supported file kind."""

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is FileConfig:
            mro = getattr(subclass, "__mro__", ())
            if YamlConfig in mro and JsonConfig in mro:
                return True
        return NotImplemented


__all__ = [
    "PathType",
    "ArgumentConfig",
    "YamlConfig",
    "JsonConfig",
    "FileConfig",
]
