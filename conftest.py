"""Shared fixtures and sample configuration classes for the test suite."""

import logging
from dataclasses import dataclass
from typing import Any, List, Sequence

import pytest

from quickconfig.config.capabilities import ArgumentConfig, JsonConfig, YamlConfig
from quickconfig.config.errors import require_field
from quickconfig.config.files import write_json, write_text
from quickconfig.utils.logger import LOG_FORMAT


@dataclass
class ToggleConfig(ArgumentConfig, YamlConfig, JsonConfig):
    """Single boolean configuration used throughout the tests."""

    test: bool = False

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> "ToggleConfig":
        return cls(test="test" in args)

    @classmethod
    def from_yaml(cls, documents: List[Any]) -> "ToggleConfig":
        return cls(test=require_field(documents[0], "test", bool))

    def save_yaml(self, path) -> None:
        # flat key line
        write_text(path, f"test: {str(self.test).lower()}\n")

    @classmethod
    def from_json(cls, value: Any) -> "ToggleConfig":
        return cls(test=require_field(value, "test", bool))

    def save_json(self, path) -> None:
        write_json(path, {"test": self.test})


@pytest.fixture
def yaml_path(tmp_path):
    path = tmp_path / "test.yml"
    path.write_text("test: true\n", encoding="utf-8")
    return path


@pytest.fixture
def json_path(tmp_path):
    path = tmp_path / "test.json"
    path.write_text('{"test": true}', encoding="utf-8")
    return path


@pytest.fixture
def restore_root_logger():
    """Drop the handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
