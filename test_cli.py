"""
Command-line front end tests.
"""

import json
import logging

import pytest
import yaml

from quickconfig.cli import main

pytestmark = pytest.mark.usefixtures("restore_root_logger")


def test_show_yaml_defaults_to_yaml(yaml_path, capsys):
    assert main(["show", str(yaml_path)]) == 0

    out = capsys.readouterr().out
    assert yaml.safe_load(out) == {"test": True}


def test_show_as_json(yaml_path, capsys):
    assert main(["show", str(yaml_path), "--format", "json"]) == 0

    out = capsys.readouterr().out
    assert json.loads(out) == {"test": True}


def test_show_json_defaults_to_json(json_path, capsys):
    assert main(["show", str(json_path)]) == 0

    assert json.loads(capsys.readouterr().out) == {"test": True}


def test_convert_yaml_to_json(yaml_path, tmp_path, capsys):
    dest = tmp_path / "converted.json"

    assert main(["convert", str(yaml_path), str(dest)]) == 0

    assert json.loads(dest.read_text(encoding="utf-8")) == {"test": True}
    assert "Converted" in capsys.readouterr().out


def test_unsupported_kind_exits_with_error(tmp_path, capsys):
    path = tmp_path / "settings.toml"
    path.write_text("test = true\n", encoding="utf-8")

    assert main(["show", str(path)]) == 1

    assert "Unsupported config file kind 'toml'" in capsys.readouterr().err


def test_missing_file_exits_with_error(tmp_path, capsys):
    assert main(["show", str(tmp_path / "absent.yml")]) == 1

    assert "Error:" in capsys.readouterr().err


def test_malformed_file_exits_with_error(tmp_path, capsys):
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")

    assert main(["show", str(path)]) == 1

    assert "Malformed JSON" in capsys.readouterr().err


def test_flags_command(capsys):
    assert main(["flags", "--verbose", "--mode:fast", "plain", "--dry-run"]) == 0

    assert capsys.readouterr().out.split() == ["--verbose", "--dry-run"]


def test_no_command_prints_help(capsys):
    assert main([]) == 2

    assert "usage:" in capsys.readouterr().out


def test_log_file_option(yaml_path, tmp_path):
    log_file = tmp_path / "logs" / "quickconfig.log"

    assert main(["--log-level", "INFO", "--log-file", str(log_file), "show", str(yaml_path)]) == 0

    assert "Loaded DictConfig" in log_file.read_text(encoding="utf-8")


def test_convert_yaml_dates_to_json(tmp_path, capsys):
    source = tmp_path / "release.yaml"
    source.write_text("released: 2024-01-02\nbuilt: 2024-01-02 10:30:00\n", encoding="utf-8")
    dest = tmp_path / "release.json"

    assert main(["convert", str(source), str(dest)]) == 0

    assert json.loads(dest.read_text(encoding="utf-8")) == {
        "released": "2024-01-02",
        "built": "2024-01-02 10:30:00",
    }


def test_show_yaml_dates_as_json(tmp_path, capsys):
    source = tmp_path / "release.yaml"
    source.write_text("released: 2024-01-02\n", encoding="utf-8")

    assert main(["show", str(source), "--format", "json"]) == 0

    assert json.loads(capsys.readouterr().out) == {"released": "2024-01-02"}


def test_non_utf8_file_exits_with_error(tmp_path, capsys):
    path = tmp_path / "latin.yaml"
    path.write_bytes(b"test: \xff\xfe\n")

    assert main(["show", str(path)]) == 1

    assert "not valid UTF-8" in capsys.readouterr().err


def test_verbose_logs_debug_messages(yaml_path, tmp_path):
    log_file = tmp_path / "debug.log"
    app_logger = logging.getLogger("quickconfig")
    level = app_logger.level

    assert main(["--verbose", "--log-file", str(log_file), "show", str(yaml_path)]) == 0

    assert "Dispatching" in log_file.read_text(encoding="utf-8")
    assert app_logger.level == level


def test_quiet_hides_info_messages(yaml_path, tmp_path):
    log_file = tmp_path / "quiet.log"
    app_logger = logging.getLogger("quickconfig")
    level = app_logger.level

    assert main(["--quiet", "--log-level", "INFO", "--log-file", str(log_file), "show", str(yaml_path)]) == 0

    assert "Loaded DictConfig" not in log_file.read_text(encoding="utf-8")
    assert app_logger.level == level


def test_verbose_and_quiet_are_exclusive(yaml_path):
    with pytest.raises(SystemExit):
        main(["--verbose", "--quiet", "show", str(yaml_path)])
