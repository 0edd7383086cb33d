"""Configuration: defaults, YAML file, environment overrides, validation.

Tests cover:
    - defaults are a 5x5 table with text output and no command cap
    - YAML keys map onto fields; missing keys keep the base value
    - ROBOT_* variables override file values
    - invalid values raise ConfigError
"""

from pathlib import Path

import pytest

from toyrobot.config import RobotConfig
from toyrobot.errors import ConfigError
from toyrobot.types import Table


def test_defaults():
    config = RobotConfig()
    assert config.make_table() == Table(5, 5)
    assert config.output_format == "text"
    assert config.effective_output_format == "text"
    assert config.max_commands == 0
    assert config.validate() is config


def test_bundled_config_file_has_no_command_cap():
    path = Path(__file__).resolve().parent.parent / "configs" / "config.yaml"
    assert RobotConfig.from_yaml(str(path)).max_commands == 0


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "table:\n"
        "  width: 8\n"
        "  height: 3\n"
        "output:\n"
        "  format: JSON\n"
        "logging:\n"
        "  level: debug\n"
        "  format: json\n"
        "max_commands: 10\n"
    )
    config = RobotConfig.from_yaml(str(path))
    assert (config.table_width, config.table_height) == (8, 3)
    assert config.output_format == "json"
    assert config.log_level == "debug"
    assert config.log_format == "json"
    assert config.max_commands == 10


def test_partial_yaml_keeps_base(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("table:\n  width: 9\n")
    config = RobotConfig.from_yaml(str(path), RobotConfig(table_height=4, output_format="csv"))
    assert (config.table_width, config.table_height) == (9, 4)
    assert config.output_format == "csv"


def test_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert RobotConfig.from_yaml(str(path)) == RobotConfig()


def test_missing_yaml(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        RobotConfig.from_yaml(str(tmp_path / "nope.yaml"))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("table: [unclosed\n")
    with pytest.raises(ConfigError):
        RobotConfig.from_yaml(str(path))


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError, match="mapping"):
        RobotConfig.from_yaml(str(path))


def test_non_integer_width_in_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("table:\n  width: wide\n")
    with pytest.raises(ConfigError):
        RobotConfig.from_yaml(str(path))


def test_env_overrides():
    config = RobotConfig.from_env({
        "ROBOT_TABLE_WIDTH": "10",
        "ROBOT_TABLE_HEIGHT": "8",
        "ROBOT_OUTPUT_FORMAT": "XML",
        "ROBOT_LOG_LEVEL": "INFO",
        "ROBOT_MAX_COMMANDS": "50",
    })
    assert (config.table_width, config.table_height) == (10, 8)
    assert config.output_format == "xml"
    assert config.log_level == "info"
    assert config.max_commands == 50


def test_env_quiet_mode():
    config = RobotConfig.from_env({"ROBOT_QUIET_MODE": "true", "ROBOT_OUTPUT_FORMAT": "json"})
    assert config.quiet
    assert config.effective_output_format == "quiet"


def test_empty_env_values_ignored():
    assert RobotConfig.from_env({"ROBOT_TABLE_WIDTH": ""}) == RobotConfig()


def test_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("ROBOT_TABLE_WIDTH", "6")
    assert RobotConfig.from_env().table_width == 6


def test_env_non_integer():
    with pytest.raises(ConfigError, match="ROBOT_TABLE_WIDTH"):
        RobotConfig.from_env({"ROBOT_TABLE_WIDTH": "five"})


def test_load_env_beats_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("table:\n  width: 8\n  height: 8\n")
    config = RobotConfig.load(str(path), {"ROBOT_TABLE_WIDTH": "3"})
    assert (config.table_width, config.table_height) == (3, 8)


def test_load_without_file():
    assert RobotConfig.load(None, {}) == RobotConfig()


@pytest.mark.parametrize("kwargs", [
    {"table_width": 0},
    {"table_height": -2},
    {"output_format": "yaml"},
    {"log_level": "loud"},
    {"log_format": "xml"},
    {"max_commands": -1},
])
def test_validate_rejects(kwargs):
    with pytest.raises(ConfigError):
        RobotConfig(**kwargs).validate()


def test_to_dict():
    data = RobotConfig(table_width=7).to_dict()
    assert data["table_width"] == 7
    assert data["output_format"] == "text"
