"""
Configuration
-------------
Settings are layered: dataclass defaults, then an optional YAML file, then
ROBOT_* environment variables, then CLI flags (applied by main.py).

Example config.yaml:

    table:
      width: 5
      height: 5
    output:
      format: text
    logging:
      level: warning
      format: text
    max_commands: 0  # 0 = no limit
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError
from .formatters import OUTPUT_FORMATS
from .types import DEFAULT_TABLE_HEIGHT, DEFAULT_TABLE_WIDTH, Table

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]
LOG_FORMATS = ["text", "json"]

ENV_PREFIX = "ROBOT_"


@dataclass(frozen=True)
class RobotConfig:
    """Run configuration."""
    table_width: int = DEFAULT_TABLE_WIDTH
    table_height: int = DEFAULT_TABLE_HEIGHT
    output_format: str = "text"
    log_level: str = "warning"
    log_format: str = "text"
    max_commands: int = 0  # 0 disables the cap
    quiet: bool = False

    @classmethod
    def from_yaml(cls, config_path: str, base: Optional['RobotConfig'] = None) -> 'RobotConfig':
        """Load settings from a YAML file on top of base (or defaults)."""
        base = base or cls()
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {config_path}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        table = data.get("table") or {}
        output = data.get("output") or {}
        logging_cfg = data.get("logging") or {}

        updates: Dict[str, Any] = {}
        if "width" in table:
            updates["table_width"] = _as_int(table["width"], "table.width")
        if "height" in table:
            updates["table_height"] = _as_int(table["height"], "table.height")
        if "format" in output:
            updates["output_format"] = str(output["format"]).lower()
        if "quiet" in output:
            updates["quiet"] = bool(output["quiet"])
        if "level" in logging_cfg:
            updates["log_level"] = str(logging_cfg["level"]).lower()
        if "format" in logging_cfg:
            updates["log_format"] = str(logging_cfg["format"]).lower()
        if "max_commands" in data:
            updates["max_commands"] = _as_int(data["max_commands"], "max_commands")

        return replace(base, **updates)

    def with_env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> 'RobotConfig':
        """Apply ROBOT_* environment variables."""
        env = os.environ if environ is None else environ
        updates: Dict[str, Any] = {}

        if env.get("ROBOT_TABLE_WIDTH"):
            updates["table_width"] = _as_int(env["ROBOT_TABLE_WIDTH"], "ROBOT_TABLE_WIDTH")
        if env.get("ROBOT_TABLE_HEIGHT"):
            updates["table_height"] = _as_int(env["ROBOT_TABLE_HEIGHT"], "ROBOT_TABLE_HEIGHT")
        if env.get("ROBOT_OUTPUT_FORMAT"):
            updates["output_format"] = env["ROBOT_OUTPUT_FORMAT"].strip().lower()
        if env.get("ROBOT_LOG_LEVEL"):
            updates["log_level"] = env["ROBOT_LOG_LEVEL"].strip().lower()
        if env.get("ROBOT_MAX_COMMANDS"):
            updates["max_commands"] = _as_int(env["ROBOT_MAX_COMMANDS"], "ROBOT_MAX_COMMANDS")
        if env.get("ROBOT_QUIET_MODE"):
            updates["quiet"] = env["ROBOT_QUIET_MODE"].strip().lower() in ("true", "1", "yes", "on")

        return replace(self, **updates)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'RobotConfig':
        return cls().with_env_overrides(environ)

    @classmethod
    def load(cls, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> 'RobotConfig':
        """Defaults, then config file (if given), then environment."""
        config = cls()
        if config_path:
            config = cls.from_yaml(config_path, config)
        return config.with_env_overrides(environ)

    def validate(self) -> 'RobotConfig':
        """Raise ConfigError for invalid settings. Returns self."""
        if self.table_width < 1 or self.table_height < 1:
            raise ConfigError("Table dimensions must be positive integers")
        if self.output_format not in OUTPUT_FORMATS and self.output_format != "none":
            raise ConfigError(
                f"Unknown output format: {self.output_format} "
                f"(choose from {', '.join(OUTPUT_FORMATS)})"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(f"Unknown log format: {self.log_format}")
        if self.max_commands < 0:
            raise ConfigError("max_commands must be zero or positive")
        return self

    @property
    def effective_output_format(self) -> str:
        return "quiet" if self.quiet else self.output_format

    def make_table(self) -> Table:
        return Table(self.table_width, self.table_height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "table_width": self.table_width,
            "table_height": self.table_height,
            "output_format": self.output_format,
            "log_level": self.log_level,
            "log_format": self.log_format,
            "max_commands": self.max_commands,
            "quiet": self.quiet,
        }


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
