"""
Toy Robot Simulator
-------------------
A robot on a rectangular table, driven by a text command stream.

Key components:
- Direction, Position, Table: value types
- Robot: the mutable robot state
- Command parser: text lines to Command values
- CommandProcessor: applies commands, returns Outcome values
- Application: the line-by-line run loop
- Formatters, input sources, config: the surrounding I/O layer
- RobotShell: interactive terminal interface
"""

__version__ = "1.0.0"

from .errors import RobotError, ConfigError, InputStreamError
from .types import Direction, Position, Table, DEFAULT_TABLE_WIDTH, DEFAULT_TABLE_HEIGHT
from .robot import Robot
from .commands import (
    Command,
    CommandKind,
    CommandSpec,
    ParseFailure,
    COMMANDS,
    get_command,
    list_commands,
    parse_command_line,
)
from .processor import (
    CommandProcessor,
    Outcome,
    StateChanged,
    Reported,
    Ignored,
    ExitRequested,
)
from .application import Application, RunResult, LineResult
from .config import RobotConfig
from .formatters import OutputFormatter, create_formatter, OUTPUT_FORMATS
from .input_sources import (
    InputSource,
    StdinInputSource,
    FileInputSource,
    StringInputSource,
    ListInputSource,
    create_input_source,
)

__all__ = [
    # Errors
    'RobotError',
    'ConfigError',
    'InputStreamError',

    # Types
    'Direction',
    'Position',
    'Table',
    'DEFAULT_TABLE_WIDTH',
    'DEFAULT_TABLE_HEIGHT',
    'Robot',

    # Commands
    'Command',
    'CommandKind',
    'CommandSpec',
    'ParseFailure',
    'COMMANDS',
    'get_command',
    'list_commands',
    'parse_command_line',

    # Processing
    'CommandProcessor',
    'Outcome',
    'StateChanged',
    'Reported',
    'Ignored',
    'ExitRequested',
    'Application',
    'RunResult',
    'LineResult',

    # I/O
    'RobotConfig',
    'OutputFormatter',
    'create_formatter',
    'OUTPUT_FORMATS',
    'InputSource',
    'StdinInputSource',
    'FileInputSource',
    'StringInputSource',
    'ListInputSource',
    'create_input_source',
]
