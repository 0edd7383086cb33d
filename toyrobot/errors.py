"""
Exception types.

Ordinary bad input (malformed lines, moves off the table, commands before
PLACE) never raises; it is reported as a ParseFailure or an Ignored outcome.
These exceptions cover the conditions that end a run.
"""


class RobotError(Exception):
    """Base class for toy robot errors."""


class ConfigError(RobotError):
    """Invalid configuration (table size, output format, config file)."""


class InputStreamError(RobotError):
    """The input source itself failed; no further commands can be read."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source
