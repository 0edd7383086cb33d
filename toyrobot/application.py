#!/usr/bin/env python3
"""
Toy Robot Application
---------------------
Drives the parse -> execute -> report loop over a stream of lines.

One Robot on one Table for the whole run. Lines are processed strictly in
order; EXIT (or QUIT/BYE) stops reading immediately, end of input ends the
run normally, and Ctrl+C is treated like EXIT.

Usage:
    from toyrobot import Application

    app = Application(output=print)
    result = app.run(["PLACE 0,0,NORTH", "MOVE", "REPORT"])   # prints 0,1,NORTH
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union

from .commands import ParseFailure, parse_command_line
from .config import RobotConfig
from .errors import InputStreamError
from .formatters import OutputFormatter, create_formatter
from .input_sources import InputSource, create_input_source
from .processor import CommandProcessor, ExitRequested, Outcome, Reported
from .robot import Robot
from .types import Table

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Summary of one run()."""
    lines_read: int = 0
    commands_executed: int = 0
    parse_failures: int = 0
    reports: int = 0
    exit_requested: bool = False
    interrupted: bool = False
    limit_reached: bool = False


@dataclass
class LineResult:
    """What happened to one line."""
    outcome: Optional[Outcome] = None
    failure: Optional[ParseFailure] = None
    output: Optional[str] = None

    @property
    def blank(self) -> bool:
        return self.outcome is None and self.failure is None

    @property
    def exit_requested(self) -> bool:
        return isinstance(self.outcome, ExitRequested)


class Application:
    """
    Runs the toy robot over an input stream.

    Args:
        table: Table for the robot (built from config when omitted)
        output: Sink called with each rendered report
        formatter: Report renderer (from config output format when omitted)
        config: Run settings (defaults when omitted)
    """

    def __init__(
        self,
        table: Optional[Table] = None,
        output: Callable[[str], None] = print,
        formatter: Optional[OutputFormatter] = None,
        config: Optional[RobotConfig] = None,
    ):
        self.config = config or RobotConfig()
        self.table = table or self.config.make_table()
        self.robot = Robot(self.table)
        self.processor = CommandProcessor()
        self.formatter = formatter or create_formatter(self.config.effective_output_format)
        self.output = output

    def process_line(self, line: str, line_number: int = 0) -> LineResult:
        """Parse and execute a single line, forwarding any report to the sink."""
        parsed = parse_command_line(line)
        if parsed is None:
            return LineResult()

        if isinstance(parsed, ParseFailure):
            logger.debug(
                "Discarded line %d: %s", line_number, parsed.reason,
                extra={"line_number": line_number, "reason": parsed.reason},
            )
            return LineResult(failure=parsed)

        outcome = self.processor.execute(parsed, self.robot)
        result = LineResult(outcome=outcome)
        if isinstance(outcome, Reported):
            result.output = self.formatter.format_report(outcome)
            if result.output is not None:
                self.output(result.output)
        return result

    def run(self, source: Union[InputSource, Iterable[str], str, None] = None) -> RunResult:
        """
        Process lines until EXIT, end of input, or interrupt.

        Raises:
            InputStreamError: the input source failed
        """
        lines = source if _is_plain_iterable(source) else create_input_source(source)
        limit = self.config.max_commands
        result = RunResult()

        try:
            for line in lines:
                result.lines_read += 1
                line_result = self.process_line(line, result.lines_read)

                if line_result.failure is not None:
                    result.parse_failures += 1
                elif line_result.outcome is not None:
                    result.commands_executed += 1
                    if isinstance(line_result.outcome, Reported):
                        result.reports += 1

                if line_result.exit_requested:
                    result.exit_requested = True
                    logger.info("Exit requested at line %d", result.lines_read)
                    break

                if limit and result.commands_executed >= limit:
                    result.limit_reached = True
                    logger.warning("Command limit of %d reached, stopping", limit)
                    break
        except KeyboardInterrupt:
            result.interrupted = True
            logger.info("Interrupted after %d line(s)", result.lines_read)
        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(f"Failed reading input: {e}") from e

        return result

    def welcome_message(self) -> Optional[str]:
        return self.formatter.format_welcome(self.table)

    def goodbye_message(self) -> Optional[str]:
        return self.formatter.format_goodbye()


def _is_plain_iterable(source) -> bool:
    """Iterables of lines that are not strings, lists or file objects."""
    if source is None or isinstance(source, (str, list, tuple, InputSource)):
        return False
    if hasattr(source, "readline"):
        return False
    return hasattr(source, "__iter__")
