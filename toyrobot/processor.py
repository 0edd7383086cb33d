"""
Command Processor
-----------------
Applies parsed commands to a Robot and describes what happened as an
Outcome value. Invalid actions (off-table PLACE, MOVE over an edge, anything
but PLACE/EXIT before the robot is placed) come back as Ignored; the
processor never raises for them.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Union

from .commands import Command, CommandKind
from .robot import Robot
from .types import Direction, Position

logger = logging.getLogger(__name__)

NOT_PLACED = "not placed"
OUT_OF_BOUNDS = "out of bounds"
WOULD_EXIT_BOUNDARY = "would exit boundary"


@dataclass(frozen=True)
class StateChanged:
    pass


@dataclass(frozen=True)
class Reported:
    position: Position
    direction: Direction

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def as_text(self) -> str:
        """Default rendering: "x,y,DIRECTION"."""
        return f"{self.position},{self.direction}"


@dataclass(frozen=True)
class Ignored:
    reason: str


@dataclass(frozen=True)
class ExitRequested:
    pass


Outcome = Union[StateChanged, Reported, Ignored, ExitRequested]


@dataclass
class ProcessorStats:
    """Counters shown by the shell's status command."""
    executed: int = 0
    changed: int = 0
    ignored: int = 0
    reports: int = 0
    ignored_by_reason: Dict[str, int] = field(default_factory=dict)

    def record(self, outcome: Outcome):
        self.executed += 1
        if isinstance(outcome, StateChanged):
            self.changed += 1
        elif isinstance(outcome, Reported):
            self.reports += 1
        elif isinstance(outcome, Ignored):
            self.ignored += 1
            self.ignored_by_reason[outcome.reason] = self.ignored_by_reason.get(outcome.reason, 0) + 1


class CommandProcessor:
    """
    Executes commands against a robot.

    Dispatch is a fixed table from CommandKind to handler; every kind has
    exactly one handler.
    """

    def __init__(self):
        self.stats = ProcessorStats()
        self._handlers: Dict[CommandKind, Callable[[Command, Robot], Outcome]] = {
            CommandKind.PLACE: self._place,
            CommandKind.MOVE: self._move,
            CommandKind.LEFT: self._left,
            CommandKind.RIGHT: self._right,
            CommandKind.REPORT: self._report,
            CommandKind.EXIT: self._exit,
        }

    def execute(self, command: Command, robot: Robot) -> Outcome:
        outcome = self._handlers[command.kind](command, robot)
        self.stats.record(outcome)
        if isinstance(outcome, Ignored):
            logger.debug(
                "Ignored %s: %s", command, outcome.reason,
                extra={"command": str(command), "reason": outcome.reason},
            )
        return outcome

    # ============================================================
    # HANDLERS
    # ============================================================

    def _place(self, command: Command, robot: Robot) -> Outcome:
        if robot.place(Position(command.x, command.y), command.direction):
            return StateChanged()
        return Ignored(OUT_OF_BOUNDS)

    def _move(self, command: Command, robot: Robot) -> Outcome:
        if not robot.placed:
            return Ignored(NOT_PLACED)
        if robot.move():
            return StateChanged()
        return Ignored(WOULD_EXIT_BOUNDARY)

    def _left(self, command: Command, robot: Robot) -> Outcome:
        if not robot.turn_left():
            return Ignored(NOT_PLACED)
        return StateChanged()

    def _right(self, command: Command, robot: Robot) -> Outcome:
        if not robot.turn_right():
            return Ignored(NOT_PLACED)
        return StateChanged()

    def _report(self, command: Command, robot: Robot) -> Outcome:
        state = robot.report()
        if state is None:
            return Ignored(NOT_PLACED)
        position, direction = state
        return Reported(position, direction)

    def _exit(self, command: Command, robot: Robot) -> Outcome:
        return ExitRequested()
