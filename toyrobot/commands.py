#!/usr/bin/env python3
"""
Command Registry and Parser
---------------------------
Keyword definitions for the toy robot command language and the line parser
that turns raw text into Command values.

Grammar (one command per line, case-insensitive):
    PLACE X,Y,F
    MOVE
    LEFT
    RIGHT
    REPORT
    EXIT | QUIT | BYE

Usage:
    from toyrobot.commands import parse_command_line, ParseFailure

    result = parse_command_line("place 1, 2, east")
    if result is None:
        pass                    # blank line
    elif isinstance(result, ParseFailure):
        print(result.reason)
    else:
        print(result.kind, result.x, result.y, result.direction)
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union
from enum import Enum

from .types import Direction


class CommandKind(Enum):
    PLACE = "PLACE"
    MOVE = "MOVE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    REPORT = "REPORT"
    EXIT = "EXIT"


@dataclass(frozen=True)
class Command:
    """
    Parsed command.

    Only PLACE carries arguments. x and y are any integers; whether they lie
    on the table is decided at execution time.
    """
    kind: CommandKind
    x: Optional[int] = None
    y: Optional[int] = None
    direction: Optional[Direction] = None

    @classmethod
    def place(cls, x: int, y: int, direction: Direction) -> 'Command':
        return cls(CommandKind.PLACE, x, y, direction)

    def __str__(self):
        if self.kind == CommandKind.PLACE:
            return f"PLACE {self.x},{self.y},{self.direction}"
        return self.kind.value


@dataclass(frozen=True)
class ParseFailure:
    """A non-blank line that is not a valid command."""
    line: str
    reason: str


ParseResult = Union[Command, ParseFailure, None]


@dataclass
class CommandSpec:
    """
    Keyword definition.

    - name: Canonical keyword (e.g., "PLACE")
    - kind: Command variant it produces
    - description: Human-readable description
    - usage: Argument hint (e.g., "X,Y,F")
    - aliases: Alternative keywords
    """
    name: str
    kind: CommandKind
    description: str
    usage: str = ""
    aliases: List[str] = field(default_factory=list)

    @property
    def takes_args(self) -> bool:
        return bool(self.usage)


# ============================================================
# COMMAND REGISTRY
# ============================================================

COMMANDS: Dict[str, CommandSpec] = {}


def register(spec: CommandSpec) -> CommandSpec:
    """Register a keyword and its aliases."""
    COMMANDS[spec.name] = spec
    for alias in spec.aliases:
        COMMANDS[alias] = spec
    return spec


register(CommandSpec(
    name="PLACE",
    kind=CommandKind.PLACE,
    description="Place robot at position (X,Y) facing direction F",
    usage="X,Y,F",
))

register(CommandSpec(
    name="MOVE",
    kind=CommandKind.MOVE,
    description="Move robot one step forward",
))

register(CommandSpec(
    name="LEFT",
    kind=CommandKind.LEFT,
    description="Turn robot 90 degrees counter-clockwise",
))

register(CommandSpec(
    name="RIGHT",
    kind=CommandKind.RIGHT,
    description="Turn robot 90 degrees clockwise",
))

register(CommandSpec(
    name="REPORT",
    kind=CommandKind.REPORT,
    description="Show current position and direction",
))

register(CommandSpec(
    name="EXIT",
    kind=CommandKind.EXIT,
    description="Stop processing commands",
    aliases=["QUIT", "BYE"],
))


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def get_command(name: str) -> Optional[CommandSpec]:
    """Get keyword definition by name or alias."""
    return COMMANDS.get(name.strip().upper())


def list_commands() -> List[CommandSpec]:
    """List all keywords once each, in registration order."""
    seen = set()
    result = []
    for spec in COMMANDS.values():
        if spec.name not in seen:
            result.append(spec)
            seen.add(spec.name)
    return result


def format_command_help(spec: CommandSpec) -> str:
    """Format help text for one keyword."""
    usage = f" {spec.usage}" if spec.usage else ""
    lines = [f"{spec.name}{usage}: {spec.description}"]
    if spec.aliases:
        lines.append(f"  Aliases: {', '.join(spec.aliases)}")
    if spec.kind == CommandKind.PLACE:
        lines.append(f"  Directions: {', '.join(Direction.names())}")
    return "\n".join(lines)


_INT_RE = re.compile(r"^[+-]?\d+$")


def _parse_place_args(line: str, args: str) -> ParseResult:
    fields = [part.strip() for part in args.split(",")]
    if len(fields) != 3:
        return ParseFailure(line, f"PLACE expects X,Y,F, got {len(fields)} field(s)")

    x_text, y_text, dir_text = fields
    if not _INT_RE.match(x_text) or not _INT_RE.match(y_text):
        return ParseFailure(line, "PLACE coordinates must be integers")

    direction = Direction.parse(dir_text)
    if direction is None:
        return ParseFailure(line, f"Unknown direction: {dir_text}")

    return Command.place(int(x_text), int(y_text), direction)


def parse_command_line(line: str) -> ParseResult:
    """
    Parse one input line.

    Returns:
        Command for a valid line, ParseFailure for a malformed one,
        None for a blank line.
    """
    text = line.strip()
    if not text:
        return None

    parts = text.split(maxsplit=1)
    keyword = parts[0]
    args = parts[1] if len(parts) > 1 else ""

    spec = get_command(keyword)
    if spec is None:
        return ParseFailure(line, f"Unknown command: {keyword}")

    if spec.takes_args:
        if not args:
            return ParseFailure(line, f"{spec.name} requires arguments: {spec.usage}")
        return _parse_place_args(line, args)

    if args:
        return ParseFailure(line, f"{spec.name} takes no arguments")

    return Command(spec.kind)


# ============================================================
# COMMAND COMPLETIONS (for tab completion)
# ============================================================

def get_completions(partial: str, context: str = "") -> List[str]:
    """
    Get tab completions for partial input.

    Args:
        partial: Word being typed
        context: Line content before the word

    Returns:
        List of possible completions (keywords, or directions after PLACE)
    """
    upper = partial.upper()
    context_parts = context.strip().split()

    if not context_parts:
        return sorted(name for name in COMMANDS if name.startswith(upper))

    spec = get_command(context_parts[0])
    if spec is None or spec.kind != CommandKind.PLACE:
        return []

    # Complete the direction field of "PLACE X,Y,"
    prefix, sep, last = partial.rpartition(",")
    if not sep:
        return []
    return [f"{prefix},{name}" for name in Direction.names() if name.startswith(last.upper())]
