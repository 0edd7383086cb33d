"""
Common types for the toy robot.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from enum import Enum

from .errors import ConfigError


DEFAULT_TABLE_WIDTH = 5
DEFAULT_TABLE_HEIGHT = 5


class Direction(Enum):
    """Compass direction, ordered clockwise."""
    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    @classmethod
    def parse(cls, token: str) -> Optional['Direction']:
        """Case-insensitive lookup. Returns None for unknown tokens."""
        try:
            return cls[token.strip().upper()]
        except (KeyError, AttributeError):
            return None

    @classmethod
    def names(cls):
        return [d.name for d in cls]

    def left(self) -> 'Direction':
        """Rotate 90 degrees counter-clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def right(self) -> 'Direction':
        """Rotate 90 degrees clockwise."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy) in this direction."""
        return _DELTAS[self]

    def __str__(self):
        return self.name


_CLOCKWISE = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]

_DELTAS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


@dataclass(frozen=True)
class Position:
    """Grid coordinate."""
    x: int
    y: int

    def moved_by(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)

    def __str__(self):
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Table:
    """
    Rectangular table the robot moves on.

    Valid coordinates are 0 <= x < width and 0 <= y < height.
    """
    width: int = DEFAULT_TABLE_WIDTH
    height: int = DEFAULT_TABLE_HEIGHT

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"Table {name} must be a positive integer, got {value!r}")

    def contains(self, position: Position) -> bool:
        """Check if position lies on the table."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def __str__(self):
        return f"{self.width}x{self.height} table"
