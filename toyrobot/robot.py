"""
Robot State
-----------
The robot is the only mutable entity. It starts unplaced and becomes placed
through a successful place(). Every operation returns whether the state
changed; none of them raise for an invalid target.
"""

from typing import Optional, Tuple

from .types import Direction, Position, Table


class Robot:
    """
    Robot on a table.

    position and direction are both set iff placed is True, and a set
    position always lies on the table.
    """

    def __init__(self, table: Optional[Table] = None):
        self._table = table or Table()
        self._position: Optional[Position] = None
        self._direction: Optional[Direction] = None

    @property
    def table(self) -> Table:
        return self._table

    @property
    def placed(self) -> bool:
        return self._position is not None

    @property
    def position(self) -> Optional[Position]:
        return self._position

    @property
    def direction(self) -> Optional[Direction]:
        return self._direction

    def place(self, position: Position, direction: Direction) -> bool:
        """Place robot on the table. Off-table targets leave state untouched."""
        if not self._table.contains(position):
            return False
        self._position = position
        self._direction = direction
        return True

    def move(self) -> bool:
        """Step forward one unit unless that would leave the table."""
        if not self.placed:
            return False
        candidate = self._position.moved_by(*self._direction.delta)
        if not self._table.contains(candidate):
            return False
        self._position = candidate
        return True

    def turn_left(self) -> bool:
        if not self.placed:
            return False
        self._direction = self._direction.left()
        return True

    def turn_right(self) -> bool:
        if not self.placed:
            return False
        self._direction = self._direction.right()
        return True

    def report(self) -> Optional[Tuple[Position, Direction]]:
        """Current (position, direction), or None if not placed."""
        if not self.placed:
            return None
        return self._position, self._direction

    def describe(self) -> str:
        if not self.placed:
            return "Robot not placed"
        return f"Robot at {self._position} facing {self._direction}"

    def __repr__(self):
        return f"Robot(position={self._position!r}, direction={self._direction!r}, table={self._table!r})"
