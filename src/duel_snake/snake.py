"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from duel_snake.grid import Cell, contains


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downwards, so ``UP`` decreases it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        dx, dy = self.value
        return Direction((-dx, -dy))


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start: Cell,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
        color: tuple[int, int, int] = (0, 117, 44),
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.length = length
        self.color = color
        self.body: deque[Cell] = deque()
        self.direction = direction
        self.grow_pending = False
        self._turned = False
        self.reset_to(start, direction)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def reset_to(self, start: Cell, direction: Direction) -> None:
        """Rebuild the initial body extending backward from *start*."""
        dx, dy = direction.value
        x, y = start
        self.body.clear()
        for i in range(self.length):
            self.body.append((x - dx * i, y - dy * i))
        self.direction = direction
        self.grow_pending = False
        self._turned = False

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction for the next advance.

        Ignores 180° reversals and any turn after the first one accepted
        since the last advance. Repeating the current direction is not a
        turn and leaves the next turn available. Returns whether the turn
        was accepted.
        """
        if new_direction is self.direction:
            return False
        if self._turned or new_direction is self.direction.opposite:
            return False
        self.direction = new_direction
        self._turned = True
        return True

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def advance(self) -> Cell | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        self._turned = False
        if self.grow_pending:
            self.grow_pending = False
            return None
        return self.body.pop()

    def grow(self) -> None:
        """Keep the tail on the next advance. Repeated calls grow once."""
        self.grow_pending = True

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return contains(cell, self.body)

    def self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self.head
        return contains(head, list(self.body)[1:])

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.value,
            "color": list(self.color),
            "grow_pending": self.grow_pending,
        }
