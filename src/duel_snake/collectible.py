"""Food and power-up placement logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from duel_snake.grid import Cell

if TYPE_CHECKING:
    from duel_snake.grid import Grid

logger = logging.getLogger(__name__)

# Position held by a collectible that is not on the board.
INACTIVE: Cell = (-1, -1)


class CollectibleKind(enum.Enum):
    """Collectible flavours with their default score value."""

    FOOD = "food"
    POWERUP = "powerup"

    @property
    def default_value(self) -> int:
        return _DEFAULT_VALUES[self]


_DEFAULT_VALUES: dict[CollectibleKind, int] = {
    CollectibleKind.FOOD: 1,
    CollectibleKind.POWERUP: 5,
}


class Collectible:
    """A positionable item the snakes can pick up.

    Uses a NumPy RNG for reproducible placement. While active, the
    position never overlaps a snake cell at the moment it was placed.
    """

    def __init__(
        self,
        grid: Grid,
        kind: CollectibleKind = CollectibleKind.FOOD,
        value: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.kind = kind
        self.value = kind.default_value if value is None else value
        if self.value < 0:
            raise ValueError("Collectible value must be non-negative.")
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Cell = INACTIVE

    @property
    def active(self) -> bool:
        return self.position != INACTIVE

    def place_random(
        self, occupied1: Sequence[Cell], occupied2: Sequence[Cell],
    ) -> Cell:
        """Return a random cell absent from both occupied sequences."""
        return self.grid.random_free_cell(self.rng, occupied1, occupied2)

    def activate(
        self, occupied1: Sequence[Cell], occupied2: Sequence[Cell],
    ) -> Cell:
        """Place the collectible on a free cell and return it."""
        self.position = self.place_random(occupied1, occupied2)
        logger.debug("%s placed at %s.", self.kind.value, self.position)
        return self.position

    def deactivate(self) -> None:
        """Take the collectible off the board."""
        self.position = INACTIVE

    def is_at(self, cell: Cell) -> bool:
        return self.active and self.position == cell

    def to_dict(self) -> dict:
        """Serialize collectible state to a dictionary."""
        return {
            "kind": self.kind.value,
            "value": self.value,
            "active": self.active,
            "position": list(self.position),
        }
