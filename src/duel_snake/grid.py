"""Grid helpers for the duel snake board."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import numpy as np

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

# Rejection samples tried before falling back to enumerating free cells.
_DEFAULT_MAX_ATTEMPTS = 1_000


class GridFullError(RuntimeError):
    """Raised when no free cell is left for spawn placement."""


def contains(cell: Cell, cells: Iterable[Cell]) -> bool:
    """Linear-scan membership test of *cell* in *cells*."""
    return any(seg == cell for seg in cells)


class Grid:
    """Square board of ``cell_count`` × ``cell_count`` cells.

    Coordinates are ``(x, y)`` with ``x`` growing to the right and ``y``
    growing downwards. Occupancy masks are indexed ``[y, x]`` to match
    NumPy's row-major layout.
    """

    def __init__(self, cell_count: int = 25) -> None:
        if cell_count < 4:
            raise ValueError("Grid cell_count must be at least 4.")
        self.cell_count = cell_count

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = cell
        return 0 <= x < self.cell_count and 0 <= y < self.cell_count

    def occupancy(self, *bodies: Sequence[Cell]) -> np.ndarray:
        """Return a boolean mask of cells covered by any of *bodies*."""
        mask = np.zeros((self.cell_count, self.cell_count), dtype=bool)
        for body in bodies:
            for x, y in body:
                if 0 <= x < self.cell_count and 0 <= y < self.cell_count:
                    mask[y, x] = True
        return mask

    def free_cells(self, *bodies: Sequence[Cell]) -> list[Cell]:
        """Return every cell not covered by any of *bodies*."""
        ys, xs = np.where(~self.occupancy(*bodies))
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def random_cell(self, rng: np.random.Generator) -> Cell:
        """Sample a uniformly random cell from the full grid."""
        x, y = rng.integers(0, self.cell_count, size=2)
        return int(x), int(y)

    def random_free_cell(
        self,
        rng: np.random.Generator,
        *bodies: Sequence[Cell],
        max_attempts: int = _DEFAULT_MAX_ATTEMPTS,
    ) -> Cell:
        """Pick a uniformly random cell absent from every body in *bodies*.

        Samples the whole grid until a free cell turns up. After
        *max_attempts* misses the remaining free cells are enumerated and
        one is chosen directly, so a crowded board still terminates.

        Raises:
            GridFullError: if the bodies cover the entire grid.
        """
        for _ in range(max_attempts):
            cell = self.random_cell(rng)
            if not any(contains(cell, body) for body in bodies):
                return cell

        free = self.free_cells(*bodies)
        if not free:
            logger.error(
                "No free cell left on the %dx%d grid.",
                self.cell_count,
                self.cell_count,
            )
            raise GridFullError("No free cell available for spawn placement.")

        logger.debug(
            "Rejection sampling gave up after %d attempts; %d free cells left.",
            max_attempts,
            len(free),
        )
        return free[int(rng.integers(len(free)))]

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"cell_count": self.cell_count}
