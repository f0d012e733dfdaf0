"""Board representation for the playfield.

The board only stores settled blocks.  Coordinates are ``(x, y)`` with the
floor at ``y = 0``; the board is unbounded upwards, ``HEIGHT`` merely marks
the visible area and the spawn row.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Color, Position, Tetromino


# Dimensions of the standard playfield.
WIDTH = 10
HEIGHT = 20

# Pieces are anchored near the top centre of the visible board.
SPAWN_ORIGIN: Position = (WIDTH // 2 - 1, HEIGHT - 1)

Grid = NDArray[np.uint8]

# Values stored in occupancy grids; ``0`` is an empty cell.
STATIC_VALUE = 1
ACTIVE_VALUE = 2

LOGGER = logging.getLogger(__name__)


def create_empty_grid(height: int = HEIGHT) -> Grid:
    """Return a new empty occupancy grid filled with zeros."""

    return np.zeros((height, WIDTH), dtype=np.uint8)


class Board:
    """Settled blocks keyed by position."""

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self._cells: Dict[Position, Color] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, position: object) -> bool:
        return position in self._cells

    def __iter__(self) -> Iterator[Tuple[Position, Color]]:
        return iter(self._cells.items())

    def positions(self) -> frozenset[Position]:
        """Return the occupied positions as an immutable set."""

        return frozenset(self._cells)

    def get_cell(self, x: int, y: int) -> Color | None:
        """Return the colour at ``(x, y)`` or ``None`` when empty."""

        return self._cells.get((x, y))

    def set_cell(self, x: int, y: int, color: Color) -> None:
        """Place a static block at ``(x, y)``.

        Raises:
            ValueError: If the position is outside the walls/floor or taken.
        """

        if not (0 <= x < self.width and y >= 0):
            raise ValueError(f"Cell {(x, y)} out of bounds")
        if (x, y) in self._cells:
            raise ValueError(f"Cell {(x, y)} already occupied")
        self._cells[(x, y)] = color

    def clear(self) -> None:
        self._cells.clear()

    def lock_piece(self, tetromino: Tetromino) -> None:
        """Move the tetromino's blocks into the board as static blocks."""

        for x, y in tetromino.blocks:
            self.set_cell(x, y, tetromino.color)
        LOGGER.debug("Locked %s at %s", tetromino.shape.value, tetromino.blocks)

    def clear_full_rows(self) -> int:
        """Clear completed rows, compact the rest and return how many went.

        Rows are swept once from the floor upwards.  A full row is dropped and
        bumps ``shift``; any other row is lowered by the current ``shift``.
        Since ``shift`` never decreases during the sweep, a lowered row can
        never land on a row that has not been visited yet.
        """

        rows: Dict[int, List[Tuple[int, Color]]] = defaultdict(list)
        for (x, y), color in self._cells.items():
            rows[y].append((x, color))

        shift = 0
        compacted: Dict[Position, Color] = {}
        for y in sorted(rows):
            blocks = rows[y]
            if len(blocks) == self.width:
                shift += 1
                continue
            for x, color in blocks:
                compacted[(x, y - shift)] = color
        if shift:
            self._cells = compacted
        return shift

    def to_grid(self, height: int = HEIGHT) -> Grid:
        """Return a top-first occupancy grid of the visible rows.

        Row ``0`` of the returned array is the highest visible row.  Cells hold
        ``STATIC_VALUE`` for any settled block; blocks above ``height`` are
        omitted.
        """

        grid = create_empty_grid(height)
        for x, y in self._cells:
            if y < height:
                grid[height - 1 - y, x] = STATIC_VALUE
        return grid
