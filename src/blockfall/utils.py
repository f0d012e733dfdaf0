"""Utility helpers for the game engine."""

from __future__ import annotations

from typing import AbstractSet, Iterable, Optional

from .board import ACTIVE_VALUE, HEIGHT, WIDTH, Board, Grid
from .tetromino import Position, Tetromino


BASE_GRAVITY_S = 1.0
GRAVITY_DECAY = 0.9


def gravity_interval(level: int) -> float:
    """Return the fall interval in seconds for ``level``.

    Level ``1`` falls once per second and every further level multiplies the
    interval by ``GRAVITY_DECAY``.
    """

    return BASE_GRAVITY_S * (GRAVITY_DECAY ** (level - 1))


def is_blocked(candidates: Iterable[Position], static: AbstractSet[Position]) -> bool:
    """Return ``True`` if any of ``candidates`` is not a legal cell.

    A cell is illegal when it lies left of the left wall, right of the right
    wall, below the floor or on top of a position in ``static``.  There is no
    ceiling: cells above the visible board are legal.
    """

    for x, y in candidates:
        if x < 0 or x >= WIDTH or y < 0:
            return True
        if (x, y) in static:
            return True
    return False


def render_grid(board: Board, active: Optional[Tetromino] = None, height: int = HEIGHT) -> Grid:
    """Return a top-first occupancy grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without touching the board.  Cells occupied by the active piece receive
    ``ACTIVE_VALUE``; anything above the visible rows is dropped.
    """

    grid = board.to_grid(height)
    if active is not None:
        for x, y in active.blocks:
            if 0 <= y < height and 0 <= x < WIDTH:
                grid[height - 1 - y, x] = ACTIVE_VALUE
    return grid
