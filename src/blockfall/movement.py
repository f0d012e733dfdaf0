"""Translation and rotation of the active piece.

Every move builds a candidate piece, checks all of its cells and only then
replaces ``state.active``.  A rejected move leaves the piece exactly as it
was.
"""

from __future__ import annotations

from .game_state import GameState
from .tetromino import Tetromino
from .utils import is_blocked


def _commit(state: GameState, candidate: Tetromino) -> bool:
    if is_blocked(candidate.blocks, state.board.positions()):
        return False
    state.active = candidate
    return True


def translate(state: GameState, dx: int, dy: int) -> bool:
    """Shift the active piece by ``(dx, dy)``; return ``True`` on success."""

    if state.active is None:
        return False
    return _commit(state, state.active.moved(dx, dy))


def rotate(state: GameState) -> bool:
    """Rotate the active piece clockwise around its pivot.

    A piece without a pivot (the ``O``) always succeeds without moving.
    """

    if state.active is None:
        return False
    if state.active.pivot is None:
        return True
    return _commit(state, state.active.rotated())


def hard_drop(state: GameState) -> int:
    """Drop the active piece as far as it goes and return the step count.

    The loop ends at the first rejected step, at the latest when the lowest
    block reaches the floor.  Landing the piece is left to the caller.
    """

    steps = 0
    while translate(state, 0, -1):
        steps += 1
    return steps
