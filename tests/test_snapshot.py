from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from blockfall.actions import Action
from blockfall.board import ACTIVE_VALUE, HEIGHT, STATIC_VALUE, WIDTH
from blockfall.engine import GameStateMachine
from blockfall.spawner import SequenceShapeSource
from blockfall.tetromino import TetrominoType, shape_color


def _started():
    machine = GameStateMachine(SequenceShapeSource([TetrominoType.I, TetrominoType.T]))
    state = machine.new_state()
    state.board.set_cell(0, 0, (1, 1, 1))
    snapshot = machine.tick(state, 0.0, {Action.START_GAME})
    return state, snapshot


def test_snapshot_exposes_cells_with_colours() -> None:
    _, snapshot = _started()
    cyan = shape_color(TetrominoType.I)
    assert snapshot.active == frozenset(((x, 19), cyan) for x in (3, 4, 5, 6))
    assert snapshot.pivot == (4, 19)
    assert snapshot.static == frozenset({((0, 0), (1, 1, 1))})
    assert snapshot.upcoming is TetrominoType.T


def test_snapshot_is_detached_from_state() -> None:
    state, snapshot = _started()
    state.board.set_cell(9, 0, (2, 2, 2))
    assert len(snapshot.static) == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.score = 10  # type: ignore[misc]


def test_grid_is_top_first_with_active_overlay() -> None:
    _, snapshot = _started()
    grid = snapshot.grid()
    assert grid.shape == (HEIGHT, WIDTH)
    assert grid.dtype == np.uint8
    assert list(grid[0]) == [0, 0, 0, ACTIVE_VALUE, ACTIVE_VALUE, ACTIVE_VALUE, ACTIVE_VALUE, 0, 0, 0]
    assert grid[HEIGHT - 1, 0] == STATIC_VALUE
    assert int(np.count_nonzero(grid)) == 5


def test_cells_above_visible_rows_are_not_drawn() -> None:
    state, _ = _started()
    state.board.set_cell(2, HEIGHT + 3, (1, 1, 1))
    grid = state.snapshot().grid()
    assert int(np.count_nonzero(grid)) == 5
