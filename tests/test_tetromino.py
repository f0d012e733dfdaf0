from __future__ import annotations

import pytest

from blockfall.board import SPAWN_ORIGIN
from blockfall.tetromino import SHAPES, Tetromino, TetrominoType, shape_blocks


def test_catalogue_has_four_distinct_offsets_per_shape() -> None:
    assert set(SHAPES) == set(TetrominoType)
    for shape in TetrominoType:
        offsets = shape_blocks(shape)
        assert len(offsets) == 4
        assert len(set(offsets)) == 4


def test_only_the_square_lacks_a_pivot() -> None:
    without_pivot = {shape for shape, spec in SHAPES.items() if spec.pivot is None}
    assert without_pivot == {TetrominoType.O}


def test_spawn_anchors_offsets_and_tags_pivot() -> None:
    piece = Tetromino.spawn(TetrominoType.I, SPAWN_ORIGIN)
    assert SPAWN_ORIGIN == (4, 19)
    assert piece.blocks == ((3, 19), (4, 19), (5, 19), (6, 19))
    assert piece.pivot == (4, 19)


def test_square_rotation_keeps_cells() -> None:
    piece = Tetromino.spawn(TetrominoType.O, (4, 10))
    assert piece.pivot is None
    assert piece.rotated() == piece


def test_t_rotates_clockwise_around_pivot() -> None:
    piece = Tetromino.spawn(TetrominoType.T, (4, 10))
    rotated = piece.rotated()
    assert rotated.pivot == (4, 10)
    assert set(rotated.blocks) == {(4, 10), (4, 11), (4, 9), (5, 10)}


@pytest.mark.parametrize("shape", [s for s in TetrominoType if s is not TetrominoType.O])
def test_four_rotations_return_to_start(shape: TetrominoType) -> None:
    piece = Tetromino.spawn(shape, (4, 10))
    turned = piece
    for _ in range(4):
        turned = turned.rotated()
    assert set(turned.blocks) == set(piece.blocks)


def test_moved_returns_new_piece() -> None:
    piece = Tetromino.spawn(TetrominoType.L, (4, 10))
    moved = piece.moved(1, -2)
    assert piece.blocks[0] == (4, 10)
    assert moved.blocks[0] == (5, 8)
    assert moved.pivot == (5, 8)
    assert moved.lowest() == 8
