"""Tetromino definitions and the active falling piece.

The catalogue below is the only source of shape geometry.  Offsets are local
``(x, y)`` coordinates with ``y`` growing upwards; the optional pivot index
selects the block used as the rotation origin.  The square ``O`` piece has no
pivot and never rotates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

Position = Tuple[int, int]  # (x, y)
Color = Tuple[int, int, int]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    L = "L"
    J = "J"
    S = "S"
    Z = "Z"


@dataclass(frozen=True)
class ShapeSpec:
    """Static geometry and colour of one shape."""

    offsets: Tuple[Position, Position, Position, Position]
    pivot: Optional[int]
    color: Color


SHAPES: Dict[TetrominoType, ShapeSpec] = {
    TetrominoType.I: ShapeSpec(((-1, 0), (0, 0), (1, 0), (2, 0)), 1, (0, 255, 255)),
    TetrominoType.O: ShapeSpec(((0, 0), (0, 1), (1, 0), (1, 1)), None, (255, 255, 0)),
    TetrominoType.T: ShapeSpec(((0, 0), (-1, 0), (1, 0), (0, 1)), 0, (128, 0, 128)),
    TetrominoType.L: ShapeSpec(((0, 0), (-1, 0), (1, 0), (1, 1)), 0, (255, 165, 0)),
    TetrominoType.J: ShapeSpec(((0, 0), (-1, 0), (1, 0), (-1, 1)), 0, (0, 0, 255)),
    TetrominoType.S: ShapeSpec(((0, 0), (1, 0), (0, 1), (-1, 1)), 0, (0, 255, 0)),
    TetrominoType.Z: ShapeSpec(((0, 0), (-1, 0), (0, 1), (1, 1)), 0, (255, 0, 0)),
}


def shape_blocks(shape: TetrominoType) -> Tuple[Position, ...]:
    """Return the local block offsets for ``shape``."""

    return SHAPES[shape].offsets


def shape_color(shape: TetrominoType) -> Color:
    return SHAPES[shape].color


def _rotate_about(block: Position, pivot: Position) -> Position:
    """Return ``block`` rotated 90 degrees clockwise around ``pivot``.

    A block at offset ``(rx, ry)`` from the pivot ends up at ``(ry, -rx)``.
    """

    rx = block[0] - pivot[0]
    ry = block[1] - pivot[1]
    return (pivot[0] + ry, pivot[1] - rx)


@dataclass(frozen=True)
class Tetromino:
    """Active falling piece in the game.

    The piece is an immutable value: :meth:`moved` and :meth:`rotated` return
    candidate pieces and leave ``self`` untouched, so a caller commits a move
    by replacing the whole value once the candidate has been validated.
    """

    shape: TetrominoType
    blocks: Tuple[Position, ...]
    pivot: Optional[Position] = None

    @classmethod
    def spawn(cls, shape: TetrominoType, origin: Position) -> "Tetromino":
        """Materialise ``shape`` with its local offsets anchored at ``origin``."""

        spec = SHAPES[shape]
        ox, oy = origin
        blocks = tuple((ox + dx, oy + dy) for dx, dy in spec.offsets)
        pivot = blocks[spec.pivot] if spec.pivot is not None else None
        return cls(shape=shape, blocks=blocks, pivot=pivot)

    @property
    def color(self) -> Color:
        return shape_color(self.shape)

    def moved(self, dx: int, dy: int) -> "Tetromino":
        """Return the piece translated by ``dx`` columns and ``dy`` rows."""

        blocks = tuple((x + dx, y + dy) for x, y in self.blocks)
        pivot = None
        if self.pivot is not None:
            pivot = (self.pivot[0] + dx, self.pivot[1] + dy)
        return Tetromino(self.shape, blocks, pivot)

    def rotated(self) -> "Tetromino":
        """Return the piece rotated clockwise around its pivot.

        Pieces without a pivot are returned unchanged.
        """

        if self.pivot is None:
            return self
        blocks = tuple(_rotate_about(block, self.pivot) for block in self.blocks)
        return Tetromino(self.shape, blocks, self.pivot)

    def lowest(self) -> int:
        """Return the smallest ``y`` among the piece's blocks."""

        return min(y for _, y in self.blocks)
