"""Next-piece generation and spawn placement."""

from __future__ import annotations

import logging
import random
from enum import Enum
from itertools import cycle
from typing import Iterable, Optional, Protocol

from .board import SPAWN_ORIGIN
from .game_state import GameState
from .tetromino import Tetromino, TetrominoType
from .utils import is_blocked

LOGGER = logging.getLogger(__name__)


class ShapeSource(Protocol):
    """Anything able to hand out the next shape."""

    def draw(self) -> TetrominoType:
        ...


class RandomShapeSource:
    """Uniform draws with replacement from the seven shapes."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._shapes = list(TetrominoType)

    def seed(self, seed: Optional[int]) -> None:
        self._rng.seed(seed)

    def draw(self) -> TetrominoType:
        return self._rng.choice(self._shapes)


class SequenceShapeSource:
    """Replay a fixed sequence of shapes forever.

    Handy for tests and scripted demos where the piece order must be known.
    """

    def __init__(self, shapes: Iterable[TetrominoType]) -> None:
        shapes = list(shapes)
        if not shapes:
            raise ValueError("At least one shape is required")
        self._shapes = cycle(shapes)

    def draw(self) -> TetrominoType:
        return next(self._shapes)


class SpawnOutcome(str, Enum):
    SPAWNED = "spawned"
    GAME_OVER = "game_over"


class PieceSpawner:
    """Turn the buffered next shape into the active piece."""

    def __init__(self, source: ShapeSource) -> None:
        self.source = source

    def spawn(self, state: GameState) -> SpawnOutcome:
        """Spawn the buffered shape and refill the buffer.

        The buffer is refilled before the collision test, so it advances even
        when the spawn ends the game.  On a collision nothing is written to the
        board and no active piece is created.
        """

        shape = state.upcoming if state.upcoming is not None else self.source.draw()
        state.upcoming = self.source.draw()

        candidate = Tetromino.spawn(shape, SPAWN_ORIGIN)
        if is_blocked(candidate.blocks, state.board.positions()):
            state.active = None
            LOGGER.info("Game over: %s does not fit at spawn", shape.value)
            return SpawnOutcome.GAME_OVER

        state.active = candidate
        LOGGER.debug("Spawned %s, next is %s", shape.value, state.upcoming.value)
        return SpawnOutcome.SPAWNED
