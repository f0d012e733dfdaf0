"""High level game state container and its read-only snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from .board import HEIGHT, Board, Grid
from .gravity import GravityTimer
from .scoring import ScoreKeeper
from .tetromino import Color, Position, Tetromino, TetrominoType
from .utils import render_grid

Cell = Tuple[Position, Color]


class Phase(str, Enum):
    """The five phases a session moves through."""

    TITLE = "title"
    SPAWNING = "spawning"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """Mutable state for a game session.

    Everything the simulation owns lives here: the settled blocks, the active
    piece, the next-piece buffer, the counters and the fall timer.  Only
    :class:`~blockfall.engine.GameStateMachine` changes ``phase``.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    upcoming: Optional[TetrominoType] = None
    scores: ScoreKeeper = field(default_factory=ScoreKeeper)
    gravity: GravityTimer = field(default_factory=GravityTimer)
    phase: Phase = Phase.TITLE

    @property
    def score(self) -> int:
        return self.scores.score

    @property
    def lines(self) -> int:
        return self.scores.lines

    @property
    def level(self) -> int:
        return self.scores.level

    def land(self) -> Tetromino:
        """Settle the active piece into the board and return it.

        Raises:
            RuntimeError: If there is no active piece.
        """

        if self.active is None:
            raise RuntimeError("No active piece to land")
        piece = self.active
        self.board.lock_piece(piece)
        self.active = None
        return piece

    def snapshot(self) -> "Snapshot":
        """Return an immutable view of the state for collaborators."""

        active: FrozenSet[Cell] = frozenset()
        pivot = None
        if self.active is not None:
            color = self.active.color
            active = frozenset((pos, color) for pos in self.active.blocks)
            pivot = self.active.pivot
        return Snapshot(
            static=frozenset(self.board),
            active=active,
            pivot=pivot,
            active_shape=self.active.shape if self.active is not None else None,
            score=self.score,
            lines=self.lines,
            level=self.level,
            upcoming=self.upcoming,
            phase=self.phase,
        )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a session published once per tick."""

    static: FrozenSet[Cell]
    active: FrozenSet[Cell]
    pivot: Optional[Position]
    active_shape: Optional[TetrominoType]
    score: int
    lines: int
    level: int
    upcoming: Optional[TetrominoType]
    phase: Phase

    def grid(self, height: int = HEIGHT) -> Grid:
        """Return a top-first numpy occupancy grid of the visible rows."""

        board = Board()
        for (x, y), color in self.static:
            board.set_cell(x, y, color)
        active = None
        if self.active_shape is not None:
            active = Tetromino(
                self.active_shape,
                tuple(pos for pos, _ in self.active),
                self.pivot,
            )
        return render_grid(board, active, height)
