"""Deterministic falling-block puzzle simulation."""

from .actions import Action
from .board import Board, HEIGHT, WIDTH
from .engine import GameStateMachine
from .game_state import GameState, Phase, Snapshot
from .gravity import GravityTimer
from .movement import hard_drop, rotate, translate
from .scoring import ScoreKeeper, points_for_lines
from .spawner import PieceSpawner, RandomShapeSource, SequenceShapeSource, SpawnOutcome
from .tetromino import Tetromino, TetrominoType, shape_blocks, shape_color
from .utils import gravity_interval, is_blocked, render_grid

__all__ = [
    "Action",
    "Board",
    "HEIGHT",
    "WIDTH",
    "GameStateMachine",
    "GameState",
    "Phase",
    "Snapshot",
    "GravityTimer",
    "hard_drop",
    "rotate",
    "translate",
    "ScoreKeeper",
    "points_for_lines",
    "PieceSpawner",
    "RandomShapeSource",
    "SequenceShapeSource",
    "SpawnOutcome",
    "Tetromino",
    "TetrominoType",
    "shape_blocks",
    "shape_color",
    "gravity_interval",
    "is_blocked",
    "render_grid",
]
