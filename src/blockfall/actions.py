"""Discrete player actions consumed by the engine."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Resolved input actions.

    Front-ends translate raw device input into these values; the engine never
    polls devices itself.
    """

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    MOVE_DOWN = "move_down"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    START_GAME = "start_game"
    RESET = "reset"


# Order in which gameplay actions are applied within a single tick.
GAMEPLAY_ORDER = (
    Action.ROTATE,
    Action.MOVE_LEFT,
    Action.MOVE_RIGHT,
    Action.MOVE_DOWN,
    Action.HARD_DROP,
)
