"""Tick-driven state machine sequencing a game session.

The machine owns no game data itself: every call receives the
:class:`~blockfall.game_state.GameState` to advance.  Elapsed time and shape
draws are injected so a run is fully reproducible.

Example usage
-------------

>>> from blockfall.actions import Action
>>> from blockfall.engine import GameStateMachine
>>> from blockfall.spawner import RandomShapeSource
>>> machine = GameStateMachine(RandomShapeSource(seed=0))
>>> state = machine.new_state()
>>> snap = machine.tick(state, 0.0, {Action.START_GAME})
>>> snap.phase.value
'playing'
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from .actions import GAMEPLAY_ORDER, Action
from .game_state import GameState, Phase, Snapshot
from .movement import hard_drop, rotate, translate
from .spawner import PieceSpawner, ShapeSource, SpawnOutcome

LOGGER = logging.getLogger(__name__)

TransitionListener = Callable[[Phase, Phase], None]

RESETTABLE = (Phase.PLAYING, Phase.PAUSED, Phase.GAME_OVER)


class GameStateMachine:
    """Advance a :class:`GameState` one tick at a time.

    ``listener`` is an optional callable receiving ``(old, new)`` for every
    phase change, in the order they happen.  It lets front-ends build or tear
    down overlays without polling.
    """

    def __init__(
        self,
        source: ShapeSource,
        *,
        listener: Optional[TransitionListener] = None,
    ) -> None:
        self.spawner = PieceSpawner(source)
        self.listener = listener

    def new_state(self) -> GameState:
        """Return a fresh session on the title screen with a buffered shape."""

        return GameState(upcoming=self.spawner.source.draw())

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------
    def tick(self, state: GameState, elapsed: float, actions: Iterable[Action] = ()) -> Snapshot:
        """Run one simulation step and return the published snapshot.

        Session actions (start, pause toggle, reset) consume the whole tick.
        Otherwise gameplay actions run in a fixed order, followed by gravity
        unless the piece already landed during this tick.
        """

        if elapsed < 0:
            raise ValueError("Elapsed time must be non-negative")
        pending = set(actions)

        if Action.START_GAME in pending and state.phase is Phase.TITLE:
            self.start(state)
            return state.snapshot()
        if Action.TOGGLE_PAUSE in pending and state.phase in (Phase.PLAYING, Phase.PAUSED):
            self.toggle_pause(state)
            return state.snapshot()
        if Action.RESET in pending and state.phase in RESETTABLE:
            self.reset(state)
            return state.snapshot()

        if state.phase is not Phase.PLAYING:
            if pending:
                LOGGER.debug("Ignoring %s while %s", sorted(a.value for a in pending), state.phase.value)
            return state.snapshot()

        landed = False
        for action in GAMEPLAY_ORDER:
            if action not in pending or state.active is None:
                continue
            if action is Action.ROTATE:
                rotate(state)
            elif action is Action.MOVE_LEFT:
                translate(state, -1, 0)
            elif action is Action.MOVE_RIGHT:
                translate(state, 1, 0)
            elif action is Action.MOVE_DOWN:
                translate(state, 0, -1)
            elif action is Action.HARD_DROP:
                steps = hard_drop(state)
                LOGGER.debug("Hard drop moved %d row(s)", steps)
                self._land(state)
                landed = True

        if not landed and state.phase is Phase.PLAYING:
            self._apply_gravity(state, elapsed)
        return state.snapshot()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def start(self, state: GameState) -> None:
        if state.phase is not Phase.TITLE:
            return
        LOGGER.info("Game started")
        self._enter_spawning(state)

    def toggle_pause(self, state: GameState) -> None:
        if state.phase is Phase.PLAYING:
            self._set_phase(state, Phase.PAUSED)
            LOGGER.info("Game paused")
        elif state.phase is Phase.PAUSED:
            self._set_phase(state, Phase.PLAYING)
            LOGGER.info("Game resumed")

    def reset(self, state: GameState) -> None:
        """Clear the board and counters and return to the title screen.

        The next-piece buffer is kept.
        """

        if state.phase not in RESETTABLE:
            return
        state.board.clear()
        state.active = None
        state.scores.reset()
        state.gravity.reset()
        self._set_phase(state, Phase.TITLE)
        LOGGER.info("Game reset")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _set_phase(self, state: GameState, phase: Phase) -> None:
        old = state.phase
        if old is phase:
            return
        state.phase = phase
        if self.listener is not None:
            self.listener(old, phase)

    def _apply_gravity(self, state: GameState, elapsed: float) -> None:
        if state.active is None:
            return
        if not state.gravity.advance(elapsed, state.level):
            return
        if not translate(state, 0, -1):
            self._land(state)

    def _land(self, state: GameState) -> None:
        piece = state.land()
        LOGGER.debug("Piece landed: %s", piece.shape.value)
        self._enter_spawning(state)

    def _enter_spawning(self, state: GameState) -> None:
        """Clear rows, then spawn; both run before anything else this tick."""

        self._set_phase(state, Phase.SPAWNING)
        cleared = state.board.clear_full_rows()
        state.scores.record_clear(cleared)

        outcome = self.spawner.spawn(state)
        state.gravity.reset()
        if outcome is SpawnOutcome.GAME_OVER:
            self._set_phase(state, Phase.GAME_OVER)
            LOGGER.info("Game over! Final score: %d", state.score)
        else:
            self._set_phase(state, Phase.PLAYING)
