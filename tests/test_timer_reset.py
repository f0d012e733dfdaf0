from blockfall.actions import Action
from blockfall.engine import GameStateMachine
from blockfall.game_state import Phase
from blockfall.spawner import SequenceShapeSource
from blockfall.tetromino import TetrominoType


def _playing():
    machine = GameStateMachine(SequenceShapeSource([TetrominoType.T]))
    state = machine.new_state()
    machine.tick(state, 0.0, {Action.START_GAME})
    return machine, state


def test_reset_clears_gravity_timer():
    machine, state = _playing()
    machine.tick(state, 0.7)
    assert state.gravity.accum > 0
    machine.tick(state, 0.0, {Action.RESET})
    assert state.phase is Phase.TITLE
    assert state.gravity.accum == 0


def test_new_piece_starts_with_fresh_period():
    machine, state = _playing()
    machine.tick(state, 0.7)
    machine.tick(state, 0.0, {Action.HARD_DROP})
    assert state.gravity.accum == 0
    machine.tick(state, 0.7)
    assert state.active.lowest() == 19


def test_paused_game_does_not_accumulate_time():
    machine, state = _playing()
    machine.tick(state, 0.5)
    machine.tick(state, 0.0, {Action.TOGGLE_PAUSE})
    machine.tick(state, 10.0)
    assert state.gravity.accum == 0.5
