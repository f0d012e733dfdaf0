import pytest

from blockfall.actions import Action
from blockfall.engine import GameStateMachine
from blockfall.game_state import Phase
from blockfall.gravity import GravityTimer
from blockfall.spawner import SequenceShapeSource
from blockfall.tetromino import TetrominoType
from blockfall.utils import gravity_interval


def test_gravity_speed_increases_with_level():
    assert gravity_interval(1) == pytest.approx(1.0)
    assert gravity_interval(2) == pytest.approx(0.9)
    assert gravity_interval(3) == pytest.approx(0.81)
    assert gravity_interval(5) < gravity_interval(4)


def test_timer_fires_once_and_keeps_remainder():
    timer = GravityTimer()
    assert not timer.advance(0.6, level=1)
    assert timer.advance(0.6, level=1)
    assert timer.accum == pytest.approx(0.2)


def test_long_frame_fires_only_once():
    timer = GravityTimer()
    assert timer.advance(3.5, level=1)
    assert timer.accum == pytest.approx(0.5)


def test_timer_rejects_negative_time():
    with pytest.raises(ValueError):
        GravityTimer().advance(-0.1, level=1)


def _started(shape=TetrominoType.O):
    machine = GameStateMachine(SequenceShapeSource([shape]))
    state = machine.new_state()
    machine.tick(state, 0.0, {Action.START_GAME})
    return machine, state


def test_piece_descends_one_row_per_period():
    machine, state = _started()
    assert state.active.lowest() == 19
    machine.tick(state, 0.5)
    assert state.active.lowest() == 19
    machine.tick(state, 0.5)
    assert state.active.lowest() == 18


def test_gravity_lands_piece_and_spawns_next():
    machine, state = _started()
    for _ in range(19):
        machine.tick(state, 1.0)
    assert state.active.lowest() == 0
    assert len(state.board) == 0

    snapshot = machine.tick(state, 1.0)
    assert snapshot.phase is Phase.PLAYING
    assert state.board.positions() == {(4, 0), (4, 1), (5, 0), (5, 1)}
    assert state.active.lowest() == 19


def test_faster_period_at_higher_level():
    machine, state = _started()
    state.scores.level = 2
    machine.tick(state, 0.9)
    assert state.active.lowest() == 18
