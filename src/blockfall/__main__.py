"""Simple ASCII demo for the engine.

Run with: `python -m blockfall`

Starts a seeded game, hard-drops a few pieces at random columns and prints the
resulting frame.  Useful as a smoke test that the engine and the snapshot
grid agree.
"""

from __future__ import annotations

import argparse
import logging
import random

from . import Action, GameStateMachine, Phase, RandomShapeSource, Snapshot

LOGGER = logging.getLogger(__name__)

_CELL_CHARS = {0: ".", 1: "#", 2: "@"}


def format_frame(snapshot: Snapshot) -> str:
    lines = ["".join(_CELL_CHARS[int(cell)] for cell in row) for row in snapshot.grid()]
    nxt = snapshot.upcoming.value if snapshot.upcoming is not None else "-"
    lines.append(
        f"score={snapshot.score} lines={snapshot.lines} level={snapshot.level} "
        f"next={nxt} phase={snapshot.phase.value}"
    )
    return "\n".join(lines)


def play(seed: int | None, pieces: int) -> Snapshot:
    """Play ``pieces`` hard drops with random shifts and return the last frame."""

    machine = GameStateMachine(RandomShapeSource(seed))
    state = machine.new_state()
    snapshot = machine.tick(state, 0.0, {Action.START_GAME})
    moves = random.Random(seed)
    for _ in range(pieces):
        if snapshot.phase is not Phase.PLAYING:
            break
        shift = moves.randint(-5, 5)
        step = Action.MOVE_LEFT if shift < 0 else Action.MOVE_RIGHT
        for _ in range(abs(shift)):
            machine.tick(state, 0.0, {step})
        if moves.random() < 0.5:
            machine.tick(state, 0.0, {Action.ROTATE})
        snapshot = machine.tick(state, 0.0, {Action.HARD_DROP})
    LOGGER.info("Finished in phase %s with score %d", snapshot.phase.value, snapshot.score)
    return snapshot


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for shapes and moves.")
    parser.add_argument("--pieces", type=int, default=8, help="Number of pieces to drop.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")
    print(format_frame(play(args.seed, args.pieces)))


if __name__ == "__main__":
    main()
