"""Play seeded games with random inputs and log a summary.

Run with::

    PYTHONPATH=src python examples/autoplay.py

Pass ``--help`` to see options for running multiple games and enabling
periodic logging summaries.
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass

from blockfall import Action, GameStateMachine, Phase, RandomShapeSource


LOGGER = logging.getLogger(__name__)

FRAME_S = 1.0 / 60.0
_MOVES = (Action.MOVE_LEFT, Action.MOVE_RIGHT, Action.MOVE_DOWN, Action.ROTATE, Action.HARD_DROP)


@dataclass(frozen=True)
class GameResult:
    seed: int
    ticks: int
    score: int
    lines: int
    level: int


def play_game(seed: int, max_ticks: int) -> GameResult:
    """Play one game until game over or ``max_ticks`` frames have passed."""

    machine = GameStateMachine(RandomShapeSource(seed))
    state = machine.new_state()
    inputs = random.Random(seed)
    machine.tick(state, 0.0, {Action.START_GAME})
    ticks = 0
    while ticks < max_ticks and state.phase is Phase.PLAYING:
        actions = {inputs.choice(_MOVES)} if inputs.random() < 0.2 else set()
        machine.tick(state, FRAME_S, actions)
        ticks += 1
    return GameResult(seed=seed, ticks=ticks, score=state.score, lines=state.lines, level=state.level)


def _format_results(results: list[GameResult], limit: int = 10) -> str:
    if not results:
        return "No games played."
    parts: list[str] = []
    for result in results[:limit]:
        parts.append(
            f"seed={result.seed}: score={result.score}, lines={result.lines}, "
            f"level={result.level}, ticks={result.ticks}"
        )
    return "; ".join(parts)


def log_summary(results: list[GameResult], *, limit: int, index: int) -> list[GameResult]:
    """Log the best ``limit`` results and return them."""

    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    limit = max(0, limit)
    limited = ranked[:limit] if limit else []
    LOGGER.info("After %d game(s): %s", index, _format_results(limited, limit=limit))
    return limited


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=5, help="How many games to play.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game.")
    parser.add_argument("--max-ticks", type=int, default=20_000, help="Frame limit per game.")
    parser.add_argument(
        "--log-interval",
        type=int,
        default=10,
        help="Emit a summary every N games (0 disables periodic logging).",
    )
    parser.add_argument("--summary-limit", type=int, default=5, help="Results included in summaries.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    results: list[GameResult] = []
    for game_idx in range(1, args.games + 1):
        results.append(play_game(args.seed + game_idx - 1, args.max_ticks))
        periodic = args.log_interval > 0 and game_idx % args.log_interval == 0
        if periodic or game_idx == args.games:
            log_summary(results, limit=args.summary_limit, index=game_idx)


if __name__ == "__main__":
    main()
