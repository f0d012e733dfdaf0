import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.autoplay import GameResult, log_summary, play_game


def test_log_summary_limits_rows_and_output(caplog):
    results = [
        GameResult(seed=3, ticks=100, score=100, lines=1, level=1),
        GameResult(seed=7, ticks=400, score=500, lines=5, level=2),
    ]

    with caplog.at_level(logging.INFO, logger="examples.autoplay"):
        summary = log_summary(results, limit=1, index=2)

    assert summary == [results[1]]
    message = "".join(caplog.messages)
    assert "seed=7" in message
    assert "seed=3" not in message


def test_play_game_is_reproducible():
    first = play_game(5, max_ticks=600)
    second = play_game(5, max_ticks=600)
    assert first == second
    assert first.ticks <= 600
