"""Score, line and level bookkeeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict


# Base points per number of rows cleared in a single event.
LINE_POINTS: Dict[int, int] = {1: 40, 2: 100, 3: 300, 4: 1200}
LINES_PER_LEVEL = 5

LOGGER = logging.getLogger(__name__)


def points_for_lines(lines: int) -> int:
    """Return the base points for clearing ``lines`` rows at once.

    Anything outside ``1..4`` scores nothing.
    """

    return LINE_POINTS.get(lines, 0)


@dataclass
class ScoreKeeper:
    """Accumulates score, cleared lines and the current level."""

    score: int = 0
    lines: int = 0
    level: int = 1

    def record_clear(self, cleared: int) -> int:
        """Account for ``cleared`` rows removed in one event.

        The award uses the level *before* any level-up caused by this event.
        The level rises by at most one step per event.  Returns the score
        delta.
        """

        if cleared <= 0:
            return 0

        delta = points_for_lines(cleared) * (self.level + 1)
        self.score += delta
        self.lines += cleared
        LOGGER.info("Cleared %d line(s) for %d points. Score: %d", cleared, delta, self.score)

        if self.lines // LINES_PER_LEVEL > self.level - 1:
            self.level += 1
            LOGGER.info("Level up! Current level: %d", self.level)
        return delta

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
        self.level = 1
