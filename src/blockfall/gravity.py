"""Level-driven fall timer."""

from __future__ import annotations

from dataclasses import dataclass

from .utils import gravity_interval


@dataclass
class GravityTimer:
    """Repeating timer that fires once per gravity period.

    ``accum`` holds the time gathered towards the next drop.  When it reaches
    the period for the current level the timer fires and keeps only the
    remainder, so long frames never queue up several drops.
    """

    accum: float = 0.0

    def advance(self, elapsed: float, level: int) -> bool:
        """Add ``elapsed`` seconds and return ``True`` if the period expired."""

        if elapsed < 0:
            raise ValueError("Elapsed time must be non-negative")
        period = gravity_interval(level)
        self.accum += elapsed
        if self.accum < period:
            return False
        self.accum %= period
        return True

    def reset(self) -> None:
        self.accum = 0.0
