"""Simple pygame front-end for the engine.

This module provides a minimal playable version of the game.  It only
translates key presses into :class:`~blockfall.actions.Action` values, feeds
frame times into the engine and draws the published snapshot; it never touches
the game state directly.
"""

from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional, Set

import pygame

from .actions import Action
from .board import HEIGHT, WIDTH
from .engine import GameStateMachine
from .game_state import Phase, Snapshot
from .spawner import RandomShapeSource
from .tetromino import shape_blocks, shape_color

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60
# Width of the side panel holding score and preview
PANEL_WIDTH = 6 * CELL_SIZE

BACKGROUND = (0, 0, 0)
GRID_LINE = (50, 50, 50)
TEXT_COLOR = (255, 255, 255)

_KEY_ACTIONS = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_UP: Action.ROTATE,
    pygame.K_p: Action.TOGGLE_PAUSE,
    pygame.K_r: Action.RESET,
}

_OVERLAY_TEXT = {
    Phase.TITLE: "Press SPACE to start",
    Phase.PAUSED: "Paused - press P",
    Phase.GAME_OVER: "Game over - press R",
}

LOGGER = logging.getLogger(__name__)


def resolve_actions(keys: Iterable[int], phase: Phase) -> Set[Action]:
    """Map pressed key codes to actions for the current ``phase``.

    Space starts the game on the title screen and hard-drops otherwise.
    """

    actions: Set[Action] = set()
    for key in keys:
        if key == pygame.K_SPACE:
            actions.add(Action.START_GAME if phase is Phase.TITLE else Action.HARD_DROP)
        elif key in _KEY_ACTIONS:
            actions.add(_KEY_ACTIONS[key])
    return actions


def _cell_rect(x: int, y: int, cell_size: int) -> pygame.Rect:
    return pygame.Rect(x * cell_size, (HEIGHT - 1 - y) * cell_size, cell_size, cell_size)


def draw_board(screen: pygame.Surface, snapshot: Snapshot, cell_size: int) -> None:
    """Render settled blocks and the active piece."""

    for cells in (snapshot.static, snapshot.active):
        for (x, y), color in cells:
            if y >= HEIGHT:
                continue
            rect = _cell_rect(x, y, cell_size)
            pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, GRID_LINE, rect, 1)


def draw_panel(screen: pygame.Surface, font: pygame.font.Font, snapshot: Snapshot, cell_size: int) -> None:
    """Render counters and the next-piece preview beside the board."""

    left = WIDTH * cell_size + cell_size // 2
    rows = (f"Score: {snapshot.score}", f"Lines: {snapshot.lines}", f"Level: {snapshot.level}", "Next:")
    for i, text in enumerate(rows):
        screen.blit(font.render(text, True, TEXT_COLOR), (left, cell_size // 2 + i * cell_size))

    if snapshot.upcoming is None:
        return
    color = shape_color(snapshot.upcoming)
    top = cell_size // 2 + len(rows) * cell_size + 2 * cell_size
    for dx, dy in shape_blocks(snapshot.upcoming):
        rect = pygame.Rect(left + (dx + 1) * cell_size, top - dy * cell_size, cell_size, cell_size)
        pygame.draw.rect(screen, color, rect)
        pygame.draw.rect(screen, GRID_LINE, rect, 1)


class GameRunner:
    """Own the window and drive the engine once per frame."""

    def __init__(self, *, seed: Optional[int] = None, cell_size: int = CELL_SIZE, fps: int = FPS) -> None:
        self.cell_size = cell_size
        self.fps = fps
        self.overlay: Optional[str] = _OVERLAY_TEXT[Phase.TITLE]
        self.machine = GameStateMachine(RandomShapeSource(seed), listener=self.on_transition)
        self.state = self.machine.new_state()
        self.snapshot = self.state.snapshot()

    def on_transition(self, old: Phase, new: Phase) -> None:
        LOGGER.debug("Phase %s -> %s", old.value, new.value)
        self.overlay = _OVERLAY_TEXT.get(new)

    def run(self) -> None:
        pygame.init()
        size = (WIDTH * self.cell_size + PANEL_WIDTH, HEIGHT * self.cell_size)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption("blockfall")
        font = pygame.font.Font(None, self.cell_size)
        clock = pygame.time.Clock()
        LOGGER.info("Window opened")

        running = True
        while running:
            elapsed = clock.tick(self.fps) / 1000.0
            keys = []
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    keys.append(event.key)

            actions = resolve_actions(keys, self.snapshot.phase)
            self.snapshot = self.machine.tick(self.state, elapsed, actions)

            screen.fill(BACKGROUND)
            draw_board(screen, self.snapshot, self.cell_size)
            draw_panel(screen, font, self.snapshot, self.cell_size)
            if self.overlay:
                label = font.render(self.overlay, True, TEXT_COLOR)
                screen.blit(label, label.get_rect(center=(WIDTH * self.cell_size // 2, size[1] // 2)))
            pygame.display.flip()

        pygame.quit()
        LOGGER.info("Window closed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play blockfall with pygame.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shape generator.")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="Cell size in pixels.")
    parser.add_argument("--fps", type=int, default=FPS, help="Frames per second.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    GameRunner(seed=args.seed, cell_size=args.cell_size, fps=args.fps).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
