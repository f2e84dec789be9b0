"""Window, drawing and main loop of the falling-blocks game."""

from __future__ import annotations

import math
import random
import sys
from dataclasses import dataclass

import pygame

from pixelyard.tetris.board import Board
from pixelyard.tetris.colors import Color, OtherColor, get_other_color, type_to_color
from pixelyard.tetris.session import Key, Session

FRAMES_PER_SECOND = 24
VISIBLE_ROWS = Board.HEIGHT - 1


def _round(value: float) -> float:
    return float(math.floor(value + 0.5))


@dataclass(frozen=True)
class Layout:
    """Pixel geometry of the field, with (0, 0) at the top left of the screen."""

    screen_width: float = 1280.0
    screen_height: float = 720.0
    border_size: float = 6.0

    @property
    def grid_width(self) -> float:
        return _round(self.screen_height / 1.9)

    @property
    def grid_height(self) -> float:
        return _round(self.screen_height)

    @property
    def block_width(self) -> float:
        return _round(self.grid_width / Board.WIDTH)

    @property
    def block_height(self) -> float:
        return _round(self.grid_height / VISIBLE_ROWS)

    @property
    def grid_left(self) -> float:
        return self.screen_width / 2 - self.grid_width / 2

    @property
    def grid_right(self) -> float:
        return self.screen_width / 2 + self.grid_width / 2


Rect = tuple[float, float, float, float]


def block_rects(board: Board, layout: Layout) -> list[tuple[Rect, Color]]:
    """Rectangle and colour of every filled visible cell."""
    return [
        (
            (
                layout.grid_left + col * layout.block_width,
                row * layout.block_height,
                layout.block_width,
                layout.block_height,
            ),
            type_to_color(kind),
        )
        for row, col, kind in board.visible_cells()
    ]


def border_rects(layout: Layout) -> list[tuple[Rect, Color]]:
    """Rectangles of the horizontal then vertical grid lines."""
    gray = get_other_color(OtherColor.GRAY)
    rows = [
        (
            (layout.grid_left, r * layout.block_height,
             layout.grid_width + layout.border_size, layout.border_size),
            gray,
        )
        for r in range(VISIBLE_ROWS + 1)
    ]
    cols = [
        (
            (layout.grid_left + c * layout.block_width, 0.0,
             layout.border_size, layout.grid_height + layout.border_size),
            gray,
        )
        for c in range(Board.WIDTH + 1)
    ]
    return rows + cols


def _draw(screen: pygame.Surface, rects: list[tuple[Rect, Color]]) -> None:
    for (x, y, w, h), color in rects:
        pygame.draw.rect(
            screen, color.to_rgb255(), pygame.Rect(round(x), round(y), round(w), round(h))
        )


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    layout = Layout()
    keymap = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_SPACE: Key.SPACE,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (int(layout.screen_width), int(layout.screen_height))
        )
        pygame.display.set_caption("tetris")
        clock = pygame.time.Clock()
        session = Session(random.Random())
        background = get_other_color(OtherColor.BACKGROUND).to_rgb255()
        elapsed = 0.0
        while session.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    session.running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP) and event.key in keymap:
                    session.key_event(keymap[event.key], event.type == pygame.KEYDOWN)
            session.handle_input()
            session.advance(elapsed)
            screen.fill(background)
            _draw(screen, block_rects(session.board, layout))
            _draw(screen, border_rects(layout))
            pygame.display.flip()
            elapsed = clock.tick(FRAMES_PER_SECOND) / 1000.0
    finally:
        pygame.quit()
    print(f"final points: {session.points}")
    return 0


if __name__ == "__main__":
    sys.exit(main())