"""Game state of the falling-blocks game, free of any window or timer."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

from pixelyard.tetris.board import Board
from pixelyard.tetris.colors import BlockType
from pixelyard.tetris.tetromino import GameOver, Tetromino

NORMAL_STEP = 1.0
FAST_STEP = 0.12


class Key(Enum):
    """Keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ESCAPE = auto()


@dataclass
class KeyState:
    """Which keys are held, and which one-shot actions have already fired."""

    up: bool = False
    up_pressed: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    space: bool = False
    space_pressed: bool = False


class Session:
    """One game: the board, the falling piece, the keys and the score."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.board = Board()
        self.piece = Tetromino(self.board)
        self.keys = KeyState()
        self.running = True
        self.step_time = NORMAL_STEP
        self.points = 0
        self._since_step = 0.0
        self.piece.init(self._random_type())
        self.board.clear()
        self.piece.draw()

    def _random_type(self) -> BlockType:
        return BlockType(self.rng.randint(BlockType.I, BlockType.L))

    def key_event(self, key: Key, pressed: bool) -> None:
        """Record a key going down (pressed) or up."""
        keys = self.keys
        if key is Key.ESCAPE:
            self.running = False
        elif key is Key.UP:
            if not pressed:
                keys.up_pressed = False
            keys.up = pressed
        elif key is Key.DOWN:
            keys.down = pressed
        elif key is Key.LEFT:
            keys.left = pressed
        elif key is Key.RIGHT:
            keys.right = pressed
        elif key is Key.SPACE:
            if not pressed:
                keys.space_pressed = False
            keys.space = pressed

    def handle_input(self) -> None:
        """Apply the held keys to the piece and the step speed."""
        keys = self.keys
        if keys.up and not keys.up_pressed:
            self.piece.rotate()
            keys.up_pressed = True
        self.step_time = FAST_STEP if keys.down else NORMAL_STEP
        if keys.left:
            self.piece.move_left()
        if keys.right:
            self.piece.move_right()
        if keys.space and not keys.space_pressed:
            self.piece.slam_down()
            keys.space_pressed = True

    def step(self) -> None:
        """Drop the piece one row; on lock, clear lines and spawn the next piece."""
        if not self.running:
            return
        self.piece.move_down()
        if not self.piece.locked:
            return
        self.points += self.board.clear_full_lines()
        self.piece.clear()
        try:
            self.piece.init(self._random_type())
        except GameOver:
            self.running = False
            return
        self.piece.draw()

    def advance(self, elapsed: float) -> bool:
        """Let time pass; take at most one step when a step period is due."""
        if elapsed < 0:
            raise ValueError("elapsed time cannot be negative")
        self._since_step += elapsed
        if self._since_step >= self.step_time:
            self._since_step -= self.step_time
            self.step()
            return True
        return False