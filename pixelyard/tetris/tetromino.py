"""Falling pieces: their shapes, movement, rotation and placement on the board."""

from __future__ import annotations

from collections.abc import Iterator

from pixelyard.tetris.board import Board
from pixelyard.tetris.colors import BlockType

_I, _O, _T, _Z, _S, _J, _L = (
    BlockType.I, BlockType.O, BlockType.T, BlockType.Z,
    BlockType.S, BlockType.J, BlockType.L,
)

_SHAPES: dict[tuple[BlockType, int], tuple[int, ...]] = {
    (_I, 0): (0, 0, 0, 0,
              1, 1, 1, 1,
              0, 0, 0, 0,
              0, 0, 0, 0),
    (_I, 1): (0, 1, 0, 0,
              0, 1, 0, 0,
              0, 1, 0, 0,
              0, 1, 0, 0),
    (_O, 0): (2, 2,
              2, 2),
    (_T, 0): (0, 0, 0,
              3, 3, 3,
              0, 3, 0),
    (_T, 1): (0, 3, 0,
              3, 3, 0,
              0, 3, 0),
    (_T, 2): (0, 3, 0,
              3, 3, 3,
              0, 0, 0),
    (_T, 3): (0, 3, 0,
              0, 3, 3,
              0, 3, 0),
    (_Z, 0): (0, 0, 0,
              4, 4, 0,
              0, 4, 4),
    (_Z, 1): (0, 0, 4,
              0, 4, 4,
              0, 4, 0),
    (_S, 0): (0, 0, 0,
              0, 5, 5,
              5, 5, 0),
    (_S, 1): (5, 0, 0,
              5, 5, 0,
              0, 5, 0),
    (_J, 0): (0, 0, 0,
              6, 6, 6,
              0, 0, 6),
    (_J, 1): (0, 6, 0,
              0, 6, 0,
              6, 6, 0),
    (_J, 2): (6, 0, 0,
              6, 6, 6,
              0, 0, 0),
    (_J, 3): (0, 6, 6,
              0, 6, 0,
              0, 6, 0),
    (_L, 0): (0, 0, 0,
              7, 7, 7,
              7, 0, 0),
    (_L, 1): (7, 7, 0,
              0, 7, 0,
              0, 7, 0),
    (_L, 2): (0, 0, 7,
              7, 7, 7,
              0, 0, 0),
    (_L, 3): (0, 7, 0,
              0, 7, 0,
              0, 7, 7),
}

# grid size, orientations, centre offset, spawn row
_LAYOUT = {
    _I: (4, 2, 1, 1),
    _O: (2, 1, 0, 0),
    _T: (3, 4, 1, 0),
    _Z: (3, 2, 1, 0),
    _S: (3, 2, 1, 0),
    _J: (3, 4, 1, 0),
    _L: (3, 4, 1, 0),
}
_SPAWN_X = 4


class GameOver(Exception):
    """A new piece cannot be placed on the board."""


def shape_for(block_type: BlockType | int, direction: int) -> tuple[int, ...] | None:
    """The square cell layout of a piece type in a direction; None for NA."""
    kind = BlockType(block_type)
    if kind is BlockType.NA:
        return None
    try:
        return _SHAPES[kind, direction]
    except KeyError:
        raise ValueError(f"{kind.name} has no direction {direction}") from None


class Tetromino:
    """The piece under the player's control, drawn into a board."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.clear()

    def clear(self) -> None:
        """Reset to an empty piece."""
        self.type = BlockType.NA
        self.shape: tuple[int, ...] | None = None
        self.grid_size = 0
        self.orientations = 0
        self.direction = 0
        self.center = 0
        self.x = 0
        self.y = 0
        self.drawn = False
        self.bottom = False
        self.locked = False

    def init(self, block_type: BlockType | int) -> None:
        """Spawn a piece of the given type at the top; raise GameOver if blocked."""
        kind = BlockType(block_type)
        if kind is BlockType.NA:
            return
        self.type = kind
        self.grid_size, self.orientations, self.center, self.y = _LAYOUT[kind]
        self.direction = 0
        self.x = _SPAWN_X
        self.drawn = False
        self.locked = False
        self.bottom = False
        self.shape = shape_for(kind, 0)
        if not self.valid():
            raise GameOver(f"no room to place {kind.name}")

    def _blocks(self) -> Iterator[tuple[int, int, int]]:
        if self.shape is None:
            return
        top = self.y - self.center
        left = self.x - self.center
        for i, value in enumerate(self.shape):
            if value:
                yield top + i // self.grid_size, left + i % self.grid_size, value

    def erase(self) -> None:
        """Take the piece off the board if it is drawn."""
        if not self.drawn:
            return
        for row, col, _ in self._blocks():
            self.board[(row, col)] = BlockType.NA
        self.drawn = False

    def draw(self) -> None:
        """Put the piece onto the board if it is not drawn."""
        if self.drawn:
            return
        for row, col, value in self._blocks():
            self.board[(row, col)] = value
        self.drawn = True

    def valid(self) -> bool:
        """Whether the piece fits on the board where it stands."""
        if self.drawn:
            return True
        for row, col, _ in self._blocks():
            if not (0 <= col < Board.WIDTH and 0 <= row < Board.HEIGHT):
                return False
            if self.board[(row, col)] is not BlockType.NA:
                return False
        return True

    def rotate(self) -> None:
        """Turn clockwise, nudging one cell left or right if needed."""
        if self.locked or self.shape is None:
            return
        self.erase()
        previous = self.shape
        new_dir = (self.direction + 1) % self.orientations
        self.shape = shape_for(self.type, new_dir)
        if not self.valid():
            old_x = self.x
            for dx in (-1, 1):
                self.x = old_x + dx
                if self.valid():
                    self.direction = new_dir
                    self.draw()
                    return
            self.x = old_x
            self.shape = previous
            self.draw()
            return
        self.bottom = False
        self.direction = new_dir
        self.draw()

    def _shift(self, dx: int) -> None:
        if self.locked:
            return
        self.erase()
        self.x += dx
        if not self.valid():
            self.x -= dx
            self.draw()
            return
        self.bottom = False
        self.draw()

    def move_left(self) -> None:
        """Move one cell left if there is room."""
        self._shift(-1)

    def move_right(self) -> None:
        """Move one cell right if there is room."""
        self._shift(1)

    def move_down(self) -> None:
        """Move one cell down; lock in place when blocked."""
        if self.locked:
            return
        self.erase()
        self.y += 1
        if not self.valid():
            self.y -= 1
            self.locked = True
            self.bottom = True
        self.draw()

    def slam_down(self) -> None:
        """Drop straight to the floor and lock."""
        if self.locked:
            return
        self.erase()
        while not self.bottom:
            self.move_down()
        self.draw()
        self.locked = True