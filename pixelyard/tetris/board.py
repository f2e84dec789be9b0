"""The playing field: 20 rows of 10 cells, the top row hidden."""

from __future__ import annotations

from collections.abc import Iterator

from pixelyard.tetris.colors import BlockType


class Board:
    """Grid of block types stored row by row; row 0 is above the visible field."""

    WIDTH = 10
    HEIGHT = 20

    def __init__(self) -> None:
        self.cells: list[BlockType] = [BlockType.NA] * (self.WIDTH * self.HEIGHT)

    def _index(self, index: int | tuple[int, int]) -> int:
        if isinstance(index, tuple):
            row, col = index
            if not (0 <= row < self.HEIGHT and 0 <= col < self.WIDTH):
                raise IndexError(f"cell {index} is off the board")
            return row * self.WIDTH + col
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell {index} is off the board")
        return index

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int | tuple[int, int]) -> BlockType:
        return self.cells[self._index(index)]

    def __setitem__(self, index: int | tuple[int, int], value: BlockType | int) -> None:
        self.cells[self._index(index)] = BlockType(value)

    def clear(self) -> None:
        """Empty every row below the hidden top row."""
        self.cells[self.WIDTH:] = [BlockType.NA] * (len(self.cells) - self.WIDTH)

    def is_row_full(self, row: int) -> bool:
        start = row * self.WIDTH
        return all(c is not BlockType.NA for c in self.cells[start:start + self.WIDTH])

    def clear_line(self, row: int) -> None:
        """Remove a row and shift the rows above it down by one.

        The top row keeps its contents and is also copied into row 1.
        """
        if not 0 <= row < self.HEIGHT:
            raise IndexError(f"row {row} is off the board")
        w = self.WIDTH
        if row == 0:
            self.cells[:w] = [BlockType.NA] * w
            return
        self.cells = self.cells[:w] + self.cells[:row * w] + self.cells[(row + 1) * w:]

    def clear_full_lines(self) -> int:
        """Clear every full row below the top row; return how many were cleared."""
        cleared = 0
        row = self.HEIGHT - 1
        while row > 0:
            if self.is_row_full(row):
                self.clear_line(row)
                cleared += 1
            else:
                row -= 1
        return cleared

    def visible_cells(self) -> Iterator[tuple[int, int, BlockType]]:
        """Filled cells of the visible field as (row, col, type), row 0 at the top."""
        w = self.WIDTH
        for i in range(w, len(self.cells)):
            kind = self.cells[i]
            if kind is not BlockType.NA:
                yield (i - w) // w, (i - w) % w, kind