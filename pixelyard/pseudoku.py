"""Backtracking Sudoku filler working on a flat 81-cell grid."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

SIZE = 9
CELL_COUNT = SIZE * SIZE
_BOX_SEPARATOR = "------+-------+-------"


@dataclass(frozen=True)
class Neighbors:
    """Values in the row, column and box that contain one cell."""

    row: tuple[int, ...]
    col: tuple[int, ...]
    box: tuple[int, ...]

    def __contains__(self, value: object) -> bool:
        return value in self.row or value in self.col or value in self.box


def _check_unit(index: int, what: str) -> None:
    if not 0 <= index < SIZE:
        raise IndexError(f"{what} {index} is outside 0-{SIZE - 1}")


def _check_cell(n: int) -> None:
    if not 0 <= n < CELL_COUNT:
        raise IndexError(f"cell {n} is outside 0-{CELL_COUNT - 1}")


class Grid:
    """A 9x9 Sudoku grid stored row by row; 0 marks an empty cell."""

    def __init__(self, cells: Iterable[int] | None = None) -> None:
        values = [0] * CELL_COUNT if cells is None else list(cells)
        if len(values) != CELL_COUNT:
            raise ValueError(f"a grid needs {CELL_COUNT} cells, got {len(values)}")
        for value in values:
            if not 0 <= value <= SIZE:
                raise ValueError(f"cell value {value} is outside 0-{SIZE}")
        self.cells = values

    def row(self, r: int) -> list[int]:
        """Values of row r (0-8)."""
        _check_unit(r, "row")
        return self.cells[r * SIZE:(r + 1) * SIZE]

    def column(self, c: int) -> list[int]:
        """Values of column c (0-8)."""
        _check_unit(c, "column")
        return self.cells[c::SIZE]

    def box(self, b: int) -> list[int]:
        """Values of box b (0-8), boxes numbered row by row."""
        _check_unit(b, "box")
        top, left = b // 3 * 3, b % 3 * 3
        return [
            self.cells[(top + dr) * SIZE + left + dc]
            for dr in range(3)
            for dc in range(3)
        ]

    def neighbors(self, n: int) -> Neighbors:
        """Peers of cell n (0-80)."""
        _check_cell(n)
        return Neighbors(
            row=tuple(self.row(n // SIZE)),
            col=tuple(self.column(n % SIZE)),
            box=tuple(self.box(n // 27 * 3 + (n % SIZE) // 3)),
        )

    def is_safe(self, n: int, value: int) -> bool:
        """Whether value (1-9) may go in cell n without clashing with a peer."""
        if not 1 <= value <= SIZE:
            raise ValueError(f"value {value} is outside 1-{SIZE}")
        return value not in self.neighbors(n)

    def possible_values(self, n: int) -> list[int]:
        """The values that are safe in cell n, in ascending order."""
        return [value for value in range(1, SIZE + 1) if self.is_safe(n, value)]

    def fill(self, start: int = 0) -> bool:
        """Fill every empty cell from start to the end; False if impossible."""
        if not 0 <= start <= CELL_COUNT:
            raise IndexError(f"start {start} is outside 0-{CELL_COUNT}")
        empty = next(
            (i for i in range(start, CELL_COUNT) if self.cells[i] == 0), None
        )
        if empty is None:
            return True
        for value in self.possible_values(empty):
            self.cells[empty] = value
            if self.fill(empty + 1):
                return True
        self.cells[empty] = 0
        return False

    def render(self) -> str:
        """The grid laid out in Sudoku format."""
        lines = []
        for r in range(SIZE):
            if r and r % 3 == 0:
                lines.append(_BOX_SEPARATOR)
            values = self.row(r)
            groups = (" ".join(map(str, values[i:i + 3])) for i in (0, 3, 6))
            lines.append(" | ".join(groups) + " ")
        return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Fill an empty grid and show it before and after."""
    grid = Grid()
    out = sys.stdout
    out.write("Before fill_grid:\n")
    out.write(grid.render())
    out.write("After fill_grid:\n")
    grid.fill(0)
    out.write(grid.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())