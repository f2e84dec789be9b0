"""Sudoku grid with candidate bit sets, random puzzle seeding and a solver."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator

STRIDE = 9
BLOCK_LENGTH = 3
GRID_LENGTH = STRIDE * STRIDE
FIRST_DIV = BLOCK_LENGTH - 1
SECOND_DIV = BLOCK_LENGTH * 2 - 1
MIN_VALUE = 0
MAX_VALUE = STRIDE - 1
GOD_NUMBER = 17
_ALL_MASK = (1 << STRIDE) - 1

FULL_GRID = (
    1, 2, 3, 4, 5, 6, 7, 8, 9,
    4, 5, 6, 7, 8, 9, 1, 2, 3,
    7, 8, 9, 1, 2, 3, 4, 5, 6,
    5, 6, 7, 8, 9, 1, 2, 3, 4,
    8, 9, 1, 2, 3, 4, 5, 6, 7,
    2, 3, 4, 5, 6, 7, 8, 9, 1,
    9, 1, 2, 3, 4, 5, 6, 7, 8,
    6, 7, 8, 9, 1, 2, 3, 4, 5,
    3, 4, 5, 6, 7, 8, 9, 1, 2,
)
EMPTY_GRID = (0,) * GRID_LENGTH
PARTIAL_GRID = (
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
)
PARTIAL_GRID_SOLUTION = (
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
)


class PosVals:
    """Set of candidate values for one cell, stored as a 9-bit mask.

    Bit ``i`` (0-8) stands for the digit ``i + 1``.
    """

    __slots__ = ("mask",)

    def __init__(self, mask: int | None = None) -> None:
        if mask is None:
            mask = _ALL_MASK
        if not 0 <= mask <= _ALL_MASK:
            raise ValueError(f"mask {mask:#x} has bits outside the 9 candidates")
        self.mask = mask

    @staticmethod
    def _check(val: int) -> None:
        if not MIN_VALUE <= val <= MAX_VALUE:
            raise ValueError(f"candidate index {val} is outside {MIN_VALUE}-{MAX_VALUE}")

    def only_one(self) -> bool:
        """Whether exactly one candidate remains."""
        return self.mask.bit_count() == 1

    def value(self) -> int:
        """The single remaining digit (1-9)."""
        if not self.only_one():
            raise ValueError("more or fewer than one candidate remains")
        return self.mask.bit_length()

    def is_possible(self, val: int) -> bool:
        """Whether candidate index val (0-8) is still possible."""
        self._check(val)
        return bool(self.mask & (1 << val))

    def is_valid(self) -> bool:
        """Whether any candidate remains."""
        return self.mask != 0

    def add(self, val: int) -> None:
        """Mark candidate index val (0-8) as possible."""
        if self.is_possible(val):
            raise ValueError(f"candidate {val} is already possible")
        self.mask |= 1 << val

    def remove(self, val: int) -> None:
        """Mark candidate index val (0-8) as impossible."""
        if not self.is_possible(val):
            raise ValueError(f"candidate {val} is not possible")
        self.mask &= ~(1 << val)

    def render(self) -> str:
        """One character per candidate: its digit, or '-' when ruled out."""
        return "".join(
            str(i + 1) if self.mask & (1 << i) else "-" for i in range(STRIDE)
        )

    def __len__(self) -> int:
        return self.mask.bit_count()

    def __iter__(self) -> Iterator[int]:
        """The possible digits (1-9) in ascending order."""
        return (i + 1 for i in range(STRIDE) if self.mask & (1 << i))

    def __int__(self) -> int:
        return self.value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PosVals):
            return NotImplemented
        return self.mask == other.mask

    def __repr__(self) -> str:
        return f"PosVals({self.render()!r})"


def _check_cell(cell: int) -> None:
    if not 0 <= cell < GRID_LENGTH:
        raise IndexError(f"cell {cell} is outside 0-{GRID_LENGTH - 1}")


def _check_unit(index: int, what: str) -> None:
    if not 0 <= index < STRIDE:
        raise IndexError(f"{what} {index} is outside 0-{STRIDE - 1}")


def _check_values(values: list[int]) -> None:
    for value in values:
        if not 0 <= value <= STRIDE:
            raise ValueError(f"cell value {value} is outside 0-{STRIDE}")


class SudokuGrid:
    """A 9x9 Sudoku grid stored row by row; 0 marks an empty cell."""

    def __init__(self, cells: Iterable[int] | None = None) -> None:
        self.cells = [0] * GRID_LENGTH
        if cells is not None:
            values = list(cells)
            if len(values) != GRID_LENGTH:
                raise ValueError(f"a grid needs {GRID_LENGTH} cells, got {len(values)}")
            self.load(values)

    def _at(self, x: int, y: int) -> int:
        return self.cells[y * STRIDE + x]

    def row_of(self, cell: int) -> int:
        _check_cell(cell)
        return cell // STRIDE

    def col_of(self, cell: int) -> int:
        _check_cell(cell)
        return cell % STRIDE

    def block_of(self, cell: int) -> int:
        return (
            self.row_of(cell) // BLOCK_LENGTH * BLOCK_LENGTH
            + self.col_of(cell) // BLOCK_LENGTH
        )

    def _row_cells(self, y: int) -> list[int]:
        return [y * STRIDE + x for x in range(STRIDE)]

    def _col_cells(self, x: int) -> list[int]:
        return [y * STRIDE + x for y in range(STRIDE)]

    def _block_cells(self, b: int) -> list[int]:
        top = b // BLOCK_LENGTH * BLOCK_LENGTH
        left = b % BLOCK_LENGTH * BLOCK_LENGTH
        return [
            (top + i // BLOCK_LENGTH) * STRIDE + left + i % BLOCK_LENGTH
            for i in range(STRIDE)
        ]

    def _require_empty(self, cell: int) -> None:
        _check_cell(cell)
        if self.cells[cell] != 0:
            raise ValueError(f"cell {cell} is already filled")

    def _val_absent(self, cells: list[int], val: int) -> bool:
        return all(self.cells[c] != val for c in cells)

    def is_val_valid_row(self, cell: int, val: int) -> bool:
        """Whether digit val is absent from the row of empty cell."""
        self._require_empty(cell)
        return self._val_absent(self._row_cells(self.row_of(cell)), val)

    def is_val_valid_col(self, cell: int, val: int) -> bool:
        """Whether digit val is absent from the column of empty cell."""
        self._require_empty(cell)
        return self._val_absent(self._col_cells(self.col_of(cell)), val)

    def is_val_valid_block(self, cell: int, val: int) -> bool:
        """Whether digit val is absent from the block of empty cell."""
        self._require_empty(cell)
        return self._val_absent(self._block_cells(self.block_of(cell)), val)

    def is_val_valid(self, cell: int, val: int) -> bool:
        """Whether digit val may be placed in empty cell."""
        return (
            self.is_val_valid_row(cell, val)
            and self.is_val_valid_col(cell, val)
            and self.is_val_valid_block(cell, val)
        )

    def pos_vals(self, cell: int) -> PosVals:
        """Candidates for cell; a filled cell has only its own value."""
        _check_cell(cell)
        current = self.cells[cell]
        if current:
            return PosVals(1 << (current - 1))
        candidates = PosVals()
        for val in range(STRIDE):
            if not self.is_val_valid(cell, val + 1):
                candidates.remove(val)
        return candidates

    def pos_vals_grid(self) -> list[PosVals]:
        """Candidates for every cell, in cell order."""
        return [self.pos_vals(cell) for cell in range(GRID_LENGTH)]

    def random_free_cell(self, rng: random.Random | None = None) -> int:
        """A randomly chosen empty cell."""
        rng = rng or random
        if 0 not in self.cells:
            raise ValueError("the grid has no empty cell")
        while True:
            cell = rng.randrange(GRID_LENGTH)
            if self.cells[cell] == 0:
                return cell

    def random_pos_val(self, cell: int, rng: random.Random | None = None) -> int:
        """A randomly chosen digit (1-9) that may go in cell."""
        rng = rng or random
        candidates = self.pos_vals(cell)
        if not candidates.is_valid():
            raise ValueError(f"cell {cell} has no possible value")
        while True:
            val = rng.randint(MIN_VALUE, MAX_VALUE)
            if candidates.is_possible(val):
                return val + 1

    def _unit_valid(self, cells: list[int]) -> bool:
        seen = PosVals()
        for cell in cells:
            value = self.cells[cell]
            if value:
                if not seen.is_possible(value - 1):
                    return False
                seen.remove(value - 1)
        return True

    def is_row_valid(self, y: int) -> bool:
        _check_unit(y, "row")
        return self._unit_valid(self._row_cells(y))

    def is_col_valid(self, x: int) -> bool:
        _check_unit(x, "column")
        return self._unit_valid(self._col_cells(x))

    def is_block_valid(self, b: int) -> bool:
        _check_unit(b, "block")
        return self._unit_valid(self._block_cells(b))

    def is_valid(self) -> bool:
        """Whether no row, column or block repeats a digit."""
        return all(
            self.is_row_valid(i) and self.is_col_valid(i) and self.is_block_valid(i)
            for i in range(STRIDE)
        )

    def is_solved(self) -> bool:
        """Whether every cell is filled; a full grid must also be valid."""
        if 0 in self.cells:
            return False
        if not self.is_valid():
            raise ValueError("the grid is full but breaks the rules")
        return True

    def generate(self, rng: random.Random | None = None) -> None:
        """Place GOD_NUMBER random digits, each legal where it lands."""
        rng = rng or random
        for _ in range(GOD_NUMBER):
            cell = self.random_free_cell(rng)
            self.cells[cell] = self.random_pos_val(cell, rng)

    def solve(self) -> None:
        """Fill the grid: place forced singles, guess and backtrack otherwise."""
        if not self.is_valid() or not self._search():
            raise ValueError("the grid has no solution")

    def _search(self) -> bool:
        placed: list[int] = []
        while True:
            progress = False
            best: tuple[int, PosVals] | None = None
            for cell, value in enumerate(self.cells):
                if value:
                    continue
                candidates = self.pos_vals(cell)
                if not candidates.is_valid():
                    self._undo(placed)
                    return False
                if candidates.only_one():
                    self.cells[cell] = candidates.value()
                    placed.append(cell)
                    progress = True
                elif best is None or len(candidates) < len(best[1]):
                    best = (cell, candidates)
            if not progress:
                break
        if best is None:
            return True
        cell, candidates = best
        for digit in candidates:
            self.cells[cell] = digit
            if self._search():
                return True
        self.cells[cell] = 0
        self._undo(placed)
        return False

    def _undo(self, placed: list[int]) -> None:
        for cell in placed:
            self.cells[cell] = 0

    def render(self) -> str:
        """The grid as text with block dividers."""
        parts = []
        for y in range(STRIDE):
            for x in range(STRIDE):
                parts.append(f"{self._at(x, y)} ")
                if x in (FIRST_DIV, SECOND_DIV):
                    parts.append("| ")
            if y in (FIRST_DIV, SECOND_DIV):
                parts.append("\n----------------------")
            parts.append("\n")
        parts.append("\n")
        return "".join(parts)

    def load(self, prefab: Iterable[int]) -> None:
        """Copy prefab values over the leading cells of the grid."""
        values = list(prefab)
        if len(values) > GRID_LENGTH:
            raise ValueError(f"prefab has {len(values)} cells, more than {GRID_LENGTH}")
        _check_values(values)
        self.cells[:len(values)] = values


def main(argv: list[str] | None = None) -> int:
    """Seed a random puzzle and print it."""
    parser = argparse.ArgumentParser(description="Generate a Sudoku starting grid.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    grid = SudokuGrid()
    grid.generate(random.Random(args.seed))
    sys.stdout.write(grid.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())