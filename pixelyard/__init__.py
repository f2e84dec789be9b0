"""Small games and graphics toys: Sudoku grids, a falling-block game, gradient bitmaps and a path tracer."""

__version__ = "0.1.0"