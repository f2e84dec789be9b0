import pytest

from pixelyard.pseudoku import Grid, Neighbors, main

PARTIAL = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]
SOLUTION = [
    5, 3, 4, 6, 7, 8, 9, 1, 2,
    6, 7, 2, 1, 9, 5, 3, 4, 8,
    1, 9, 8, 3, 4, 2, 5, 6, 7,
    8, 5, 9, 7, 6, 1, 4, 2, 3,
    4, 2, 6, 8, 5, 3, 7, 9, 1,
    7, 1, 3, 9, 2, 4, 8, 5, 6,
    9, 6, 1, 5, 3, 7, 2, 8, 4,
    2, 8, 7, 4, 1, 9, 6, 3, 5,
    3, 4, 5, 2, 8, 6, 1, 7, 9,
]
DIGITS = list(range(1, 10))


def _all_units_complete(grid):
    return all(
        sorted(unit(i)) == DIGITS
        for unit in (grid.row, grid.column, grid.box)
        for i in range(9)
    )


def test_default_grid_is_empty():
    assert Grid().cells == [0] * 81


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        Grid([0] * 80)


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        Grid([10] + [0] * 80)


def test_units_of_solution():
    grid = Grid(SOLUTION)
    assert grid.row(0) == SOLUTION[:9]
    assert grid.column(0) == SOLUTION[0::9]
    assert grid.box(4) == [7, 6, 1, 8, 5, 3, 9, 2, 4]


def test_neighbors_of_cell():
    grid = Grid(PARTIAL)
    peers = grid.neighbors(40)
    assert peers == Neighbors(
        row=tuple(PARTIAL[36:45]),
        col=tuple(PARTIAL[4::9]),
        box=tuple(grid.box(4)),
    )


def test_is_safe_respects_peers():
    grid = Grid(PARTIAL)
    assert not grid.is_safe(2, 5)
    assert not grid.is_safe(2, 8)
    assert grid.is_safe(2, SOLUTION[2])


def test_possible_values_contains_solution_value():
    grid = Grid(PARTIAL)
    for cell, value in enumerate(PARTIAL):
        if value == 0:
            options = grid.possible_values(cell)
            assert SOLUTION[cell] in options
            assert all(grid.is_safe(cell, v) for v in options)


def test_is_safe_rejects_bad_value():
    with pytest.raises(ValueError):
        Grid().is_safe(0, 0)


def test_bad_cell_index():
    with pytest.raises(IndexError):
        Grid().neighbors(81)


def test_fill_partial_gives_solution():
    grid = Grid(PARTIAL)
    assert grid.fill(0) is True
    assert grid.cells == SOLUTION


def test_fill_empty_grid_is_complete_and_valid():
    grid = Grid()
    assert grid.fill() is True
    assert 0 not in grid.cells
    assert _all_units_complete(grid)


def test_fill_impossible_grid_restores_cells():
    cells = [0] * 81
    cells[0:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    cells[17] = 9
    grid = Grid(cells)
    assert grid.fill() is False
    assert grid.cells == cells


def test_render_layout():
    text = Grid(SOLUTION).render()
    lines = text.splitlines()
    assert len(lines) == 11
    assert lines[3] == "------+-------+-------"
    assert lines[0] == "5 3 4 | 6 7 8 | 9 1 2 "
    assert text.endswith("\n")


def test_main_prints_empty_then_filled(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    before, after = out.split("After fill_grid:\n")
    assert before.startswith("Before fill_grid:\n")
    assert "0 0 0 | 0 0 0 | 0 0 0 " in before
    assert "0" not in after