import random

import pytest

from pixelyard.sudoku import (
    EMPTY_GRID,
    FULL_GRID,
    GOD_NUMBER,
    PARTIAL_GRID,
    PARTIAL_GRID_SOLUTION,
    PosVals,
    SudokuGrid,
    main,
)


def test_posvals_default_has_all():
    pv = PosVals()
    assert list(pv) == list(range(1, 10))
    assert pv.is_valid()
    assert not pv.only_one()


def test_posvals_remove_and_add_round_trip():
    pv = PosVals()
    pv.remove(4)
    assert not pv.is_possible(4)
    pv.add(4)
    assert pv == PosVals()


def test_posvals_remove_twice_raises():
    pv = PosVals()
    pv.remove(0)
    with pytest.raises(ValueError):
        pv.remove(0)


def test_posvals_add_existing_raises():
    with pytest.raises(ValueError):
        PosVals().add(3)


def test_posvals_out_of_range():
    with pytest.raises(ValueError):
        PosVals().is_possible(9)


def test_posvals_single_value():
    pv = PosVals(0)
    pv.add(6)
    assert pv.only_one()
    assert pv.value() == 7
    assert int(pv) == 7


def test_posvals_value_needs_single():
    with pytest.raises(ValueError):
        PosVals().value()


def test_posvals_render():
    pv = PosVals()
    pv.remove(0)
    pv.remove(4)
    assert pv.render() == "-234-6789"
    assert PosVals(0).render() == "-" * 9
    assert not PosVals(0).is_valid()


def test_cell_coordinates():
    grid = SudokuGrid()
    assert (grid.row_of(40), grid.col_of(40), grid.block_of(40)) == (4, 4, 4)
    assert grid.block_of(80) == 8
    with pytest.raises(IndexError):
        grid.row_of(81)


def test_full_grid_valid_and_solved():
    grid = SudokuGrid(FULL_GRID)
    assert grid.is_valid()
    assert grid.is_solved()


def test_empty_grid_not_solved():
    grid = SudokuGrid(EMPTY_GRID)
    assert grid.is_valid()
    assert not grid.is_solved()


def test_duplicate_in_row_detected():
    cells = list(EMPTY_GRID)
    cells[0] = cells[5] = 3
    grid = SudokuGrid(cells)
    assert not grid.is_row_valid(0)
    assert grid.is_col_valid(0)
    assert not grid.is_valid()


def test_duplicate_in_block_detected():
    cells = list(EMPTY_GRID)
    cells[0] = cells[10] = 3
    grid = SudokuGrid(cells)
    assert grid.is_row_valid(0) and grid.is_col_valid(0)
    assert not grid.is_block_valid(0)


def test_full_but_broken_grid_raises_on_is_solved():
    cells = list(FULL_GRID)
    cells[0], cells[1] = cells[1], cells[0]
    with pytest.raises(ValueError):
        SudokuGrid(cells).is_solved()


def test_val_validity_checks():
    grid = SudokuGrid(PARTIAL_GRID)
    assert not grid.is_val_valid_row(2, 5)
    assert not grid.is_val_valid_col(2, 8)
    assert not grid.is_val_valid_block(2, 9)
    assert grid.is_val_valid(2, PARTIAL_GRID_SOLUTION[2])


def test_val_valid_on_filled_cell_raises():
    with pytest.raises(ValueError):
        SudokuGrid(PARTIAL_GRID).is_val_valid(0, 1)


def test_pos_vals_grid_contains_solution():
    grid = SudokuGrid(PARTIAL_GRID)
    candidates = grid.pos_vals_grid()
    assert len(candidates) == 81
    for cell, pv in enumerate(candidates):
        assert PARTIAL_GRID_SOLUTION[cell] in list(pv)
        if PARTIAL_GRID[cell]:
            assert pv.value() == PARTIAL_GRID[cell]


def test_solve_partial_grid():
    grid = SudokuGrid(PARTIAL_GRID)
    grid.solve()
    assert grid.cells == list(PARTIAL_GRID_SOLUTION)


def test_solve_empty_grid():
    grid = SudokuGrid()
    grid.solve()
    assert grid.is_solved()


def test_solve_contradiction_raises():
    cells = list(EMPTY_GRID)
    cells[0:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    cells[17] = 9
    grid = SudokuGrid(cells)
    with pytest.raises(ValueError):
        grid.solve()


def test_generate_places_god_number_of_legal_digits():
    grid = SudokuGrid()
    grid.generate(random.Random(7))
    assert sum(1 for v in grid.cells if v) == GOD_NUMBER
    assert grid.is_valid()


def test_random_free_cell_is_empty():
    grid = SudokuGrid(PARTIAL_GRID)
    rng = random.Random(3)
    for _ in range(20):
        assert grid.cells[grid.random_free_cell(rng)] == 0


def test_random_free_cell_full_grid_raises():
    with pytest.raises(ValueError):
        SudokuGrid(FULL_GRID).random_free_cell(random.Random(1))


def test_random_pos_val_is_candidate():
    grid = SudokuGrid(PARTIAL_GRID)
    rng = random.Random(5)
    for _ in range(20):
        assert grid.is_val_valid(2, grid.random_pos_val(2, rng))


def test_load_prefix_and_too_long():
    grid = SudokuGrid(FULL_GRID)
    grid.load([0, 0, 0])
    assert grid.cells[:4] == [0, 0, 0, FULL_GRID[3]]
    with pytest.raises(ValueError):
        grid.load([0] * 82)


def test_render_layout():
    lines = SudokuGrid(FULL_GRID).render().split("\n")
    assert lines[0] == "1 2 3 | 4 5 6 | 7 8 9 "
    assert lines[3] == "-" * 22
    assert lines[-2:] == ["", ""]
    assert len(lines) == 13


def test_main_prints_generated_grid(capsys):
    assert main(["--seed", "11"]) == 0
    out = capsys.readouterr().out
    digits = [int(tok) for tok in out.split() if tok.isdigit()]
    assert len(digits) == 81
    assert sum(1 for d in digits if d) == GOD_NUMBER
    assert SudokuGrid(digits).is_valid()