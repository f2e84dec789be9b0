# pixelyard

A collection of small games and graphics toys:

- `pixelyard.pseudoku`: a 9x9 Sudoku `Grid` filled by backtracking.
- `pixelyard.sudoku`: a `SudokuGrid` with candidate bitmasks (`PosVals`),
  rule checks, random seeding of 17 digits and a solver.
- `pixelyard.tetris`: a falling-block game. The board (`board.Board`), the
  pieces (`tetromino.Tetromino`), the colours (`colors`) and the game state
  (`session.Session`) work without a window; `game` draws it with pygame.
- `pixelyard.noise`: circular and diagonal colour gradients on an `Image32`,
  written out as 32-bit top-down BMP files.
- `pixelyard.raytrace`: a small path tracer with spheres and diffuse, metal
  and glass materials, rendering to a 24-bit `Bitmap`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `pixelyard-pseudoku` | Prints an empty grid, fills it by backtracking and prints the result. |
| `pixelyard-sudoku [--seed N]` | Places 17 random digits, each legal where it lands, and prints the grid. |
| `pixelyard-tetris` | Opens the game window. Up rotates, Left and Right move, holding Down speeds the fall, Space drops the piece to the floor, Escape quits. The number of cleared lines is printed as `final points: N` when the game ends. |
| `pixelyard-noise [--output PATH] [--seed N]` | Writes a random 100x100 circular gradient to `img/test.bmp` (or `PATH`), creating the folder if needed. |
| `pixelyard-raytrace [--width W] [--height H] [--samples S] [--seed N] [--output PATH]` | Renders a scene of random spheres, by default 200x100 with 50 samples per pixel, to `test.bmp`. |

## Using the library

Filling a Sudoku grid by backtracking:

```python
from pixelyard.pseudoku import Grid

grid = Grid()
grid.fill(0)
print(grid.render())
```

Checking and solving a puzzle:

```python
from pixelyard.sudoku import PARTIAL_GRID, SudokuGrid

grid = SudokuGrid(PARTIAL_GRID)
print(grid.is_valid(), grid.is_solved())
grid.solve()
print(grid.render())
```

`solve` raises `ValueError` when the grid has no solution.

Driving the falling-block game without a window:

```python
import random

from pixelyard.tetris.session import Key, Session

session = Session(random.Random(1))
session.key_event(Key.SPACE, True)
session.handle_input()
session.advance(1.0)
print(session.points, session.running)
```

Writing a gradient bitmap:

```python
import random

from pixelyard.noise.bmp import write_bmp
from pixelyard.noise.image import Image32, create_corner_gradient

image = Image32(100, 100)
create_corner_gradient(image, random.Random(1))
write_bmp("corner.bmp", image)
```

Rendering a small ray-traced image:

```python
import random

from pixelyard.raytrace.render import render

bitmap = render(40, 20, 4, random.Random(1))
bitmap.write("small.bmp")
```

## What it does not do

- `pixelyard-sudoku` only seeds a grid; it does not check that the seeded
  digits leave a puzzle with a solution, and it does not solve it.
- The game window shows only the board: there is no preview of the next
  piece and no score on screen.
- Images are written as BMP only; no other image format is produced.