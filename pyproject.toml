[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelyard"
version = "0.1.0"
description = "Small games and graphics toys: Sudoku grids and solvers, a falling-block game, gradient bitmaps and a path tracer"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sudoku", "tetromino", "falling blocks", "bitmap", "bmp", "ray tracing", "gradient", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelyard-pseudoku = "pixelyard.pseudoku:main"
pixelyard-sudoku = "pixelyard.sudoku:main"
pixelyard-tetris = "pixelyard.tetris.game:main"
pixelyard-noise = "pixelyard.noise.bmp:main"
pixelyard-raytrace = "pixelyard.raytrace.render:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelyard"]

[tool.pytest.ini_options]
addopts = "-ra"
