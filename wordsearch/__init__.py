"""Word-search puzzle generator.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleGenerator``: solves and fills a puzzle.
- ``wordsearch.engine.solver.PlacementSolver``: the backtracking placement search.
- ``wordsearch.engine.grid.WordSearchGrid``: the grid the search operates on.
"""

from .core.constants import Direction, enabled_directions
from .core.exceptions import UnsatisfiableError, WordSearchError
from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult, generate_puzzle
from .engine.grid import WordSearchGrid

__all__ = [
    "Direction",
    "enabled_directions",
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "generate_puzzle",
    "WordSearchGrid",
    "UnsatisfiableError",
    "WordSearchError",
]

__version__ = "0.1.0"
