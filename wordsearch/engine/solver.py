"""Randomized backtracking placement of the vocabulary into a grid."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Sequence

from ..core.constants import Direction
from ..core.exceptions import SearchBudgetExceededError, UnsatisfiableError, VocabularyError
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import WordSearchGrid

LOGGER = get_logger(__name__)


@dataclass
class SolverOutcome:
    grid: WordSearchGrid
    placements: List[Placement]
    steps: int = 0
    backtracks: int = 0


@dataclass
class _Frame:
    """One word's in-progress attempt, anchored to the grid it started from."""

    grid: WordSearchGrid
    word: str
    index: int
    directions: List[Direction] = field(default_factory=list)
    positions: List[int] = field(default_factory=list)


def try_word(
    grid: WordSearchGrid, word: str, position: int, direction: Direction
) -> Optional[WordSearchGrid]:
    """Write ``word`` into a clone of ``grid`` or return None if it does not fit.

    Crossing an existing letter is allowed only when the letters agree.
    """

    copy = grid.clone()
    row, col = copy.linear_to_coordinate(position)
    dr, dc = direction.step
    for letter in word:
        if not copy.contains(row, col):
            return None
        existing = copy.cells[row][col]
        if existing is None:
            copy.cells[row][col] = letter
        elif existing != letter:
            return None
        row += dr
        col += dc
    return copy


class PlacementSolver:
    """Depth-first search over direction x origin choices, one frame per word.

    Every new frame shuffles its directions first and its origins second from
    the shared generator, and exhausted directions are reshuffled, so a seeded
    generator reproduces the same layout.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        directions: Sequence[Direction],
        rng: random.Random,
        max_steps: Optional[int] = None,
    ) -> None:
        if not directions:
            raise ValueError("At least one direction must be enabled")
        self.rows = rows
        self.columns = columns
        self.directions = list(directions)
        self.rng = rng
        self.max_steps = max_steps

    def _shuffled_directions(self) -> List[Direction]:
        directions = list(self.directions)
        self.rng.shuffle(directions)
        return directions

    def _new_frame(self, grid: WordSearchGrid, word: str, index: int) -> _Frame:
        directions = self._shuffled_directions()
        positions = list(range(grid.size))
        self.rng.shuffle(positions)
        return _Frame(grid=grid, word=word, index=index, directions=directions, positions=positions)

    def solve(self, words: Sequence[str]) -> SolverOutcome:
        for word in words:
            if not word:
                raise VocabularyError("Vocabulary words must be non-empty")

        grid = WordSearchGrid(self.rows, self.columns)
        if not words:
            LOGGER.info("Empty vocabulary, nothing to place")
            return SolverOutcome(grid=grid, placements=[])

        pending: Deque[str] = deque(words)
        placements: Dict[int, Placement] = {}
        stack: List[_Frame] = [self._new_frame(grid, pending.popleft(), 0)]
        steps = 0
        backtracks = 0

        while True:
            if not stack:
                raise UnsatisfiableError(
                    f"No arrangement of {len(words)} words fits a "
                    f"{self.rows}x{self.columns} grid with directions "
                    f"{[d.value for d in self.directions]}"
                )
            steps += 1
            if self.max_steps is not None and steps > self.max_steps:
                raise SearchBudgetExceededError(
                    f"Placement search exceeded {self.max_steps} steps"
                )

            current = stack[-1]
            if current.directions:
                direction = current.directions.pop()
            else:
                if current.positions:
                    current.positions.pop()
                current.directions = self._shuffled_directions()
                direction = current.directions.pop()

            if not current.positions:
                # This word has no origin left from this grid state.
                pending.appendleft(current.word)
                stack.pop()
                backtracks += 1
                LOGGER.debug(
                    "Backtracking from '%s' (word %s), depth now %s",
                    current.word,
                    current.index,
                    len(stack),
                )
                continue

            placed = try_word(current.grid, current.word, current.positions[-1], direction)
            if placed is None:
                continue

            row, col = placed.linear_to_coordinate(current.positions[-1])
            placements[current.index] = Placement(
                word=current.word, direction=direction, row=row, col=col
            )
            if pending:
                stack.append(self._new_frame(placed, pending.popleft(), current.index + 1))
                continue

            LOGGER.info(
                "Placed %s words in %s steps (%s backtracks)", len(words), steps, backtracks
            )
            return SolverOutcome(
                grid=placed,
                placements=[placements[i] for i in range(len(words))],
                steps=steps,
                backtracks=backtracks,
            )


def solve(
    words: Sequence[str],
    rows: int,
    columns: int,
    directions: Sequence[Direction],
    rng: Optional[random.Random] = None,
    max_steps: Optional[int] = None,
) -> SolverOutcome:
    """Convenience wrapper around :class:`PlacementSolver`."""

    solver = PlacementSolver(rows, columns, directions, rng or random.Random(), max_steps=max_steps)
    return solver.solve(words)
