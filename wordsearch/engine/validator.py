"""Deterministic integrity checks for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set, Tuple

from ..core.exceptions import ValidationError
from ..core.models import Placement
from .grid import WordSearchGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs deterministic validation over the final and solution grids."""

    def validate(
        self,
        grid: WordSearchGrid,
        solution: WordSearchGrid,
        placements: Sequence[Placement],
        unused_squares: Set[Tuple[int, int]],
    ) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_shapes(grid, solution)
            self._check_placements(solution, placements)
            self._check_placements(grid, placements)
            self._check_filler(solution, placements, unused_squares)
            self._check_solution_agrees(grid, solution, unused_squares)
            self._check_filled(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        warnings = self._overshadowed_words(placements)
        for warning in warnings:
            LOGGER.warning("%s", warning)
        return ValidationResult(ok=True, messages=warnings)

    def _check_shapes(self, grid: WordSearchGrid, solution: WordSearchGrid) -> None:
        if grid.bounds != solution.bounds:
            raise ValidationError(
                f"Grid shape {grid.rows}x{grid.columns} differs from solution "
                f"{solution.rows}x{solution.columns}"
            )

    def _check_placements(self, grid: WordSearchGrid, placements: Sequence[Placement]) -> None:
        for placement in placements:
            for letter, (row, col) in zip(placement.word, placement.cells):
                if not grid.contains(row, col):
                    raise ValidationError(
                        f"Word '{placement.word}' leaves the grid at {(row, col)}"
                    )
                if grid.cells[row][col] != letter:
                    raise ValidationError(
                        f"Word '{placement.word}' expects '{letter}' at {(row, col)}, "
                        f"found {grid.cells[row][col]!r}"
                    )

    def _check_filler(
        self,
        solution: WordSearchGrid,
        placements: Sequence[Placement],
        unused_squares: Set[Tuple[int, int]],
    ) -> None:
        word_cells = {cell for placement in placements for cell in placement.cells}
        overlap = word_cells & unused_squares
        if overlap:
            raise ValidationError(f"Filler overwrote word cells {sorted(overlap)}")
        for row, col in unused_squares:
            if solution.cells[row][col] is not None:
                raise ValidationError(f"Filler cell {(row, col)} is set in the solution")

    def _check_solution_agrees(
        self,
        grid: WordSearchGrid,
        solution: WordSearchGrid,
        unused_squares: Set[Tuple[int, int]],
    ) -> None:
        for row, col, letter in solution.iter_cells():
            if (row, col) in unused_squares:
                continue
            if letter is None:
                raise ValidationError(f"Solution cell {(row, col)} is unset but not filler")
            if grid.cells[row][col] != letter:
                raise ValidationError(f"Final grid differs from solution at {(row, col)}")

    def _check_filled(self, grid: WordSearchGrid) -> None:
        unset = grid.unset_cells()
        if unset:
            raise ValidationError(f"Final grid still has unset cells {unset[:5]}")

    @staticmethod
    def _overshadowed_words(placements: Sequence[Placement]) -> List[str]:
        """Non-fatal: words lying entirely on another word's cells."""
        warnings: List[str] = []
        cell_sets = [set(placement.cells) for placement in placements]
        for index, placement in enumerate(placements):
            for other_index, other_cells in enumerate(cell_sets):
                if other_index != index and cell_sets[index] <= other_cells:
                    warnings.append(
                        f"Word '{placement.word}' (#{index}) lies inside "
                        f"'{placements[other_index].word}' (#{other_index})"
                    )
                    break
        return warnings
