"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Set, Tuple

from ..core.constants import Bounds
from ..core.exceptions import InvalidDimensionError, OutOfBoundsError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Coordinate = Tuple[int, int]


class WordSearchGrid:
    """Fixed-size rectangular array of optional single-character cells."""

    def __init__(self, rows: int, columns: int) -> None:
        for label, value in (("rows", rows), ("columns", columns)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionError(f"Grid {label} must be a positive integer, got {value!r}")
        self.bounds = Bounds(rows=rows, cols=columns)
        self.cells: List[List[Optional[str]]] = [[None] * columns for _ in range(rows)]

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def columns(self) -> int:
        return self.bounds.cols

    @property
    def size(self) -> int:
        return self.bounds.rows * self.bounds.cols

    def contains(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def linear_to_coordinate(self, position: int) -> Coordinate:
        if not 0 <= position < self.size:
            raise OutOfBoundsError(f"Position {position} outside grid of {self.size} cells")
        return divmod(position, self.bounds.cols)

    def coordinate_to_linear(self, row: int, col: int) -> int:
        self._check(row, col)
        return row * self.bounds.cols + col

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def _check(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise OutOfBoundsError(
                f"Cell {(row, col)} outside {self.bounds.rows}x{self.bounds.cols} grid"
            )

    def get(self, row: int, col: int) -> Optional[str]:
        self._check(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, letter: Optional[str]) -> None:
        self._check(row, col)
        if letter is not None and (not isinstance(letter, str) or len(letter) != 1):
            raise ValueError(f"Cell value must be a single character or None, got {letter!r}")
        self.cells[row][col] = letter

    def __getitem__(self, key: Coordinate) -> Optional[str]:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Coordinate, letter: Optional[str]) -> None:
        row, col = key
        self.set(row, col, letter)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    def iter_cells(self) -> Iterator[Tuple[int, int, Optional[str]]]:
        for r, row in enumerate(self.cells):
            for c, letter in enumerate(row):
                yield r, c, letter

    def unset_cells(self) -> List[Coordinate]:
        """Unset cells in row-major order."""
        return [(r, c) for r, c, letter in self.iter_cells() if letter is None]

    def clone(self) -> "WordSearchGrid":
        copy = WordSearchGrid.__new__(WordSearchGrid)
        copy.bounds = self.bounds
        copy.cells = [list(row) for row in self.cells]
        return copy

    # ------------------------------------------------------------------
    # Filling
    # ------------------------------------------------------------------
    def fill_remaining(self, letter_source: Callable[[], str]) -> Set[Coordinate]:
        """Assign ``letter_source()`` to every unset cell, row-major.

        Returns the coordinates that were filled. Cells already holding a
        letter are never touched.
        """

        filled: Set[Coordinate] = set()
        for row, col in self.unset_cells():
            self.set(row, col, letter_source())
            filled.add((row, col))
        LOGGER.debug("Filled %s of %s cells", len(filled), self.size)
        return filled

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def rows_as_lists(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.cells]

    def to_jsonable(self) -> List[List[Optional[str]]]:
        return self.rows_as_lists()

    def __repr__(self) -> str:
        return f"WordSearchGrid(rows={self.rows}, columns={self.columns})"
