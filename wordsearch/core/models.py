"""Data models supporting the word-search generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Placement:
    """A word bound to a direction and an origin cell."""

    word: str
    direction: Direction
    row: int
    col: int

    @property
    def origin(self) -> Tuple[int, int]:
        return self.row, self.col

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "direction": self.direction.value,
            "row": self.row,
            "col": self.col,
        }
