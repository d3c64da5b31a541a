"""Shared constants and enumerations for the word-search generator."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


DEFAULT_ALPHABET = string.ascii_lowercase


class Direction(str, Enum):
    """The eight stepping directions a word may be read in."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    RIGHTDOWN = "rightdown"
    RIGHTUP = "rightup"
    LEFTDOWN = "leftdown"
    LEFTUP = "leftup"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]


DIRECTION_STEPS = {
    Direction.RIGHT: (0, 1),
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.RIGHTDOWN: (1, 1),
    Direction.RIGHTUP: (-1, 1),
    Direction.LEFTDOWN: (1, -1),
    Direction.LEFTUP: (-1, -1),
}


def enabled_directions(diagonal: bool = False, backward: bool = False) -> List[Direction]:
    """Return the direction set selected by the two puzzle flags.

    The order is fixed because the solver shuffles this list with the seeded
    generator; reordering it would change every seeded puzzle.
    """

    directions = [Direction.RIGHT, Direction.DOWN]
    if diagonal:
        directions.append(Direction.RIGHTDOWN)
    if backward:
        directions.extend([Direction.LEFT, Direction.UP])
    if diagonal and backward:
        directions.extend([Direction.LEFTUP, Direction.LEFTDOWN, Direction.RIGHTUP])
    return directions


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
