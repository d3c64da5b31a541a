"""Main word-search generator orchestration.

Two-phase approach:
  1. Placement: randomized backtracking puts every vocabulary word in the grid.
  2. Fill: cells left empty receive hidden-message or random filler letters.

Every call to ``generate`` seeds its own ``random.Random`` that drives both
phases, so the seed reported with a puzzle reproduces it.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from ..core.constants import DEFAULT_ALPHABET, Direction, enabled_directions
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..utils.logger import get_logger
from .filler import Filler
from .grid import WordSearchGrid
from .solver import PlacementSolver
from .validator import PuzzleValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int = 15
    columns: int = 15
    diagonal: bool = False
    backward: bool = False
    message: Optional[str] = None
    seed: Optional[int] = None
    alphabet: str = DEFAULT_ALPHABET
    max_steps: Optional[int] = None
    validate: bool = True

    def enabled_directions(self) -> List[Direction]:
        return enabled_directions(diagonal=self.diagonal, backward=self.backward)


@dataclass
class PuzzleResult:
    vocabulary: List[str]
    rows: int
    columns: int
    directions: List[Direction]
    seed: int
    grid: WordSearchGrid
    solution: WordSearchGrid
    placements: List[Placement]
    unused_squares: Set[Tuple[int, int]] = field(default_factory=set)
    message_truncated: bool = False
    validation_messages: List[str] = field(default_factory=list)
    search_steps: int = 0

    def to_dict(self) -> dict:
        return {
            "vocabulary": list(self.vocabulary),
            "rows": self.rows,
            "columns": self.columns,
            "directions": [d.value for d in self.directions],
            "seed": self.seed,
            "grid": self.grid.to_jsonable(),
            "solution": self.solution.to_jsonable(),
            "placements": [
                dict(index=index, **placement.to_dict())
                for index, placement in enumerate(self.placements)
            ],
            "unused_squares": [list(cell) for cell in sorted(self.unused_squares)],
            "message_truncated": self.message_truncated,
            "validation": list(self.validation_messages),
        }


class PuzzleGenerator:
    """High-level orchestrator: placement search then filler."""

    def __init__(self, config: GeneratorConfig, validator: Optional[PuzzleValidator] = None) -> None:
        self.config = config
        self.seed = config.seed if config.seed is not None else int(time.time())
        self.validator = validator or PuzzleValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, vocabulary: Sequence[str]) -> PuzzleResult:
        words = list(vocabulary)
        rng = random.Random(self.seed)
        directions = self.config.enabled_directions()
        LOGGER.info(
            "Generating %sx%s puzzle for %s words (directions=%s, seed=%s)",
            self.config.rows,
            self.config.columns,
            len(words),
            ",".join(d.value for d in directions),
            self.seed,
        )

        solver = PlacementSolver(
            self.config.rows,
            self.config.columns,
            directions,
            rng,
            max_steps=self.config.max_steps,
        )
        outcome = solver.solve(words)

        solution = outcome.grid
        grid = solution.clone()
        filler = Filler(rng, message=self.config.message, alphabet=self.config.alphabet)
        unused = filler.fill(grid)

        messages: List[str] = []
        if self.config.validate:
            validation = self.validator.validate(grid, solution, outcome.placements, unused)
            if not validation.ok:
                raise ValidationError(f"Puzzle validation failed: {validation.messages}")
            messages = validation.messages

        LOGGER.info(
            "Puzzle generation completed: %s words placed, %s filler cells",
            len(outcome.placements),
            len(unused),
        )
        return PuzzleResult(
            vocabulary=words,
            rows=self.config.rows,
            columns=self.config.columns,
            directions=directions,
            seed=self.seed,
            grid=grid,
            solution=solution,
            placements=outcome.placements,
            unused_squares=unused,
            message_truncated=filler.truncated,
            validation_messages=messages,
            search_steps=outcome.steps,
        )


def generate_puzzle(vocabulary: Sequence[str], **options) -> PuzzleResult:
    """Build a :class:`GeneratorConfig` from keyword options and generate."""

    return PuzzleGenerator(GeneratorConfig(**options)).generate(vocabulary)
