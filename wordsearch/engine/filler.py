"""Fill the cells the solver left empty."""

from __future__ import annotations

import random
from typing import Optional, Set, Tuple

from ..core.constants import DEFAULT_ALPHABET
from ..utils.logger import get_logger
from .grid import WordSearchGrid

LOGGER = get_logger(__name__)


class Filler:
    """Supplies filler characters from a hidden message, then random letters.

    Whitespace is stripped from the message. Its characters go into the unset
    cells in row-major order; once it runs out the remaining cells get
    ``rng.choice(alphabet)``. Characters that do not fit are dropped and
    flagged through :attr:`truncated`.
    """

    def __init__(
        self,
        rng: random.Random,
        message: Optional[str] = None,
        alphabet: str = DEFAULT_ALPHABET,
    ) -> None:
        if not alphabet:
            raise ValueError("Filler alphabet must not be empty")
        self.rng = rng
        self.message = "".join((message or "").split())
        self.alphabet = alphabet
        self.message_written = 0
        self._filled = False

    @property
    def truncated(self) -> bool:
        return self._filled and self.message_written < len(self.message)

    def _next_letter(self) -> str:
        if self.message_written < len(self.message):
            letter = self.message[self.message_written]
            self.message_written += 1
            return letter
        return self.rng.choice(self.alphabet)

    def fill(self, grid: WordSearchGrid) -> Set[Tuple[int, int]]:
        """Fill ``grid`` in place and return the coordinates that received filler."""

        self.message_written = 0
        unused = grid.fill_remaining(self._next_letter)
        self._filled = True
        if self.truncated:
            LOGGER.warning(
                "Hidden message truncated: %s of %s characters fit in %s free cells",
                self.message_written,
                len(self.message),
                len(unused),
            )
        elif self.message:
            LOGGER.info("Embedded %s-character hidden message", len(self.message))
        return unused
