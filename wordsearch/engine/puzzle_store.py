"""On-disk packaging of generated puzzles.

A package is a directory holding the puzzle as plain text
(``unsolved.txt``), its answer key (``solved.txt``), the word placements
(``coords.txt``) and a frontend-ready ``puzzle.json`` document.
"""

from __future__ import annotations

import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import PackageExistsError
from ..utils.logger import get_logger
from ..utils.pretty import format_coords, format_puzzle

if TYPE_CHECKING:
    from .generator import PuzzleResult


LOGGER = get_logger(__name__)

SOLVED_FILE = "solved.txt"
UNSOLVED_FILE = "unsolved.txt"
COORDS_FILE = "coords.txt"
DOCUMENT_FILE = "puzzle.json"


class PuzzleStore:
    """Write puzzle packages below a base directory."""

    def __init__(self, base_dir: Path | str = ".") -> None:
        self.base_dir = Path(base_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def package(self, result: "PuzzleResult", name: str = "default") -> Path:
        """Create ``name`` below the base directory and write the puzzle files.

        Raises :class:`PackageExistsError` rather than overwriting an
        existing package.
        """
        target = self.base_dir / name
        LOGGER.info("Packaging puzzle into %s", target)
        try:
            target.mkdir(parents=True)
        except FileExistsError as exc:
            raise PackageExistsError(f"Package directory already exists: {target}") from exc

        (target / SOLVED_FILE).write_text(format_puzzle(result, solution=True), encoding="utf-8")
        (target / UNSOLVED_FILE).write_text(format_puzzle(result, solution=False), encoding="utf-8")
        (target / COORDS_FILE).write_text(format_coords(result), encoding="utf-8")

        doc = self.build_document(result)
        (target / DOCUMENT_FILE).write_text(
            json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        LOGGER.info("Puzzle package written: %s", target)
        return target

    def build_document(self, result: "PuzzleResult") -> dict:
        doc = result.to_dict()
        doc["created_at"] = datetime.now(timezone.utc).isoformat()
        doc["stats"] = self._compute_stats(result)
        return doc

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _compute_stats(result: "PuzzleResult") -> dict:
        total_cells = result.rows * result.columns
        filler_cells = len(result.unused_squares)
        lengths = [len(p.word) for p in result.placements]
        return {
            "grid": {
                "rows": result.rows,
                "cols": result.columns,
                "total_cells": total_cells,
                "word_cells": total_cells - filler_cells,
                "filler_cells": filler_cells,
            },
            "words": {
                "placed": len(result.placements),
                "length_min": min(lengths) if lengths else 0,
                "length_max": max(lengths) if lengths else 0,
                "directions": dict(
                    sorted(Counter(p.direction.value for p in result.placements).items())
                ),
            },
            "search_steps": result.search_steps,
        }
