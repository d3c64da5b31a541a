"""Plain-text and pretty-print helpers for word-search puzzles."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine.generator import PuzzleResult
    from ..engine.grid import WordSearchGrid


BLANK = "."


def format_grid(grid: WordSearchGrid, blank: str = BLANK) -> str:
    """One line per row, cells separated by a space, unset cells as ``blank``."""
    lines = []
    for row in grid.cells:
        lines.append(" ".join(letter if letter is not None else blank for letter in row))
    return "".join(line + "\n" for line in lines)


def format_puzzle(result: PuzzleResult, solution: bool = False) -> str:
    return format_grid(result.solution if solution else result.grid)


def format_coords(result: PuzzleResult) -> str:
    lines = []
    for index, placement in enumerate(result.placements):
        lines.append(
            f"{index},{placement.word},{placement.direction.value},{placement.row},{placement.col}"
        )
    return "".join(line + "\n" for line in lines)


def format_grid_with_axes(grid: WordSearchGrid) -> str:
    width = grid.columns
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.cells):
        row_render = " ".join(f"{letter or BLANK:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_puzzle(result: PuzzleResult, *, solution: bool = False, stream=None) -> None:
    """Print the puzzle (or its answer key) in a human-friendly format."""

    stream = stream or sys.stdout
    label = "Solution" if solution else "Puzzle"
    print(label, file=stream)
    print(format_grid_with_axes(result.solution if solution else result.grid), file=stream)


def print_puzzle_stats(result: PuzzleResult, *, stream=None) -> None:
    """Print grid + placement stats for a completed puzzle."""

    stream = stream or sys.stdout
    total_cells = result.rows * result.columns
    filler_cells = len(result.unused_squares)
    word_cells = total_cells - filler_cells
    letters_written = sum(len(p.word) for p in result.placements)
    directions = Counter(p.direction.value for p in result.placements)

    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.rows} x {result.columns} ({total_cells} cells)", file=stream)
    if total_cells:
        print(f"  Word cells:    {word_cells} ({word_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Filler cells:  {filler_cells}", file=stream)
    print(f"  Crossings:     {letters_written - word_cells}", file=stream)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(result.placements)}", file=stream)
    if directions:
        dist_parts = [f"{d}:{n}" for d, n in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
    print(f"  Search steps:  {result.search_steps}", file=stream)

    if result.message_truncated:
        print(file=stream)
        print("  Hidden message was truncated to fit the free cells", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    print(file=stream)
    print(f"Seed: {result.seed}", file=stream)
