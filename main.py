"""CLI entrypoint for the word-search puzzle generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from wordsearch.core.exceptions import WordSearchError
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator
from wordsearch.engine.puzzle_store import PuzzleStore
from wordsearch.utils.logger import configure_logging, get_logger
from wordsearch.utils.pretty import pretty_print_puzzle, print_puzzle_stats


LOGGER = get_logger("wordsearch.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word-search puzzles",
    )
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Vocabulary words")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--rows", type=int, default=15, help="Grid height in cells")
    parser.add_argument("--columns", type=int, default=15, help="Grid width in cells")
    parser.add_argument("--diagonal", action="store_true", help="Allow diagonal words")
    parser.add_argument("--backward", action="store_true", help="Allow words read right-to-left or upwards")
    parser.add_argument("--message", type=str, help="Hidden message spelled by the leftover cells")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Give up after this many search steps instead of searching exhaustively",
    )
    parser.add_argument("--package", type=str, metavar="DIR", help="Write solved/unsolved/coords files into DIR")
    parser.add_argument("--pdf", type=Path, metavar="PATH", help="Render the puzzle to a PDF file")
    parser.add_argument(
        "--no-solution-page",
        action="store_true",
        help="Leave the highlighted solution page out of the PDF",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.max_steps is not None and args.max_steps <= 0:
        parser.error("--max-steps must be positive")
    if args.no_solution_page and not args.pdf:
        parser.error("--no-solution-page only applies together with --pdf")

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide at least --words or --words-file")

    config = GeneratorConfig(
        rows=args.rows,
        columns=args.columns,
        diagonal=args.diagonal,
        backward=args.backward,
        message=args.message,
        seed=args.seed,
        max_steps=args.max_steps,
    )

    try:
        result = PuzzleGenerator(config).generate(words)
        if args.package:
            PuzzleStore().package(result, args.package)
        if args.pdf:
            from wordsearch.io.pdf import render_pdf

            render_pdf(result, args.pdf, solution=not args.no_solution_page)
    except WordSearchError as exc:
        LOGGER.error("%s", exc)
        return 1

    if args.output:
        args.output.write_text(
            json.dumps(result.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
        )
    else:
        pretty_print_puzzle(result)
        print()
        pretty_print_puzzle(result, solution=True)
        print()
        print_puzzle_stats(result)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
