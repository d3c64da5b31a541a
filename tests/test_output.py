import io
import json
import tempfile
import unittest
from pathlib import Path

from wordsearch.core.constants import Direction
from wordsearch.core.exceptions import PackageExistsError
from wordsearch.core.models import Placement
from wordsearch.engine.generator import PuzzleResult, generate_puzzle
from wordsearch.engine.grid import WordSearchGrid
from wordsearch.engine.puzzle_store import PuzzleStore
from wordsearch.io.pdf import render_pdf
from wordsearch.utils.pretty import (
    format_coords,
    format_grid,
    format_puzzle,
    pretty_print_puzzle,
    print_puzzle_stats,
)


def sample_result() -> PuzzleResult:
    solution = WordSearchGrid(2, 3)
    for col, letter in enumerate("cat"):
        solution.set(0, col, letter)
    solution.set(1, 0, "a")
    grid = solution.clone()
    grid.set(1, 1, "x")
    grid.set(1, 2, "y")
    return PuzzleResult(
        vocabulary=["cat", "ca"],
        rows=2,
        columns=3,
        directions=[Direction.RIGHT, Direction.DOWN],
        seed=7,
        grid=grid,
        solution=solution,
        placements=[
            Placement(word="cat", direction=Direction.RIGHT, row=0, col=0),
            Placement(word="ca", direction=Direction.DOWN, row=0, col=0),
        ],
        unused_squares={(1, 1), (1, 2)},
    )


class TextFormatTests(unittest.TestCase):
    def test_format_grid_marks_unset_cells(self) -> None:
        self.assertEqual(format_grid(sample_result().solution), "c a t\na . .\n")

    def test_format_puzzle(self) -> None:
        result = sample_result()
        self.assertEqual(format_puzzle(result), "c a t\na x y\n")
        self.assertEqual(format_puzzle(result, solution=True), "c a t\na . .\n")

    def test_format_coords(self) -> None:
        self.assertEqual(format_coords(sample_result()), "0,cat,right,0,0\n1,ca,down,0,0\n")

    def test_pretty_print_and_stats(self) -> None:
        stream = io.StringIO()
        result = sample_result()
        pretty_print_puzzle(result, stream=stream)
        pretty_print_puzzle(result, solution=True, stream=stream)
        print_puzzle_stats(result, stream=stream)
        text = stream.getvalue()
        self.assertIn("Puzzle", text)
        self.assertIn("Solution", text)
        self.assertIn("Filler cells:  2", text)
        self.assertIn("Crossings:     1", text)
        self.assertIn("Seed: 7", text)
        self.assertNotIn("--- Validation ---", text)

    def test_stats_list_validation_warnings(self) -> None:
        stream = io.StringIO()
        result = sample_result()
        result.validation_messages = ["Word 'ca' (#1) lies inside 'cat' (#0)"]
        print_puzzle_stats(result, stream=stream)
        self.assertIn("--- Validation ---", stream.getvalue())
        self.assertIn("lies inside 'cat'", stream.getvalue())


class PuzzleStoreTests(unittest.TestCase):
    def test_package_writes_all_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            store = PuzzleStore(tmpdir)
            target = store.package(sample_result(), "demo")
            self.assertEqual(target, Path(tmpdir) / "demo")
            self.assertEqual((target / "unsolved.txt").read_text(encoding="utf-8"), "c a t\na x y\n")
            self.assertEqual((target / "solved.txt").read_text(encoding="utf-8"), "c a t\na . .\n")
            self.assertEqual(
                (target / "coords.txt").read_text(encoding="utf-8"),
                "0,cat,right,0,0\n1,ca,down,0,0\n",
            )
            doc = json.loads((target / "puzzle.json").read_text(encoding="utf-8"))
            self.assertEqual(doc["seed"], 7)
            self.assertEqual(doc["unused_squares"], [[1, 1], [1, 2]])
            self.assertEqual(doc["stats"]["grid"]["filler_cells"], 2)
            self.assertEqual(doc["stats"]["words"]["directions"], {"down": 1, "right": 1})

    def test_existing_package_is_not_overwritten(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            store = PuzzleStore(tmpdir)
            store.package(sample_result(), "demo")
            with self.assertRaises(PackageExistsError):
                store.package(sample_result(), "demo")


class PdfRenderTests(unittest.TestCase):
    def test_render_pdf_writes_document(self) -> None:
        result = generate_puzzle(["cat", "dog"], rows=5, columns=5, seed=1)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = render_pdf(result, Path(tmpdir) / "puzzle.pdf")
            self.assertTrue(path.read_bytes().startswith(b"%PDF"))

    def test_render_pdf_without_solution_or_clues(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = render_pdf(sample_result(), Path(tmpdir) / "plain.pdf", solution=False, clues=False)
            self.assertGreater(path.stat().st_size, 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
