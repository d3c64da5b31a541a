import random
import unittest

from wordsearch import generate_puzzle
from wordsearch.core.constants import Direction
from wordsearch.core.exceptions import UnsatisfiableError, ValidationError
from wordsearch.engine.filler import Filler
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator
from wordsearch.engine.validator import PuzzleValidator


def read_placement(grid, placement) -> str:
    return "".join(grid.get(row, col) or "" for row, col in placement.cells)


class GeneratorTests(unittest.TestCase):
    def test_cat_dog_example(self) -> None:
        result = PuzzleGenerator(GeneratorConfig(rows=3, columns=3, seed=1)).generate(["cat", "dog"])
        self.assertEqual(result.directions, [Direction.RIGHT, Direction.DOWN])
        self.assertEqual(result.seed, 1)
        self.assertEqual(result.grid.unset_cells(), [])
        self.assertEqual([p.word for p in result.placements], ["cat", "dog"])
        for placement in result.placements:
            self.assertEqual(read_placement(result.grid, placement), placement.word)
            self.assertEqual(read_placement(result.solution, placement), placement.word)
        self.assertEqual(result.validation_messages, [])

    def test_seed_reproduces_puzzle(self) -> None:
        words = ["apple", "pear", "plum", "fig", "grape", "lime"]
        for message in (None, "hidden fruit"):
            with self.subTest(message=message):
                config = dict(rows=8, columns=8, diagonal=True, backward=True, seed=42, message=message)
                first = generate_puzzle(words, **config)
                second = generate_puzzle(words, **config)
                self.assertEqual(first.grid.rows_as_lists(), second.grid.rows_as_lists())
                self.assertEqual(first.solution.rows_as_lists(), second.solution.rows_as_lists())
                self.assertEqual(first.placements, second.placements)
                self.assertEqual(first.unused_squares, second.unused_squares)

    def test_hidden_message_changes_only_filler(self) -> None:
        words = ["apple", "pear", "plum"]
        plain = generate_puzzle(words, rows=6, columns=6, seed=8)
        hidden = generate_puzzle(words, rows=6, columns=6, seed=8, message="zzz")
        self.assertEqual(plain.solution.rows_as_lists(), hidden.solution.rows_as_lists())
        first_free = sorted(hidden.unused_squares)[:3]
        self.assertEqual([hidden.grid.get(r, c) for r, c in first_free], ["z", "z", "z"])

    def test_reused_generator_matches_fresh_generator(self) -> None:
        words = ["apple", "pear", "plum", "fig"]
        config = GeneratorConfig(rows=6, columns=6, seed=5)
        generator = PuzzleGenerator(config)
        generator.generate(words)
        second = generator.generate(words)
        fresh = PuzzleGenerator(GeneratorConfig(rows=6, columns=6, seed=second.seed)).generate(words)
        self.assertEqual(second.grid.rows_as_lists(), fresh.grid.rows_as_lists())
        self.assertEqual(second.placements, fresh.placements)

    def test_word_inside_another_word_is_reported(self) -> None:
        result = generate_puzzle(["ab", "ab"], rows=1, columns=2, seed=1)
        self.assertEqual(len(result.validation_messages), 2)
        self.assertIn("'ab' (#0) lies inside 'ab' (#1)", result.validation_messages[0])
        self.assertEqual(result.to_dict()["validation"], result.validation_messages)

    def test_filler_cells_are_unset_in_solution(self) -> None:
        result = generate_puzzle(["alpha", "beta", "gamma"], rows=6, columns=6, seed=3)
        self.assertTrue(result.unused_squares)
        self.assertEqual(set(result.solution.unset_cells()), result.unused_squares)
        word_cells = {cell for p in result.placements for cell in p.cells}
        self.assertFalse(word_cells & result.unused_squares)
        for row, col, letter in result.solution.iter_cells():
            if letter is not None:
                self.assertEqual(result.grid.get(row, col), letter)

    def test_hidden_message_in_row_major_order(self) -> None:
        result = generate_puzzle(["cat"], rows=2, columns=3, seed=7, message="hid")
        leftovers = sorted(result.unused_squares)
        self.assertEqual(len(leftovers), 3)
        self.assertEqual("".join(result.grid.get(r, c) for r, c in leftovers), "hid")
        self.assertFalse(result.message_truncated)

    def test_refilling_solution_keeps_placements(self) -> None:
        result = generate_puzzle(["north", "south", "east", "west"], rows=7, columns=7, seed=11)
        refilled = result.solution.clone()
        unused = Filler(random.Random(99)).fill(refilled)
        self.assertEqual(unused, result.unused_squares)
        for placement in result.placements:
            self.assertEqual(read_placement(refilled, placement), placement.word)

    def test_unsatisfiable_propagates(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(rows=1, columns=2, seed=1))
        with self.assertRaises(UnsatisfiableError):
            generator.generate(["ab", "ba"])

    def test_seed_defaults_to_clock(self) -> None:
        generator = PuzzleGenerator(GeneratorConfig(rows=3, columns=3))
        self.assertIsInstance(generator.seed, int)

    def test_to_dict_lists_placements_in_vocabulary_order(self) -> None:
        result = generate_puzzle(["one", "two"], rows=4, columns=4, seed=5)
        payload = result.to_dict()
        self.assertEqual([p["index"] for p in payload["placements"]], [0, 1])
        self.assertEqual([p["word"] for p in payload["placements"]], ["one", "two"])
        self.assertEqual(payload["directions"], ["right", "down"])
        self.assertEqual(len(payload["grid"]), 4)

    def test_failed_validation_raises(self) -> None:
        class RejectingValidator(PuzzleValidator):
            def _check_filled(self, grid) -> None:
                raise ValidationError("rejected")

        generator = PuzzleGenerator(GeneratorConfig(rows=3, columns=3, seed=1), validator=RejectingValidator())
        with self.assertRaises(ValidationError):
            generator.generate(["cat"])


class ValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.result = generate_puzzle(["cat", "dog"], rows=4, columns=4, seed=2)
        self.validator = PuzzleValidator()

    def _validate(self):
        r = self.result
        return self.validator.validate(r.grid, r.solution, r.placements, r.unused_squares)

    def test_generated_puzzle_is_valid(self) -> None:
        self.assertTrue(self._validate().ok)

    def test_detects_corrupted_word_cell(self) -> None:
        row, col = self.result.placements[0].origin
        self.result.grid.set(row, col, "#")
        validation = self._validate()
        self.assertFalse(validation.ok)
        self.assertIn("cat", validation.messages[0])

    def test_detects_filler_over_word(self) -> None:
        self.result.unused_squares.add(self.result.placements[1].origin)
        self.assertFalse(self._validate().ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
