import random
import unittest
from unittest import mock
from collections import Counter

from arrowword.core.constants import Axis, Direction
from arrowword.core.exceptions import CrosswordError
from arrowword.core.models import EmptyCell, LetterCell
from arrowword.engine.generator import CrosswordGenerator, GeneratorConfig
from arrowword.engine.grid import CrosswordGrid, GridConfig
from arrowword.engine.placement import fits
from arrowword.engine.session import PuzzleSession


WORDS = {
    "ANNE": "girl's name",
    "ASTER": "flower",
    "CAT": "feline pet",
    "DOG": "barks",
    "EIS": "frozen water",
    "ENDE": "finish",
    "GARTEN": "yard",
    "HUND": "dog, in German",
    "LEINE": "leash",
    "NEST": "bird's home",
    "OWL": "hoots",
    "RAT": "rodent",
    "REISE": "trip",
    "SAND": "beach stuff",
    "SEE": "lake",
    "TAN": "color",
    "TEE": "hot drink",
    "TIER": "animal",
    "URNE": "ballot box",
    "ZEIT": "time",
}


def short_words(count: int):
    letters = "ABCDEFGHIJKLMNOPRSTU"
    words = {}
    for index in range(count):
        keyword = letters[index % 20] + letters[(index * 7 + 3) % 20] + letters[(index // 20) + 4]
        words[keyword] = f"clue {index}"
    return words


def make_session(dictionary, width: int = 8, height: int = 8) -> PuzzleSession:
    grid = CrosswordGrid(GridConfig(height=height, width=width))
    return PuzzleSession.create(grid, dictionary, random.Random(0))


def assert_no_illegal_overlap(test: unittest.TestCase, placed) -> None:
    owners = Counter(cell for word in placed for cell in word.cells)
    for cell, count in owners.items():
        test.assertLessEqual(count, 2, cell)
        if count == 2:
            axes = {word.axis for word in placed if cell in word.cells}
            test.assertEqual(axes, {Axis.HORIZONTAL, Axis.VERTICAL})


class GenerateRandomTests(unittest.TestCase):
    def test_result_is_consistent(self) -> None:
        generator = CrosswordGenerator(WORDS, GeneratorConfig(seed=11))
        result = generator.generate_random(10, 10)

        self.assertEqual((result.grid.width, result.grid.height), (10, 10))
        self.assertEqual(result.validation_messages, [])
        self.assertTrue(result.placed)
        placed_keywords = {word.keyword for word in result.placed}
        self.assertFalse(placed_keywords & set(result.remaining))
        self.assertEqual(placed_keywords | set(result.remaining), set(WORDS))
        assert_no_illegal_overlap(self, result.placed)

    def test_same_seed_same_grid(self) -> None:
        first = CrosswordGenerator(WORDS, GeneratorConfig(seed=5)).generate_random(9, 9)
        second = CrosswordGenerator(WORDS, GeneratorConfig(seed=5)).generate_random(9, 9)
        self.assertEqual(first.grid.to_encoded(), second.grid.to_encoded())
        self.assertEqual(
            [word.to_jsonable() for word in first.placed],
            [word.to_jsonable() for word in second.placed],
        )

    def test_empty_dictionary_leaves_grid_empty(self) -> None:
        result = CrosswordGenerator({}).generate_random(8, 8)
        self.assertEqual(result.placed, [])
        self.assertEqual(result.grid.count(EmptyCell), 64)
        self.assertTrue(result.complete)

    def test_caller_dictionary_is_not_mutated(self) -> None:
        words = dict(WORDS)
        CrosswordGenerator(words, GeneratorConfig(seed=1)).generate_random(10, 10)
        self.assertEqual(words, WORDS)

    def test_unknown_language(self) -> None:
        with self.assertRaises(ValueError):
            CrosswordGenerator(WORDS, GeneratorConfig(language="klingon"))


class GenerateFromDictionaryTests(unittest.TestCase):
    def test_forty_short_words_stay_within_cap(self) -> None:
        words = short_words(40)
        self.assertEqual(len(words), 40)
        result = CrosswordGenerator(words, GeneratorConfig(seed=3)).generate_from_dictionary()

        self.assertLessEqual(result.grid.width, 30)
        self.assertLessEqual(result.grid.height, 30)
        self.assertGreaterEqual(result.grid.width, 20)
        self.assertEqual(result.validation_messages, [])
        assert_no_illegal_overlap(self, result.placed)

    def test_long_word_widens_grid(self) -> None:
        words = {"ABENTEUERREISE": "adventure trip", "CAT": "feline pet", "OWL": "hoots"}
        result = CrosswordGenerator(words, GeneratorConfig(seed=2)).generate_from_dictionary()
        self.assertGreaterEqual(result.grid.width, 16)
        self.assertEqual(result.validation_messages, [])


class FillUpTests(unittest.TestCase):
    def test_fill_up_keeps_existing_words(self) -> None:
        generator = CrosswordGenerator(WORDS, GeneratorConfig(seed=4))
        first = generator.generate_random(12, 12)
        snapshot = first.grid.to_encoded()
        count = len(first.placed)

        extra = {"BAUM": "tree", "ROSE": "flower", "NASE": "nose", "ERDE": "earth"}
        second = generator.fill_up(extra, 4)
        self.assertGreaterEqual(len(second.placed), count)
        self.assertEqual(second.validation_messages, [])
        for r, row in enumerate(snapshot):
            for c, text in enumerate(row):
                if text and text != "0":
                    self.assertEqual(second.grid.to_encoded()[r][c], text)

        third = generator.fill_up(short_words(10), 5)
        self.assertGreaterEqual(len(third.placed), len(second.placed))
        self.assertLessEqual(len(third.placed) - len(second.placed), 5)

    def test_fill_up_on_supplied_grid(self) -> None:
        stored = CrosswordGenerator(WORDS, GeneratorConfig(seed=8)).generate_random(10, 10)
        grid = CrosswordGrid.from_encoded(stored.grid.to_encoded())

        generator = CrosswordGenerator({}, GeneratorConfig(seed=8))
        result = generator.fill_up(WORDS, len(WORDS), grid=grid, placed=stored.placed)

        already = {word.keyword for word in stored.placed}
        self.assertFalse(already & set(result.remaining))
        self.assertEqual(result.placed[: len(stored.placed)], stored.placed)
        self.assertEqual(result.validation_messages, [])

    def test_fill_up_needs_a_grid(self) -> None:
        with self.assertRaises(CrosswordError):
            CrosswordGenerator(WORDS).fill_up(WORDS, 3)

    def test_negative_count_is_rejected(self) -> None:
        generator = CrosswordGenerator(WORDS)
        generator.generate_random(8, 8)
        with self.assertRaises(ValueError):
            generator.fill_up(WORDS, -1)


class PassTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = CrosswordGenerator({})

    def test_seed_pass_uses_anchor_rows(self) -> None:
        session = make_session({"CAT": "feline pet", "DOG": "barks"})
        self.generator.fill_random(session)
        self.assertEqual(
            {(word.row, word.col, word.direction) for word in session.placed},
            {(2, 0, Direction.HORIZONTAL_RIGHT), (7, 0, Direction.HORIZONTAL_RIGHT)},
        )
        self.assertEqual(session.dictionary, {})

    def test_frequency_sweep_first_fit(self) -> None:
        session = make_session({"CAT": "feline pet"})
        self.generator.fill_with_good_frequency(session)
        word = session.placed[0]
        self.assertEqual((word.row, word.col, word.direction), (0, 1, Direction.VERTICAL_DOWN))

    def test_vertical_and_horizontal_sweeps(self) -> None:
        session = make_session({"CAT": "feline pet"})
        self.generator.fill_vertical(session, 3)
        self.assertEqual(
            (session.placed[0].row, session.placed[0].col), (0, 2)
        )

        session = make_session({"CAT": "feline pet"})
        self.generator.fill_horizontal(session, 3)
        self.assertEqual(
            (session.placed[0].row, session.placed[0].col), (2, 0)
        )

    def test_diagonal_sweep_starts_in_corner(self) -> None:
        session = make_session({"CAT": "feline pet"})
        self.generator.fill_diagonal(session)
        word = session.placed[0]
        self.assertEqual((word.row, word.col, word.direction), (0, 0, Direction.RIGHT_DOWN))

    def test_first_by_frequency_prefers_frequent_letters(self) -> None:
        session = make_session({"QUIZ": "test", "NIE": "never", "ENE": "dune"})
        self.assertTrue(
            self.generator.place_first_by_frequency(session, 2, 0, 3, Direction.HORIZONTAL_RIGHT)
        )
        self.assertEqual(session.placed[0].keyword, "ENE")
        self.assertFalse(
            self.generator.place_first_by_frequency(session, 5, 0, 5, Direction.HORIZONTAL_RIGHT)
        )
        self.assertFalse(
            self.generator.place_first_by_frequency(session, 2, 0, 3, Direction.HORIZONTAL_RIGHT)
        )

    def test_best_fit_prefers_crossings_over_length(self) -> None:
        session = make_session({"HORSES": "stable animals", "AX": "tool"})
        session.grid.set_cell(3, 1, LetterCell("A", Axis.VERTICAL))
        placed = self.generator.place_best_fit(session, 2, 1)
        self.assertEqual((placed.keyword, placed.direction), ("AX", Direction.VERTICAL_DOWN))

    def test_best_fit_prefers_length_then_direction_order(self) -> None:
        session = make_session({"CAT": "feline pet", "HORSE": "stable animal"})
        placed = self.generator.place_best_fit_in_direction(
            session, 2, 0, Direction.HORIZONTAL_RIGHT
        )
        self.assertEqual(placed.keyword, "HORSE")

        session = make_session({"OWL": "hoots"})
        placed = self.generator.place_best_fit(session, 2, 2)
        self.assertEqual(placed.direction, Direction.VERTICAL_DOWN)

    def test_best_fit_on_occupied_cell(self) -> None:
        session = make_session({"OWL": "hoots"})
        session.grid.set_cell(2, 2, LetterCell("Q", Axis.HORIZONTAL))
        self.assertIsNone(self.generator.place_best_fit(session, 2, 2))
        self.assertIsNone(self.generator.place_best_fit(session, 20, 2))


class UnshuffledRandom(random.Random):
    """Keeps keywords in insertion order so anchors are predictable."""

    def shuffle(self, x, *args, **kwargs) -> None:
        pass


def make_unshuffled_session(dictionary) -> PuzzleSession:
    grid = CrosswordGrid(GridConfig(height=8, width=8))
    return PuzzleSession.create(grid, dictionary, UnshuffledRandom(0))


def occupy(grid: CrosswordGrid, *cells) -> None:
    for row, col in cells:
        grid.set_cell(row, col, LetterCell("Q", Axis.HORIZONTAL))


class SeedPassWindowTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = CrosswordGenerator({})

    def test_first_anchor_is_crossed_right_down(self) -> None:
        session = make_unshuffled_session({"CAT": "feline pet", "ARCH": "curved span"})
        # Keep ARCH out of anchors two to five.
        occupy(session.grid, (7, 0), (1, 4), (0, 7), (3, 7))

        self.generator.fill_random(session)

        self.assertEqual(
            [(w.keyword, w.row, w.col, w.direction) for w in session.placed],
            [
                ("CAT", 2, 0, Direction.HORIZONTAL_RIGHT),
                ("ARCH", 0, 0, Direction.RIGHT_DOWN),
            ],
        )
        self.assertEqual(session.grid.cell(2, 1), LetterCell("C", Axis.VERTICAL))

    def test_window_needs_its_anchor(self) -> None:
        session = make_unshuffled_session({"CAT": "feline pet", "ARCH": "curved span"})
        occupy(session.grid, (2, 0), (7, 0), (1, 4), (0, 7), (4, 7))
        self.assertTrue(fits(session.grid, Direction.RIGHT_DOWN, "ARCH", 0, 0))

        self.generator.fill_random(session)

        self.assertEqual(session.placed, [])
        self.assertEqual(set(session.dictionary), {"CAT", "ARCH"})

    def test_fifth_anchor_gets_one_crossing_per_column_and_two_in_total(self) -> None:
        session = make_unshuffled_session(
            {"HOUSE": "home", "BUS": "coach", "GNU": "antelope", "TONE": "sound"}
        )
        occupy(session.grid, (2, 0), (7, 0), (1, 4), (0, 7))

        with mock.patch.object(
            self.generator,
            "place_first_by_frequency",
            wraps=self.generator.place_first_by_frequency,
        ) as first_fit:
            self.generator.fill_random(session)

        self.assertEqual(
            [(w.keyword, w.row, w.col, w.direction) for w in session.placed],
            [
                ("HOUSE", 2, 7, Direction.VERTICAL_DOWN),
                ("BUS", 5, 5, Direction.BOTTOM_RIGHT),
                ("TONE", 6, 4, Direction.BOTTOM_RIGHT),
            ],
        )
        self.assertIn("GNU", session.dictionary)
        attempts = [
            call.args[1:3]
            for call in first_fit.call_args_list
            if call.args[4] is Direction.BOTTOM_RIGHT
        ]
        self.assertEqual(attempts, [(7, 5), (6, 5), (5, 5), (7, 4), (6, 4)])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
