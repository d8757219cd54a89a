import io
import random
import unittest

from arrowword.core.constants import Direction
from arrowword.engine.generator import CrosswordResult
from arrowword.engine.grid import CrosswordGrid, GridConfig
from arrowword.engine.placement import place
from arrowword.engine.session import PuzzleSession
from arrowword.utils.pretty import clue_numbers, format_clues, format_grid, print_crossword_stats


class PrettyPrintTests(unittest.TestCase):
    def setUp(self) -> None:
        grid = CrosswordGrid(GridConfig(height=8, width=8))
        self.session = PuzzleSession.create(
            grid, {"CAT": "feline pet", "TAN": "color", "OWL": "hoots"}, random.Random(0)
        )
        place(self.session, Direction.HORIZONTAL_RIGHT, "CAT", 2, 0)
        place(self.session, Direction.VERTICAL_DOWN, "TAN", 0, 2)

    def test_clues_are_numbered_in_reading_order(self) -> None:
        self.assertEqual(clue_numbers(self.session.grid), {(0, 2): 1, (2, 0): 2})

    def test_format_grid(self) -> None:
        lines = format_grid(self.session.grid).splitlines()
        self.assertEqual(lines[0], "+" + "---+" * 8)
        self.assertEqual(lines[1], "| . | . | 1 | . | . | . | . | . |")
        self.assertEqual(lines[5], "| 2 | C | A | T | # | . | . | . |")

    def test_format_clues(self) -> None:
        self.assertEqual(
            format_clues(self.session.grid).splitlines(),
            ["  1: 3 vertical-down: color", "  2: 3 horizontal-right: feline pet"],
        )

    def test_stats_report(self) -> None:
        result = CrosswordResult(
            grid=self.session.grid,
            placed=list(self.session.placed),
            remaining=dict(self.session.dictionary),
            seed=42,
        )
        stream = io.StringIO()
        print_crossword_stats(result, stream=stream)
        text = stream.getvalue()
        self.assertIn("Placed:        2", text)
        self.assertIn("Not placed:    1", text)
        self.assertIn("Seed: 42", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
