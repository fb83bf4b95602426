import unittest

from interlock.core.constants import Direction
from interlock.core.models import ClueEntry, Grid, Placement
from interlock.engine.numbering import renumber_placements
from interlock.engine.puzzle import create_puzzle


ACROSS = Direction.ACROSS
DOWN = Direction.DOWN


class RenumberTests(unittest.TestCase):
    def test_numbers_follow_reading_order(self) -> None:
        placements = [
            Placement("LATER", "c", 4, 0, ACROSS, 1),
            Placement("FIRST", "c", 0, 2, DOWN, 2),
            Placement("MIDDLE", "c", 2, 1, ACROSS, 3),
        ]
        renumbered = renumber_placements(placements)
        self.assertEqual([p.word for p in renumbered], ["FIRST", "MIDDLE", "LATER"])
        self.assertEqual([p.number for p in renumbered], [1, 2, 3])

    def test_shared_start_cell_shares_number(self) -> None:
        placements = [
            Placement("ABC", "a", 0, 0, ACROSS, 7),
            Placement("XY", "x", 0, 4, DOWN, 8),
            Placement("ADD", "d", 0, 0, DOWN, 9),
        ]
        renumbered = renumber_placements(placements)
        self.assertEqual(
            [(p.word, p.number) for p in renumbered],
            [("ABC", 1), ("ADD", 1), ("XY", 2)],
        )

    def test_input_placements_are_untouched(self) -> None:
        given = Placement("ABC", "a", 3, 3, ACROSS, 5)
        renumber_placements([given])
        self.assertEqual(given.number, 5)


class CreatePuzzleTests(unittest.TestCase):
    def build_grid(self) -> Grid:
        placements = [
            Placement("ONE", "across one", 0, 0, ACROSS, 1),
            Placement("TWO", "down two", 0, 4, DOWN, 2),
            Placement("SIX", "across six", 6, 0, ACROSS, 6),
            Placement("FOUR", "across four", 2, 1, ACROSS, 4),
            Placement("FIVE", "down five", 3, 2, DOWN, 5),
        ]
        return Grid(width=8, height=8, cells=[[None] * 8 for _ in range(8)], placements=placements)

    def test_partitions_and_sorts_clues(self) -> None:
        grid = self.build_grid()
        puzzle = create_puzzle(grid, "Weekly")
        self.assertEqual(puzzle.title, "Weekly")
        self.assertIs(puzzle.grid, grid)
        self.assertEqual(len(puzzle.across_clues), 3)
        self.assertEqual(len(puzzle.down_clues), 2)
        self.assertEqual(
            puzzle.across_clues,
            [
                ClueEntry(1, "across one"),
                ClueEntry(4, "across four"),
                ClueEntry(6, "across six"),
            ],
        )
        self.assertEqual(puzzle.down_clues, [ClueEntry(2, "down two"), ClueEntry(5, "down five")])

    def test_to_jsonable_lists_clues_by_direction(self) -> None:
        payload = create_puzzle(self.build_grid(), "Weekly").to_jsonable()
        self.assertEqual(payload["title"], "Weekly")
        self.assertEqual([c["number"] for c in payload["across_clues"]], [1, 4, 6])
        self.assertEqual(payload["grid"]["placements"][1]["direction"], "down")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
