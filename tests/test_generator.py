import unittest
from typing import Dict, List, Set, Tuple

from interlock.core.constants import Direction
from interlock.core.models import Grid, WordEntry
from interlock.engine.generator import CrosswordGenerator, GeneratorConfig, generate_grid
from interlock.engine.puzzle import create_puzzle
from interlock.engine.validator import GridValidator


def entries(*words: str) -> List[WordEntry]:
    return [WordEntry(word=w, clue=f"clue for {w.lower()}") for w in words]


SAMPLE_WORDS = entries(
    "PYTHON", "TYPING", "NOTE", "HONEY", "STONE", "ONSET", "TOE", "YEN", "GNU", "ZIP"
)


def coverage(grid: Grid) -> Dict[Tuple[int, int], Set[Direction]]:
    covered: Dict[Tuple[int, int], Set[Direction]] = {}
    for placement in grid.placements:
        for cell in placement.cells:
            covered.setdefault(cell, set()).add(placement.direction)
    return covered


class GenerateGridScenarioTests(unittest.TestCase):
    def test_empty_word_list_returns_none(self) -> None:
        self.assertIsNone(generate_grid([]))

    def test_single_word_is_placed_across(self) -> None:
        grid = generate_grid([WordEntry(word="ETIMO", clue="Our company")])
        assert grid is not None
        self.assertEqual(len(grid.placements), 1)
        placement = grid.placements[0]
        self.assertEqual(placement.word, "ETIMO")
        self.assertEqual(placement.direction, Direction.ACROSS)
        self.assertEqual((placement.row, placement.col, placement.number), (0, 0, 1))
        self.assertEqual((grid.width, grid.height), (5, 1))

    def test_shared_letters_interlock(self) -> None:
        grid = generate_grid(
            [
                WordEntry(word="KORSORD", clue="c1"),
                WordEntry(word="SLACK", clue="c2"),
                WordEntry(word="KOD", clue="c3"),
            ]
        )
        assert grid is not None
        self.assertGreaterEqual(len(grid.placements), 2)
        layout = {(p.word, p.row, p.col, p.direction, p.number) for p in grid.placements}
        self.assertEqual(
            layout,
            {
                ("KORSORD", 0, 0, Direction.ACROSS, 1),
                ("KOD", 0, 0, Direction.DOWN, 1),
                ("SLACK", 0, 3, Direction.DOWN, 2),
            },
        )
        self.assertEqual((grid.width, grid.height), (7, 5))
        self.assertEqual("".join(grid.cells[0]), "KORSORD")
        self.assertEqual([row[3] for row in grid.cells], list("SLACK"))

    def test_oversized_anchor_returns_none(self) -> None:
        self.assertIsNone(generate_grid([WordEntry(word="VERYLONGWORD", clue="x")], 8))

    def test_non_positive_size_returns_none(self) -> None:
        self.assertIsNone(generate_grid([], 0))
        self.assertIsNone(generate_grid([WordEntry(word="ABC", clue="x")], 0))
        self.assertIsNone(generate_grid([WordEntry(word="ABC", clue="x")], -3))

    def test_only_empty_words_returns_none(self) -> None:
        self.assertIsNone(generate_grid([WordEntry(word="", clue="x")]))
        self.assertIsNone(CrosswordGenerator().generate(entries("", "")))

    def test_empty_word_next_to_real_words_is_dropped(self) -> None:
        grid = generate_grid(entries("CAT", ""))
        assert grid is not None
        self.assertEqual([p.word for p in grid.placements], ["CAT"])

    def test_letters_follow_placement_direction(self) -> None:
        grid = generate_grid([WordEntry(word="TEST", clue="A test word")])
        assert grid is not None
        placement = grid.placements[0]
        letters = [grid.cells[r][c] for r, c in placement.cells]
        self.assertEqual(letters, ["T", "E", "S", "T"])

    def test_lowercase_input_is_uppercased(self) -> None:
        grid = generate_grid(
            [WordEntry(word="äpple", clue="En frukt"), WordEntry(word="öl", clue="En dryck")]
        )
        assert grid is not None
        words = {p.word: p for p in grid.placements}
        self.assertEqual(set(words), {"ÄPPLE", "ÖL"})
        self.assertEqual(words["ÄPPLE"].direction, Direction.ACROSS)
        self.assertEqual(words["ÖL"].direction, Direction.DOWN)
        self.assertEqual([grid.cells[r][c] for r, c in words["ÄPPLE"].cells], list("ÄPPLE"))

    def test_unconnectable_word_is_dropped(self) -> None:
        grid = generate_grid(entries("ABC", "XYZ"))
        assert grid is not None
        self.assertEqual([p.word for p in grid.placements], ["ABC"])

    def test_longest_word_anchors_and_ties_keep_input_order(self) -> None:
        grid = generate_grid(entries("CAT", "HORSE", "MOUSE"))
        assert grid is not None
        anchor = [p for p in grid.placements if p.direction is Direction.ACROSS][0]
        self.assertEqual(anchor.word, "HORSE")


class GeneratedGridPropertyTests(unittest.TestCase):
    def setUp(self) -> None:
        grid = generate_grid(SAMPLE_WORDS)
        assert grid is not None
        self.grid = grid

    def test_more_than_anchor_is_placed(self) -> None:
        self.assertGreater(len(self.grid.placements), 3)
        self.assertLessEqual(len(self.grid.placements), len(SAMPLE_WORDS))

    def test_placements_agree_with_cells(self) -> None:
        letters: Dict[Tuple[int, int], str] = {}
        for placement in self.grid.placements:
            for index, cell in enumerate(placement.cells):
                self.assertEqual(self.grid.cells[cell[0]][cell[1]], placement.word[index])
                self.assertEqual(letters.setdefault(cell, placement.word[index]), placement.word[index])

    def test_grid_is_tightly_trimmed(self) -> None:
        self.assertTrue(any(self.grid.cells[0]))
        self.assertTrue(any(self.grid.cells[-1]))
        self.assertTrue(any(row[0] for row in self.grid.cells))
        self.assertTrue(any(row[-1] for row in self.grid.cells))

    def test_no_parallel_adjacency(self) -> None:
        for (r, c), directions in coverage(self.grid).items():
            if len(directions) != 1:
                continue
            (direction,) = directions
            for dr, dc in direction.perpendicular_steps:
                self.assertIsNone(self.grid.letter(r + dr, c + dc), f"({r},{c}) touches a neighbour")

    def test_numbering_is_consistent(self) -> None:
        ordered = sorted(self.grid.placements, key=lambda p: (p.row, p.col))
        self.assertEqual(ordered, self.grid.placements)
        numbers = [p.number for p in ordered]
        self.assertEqual(numbers, sorted(numbers))
        self.assertEqual(sorted(set(numbers)), list(range(1, len(set(numbers)) + 1)))
        by_start: Dict[Tuple[int, int], int] = {}
        for placement in ordered:
            self.assertEqual(by_start.setdefault(placement.start, placement.number), placement.number)

    def test_clue_conservation(self) -> None:
        puzzle = create_puzzle(self.grid, "Sample")
        self.assertEqual(
            len(puzzle.across_clues) + len(puzzle.down_clues), len(self.grid.placements)
        )

    def test_validator_accepts_generated_grid(self) -> None:
        result = GridValidator().validate(self.grid, create_puzzle(self.grid, "Sample"))
        self.assertTrue(result.ok, result.messages)

    def test_generation_is_deterministic(self) -> None:
        again = generate_grid(SAMPLE_WORDS)
        assert again is not None
        self.assertEqual(again, self.grid)
        self.assertEqual(
            create_puzzle(again, "Sample"), create_puzzle(self.grid, "Sample")
        )


class CrosswordGeneratorTests(unittest.TestCase):
    def test_config_rejects_non_positive_size(self) -> None:
        with self.assertRaises(ValueError):
            GeneratorConfig(max_size=0)
        with self.assertRaises(ValueError):
            GeneratorConfig(min_words=0)

    def test_build_puzzle_reports_placed_words(self) -> None:
        result = CrosswordGenerator().build_puzzle(entries("KORSORD", "SLACK", "KOD", "XYZ"), "Week 1")
        assert result.puzzle is not None
        self.assertEqual(result.puzzle.title, "Week 1")
        self.assertEqual((result.placed, result.requested, result.dropped), (3, 4, 1))
        assert result.validation is not None
        self.assertTrue(result.validation.ok)

    def test_build_puzzle_enforces_min_words(self) -> None:
        generator = CrosswordGenerator(GeneratorConfig(min_words=3))
        result = generator.build_puzzle(entries("ABC", "XYZ"), "Too sparse")
        self.assertIsNone(result.puzzle)
        self.assertEqual(result.placed, 1)

    def test_build_puzzle_without_words(self) -> None:
        result = CrosswordGenerator().build_puzzle([], "Empty")
        self.assertIsNone(result.puzzle)
        self.assertIsNone(result.grid)
        self.assertEqual(result.placed, 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
