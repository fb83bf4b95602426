"""Deterministic rule validation for generated crosswords."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from ..core.constants import Direction
from ..core.exceptions import ValidationError
from ..core.models import Grid, Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished grid."""

    def validate(self, grid: Grid, puzzle: Optional[Puzzle] = None) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_dimensions(grid)
            coverage = self._check_placements_match_cells(grid)
            self._check_no_orphan_letters(grid, coverage)
            self._check_no_parallel_adjacency(grid, coverage)
            self._check_runs_are_placements(grid)
            self._check_numbering(grid)
            if puzzle is not None:
                self._check_clues(puzzle)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_dimensions(self, grid: Grid) -> None:
        if len(grid.cells) != grid.height:
            raise ValidationError(f"Grid has {len(grid.cells)} rows, expected {grid.height}")
        for r, row in enumerate(grid.cells):
            if len(row) != grid.width:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {grid.width}")

    def _check_placements_match_cells(
        self, grid: Grid
    ) -> Dict[Tuple[int, int], Set[Direction]]:
        coverage: Dict[Tuple[int, int], Set[Direction]] = {}
        for placement in grid.placements:
            for index, (r, c) in enumerate(placement.cells):
                if not (0 <= r < grid.height and 0 <= c < grid.width):
                    raise ValidationError(
                        f"Placement {placement.word} leaves the grid at ({r},{c})"
                    )
                if grid.cells[r][c] != placement.word[index]:
                    raise ValidationError(
                        f"Cell ({r},{c}) holds {grid.cells[r][c]!r}, "
                        f"{placement.word} expects {placement.word[index]!r}"
                    )
                coverage.setdefault((r, c), set()).add(placement.direction)
        return coverage

    def _check_no_orphan_letters(
        self, grid: Grid, coverage: Dict[Tuple[int, int], Set[Direction]]
    ) -> None:
        for r in range(grid.height):
            for c in range(grid.width):
                if grid.cells[r][c] is not None and (r, c) not in coverage:
                    raise ValidationError(f"Letter at ({r},{c}) belongs to no placement")

    def _check_no_parallel_adjacency(
        self, grid: Grid, coverage: Dict[Tuple[int, int], Set[Direction]]
    ) -> None:
        for (r, c), directions in coverage.items():
            if len(directions) != 1:
                continue
            (direction,) = directions
            for dr, dc in direction.perpendicular_steps:
                if grid.letter(r + dr, c + dc) is not None:
                    raise ValidationError(
                        f"Cell ({r},{c}) touches ({r + dr},{c + dc}) without crossing"
                    )

    def _check_runs_are_placements(self, grid: Grid) -> None:
        extents = {
            (p.direction, p.row, p.col, len(p.word)) for p in grid.placements
        }
        for direction in Direction:
            for start, length in self._runs(grid, direction):
                if (direction, start[0], start[1], length) not in extents:
                    raise ValidationError(
                        f"Unintended {direction.value} run of {length} letters at {start}"
                    )

    @staticmethod
    def _runs(grid: Grid, direction: Direction):
        dr, dc = direction.step
        for r in range(grid.height):
            for c in range(grid.width):
                if grid.letter(r, c) is None or grid.letter(r - dr, c - dc) is not None:
                    continue
                length = 0
                while grid.letter(r + dr * length, c + dc * length) is not None:
                    length += 1
                if length >= 2:
                    yield (r, c), length

    def _check_numbering(self, grid: Grid) -> None:
        ordered = sorted(grid.placements, key=lambda p: (p.row, p.col))
        by_start: Dict[Tuple[int, int], int] = {}
        previous = 0
        for placement in ordered:
            known = by_start.get(placement.start)
            if known is not None:
                if known != placement.number:
                    raise ValidationError(
                        f"Start cell {placement.start} numbered both {known} and {placement.number}"
                    )
                continue
            if placement.number != previous + 1:
                raise ValidationError(
                    f"Clue number {placement.number} at {placement.start} follows {previous}"
                )
            by_start[placement.start] = placement.number
            previous = placement.number

    def _check_clues(self, puzzle: Puzzle) -> None:
        total = len(puzzle.across_clues) + len(puzzle.down_clues)
        if total != len(puzzle.grid.placements):
            raise ValidationError(
                f"{total} clues for {len(puzzle.grid.placements)} placements"
            )
        for label, clues in (("across", puzzle.across_clues), ("down", puzzle.down_clues)):
            numbers = [clue.number for clue in clues]
            if numbers != sorted(numbers):
                raise ValidationError(f"{label} clues are not in ascending order")
