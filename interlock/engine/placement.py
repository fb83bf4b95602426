"""Placement validity rules and the greedy candidate search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.constants import Direction
from ..core.models import Placement, WordEntry
from .grid import WorkingGrid


@dataclass(frozen=True)
class Candidate:
    """A valid position for a word, scored by the letters it shares."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction
    intersections: int


def is_valid_placement(
    grid: WorkingGrid, word: str, row: int, col: int, direction: Direction
) -> bool:
    """Return True when ``word`` may legally occupy the given position.

    A word must fit inside the grid, agree with every letter it overlaps,
    leave the perpendicular neighbours of each newly filled cell empty and
    must not touch another letter directly before its first or after its
    last cell. Together these keep every maximal run of letters equal to
    exactly one placed word.
    """

    word = word.upper()
    if row < 0 or col < 0 or not grid.bounds.contains(row, col):
        return False
    dr, dc = direction.step
    length = len(word)
    if direction is Direction.ACROSS and col + length > grid.size:
        return False
    if direction is Direction.DOWN and row + length > grid.size:
        return False

    for index, letter in enumerate(word):
        r, c = row + dr * index, col + dc * index
        existing = grid.letter(r, c)
        if existing is not None:
            if existing != letter:
                return False
            continue
        for pr, pc in direction.perpendicular_steps:
            if not grid.is_empty(r + pr, c + pc):
                return False

    if not grid.is_empty(row - dr, col - dc):
        return False
    if not grid.is_empty(row + dr * length, col + dc * length):
        return False
    return True


def count_intersections(
    grid: WorkingGrid, word: str, row: int, col: int, direction: Direction
) -> int:
    """Number of cells along the word that already hold its letter."""

    word = word.upper()
    dr, dc = direction.step
    return sum(
        1
        for index, letter in enumerate(word)
        if grid.letter(row + dr * index, col + dc * index) == letter
    )


def find_best_placement(
    grid: WorkingGrid, entry: WordEntry, existing: Sequence[Placement]
) -> Optional[Candidate]:
    """Return the highest scoring crossing for ``entry``, or None.

    Candidates are discovered placement by placement, then by letter index
    of the new word and letter index of the placed word; the first candidate
    reaching the best score is kept.
    """

    word = entry.word.upper()
    best: Optional[Candidate] = None
    for placement in existing:
        placed_word = placement.word.upper()
        direction = placement.direction.opposite
        for i, letter in enumerate(word):
            for j, placed_letter in enumerate(placed_word):
                if letter != placed_letter:
                    continue
                if placement.direction is Direction.ACROSS:
                    row, col = placement.row - i, placement.col + j
                else:
                    row, col = placement.row + j, placement.col - i
                if not is_valid_placement(grid, word, row, col, direction):
                    continue
                score = count_intersections(grid, word, row, col, direction)
                if best is None or score > best.intersections:
                    best = Candidate(
                        word=word,
                        clue=entry.clue,
                        row=row,
                        col=col,
                        direction=direction,
                        intersections=score,
                    )
    return best
