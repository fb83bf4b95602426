"""Shared constants and enumerations for the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


DEFAULT_MAX_GRID_SIZE = 15
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 10


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS

    @property
    def step(self) -> Tuple[int, int]:
        """Row/col delta between two consecutive letters of a word."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular_steps(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Neighbour offsets that would form a parallel run next to a word."""
        if self is Direction.ACROSS:
            return ((-1, 0), (1, 0))
        return ((0, -1), (0, 1))


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
