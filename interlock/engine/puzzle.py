"""Assembly of numbered across/down clue lists."""

from __future__ import annotations

from typing import List

from ..core.constants import Direction
from ..core.models import ClueEntry, Grid, Puzzle


def _clues_for(grid: Grid, direction: Direction) -> List[ClueEntry]:
    placements = sorted(
        (p for p in grid.placements if p.direction == direction),
        key=lambda p: p.number,
    )
    return [ClueEntry(number=p.number, clue=p.clue) for p in placements]


def create_puzzle(grid: Grid, title: str) -> Puzzle:
    """Convert a grid into a puzzle with organised clue lists."""

    return Puzzle(
        grid=grid,
        across_clues=_clues_for(grid, Direction.ACROSS),
        down_clues=_clues_for(grid, Direction.DOWN),
        title=title,
    )
