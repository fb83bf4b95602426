"""Data models supporting the crossword generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .constants import Direction


@dataclass(frozen=True)
class WordEntry:
    """A candidate word with its clue, as supplied by a word source."""

    word: str
    clue: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "word", self.word.upper())


@dataclass(frozen=True)
class Placement:
    """A word committed to the grid at a start cell and direction."""

    word: str
    clue: str
    row: int
    col: int
    direction: Direction
    number: int

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dr, dc = self.direction.step
        return [(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]

    @property
    def start(self) -> Tuple[int, int]:
        return self.row, self.col

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "clue": self.clue,
            "row": self.row,
            "col": self.col,
            "direction": self.direction.value,
            "number": self.number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Placement":
        return cls(
            word=data["word"],
            clue=data["clue"],
            row=int(data["row"]),
            col=int(data["col"]),
            direction=Direction(data["direction"]),
            number=int(data["number"]),
        )


@dataclass
class Grid:
    """Trimmed crossword layout: letters plus the placements that produced them."""

    width: int
    height: int
    cells: List[List[Optional[str]]]
    placements: List[Placement] = field(default_factory=list)

    def letter(self, row: int, col: int) -> Optional[str]:
        if 0 <= row < self.height and 0 <= col < self.width:
            return self.cells[row][col]
        return None

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "cells": [list(row) for row in self.cells],
            "placements": [placement.to_dict() for placement in self.placements],
        }


@dataclass(frozen=True)
class ClueEntry:
    number: int
    clue: str


@dataclass
class Puzzle:
    """A grid together with its numbered across and down clue lists."""

    grid: Grid
    across_clues: List[ClueEntry]
    down_clues: List[ClueEntry]
    title: str

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "grid": self.grid.to_jsonable(),
            "across_clues": [{"number": c.number, "clue": c.clue} for c in self.across_clues],
            "down_clues": [{"number": c.number, "clue": c.clue} for c in self.down_clues],
        }
