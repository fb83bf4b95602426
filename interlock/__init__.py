"""Interlocking crossword generator for weekly newsletter puzzles.

This package exposes the public API surface via:

- ``interlock.engine.generator.generate_grid``: greedy interlocking layout of
  a ranked word/clue list on a bounded grid.
- ``interlock.engine.puzzle.create_puzzle``: numbered across/down clue lists.
- ``interlock.engine.edition_store.EditionStore``: persistence of published
  puzzles so last week's solution can be printed.
"""

from .core.constants import Direction
from .core.models import ClueEntry, Grid, Placement, Puzzle, WordEntry
from .engine.generator import CrosswordGenerator, GeneratorConfig, generate_grid
from .engine.puzzle import create_puzzle

__all__ = [
    "ClueEntry",
    "CrosswordGenerator",
    "Direction",
    "GeneratorConfig",
    "Grid",
    "Placement",
    "Puzzle",
    "WordEntry",
    "create_puzzle",
    "generate_grid",
]

__version__ = "0.1.0"
