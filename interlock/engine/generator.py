"""Main crossword generator orchestration.

Single greedy pass:
  1. Anchor: the longest word goes across through the middle of the buffer.
  2. Growth: every other word, longest first, takes its best-scoring crossing
     with the words already placed, or is dropped.
  3. Finish: trim the buffer, rebase coordinates and renumber the clues.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_MAX_GRID_SIZE, Direction
from ..core.models import Grid, Placement, Puzzle, WordEntry
from ..utils.logger import get_logger
from .grid import WorkingGrid
from .numbering import renumber_placements
from .placement import find_best_placement
from .puzzle import create_puzzle
from .validator import GridValidator, ValidationResult


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    max_size: int = DEFAULT_MAX_GRID_SIZE
    min_words: int = 1
    validate: bool = True

    def __post_init__(self) -> None:
        if self.max_size < 1:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        if self.min_words < 1:
            raise ValueError(f"min_words must be positive, got {self.min_words}")


@dataclass
class CrosswordResult:
    puzzle: Optional[Puzzle]
    grid: Optional[Grid]
    requested: int
    validation: Optional[ValidationResult] = None

    @property
    def placed(self) -> int:
        return len(self.grid.placements) if self.grid else 0

    @property
    def dropped(self) -> int:
        return self.requested - self.placed


class CrosswordGenerator:
    """Builds interlocking grids from ranked word/clue lists."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[WordEntry]) -> Optional[Grid]:
        """Lay out ``words`` and return the trimmed grid, or None.

        None means no grid can be built at all: the word list is empty, holds
        only empty words, or its longest word does not fit. Words that find no valid crossing are
        left out of the result.
        """

        if not words:
            LOGGER.info("No words supplied; nothing to lay out")
            return None

        size = self.config.max_size
        ordered = sorted(words, key=lambda entry: len(entry.word), reverse=True)
        anchor = ordered[0]
        if not anchor.word:
            LOGGER.info("Every supplied word is empty; nothing to lay out")
            return None
        if len(anchor.word) > size:
            LOGGER.info(
                "Anchor word %s (%s letters) exceeds grid size %s",
                anchor.word,
                len(anchor.word),
                size,
            )
            return None

        grid = WorkingGrid(size)
        row = size // 2
        col = (size - len(anchor.word)) // 2
        grid.place_word(anchor.word, row, col, Direction.ACROSS)
        placements: List[Placement] = [
            Placement(anchor.word, anchor.clue, row, col, Direction.ACROSS, 1)
        ]
        LOGGER.debug("Anchored %s across at (%s,%s)", anchor.word, row, col)

        for entry in ordered[1:]:
            candidate = find_best_placement(grid, entry, placements)
            if candidate is None:
                LOGGER.debug("Dropped %s: no valid crossing", entry.word)
                continue
            grid.place_word(candidate.word, candidate.row, candidate.col, candidate.direction)
            placements.append(
                Placement(
                    word=candidate.word,
                    clue=candidate.clue,
                    row=candidate.row,
                    col=candidate.col,
                    direction=candidate.direction,
                    number=len(placements) + 1,
                )
            )
            LOGGER.debug(
                "Placed %s %s at (%s,%s) with %s crossing(s)",
                candidate.word,
                candidate.direction.value,
                candidate.row,
                candidate.col,
                candidate.intersections,
            )

        trimmed = grid.trim()
        rebased = [
            replace(p, row=p.row - trimmed.offset_row, col=p.col - trimmed.offset_col)
            for p in placements
        ]
        LOGGER.info(
            "Laid out %s/%s words on a %sx%s grid",
            len(placements),
            len(words),
            trimmed.width,
            trimmed.height,
        )
        return Grid(
            width=trimmed.width,
            height=trimmed.height,
            cells=trimmed.cells,
            placements=renumber_placements(rebased),
        )

    def build_puzzle(self, words: Sequence[WordEntry], title: str) -> CrosswordResult:
        """Generate, assemble and check a puzzle, enforcing ``min_words``.

        The result carries ``puzzle=None`` when no grid could be built or
        fewer than ``config.min_words`` words made it onto the grid.
        """

        grid = self.generate(words)
        if grid is None:
            return CrosswordResult(puzzle=None, grid=None, requested=len(words))

        puzzle = create_puzzle(grid, title)
        validation = self.validator.validate(grid, puzzle) if self.config.validate else None
        if len(grid.placements) < self.config.min_words:
            LOGGER.warning(
                "Only %s of %s words placed; %s required",
                len(grid.placements),
                len(words),
                self.config.min_words,
            )
            return CrosswordResult(
                puzzle=None, grid=grid, requested=len(words), validation=validation
            )
        return CrosswordResult(
            puzzle=puzzle, grid=grid, requested=len(words), validation=validation
        )


def generate_grid(
    words: Sequence[WordEntry], max_size: int = DEFAULT_MAX_GRID_SIZE
) -> Optional[Grid]:
    """Functional wrapper around :meth:`CrosswordGenerator.generate`.

    A non-positive ``max_size`` cannot hold any anchor, so the result is None
    rather than a configuration error.
    """

    if max_size < 1:
        LOGGER.info("Grid size %s cannot hold any word", max_size)
        return None
    return CrosswordGenerator(GeneratorConfig(max_size=max_size)).generate(words)
