"""Working grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..core.constants import DEFAULT_MAX_GRID_SIZE, Bounds, Direction
from ..core.exceptions import EmptyGridError, SlotPlacementError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class TrimResult:
    """Cropped letters plus the offsets that rebase placement coordinates."""

    cells: List[List[Optional[str]]]
    offset_row: int
    offset_col: int
    width: int
    height: int


class WorkingGrid:
    """Square letter buffer owned by a single generation call."""

    def __init__(self, size: int = DEFAULT_MAX_GRID_SIZE) -> None:
        self.size = size
        self.bounds = Bounds(rows=size, cols=size)
        self.cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, row: int, col: int) -> Optional[str]:
        """Return the letter at ``(row, col)``; off-grid cells read as empty."""
        if not self.bounds.contains(row, col):
            return None
        return self.cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.letter(row, col) is None

    def occupied(self) -> Iterator[Tuple[int, int]]:
        for r, row in enumerate(self.cells):
            for c, letter in enumerate(row):
                if letter is not None:
                    yield r, c

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, word: str, row: int, col: int, direction: Direction) -> None:
        """Write ``word`` starting at ``(row, col)``.

        Only letter conflicts and bounds are enforced here; adjacency rules
        belong to :func:`interlock.engine.placement.is_valid_placement`.
        """
        word = word.upper()
        dr, dc = direction.step
        coords = [(row + dr * i, col + dc * i) for i in range(len(word))]
        for index, (r, c) in enumerate(coords):
            if not self.bounds.contains(r, c):
                raise SlotPlacementError(f"Word {word} extends outside grid at {(r, c)}")
            existing = self.cells[r][c]
            if existing is not None and existing != word[index]:
                raise SlotPlacementError(
                    f"Letter conflict at {(r, c)}: {existing} vs {word[index]}"
                )

        for index, (r, c) in enumerate(coords):
            self.cells[r][c] = word[index]

    # ------------------------------------------------------------------
    # Trimming
    # ------------------------------------------------------------------
    def trim(self) -> TrimResult:
        """Crop to the bounding box of all non-empty cells."""

        occupied = list(self.occupied())
        if not occupied:
            raise EmptyGridError("Cannot trim a grid without letters")

        rows = [r for r, _ in occupied]
        cols = [c for _, c in occupied]
        min_row, max_row = min(rows), max(rows)
        min_col, max_col = min(cols), max(cols)
        cells = [list(self.cells[r][min_col:max_col + 1]) for r in range(min_row, max_row + 1)]
        LOGGER.debug(
            "Trimmed %sx%s buffer to %sx%s at offset (%s,%s)",
            self.size,
            self.size,
            max_row - min_row + 1,
            max_col - min_col + 1,
            min_row,
            min_col,
        )
        return TrimResult(
            cells=cells,
            offset_row=min_row,
            offset_col=min_col,
            width=max_col - min_col + 1,
            height=max_row - min_row + 1,
        )
