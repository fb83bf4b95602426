"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

if TYPE_CHECKING:
    from ..core.models import ClueEntry, Grid, Puzzle
    from ..engine.edition_store import PersistedEdition


BLOCK = "#"
OPEN = "."


def _number_map(grid: Grid) -> Dict[Tuple[int, int], int]:
    numbers: Dict[Tuple[int, int], int] = {}
    for placement in grid.placements:
        numbers.setdefault(placement.start, placement.number)
    return numbers


def _render_rows(cells: List[List[Optional[str]]], symbol) -> str:
    width = len(cells[0]) if cells else 0
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(cells):
        row_render = " ".join(f"{symbol(r, c, letter):>2}" for c, letter in enumerate(row))
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_grid(grid: Grid, *, reveal: bool = False) -> str:
    """Render the grid; start cells show their clue number unless ``reveal``."""

    numbers = _number_map(grid)

    def symbol(r: int, c: int, letter: Optional[str]) -> str:
        if letter is None:
            return BLOCK
        if reveal:
            return letter
        return str(numbers[(r, c)]) if (r, c) in numbers else OPEN

    return _render_rows(grid.cells, symbol)


def _format_clue_list(label: str, clues: List[ClueEntry]) -> List[str]:
    lines = [label]
    lines.extend(f"  {clue.number:>2}. {clue.clue}" for clue in clues)
    return lines


def format_clues(puzzle: Puzzle) -> str:
    lines = _format_clue_list("Across", puzzle.across_clues)
    lines.append("")
    lines.extend(_format_clue_list("Down", puzzle.down_clues))
    return "\n".join(lines)


def format_solution(edition: PersistedEdition) -> str:
    """Render a stored edition's filled-in solution grid."""

    if edition.crossword is None:
        return f"Edition #{edition.edition_number} had no crossword"
    crossword = edition.crossword
    body = _render_rows(
        crossword.solution_cells(),
        lambda r, c, letter: BLOCK if letter is None else letter,
    )
    return f"Solution to edition #{edition.edition_number}: {crossword.title}\n{body}"


def pretty_print_puzzle(puzzle: Puzzle, *, reveal: bool = False, stream=None) -> None:
    """Print title, grid and clue lists in a human-friendly format."""

    stream = stream or sys.stdout
    print(puzzle.title, file=stream)
    print(file=stream)
    print(format_grid(puzzle.grid, reveal=reveal), file=stream)
    print(file=stream)
    print(format_clues(puzzle), file=stream)


def print_grid_stats(grid: Grid, requested: int, *, stream=None) -> None:
    """Print size, density and placement counts for a generated grid."""

    stream = stream or sys.stdout
    total_cells = grid.width * grid.height
    letter_cells = sum(1 for row in grid.cells for letter in row if letter is not None)
    crossings = sum(len(p.word) for p in grid.placements) - letter_cells
    across = sum(1 for p in grid.placements if p.direction.value == "across")

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Crossings:     {crossings}", file=stream)
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(grid.placements)}/{requested}", file=stream)
    print(f"  Across/Down:   {across}/{len(grid.placements) - across}", file=stream)
