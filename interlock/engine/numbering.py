"""Clue numbering in reading order."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List, Sequence, Tuple

from ..core.models import Placement


def renumber_placements(placements: Sequence[Placement]) -> List[Placement]:
    """Assign standard crossword numbers by start cell, top-to-bottom then left-to-right.

    An across and a down word starting on the same cell share one number.
    The returned list is in reading order.
    """

    ordered = sorted(placements, key=lambda p: (p.row, p.col))
    numbers: Dict[Tuple[int, int], int] = {}
    renumbered: List[Placement] = []
    for placement in ordered:
        if placement.start not in numbers:
            numbers[placement.start] = len(numbers) + 1
        renumbered.append(replace(placement, number=numbers[placement.start]))
    return renumbered
