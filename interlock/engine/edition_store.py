"""Persistent edition store.

Keeps a small JSON document (by default ``local_db/edition_store.json``)
holding the running edition counter, the last published edition and the
full edition history. Each edition carries a lossless copy of its puzzle
placements so the previous solution can be shown next to a new puzzle.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.exceptions import EditionStoreError
from ..core.models import Placement, Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_STORE_PATH = Path("local_db/edition_store.json")


@dataclass
class PersistedCrossword:
    """Everything needed to redraw a published puzzle with its solution."""

    title: str
    words: List[Placement]
    grid_width: int
    grid_height: int

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "PersistedCrossword":
        return cls(
            title=puzzle.title,
            words=list(puzzle.grid.placements),
            grid_width=puzzle.grid.width,
            grid_height=puzzle.grid.height,
        )

    def solution_cells(self) -> List[List[Optional[str]]]:
        """Rebuild the filled-in grid from the stored placements."""
        cells: List[List[Optional[str]]] = [
            [None] * self.grid_width for _ in range(self.grid_height)
        ]
        for placement in self.words:
            for index, (row, col) in enumerate(placement.cells):
                cells[row][col] = placement.word[index].upper()
        return cells

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "words": [placement.to_dict() for placement in self.words],
            "grid_width": self.grid_width,
            "grid_height": self.grid_height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersistedCrossword":
        try:
            return cls(
                title=data["title"],
                words=[Placement.from_dict(word) for word in data["words"]],
                grid_width=int(data["grid_width"]),
                grid_height=int(data["grid_height"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise EditionStoreError(f"Malformed persisted crossword: {exc}") from exc


@dataclass
class PersistedEdition:
    edition_number: int
    edition_date: str
    crossword: Optional[PersistedCrossword] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edition_number": self.edition_number,
            "edition_date": self.edition_date,
            "crossword": self.crossword.to_dict() if self.crossword else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersistedEdition":
        try:
            crossword = data.get("crossword")
            return cls(
                edition_number=int(data["edition_number"]),
                edition_date=str(data["edition_date"]),
                crossword=PersistedCrossword.from_dict(crossword) if crossword else None,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise EditionStoreError(f"Malformed persisted edition: {exc}") from exc


@dataclass
class _StoreData:
    current_edition_number: int = 1
    last_edition: Optional[PersistedEdition] = None
    editions: List[PersistedEdition] = field(default_factory=list)


class EditionStore:
    """Save published editions and hand out edition numbers."""

    def __init__(self, store_path: Path | str = DEFAULT_STORE_PATH) -> None:
        self.store_path = Path(store_path)
        self._data = self._load()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def next_edition_number(self) -> int:
        """Return the next edition number and advance the counter."""
        number = self._data.current_edition_number
        self._data.current_edition_number += 1
        self._save()
        return number

    def current_edition_number(self) -> int:
        return self._data.current_edition_number

    def last_edition(self) -> Optional[PersistedEdition]:
        return self._data.last_edition

    def save_edition(self, edition: PersistedEdition) -> None:
        self._data.last_edition = edition
        self._data.editions.append(edition)
        self._save()
        LOGGER.info(
            "Saved edition #%s to store (%s total)",
            edition.edition_number,
            len(self._data.editions),
        )

    def all_editions(self) -> List[PersistedEdition]:
        return list(self._data.editions)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _load(self) -> _StoreData:
        if not self.store_path.exists():
            return _StoreData()
        try:
            doc = json.loads(self.store_path.read_text(encoding="utf-8"))
            last = doc.get("last_edition")
            return _StoreData(
                current_edition_number=int(doc.get("current_edition_number", 1)),
                last_edition=PersistedEdition.from_dict(last) if last else None,
                editions=[PersistedEdition.from_dict(e) for e in doc.get("editions", [])],
            )
        except (json.JSONDecodeError, OSError, AttributeError, TypeError, ValueError,
                EditionStoreError) as exc:
            LOGGER.warning("Could not read edition store %s: %s", self.store_path, exc)
            return _StoreData()

    def _save(self) -> None:
        self.store_path.parent.mkdir(parents=True, exist_ok=True)
        doc = {
            "current_edition_number": self._data.current_edition_number,
            "last_edition": self._data.last_edition.to_dict() if self._data.last_edition else None,
            "editions": [edition.to_dict() for edition in self._data.editions],
        }
        self.store_path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
