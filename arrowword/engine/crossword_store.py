"""Persistent crossword document store.

Every generated grid is saved as a JSON document under
``local_db/crosswords/``. Documents carry the encoded grid, so a stored
puzzle can be reloaded and filled up later.
"""

from __future__ import annotations

import json
import uuid
from collections import Counter
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, List, Tuple

from ..core.exceptions import CrosswordError, StoreError
from ..core.models import BlockedCell, ClueStartCell, EmptyCell, LetterCell, PlacedWord
from ..utils.logger import get_logger
from .grid import CrosswordGrid

if TYPE_CHECKING:
    from .generator import CrosswordResult, GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/crosswords")


class CrosswordStore:
    """Save generation results as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def save(self, result: "CrosswordResult", config: "GeneratorConfig") -> str:
        """Persist a result and return its document ID."""

        doc_id = self._new_id()
        doc = build_document(result, config)
        doc["id"] = doc_id

        path = self._path(doc_id)
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Crossword saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> dict:
        path = self._path(doc_id)
        if not path.exists():
            raise StoreError(f"No stored crossword '{doc_id}' in {self.store_dir}")
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StoreError(f"Stored crossword '{doc_id}' is not valid JSON") from exc

    def load_grid(self, doc_id: str) -> Tuple[CrosswordGrid, List[PlacedWord]]:
        """Rebuild the grid and its placements from a stored document."""

        doc = self.load(doc_id)
        try:
            grid = CrosswordGrid.from_encoded(doc["grid"])
            placed = [PlacedWord.from_jsonable(item) for item in doc.get("placed", [])]
        except (KeyError, TypeError, ValueError, CrosswordError) as exc:
            raise StoreError(f"Stored crossword '{doc_id}' is malformed: {exc}") from exc
        return grid, placed

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _path(self, doc_id: str) -> Path:
        return self.store_dir / f"{doc_id}.json"

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"


def build_document(result: "CrosswordResult", config: "GeneratorConfig") -> dict:
    """JSON-ready payload shared by the store and the CLI output."""

    return {
        "created_at": datetime.now(timezone.utc).isoformat(),
        "status": "complete" if result.complete else "partial",
        "config": asdict(config),
        "seed": result.seed,
        "grid": result.grid.to_encoded(),
        "placed": [word.to_jsonable() for word in result.placed],
        "remaining": sorted(result.remaining),
        "validation": result.validation_messages,
        "stats": compute_stats(result.grid, result.placed),
    }


def compute_stats(grid: CrosswordGrid, placed: List[PlacedWord]) -> dict:
    lengths = [word.length for word in placed]
    directions = Counter(word.direction.value for word in placed)
    crossings = sum(
        1 for count in Counter(cell for word in placed for cell in word.cells).values()
        if count > 1
    )
    return {
        "grid": {
            "rows": grid.height,
            "cols": grid.width,
            "total_cells": grid.height * grid.width,
            "letter_cells": grid.count(LetterCell),
            "clue_cells": grid.count(ClueStartCell),
            "blocked_cells": grid.count(BlockedCell),
            "empty_cells": grid.count(EmptyCell),
        },
        "words": {
            "placed": len(placed),
            "crossings": crossings,
            "length_min": min(lengths) if lengths else 0,
            "length_max": max(lengths) if lengths else 0,
            "length_avg": round(sum(lengths) / len(lengths), 1) if lengths else 0.0,
            "length_distribution": {str(k): v for k, v in sorted(Counter(lengths).items())},
            "directions": dict(sorted(directions.items())),
        },
    }
