# src/farmhand/game/items.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

GOLD_ITEM_ID = 1
EXP_ITEM_ID = 2

_BUILTIN_NAMES: dict[int, str] = {
    GOLD_ITEM_ID: "Gold",
    EXP_ITEM_ID: "Exp",
}


def _parse_names(data: Any) -> dict[int, str]:
    # Accept {"1001": "Carrot seed"} or [{"id": 1001, "name": "Carrot seed"}].
    out: dict[int, str] = {}
    if isinstance(data, dict):
        pairs = list(data.items())
    elif isinstance(data, list):
        pairs = [(x.get("id"), x.get("name")) for x in data if isinstance(x, dict)]
    else:
        raise ValueError("Expected JSON object or list")

    for raw_id, raw_name in pairs:
        try:
            item_id = int(raw_id)
        except (TypeError, ValueError):
            continue
        if raw_name:
            out[item_id] = str(raw_name)
    return out


class ItemCatalog:
    """Item id -> display name lookup."""

    def __init__(self, names: dict[int, str] | None = None) -> None:
        self._names = dict(_BUILTIN_NAMES)
        if names:
            self._names.update(names)

    @classmethod
    def from_json(cls, path: str | Path) -> ItemCatalog:
        path = Path(path)
        names = _parse_names(json.loads(path.read_text("utf-8")))
        logger.info("Loaded %d item names from %s", len(names), path)
        return cls(names)

    def get_item_name(self, item_id: int) -> str:
        return self._names.get(item_id, f"item#{item_id}")

    def __len__(self) -> int:
        return len(self._names)
