from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from glutools.services.repositories import ToolRepository

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
CATALOG_PATH = DATA_DIR / "catalog.json"


@lru_cache
def _read_catalog() -> tuple:
    with open(CATALOG_PATH, "r", encoding="utf-8") as f:
        return tuple(json.load(f))


def load_catalog() -> List[Dict[str, Any]]:
    """Catalog tools with the tool defaults filled in (some entries have no link_url)."""
    tools = []
    for entry in _read_catalog():
        tool = {**ToolRepository.defaults, **entry}
        tool["advantages"] = list(tool["advantages"])
        tool["disadvantages"] = list(tool["disadvantages"])
        tools.append(tool)
    return tools


def import_catalog(tools: ToolRepository) -> Dict[str, Any]:
    added, total = tools.append_missing(load_catalog())

    if added == 0:
        return {
            "success": True,
            "message": "All tools already exist in database",
            "added": 0,
            "total": total,
        }

    logger.info("Bulk import added %d tools (total %d)", added, total)
    return {
        "success": True,
        "message": f"Successfully added {added} new AI tools",
        "added": added,
        "total": total,
    }
