"""Search settings loaded from a JSON config file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

DEFAULT_MAX_DEPTH = 4


class SearchConfig:
    """Container for minimax search settings."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.max_depth = int(payload.get("max_depth", DEFAULT_MAX_DEPTH))
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    @classmethod
    def from_json(cls, path: str | Path) -> "SearchConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload.get("search", payload))
