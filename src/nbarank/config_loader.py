"""Persist and load CLI column-mapping profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass
class ColumnProfile:
    season_mapping: Dict[str, str]

    @classmethod
    def load(cls, path: Path) -> "ColumnProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(season_mapping=data.get("season_mapping", {}))

    def save(self, path: Path) -> None:
        payload = {"season_mapping": self.season_mapping}
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
