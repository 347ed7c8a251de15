"""
JSON File Candidate Store - OSPA Scorer
ospa/repositories/json_store.py

Local store: one JSON document mapping each key to its value, e.g.

    {
        "ospa_candidates": [ {...candidate...}, ... ],
        "ospa_last_sync": "2026-10-19T08:15:00+00:00"
    }
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ospa.config import settings
from ospa.core.exceptions import StoreConnectionException
from ospa.repositories.base import BaseCandidateStore


class JsonFileCandidateStore(BaseCandidateStore):
    """Candidate store backed by a single JSON file."""

    def __init__(self, path: Union[str, Path, None] = None, **kwargs):
        super().__init__(**kwargs)
        self.path = Path(path or settings.STORE_PATH)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise StoreConnectionException(f"Failed to read store file {self.path}: {e}")
        if not isinstance(data, dict):
            raise StoreConnectionException(f"Store file {self.path} is not a JSON object")
        return data

    def _read(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def _write(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreConnectionException(f"Failed to write store file {self.path}: {e}")
