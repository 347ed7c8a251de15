"""
Base Candidate Store - OSPA Scorer
ospa/repositories/base.py

Key-value record store shared logic. Candidates live as one JSON array under
a single fixed key; the time of the last successful sync lives under its own
key. Backends only implement raw key reads and writes.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from pydantic import ValidationError

from ospa.config import settings
from ospa.core.exceptions import EntityNotFoundException, StoreConnectionException
from ospa.models.candidate import Candidate

logger = logging.getLogger(__name__)


class BaseCandidateStore(ABC):
    """Candidate record store keyed by candidate id (last write wins)."""

    def __init__(
        self,
        key: Optional[str] = None,
        last_sync_key: Optional[str] = None,
    ):
        self.key = key or settings.STORE_KEY
        self.last_sync_key = last_sync_key or settings.LAST_SYNC_KEY

    # ------------------------------------------------------------------
    # Backend primitives
    # ------------------------------------------------------------------

    @abstractmethod
    def _read(self, key: str) -> Any:
        """Return the decoded JSON value stored under key, or None."""

    @abstractmethod
    def _write(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under key."""

    # ------------------------------------------------------------------
    # Candidate records
    # ------------------------------------------------------------------

    def get(self) -> List[Candidate]:
        """All stored candidates in insertion order, totals recomputed."""
        raw = self._read(self.key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StoreConnectionException(
                f"Stored value under '{self.key}' is not a JSON array"
            )
        try:
            return [Candidate.model_validate(item) for item in raw]
        except ValidationError as e:
            raise StoreConnectionException(f"Stored candidate record is invalid: {e}")

    def get_by_id(self, candidate_id: str) -> Candidate:
        for candidate in self.get():
            if candidate.id == candidate_id:
                return candidate
        raise EntityNotFoundException("Candidate", candidate_id)

    def put(self, candidate: Candidate) -> Candidate:
        """Insert, or replace the record with the same id in place."""
        candidates = self.get()
        for index, existing in enumerate(candidates):
            if existing.id == candidate.id:
                candidates[index] = candidate
                break
        else:
            candidates.append(candidate)
        self._write_candidates(candidates)
        logger.info(f"Saved candidate {candidate.id} ({len(candidates)} stored)")
        return candidate

    def delete(self, candidate_id: str) -> bool:
        """Remove a candidate; returns False when no record had that id."""
        candidates = self.get()
        kept = [c for c in candidates if c.id != candidate_id]
        if len(kept) == len(candidates):
            return False
        self._write_candidates(kept)
        logger.info(f"Deleted candidate {candidate_id}")
        return True

    def _write_candidates(self, candidates: List[Candidate]) -> None:
        self._write(self.key, [c.to_storage() for c in candidates])

    # ------------------------------------------------------------------
    # Sync bookkeeping
    # ------------------------------------------------------------------

    def get_last_sync(self) -> Optional[str]:
        value = self._read(self.last_sync_key)
        return value if isinstance(value, str) else None

    def set_last_sync(self, timestamp: str) -> None:
        self._write(self.last_sync_key, timestamp)

    def ping(self) -> bool:
        """True when the backend can be read."""
        try:
            self._read(self.key)
            return True
        except StoreConnectionException:
            return False
