"""
Candidate Service - OSPA Scorer
ospa/services/candidate_service.py

Form boundary between API/CLI callers and the scoring core:
  - builds draft candidates and applies instance / interview edits
  - checks basic nominee information before a save
  - saves locally first, then pushes to the spreadsheet; a failed push never
    rolls back the local save
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from ospa.config import settings
from ospa.core.exceptions import EntityNotFoundException, IncompleteCandidateException
from ospa.models.candidate import Candidate, Instance
from ospa.models.enumerations import Level, Rank
from ospa.repositories.base import BaseCandidateStore
from ospa.services.exporter import export_candidates_csv
from ospa.services.sync_gateway import SheetsSyncGateway

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    candidate: Candidate
    synced: bool


@dataclass
class SyncResult:
    synced: bool
    candidate_count: int
    last_sync: Optional[str]


class CandidateService:
    """Create, edit, save, sync and export OSPA candidates."""

    def __init__(
        self,
        store: BaseCandidateStore,
        gateway: SheetsSyncGateway,
        export_dir: Optional[Path] = None,
    ):
        self.store = store
        self.gateway = gateway
        self.export_dir = Path(export_dir or settings.EXPORT_DIR)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_candidates(self) -> List[Candidate]:
        return self.store.get()

    def get_candidate(self, candidate_id: str) -> Candidate:
        return self.store.get_by_id(candidate_id)

    def last_sync(self) -> Optional[str]:
        return self.store.get_last_sync()

    # ------------------------------------------------------------------
    # Save / delete
    # ------------------------------------------------------------------

    @staticmethod
    def validate_for_save(candidate: Candidate) -> None:
        missing = candidate.missing_required_fields
        if missing:
            raise IncompleteCandidateException(missing)

    async def save(self, candidate: Candidate) -> SaveResult:
        """Validate, persist locally, then attempt the spreadsheet push."""
        self.validate_for_save(candidate)
        candidate.touch()
        self.store.put(candidate)

        synced = False
        if self.gateway.enabled:
            synced = await self.gateway.send(candidate)
            if synced:
                self._mark_synced()
            else:
                logger.warning(f"Candidate {candidate.id} saved locally but not synced")
        return SaveResult(candidate=candidate, synced=synced)

    def delete(self, candidate_id: str) -> None:
        if not self.store.delete(candidate_id):
            raise EntityNotFoundException("Candidate", candidate_id)

    # ------------------------------------------------------------------
    # Edits on stored candidates
    # ------------------------------------------------------------------

    def add_instance(
        self,
        candidate_id: str,
        list_name: str,
        level: Level,
        rank: Optional[Rank] = None,
        type: Optional[str] = None,
    ) -> Tuple[Candidate, Instance]:
        candidate = self.store.get_by_id(candidate_id)
        instance = candidate.add_instance(list_name, level, rank=rank, type=type)
        self.store.put(candidate)
        return candidate, instance

    def remove_instance(self, candidate_id: str, list_name: str, instance_id: str) -> Candidate:
        candidate = self.store.get_by_id(candidate_id)
        if not candidate.remove_instance(list_name, instance_id):
            raise EntityNotFoundException("Instance", instance_id)
        self.store.put(candidate)
        return candidate

    def update_interview(self, candidate_id: str, ratings: dict) -> Candidate:
        candidate = self.store.get_by_id(candidate_id)
        for dimension, value in ratings.items():
            candidate.set_interview(dimension, value)
        self.store.put(candidate)
        return candidate

    # ------------------------------------------------------------------
    # Sync / export
    # ------------------------------------------------------------------

    async def sync_all(self) -> SyncResult:
        candidates = self.store.get()
        synced = await self.gateway.send(candidates)
        if synced:
            self._mark_synced()
        return SyncResult(
            synced=synced,
            candidate_count=len(candidates),
            last_sync=self.store.get_last_sync(),
        )

    def export_csv(self, out_dir: Optional[Path] = None) -> Optional[Path]:
        path = export_candidates_csv(self.store.get(), Path(out_dir or self.export_dir))
        if path is None:
            logger.info("No candidates to export")
        else:
            logger.info(f"Exported candidates to {path}")
        return path

    def _mark_synced(self) -> None:
        self.store.set_last_sync(datetime.now(timezone.utc).isoformat())
