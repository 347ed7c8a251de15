"""
Services module for the OSPA Scorer.
"""

from ospa.services.candidate_service import CandidateService, SaveResult, SyncResult
from ospa.services.exporter import CSV_HEADERS, export_candidates_csv, render_csv
from ospa.services.sync_gateway import SheetsSyncGateway

__all__ = [
    "CandidateService",
    "SaveResult",
    "SyncResult",
    "CSV_HEADERS",
    "export_candidates_csv",
    "render_csv",
    "SheetsSyncGateway",
]
