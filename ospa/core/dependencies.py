"""
Dependencies - OSPA Scorer
ospa/core/dependencies.py

FastAPI dependency injection for the record store, sync gateway and service.
"""

from functools import lru_cache

from ospa.config import settings
from ospa.repositories.base import BaseCandidateStore
from ospa.repositories.json_store import JsonFileCandidateStore
from ospa.repositories.redis_store import RedisCandidateStore
from ospa.services.candidate_service import CandidateService
from ospa.services.sync_gateway import SheetsSyncGateway


@lru_cache()
def get_candidate_store() -> BaseCandidateStore:
    """Get cached store for the configured backend."""
    if settings.STORE_BACKEND == "redis":
        return RedisCandidateStore()
    return JsonFileCandidateStore()


@lru_cache()
def get_sync_gateway() -> SheetsSyncGateway:
    """Get cached SheetsSyncGateway built from settings."""
    token = settings.SYNC_TOKEN.get_secret_value() if settings.SYNC_TOKEN else None
    return SheetsSyncGateway(
        url=settings.SYNC_URL,
        token=token,
        timeout=settings.SYNC_TIMEOUT_SECONDS,
    )


def get_candidate_service() -> CandidateService:
    return CandidateService(
        store=get_candidate_store(),
        gateway=get_sync_gateway(),
    )
