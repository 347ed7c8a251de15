"""
Health Check Router - OSPA Scorer
ospa/routers/health.py

Reports record store reachability and whether spreadsheet sync is configured.
"""
from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ospa.config import settings
from ospa.core.dependencies import get_candidate_service
from ospa.services.candidate_service import CandidateService

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]
    last_sync: Optional[str] = None


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check(service: CandidateService = Depends(get_candidate_service)):
    store_ok = service.store.ping()
    dependencies = {
        "store": f"{settings.STORE_BACKEND}: {'healthy' if store_ok else 'unhealthy'}",
        "sync": "configured" if service.gateway.enabled else "disabled",
    }
    body = HealthResponse(
        status="healthy" if store_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
        last_sync=service.last_sync() if store_ok else None,
    )
    code = status.HTTP_200_OK if store_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=code, content=body.model_dump(mode="json"))
