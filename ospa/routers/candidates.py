"""
Candidate Router - OSPA Scorer
ospa/routers/candidates.py

Candidate registry: list, save (local store + spreadsheet push), delete,
instance and interview edits, bulk sync and CSV export.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field, field_validator

from ospa.core.dependencies import get_candidate_service
from ospa.core.exceptions import EntityNotFoundException
from ospa.models.candidate import INTERVIEW_VALUES, Candidate, Instance, normalize_list_name
from ospa.models.enumerations import Level, Rank
from ospa.services.candidate_service import CandidateService
from ospa.services.exporter import export_filename, render_csv

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/candidates", tags=["Candidates"])


#  Schemas


class CandidateListResponse(BaseModel):
    items: List[Candidate]
    total: int
    last_sync: Optional[str] = None


class SaveResponse(BaseModel):
    candidate: Candidate
    synced: bool


class SyncResponse(BaseModel):
    synced: bool
    candidate_count: int
    last_sync: Optional[str] = None


class InstanceCreate(BaseModel):
    level: Level
    rank: Optional[Rank] = None
    type: Optional[str] = Field(default=None, max_length=100)


class InstanceAddedResponse(BaseModel):
    candidate: Candidate
    instance: Instance


class InterviewUpdate(BaseModel):
    principles: Optional[float] = None
    leadership: Optional[float] = None
    experience: Optional[float] = None
    growth: Optional[float] = None
    communication: Optional[float] = None

    @field_validator("*")
    @classmethod
    def validate_rating(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value not in INTERVIEW_VALUES:
            raise ValueError("Interview rating must be 0, 0.4, 1.0 or 2.0")
        return value


def _list_name(list_name: str) -> str:
    try:
        return normalize_list_name(list_name)
    except KeyError:
        raise EntityNotFoundException("Instance list", list_name)


#  Collection endpoints


@router.get("", response_model=CandidateListResponse, summary="List scored candidates")
async def list_candidates(service: CandidateService = Depends(get_candidate_service)):
    items = service.list_candidates()
    return CandidateListResponse(items=items, total=len(items), last_sync=service.last_sync())


@router.post(
    "",
    response_model=SaveResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save a new candidate and push it to the spreadsheet",
)
async def create_candidate(
    candidate: Candidate,
    service: CandidateService = Depends(get_candidate_service),
):
    result = await service.save(candidate)
    return SaveResponse(candidate=result.candidate, synced=result.synced)


@router.post("/sync", response_model=SyncResponse, summary="Push every stored candidate")
async def sync_candidates(service: CandidateService = Depends(get_candidate_service)):
    result = await service.sync_all()
    return SyncResponse(
        synced=result.synced,
        candidate_count=result.candidate_count,
        last_sync=result.last_sync,
    )


@router.get("/export", summary="Download all candidates as CSV")
async def export_candidates(service: CandidateService = Depends(get_candidate_service)):
    candidates = service.list_candidates()
    if not candidates:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(
        content=render_csv(candidates),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


#  Single candidate endpoints


@router.get("/{candidate_id}", response_model=Candidate, summary="Get one candidate")
async def get_candidate(
    candidate_id: str,
    service: CandidateService = Depends(get_candidate_service),
):
    return service.get_candidate(candidate_id)


@router.put("/{candidate_id}", response_model=SaveResponse, summary="Save (insert or replace) a candidate")
async def save_candidate(
    candidate_id: str,
    candidate: Candidate,
    service: CandidateService = Depends(get_candidate_service),
):
    candidate.id = candidate_id
    result = await service.save(candidate)
    return SaveResponse(candidate=result.candidate, synced=result.synced)


@router.delete("/{candidate_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a candidate")
async def delete_candidate(
    candidate_id: str,
    service: CandidateService = Depends(get_candidate_service),
):
    service.delete(candidate_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{candidate_id}/instances/{list_name}",
    response_model=InstanceAddedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an achievement or service instance",
)
async def add_instance(
    candidate_id: str,
    list_name: str,
    body: InstanceCreate,
    service: CandidateService = Depends(get_candidate_service),
):
    candidate, instance = service.add_instance(
        candidate_id, _list_name(list_name), body.level, rank=body.rank, type=body.type
    )
    return InstanceAddedResponse(candidate=candidate, instance=instance)


@router.delete(
    "/{candidate_id}/instances/{list_name}/{instance_id}",
    response_model=Candidate,
    summary="Remove an instance",
)
async def remove_instance(
    candidate_id: str,
    list_name: str,
    instance_id: str,
    service: CandidateService = Depends(get_candidate_service),
):
    return service.remove_instance(candidate_id, _list_name(list_name), instance_id)


@router.put("/{candidate_id}/interview", response_model=Candidate, summary="Rate panel interview dimensions")
async def update_interview(
    candidate_id: str,
    body: InterviewUpdate,
    service: CandidateService = Depends(get_candidate_service),
):
    ratings = body.model_dump(exclude_none=True)
    return service.update_interview(candidate_id, ratings)
