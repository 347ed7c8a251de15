"""
routers/scoring.py - Rubric & Scoring Endpoints

Endpoints:
  GET  /api/v1/reference         - Form choices (levels, ranks, roles, divisions, interview)
  GET  /api/v1/rubric            - Annex J-1 point tables
  POST /api/v1/scoring/instance  - Points for one instance
  POST /api/v1/scoring/total     - Total and subtotals for an unsaved candidate
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Dict, List, Optional, Any

import structlog

from ospa.config import INTERVIEW_DIMENSIONS, NCR_DIVISIONS
from ospa.models.candidate import Candidate
from ospa.models.enumerations import (
    Category,
    ExtensionRole,
    InterviewRating,
    LeadershipRole,
    Level,
    ProficiencyLevel,
    Rank,
)
from ospa.models.sync import SyncRecord
from ospa.scoring import rubric_table
from ospa.scoring.aggregator import LIST_CATEGORIES
from ospa.scoring.instance_scorer import score

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Scoring"])


# =====================================================================
# Response Models
# =====================================================================

class ReferenceResponse(BaseModel):
    levels: List[str]
    ranks: List[str]
    proficiency_levels: List[str]
    leadership_roles: List[str]
    extension_roles: List[str]
    divisions: List[str]
    interview_dimensions: Dict[str, str]
    interview_ratings: Dict[str, float]
    instance_lists: Dict[str, str]


class InstanceScoreRequest(BaseModel):
    category: Category
    level: Level
    rank: Optional[Rank] = None
    type: Optional[str] = Field(default=None, max_length=100)


class InstanceScoreResponse(BaseModel):
    category: Category
    level: Level
    rank: Optional[Rank] = None
    type: Optional[str] = None
    points: int


class TotalScoreResponse(BaseModel):
    total_score: float
    subtotals: Dict[str, Any]


# =====================================================================
# Endpoints
# =====================================================================

@router.get("/reference", response_model=ReferenceResponse, summary="Nomination form choices")
async def get_reference():
    return ReferenceResponse(
        levels=[l.value for l in Level],
        ranks=[r.value for r in Rank],
        proficiency_levels=[p.value for p in ProficiencyLevel],
        leadership_roles=[r.value for r in LeadershipRole],
        extension_roles=[r.value for r in ExtensionRole],
        divisions=NCR_DIVISIONS,
        interview_dimensions=INTERVIEW_DIMENSIONS,
        interview_ratings={
            r.name.title(): r.value for r in InterviewRating if r is not InterviewRating.UNRATED
        },
        instance_lists={name: cat.value for name, cat in LIST_CATEGORIES.items()},
    )


@router.get("/rubric", summary="OSPA point tables")
async def get_rubric() -> Dict[str, Any]:
    return rubric_table.as_dict()


@router.post("/scoring/instance", response_model=InstanceScoreResponse, summary="Score one instance")
async def score_instance(body: InstanceScoreRequest):
    points = score(body.category, body.level, body.rank, body.type)
    logger.info(
        "instance_scored",
        category=body.category.value,
        level=body.level.value,
        rank=body.rank.value if body.rank else None,
        role=body.type,
        points=points,
    )
    return InstanceScoreResponse(**body.model_dump(), points=points)


@router.post("/scoring/total", response_model=TotalScoreResponse, summary="Score an unsaved candidate")
async def score_total(candidate: Candidate):
    record = SyncRecord.from_candidate(candidate)
    return TotalScoreResponse(total_score=candidate.total_score, subtotals=record.to_payload())
