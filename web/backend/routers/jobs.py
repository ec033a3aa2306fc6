#!/usr/bin/env python3
"""
Job endpoints - rank candidates for a job.
"""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Query

from database.uow import MatchUnitOfWork
from ..dependencies import get_uow, get_ranking_service, get_current_user_id
from ..models.requests import RankCandidatesRequest
from ..models.responses import (
    RankCandidatesResponse,
    CandidateMatchItem,
    SkillMatchesResponse,
    SkillMatchItem
)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.post("/{job_id}/top-candidates", response_model=RankCandidatesResponse)
def get_top_candidates(
    job_id: str,
    request: Optional[RankCandidatesRequest] = None,
    user_id: Optional[str] = Depends(get_current_user_id),
    uow: MatchUnitOfWork = Depends(get_uow)
):
    """
    Rank every candidate against one of the requesting employer's jobs.

    Only candidates at or above min_score are returned, sorted by match
    score (highest first, ties by candidate id).
    """
    request = request or RankCandidatesRequest()
    service = get_ranking_service(uow)
    result = service.rank_candidates(
        job_id=job_id,
        employer_id=user_id,
        limit=request.limit,
        min_score=request.min_score
    )

    return RankCandidatesResponse(
        job_id=result.job_id,
        job_title=result.job_title,
        min_score_threshold=result.min_score_threshold,
        total_analyzed=result.total_analyzed,
        total_qualified=result.total_qualified,
        failed=result.failed,
        count=len(result.candidates),
        candidates=[CandidateMatchItem(**c.to_dict()) for c in result.candidates]
    )


@router.get("/{job_id}/skill-matches", response_model=SkillMatchesResponse)
def get_skill_matches(
    job_id: str,
    limit: int = Query(default=10, ge=1, le=500, description="Maximum results to return"),
    uow: MatchUnitOfWork = Depends(get_uow)
):
    """
    Rank candidates by plain overlap with the job's skill list.

    Cheaper than top-candidates; nothing is cached.
    """
    service = get_ranking_service(uow)
    matches = service.quick_match_candidates(job_id, limit=limit)

    return SkillMatchesResponse(
        job_id=job_id,
        count=len(matches),
        candidates=[SkillMatchItem(**asdict(m)) for m in matches]
    )
