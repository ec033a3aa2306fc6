#!/usr/bin/env python3
"""
Match endpoints - rank active jobs for a candidate.
"""

import logging
from fastapi import APIRouter, Depends

from core.matcher import JobFilters
from database.uow import MatchUnitOfWork
from ..dependencies import get_uow, get_job_match_service
from ..models.requests import ComputeMatchesRequest
from ..models.responses import ComputeMatchesResponse, JobMatchItem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.post("/compute", response_model=ComputeMatchesResponse)
def compute_matches(
    request: ComputeMatchesRequest,
    uow: MatchUnitOfWork = Depends(get_uow)
):
    """
    Score a candidate against every active job and return the best matches.

    Results are sorted by match score (highest first, ties by job id) and
    written to the match cache. Cache write failures never change the
    response.
    """
    filters = JobFilters.from_dict(request.filters.model_dump()) if request.filters else None

    service = get_job_match_service(uow)
    result = service.compute_matches(
        candidate_id=request.candidate_id,
        job_id=request.job_id,
        limit=request.limit,
        filters=filters
    )

    return ComputeMatchesResponse(
        candidate_id=result.candidate_id,
        candidate_name=result.candidate_name,
        total_jobs_analyzed=result.total_jobs_analyzed,
        count=len(result.matches),
        failed=result.failed,
        matches=[JobMatchItem(**m.to_dict()) for m in result.matches]
    )
