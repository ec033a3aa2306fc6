#!/usr/bin/env python3
"""
Candidate endpoints - read cached matches.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from database.uow import MatchUnitOfWork
from ..dependencies import get_uow, get_job_match_service
from ..models.responses import CachedMatchesResponse, JobMatchItem

router = APIRouter(prefix="/api/candidates", tags=["candidates"])


@router.get("/{candidate_id}/matches", response_model=CachedMatchesResponse)
def get_cached_matches(
    candidate_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    uow: MatchUnitOfWork = Depends(get_uow)
):
    """
    Get the last computed matches for a candidate, best first.

    Cached scores may be stale; POST /api/matches/compute for fresh ones.
    """
    service = get_job_match_service(uow)
    matches = service.get_cached_matches(candidate_id, limit=limit)

    return CachedMatchesResponse(
        candidate_id=candidate_id,
        count=len(matches),
        matches=[JobMatchItem(**m.to_dict()) for m in matches]
    )
