#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator, Optional

from fastapi import Header

from core.matcher import CandidateRankingService, JobMatchService
from database.database import get_session_factory
from database.uow import MatchUnitOfWork, match_uow
from .config import get_config


def get_uow() -> Generator[MatchUnitOfWork, None, None]:
    """
    FastAPI dependency that yields a unit of work for one request.

    The engine is created on first use, so importing the app does not
    require a reachable database.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(uow: MatchUnitOfWork = Depends(get_uow)):
            ...
    """
    session_factory = get_session_factory(get_config().database.url)
    with match_uow(session_factory) as uow:
        yield uow


def get_job_match_service(uow: MatchUnitOfWork) -> JobMatchService:
    return JobMatchService(uow, config=get_config().matching)


def get_ranking_service(uow: MatchUnitOfWork) -> CandidateRankingService:
    return CandidateRankingService(uow, job_matches=get_job_match_service(uow))


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> Optional[str]:
    """Identity of the requesting employer, as established by the auth layer in front of the API."""
    return x_user_id
