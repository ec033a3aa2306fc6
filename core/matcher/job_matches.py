#!/usr/bin/env python3
"""
Job Match Service - Rank jobs for one candidate.

Loads the candidate (with hard and soft skills) once and the filtered set of
active jobs, scores every job, sorts by match score and truncates. Each
returned match is then written to the match cache; cache writes are
best-effort and never affect the returned list.

Ordering: match_score descending, ties broken by job_id ascending.
"""

from functools import partial
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

from core.config_loader import MatchingConfig
from core.exceptions import CandidateNotFoundException, InvalidRequestException
from core.matcher.dto import (
    ComputeMatchesResult, JobFilters, candidate_from_orm, job_from_orm, match_from_orm
)
from core.matcher.pool import run_bounded, run_sequential
from core.scorer import CandidateProfile, JobPosting, MatchScore, ScoringService

logger = logging.getLogger(__name__)


def sort_job_matches(matches: Sequence[MatchScore]) -> List[MatchScore]:
    """Best match first; equal scores ordered by job id."""
    return sorted(matches, key=lambda m: (-m.match_score, m.job_id))


def to_cache_row(match: MatchScore) -> Dict[str, Any]:
    """Persisted projection of a MatchScore."""
    return {
        'match_score': match.match_score,
        'hard_skills_score': match.hard_skills_score,
        'soft_skills_score': match.soft_skills_score,
        'experience_score': match.experience_score,
        'communication_score': match.communication_score,
        'role_alignment_score': match.role_alignment_score,
        'score_breakdown': match.score_breakdown.to_dict(),
    }


class JobMatchService:
    """
    Service for matching one candidate against many jobs.

    Works inside a caller-provided MatchUnitOfWork; the caller owns the
    transaction (commit/rollback).
    """

    def __init__(
        self,
        uow,
        scorer: Optional[ScoringService] = None,
        config: Optional[MatchingConfig] = None
    ):
        self.uow = uow
        self.config = config or MatchingConfig()
        self.scorer = scorer or ScoringService(self.config.scorer)

    def load_candidate(self, candidate_id: str) -> CandidateProfile:
        """Load a candidate snapshot.

        Raises:
            CandidateNotFoundException: If the profile does not exist.
        """
        profile = self.uow.profiles.get_profile(candidate_id)
        if profile is None:
            raise CandidateNotFoundException(f"Candidate {candidate_id} not found")

        return candidate_from_orm(
            profile,
            self.uow.profiles.get_hard_skills(candidate_id),
            self.uow.profiles.get_soft_skills(candidate_id)
        )

    def load_jobs(
        self,
        job_id: Optional[str] = None,
        filters: Optional[JobFilters] = None
    ) -> List[JobPosting]:
        filters = filters or JobFilters()
        rows = self.uow.jobs.get_active_jobs(
            job_id=job_id,
            experience_level=filters.experience_level,
            location=filters.location,
            job_category=filters.job_category
        )
        return [job_from_orm(row) for row in rows]

    def match_candidate(
        self,
        candidate: CandidateProfile,
        jobs: Sequence[JobPosting],
        limit: int,
        parallel: bool = False
    ) -> Tuple[List[MatchScore], int]:
        """Score a candidate against jobs, sort and truncate. No I/O.

        Args:
            candidate: Candidate snapshot
            jobs: Job snapshots to score against
            limit: Maximum matches to return
            parallel: Fan the per-job passes out to the worker pool

        Returns:
            (top matches, number of jobs that failed or timed out)
        """
        score = partial(self.scorer.score_match, candidate)
        describe = lambda job: f"candidate {candidate.candidate_id} / job {job.job_id}"

        if parallel and len(jobs) > 1:
            outcome = run_bounded(
                score,
                jobs,
                max_workers=self.config.max_workers,
                timeout=self.config.timeout_seconds,
                describe=describe
            )
        else:
            outcome = run_sequential(score, jobs, describe=describe)

        matches = sort_job_matches([match for _, match in outcome.completed])
        return matches[:limit], outcome.failed + outcome.timed_out

    def persist_matches(self, candidate_id: str, matches: Sequence[MatchScore]) -> int:
        """Upsert one cache row per match. Returns the number of failed writes."""
        failures = 0
        for match in matches:
            try:
                with self.uow.matches.savepoint():
                    self.uow.matches.upsert_match(candidate_id, match.job_id, to_cache_row(match))
            except Exception as e:
                failures += 1
                logger.warning(
                    f"Failed to cache match for candidate {candidate_id} / job {match.job_id}: {e}"
                )
        return failures

    def compute_matches(
        self,
        candidate_id: str,
        job_id: Optional[str] = None,
        limit: Optional[int] = None,
        filters: Optional[JobFilters] = None
    ) -> ComputeMatchesResult:
        """
        Rank active jobs for a candidate and cache the results.

        Args:
            candidate_id: Candidate to match
            job_id: Restrict to a single job
            limit: Maximum matches to return (default from config)
            filters: Optional job filters

        Returns:
            ComputeMatchesResult; no active jobs is a successful empty result

        Raises:
            CandidateNotFoundException: If the candidate does not exist
            InvalidRequestException: If limit is below 1
        """
        limit = self.config.default_job_limit if limit is None else limit
        if limit < 1:
            raise InvalidRequestException(f"limit must be at least 1, got {limit}")

        candidate = self.load_candidate(candidate_id)
        jobs = self.load_jobs(job_id, filters)

        result = ComputeMatchesResult(
            candidate_id=candidate_id,
            candidate_name=candidate.full_name,
            total_jobs_analyzed=len(jobs)
        )

        if not jobs:
            logger.info(f"No active jobs found for candidate {candidate_id} (filters: {filters})")
            return result

        logger.info(f"Calculating matches for candidate {candidate_id} against {len(jobs)} jobs")

        result.matches, result.failed = self.match_candidate(candidate, jobs, limit, parallel=True)
        result.cache_failures = self.persist_matches(candidate_id, result.matches)

        logger.info(
            f"Returning top {len(result.matches)} matches for candidate {candidate_id} "
            f"({result.failed} failed, {result.cache_failures} cache write failures)"
        )
        return result

    def get_cached_matches(self, candidate_id: str, limit: Optional[int] = None) -> List[MatchScore]:
        """Last known matches for a candidate, best first.

        The cache is a best-effort hint; call compute_matches for current scores.
        """
        limit = self.config.default_job_limit if limit is None else limit
        if limit < 1:
            raise InvalidRequestException(f"limit must be at least 1, got {limit}")

        if self.uow.profiles.get_profile(candidate_id) is None:
            raise CandidateNotFoundException(f"Candidate {candidate_id} not found")

        rows = self.uow.matches.get_cached_matches(candidate_id, limit)
        return [match_from_orm(row, job) for row, job in rows]
