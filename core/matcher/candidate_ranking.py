#!/usr/bin/env python3
"""
Candidate Ranking Service - Rank the candidate pool for one job.

For every candidate the candidate -> jobs matching core runs in-process,
restricted to the one job with a limit of 1. Passes fan out across a bounded
worker pool; a candidate whose pass fails is skipped and only counted in
total_analyzed. Candidates below min_score are dropped, the rest are sorted
and truncated.

Ordering: match_score descending, ties broken by candidate_id ascending.
"""

from typing import List, Optional, Tuple
import logging

from core.config_loader import MatchingConfig
from core.exceptions import (
    InvalidRequestException, JobAccessDeniedException, JobNotFoundException
)
from core.matcher.dto import (
    RankCandidatesResult, RankedCandidate, SkillOverlapMatch, candidate_from_orm, job_from_orm
)
from core.matcher.job_matches import JobMatchService
from core.matcher.pool import run_bounded
from core.scorer import CandidateProfile, JobPosting, MatchScore

logger = logging.getLogger(__name__)


def sort_ranked_candidates(candidates: List[RankedCandidate]) -> List[RankedCandidate]:
    """Best match first; equal scores ordered by candidate id."""
    return sorted(candidates, key=lambda c: (-c.match_score, c.candidate_id))


class CandidateRankingService:
    """
    Service for ranking candidates against a single job.
    """

    def __init__(
        self,
        uow,
        job_matches: Optional[JobMatchService] = None,
        config: Optional[MatchingConfig] = None
    ):
        self.uow = uow
        self.config = config or (job_matches.config if job_matches else MatchingConfig())
        self.job_matches = job_matches or JobMatchService(uow, config=self.config)

    def _get_job(self, job_id: str):
        job = self.uow.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundException(f"Job {job_id} not found")
        return job

    def load_candidate_pool(self) -> List[CandidateProfile]:
        """All candidate profiles with their skills, fetched in three queries."""
        profiles = self.uow.profiles.get_candidate_profiles()
        candidate_ids = [p.user_id for p in profiles]

        hard_skills = self.uow.profiles.get_hard_skills_for_candidates(candidate_ids)
        soft_skills = self.uow.profiles.get_soft_skills_for_candidates(candidate_ids)

        return [
            candidate_from_orm(p, hard_skills.get(p.user_id, []), soft_skills.get(p.user_id, []))
            for p in profiles
        ]

    def _match_one(self, job: JobPosting, candidate: CandidateProfile) -> Optional[MatchScore]:
        matches, failed = self.job_matches.match_candidate(candidate, [job], limit=1)
        if failed:
            raise RuntimeError(f"scoring failed for job {job.job_id}")
        return matches[0] if matches else None

    def rank_candidates(
        self,
        job_id: str,
        employer_id: Optional[str],
        limit: Optional[int] = None,
        min_score: Optional[int] = None
    ) -> RankCandidatesResult:
        """
        Rank all candidates for a job owned by the requesting employer.

        Args:
            job_id: Job to rank candidates for
            employer_id: Requesting employer; must own the job
            limit: Maximum candidates to return (default from config)
            min_score: Minimum match score to qualify (default from config)

        Returns:
            RankCandidatesResult with the qualified, sorted, truncated list

        Raises:
            JobNotFoundException: If the job does not exist
            JobAccessDeniedException: If the job belongs to another employer
            InvalidRequestException: If limit or min_score is out of range
        """
        limit = self.config.default_candidate_limit if limit is None else limit
        min_score = self.config.default_min_score if min_score is None else min_score
        if limit < 1:
            raise InvalidRequestException(f"limit must be at least 1, got {limit}")
        if not 0 <= min_score <= 100:
            raise InvalidRequestException(f"min_score must be between 0 and 100, got {min_score}")

        job_row = self._get_job(job_id)
        if job_row.employer_id != employer_id:
            raise JobAccessDeniedException(f"Job {job_id} does not belong to employer {employer_id}")

        job = job_from_orm(job_row)
        result = RankCandidatesResult(
            job_id=job_id,
            job_title=job.title,
            min_score_threshold=min_score
        )

        candidates = self.load_candidate_pool()
        result.total_analyzed = len(candidates)
        if not candidates:
            logger.info(f"No candidates found for job {job_id}")
            return result

        if job.status != 'active':
            logger.info(f"Job {job_id} is {job.status}; no candidate can match it")
            return result

        logger.info(f"Calculating matches for {len(candidates)} candidates against job {job_id}")

        outcome = run_bounded(
            lambda candidate: self._match_one(job, candidate),
            candidates,
            max_workers=self.config.max_workers,
            timeout=self.config.timeout_seconds,
            describe=lambda candidate: f"candidate {candidate.candidate_id}"
        )
        result.failed = outcome.failed + outcome.timed_out

        scored: List[Tuple[CandidateProfile, MatchScore]] = [
            (candidate, match) for candidate, match in outcome.completed if match is not None
        ]

        for candidate, match in scored:
            self.job_matches.persist_matches(candidate.candidate_id, [match])

        qualified = [
            RankedCandidate(summary=candidate.summary(), match=match)
            for candidate, match in scored
            if match.match_score >= min_score
        ]
        result.total_qualified = len(qualified)
        result.candidates = sort_ranked_candidates(qualified)[:limit]

        logger.info(
            f"Returning top {len(result.candidates)} candidates from {result.total_analyzed} analyzed "
            f"({result.total_qualified} qualified, {result.failed} failed)"
        )
        return result

    def quick_match_candidates(self, job_id: str, limit: int = 10) -> List[SkillOverlapMatch]:
        """
        Lightweight ranking by overlap with the job's flat skill list.

        Score is the share of the job's skills covered by the candidate's hard
        skill names, as a whole percentage capped at 100. Nothing is cached.

        Raises:
            JobNotFoundException: If the job does not exist
        """
        if limit < 1:
            raise InvalidRequestException(f"limit must be at least 1, got {limit}")

        job = job_from_orm(self._get_job(job_id))
        job_skills = [s.lower() for s in job.skills]
        matcher = self.job_matches.scorer.skill_matcher

        results = []
        for candidate in self.load_candidate_pool():
            names = [s.skill_name.lower() for s in candidate.hard_skills]
            matching = [
                name for name in names
                if any(matcher.matches(name, job_skill) for job_skill in job_skills)
            ]
            score = min(100, round(len(matching) / max(len(job_skills), 1) * 100))
            results.append(SkillOverlapMatch(
                candidate_id=candidate.candidate_id,
                full_name=candidate.full_name,
                location=candidate.location,
                match_score=score,
                matching_skills=matching
            ))

        results.sort(key=lambda m: (-m.match_score, m.candidate_id))
        return results[:limit]
