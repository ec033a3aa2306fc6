"""Matcher Module - Candidate/job matching orchestration with a best-effort score cache."""
from core.matcher.dto import (
    JobFilters, ComputeMatchesResult, RankedCandidate, RankCandidatesResult, SkillOverlapMatch
)
from core.matcher.job_matches import JobMatchService
from core.matcher.candidate_ranking import CandidateRankingService
from core.matcher.pool import BatchOutcome, run_bounded, run_sequential

__all__ = [
    'JobMatchService', 'CandidateRankingService',
    'JobFilters', 'ComputeMatchesResult', 'RankedCandidate', 'RankCandidatesResult',
    'SkillOverlapMatch', 'BatchOutcome', 'run_bounded', 'run_sequential'
]
