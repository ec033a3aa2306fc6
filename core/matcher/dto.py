"""Data Transfer Objects for the matching orchestrators.

ORM rows are converted to the scorer's immutable snapshots while the
database session is still active, so scoring can run on worker threads
and after the session is closed.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from core.scorer.models import (
    CandidateProfile, HardSkill, JobPosting, MatchScore, ScoreBreakdown, SkillRequirement, SoftSkill
)


@dataclass(frozen=True)
class JobFilters:
    """Optional job filters for the candidate -> jobs search."""
    experience_level: Optional[str] = None
    location: Optional[str] = None  # case-insensitive substring
    job_category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['JobFilters']:
        if not data:
            return None
        return cls(
            experience_level=data.get('experience_level') or None,
            location=data.get('location') or None,
            job_category=data.get('job_category') or None,
        )


@dataclass
class ComputeMatchesResult:
    """Jobs ranked for one candidate."""
    candidate_id: str
    candidate_name: str
    matches: List[MatchScore] = field(default_factory=list)
    total_jobs_analyzed: int = 0
    failed: int = 0
    cache_failures: int = 0


@dataclass
class RankedCandidate:
    """Candidate summary combined with the candidate's match for one job."""
    summary: Dict[str, Any]
    match: MatchScore

    @property
    def candidate_id(self) -> str:
        return self.match.candidate_id

    @property
    def match_score(self) -> float:
        return self.match.match_score

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.summary)
        data.update({
            'match_score': self.match.match_score,
            'hard_skills_score': self.match.hard_skills_score,
            'soft_skills_score': self.match.soft_skills_score,
            'experience_score': self.match.experience_score,
            'communication_score': self.match.communication_score,
            'role_alignment_score': self.match.role_alignment_score,
            'score_breakdown': self.match.score_breakdown.to_dict(),
        })
        return data


@dataclass
class RankCandidatesResult:
    """Candidates ranked for one job."""
    job_id: str
    job_title: str
    min_score_threshold: int
    candidates: List[RankedCandidate] = field(default_factory=list)
    total_analyzed: int = 0
    total_qualified: int = 0
    failed: int = 0


@dataclass
class SkillOverlapMatch:
    """Result of the lightweight legacy skill-overlap ranking."""
    candidate_id: str
    full_name: Optional[str]
    location: Optional[str]
    match_score: int
    matching_skills: List[str] = field(default_factory=list)


def _as_int(value: Any) -> int:
    return int(value or 0)


def _as_float(value: Any) -> float:
    return float(value or 0.0)


def candidate_from_orm(profile, hard_skills: Iterable, soft_skills: Iterable) -> CandidateProfile:
    """Build a CandidateProfile snapshot from a Profile row and its skill rows."""
    return CandidateProfile(
        candidate_id=profile.user_id,
        full_name=profile.full_name or '',
        email=profile.email or '',
        years_of_experience=_as_int(profile.years_of_experience),
        number_of_companies=_as_int(profile.number_of_companies),
        projects_handled=_as_int(profile.projects_handled),
        desired_role=profile.desired_role or '',
        preferred_domain=profile.preferred_domain or '',
        knowledge_score=_as_float(profile.knowledge_score),
        communication_score=_as_float(profile.communication_score),
        behavioral_score=_as_float(profile.behavioral_score),
        hard_skills=tuple(
            HardSkill(
                skill_name=s.skill_name,
                proficiency_level=s.proficiency_level,
                years_experience=_as_float(s.years_experience),
            )
            for s in hard_skills
        ),
        soft_skills=tuple(
            SoftSkill(skill_name=s.skill_name, proficiency_level=s.proficiency_level)
            for s in soft_skills
        ),
        location=profile.location,
        designation=profile.designation,
        avatar_url=profile.avatar_url,
        overall_candidate_score=profile.overall_candidate_score,
    )


def job_from_orm(job) -> JobPosting:
    """Build a JobPosting snapshot from a Job row."""
    return JobPosting(
        job_id=job.id,
        title=job.title or '',
        company=job.company or '',
        location=job.location or '',
        description=job.description or '',
        minimum_years_experience=_as_int(job.minimum_years_experience),
        skills=tuple(s for s in (job.skills or []) if s),
        required_hard_skills=tuple(
            SkillRequirement.from_dict(r) for r in (job.required_hard_skills or [])
        ),
        required_soft_skills=tuple(
            SkillRequirement.from_dict(r) for r in (job.required_soft_skills or [])
        ),
        preferred_skills=tuple(s for s in (job.preferred_skills or []) if s),
        employer_id=job.employer_id,
        experience_level=job.experience_level,
        job_category=job.job_category,
        status=job.status or 'active',
    )


def match_from_orm(row, job=None) -> MatchScore:
    """Rebuild a MatchScore from a cached JobMatch row."""
    return MatchScore(
        job_id=row.job_id,
        candidate_id=row.candidate_id,
        match_score=_as_float(row.match_score),
        hard_skills_score=_as_float(row.hard_skills_score),
        soft_skills_score=_as_float(row.soft_skills_score),
        experience_score=_as_float(row.experience_score),
        communication_score=_as_float(row.communication_score),
        role_alignment_score=_as_float(row.role_alignment_score),
        score_breakdown=ScoreBreakdown.from_dict(row.score_breakdown),
        job_title=(job.title if job is not None else '') or '',
        company=(job.company if job is not None else '') or '',
        location=(job.location if job is not None else '') or '',
    )
