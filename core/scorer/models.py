#!/usr/bin/env python3
"""
Scoring Models - Data structures consumed and produced by the scorer.

Inputs (CandidateProfile, JobPosting and their skills) are plain, immutable
snapshots built from ORM rows while the session is open, so they can be
handed to worker threads safely. MatchScore is created fresh on every call.
"""

from typing import List, Dict, Any, Optional, Tuple
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class HardSkill:
    skill_name: str
    proficiency_level: Optional[str] = None
    years_experience: float = 0.0


@dataclass(frozen=True)
class SoftSkill:
    skill_name: str
    proficiency_level: Optional[str] = None


@dataclass(frozen=True)
class SkillRequirement:
    """A weighted skill a job asks for."""
    skill: str
    weight: float = 1.0
    mandatory: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SkillRequirement':
        # Unset or zero weight counts as 1
        weight = data.get('weight') or 1
        return cls(
            skill=str(data.get('skill') or ''),
            weight=float(weight),
            mandatory=bool(data.get('mandatory', False))
        )


@dataclass(frozen=True)
class CandidateProfile:
    candidate_id: str
    full_name: str = ""
    email: str = ""
    years_of_experience: int = 0
    number_of_companies: int = 0
    projects_handled: int = 0
    desired_role: str = ""
    preferred_domain: str = ""

    # Produced by the external video evaluation pipeline, 0-100
    knowledge_score: float = 0.0
    communication_score: float = 0.0
    behavioral_score: float = 0.0

    hard_skills: Tuple[HardSkill, ...] = ()
    soft_skills: Tuple[SoftSkill, ...] = ()

    # Display-only summary fields
    location: Optional[str] = None
    designation: Optional[str] = None
    avatar_url: Optional[str] = None
    overall_candidate_score: Optional[float] = None

    def summary(self) -> Dict[str, Any]:
        return {
            'candidate_id': self.candidate_id,
            'full_name': self.full_name,
            'email': self.email,
            'location': self.location,
            'designation': self.designation,
            'years_of_experience': self.years_of_experience,
            'avatar_url': self.avatar_url,
            'overall_candidate_score': self.overall_candidate_score,
        }


@dataclass(frozen=True)
class JobPosting:
    job_id: str
    title: str
    company: str = ""
    location: str = ""
    description: str = ""
    minimum_years_experience: int = 0

    # Legacy flat skill list, used only when required_hard_skills is empty
    skills: Tuple[str, ...] = ()
    required_hard_skills: Tuple[SkillRequirement, ...] = ()
    required_soft_skills: Tuple[SkillRequirement, ...] = ()
    # Bonus-only, never mandatory
    preferred_skills: Tuple[str, ...] = ()

    employer_id: Optional[str] = None
    experience_level: Optional[str] = None
    job_category: Optional[str] = None
    status: str = "active"


@dataclass
class ScoreBreakdown:
    """Diagnostic record explaining which sub-factors drove a match score."""
    matched_hard_skills: List[str] = field(default_factory=list)
    missing_mandatory_hard_skills: List[str] = field(default_factory=list)
    matched_soft_skills: List[str] = field(default_factory=list)
    missing_mandatory_soft_skills: List[str] = field(default_factory=list)
    matched_preferred_skills: List[str] = field(default_factory=list)
    experience_gap: int = 0
    penalties_applied: List[str] = field(default_factory=list)
    bonuses_applied: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ScoreBreakdown':
        data = data or {}
        return cls(
            matched_hard_skills=list(data.get('matched_hard_skills') or []),
            missing_mandatory_hard_skills=list(data.get('missing_mandatory_hard_skills') or []),
            matched_soft_skills=list(data.get('matched_soft_skills') or []),
            missing_mandatory_soft_skills=list(data.get('missing_mandatory_soft_skills') or []),
            matched_preferred_skills=list(data.get('matched_preferred_skills') or []),
            experience_gap=int(data.get('experience_gap') or 0),
            penalties_applied=list(data.get('penalties_applied') or []),
            bonuses_applied=list(data.get('bonuses_applied') or []),
        )


@dataclass
class MatchScore:
    """Complete scored match between one candidate and one job."""
    job_id: str
    candidate_id: str
    match_score: float = 0.0

    hard_skills_score: float = 0.0
    soft_skills_score: float = 0.0
    experience_score: float = 0.0
    communication_score: float = 0.0
    role_alignment_score: float = 0.0

    score_breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    # Display fields copied from the job
    job_title: str = ""
    company: str = ""
    location: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
