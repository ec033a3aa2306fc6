#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ScoreBreakdownModel(BaseModel):
    """Explanation of how a match score was reached."""
    matched_hard_skills: List[str] = Field(default_factory=list)
    missing_mandatory_hard_skills: List[str] = Field(default_factory=list)
    matched_soft_skills: List[str] = Field(default_factory=list)
    missing_mandatory_soft_skills: List[str] = Field(default_factory=list)
    matched_preferred_skills: List[str] = Field(default_factory=list)
    experience_gap: int = 0
    penalties_applied: List[str] = Field(default_factory=list)
    bonuses_applied: List[str] = Field(default_factory=list)


class ComponentScores(BaseModel):
    """Per-component scores shared by job and candidate matches."""
    match_score: float = Field(ge=0, le=100)
    hard_skills_score: float = Field(ge=0)
    soft_skills_score: float = Field(ge=0)
    experience_score: float = Field(ge=0)
    communication_score: float
    role_alignment_score: float = Field(ge=0)
    score_breakdown: ScoreBreakdownModel


class JobMatchItem(ComponentScores):
    """A job ranked for a candidate."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "job_id": "job-42",
                "candidate_id": "cand-7",
                "job_title": "Senior Python Developer",
                "company": "TechCorp",
                "location": "Remote",
                "match_score": 81.5,
                "hard_skills_score": 90.0,
                "soft_skills_score": 70.0,
                "experience_score": 84.0,
                "communication_score": 75.0,
                "role_alignment_score": 80.0,
                "score_breakdown": {
                    "matched_hard_skills": ["python", "sql"],
                    "missing_mandatory_hard_skills": [],
                    "matched_soft_skills": ["teamwork"],
                    "missing_mandatory_soft_skills": [],
                    "matched_preferred_skills": ["docker"],
                    "experience_gap": 0,
                    "penalties_applied": [],
                    "bonuses_applied": ["1 preferred skills matched"]
                }
            }
        }
    )

    job_id: str
    candidate_id: str
    job_title: str = ""
    company: str = ""
    location: str = ""


class ComputeMatchesResponse(BaseModel):
    """Response for ranking jobs for a candidate."""
    success: bool = True
    candidate_id: str
    candidate_name: str
    total_jobs_analyzed: int
    count: int
    failed: int = 0
    matches: List[JobMatchItem]


class CachedMatchesResponse(BaseModel):
    """Last known matches for a candidate."""
    success: bool = True
    candidate_id: str
    count: int
    matches: List[JobMatchItem]


class CandidateMatchItem(ComponentScores):
    """A candidate ranked for a job."""
    candidate_id: str
    full_name: str = ""
    email: str = ""
    location: Optional[str] = None
    designation: Optional[str] = None
    years_of_experience: int = 0
    avatar_url: Optional[str] = None
    overall_candidate_score: Optional[float] = None


class RankCandidatesResponse(BaseModel):
    """Response for ranking candidates for a job."""
    success: bool = True
    job_id: str
    job_title: str
    min_score_threshold: int
    total_analyzed: int
    total_qualified: int
    failed: int = 0
    count: int
    candidates: List[CandidateMatchItem]


class SkillMatchItem(BaseModel):
    """A candidate ranked by plain skill overlap."""
    candidate_id: str
    full_name: Optional[str] = None
    location: Optional[str] = None
    match_score: int = Field(ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list)


class SkillMatchesResponse(BaseModel):
    """Response for the quick skill-overlap ranking."""
    success: bool = True
    job_id: str
    count: int
    candidates: List[SkillMatchItem]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
